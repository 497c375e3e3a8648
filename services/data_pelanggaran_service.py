"""
Violation type catalogue (data pelanggaran) service.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from database.models import DataPelanggaran, KategoriPelanggaran
from schemas.data_pelanggaran import DataPelanggaranCreate, DataPelanggaranUpdate
from core.exceptions import NotFoundError
from core.utils import apply_updates
from core.logger import logger


class DataPelanggaranService:
    """CRUD operations for the violation type catalogue."""

    @staticmethod
    def get_data_pelanggaran_or_404(db: Session, data_pelanggaran_id: int) -> DataPelanggaran:
        data_pelanggaran = db.get(DataPelanggaran, data_pelanggaran_id)
        if data_pelanggaran is None:
            raise NotFoundError("Violation type", data_pelanggaran_id)
        return data_pelanggaran

    @staticmethod
    def list_data_pelanggaran(
        db: Session,
        kategori: Optional[KategoriPelanggaran] = None
    ) -> List[DataPelanggaran]:
        """
        List catalogue entries, optionally narrowed to one category
        (the violation input form picks a category first).
        """
        query = db.query(DataPelanggaran)
        if kategori is not None:
            query = query.filter(DataPelanggaran.kategori == kategori)
        return query.order_by(DataPelanggaran.id.asc()).all()

    @staticmethod
    def create_data_pelanggaran(db: Session, data: DataPelanggaranCreate) -> DataPelanggaran:
        data_pelanggaran = DataPelanggaran(
            kategori=data.kategori,
            jenis_pelanggaran=data.jenis_pelanggaran,
            poin=data.poin,
        )
        db.add(data_pelanggaran)
        db.commit()
        db.refresh(data_pelanggaran)
        logger.info(
            f"Created data pelanggaran {data_pelanggaran.id} "
            f"({data_pelanggaran.kategori.value}, {data_pelanggaran.poin} poin)"
        )
        return data_pelanggaran

    @staticmethod
    def update_data_pelanggaran(
        db: Session,
        data_pelanggaran_id: int,
        data: DataPelanggaranUpdate
    ) -> DataPelanggaran:
        data_pelanggaran = DataPelanggaranService.get_data_pelanggaran_or_404(db, data_pelanggaran_id)
        apply_updates(data_pelanggaran, data.model_dump(exclude_unset=True))
        db.commit()
        db.refresh(data_pelanggaran)
        logger.info(f"Updated data pelanggaran {data_pelanggaran_id}")
        return data_pelanggaran

    @staticmethod
    def delete_data_pelanggaran(db: Session, data_pelanggaran_id: int) -> None:
        """Delete a catalogue entry and every record of it. Absent ids are ignored."""
        data_pelanggaran = db.get(DataPelanggaran, data_pelanggaran_id)
        if data_pelanggaran is None:
            return
        db.delete(data_pelanggaran)
        db.commit()
        logger.info(f"Deleted data pelanggaran {data_pelanggaran_id}")
