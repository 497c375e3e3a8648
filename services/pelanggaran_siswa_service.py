"""
Violation record (pelanggaran siswa) service.
"""
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from database.models import PelanggaranSiswa
from schemas.pelanggaran_siswa import PelanggaranSiswaCreate, PelanggaranSiswaUpdate
from services.siswa_service import SiswaService
from services.guru_service import GuruService
from services.data_pelanggaran_service import DataPelanggaranService
from core.exceptions import NotFoundError
from core.utils import apply_updates
from core.logger import logger


class PelanggaranSiswaService:
    """CRUD operations for violation records."""

    @staticmethod
    def _check_references(db: Session, changes: Dict[str, Any]) -> None:
        """
        Verify each supplied foreign key individually, so the error names
        the reference that is missing.
        """
        if changes.get("siswa_id") is not None:
            SiswaService.get_siswa_or_404(db, changes["siswa_id"])
        if changes.get("data_pelanggaran_id") is not None:
            DataPelanggaranService.get_data_pelanggaran_or_404(db, changes["data_pelanggaran_id"])
        if changes.get("guru_id") is not None:
            GuruService.get_guru_or_404(db, changes["guru_id"])

    @staticmethod
    def list_pelanggaran_siswa(db: Session) -> List[PelanggaranSiswa]:
        return db.query(PelanggaranSiswa).order_by(PelanggaranSiswa.id.asc()).all()

    @staticmethod
    def create_pelanggaran_siswa(db: Session, data: PelanggaranSiswaCreate) -> PelanggaranSiswa:
        PelanggaranSiswaService._check_references(db, data.model_dump())

        record = PelanggaranSiswa(
            tanggal=data.tanggal,
            siswa_id=data.siswa_id,
            data_pelanggaran_id=data.data_pelanggaran_id,
            guru_id=data.guru_id,
            bukti_file=data.bukti_file or None,
        )
        db.add(record)
        db.commit()
        db.refresh(record)
        logger.info(
            f"Recorded pelanggaran {record.id}: siswa {record.siswa_id}, "
            f"data pelanggaran {record.data_pelanggaran_id}, guru {record.guru_id}, "
            f"tanggal {record.tanggal.isoformat()}"
        )
        return record

    @staticmethod
    def update_pelanggaran_siswa(
        db: Session,
        pelanggaran_id: int,
        data: PelanggaranSiswaUpdate
    ) -> PelanggaranSiswa:
        record = db.get(PelanggaranSiswa, pelanggaran_id)
        if record is None:
            raise NotFoundError("Violation record", pelanggaran_id)

        changes = data.model_dump(exclude_unset=True)
        PelanggaranSiswaService._check_references(db, changes)

        apply_updates(record, changes, nullable=("bukti_file",))
        db.commit()
        db.refresh(record)
        logger.info(f"Updated pelanggaran {pelanggaran_id}")
        return record

    @staticmethod
    def delete_pelanggaran_siswa(db: Session, pelanggaran_id: int) -> None:
        """Delete a violation record. Absent ids are ignored."""
        record = db.get(PelanggaranSiswa, pelanggaran_id)
        if record is None:
            return
        db.delete(record)
        db.commit()
        logger.info(f"Deleted pelanggaran {pelanggaran_id}")
