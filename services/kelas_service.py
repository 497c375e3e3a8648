"""
Class (kelas) management service.
"""
from typing import List
from sqlalchemy.orm import Session

from database.models import Kelas
from schemas.kelas import KelasCreate, KelasUpdate
from core.exceptions import NotFoundError
from core.utils import apply_updates
from core.logger import logger


class KelasService:
    """CRUD operations for classes."""

    @staticmethod
    def get_kelas_or_404(db: Session, kelas_id: int) -> Kelas:
        kelas = db.get(Kelas, kelas_id)
        if kelas is None:
            raise NotFoundError("Class", kelas_id)
        return kelas

    @staticmethod
    def list_kelas(db: Session) -> List[Kelas]:
        return db.query(Kelas).order_by(Kelas.id.asc()).all()

    @staticmethod
    def create_kelas(db: Session, data: KelasCreate) -> Kelas:
        kelas = Kelas(
            nomor=data.nomor,
            rombel=data.rombel,
            nama_kelas=data.nama_kelas,
        )
        db.add(kelas)
        db.commit()
        db.refresh(kelas)
        logger.info(f"Created kelas {kelas.id} ({kelas.nama_kelas})")
        return kelas

    @staticmethod
    def update_kelas(db: Session, kelas_id: int, data: KelasUpdate) -> Kelas:
        kelas = KelasService.get_kelas_or_404(db, kelas_id)
        apply_updates(kelas, data.model_dump(exclude_unset=True))
        db.commit()
        db.refresh(kelas)
        logger.info(f"Updated kelas {kelas_id}")
        return kelas

    @staticmethod
    def delete_kelas(db: Session, kelas_id: int) -> None:
        """Delete a class with its students and their violation records. Absent ids are ignored."""
        kelas = db.get(Kelas, kelas_id)
        if kelas is None:
            return
        db.delete(kelas)
        db.commit()
        logger.info(f"Deleted kelas {kelas_id}")
