"""
Teacher (guru) management service.
"""
from typing import List
from sqlalchemy.orm import Session

from database.models import Guru
from schemas.guru import GuruCreate, GuruUpdate
from core.exceptions import NotFoundError
from core.utils import apply_updates
from core.logger import logger


class GuruService:
    """CRUD operations for teachers."""

    @staticmethod
    def get_guru_or_404(db: Session, guru_id: int) -> Guru:
        guru = db.get(Guru, guru_id)
        if guru is None:
            raise NotFoundError("Teacher", guru_id)
        return guru

    @staticmethod
    def list_guru(db: Session) -> List[Guru]:
        return db.query(Guru).order_by(Guru.id.asc()).all()

    @staticmethod
    def create_guru(db: Session, data: GuruCreate) -> Guru:
        guru = Guru(nomor=data.nomor, nama_guru=data.nama_guru, nip=data.nip)
        db.add(guru)
        db.commit()
        db.refresh(guru)
        logger.info(f"Created guru {guru.id} ({guru.nama_guru})")
        return guru

    @staticmethod
    def update_guru(db: Session, guru_id: int, data: GuruUpdate) -> Guru:
        guru = GuruService.get_guru_or_404(db, guru_id)
        apply_updates(guru, data.model_dump(exclude_unset=True))
        db.commit()
        db.refresh(guru)
        logger.info(f"Updated guru {guru_id}")
        return guru

    @staticmethod
    def delete_guru(db: Session, guru_id: int) -> None:
        """Delete a teacher and the violation records they authored. Absent ids are ignored."""
        guru = db.get(Guru, guru_id)
        if guru is None:
            return
        db.delete(guru)
        db.commit()
        logger.info(f"Deleted guru {guru_id}")
