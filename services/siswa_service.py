"""
Student (siswa) management and search service.
"""
from typing import List
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database.models import Siswa
from schemas.siswa import SiswaCreate, SiswaUpdate
from services.kelas_service import KelasService
from core.exceptions import NotFoundError
from core.utils import apply_updates, escape_like
from core.logger import logger


class SiswaService:
    """CRUD operations and name/NISN search for students."""

    @staticmethod
    def get_siswa_or_404(db: Session, siswa_id: int) -> Siswa:
        siswa = db.get(Siswa, siswa_id)
        if siswa is None:
            raise NotFoundError("Student", siswa_id)
        return siswa

    @staticmethod
    def list_siswa(db: Session) -> List[Siswa]:
        return db.query(Siswa).order_by(Siswa.id.asc()).all()

    @staticmethod
    def list_siswa_by_kelas(db: Session, kelas_id: int) -> List[Siswa]:
        return (
            db.query(Siswa)
            .filter(Siswa.kelas_id == kelas_id)
            .order_by(Siswa.nomor.asc(), Siswa.id.asc())
            .all()
        )

    @staticmethod
    def search_siswa(db: Session, query: str) -> List[Siswa]:
        """
        Case-insensitive substring search over student name and NISN.

        Args:
            db: Database session
            query: Free text; surrounding whitespace is ignored

        Returns:
            Matching students ordered by name. An empty or whitespace-only
            query matches nothing.
        """
        term = (query or "").strip()
        if not term:
            return []

        pattern = f"%{escape_like(term)}%"
        return (
            db.query(Siswa)
            .filter(
                or_(
                    Siswa.nama_siswa.ilike(pattern, escape="\\"),
                    Siswa.nisn.ilike(pattern, escape="\\"),
                )
            )
            .order_by(Siswa.nama_siswa.asc(), Siswa.id.asc())
            .all()
        )

    @staticmethod
    def create_siswa(db: Session, data: SiswaCreate) -> Siswa:
        KelasService.get_kelas_or_404(db, data.kelas_id)

        siswa = Siswa(
            nomor=data.nomor,
            nama_siswa=data.nama_siswa,
            nisn=data.nisn,
            kelas_id=data.kelas_id,
        )
        db.add(siswa)
        db.commit()
        db.refresh(siswa)
        logger.info(f"Created siswa {siswa.id} ({siswa.nama_siswa}) in kelas {siswa.kelas_id}")
        return siswa

    @staticmethod
    def update_siswa(db: Session, siswa_id: int, data: SiswaUpdate) -> Siswa:
        siswa = SiswaService.get_siswa_or_404(db, siswa_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("kelas_id") is not None:
            KelasService.get_kelas_or_404(db, changes["kelas_id"])

        apply_updates(siswa, changes)
        db.commit()
        db.refresh(siswa)
        logger.info(f"Updated siswa {siswa_id}")
        return siswa

    @staticmethod
    def delete_siswa(db: Session, siswa_id: int) -> None:
        """Delete a student and their violation records. Absent ids are ignored."""
        siswa = db.get(Siswa, siswa_id)
        if siswa is None:
            return
        db.delete(siswa)
        db.commit()
        logger.info(f"Deleted siswa {siswa_id}")
