"""
Institution settings (pengaturan instansi) service.
The settings table holds at most one row.
"""
from typing import Optional
from sqlalchemy.orm import Session

from database.models import PengaturanInstansi
from schemas.pengaturan import PengaturanInstansiUpdate
from core.utils import apply_updates
from core.logger import logger
import config

NULLABLE_FIELDS = ("website", "email", "logo_sekolah")


class PengaturanService:
    """Get-or-create access to the settings singleton."""

    @staticmethod
    def get_pengaturan(db: Session) -> Optional[PengaturanInstansi]:
        """Return the settings row, or None when it was never written."""
        return db.query(PengaturanInstansi).order_by(PengaturanInstansi.id.asc()).first()

    @staticmethod
    def get_or_create_pengaturan(db: Session, data: PengaturanInstansiUpdate) -> PengaturanInstansi:
        """
        Return the settings row, creating it from `data` when absent.
        Required fields missing from `data` fall back to configured defaults.
        """
        pengaturan = PengaturanService.get_pengaturan(db)
        if pengaturan is not None:
            return pengaturan

        pengaturan = PengaturanInstansi(
            nama_instansi=data.nama_instansi or config.DEFAULT_NAMA_INSTANSI,
            alamat=data.alamat or config.DEFAULT_ALAMAT,
            nama_kepala_sekolah=data.nama_kepala_sekolah or config.DEFAULT_NAMA_KEPALA_SEKOLAH,
            website=data.website or None,
            email=data.email or None,
            logo_sekolah=data.logo_sekolah or None,
        )
        db.add(pengaturan)
        db.flush()
        logger.info("Created institution settings")
        return pengaturan

    @staticmethod
    def update_pengaturan(db: Session, data: PengaturanInstansiUpdate) -> PengaturanInstansi:
        existing = PengaturanService.get_pengaturan(db)
        if existing is None:
            pengaturan = PengaturanService.get_or_create_pengaturan(db, data)
        else:
            pengaturan = apply_updates(existing, data.model_dump(exclude_unset=True), nullable=NULLABLE_FIELDS)
            logger.info("Updated institution settings")
        db.commit()
        db.refresh(pengaturan)
        return pengaturan
