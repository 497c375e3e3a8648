"""
Institution settings APIs.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from database.connection import get_db_session
from schemas.pengaturan import PengaturanInstansiUpdate, PengaturanInstansiResponse
from services.pengaturan_service import PengaturanService


router = APIRouter(prefix="/api/pengaturan-instansi", tags=["pengaturan"])


@router.get("", response_model=Optional[PengaturanInstansiResponse])
def get_pengaturan(db: Session = Depends(get_db_session)):
    """Get the institution settings, or null before they are first saved."""
    return PengaturanService.get_pengaturan(db)


@router.put("", response_model=PengaturanInstansiResponse)
def update_pengaturan(request: PengaturanInstansiUpdate, db: Session = Depends(get_db_session)):
    """
    Save the institution settings.
    The first save creates the row, filling missing required fields with defaults.
    """
    return PengaturanService.update_pengaturan(db, request)
