"""
Class (kelas) APIs.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from database.connection import get_db_session
from schemas.kelas import KelasCreate, KelasUpdate, KelasResponse
from schemas.siswa import SiswaResponse
from services.kelas_service import KelasService
from services.siswa_service import SiswaService


router = APIRouter(prefix="/api/kelas", tags=["kelas"])


@router.get("", response_model=List[KelasResponse])
def list_kelas(db: Session = Depends(get_db_session)):
    """List all classes."""
    return KelasService.list_kelas(db)


@router.post("", response_model=KelasResponse, status_code=status.HTTP_201_CREATED)
def create_kelas(request: KelasCreate, db: Session = Depends(get_db_session)):
    """Create a class."""
    return KelasService.create_kelas(db, request)


@router.get("/{kelas_id}/siswa", response_model=List[SiswaResponse])
def list_kelas_siswa(kelas_id: int, db: Session = Depends(get_db_session)):
    """List the students of one class."""
    KelasService.get_kelas_or_404(db, kelas_id)
    return SiswaService.list_siswa_by_kelas(db, kelas_id)


@router.put("/{kelas_id}", response_model=KelasResponse)
def update_kelas(kelas_id: int, request: KelasUpdate, db: Session = Depends(get_db_session)):
    """Update a class. Only supplied fields change."""
    return KelasService.update_kelas(db, kelas_id, request)


@router.delete("/{kelas_id}")
def delete_kelas(kelas_id: int, db: Session = Depends(get_db_session)):
    """Delete a class together with its students and their violation records."""
    KelasService.delete_kelas(db, kelas_id)
    return {"status": "success", "message": f"Kelas {kelas_id} deleted"}
