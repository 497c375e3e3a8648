"""
Violation record (pelanggaran siswa) APIs.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from database.connection import get_db_session
from schemas.pelanggaran_siswa import PelanggaranSiswaCreate, PelanggaranSiswaUpdate, PelanggaranSiswaResponse
from services.pelanggaran_siswa_service import PelanggaranSiswaService


router = APIRouter(prefix="/api/pelanggaran-siswa", tags=["pelanggaran-siswa"])


@router.get("", response_model=List[PelanggaranSiswaResponse])
def list_pelanggaran_siswa(db: Session = Depends(get_db_session)):
    """List all violation records."""
    return PelanggaranSiswaService.list_pelanggaran_siswa(db)


@router.post("", response_model=PelanggaranSiswaResponse, status_code=status.HTTP_201_CREATED)
def create_pelanggaran_siswa(request: PelanggaranSiswaCreate, db: Session = Depends(get_db_session)):
    """
    Record a violation.
    Student, violation type and teacher must exist; the 404 names the missing one.
    """
    return PelanggaranSiswaService.create_pelanggaran_siswa(db, request)


@router.put("/{pelanggaran_id}", response_model=PelanggaranSiswaResponse)
def update_pelanggaran_siswa(
    pelanggaran_id: int,
    request: PelanggaranSiswaUpdate,
    db: Session = Depends(get_db_session)
):
    """Update a violation record. Only supplied fields change."""
    return PelanggaranSiswaService.update_pelanggaran_siswa(db, pelanggaran_id, request)


@router.delete("/{pelanggaran_id}")
def delete_pelanggaran_siswa(pelanggaran_id: int, db: Session = Depends(get_db_session)):
    """Delete a violation record."""
    PelanggaranSiswaService.delete_pelanggaran_siswa(db, pelanggaran_id)
    return {"status": "success", "message": f"Pelanggaran {pelanggaran_id} deleted"}
