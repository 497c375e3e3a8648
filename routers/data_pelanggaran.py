"""
Violation type catalogue (data pelanggaran) APIs.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from database.connection import get_db_session
from database.models import KategoriPelanggaran
from schemas.data_pelanggaran import DataPelanggaranCreate, DataPelanggaranUpdate, DataPelanggaranResponse
from services.data_pelanggaran_service import DataPelanggaranService


router = APIRouter(prefix="/api/data-pelanggaran", tags=["data-pelanggaran"])


@router.get("", response_model=List[DataPelanggaranResponse])
def list_data_pelanggaran(
    kategori: Optional[KategoriPelanggaran] = Query(None),
    db: Session = Depends(get_db_session)
):
    """List violation types, optionally for one category."""
    return DataPelanggaranService.list_data_pelanggaran(db, kategori=kategori)


@router.post("", response_model=DataPelanggaranResponse, status_code=status.HTTP_201_CREATED)
def create_data_pelanggaran(request: DataPelanggaranCreate, db: Session = Depends(get_db_session)):
    """Create a violation type."""
    return DataPelanggaranService.create_data_pelanggaran(db, request)


@router.put("/{data_pelanggaran_id}", response_model=DataPelanggaranResponse)
def update_data_pelanggaran(
    data_pelanggaran_id: int,
    request: DataPelanggaranUpdate,
    db: Session = Depends(get_db_session)
):
    """Update a violation type. Only supplied fields change."""
    return DataPelanggaranService.update_data_pelanggaran(db, data_pelanggaran_id, request)


@router.delete("/{data_pelanggaran_id}")
def delete_data_pelanggaran(data_pelanggaran_id: int, db: Session = Depends(get_db_session)):
    """Delete a violation type and every record of it."""
    DataPelanggaranService.delete_data_pelanggaran(db, data_pelanggaran_id)
    return {"status": "success", "message": f"Data pelanggaran {data_pelanggaran_id} deleted"}
