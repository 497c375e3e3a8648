"""
Violation record (pelanggaran siswa) request/response models.
"""
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class PelanggaranSiswaCreate(BaseModel):
    """Record a violation request."""
    tanggal: date
    siswa_id: int
    data_pelanggaran_id: int
    guru_id: int
    bukti_file: Optional[str] = None  # Evidence file reference


class PelanggaranSiswaUpdate(BaseModel):
    """
    Update violation record request.
    Omitted fields keep their value; bukti_file may be set to null explicitly.
    """
    tanggal: Optional[date] = None
    siswa_id: Optional[int] = None
    data_pelanggaran_id: Optional[int] = None
    guru_id: Optional[int] = None
    bukti_file: Optional[str] = None


class PelanggaranSiswaResponse(BaseModel):
    """Violation record response model."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    tanggal: date
    siswa_id: int
    data_pelanggaran_id: int
    guru_id: int
    bukti_file: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
