"""
Student (siswa) request/response models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SiswaCreate(BaseModel):
    """Create student request."""
    nomor: int = Field(..., gt=0)
    nama_siswa: str = Field(..., min_length=1)
    nisn: str = Field(..., max_length=20)
    kelas_id: int


class SiswaUpdate(BaseModel):
    """Update student request. Only supplied fields change."""
    nomor: Optional[int] = Field(None, gt=0)
    nama_siswa: Optional[str] = Field(None, min_length=1)
    nisn: Optional[str] = Field(None, max_length=20)
    kelas_id: Optional[int] = None


class SiswaResponse(BaseModel):
    """Student response model."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nomor: int
    nama_siswa: str
    nisn: str
    kelas_id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
