"""
Institution settings (pengaturan instansi) request/response models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr


class PengaturanInstansiUpdate(BaseModel):
    """Partial settings update; creates the settings row when none exists."""
    nama_instansi: Optional[str] = None
    alamat: Optional[str] = None
    nama_kepala_sekolah: Optional[str] = None
    website: Optional[str] = None
    email: Optional[EmailStr] = None
    logo_sekolah: Optional[str] = None


class PengaturanInstansiResponse(BaseModel):
    """Institution settings response model."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nama_instansi: str
    alamat: str
    nama_kepala_sekolah: str
    website: Optional[str] = None
    email: Optional[str] = None
    logo_sekolah: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
