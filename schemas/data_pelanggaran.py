"""
Violation type catalogue (data pelanggaran) request/response models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from database.models import KategoriPelanggaran


class DataPelanggaranCreate(BaseModel):
    """Create violation type request."""
    kategori: KategoriPelanggaran
    jenis_pelanggaran: str = Field(..., min_length=1)
    poin: int = Field(..., gt=0)


class DataPelanggaranUpdate(BaseModel):
    """Update violation type request. Only supplied fields change."""
    kategori: Optional[KategoriPelanggaran] = None
    jenis_pelanggaran: Optional[str] = Field(None, min_length=1)
    poin: Optional[int] = Field(None, gt=0)


class DataPelanggaranResponse(BaseModel):
    """Violation type response model."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    kategori: KategoriPelanggaran
    jenis_pelanggaran: str
    poin: int
    created_at: datetime
    updated_at: Optional[datetime] = None
