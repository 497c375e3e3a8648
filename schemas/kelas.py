"""
Class (kelas) request/response models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from database.models import Rombel


class KelasCreate(BaseModel):
    """Create class request."""
    nomor: int = Field(..., gt=0)
    rombel: Rombel
    nama_kelas: str = Field(..., min_length=1)


class KelasUpdate(BaseModel):
    """Update class request. Only supplied fields change."""
    nomor: Optional[int] = Field(None, gt=0)
    rombel: Optional[Rombel] = None
    nama_kelas: Optional[str] = Field(None, min_length=1)


class KelasResponse(BaseModel):
    """Class response model."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nomor: int
    rombel: Rombel
    nama_kelas: str
    created_at: datetime
    updated_at: Optional[datetime] = None
