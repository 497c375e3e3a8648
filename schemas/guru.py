"""
Teacher (guru) request/response models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class GuruCreate(BaseModel):
    """Create teacher request."""
    nomor: int = Field(..., gt=0)
    nama_guru: str = Field(..., min_length=1)
    nip: str = Field(..., max_length=20)


class GuruUpdate(BaseModel):
    """Update teacher request. Only supplied fields change."""
    nomor: Optional[int] = Field(None, gt=0)
    nama_guru: Optional[str] = Field(None, min_length=1)
    nip: Optional[str] = Field(None, max_length=20)


class GuruResponse(BaseModel):
    """Teacher response model."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nomor: int
    nama_guru: str
    nip: str
    created_at: datetime
    updated_at: Optional[datetime] = None
