"""
User account request/response models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from database.models import UserRole


class UserCreate(BaseModel):
    """Create user request."""
    username: str = Field(..., min_length=3, max_length=50)
    password: str
    nama: str
    role: UserRole
    is_active: bool = True


class UserUpdate(BaseModel):
    """Update user request. A supplied password is re-hashed."""
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    password: Optional[str] = None
    nama: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


class UserResponse(BaseModel):
    """User response model. Never carries the password or its hash."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    nama: str
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class LoginRequest(BaseModel):
    """Login request."""
    username: str
    password: str
