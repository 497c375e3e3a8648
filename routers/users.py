"""
User account management APIs.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from database.connection import get_db_session
from schemas.user import UserCreate, UserUpdate, UserResponse
from services.auth_service import AuthService


router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db_session)):
    """List all user accounts."""
    return AuthService.list_users(db)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(request: UserCreate, db: Session = Depends(get_db_session)):
    """
    Create a user account.
    The password is stored hashed; a taken username returns 409.
    """
    return AuthService.create_user(db, request)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, request: UserUpdate, db: Session = Depends(get_db_session)):
    """Update a user account. A supplied password replaces the stored hash."""
    return AuthService.update_user(db, user_id, request)


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db_session)):
    """Delete a user account."""
    AuthService.delete_user(db, user_id)
    return {"status": "success", "message": f"User {user_id} deleted"}
