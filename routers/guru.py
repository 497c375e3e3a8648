"""
Teacher (guru) APIs.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from database.connection import get_db_session
from schemas.guru import GuruCreate, GuruUpdate, GuruResponse
from services.guru_service import GuruService


router = APIRouter(prefix="/api/guru", tags=["guru"])


@router.get("", response_model=List[GuruResponse])
def list_guru(db: Session = Depends(get_db_session)):
    """List all teachers."""
    return GuruService.list_guru(db)


@router.post("", response_model=GuruResponse, status_code=status.HTTP_201_CREATED)
def create_guru(request: GuruCreate, db: Session = Depends(get_db_session)):
    """Create a teacher."""
    return GuruService.create_guru(db, request)


@router.put("/{guru_id}", response_model=GuruResponse)
def update_guru(guru_id: int, request: GuruUpdate, db: Session = Depends(get_db_session)):
    """Update a teacher. Only supplied fields change."""
    return GuruService.update_guru(db, guru_id, request)


@router.delete("/{guru_id}")
def delete_guru(guru_id: int, db: Session = Depends(get_db_session)):
    """Delete a teacher and the violation records they authored."""
    GuruService.delete_guru(db, guru_id)
    return {"status": "success", "message": f"Guru {guru_id} deleted"}
