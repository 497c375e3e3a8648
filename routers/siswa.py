"""
Student (siswa) APIs, including name/NISN search.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List

from database.connection import get_db_session
from schemas.siswa import SiswaCreate, SiswaUpdate, SiswaResponse
from services.siswa_service import SiswaService


router = APIRouter(prefix="/api/siswa", tags=["siswa"])


@router.get("", response_model=List[SiswaResponse])
def list_siswa(db: Session = Depends(get_db_session)):
    """List all students."""
    return SiswaService.list_siswa(db)


@router.get("/search", response_model=List[SiswaResponse])
def search_siswa(
    query: str = Query("", description="Substring of the student name or NISN"),
    db: Session = Depends(get_db_session)
):
    """
    Search students by name or NISN (case-insensitive substring).
    An empty query returns an empty list.
    """
    return SiswaService.search_siswa(db, query)


@router.post("", response_model=SiswaResponse, status_code=status.HTTP_201_CREATED)
def create_siswa(request: SiswaCreate, db: Session = Depends(get_db_session)):
    """Create a student in an existing class."""
    return SiswaService.create_siswa(db, request)


@router.put("/{siswa_id}", response_model=SiswaResponse)
def update_siswa(siswa_id: int, request: SiswaUpdate, db: Session = Depends(get_db_session)):
    """Update a student. Only supplied fields change."""
    return SiswaService.update_siswa(db, siswa_id, request)


@router.delete("/{siswa_id}")
def delete_siswa(siswa_id: int, db: Session = Depends(get_db_session)):
    """Delete a student and their violation records."""
    SiswaService.delete_siswa(db, siswa_id)
    return {"status": "success", "message": f"Siswa {siswa_id} deleted"}
