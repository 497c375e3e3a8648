"""
Dashboard API.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.connection import get_db_session
from schemas.dashboard import DashboardFilter, DashboardSummary
from services.dashboard_service import DashboardService


router = APIRouter(prefix="/api/dashboard", tags=["dashboards"])


@router.get("/summary", response_model=DashboardSummary)
def dashboard_summary(
    filters: DashboardFilter = Depends(),
    db: Session = Depends(get_db_session)
):
    """
    Violation totals by category and by class.

    Query parameters (all optional, combined with AND):
    - tanggal_awal / tanggal_akhir: inclusive date range (YYYY-MM-DD)
    - kelas_id: only students of this class
    - guru_id: only records written by this teacher
    - kategori: only violation types of this category
    """
    return DashboardService.get_summary(db, filters)
