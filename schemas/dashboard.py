"""
Dashboard filter and summary models.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel

from database.models import KategoriPelanggaran, Rombel


class DashboardFilter(BaseModel):
    """Optional filters; all supplied filters combine with AND."""
    tanggal_awal: Optional[date] = None  # Inclusive start date
    tanggal_akhir: Optional[date] = None  # Inclusive end date
    kelas_id: Optional[int] = None
    guru_id: Optional[int] = None
    kategori: Optional[KategoriPelanggaran] = None


class CategoryTotal(BaseModel):
    """Violation count and point sum for one category."""
    kategori: KategoriPelanggaran
    total_pelanggaran: int
    total_poin: int


class ClassTotal(BaseModel):
    """Violation count and point sum for one class."""
    kelas_id: int
    nama_kelas: str
    rombel: Rombel
    total_pelanggaran: int
    total_poin: int


class DashboardSummary(BaseModel):
    """Dashboard summary response."""
    category_totals: List[CategoryTotal]
    class_totals: List[ClassTotal]
    total_pelanggaran: int
    total_poin: int
