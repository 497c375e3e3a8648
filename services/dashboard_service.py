"""
Dashboard aggregation: violation counts and point sums grouped by
category and by class, recomputed from the violation records on every call.
"""
from typing import List
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.models import PelanggaranSiswa, DataPelanggaran, Siswa, Kelas
from schemas.dashboard import DashboardFilter, DashboardSummary, CategoryTotal, ClassTotal
from core.logger import logger


class DashboardService:
    """Builds the filtered summary queries behind the dashboard."""

    @staticmethod
    def _conditions(filters: DashboardFilter) -> list:
        """
        Translate the filter into WHERE clauses.
        The class clause references Siswa, so callers must join it when kelas_id is set.
        """
        conditions = []
        if filters.tanggal_awal is not None:
            conditions.append(PelanggaranSiswa.tanggal >= filters.tanggal_awal)
        if filters.tanggal_akhir is not None:
            conditions.append(PelanggaranSiswa.tanggal <= filters.tanggal_akhir)
        if filters.guru_id is not None:
            conditions.append(PelanggaranSiswa.guru_id == filters.guru_id)
        if filters.kategori is not None:
            conditions.append(DataPelanggaran.kategori == filters.kategori)
        if filters.kelas_id is not None:
            conditions.append(Siswa.kelas_id == filters.kelas_id)
        return conditions

    @staticmethod
    def category_totals(db: Session, filters: DashboardFilter) -> List[CategoryTotal]:
        """Count and point sum per category present in the filtered records."""
        total_pelanggaran = func.count(PelanggaranSiswa.id).label("total_pelanggaran")
        total_poin = func.coalesce(func.sum(DataPelanggaran.poin), 0).label("total_poin")

        query = (
            db.query(DataPelanggaran.kategori, total_pelanggaran, total_poin)
            .select_from(PelanggaranSiswa)
            .join(DataPelanggaran, PelanggaranSiswa.data_pelanggaran_id == DataPelanggaran.id)
        )
        if filters.kelas_id is not None:
            query = query.join(Siswa, PelanggaranSiswa.siswa_id == Siswa.id)

        rows = (
            query.filter(*DashboardService._conditions(filters))
            .group_by(DataPelanggaran.kategori)
            .order_by(DataPelanggaran.kategori.asc())
            .all()
        )
        return [
            CategoryTotal(
                kategori=row.kategori,
                total_pelanggaran=int(row.total_pelanggaran or 0),
                total_poin=int(row.total_poin or 0),
            )
            for row in rows
        ]

    @staticmethod
    def class_totals(db: Session, filters: DashboardFilter) -> List[ClassTotal]:
        """Count and point sum per class with at least one filtered record."""
        total_pelanggaran = func.count(PelanggaranSiswa.id).label("total_pelanggaran")
        total_poin = func.coalesce(func.sum(DataPelanggaran.poin), 0).label("total_poin")

        rows = (
            db.query(Kelas.id, Kelas.nama_kelas, Kelas.rombel, total_pelanggaran, total_poin)
            .select_from(PelanggaranSiswa)
            .join(Siswa, PelanggaranSiswa.siswa_id == Siswa.id)
            .join(Kelas, Siswa.kelas_id == Kelas.id)
            .join(DataPelanggaran, PelanggaranSiswa.data_pelanggaran_id == DataPelanggaran.id)
            .filter(*DashboardService._conditions(filters))
            .group_by(Kelas.id, Kelas.nama_kelas, Kelas.rombel)
            .order_by(Kelas.id.asc())
            .all()
        )
        return [
            ClassTotal(
                kelas_id=row.id,
                nama_kelas=row.nama_kelas,
                rombel=row.rombel,
                total_pelanggaran=int(row.total_pelanggaran or 0),
                total_poin=int(row.total_poin or 0),
            )
            for row in rows
        ]

    @staticmethod
    def get_summary(db: Session, filters: DashboardFilter) -> DashboardSummary:
        """
        Compute the dashboard summary.

        Args:
            db: Database session
            filters: Optional date range, class, teacher and category

        Returns:
            Totals by category and by class plus grand totals. Groups with
            no matching records are omitted rather than returned as zero.
        """
        try:
            category_totals = DashboardService.category_totals(db, filters)
            class_totals = DashboardService.class_totals(db, filters)
        except SQLAlchemyError as e:
            logger.error(f"Dashboard summary failed: {e}", exc_info=True)
            raise

        return DashboardSummary(
            category_totals=category_totals,
            class_totals=class_totals,
            total_pelanggaran=sum(item.total_pelanggaran for item in category_totals),
            total_poin=sum(item.total_poin for item in category_totals),
        )
