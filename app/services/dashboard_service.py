"""
Dashboard Service - statistik ringkasan inventaris aplikasi

Semua angka dihitung langsung dari isi tabel saat endpoint dipanggil,
tanpa tabel summary dan tanpa cache.
"""
import logging
import math
from typing import Any, Dict, List

from sqlalchemy import asc, desc, distinct, func
from sqlalchemy.orm import Session

from app.database import get_db_context
from app.models import (
    Aplikasi,
    BahasaPemrograman,
    Framework,
    PerangkatDaerah,
    Pic,
    Vendor,
)

logger = logging.getLogger(__name__)

TOP_LIMIT = 10
RECENT_LIMIT = 5
PERANGKAT_DAERAH_KOSONG = "Tidak ditemukan"


def hitung_persentase(count: int, total: int) -> int:
    """Persentase dibulatkan setengah ke atas; 0 jika total 0"""
    if not total:
        return 0
    return int(math.floor(count * 100 / total + 0.5))


class DashboardService:
    """Service untuk statistik dashboard"""

    def get_stats(self) -> Dict[str, Any]:
        with get_db_context() as db:
            total_aplikasi = db.query(func.count(Aplikasi.id)).scalar() or 0

            summary = {
                "totalAplikasi": total_aplikasi,
                "totalPerangkatDaerah": db.query(func.count(PerangkatDaerah.id)).scalar() or 0,
                "totalPerangkatDaerahWithApps": db.query(
                    func.count(distinct(Aplikasi.id_perangkat_daerah))
                ).scalar() or 0,
                "totalPic": db.query(func.count(Pic.id)).scalar() or 0,
                "totalVendor": db.query(func.count(Vendor.id)).scalar() or 0,
                "totalBahasaPemrograman": db.query(func.count(BahasaPemrograman.id)).scalar() or 0,
                "totalFramework": db.query(func.count(Framework.id)).scalar() or 0,
                "totalAnggaran": int(db.query(func.coalesce(func.sum(Aplikasi.anggaran), 0)).scalar() or 0),
            }

            return {
                "summary": summary,
                "aplikasiByStatus": self._group_count(db, Aplikasi.status, "status", total_aplikasi),
                "aplikasiByPlatform": self._group_count(db, Aplikasi.platform, "platform", total_aplikasi),
                "topPerangkatDaerah": self._top_perangkat_daerah(db),
                "popularBahasa": self._ranking(db, BahasaPemrograman, Aplikasi.id_bahasa),
                "popularFramework": self._ranking(db, Framework, Aplikasi.id_framework),
                "recentAplikasi": self._recent_aplikasi(db),
            }

    def _group_count(self, db: Session, column, key: str, total: int) -> List[Dict[str, Any]]:
        # Baris dengan nilai NULL menjadi satu grup tersendiri
        count = func.count(Aplikasi.id)
        rows = (
            db.query(column, count)
            .group_by(column)
            .order_by(desc(count), asc(column))
            .all()
        )
        return [
            {key: value, "count": count, "percentage": hitung_persentase(count, total)}
            for value, count in rows
        ]

    def _top_perangkat_daerah(self, db: Session) -> List[Dict[str, Any]]:
        aplikasi_count = func.count(Aplikasi.id)
        rows = (
            db.query(PerangkatDaerah.id, PerangkatDaerah.nama, PerangkatDaerah.jenis, aplikasi_count)
            .outerjoin(Aplikasi, Aplikasi.id_perangkat_daerah == PerangkatDaerah.id)
            .group_by(PerangkatDaerah.id, PerangkatDaerah.nama, PerangkatDaerah.jenis)
            .order_by(desc(aplikasi_count), asc(PerangkatDaerah.id))
            .limit(TOP_LIMIT)
            .all()
        )
        return [
            {"id": id_, "nama": nama, "jenis": jenis, "aplikasiCount": count}
            for id_, nama, jenis, count in rows
        ]

    def _ranking(self, db: Session, model, fk_column) -> List[Dict[str, Any]]:
        """Top bahasa/framework berdasarkan jumlah aplikasi, seri diurutkan berdasarkan id"""
        count = func.count(Aplikasi.id)
        rows = (
            db.query(model.id, model.nama, count)
            .outerjoin(Aplikasi, fk_column == model.id)
            .group_by(model.id, model.nama)
            .order_by(desc(count), asc(model.id))
            .limit(TOP_LIMIT)
            .all()
        )
        return [{"id": id_, "nama": nama, "count": jumlah} for id_, nama, jumlah in rows]

    def _recent_aplikasi(self, db: Session) -> List[Dict[str, Any]]:
        rows = (
            db.query(Aplikasi, PerangkatDaerah.nama)
            .outerjoin(PerangkatDaerah, Aplikasi.id_perangkat_daerah == PerangkatDaerah.id)
            .order_by(desc(Aplikasi.created_at), desc(Aplikasi.id))
            .limit(RECENT_LIMIT)
            .all()
        )
        return [
            {
                "id": aplikasi.id,
                "nama": aplikasi.nama,
                "status": aplikasi.status,
                "platform": aplikasi.platform,
                "createdAt": aplikasi.created_at.isoformat() if aplikasi.created_at else None,
                "perangkatDaerah": nama_perangkat or PERANGKAT_DAERAH_KOSONG
            }
            for aplikasi, nama_perangkat in rows
        ]


# Singleton instance
dashboard_service = DashboardService()
