"""
API Routes untuk statistik Dashboard
"""
from fastapi import APIRouter

from app.api.common import handle_errors, success_response
from app.services.dashboard_service import dashboard_service

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/stats", summary="Statistik Dashboard")
def get_dashboard_stats():
    """
    Ringkasan inventaris aplikasi.

    Berisi total per entitas, total anggaran, distribusi status dan platform,
    top 10 perangkat daerah / bahasa / framework, serta 5 aplikasi terbaru.
    """
    with handle_errors("Gagal mengambil data statistik dashboard"):
        return success_response(dashboard_service.get_stats())
