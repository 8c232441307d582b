"""
API Routes untuk Perangkat Daerah
"""
from fastapi import APIRouter, Depends

from app.api.auth_routes import get_current_user
from app.api.common import handle_errors, list_params, parse_id, success_response
from app.schemas import ListParams, PerangkatDaerahCreate, PerangkatDaerahUpdate
from app.services.referensi_service import referensi_service

router = APIRouter(prefix="/api/perangkat-daerah", tags=["Perangkat Daerah"])


@router.get("", summary="List Perangkat Daerah")
def list_perangkat_daerah(params: ListParams = Depends(list_params)):
    """
    List perangkat daerah dengan pagination.

    - **search**: cari di nama dan jenis
    - **sortBy**: id, nama, jenis, kepalaDinas, createdAt, updatedAt
    """
    with handle_errors("Gagal mengambil data perangkat daerah"):
        return success_response(referensi_service.list_perangkat_daerah(params))


@router.get("/{perangkat_id}", summary="Get Perangkat Daerah by ID")
def get_perangkat_daerah(perangkat_id: str):
    with handle_errors("Gagal mengambil data perangkat daerah"):
        return success_response(referensi_service.get_perangkat_daerah(parse_id(perangkat_id)))


@router.post("", summary="Create Perangkat Daerah")
def create_perangkat_daerah(
    data: PerangkatDaerahCreate,
    current_user: dict = Depends(get_current_user)
):
    with handle_errors("Gagal membuat perangkat daerah"):
        result = referensi_service.create_perangkat_daerah(data)
        return success_response(result, "Perangkat daerah berhasil dibuat")


@router.put("/{perangkat_id}", summary="Update Perangkat Daerah")
def update_perangkat_daerah(
    perangkat_id: str,
    data: PerangkatDaerahUpdate,
    current_user: dict = Depends(get_current_user)
):
    with handle_errors("Gagal memperbarui perangkat daerah"):
        result = referensi_service.update_perangkat_daerah(parse_id(perangkat_id), data)
        return success_response(result, "Perangkat daerah berhasil diperbarui")


@router.delete("/{perangkat_id}", summary="Delete Perangkat Daerah")
def delete_perangkat_daerah(perangkat_id: str, current_user: dict = Depends(get_current_user)):
    """Ditolak jika perangkat daerah masih memiliki aplikasi"""
    with handle_errors("Gagal menghapus perangkat daerah"):
        referensi_service.delete_perangkat_daerah(parse_id(perangkat_id))
        return success_response(None, "Perangkat daerah berhasil dihapus")
