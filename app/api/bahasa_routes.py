"""
API Routes untuk Bahasa Pemrograman
"""
from fastapi import APIRouter, Depends

from app.api.auth_routes import get_current_user
from app.api.common import handle_errors, list_params, parse_id, success_response
from app.schemas import BahasaPemrogramanCreate, BahasaPemrogramanUpdate, ListParams
from app.services.referensi_service import referensi_service

router = APIRouter(prefix="/api/bahasa-pemrograman", tags=["Bahasa Pemrograman"])


@router.get("", summary="List Bahasa Pemrograman")
def list_bahasa(params: ListParams = Depends(list_params)):
    """List bahasa pemrograman beserta jumlah aplikasi yang memakainya"""
    with handle_errors("Gagal mengambil data bahasa pemrograman"):
        return success_response(referensi_service.list_bahasa(params))


@router.get("/{bahasa_id}", summary="Get Bahasa Pemrograman by ID")
def get_bahasa(bahasa_id: str):
    with handle_errors("Gagal mengambil data bahasa pemrograman"):
        return success_response(referensi_service.get_bahasa(parse_id(bahasa_id)))


@router.post("", summary="Create Bahasa Pemrograman")
def create_bahasa(data: BahasaPemrogramanCreate, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal membuat bahasa pemrograman"):
        result = referensi_service.create_bahasa(data)
        return success_response(result, "Bahasa pemrograman berhasil dibuat")


@router.put("/{bahasa_id}", summary="Update Bahasa Pemrograman")
def update_bahasa(
    bahasa_id: str,
    data: BahasaPemrogramanUpdate,
    current_user: dict = Depends(get_current_user)
):
    with handle_errors("Gagal memperbarui bahasa pemrograman"):
        result = referensi_service.update_bahasa(parse_id(bahasa_id), data)
        return success_response(result, "Bahasa pemrograman berhasil diperbarui")


@router.delete("/{bahasa_id}", summary="Delete Bahasa Pemrograman")
def delete_bahasa(bahasa_id: str, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal menghapus bahasa pemrograman"):
        referensi_service.delete_bahasa(parse_id(bahasa_id))
        return success_response(None, "Bahasa pemrograman berhasil dihapus")
