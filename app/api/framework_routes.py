"""
API Routes untuk Framework
"""
from fastapi import APIRouter, Depends

from app.api.auth_routes import get_current_user
from app.api.common import handle_errors, list_params, parse_id, success_response
from app.schemas import FrameworkCreate, FrameworkUpdate, ListParams
from app.services.referensi_service import referensi_service

router = APIRouter(prefix="/api/framework", tags=["Framework"])


@router.get("", summary="List Framework")
def list_framework(params: ListParams = Depends(list_params)):
    with handle_errors("Gagal mengambil data framework"):
        return success_response(referensi_service.list_framework(params))


@router.get("/{framework_id}", summary="Get Framework by ID")
def get_framework(framework_id: str):
    with handle_errors("Gagal mengambil data framework"):
        return success_response(referensi_service.get_framework(parse_id(framework_id)))


@router.post("", summary="Create Framework")
def create_framework(data: FrameworkCreate, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal membuat framework"):
        result = referensi_service.create_framework(data)
        return success_response(result, "Framework berhasil dibuat")


@router.put("/{framework_id}", summary="Update Framework")
def update_framework(
    framework_id: str,
    data: FrameworkUpdate,
    current_user: dict = Depends(get_current_user)
):
    with handle_errors("Gagal memperbarui framework"):
        result = referensi_service.update_framework(parse_id(framework_id), data)
        return success_response(result, "Framework berhasil diperbarui")


@router.delete("/{framework_id}", summary="Delete Framework")
def delete_framework(framework_id: str, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal menghapus framework"):
        referensi_service.delete_framework(parse_id(framework_id))
        return success_response(None, "Framework berhasil dihapus")
