"""
API Routes untuk Aplikasi dan PIC
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.auth_routes import get_current_user
from app.api.common import handle_errors, list_params, parse_id, success_response
from app.schemas import AplikasiCreate, AplikasiUpdate, ListParams, PicCreate, PicUpdate
from app.services.aplikasi_service import aplikasi_service

router = APIRouter(prefix="/api/aplikasi", tags=["Aplikasi"])
pic_router = APIRouter(prefix="/api/pic", tags=["PIC"])


# ==================== APLIKASI ====================

@router.get("", summary="List Aplikasi")
def list_aplikasi(
    params: ListParams = Depends(list_params),
    status: Optional[str] = Query(None, description="Filter status aplikasi")
):
    """
    List aplikasi beserta perangkat daerah, bahasa, dan framework.

    - **search**: cari di nama, deskripsi, nama perangkat daerah, bahasa, dan framework
    - **status**: aktif, tidak aktif, pengembangan, maintenance
    """
    with handle_errors("Gagal mengambil data aplikasi"):
        params = params.model_copy(update={"status": status or None})
        return success_response(aplikasi_service.list_aplikasi(params))


@router.get("/{aplikasi_id}", summary="Get Aplikasi by ID")
def get_aplikasi(aplikasi_id: str):
    """Detail aplikasi lengkap dengan daftar PIC dan vendor"""
    with handle_errors("Gagal mengambil data aplikasi"):
        return success_response(aplikasi_service.get_aplikasi(parse_id(aplikasi_id)))


@router.post("", summary="Create Aplikasi")
def create_aplikasi(data: AplikasiCreate, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal membuat aplikasi"):
        result = aplikasi_service.create_aplikasi(data)
        return success_response(result, "Aplikasi berhasil dibuat")


@router.put("/{aplikasi_id}", summary="Update Aplikasi")
def update_aplikasi(
    aplikasi_id: str,
    data: AplikasiUpdate,
    current_user: dict = Depends(get_current_user)
):
    with handle_errors("Gagal memperbarui aplikasi"):
        result = aplikasi_service.update_aplikasi(parse_id(aplikasi_id), data)
        return success_response(result, "Aplikasi berhasil diperbarui")


@router.delete("/{aplikasi_id}", summary="Delete Aplikasi")
def delete_aplikasi(aplikasi_id: str, current_user: dict = Depends(get_current_user)):
    """Menghapus aplikasi beserta PIC dan relasi vendornya"""
    with handle_errors("Gagal menghapus aplikasi"):
        aplikasi_service.delete_aplikasi(parse_id(aplikasi_id))
        return success_response(None, "Aplikasi berhasil dihapus")


# ==================== PIC ====================

@pic_router.get("", summary="List PIC")
def list_pic(params: ListParams = Depends(list_params)):
    with handle_errors("Gagal mengambil data PIC"):
        return success_response(aplikasi_service.list_pic(params))


@pic_router.get("/{pic_id}", summary="Get PIC by ID")
def get_pic(pic_id: str):
    with handle_errors("Gagal mengambil data PIC"):
        return success_response(aplikasi_service.get_pic(parse_id(pic_id)))


@pic_router.post("", summary="Create PIC")
def create_pic(data: PicCreate, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal membuat PIC"):
        result = aplikasi_service.create_pic(data)
        return success_response(result, "PIC berhasil dibuat")


@pic_router.put("/{pic_id}", summary="Update PIC")
def update_pic(pic_id: str, data: PicUpdate, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal memperbarui PIC"):
        result = aplikasi_service.update_pic(parse_id(pic_id), data)
        return success_response(result, "PIC berhasil diperbarui")


@pic_router.delete("/{pic_id}", summary="Delete PIC")
def delete_pic(pic_id: str, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal menghapus PIC"):
        aplikasi_service.delete_pic(parse_id(pic_id))
        return success_response(None, "PIC berhasil dihapus")
