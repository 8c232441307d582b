"""
API Routes untuk Vendor dan hubungan Aplikasi-Vendor
"""
from fastapi import APIRouter, Depends

from app.api.auth_routes import get_current_user
from app.api.common import handle_errors, list_params, parse_id, success_response
from app.schemas import AplikasiVendorCreate, AplikasiVendorUpdate, ListParams, VendorCreate, VendorUpdate
from app.services.vendor_service import vendor_service

router = APIRouter(prefix="/api/vendor", tags=["Vendor"])
aplikasi_vendor_router = APIRouter(prefix="/api/aplikasi-vendor", tags=["Aplikasi Vendor"])


# ==================== VENDOR ====================

@router.get("", summary="List Vendor")
def list_vendor(params: ListParams = Depends(list_params)):
    """
    List vendor beserta jumlah dan nama aplikasi yang ditangani.

    - **search**: cari di nama vendor, kontak, dan nama aplikasi terkait
    """
    with handle_errors("Gagal mengambil data vendor"):
        return success_response(vendor_service.list_vendor(params))


@router.get("/{vendor_id}", summary="Get Vendor by ID")
def get_vendor(vendor_id: str):
    with handle_errors("Gagal mengambil data vendor"):
        return success_response(vendor_service.get_vendor(parse_id(vendor_id)))


@router.post("", summary="Create Vendor")
def create_vendor(data: VendorCreate, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal membuat vendor"):
        result = vendor_service.create_vendor(data)
        return success_response(result, "Vendor berhasil dibuat")


@router.put("/{vendor_id}", summary="Update Vendor")
def update_vendor(vendor_id: str, data: VendorUpdate, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal memperbarui vendor"):
        result = vendor_service.update_vendor(parse_id(vendor_id), data)
        return success_response(result, "Vendor berhasil diperbarui")


@router.delete("/{vendor_id}", summary="Delete Vendor")
def delete_vendor(vendor_id: str, current_user: dict = Depends(get_current_user)):
    """Ditolak jika vendor masih terhubung ke aplikasi"""
    with handle_errors("Gagal menghapus vendor"):
        vendor_service.delete_vendor(parse_id(vendor_id))
        return success_response(None, "Vendor berhasil dihapus")


# ==================== APLIKASI-VENDOR ====================

@aplikasi_vendor_router.get("", summary="List Hubungan Aplikasi-Vendor")
def list_aplikasi_vendor(params: ListParams = Depends(list_params)):
    with handle_errors("Gagal mengambil data hubungan aplikasi-vendor"):
        return success_response(vendor_service.list_aplikasi_vendor(params))


@aplikasi_vendor_router.get("/{relasi_id}", summary="Get Hubungan Aplikasi-Vendor by ID")
def get_aplikasi_vendor(relasi_id: str):
    with handle_errors("Gagal mengambil data hubungan aplikasi-vendor"):
        return success_response(vendor_service.get_aplikasi_vendor(parse_id(relasi_id)))


@aplikasi_vendor_router.post("", summary="Create Hubungan Aplikasi-Vendor")
def create_aplikasi_vendor(data: AplikasiVendorCreate, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal membuat hubungan aplikasi-vendor"):
        result = vendor_service.create_aplikasi_vendor(data)
        return success_response(result, "Hubungan aplikasi-vendor berhasil dibuat")


@aplikasi_vendor_router.put("/{relasi_id}", summary="Update Hubungan Aplikasi-Vendor")
def update_aplikasi_vendor(
    relasi_id: str,
    data: AplikasiVendorUpdate,
    current_user: dict = Depends(get_current_user)
):
    with handle_errors("Gagal memperbarui hubungan aplikasi-vendor"):
        result = vendor_service.update_aplikasi_vendor(parse_id(relasi_id), data)
        return success_response(result, "Hubungan aplikasi-vendor berhasil diperbarui")


@aplikasi_vendor_router.delete("/{relasi_id}", summary="Delete Hubungan Aplikasi-Vendor")
def delete_aplikasi_vendor(relasi_id: str, current_user: dict = Depends(get_current_user)):
    with handle_errors("Gagal menghapus hubungan aplikasi-vendor"):
        vendor_service.delete_aplikasi_vendor(parse_id(relasi_id))
        return success_response(None, "Hubungan aplikasi-vendor berhasil dihapus")
