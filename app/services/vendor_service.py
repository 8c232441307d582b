"""
Service untuk Vendor dan relasi Aplikasi-Vendor
"""
import logging
from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.database import get_db_context
from app.models import Aplikasi, AplikasiVendor, Vendor
from app.schemas import AplikasiVendorCreate, AplikasiVendorUpdate, ListParams, VendorCreate, VendorUpdate
from app.services import integrity
from app.services.query_builder import ListSpec, build_conditions, calculate_pagination, fetch_page

logger = logging.getLogger(__name__)


def _vendor_by_aplikasi_nama(pattern: str):
    """Vendor yang terhubung ke aplikasi dengan nama yang cocok"""
    linked = (
        select(AplikasiVendor.id_vendor)
        .join(Aplikasi, Aplikasi.id == AplikasiVendor.id_aplikasi)
        .where(Aplikasi.nama.ilike(pattern))
    )
    return Vendor.id.in_(linked)


VENDOR_LIST = ListSpec(
    model=Vendor,
    sort_columns={
        "id": Vendor.id,
        "namaVendor": Vendor.nama_vendor,
        "kontak": Vendor.kontak,
        "createdAt": Vendor.created_at,
        "updatedAt": Vendor.updated_at,
    },
    default_sort="namaVendor",
    search_columns=(Vendor.nama_vendor, Vendor.kontak),
    search_subqueries=(_vendor_by_aplikasi_nama,),
    joins=((AplikasiVendor, AplikasiVendor.id_vendor == Vendor.id),),
)

APLIKASI_VENDOR_LIST = ListSpec(
    model=AplikasiVendor,
    sort_columns={
        "id": AplikasiVendor.id,
        "idAplikasi": AplikasiVendor.id_aplikasi,
        "idVendor": AplikasiVendor.id_vendor,
        "namaAplikasi": Aplikasi.nama,
        "namaVendor": Vendor.nama_vendor,
        "createdAt": AplikasiVendor.created_at,
        "updatedAt": AplikasiVendor.updated_at,
    },
    default_sort="createdAt",
    search_columns=(Aplikasi.nama, Vendor.nama_vendor),
    joins=(
        (Aplikasi, AplikasiVendor.id_aplikasi == Aplikasi.id),
        (Vendor, AplikasiVendor.id_vendor == Vendor.id),
    ),
)

APLIKASI_VENDOR_REFERENCES = (
    ("id_aplikasi", Aplikasi, "Aplikasi tidak ditemukan"),
    ("id_vendor", Vendor, "Vendor tidak ditemukan"),
)


class VendorService:
    """Service untuk operasi CRUD vendor dan hubungan aplikasi-vendor"""

    # ==================== VENDOR ====================

    def list_vendor(self, params: ListParams) -> Dict[str, Any]:
        """
        List vendor beserta jumlah dan nama aplikasi yang ditangani.

        Jumlah dihitung lewat GROUP BY pada query halaman; nama aplikasi
        diambil dengan satu query tambahan untuk vendor di halaman ini saja.
        """
        with get_db_context() as db:
            conditions = build_conditions(VENDOR_LIST, params)
            rows, total = fetch_page(
                db, VENDOR_LIST, params, conditions,
                entities=(Vendor, func.count(AplikasiVendor.id).label("aplikasi_count")),
                group_by=(Vendor.id,),
            )
            nama_aplikasi = self._nama_aplikasi_per_vendor(db, [vendor.id for vendor, _ in rows])

            data = []
            for vendor, aplikasi_count in rows:
                item = vendor.to_dict()
                item["aplikasiCount"] = aplikasi_count or 0
                item["aplikasiList"] = nama_aplikasi.get(vendor.id, [])
                data.append(item)
            return calculate_pagination(data, params.page, params.limit, total)

    def get_vendor(self, vendor_id: int) -> Dict[str, Any]:
        with get_db_context() as db:
            vendor = integrity.get_or_404(db, Vendor, vendor_id, "Vendor tidak ditemukan")
            aplikasi_list = (
                db.query(Aplikasi)
                .join(AplikasiVendor, AplikasiVendor.id_aplikasi == Aplikasi.id)
                .filter(AplikasiVendor.id_vendor == vendor_id)
                .order_by(Aplikasi.id)
                .all()
            )
            result = vendor.to_dict()
            result["aplikasi"] = [
                {
                    "id": a.id,
                    "nama": a.nama,
                    "status": a.status,
                    "platform": a.platform,
                    "tahunDibuat": a.tahun_dibuat
                }
                for a in aplikasi_list
            ]
            return result

    def create_vendor(self, data: VendorCreate) -> Dict[str, Any]:
        with get_db_context() as db:
            vendor = Vendor(**data.model_dump())
            db.add(vendor)
            integrity.commit_or_conflict(db, "Gagal menyimpan vendor")
            db.refresh(vendor)
            logger.info("Vendor %s dibuat", vendor.id)
            return vendor.to_dict()

    def update_vendor(self, vendor_id: int, data: VendorUpdate) -> Dict[str, Any]:
        with get_db_context() as db:
            vendor = integrity.get_or_404(db, Vendor, vendor_id, "Vendor tidak ditemukan")
            for key, value in data.model_dump(exclude_unset=True).items():
                setattr(vendor, key, value)
            vendor.updated_at = datetime.utcnow()

            integrity.commit_or_conflict(db, "Gagal menyimpan vendor")
            db.refresh(vendor)
            return vendor.to_dict()

    def delete_vendor(self, vendor_id: int) -> None:
        with get_db_context() as db:
            vendor = integrity.get_or_404(db, Vendor, vendor_id, "Vendor tidak ditemukan")
            integrity.ensure_unused(
                db, AplikasiVendor.id_vendor, vendor_id,
                "Tidak dapat menghapus vendor yang memiliki aplikasi terkait"
            )
            db.delete(vendor)
            integrity.commit_or_conflict(db, "Tidak dapat menghapus vendor yang memiliki aplikasi terkait")
            logger.info("Vendor %s dihapus", vendor_id)

    def _nama_aplikasi_per_vendor(self, db: Session, vendor_ids: List[int]) -> Dict[int, List[str]]:
        if not vendor_ids:
            return {}
        rows = (
            db.query(AplikasiVendor.id_vendor, Aplikasi.nama)
            .join(Aplikasi, Aplikasi.id == AplikasiVendor.id_aplikasi)
            .filter(AplikasiVendor.id_vendor.in_(vendor_ids))
            .order_by(Aplikasi.nama, Aplikasi.id)
            .all()
        )
        result: Dict[int, List[str]] = {}
        for id_vendor, nama in rows:
            result.setdefault(id_vendor, []).append(nama)
        return result

    # ==================== APLIKASI-VENDOR ====================

    def list_aplikasi_vendor(self, params: ListParams) -> Dict[str, Any]:
        with get_db_context() as db:
            conditions = build_conditions(APLIKASI_VENDOR_LIST, params)
            rows, total = fetch_page(
                db, APLIKASI_VENDOR_LIST, params, conditions,
                entities=(AplikasiVendor, Aplikasi, Vendor),
            )
            data = [row[0].to_dict(include_relations=True) for row in rows]
            return calculate_pagination(data, params.page, params.limit, total)

    def get_aplikasi_vendor(self, relasi_id: int) -> Dict[str, Any]:
        with get_db_context() as db:
            relasi = integrity.get_or_404(
                db, AplikasiVendor, relasi_id, "Hubungan aplikasi-vendor tidak ditemukan"
            )
            return relasi.to_dict(include_relations=True, detail=True)

    def create_aplikasi_vendor(self, data: AplikasiVendorCreate) -> Dict[str, Any]:
        """Hubungkan vendor ke aplikasi; pasangan yang sama hanya boleh ada sekali"""
        with get_db_context() as db:
            payload = data.model_dump()
            integrity.ensure_references(db, payload, APLIKASI_VENDOR_REFERENCES)
            integrity.ensure_unique_pair(db, data.id_aplikasi, data.id_vendor)

            relasi = AplikasiVendor(**payload)
            db.add(relasi)
            integrity.commit_or_conflict(db, "Hubungan aplikasi-vendor ini sudah ada")
            db.refresh(relasi)
            return relasi.to_dict(include_relations=True)

    def update_aplikasi_vendor(self, relasi_id: int, data: AplikasiVendorUpdate) -> Dict[str, Any]:
        with get_db_context() as db:
            relasi = integrity.get_or_404(
                db, AplikasiVendor, relasi_id, "Hubungan aplikasi-vendor tidak ditemukan"
            )
            changes = data.model_dump(exclude_unset=True)
            integrity.ensure_references(db, changes, APLIKASI_VENDOR_REFERENCES)
            integrity.ensure_unique_pair(
                db,
                changes.get("id_aplikasi", relasi.id_aplikasi),
                changes.get("id_vendor", relasi.id_vendor),
                exclude_id=relasi_id
            )

            for key, value in changes.items():
                setattr(relasi, key, value)
            relasi.updated_at = datetime.utcnow()

            integrity.commit_or_conflict(db, "Hubungan aplikasi-vendor ini sudah ada")
            db.expire_all()
            relasi = db.query(AplikasiVendor).filter(AplikasiVendor.id == relasi_id).one()
            return relasi.to_dict(include_relations=True)

    def delete_aplikasi_vendor(self, relasi_id: int) -> None:
        with get_db_context() as db:
            relasi = integrity.get_or_404(
                db, AplikasiVendor, relasi_id, "Hubungan aplikasi-vendor tidak ditemukan"
            )
            db.delete(relasi)
            db.commit()


# Singleton instance
vendor_service = VendorService()
