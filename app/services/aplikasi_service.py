"""
Service untuk Aplikasi dan PIC (Person In Charge)
"""
import logging
from datetime import datetime
from typing import Any, Dict

from sqlalchemy.orm import Session

from app.database import get_db_context
from app.models import Aplikasi, AplikasiVendor, BahasaPemrograman, Framework, PerangkatDaerah, Pic, Vendor
from app.schemas import AplikasiCreate, AplikasiUpdate, ListParams, PicCreate, PicUpdate
from app.services import integrity
from app.services.query_builder import ListSpec, build_conditions, calculate_pagination, fetch_page

logger = logging.getLogger(__name__)


APLIKASI_LIST = ListSpec(
    model=Aplikasi,
    sort_columns={
        "id": Aplikasi.id,
        "nama": Aplikasi.nama,
        "status": Aplikasi.status,
        "platform": Aplikasi.platform,
        "tahunDibuat": Aplikasi.tahun_dibuat,
        "anggaran": Aplikasi.anggaran,
        "createdAt": Aplikasi.created_at,
        "updatedAt": Aplikasi.updated_at,
    },
    default_sort="createdAt",
    search_columns=(
        Aplikasi.nama,
        Aplikasi.deskripsi,
        PerangkatDaerah.nama,
        BahasaPemrograman.nama,
        Framework.nama,
    ),
    joins=(
        (PerangkatDaerah, Aplikasi.id_perangkat_daerah == PerangkatDaerah.id),
        (BahasaPemrograman, Aplikasi.id_bahasa == BahasaPemrograman.id),
        (Framework, Aplikasi.id_framework == Framework.id),
    ),
)

PIC_LIST = ListSpec(
    model=Pic,
    sort_columns={
        "id": Pic.id,
        "nama": Pic.nama,
        "jabatan": Pic.jabatan,
        "kontak": Pic.kontak,
        "idAplikasi": Pic.id_aplikasi,
        "createdAt": Pic.created_at,
        "updatedAt": Pic.updated_at,
    },
    default_sort="nama",
    search_columns=(Pic.nama, Pic.jabatan, Aplikasi.nama),
    joins=((Aplikasi, Pic.id_aplikasi == Aplikasi.id),),
)

# (field payload, model tujuan, pesan jika tidak ditemukan)
APLIKASI_REFERENCES = (
    ("id_perangkat_daerah", PerangkatDaerah, "Perangkat daerah tidak ditemukan"),
    ("id_bahasa", BahasaPemrograman, "Bahasa pemrograman tidak ditemukan"),
    ("id_framework", Framework, "Framework tidak ditemukan"),
)

PIC_REFERENCES = (
    ("id_aplikasi", Aplikasi, "Aplikasi tidak ditemukan"),
)


class AplikasiService:
    """Service untuk operasi CRUD aplikasi dan PIC"""

    # ==================== APLIKASI ====================

    def list_aplikasi(self, params: ListParams) -> Dict[str, Any]:
        """List aplikasi dengan pencarian lintas relasi dan filter status"""
        with get_db_context() as db:
            status_filter = Aplikasi.status == params.status if params.status else None
            conditions = build_conditions(APLIKASI_LIST, params, extra=(status_filter,))
            rows, total = fetch_page(
                db, APLIKASI_LIST, params, conditions,
                entities=(Aplikasi, PerangkatDaerah, BahasaPemrograman, Framework),
            )
            data = [row[0].to_dict(include_relations=True) for row in rows]
            return calculate_pagination(data, params.page, params.limit, total)

    def get_aplikasi(self, aplikasi_id: int) -> Dict[str, Any]:
        """Detail aplikasi lengkap dengan PIC dan vendor"""
        with get_db_context() as db:
            aplikasi = integrity.get_or_404(db, Aplikasi, aplikasi_id, "Aplikasi tidak ditemukan")
            result = aplikasi.to_dict(include_relations=True, detail=True)

            pic_list = db.query(Pic).filter(Pic.id_aplikasi == aplikasi_id).order_by(Pic.id).all()
            vendors = (
                db.query(Vendor)
                .join(AplikasiVendor, AplikasiVendor.id_vendor == Vendor.id)
                .filter(AplikasiVendor.id_aplikasi == aplikasi_id)
                .order_by(Vendor.id)
                .all()
            )
            result["pic"] = [p.to_dict() for p in pic_list]
            result["vendors"] = [v.to_dict(fields=("id", "namaVendor", "kontak", "alamat")) for v in vendors]
            return result

    def create_aplikasi(self, data: AplikasiCreate) -> Dict[str, Any]:
        with get_db_context() as db:
            payload = data.model_dump()
            integrity.ensure_references(db, payload, APLIKASI_REFERENCES)

            aplikasi = Aplikasi(**payload)
            db.add(aplikasi)
            integrity.commit_or_conflict(db, "Data referensi aplikasi tidak valid")
            logger.info("Aplikasi %s dibuat", aplikasi.id)
            return self._reload_aplikasi(db, aplikasi.id)

    def update_aplikasi(self, aplikasi_id: int, data: AplikasiUpdate) -> Dict[str, Any]:
        with get_db_context() as db:
            aplikasi = integrity.get_or_404(db, Aplikasi, aplikasi_id, "Aplikasi tidak ditemukan")
            changes = data.model_dump(exclude_unset=True)
            integrity.ensure_references(db, changes, APLIKASI_REFERENCES)

            for key, value in changes.items():
                setattr(aplikasi, key, value)
            aplikasi.updated_at = datetime.utcnow()

            integrity.commit_or_conflict(db, "Data referensi aplikasi tidak valid")
            return self._reload_aplikasi(db, aplikasi_id)

    def delete_aplikasi(self, aplikasi_id: int) -> None:
        """Hapus aplikasi beserta PIC dan relasi vendornya"""
        with get_db_context() as db:
            aplikasi = integrity.get_or_404(db, Aplikasi, aplikasi_id, "Aplikasi tidak ditemukan")

            db.query(Pic).filter(Pic.id_aplikasi == aplikasi_id).delete(synchronize_session=False)
            db.query(AplikasiVendor).filter(
                AplikasiVendor.id_aplikasi == aplikasi_id
            ).delete(synchronize_session=False)
            db.delete(aplikasi)
            db.commit()
            logger.info("Aplikasi %s dihapus", aplikasi_id)

    def _reload_aplikasi(self, db: Session, aplikasi_id: int) -> Dict[str, Any]:
        """Ambil ulang aplikasi setelah commit agar relasi ikut ter-load"""
        db.expire_all()
        aplikasi = db.query(Aplikasi).filter(Aplikasi.id == aplikasi_id).one()
        return aplikasi.to_dict(include_relations=True)

    # ==================== PIC ====================

    def list_pic(self, params: ListParams) -> Dict[str, Any]:
        with get_db_context() as db:
            conditions = build_conditions(PIC_LIST, params)
            rows, total = fetch_page(db, PIC_LIST, params, conditions, entities=(Pic, Aplikasi))
            data = [row[0].to_dict(include_aplikasi=True) for row in rows]
            return calculate_pagination(data, params.page, params.limit, total)

    def get_pic(self, pic_id: int) -> Dict[str, Any]:
        with get_db_context() as db:
            pic = integrity.get_or_404(db, Pic, pic_id, "PIC tidak ditemukan")
            return pic.to_dict(include_aplikasi=True)

    def create_pic(self, data: PicCreate) -> Dict[str, Any]:
        with get_db_context() as db:
            payload = data.model_dump()
            integrity.ensure_references(db, payload, PIC_REFERENCES)

            pic = Pic(**payload)
            db.add(pic)
            integrity.commit_or_conflict(db, "Aplikasi tidak ditemukan")
            db.refresh(pic)
            return pic.to_dict(include_aplikasi=True)

    def update_pic(self, pic_id: int, data: PicUpdate) -> Dict[str, Any]:
        with get_db_context() as db:
            pic = integrity.get_or_404(db, Pic, pic_id, "PIC tidak ditemukan")
            changes = data.model_dump(exclude_unset=True)
            integrity.ensure_references(db, changes, PIC_REFERENCES)

            for key, value in changes.items():
                setattr(pic, key, value)
            pic.updated_at = datetime.utcnow()

            integrity.commit_or_conflict(db, "Aplikasi tidak ditemukan")
            db.expire_all()
            pic = db.query(Pic).filter(Pic.id == pic_id).one()
            return pic.to_dict(include_aplikasi=True)

    def delete_pic(self, pic_id: int) -> None:
        with get_db_context() as db:
            pic = integrity.get_or_404(db, Pic, pic_id, "PIC tidak ditemukan")
            db.delete(pic)
            db.commit()


# Singleton instance
aplikasi_service = AplikasiService()
