"""
Service untuk data referensi: Perangkat Daerah, Bahasa Pemrograman, Framework
"""
import logging
from datetime import datetime
from typing import Any, Dict

from sqlalchemy import func

from app.database import get_db_context
from app.models import Aplikasi, BahasaPemrograman, Framework, PerangkatDaerah
from app.schemas import (
    BahasaPemrogramanCreate,
    BahasaPemrogramanUpdate,
    FrameworkCreate,
    FrameworkUpdate,
    ListParams,
    PerangkatDaerahCreate,
    PerangkatDaerahUpdate,
)
from app.services import integrity
from app.services.query_builder import ListSpec, build_conditions, calculate_pagination, fetch_page

logger = logging.getLogger(__name__)


PERANGKAT_DAERAH_LIST = ListSpec(
    model=PerangkatDaerah,
    sort_columns={
        "id": PerangkatDaerah.id,
        "nama": PerangkatDaerah.nama,
        "jenis": PerangkatDaerah.jenis,
        "kepalaDinas": PerangkatDaerah.kepala_dinas,
        "createdAt": PerangkatDaerah.created_at,
        "updatedAt": PerangkatDaerah.updated_at,
    },
    default_sort="createdAt",
    search_columns=(PerangkatDaerah.nama, PerangkatDaerah.jenis),
)

BAHASA_LIST = ListSpec(
    model=BahasaPemrograman,
    sort_columns={
        "id": BahasaPemrograman.id,
        "nama": BahasaPemrograman.nama,
        "createdAt": BahasaPemrograman.created_at,
        "updatedAt": BahasaPemrograman.updated_at,
    },
    default_sort="nama",
    search_columns=(BahasaPemrograman.nama,),
    joins=((Aplikasi, Aplikasi.id_bahasa == BahasaPemrograman.id),),
)

FRAMEWORK_LIST = ListSpec(
    model=Framework,
    sort_columns={
        "id": Framework.id,
        "nama": Framework.nama,
        "createdAt": Framework.created_at,
        "updatedAt": Framework.updated_at,
    },
    default_sort="nama",
    search_columns=(Framework.nama,),
    joins=((Aplikasi, Aplikasi.id_framework == Framework.id),),
)


class ReferensiService:
    """Service untuk operasi CRUD data referensi"""

    # ==================== PERANGKAT DAERAH ====================

    def list_perangkat_daerah(self, params: ListParams) -> Dict[str, Any]:
        """List perangkat daerah dengan pagination dan pencarian"""
        with get_db_context() as db:
            conditions = build_conditions(PERANGKAT_DAERAH_LIST, params)
            rows, total = fetch_page(db, PERANGKAT_DAERAH_LIST, params, conditions)
            return calculate_pagination([r.to_dict() for r in rows], params.page, params.limit, total)

    def get_perangkat_daerah(self, perangkat_id: int) -> Dict[str, Any]:
        """Detail perangkat daerah beserta jumlah aplikasinya"""
        with get_db_context() as db:
            perangkat = integrity.get_or_404(
                db, PerangkatDaerah, perangkat_id, "Perangkat daerah tidak ditemukan"
            )
            result = perangkat.to_dict()
            result["aplikasiCount"] = integrity.count_references(db, Aplikasi.id_perangkat_daerah, perangkat_id)
            return result

    def create_perangkat_daerah(self, data: PerangkatDaerahCreate) -> Dict[str, Any]:
        with get_db_context() as db:
            perangkat = PerangkatDaerah(**data.model_dump())
            db.add(perangkat)
            integrity.commit_or_conflict(db, "Gagal menyimpan perangkat daerah")
            db.refresh(perangkat)
            logger.info("Perangkat daerah %s dibuat", perangkat.id)
            return perangkat.to_dict()

    def update_perangkat_daerah(self, perangkat_id: int, data: PerangkatDaerahUpdate) -> Dict[str, Any]:
        with get_db_context() as db:
            perangkat = integrity.get_or_404(
                db, PerangkatDaerah, perangkat_id, "Perangkat daerah tidak ditemukan"
            )
            for key, value in data.model_dump(exclude_unset=True).items():
                setattr(perangkat, key, value)
            perangkat.updated_at = datetime.utcnow()

            integrity.commit_or_conflict(db, "Gagal memperbarui perangkat daerah")
            db.refresh(perangkat)
            return perangkat.to_dict()

    def delete_perangkat_daerah(self, perangkat_id: int) -> None:
        """Hapus perangkat daerah, ditolak jika masih memiliki aplikasi"""
        with get_db_context() as db:
            perangkat = integrity.get_or_404(
                db, PerangkatDaerah, perangkat_id, "Perangkat daerah tidak ditemukan"
            )
            integrity.ensure_unused(
                db, Aplikasi.id_perangkat_daerah, perangkat_id,
                "Tidak dapat menghapus perangkat daerah yang memiliki aplikasi terkait"
            )
            db.delete(perangkat)
            integrity.commit_or_conflict(
                db, "Tidak dapat menghapus perangkat daerah yang memiliki aplikasi terkait"
            )
            logger.info("Perangkat daerah %s dihapus", perangkat_id)

    # ==================== BAHASA PEMROGRAMAN ====================

    def list_bahasa(self, params: ListParams) -> Dict[str, Any]:
        return self._list_with_count(BAHASA_LIST, params)

    def get_bahasa(self, bahasa_id: int) -> Dict[str, Any]:
        with get_db_context() as db:
            bahasa = integrity.get_or_404(db, BahasaPemrograman, bahasa_id, "Bahasa pemrograman tidak ditemukan")
            result = bahasa.to_dict()
            result["aplikasiCount"] = integrity.count_references(db, Aplikasi.id_bahasa, bahasa_id)
            return result

    def create_bahasa(self, data: BahasaPemrogramanCreate) -> Dict[str, Any]:
        with get_db_context() as db:
            integrity.ensure_unique_name(
                db, BahasaPemrograman, data.nama, "Bahasa pemrograman dengan nama tersebut sudah ada"
            )
            bahasa = BahasaPemrograman(nama=data.nama)
            db.add(bahasa)
            integrity.commit_or_conflict(db, "Bahasa pemrograman dengan nama tersebut sudah ada")
            db.refresh(bahasa)
            return bahasa.to_dict()

    def update_bahasa(self, bahasa_id: int, data: BahasaPemrogramanUpdate) -> Dict[str, Any]:
        with get_db_context() as db:
            bahasa = integrity.get_or_404(db, BahasaPemrograman, bahasa_id, "Bahasa pemrograman tidak ditemukan")
            changes = data.model_dump(exclude_unset=True)
            integrity.ensure_unique_name(
                db, BahasaPemrograman, changes.get("nama"),
                "Bahasa pemrograman dengan nama tersebut sudah ada", exclude_id=bahasa_id
            )
            for key, value in changes.items():
                setattr(bahasa, key, value)
            bahasa.updated_at = datetime.utcnow()

            integrity.commit_or_conflict(db, "Bahasa pemrograman dengan nama tersebut sudah ada")
            db.refresh(bahasa)
            return bahasa.to_dict()

    def delete_bahasa(self, bahasa_id: int) -> None:
        with get_db_context() as db:
            bahasa = integrity.get_or_404(db, BahasaPemrograman, bahasa_id, "Bahasa pemrograman tidak ditemukan")
            integrity.ensure_unused(
                db, Aplikasi.id_bahasa, bahasa_id,
                "Tidak dapat menghapus bahasa pemrograman yang digunakan oleh aplikasi"
            )
            db.delete(bahasa)
            integrity.commit_or_conflict(
                db, "Tidak dapat menghapus bahasa pemrograman yang digunakan oleh aplikasi"
            )

    # ==================== FRAMEWORK ====================

    def list_framework(self, params: ListParams) -> Dict[str, Any]:
        return self._list_with_count(FRAMEWORK_LIST, params)

    def get_framework(self, framework_id: int) -> Dict[str, Any]:
        with get_db_context() as db:
            framework = integrity.get_or_404(db, Framework, framework_id, "Framework tidak ditemukan")
            result = framework.to_dict()
            result["aplikasiCount"] = integrity.count_references(db, Aplikasi.id_framework, framework_id)
            return result

    def create_framework(self, data: FrameworkCreate) -> Dict[str, Any]:
        with get_db_context() as db:
            integrity.ensure_unique_name(db, Framework, data.nama, "Framework dengan nama tersebut sudah ada")
            framework = Framework(nama=data.nama)
            db.add(framework)
            integrity.commit_or_conflict(db, "Framework dengan nama tersebut sudah ada")
            db.refresh(framework)
            return framework.to_dict()

    def update_framework(self, framework_id: int, data: FrameworkUpdate) -> Dict[str, Any]:
        with get_db_context() as db:
            framework = integrity.get_or_404(db, Framework, framework_id, "Framework tidak ditemukan")
            changes = data.model_dump(exclude_unset=True)
            integrity.ensure_unique_name(
                db, Framework, changes.get("nama"),
                "Framework dengan nama tersebut sudah ada", exclude_id=framework_id
            )
            for key, value in changes.items():
                setattr(framework, key, value)
            framework.updated_at = datetime.utcnow()

            integrity.commit_or_conflict(db, "Framework dengan nama tersebut sudah ada")
            db.refresh(framework)
            return framework.to_dict()

    def delete_framework(self, framework_id: int) -> None:
        with get_db_context() as db:
            framework = integrity.get_or_404(db, Framework, framework_id, "Framework tidak ditemukan")
            integrity.ensure_unused(
                db, Aplikasi.id_framework, framework_id,
                "Tidak dapat menghapus framework yang digunakan oleh aplikasi"
            )
            db.delete(framework)
            integrity.commit_or_conflict(db, "Tidak dapat menghapus framework yang digunakan oleh aplikasi")

    # ==================== HELPERS ====================

    def _list_with_count(self, spec: ListSpec, params: ListParams) -> Dict[str, Any]:
        """List bahasa/framework, setiap baris membawa jumlah aplikasi pemakainya"""
        with get_db_context() as db:
            conditions = build_conditions(spec, params)
            rows, total = fetch_page(
                db, spec, params, conditions,
                entities=(spec.model, func.count(Aplikasi.id).label("aplikasi_count")),
                group_by=(spec.model.id,),
            )
            data = []
            for record, aplikasi_count in rows:
                item = record.to_dict()
                item["aplikasiCount"] = aplikasi_count or 0
                data.append(item)
            return calculate_pagination(data, params.page, params.limit, total)


# Singleton instance
referensi_service = ReferensiService()
