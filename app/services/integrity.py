"""
Referential-Integrity Guard

Pemeriksaan sebelum insert/update/delete. Dijalankan di session yang sama
dengan mutasinya sehingga pemeriksaan dan perubahan berada dalam satu
transaksi; constraint database tetap menjadi pengaman terakhir.
"""
from typing import Any, Dict, Iterable, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError, ReferenceNotFoundError
from app.models import AplikasiVendor


def get_or_404(db: Session, model, record_id: int, message: str):
    """Ambil baris berdasarkan ID atau raise NotFoundError (404)"""
    record = db.query(model).filter(model.id == record_id).first()
    if record is None:
        raise NotFoundError(message)
    return record


def ensure_exists(db: Session, model, record_id: Optional[int], message: str) -> None:
    """Foreign key non-null harus menunjuk ke baris yang ada"""
    if record_id is None:
        return
    found = db.query(model.id).filter(model.id == record_id).first()
    if found is None:
        raise ReferenceNotFoundError(message)


def ensure_references(db: Session, payload: Dict[str, Any], references: Iterable[Tuple[str, Any, str]]) -> None:
    """
    Periksa setiap foreign key yang ada di payload.

    `references` berisi tuple (nama_field, model_tujuan, pesan_error). Field
    yang tidak ada di payload dilewati, sehingga fungsi yang sama dipakai
    untuk create dan partial update.
    """
    for field_name, model, message in references:
        if field_name in payload:
            ensure_exists(db, model, payload[field_name], message)


def count_references(db: Session, column, record_id: int) -> int:
    return db.query(func.count(column)).filter(column == record_id).scalar() or 0


def ensure_unused(db: Session, column, record_id: int, message: str) -> None:
    """Tolak delete selama masih ada baris yang mereferensikan record ini"""
    if count_references(db, column, record_id) > 0:
        raise ConflictError(message)


def ensure_unique_name(db: Session, model, nama: Optional[str], message: str, exclude_id: int = None) -> None:
    """Nama harus unik; exclude_id dipakai saat rename record itu sendiri"""
    if nama is None:
        return
    query = db.query(model.id).filter(model.nama == nama)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first() is not None:
        raise ConflictError(message)


def ensure_unique_pair(db: Session, id_aplikasi: int, id_vendor: int, exclude_id: int = None) -> None:
    """Satu vendor hanya boleh terhubung sekali ke aplikasi yang sama"""
    query = db.query(AplikasiVendor.id).filter(
        AplikasiVendor.id_aplikasi == id_aplikasi,
        AplikasiVendor.id_vendor == id_vendor
    )
    if exclude_id is not None:
        query = query.filter(AplikasiVendor.id != exclude_id)
    if query.first() is not None:
        raise ConflictError("Hubungan aplikasi-vendor ini sudah ada")


def commit_or_conflict(db: Session, message: str) -> None:
    """Commit; pelanggaran constraint dari database dilaporkan sebagai konflik"""
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(message)
