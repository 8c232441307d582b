"""
SQLAlchemy Models untuk Inventaris Aplikasi
"""
from datetime import datetime
from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database import Base


def _iso(value):
    return value.isoformat() if value else None


class PerangkatDaerah(Base):
    """Model untuk tabel perangkat_daerah (dinas/badan pemilik aplikasi)"""
    __tablename__ = "perangkat_daerah"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nama = Column(String(255), nullable=False, index=True)
    jenis = Column(String(100), nullable=True)
    alamat = Column(Text, nullable=True)
    kepala_dinas = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationship
    aplikasi = relationship("Aplikasi", back_populates="perangkat_daerah", passive_deletes=True)

    def to_dict(self, fields=None):
        result = {
            "id": self.id,
            "nama": self.nama,
            "jenis": self.jenis,
            "alamat": self.alamat,
            "kepalaDinas": self.kepala_dinas,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at)
        }
        if fields:
            return {key: result[key] for key in fields}
        return result


class BahasaPemrograman(Base):
    """Model untuk tabel bahasa_pemrograman"""
    __tablename__ = "bahasa_pemrograman"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nama = Column(String(100), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    aplikasi = relationship("Aplikasi", back_populates="bahasa_pemrograman", passive_deletes=True)

    def to_dict(self, fields=None):
        result = {
            "id": self.id,
            "nama": self.nama,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at)
        }
        if fields:
            return {key: result[key] for key in fields}
        return result


class Framework(Base):
    """Model untuk tabel framework"""
    __tablename__ = "framework"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nama = Column(String(100), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    aplikasi = relationship("Aplikasi", back_populates="framework", passive_deletes=True)

    def to_dict(self, fields=None):
        result = {
            "id": self.id,
            "nama": self.nama,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at)
        }
        if fields:
            return {key: result[key] for key in fields}
        return result


class Aplikasi(Base):
    """Model untuk tabel aplikasi (entitas utama inventaris)"""
    __tablename__ = "aplikasi"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nama = Column(String(255), nullable=False, index=True)
    deskripsi = Column(Text, nullable=True)
    status = Column(String(50), nullable=True, index=True)  # aktif, tidak aktif, pengembangan, maintenance
    platform = Column(String(50), nullable=True)  # web, mobile, desktop, hybrid
    url_aplikasi = Column(Text, nullable=True)
    tahun_dibuat = Column(Integer, nullable=True)
    anggaran = Column(BigInteger, nullable=True)
    id_perangkat_daerah = Column(
        Integer, ForeignKey("perangkat_daerah.id", ondelete="SET NULL"), nullable=True, index=True
    )
    id_bahasa = Column(Integer, ForeignKey("bahasa_pemrograman.id", ondelete="SET NULL"), nullable=True)
    id_framework = Column(Integer, ForeignKey("framework.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    perangkat_daerah = relationship("PerangkatDaerah", back_populates="aplikasi")
    bahasa_pemrograman = relationship("BahasaPemrograman", back_populates="aplikasi")
    framework = relationship("Framework", back_populates="aplikasi")
    pic = relationship("Pic", back_populates="aplikasi", cascade="all, delete-orphan", passive_deletes=True)
    aplikasi_vendor = relationship(
        "AplikasiVendor", back_populates="aplikasi", cascade="all, delete-orphan", passive_deletes=True
    )

    def to_dict(self, include_relations=False, detail=False):
        result = {
            "id": self.id,
            "nama": self.nama,
            "deskripsi": self.deskripsi,
            "status": self.status,
            "platform": self.platform,
            "urlAplikasi": self.url_aplikasi,
            "tahunDibuat": self.tahun_dibuat,
            "anggaran": self.anggaran,
            "idPerangkatDaerah": self.id_perangkat_daerah,
            "idBahasa": self.id_bahasa,
            "idFramework": self.id_framework,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at)
        }
        if include_relations:
            perangkat_fields = ("id", "nama", "jenis", "alamat", "kepalaDinas") if detail else ("id", "nama", "jenis")
            result["perangkatDaerah"] = (
                self.perangkat_daerah.to_dict(fields=perangkat_fields) if self.perangkat_daerah else None
            )
            result["bahasaPemrograman"] = (
                self.bahasa_pemrograman.to_dict(fields=("id", "nama")) if self.bahasa_pemrograman else None
            )
            result["framework"] = self.framework.to_dict(fields=("id", "nama")) if self.framework else None
        return result


class Pic(Base):
    """Model untuk tabel pic (person in charge aplikasi)"""
    __tablename__ = "pic"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nama = Column(String(255), nullable=False, index=True)
    jabatan = Column(String(255), nullable=True)
    kontak = Column(String(100), nullable=True)
    id_aplikasi = Column(Integer, ForeignKey("aplikasi.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    aplikasi = relationship("Aplikasi", back_populates="pic")

    def to_dict(self, include_aplikasi=False):
        result = {
            "id": self.id,
            "nama": self.nama,
            "jabatan": self.jabatan,
            "kontak": self.kontak,
            "idAplikasi": self.id_aplikasi,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at)
        }
        if include_aplikasi:
            result["aplikasi"] = (
                {"id": self.aplikasi.id, "nama": self.aplikasi.nama, "status": self.aplikasi.status}
                if self.aplikasi else None
            )
        return result


class Vendor(Base):
    """Model untuk tabel vendor"""
    __tablename__ = "vendor"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nama_vendor = Column(String(255), nullable=False, index=True)
    kontak = Column(String(100), nullable=True)
    alamat = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    aplikasi_vendor = relationship("AplikasiVendor", back_populates="vendor", passive_deletes=True)

    def to_dict(self, fields=None):
        result = {
            "id": self.id,
            "namaVendor": self.nama_vendor,
            "kontak": self.kontak,
            "alamat": self.alamat,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at)
        }
        if fields:
            return {key: result[key] for key in fields}
        return result


class AplikasiVendor(Base):
    """Model untuk tabel aplikasi_vendor (relasi many-to-many aplikasi dan vendor)"""
    __tablename__ = "aplikasi_vendor"
    __table_args__ = (
        UniqueConstraint("id_aplikasi", "id_vendor", name="aplikasi_vendor_unique_idx"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    id_aplikasi = Column(Integer, ForeignKey("aplikasi.id", ondelete="CASCADE"), nullable=False)
    id_vendor = Column(Integer, ForeignKey("vendor.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    aplikasi = relationship("Aplikasi", back_populates="aplikasi_vendor")
    vendor = relationship("Vendor", back_populates="aplikasi_vendor")

    def to_dict(self, include_relations=False, detail=False):
        result = {
            "id": self.id,
            "idAplikasi": self.id_aplikasi,
            "idVendor": self.id_vendor,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at)
        }
        if include_relations:
            if detail:
                aplikasi_fields = ("id", "nama", "deskripsi", "status", "platform", "urlAplikasi", "tahunDibuat")
                vendor_fields = ("id", "namaVendor", "kontak", "alamat")
            else:
                aplikasi_fields = ("id", "nama", "status", "platform")
                vendor_fields = ("id", "namaVendor", "kontak")
            aplikasi = self.aplikasi.to_dict() if self.aplikasi else None
            result["aplikasi"] = {key: aplikasi[key] for key in aplikasi_fields} if aplikasi else None
            result["vendor"] = self.vendor.to_dict(fields=vendor_fields) if self.vendor else None
        return result
