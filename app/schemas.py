"""
Pydantic Schemas untuk Inventaris Aplikasi

Schema create dan update ditulis terpisah per entitas. Keduanya memakai
fungsi aturan yang sama sehingga field yang dikirim pada update harus
memenuhi batasan yang sama dengan create.
"""
from datetime import date
from typing import Literal, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel


STATUS_APLIKASI = ("aktif", "tidak aktif", "pengembangan", "maintenance")
PLATFORM_APLIKASI = ("web", "mobile", "desktop", "hybrid")
TAHUN_MINIMUM = 1990

# Batas kolom INT dan BIGINT di database
MAX_ID = 2 ** 31 - 1
MAX_ANGGARAN = 2 ** 63 - 1

_url_adapter = TypeAdapter(AnyUrl)


# === Aturan validasi bersama ===

def teks_wajib(value: Optional[str], pesan_wajib: str, max_length: int = None) -> str:
    """Teks wajib: tidak boleh null/kosong dan tidak melebihi max_length"""
    if value is None or value == "":
        raise ValueError(pesan_wajib)
    return teks_opsional(value, max_length)


def teks_opsional(value: Optional[str], max_length: int = None) -> Optional[str]:
    if value is not None and max_length is not None and len(value) > max_length:
        raise ValueError(f"Maksimal {max_length} karakter")
    return value


def pilihan(value: Optional[str], options: tuple, label: str) -> Optional[str]:
    if value is not None and value not in options:
        raise ValueError(f"{label} harus salah satu dari: {', '.join(options)}")
    return value


def url_valid(value: Optional[str]) -> Optional[str]:
    """URL harus well-formed; string kosong diterima apa adanya"""
    if value is None or value == "":
        return value
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("URL tidak valid")
    return value


def tahun_valid(value: Optional[int]) -> Optional[int]:
    if value is None:
        return value
    tahun_maksimum = date.today().year + 1
    if value < TAHUN_MINIMUM or value > tahun_maksimum:
        raise ValueError(f"Tahun dibuat harus antara {TAHUN_MINIMUM} dan {tahun_maksimum}")
    return value


def anggaran_valid(value: Optional[int]) -> Optional[int]:
    if value is not None and value < 0:
        raise ValueError("Anggaran tidak boleh negatif")
    if value is not None and value > MAX_ANGGARAN:
        raise ValueError(f"Anggaran maksimal {MAX_ANGGARAN}")
    return value


def id_positif(value: Optional[int], label: str, wajib: bool = False) -> Optional[int]:
    if value is None:
        if wajib:
            raise ValueError(f"{label} wajib diisi")
        return value
    if value <= 0:
        raise ValueError(f"{label} harus berupa bilangan bulat positif")
    if value > MAX_ID:
        raise ValueError(f"{label} tidak valid")
    return value


class CamelModel(BaseModel):
    """Base schema: atribut snake_case, JSON camelCase"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# === Perangkat Daerah ===

class PerangkatDaerahCreate(CamelModel):
    """Schema untuk membuat perangkat daerah baru"""
    nama: str
    jenis: Optional[str] = None
    alamat: Optional[str] = None
    kepala_dinas: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "nama": "Dinas Komunikasi dan Informatika",
                "jenis": "Dinas",
                "alamat": "Jl. A. Yani No. 45 Ngawi",
                "kepalaDinas": "Dr. Budi Santoso, S.T., M.T."
            }
        }
    )

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama wajib diisi", 255)

    @field_validator("jenis")
    @classmethod
    def validate_jenis(cls, value):
        return teks_opsional(value, 100)

    @field_validator("kepala_dinas")
    @classmethod
    def validate_kepala_dinas(cls, value):
        return teks_opsional(value, 255)


class PerangkatDaerahUpdate(CamelModel):
    """Schema untuk update perangkat daerah"""
    nama: Optional[str] = None
    jenis: Optional[str] = None
    alamat: Optional[str] = None
    kepala_dinas: Optional[str] = None

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama wajib diisi", 255)

    @field_validator("jenis")
    @classmethod
    def validate_jenis(cls, value):
        return teks_opsional(value, 100)

    @field_validator("kepala_dinas")
    @classmethod
    def validate_kepala_dinas(cls, value):
        return teks_opsional(value, 255)


# === Bahasa Pemrograman ===

class BahasaPemrogramanCreate(CamelModel):
    nama: str

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama bahasa pemrograman wajib diisi", 100)


class BahasaPemrogramanUpdate(CamelModel):
    nama: Optional[str] = None

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama bahasa pemrograman wajib diisi", 100)


# === Framework ===

class FrameworkCreate(CamelModel):
    nama: str

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama framework wajib diisi", 100)


class FrameworkUpdate(CamelModel):
    nama: Optional[str] = None

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama framework wajib diisi", 100)


# === Aplikasi ===

class AplikasiCreate(CamelModel):
    """Schema untuk membuat aplikasi baru"""
    nama: str
    deskripsi: Optional[str] = None
    status: Optional[str] = None
    platform: Optional[str] = None
    url_aplikasi: Optional[str] = None
    tahun_dibuat: Optional[int] = None
    anggaran: Optional[int] = None
    id_perangkat_daerah: Optional[int] = None
    id_bahasa: Optional[int] = None
    id_framework: Optional[int] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "nama": "E-KTP Ngawi",
                "deskripsi": "Aplikasi pelayanan administrasi kependudukan online",
                "status": "aktif",
                "platform": "web",
                "urlAplikasi": "https://ektp.ngawikab.go.id",
                "tahunDibuat": 2023,
                "anggaran": 450000000,
                "idPerangkatDaerah": 2,
                "idBahasa": 4,
                "idFramework": 5
            }
        }
    )

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama aplikasi wajib diisi", 255)

    @field_validator("status")
    @classmethod
    def validate_status(cls, value):
        return pilihan(value, STATUS_APLIKASI, "Status")

    @field_validator("platform")
    @classmethod
    def validate_platform(cls, value):
        return pilihan(value, PLATFORM_APLIKASI, "Platform")

    @field_validator("url_aplikasi")
    @classmethod
    def validate_url(cls, value):
        return url_valid(value)

    @field_validator("tahun_dibuat")
    @classmethod
    def validate_tahun(cls, value):
        return tahun_valid(value)

    @field_validator("anggaran")
    @classmethod
    def validate_anggaran(cls, value):
        return anggaran_valid(value)

    @field_validator("id_perangkat_daerah", "id_bahasa", "id_framework")
    @classmethod
    def validate_foreign_keys(cls, value, info):
        return id_positif(value, to_camel(info.field_name))


class AplikasiUpdate(CamelModel):
    """Schema untuk update aplikasi, semua field opsional"""
    nama: Optional[str] = None
    deskripsi: Optional[str] = None
    status: Optional[str] = None
    platform: Optional[str] = None
    url_aplikasi: Optional[str] = None
    tahun_dibuat: Optional[int] = None
    anggaran: Optional[int] = None
    id_perangkat_daerah: Optional[int] = None
    id_bahasa: Optional[int] = None
    id_framework: Optional[int] = None

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama aplikasi wajib diisi", 255)

    @field_validator("status")
    @classmethod
    def validate_status(cls, value):
        return pilihan(value, STATUS_APLIKASI, "Status")

    @field_validator("platform")
    @classmethod
    def validate_platform(cls, value):
        return pilihan(value, PLATFORM_APLIKASI, "Platform")

    @field_validator("url_aplikasi")
    @classmethod
    def validate_url(cls, value):
        return url_valid(value)

    @field_validator("tahun_dibuat")
    @classmethod
    def validate_tahun(cls, value):
        return tahun_valid(value)

    @field_validator("anggaran")
    @classmethod
    def validate_anggaran(cls, value):
        return anggaran_valid(value)

    @field_validator("id_perangkat_daerah", "id_bahasa", "id_framework")
    @classmethod
    def validate_foreign_keys(cls, value, info):
        return id_positif(value, to_camel(info.field_name))


# === PIC ===

class PicCreate(CamelModel):
    nama: str
    jabatan: Optional[str] = None
    kontak: Optional[str] = None
    id_aplikasi: int

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama PIC wajib diisi", 255)

    @field_validator("jabatan")
    @classmethod
    def validate_jabatan(cls, value):
        return teks_opsional(value, 255)

    @field_validator("kontak")
    @classmethod
    def validate_kontak(cls, value):
        return teks_opsional(value, 100)

    @field_validator("id_aplikasi")
    @classmethod
    def validate_id_aplikasi(cls, value):
        return id_positif(value, "idAplikasi", wajib=True)


class PicUpdate(CamelModel):
    nama: Optional[str] = None
    jabatan: Optional[str] = None
    kontak: Optional[str] = None
    id_aplikasi: Optional[int] = None

    @field_validator("nama")
    @classmethod
    def validate_nama(cls, value):
        return teks_wajib(value, "Nama PIC wajib diisi", 255)

    @field_validator("jabatan")
    @classmethod
    def validate_jabatan(cls, value):
        return teks_opsional(value, 255)

    @field_validator("kontak")
    @classmethod
    def validate_kontak(cls, value):
        return teks_opsional(value, 100)

    @field_validator("id_aplikasi")
    @classmethod
    def validate_id_aplikasi(cls, value):
        return id_positif(value, "idAplikasi", wajib=True)


# === Vendor ===

class VendorCreate(CamelModel):
    nama_vendor: str
    kontak: Optional[str] = None
    alamat: Optional[str] = None

    @field_validator("nama_vendor")
    @classmethod
    def validate_nama_vendor(cls, value):
        return teks_wajib(value, "Nama vendor wajib diisi", 255)

    @field_validator("kontak")
    @classmethod
    def validate_kontak(cls, value):
        return teks_opsional(value, 100)


class VendorUpdate(CamelModel):
    nama_vendor: Optional[str] = None
    kontak: Optional[str] = None
    alamat: Optional[str] = None

    @field_validator("nama_vendor")
    @classmethod
    def validate_nama_vendor(cls, value):
        return teks_wajib(value, "Nama vendor wajib diisi", 255)

    @field_validator("kontak")
    @classmethod
    def validate_kontak(cls, value):
        return teks_opsional(value, 100)


# === Aplikasi Vendor ===

class AplikasiVendorCreate(CamelModel):
    id_aplikasi: int
    id_vendor: int

    @field_validator("id_aplikasi", "id_vendor")
    @classmethod
    def validate_ids(cls, value, info):
        return id_positif(value, to_camel(info.field_name), wajib=True)


class AplikasiVendorUpdate(CamelModel):
    id_aplikasi: Optional[int] = None
    id_vendor: Optional[int] = None

    @field_validator("id_aplikasi", "id_vendor")
    @classmethod
    def validate_ids(cls, value, info):
        return id_positif(value, to_camel(info.field_name), wajib=True)


# === Query list ===

class ListParams(BaseModel):
    """Parameter pagination, sorting, pencarian, dan filter untuk endpoint list"""
    page: int = 1
    limit: int = 10
    sort_by: str = "createdAt"
    sort_order: Literal["asc", "desc"] = "desc"
    search: Optional[str] = None
    status: Optional[str] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
