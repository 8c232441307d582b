"""
Seed Service - data contoh inventaris aplikasi Kabupaten Ngawi

Dipakai oleh script seed_data.py. Seeding dilewati jika tabel aplikasi
sudah berisi data, sehingga aman dijalankan berulang kali.
"""
import logging
from typing import Dict

from app.database import get_db_context
from app.models import (
    Aplikasi,
    AplikasiVendor,
    BahasaPemrograman,
    Framework,
    PerangkatDaerah,
    Pic,
    Vendor,
)

logger = logging.getLogger(__name__)


PERANGKAT_DAERAH_DATA = [
    {
        "nama": "Dinas Komunikasi dan Informatika",
        "jenis": "Dinas",
        "alamat": "Jl. A. Yani No. 45 Ngawi",
        "kepala_dinas": "Dr. Budi Santoso, S.T., M.T.",
    },
    {
        "nama": "Dinas Kependudukan dan Catatan Sipil",
        "jenis": "Dinas",
        "alamat": "Jl. Merdeka No. 12 Ngawi",
        "kepala_dinas": "Drs. Ahmad Wijaya, M.M.",
    },
    {
        "nama": "Badan Perencanaan Pembangunan Daerah",
        "jenis": "Badan",
        "alamat": "Jl. Pangeran Diponegoro No. 8 Ngawi",
        "kepala_dinas": "Ir. Siti Nurjanah, M.M.",
    },
    {
        "nama": "RSUD Dr. Soeroto Ngawi",
        "jenis": "Rumah Sakit",
        "alamat": "Jl. KH. Ahmad Dahlan No. 34 Ngawi",
        "kepala_dinas": "dr. Hari Purnomo, Sp.PD.",
    },
]

BAHASA_DATA = ["JavaScript", "TypeScript", "Python", "PHP", "Java", "C#", "Go", "Ruby"]

FRAMEWORK_DATA = [
    "React", "Next.js", "Vue.js", "Angular", "Laravel",
    "Django", "Express.js", "Spring Boot", "ASP.NET Core",
]

VENDOR_DATA = [
    {
        "nama_vendor": "PT. Teknologi Kreatif Indonesia",
        "kontak": "info@teknologikreatif.id",
        "alamat": "Jl. Sudirman No. 123 Surabaya",
    },
    {
        "nama_vendor": "CV. Solusi Digital Nusantara",
        "kontak": "contact@solusidigital.com",
        "alamat": "Jl. Gajah Mada No. 45 Madiun",
    },
    {
        "nama_vendor": "PT. Inovasi Masa Depan",
        "kontak": "admin@inovasimasa.id",
        "alamat": "Jl. Pemuda No. 67 Kediri",
    },
]

# Referensi ditulis dengan nama agar tidak bergantung pada urutan ID
APLIKASI_DATA = [
    {
        "nama": "Sistem Informasi Manajemen Karyawan",
        "deskripsi": "Aplikasi untuk mengelola data karyawan, kehadiran, dan penggajian",
        "status": "aktif",
        "platform": "web",
        "url_aplikasi": "https://simk.ngawikab.go.id",
        "tahun_dibuat": 2022,
        "anggaran": 250000000,
        "perangkat_daerah": "Dinas Komunikasi dan Informatika",
        "bahasa": "TypeScript",
        "framework": "Next.js",
    },
    {
        "nama": "E-KTP Ngawi",
        "deskripsi": "Aplikasi pelayanan administrasi kependudukan online",
        "status": "aktif",
        "platform": "web",
        "url_aplikasi": "https://ektp.ngawikab.go.id",
        "tahun_dibuat": 2023,
        "anggaran": 450000000,
        "perangkat_daerah": "Dinas Kependudukan dan Catatan Sipil",
        "bahasa": "PHP",
        "framework": "Laravel",
    },
    {
        "nama": "Sistem Informasi Rumah Sakit",
        "deskripsi": "Aplikasi manajemen rumah sakit terintegrasi",
        "status": "aktif",
        "platform": "web",
        "url_aplikasi": "https://sirs.rsudsoeroto.ngawikab.go.id",
        "tahun_dibuat": 2021,
        "anggaran": 750000000,
        "perangkat_daerah": "RSUD Dr. Soeroto Ngawi",
        "bahasa": "Python",
        "framework": "Django",
    },
    {
        "nama": "Aplikasi Pengaduan Masyarakat",
        "deskripsi": "Platform untuk pengaduan dan aspirasi masyarakat",
        "status": "pengembangan",
        "platform": "mobile",
        "url_aplikasi": None,
        "tahun_dibuat": 2024,
        "anggaran": 300000000,
        "perangkat_daerah": "Dinas Komunikasi dan Informatika",
        "bahasa": "JavaScript",
        "framework": "Vue.js",
    },
    {
        "nama": "Sistem Perencanaan Pembangunan",
        "deskripsi": "Aplikasi untuk perencanaan dan monitoring pembangunan daerah",
        "status": "tidak aktif",
        "platform": "web",
        "url_aplikasi": "https://sippd.ngawikab.go.id",
        "tahun_dibuat": 2020,
        "anggaran": 500000000,
        "perangkat_daerah": "Badan Perencanaan Pembangunan Daerah",
        "bahasa": "TypeScript",
        "framework": "React",
    },
]

# (nama, jabatan, kontak, nama aplikasi)
PIC_DATA = [
    ("Andi Pratama", "Kepala Bidang Teknologi", "andi.pratama@ngawikab.go.id",
     "Sistem Informasi Manajemen Karyawan"),
    ("Rina Susanti", "Administrator Sistem", "rina.susanti@ngawikab.go.id",
     "Sistem Informasi Manajemen Karyawan"),
    ("Budi Hartono", "Kepala Seksi Kependudukan", "budi.hartono@ngawikab.go.id",
     "E-KTP Ngawi"),
    ("Dr. Siti Nurhaliza", "Kepala Instalasi IT", "siti.nurhaliza@rsudsoeroto.ngawikab.go.id",
     "Sistem Informasi Rumah Sakit"),
    ("Ahmad Fadli", "Developer", "ahmad.fadli@ngawikab.go.id",
     "Aplikasi Pengaduan Masyarakat"),
]

# (nama aplikasi, nama vendor)
APLIKASI_VENDOR_DATA = [
    ("Sistem Informasi Manajemen Karyawan", "PT. Teknologi Kreatif Indonesia"),
    ("E-KTP Ngawi", "CV. Solusi Digital Nusantara"),
    ("Sistem Informasi Rumah Sakit", "PT. Inovasi Masa Depan"),
    ("Aplikasi Pengaduan Masyarakat", "PT. Teknologi Kreatif Indonesia"),
    ("Sistem Perencanaan Pembangunan", "CV. Solusi Digital Nusantara"),
]


class SeedService:
    """Service untuk mengisi database dengan data contoh"""

    def seed(self) -> Dict[str, int]:
        """
        Masukkan semua data contoh dalam satu transaksi.

        Returns jumlah baris per tabel, atau dict kosong jika database
        sudah berisi aplikasi.
        """
        with get_db_context() as db:
            if db.query(Aplikasi.id).first() is not None:
                logger.info("Data aplikasi sudah ada, seeding dilewati")
                return {}

            perangkat = {}
            for item in PERANGKAT_DAERAH_DATA:
                perangkat[item["nama"]] = PerangkatDaerah(**item)
            bahasa = {nama: self._get_or_create(db, BahasaPemrograman, nama) for nama in BAHASA_DATA}
            framework = {nama: self._get_or_create(db, Framework, nama) for nama in FRAMEWORK_DATA}
            vendor = {item["nama_vendor"]: Vendor(**item) for item in VENDOR_DATA}
            db.add_all(list(perangkat.values()) + list(vendor.values()))

            aplikasi = {}
            for item in APLIKASI_DATA:
                data = dict(item)
                aplikasi[data["nama"]] = Aplikasi(
                    perangkat_daerah=perangkat[data.pop("perangkat_daerah")],
                    bahasa_pemrograman=bahasa[data.pop("bahasa")],
                    framework=framework[data.pop("framework")],
                    **data
                )
            db.add_all(aplikasi.values())

            pic_rows = [
                Pic(nama=nama, jabatan=jabatan, kontak=kontak, aplikasi=aplikasi[nama_aplikasi])
                for nama, jabatan, kontak, nama_aplikasi in PIC_DATA
            ]
            relasi_rows = [
                AplikasiVendor(aplikasi=aplikasi[nama_aplikasi], vendor=vendor[nama_vendor])
                for nama_aplikasi, nama_vendor in APLIKASI_VENDOR_DATA
            ]
            db.add_all(pic_rows + relasi_rows)
            db.commit()

            result = {
                "perangkat_daerah": len(perangkat),
                "bahasa_pemrograman": len(bahasa),
                "framework": len(framework),
                "vendor": len(vendor),
                "aplikasi": len(aplikasi),
                "pic": len(pic_rows),
                "aplikasi_vendor": len(relasi_rows),
            }
            logger.info("Seeding selesai: %s", result)
            return result

    def _get_or_create(self, db, model, nama: str):
        # Nama bahasa/framework unik, bisa jadi sudah diinput manual
        record = db.query(model).filter(model.nama == nama).first()
        if record is None:
            record = model(nama=nama)
            db.add(record)
        return record


# Singleton instance
seed_service = SeedService()
