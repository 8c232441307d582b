"""
Script untuk memasukkan data contoh inventaris aplikasi ke database
- Perangkat Daerah: Diskominfo, Dispendukcapil, Bappeda, RSUD Dr. Soeroto
- Bahasa Pemrograman & Framework populer
- Vendor, Aplikasi, PIC, dan relasi Aplikasi-Vendor

Usage: python seed_data.py
"""
import logging

from app.database import init_db
from app.services.seed_service import seed_service


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 50)
    print("  Seeding database...")
    print("=" * 50)

    init_db()
    result = seed_service.seed()

    if not result:
        print("[Seed] Database sudah berisi aplikasi, tidak ada data yang ditambahkan")
    else:
        for table, count in result.items():
            print(f"[Seed] Inserted {count} {table}")
        print("[Seed] Database seeded successfully!")
