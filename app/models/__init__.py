"""
Models package for Inventaris Aplikasi
"""
from app.database import Base
from app.models.inventaris_models import (
    PerangkatDaerah,
    BahasaPemrograman,
    Framework,
    Aplikasi,
    Pic,
    Vendor,
    AplikasiVendor,
)
from app.models.user_models import User

__all__ = [
    "Base",
    "PerangkatDaerah",
    "BahasaPemrograman",
    "Framework",
    "Aplikasi",
    "Pic",
    "Vendor",
    "AplikasiVendor",
    "User",
]
