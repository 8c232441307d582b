"""
Pytest Configuration and Fixtures
"""
import os
import tempfile

# Database test memakai SQLite sementara; harus di-set sebelum app.config di-import
_TEST_DB_DIR = tempfile.mkdtemp(prefix="inventaris-test-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TEST_DB_DIR, "test.db")
os.environ["SECRET_KEY"] = "inventaris-test-secret"
os.environ["DEFAULT_ADMIN_USERNAME"] = "admin"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin123"

import pytest
from contextlib import contextmanager
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport


@pytest.fixture(autouse=True)
def reset_database():
    """Setiap test mulai dari database kosong"""
    import app.models  # noqa: F401
    from app.database import Base, engine

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def mock_db_session():
    """Mock database session for unit tests"""
    session = MagicMock()
    session.query.return_value = session
    session.filter.return_value = session
    session.first.return_value = None
    session.all.return_value = []
    return session


@pytest.fixture
def mock_db_context(mock_db_session):
    """Mock get_db_context context manager"""

    @contextmanager
    def _mock_context():
        yield mock_db_session

    return _mock_context


@pytest.fixture
def db_session():
    """Session nyata ke database test, untuk memeriksa isi tabel secara langsung"""
    from app.database import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_client():
    """
    Test client dengan lifespan aktif, sehingga tabel dan admin default
    sudah dibuat sebelum request pertama.
    """
    from app.main import app

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
async def async_client():
    """Create async test client for async API testing"""
    from app.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


@pytest.fixture
def sample_user_data():
    """Sample user data for testing"""
    return {
        "username": "testuser",
        "email": "test@example.com",
        "password": "testpass123",
        "full_name": "Test User"
    }


@pytest.fixture
def admin_token(test_client):
    """Token admin default untuk route yang butuh login"""
    from app.services.auth_service import auth_service

    return auth_service.create_access_token(
        data={"sub": "admin", "user_id": 1, "is_admin": True}
    )


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


# ==================== DATA HELPERS ====================

@pytest.fixture
def create_entity(test_client, auth_headers):
    """
    Factory: POST ke endpoint entitas dan kembalikan `data` hasilnya.

    Contoh: create_entity("/api/bahasa-pemrograman", {"nama": "Python"})
    """

    def _create(path: str, payload: dict) -> dict:
        response = test_client.post(path, json=payload, headers=auth_headers)
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def referensi(create_entity):
    """Satu perangkat daerah, bahasa, framework, dan vendor siap pakai"""
    return {
        "perangkat_daerah": create_entity("/api/perangkat-daerah", {
            "nama": "Dinas Komunikasi dan Informatika",
            "jenis": "Dinas",
            "alamat": "Jl. A. Yani No. 45 Ngawi",
            "kepalaDinas": "Dr. Budi Santoso, S.T., M.T."
        }),
        "bahasa": create_entity("/api/bahasa-pemrograman", {"nama": "Python"}),
        "framework": create_entity("/api/framework", {"nama": "Django"}),
        "vendor": create_entity("/api/vendor", {
            "namaVendor": "PT. Teknologi Kreatif Indonesia",
            "kontak": "info@teknologikreatif.id",
            "alamat": "Jl. Sudirman No. 123 Surabaya"
        }),
    }


@pytest.fixture
def sample_aplikasi_data(referensi):
    return {
        "nama": "Sistem Informasi Rumah Sakit",
        "deskripsi": "Aplikasi manajemen rumah sakit terintegrasi",
        "status": "aktif",
        "platform": "web",
        "urlAplikasi": "https://sirs.rsudsoeroto.ngawikab.go.id",
        "tahunDibuat": 2021,
        "anggaran": 750000000,
        "idPerangkatDaerah": referensi["perangkat_daerah"]["id"],
        "idBahasa": referensi["bahasa"]["id"],
        "idFramework": referensi["framework"]["id"]
    }
