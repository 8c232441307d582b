"""
Test API Endpoints umum: health, info, envelope error
"""
import pytest
from fastapi import status


class TestHealthEndpoint:
    """Test health check endpoint"""

    def test_health_check(self, test_client):
        response = test_client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["data"]["database"]["status"] == "connected"

    def test_health_check_database_down(self, test_client, monkeypatch):
        import app.api.routes as routes

        monkeypatch.setattr(
            routes, "test_connection",
            lambda: {"status": "error", "message": "Database tidak dapat dihubungi"}
        )
        response = test_client.get("/api/health")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["success"] is False

    def test_api_info(self, test_client):
        response = test_client.get("/api-info")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Inventaris Aplikasi"
        assert "version" in data

    async def test_health_check_async(self, async_client):
        response = await async_client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK


class TestErrorEnvelope:
    """Setiap error dirender sebagai {success: false, error}"""

    def test_unknown_route(self, test_client):
        response = test_client.get("/api/tidak-ada")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["success"] is False

    @pytest.mark.parametrize("path", [
        "/api/perangkat-daerah/abc",
        "/api/bahasa-pemrograman/0",
        "/api/framework/-3",
        "/api/aplikasi/1.5",
        "/api/pic/x",
        "/api/vendor/0",
        "/api/aplikasi-vendor/abc",
    ])
    def test_invalid_id(self, test_client, path):
        response = test_client.get(path)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"success": False, "error": "ID tidak valid"}

    @pytest.mark.parametrize("path", [
        "/api/perangkat-daerah",
        "/api/bahasa-pemrograman",
        "/api/framework",
        "/api/aplikasi",
        "/api/pic",
        "/api/vendor",
        "/api/aplikasi-vendor",
    ])
    def test_mutation_without_token(self, test_client, path):
        response = test_client.post(path, json={})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"success": False, "error": "Unauthorized"}

    def test_invalid_token(self, test_client):
        response = test_client.delete(
            "/api/vendor/1",
            headers={"Authorization": "Bearer bukan.token.valid"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_validation_error_is_400_with_field_name(self, test_client, auth_headers):
        response = test_client.post(
            "/api/aplikasi",
            json={"nama": "", "tahunDibuat": "dua ribu"},
            headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        error = response.json()["error"]
        assert "nama: Nama aplikasi wajib diisi" in error
        assert "tahunDibuat: harus berupa bilangan bulat" in error

    def test_non_integer_page_rejected(self, test_client):
        response = test_client.get("/api/aplikasi?page=satu")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "page: harus berupa bilangan bulat"

    def test_unexpected_error_is_generic_500(self, test_client, monkeypatch):
        from app.services.vendor_service import vendor_service

        def rusak(params):
            raise RuntimeError("koneksi database putus: password=rahasia")

        monkeypatch.setattr(vendor_service, "list_vendor", rusak)
        response = test_client.get("/api/vendor")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"success": False, "error": "Gagal mengambil data vendor"}
