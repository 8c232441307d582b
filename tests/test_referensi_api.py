"""
Test endpoint Perangkat Daerah, Bahasa Pemrograman, dan Framework
"""
import pytest
from fastapi import status


class TestPerangkatDaerahEndpoints:

    def test_create_and_get_round_trip(self, test_client, create_entity):
        payload = {
            "nama": "Badan Perencanaan Pembangunan Daerah",
            "jenis": "Badan",
            "alamat": "Jl. Pangeran Diponegoro No. 8 Ngawi",
            "kepalaDinas": "Ir. Siti Nurjanah, M.M."
        }
        created = create_entity("/api/perangkat-daerah", payload)

        response = test_client.get(f"/api/perangkat-daerah/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        for key, value in payload.items():
            assert data[key] == value
        assert data["aplikasiCount"] == 0
        assert data["createdAt"] and data["updatedAt"]

    def test_create_message(self, test_client, auth_headers):
        response = test_client.post("/api/perangkat-daerah", json={"nama": "Bappeda"}, headers=auth_headers)

        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Perangkat daerah berhasil dibuat"
        assert body["data"]["jenis"] is None

    def test_get_not_found(self, test_client):
        response = test_client.get("/api/perangkat-daerah/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"success": False, "error": "Perangkat daerah tidak ditemukan"}

    def test_update_partial(self, test_client, auth_headers, referensi):
        perangkat = referensi["perangkat_daerah"]

        response = test_client.put(
            f"/api/perangkat-daerah/{perangkat['id']}",
            json={"jenis": "Dinas Daerah"},
            headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["jenis"] == "Dinas Daerah"
        assert data["nama"] == perangkat["nama"]
        assert data["updatedAt"] >= perangkat["updatedAt"]
        assert response.json()["message"] == "Perangkat daerah berhasil diperbarui"

    def test_update_not_found(self, test_client, auth_headers):
        response = test_client.put("/api/perangkat-daerah/999", json={"nama": "X"}, headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_without_aplikasi(self, test_client, auth_headers, referensi):
        perangkat_id = referensi["perangkat_daerah"]["id"]

        response = test_client.delete(f"/api/perangkat-daerah/{perangkat_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Perangkat daerah berhasil dihapus"
        assert test_client.get(f"/api/perangkat-daerah/{perangkat_id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_blocked_by_aplikasi(self, test_client, auth_headers, create_entity, referensi):
        perangkat_id = referensi["perangkat_daerah"]["id"]
        create_entity("/api/aplikasi", {"nama": "SIMK", "idPerangkatDaerah": perangkat_id})

        response = test_client.delete(f"/api/perangkat-daerah/{perangkat_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Tidak dapat menghapus perangkat daerah yang memiliki aplikasi terkait"
        assert test_client.get(f"/api/perangkat-daerah/{perangkat_id}").json()["data"]["aplikasiCount"] == 1

    def test_list_search_nama_and_jenis(self, test_client, create_entity):
        create_entity("/api/perangkat-daerah", {"nama": "Dinas Kesehatan", "jenis": "Dinas"})
        create_entity("/api/perangkat-daerah", {"nama": "Bappeda", "jenis": "Badan"})
        create_entity("/api/perangkat-daerah", {"nama": "RSUD Dr. Soeroto Ngawi", "jenis": "Rumah Sakit"})

        by_nama = test_client.get("/api/perangkat-daerah?search=kesehatan").json()["data"]
        by_jenis = test_client.get("/api/perangkat-daerah?search=BADAN").json()["data"]

        assert [p["nama"] for p in by_nama["data"]] == ["Dinas Kesehatan"]
        assert [p["nama"] for p in by_jenis["data"]] == ["Bappeda"]
        assert by_jenis["pagination"]["total"] == 1

    def test_list_sort(self, test_client, create_entity):
        for nama in ["Bappeda", "Dinas Sosial", "Inspektorat"]:
            create_entity("/api/perangkat-daerah", {"nama": nama})

        asc = test_client.get("/api/perangkat-daerah?sortBy=nama&sortOrder=asc").json()["data"]["data"]
        default = test_client.get("/api/perangkat-daerah?sortBy=bukanKolom").json()["data"]["data"]

        assert [p["nama"] for p in asc] == ["Bappeda", "Dinas Sosial", "Inspektorat"]
        assert len(default) == 3


class TestBahasaPemrogramanEndpoints:

    def test_create_duplicate_name(self, test_client, auth_headers, referensi):
        response = test_client.post("/api/bahasa-pemrograman", json={"nama": "Python"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Bahasa pemrograman dengan nama tersebut sudah ada"

    def test_rename_to_existing_name(self, test_client, auth_headers, create_entity, referensi):
        go = create_entity("/api/bahasa-pemrograman", {"nama": "Go"})

        response = test_client.put(
            f"/api/bahasa-pemrograman/{go['id']}", json={"nama": "Python"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_rename_to_same_name(self, test_client, auth_headers, referensi):
        bahasa = referensi["bahasa"]

        response = test_client.put(
            f"/api/bahasa-pemrograman/{bahasa['id']}", json={"nama": "Python"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK

    def test_list_includes_aplikasi_count(self, test_client, create_entity, referensi):
        bahasa_id = referensi["bahasa"]["id"]
        create_entity("/api/bahasa-pemrograman", {"nama": "Ruby"})
        create_entity("/api/aplikasi", {"nama": "SIRS", "idBahasa": bahasa_id})
        create_entity("/api/aplikasi", {"nama": "SIMK", "idBahasa": bahasa_id})

        response = test_client.get("/api/bahasa-pemrograman?sortBy=nama")

        data = response.json()["data"]
        counts = {b["nama"]: b["aplikasiCount"] for b in data["data"]}
        assert counts == {"Python": 2, "Ruby": 0}
        assert data["pagination"]["total"] == 2
        assert [b["nama"] for b in data["data"]] == ["Ruby", "Python"]

    def test_delete_referenced_language_blocked(self, test_client, auth_headers, create_entity, referensi):
        bahasa_id = referensi["bahasa"]["id"]
        create_entity("/api/aplikasi", {"nama": "SIRS", "idBahasa": bahasa_id})

        response = test_client.delete(f"/api/bahasa-pemrograman/{bahasa_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Tidak dapat menghapus bahasa pemrograman yang digunakan oleh aplikasi"
        assert test_client.get(f"/api/bahasa-pemrograman/{bahasa_id}").status_code == status.HTTP_200_OK

    def test_delete_unused_language(self, test_client, auth_headers, referensi):
        bahasa_id = referensi["bahasa"]["id"]

        response = test_client.delete(f"/api/bahasa-pemrograman/{bahasa_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "data": None,
            "message": "Bahasa pemrograman berhasil dihapus"
        }


class TestFrameworkEndpoints:

    def test_create_and_detail(self, test_client, create_entity):
        framework = create_entity("/api/framework", {"nama": "Laravel"})

        data = test_client.get(f"/api/framework/{framework['id']}").json()["data"]

        assert data["nama"] == "Laravel"
        assert data["aplikasiCount"] == 0

    def test_empty_name_rejected(self, test_client, auth_headers):
        response = test_client.post("/api/framework", json={"nama": ""}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "nama: Nama framework wajib diisi"

    def test_duplicate_name(self, test_client, auth_headers, referensi):
        response = test_client.post("/api/framework", json={"nama": "Django"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Framework dengan nama tersebut sudah ada"

    def test_delete_blocked(self, test_client, auth_headers, create_entity, referensi):
        framework_id = referensi["framework"]["id"]
        create_entity("/api/aplikasi", {"nama": "SIRS", "idFramework": framework_id})

        response = test_client.delete(f"/api/framework/{framework_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Tidak dapat menghapus framework yang digunakan oleh aplikasi"

    def test_search(self, test_client, create_entity):
        for nama in ["React", "Next.js", "Vue.js"]:
            create_entity("/api/framework", {"nama": nama})

        data = test_client.get("/api/framework?search=.JS").json()["data"]

        assert sorted(f["nama"] for f in data["data"]) == ["Next.js", "Vue.js"]
