"""
Test Seed Service
"""


class TestSeedService:

    def test_seed_inserts_sample_data(self, db_session):
        from app.models import Aplikasi, AplikasiVendor, Pic
        from app.services.seed_service import seed_service

        result = seed_service.seed()

        assert result == {
            "perangkat_daerah": 4,
            "bahasa_pemrograman": 8,
            "framework": 9,
            "vendor": 3,
            "aplikasi": 5,
            "pic": 5,
            "aplikasi_vendor": 5,
        }
        ektp = db_session.query(Aplikasi).filter(Aplikasi.nama == "E-KTP Ngawi").one()
        assert ektp.perangkat_daerah.nama == "Dinas Kependudukan dan Catatan Sipil"
        assert ektp.bahasa_pemrograman.nama == "PHP"
        assert ektp.framework.nama == "Laravel"
        assert db_session.query(Pic).filter(Pic.id_aplikasi == ektp.id).count() == 1
        assert db_session.query(AplikasiVendor).count() == 5

    def test_seed_skipped_when_data_exists(self, db_session):
        from app.models import Aplikasi
        from app.services.seed_service import seed_service

        seed_service.seed()

        assert seed_service.seed() == {}
        assert db_session.query(Aplikasi).count() == 5

    def test_seed_reuses_existing_bahasa(self, db_session):
        from app.models import BahasaPemrograman
        from app.services.seed_service import seed_service

        db_session.add(BahasaPemrograman(nama="Python"))
        db_session.commit()

        seed_service.seed()

        assert db_session.query(BahasaPemrograman).count() == 8

    def test_seeded_dashboard(self, test_client):
        from app.services.seed_service import seed_service

        seed_service.seed()
        data = test_client.get("/api/dashboard/stats").json()["data"]

        assert data["summary"]["totalAplikasi"] == 5
        assert data["summary"]["totalAnggaran"] == 2250000000
        assert data["summary"]["totalPerangkatDaerahWithApps"] == 4
        assert data["aplikasiByStatus"][0] == {"status": "aktif", "count": 3, "percentage": 60}
        assert data["popularFramework"][0]["count"] == 1
