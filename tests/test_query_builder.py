"""
Test List Query Builder dan helper request
"""
import pytest


class TestCalculatePagination:

    def test_first_page(self):
        from app.services.query_builder import calculate_pagination

        result = calculate_pagination(["a"] * 10, page=1, limit=10, total=15)

        assert result["pagination"] == {
            "page": 1,
            "limit": 10,
            "total": 15,
            "totalPages": 2,
            "hasNext": True,
            "hasPrev": False
        }

    def test_last_page(self):
        from app.services.query_builder import calculate_pagination

        pagination = calculate_pagination(["a"] * 5, page=2, limit=10, total=15)["pagination"]

        assert pagination["hasNext"] is False
        assert pagination["hasPrev"] is True

    def test_empty(self):
        from app.services.query_builder import calculate_pagination

        pagination = calculate_pagination([], page=1, limit=10, total=0)["pagination"]

        assert pagination["totalPages"] == 0
        assert pagination["hasNext"] is False
        assert pagination["hasPrev"] is False

    @pytest.mark.parametrize("page,limit,total", [(1, 1, 1), (3, 7, 20), (4, 5, 20), (10, 3, 2)])
    def test_flags_follow_total_pages(self, page, limit, total):
        from app.services.query_builder import calculate_pagination

        pagination = calculate_pagination([], page, limit, total)["pagination"]

        assert pagination["hasNext"] == (page < pagination["totalPages"])
        assert pagination["hasPrev"] == (page > 1)


class TestConditions:

    def test_no_search_no_conditions(self):
        from app.schemas import ListParams
        from app.services.aplikasi_service import APLIKASI_LIST
        from app.services.query_builder import build_conditions

        assert build_conditions(APLIKASI_LIST, ListParams()) == ()

    def test_search_and_extra_accumulate(self):
        from app.models import Aplikasi
        from app.schemas import ListParams
        from app.services.aplikasi_service import APLIKASI_LIST
        from app.services.query_builder import build_conditions

        params = ListParams(search="ktp")
        conditions = build_conditions(APLIKASI_LIST, params, extra=(Aplikasi.status == "aktif", None))

        assert len(conditions) == 2

    def test_build_conditions_does_not_share_state(self):
        from app.schemas import ListParams
        from app.services.referensi_service import PERANGKAT_DAERAH_LIST
        from app.services.query_builder import build_conditions

        first = build_conditions(PERANGKAT_DAERAH_LIST, ListParams(search="dinas"))
        second = build_conditions(PERANGKAT_DAERAH_LIST, ListParams())

        assert len(first) == 1
        assert second == ()

    def test_search_matches_every_column(self):
        from app.models import PerangkatDaerah
        from app.services.query_builder import search_condition

        clause = search_condition("Dinas", (PerangkatDaerah.nama, PerangkatDaerah.jenis))
        sql = str(clause.compile(compile_kwargs={"literal_binds": True}))

        assert "perangkat_daerah.nama" in sql
        assert "perangkat_daerah.jenis" in sql
        assert " OR " in sql

    def test_empty_search_ignored(self):
        from app.models import PerangkatDaerah
        from app.services.query_builder import search_condition

        assert search_condition("", (PerangkatDaerah.nama,)) is None
        assert search_condition(None, (PerangkatDaerah.nama,)) is None


class TestOrdering:

    def test_known_sort_column(self):
        from app.schemas import ListParams
        from app.services.aplikasi_service import APLIKASI_LIST
        from app.services.query_builder import order_clauses

        clauses = order_clauses(APLIKASI_LIST, ListParams(sort_by="nama", sort_order="asc"))

        assert str(clauses[0]) == "aplikasi.nama ASC"
        assert str(clauses[1]) == "aplikasi.id ASC"

    def test_unknown_sort_column_falls_back_to_default(self):
        from app.schemas import ListParams
        from app.services.aplikasi_service import APLIKASI_LIST
        from app.services.query_builder import order_clauses

        clauses = order_clauses(APLIKASI_LIST, ListParams(sort_by="password; DROP TABLE aplikasi"))

        assert str(clauses[0]) == "aplikasi.created_at DESC"

    def test_entity_specific_default(self):
        from app.schemas import ListParams
        from app.services.referensi_service import BAHASA_LIST
        from app.services.query_builder import order_clauses

        clauses = order_clauses(BAHASA_LIST, ListParams(sort_by="tidakAda", sort_order="asc"))

        assert str(clauses[0]) == "bahasa_pemrograman.nama ASC"

    def test_vendor_default_is_nama_vendor(self):
        from app.schemas import ListParams
        from app.services.vendor_service import VENDOR_LIST
        from app.services.query_builder import order_clauses

        clauses = order_clauses(VENDOR_LIST, ListParams(sort_by="tidakAda", sort_order="asc"))

        assert str(clauses[0]) == "vendor.nama_vendor ASC"


class TestRequestHelpers:

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), ("007", 7), ("2147483647", 2147483647)])
    def test_parse_id_valid(self, raw, expected):
        from app.api.common import parse_id

        assert parse_id(raw) == expected

    @pytest.mark.parametrize("raw", [
        "0", "-1", "abc", "1.5", "12abc", "", "2147483648", "99999999999999999999999", "9" * 5000
    ])
    def test_parse_id_invalid(self, raw):
        from app.api.common import parse_id
        from app.exceptions import InvalidIdError

        with pytest.raises(InvalidIdError) as exc_info:
            parse_id(raw)

        assert exc_info.value.message == "ID tidak valid"
        assert exc_info.value.status_code == 400

    def test_list_params_clamped(self):
        from app.api.common import list_params

        params = list_params(page=0, limit=500, sort_by="nama", sort_order="ASC", search="")

        assert params.page == 1
        assert params.limit == 100
        assert params.sort_order == "asc"
        assert params.search is None

    def test_list_params_unknown_order_is_desc(self):
        from app.api.common import list_params

        params = list_params(page=2, limit=0, sort_by="nama", sort_order="random", search="ktp")

        assert params.limit == 1
        assert params.sort_order == "desc"
        assert params.search == "ktp"

    def test_list_params_page_fits_offset(self):
        from app.api.common import MAX_PAGE, list_params

        params = list_params(page=10 ** 20, limit=100, sort_by="nama", sort_order="asc", search=None)

        assert params.page == MAX_PAGE
        assert params.offset < 2 ** 63

    def test_format_validation_errors(self):
        from app.api.common import format_validation_errors

        message = format_validation_errors([
            {"loc": ("body", "nama"), "type": "value_error", "msg": "Value error",
             "ctx": {"error": ValueError("Nama aplikasi wajib diisi")}},
            {"loc": ("body", "tahunDibuat"), "type": "int_parsing", "msg": "Input should be a valid integer"},
        ])

        assert message == "nama: Nama aplikasi wajib diisi, tahunDibuat: harus berupa bilangan bulat"

    def test_percentage_rounding(self):
        from app.services.dashboard_service import hitung_persentase

        assert hitung_persentase(0, 0) == 0
        assert hitung_persentase(1, 3) == 33
        assert hitung_persentase(2, 3) == 67
        assert hitung_persentase(1, 8) == 13  # 12.5 dibulatkan ke atas
