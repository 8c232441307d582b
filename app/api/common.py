"""
Helper bersama untuk semua router: envelope respons, parsing ID,
parameter list, dan exception handler aplikasi.
"""
import logging
import re
from contextlib import contextmanager
from typing import Any, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.exceptions import InvalidIdError, InventarisError, ServerError
from app.schemas import MAX_ID, ListParams

logger = logging.getLogger(__name__)

MAX_LIMIT = 100
# (page - 1) * limit harus muat di OFFSET 64-bit
MAX_PAGE = 2 ** 31 - 1

_ID_PATTERN = re.compile(r"[0-9]{1,10}")

# Pesan untuk tipe error pydantic yang tidak membawa pesan sendiri
VALIDATION_MESSAGES = {
    "missing": "wajib diisi",
    "int_parsing": "harus berupa bilangan bulat",
    "int_type": "harus berupa bilangan bulat",
    "int_from_float": "harus berupa bilangan bulat",
    "string_type": "harus berupa teks",
    "json_invalid": "format JSON tidak valid",
    "model_attributes_type": "harus berupa objek JSON",
    "dict_type": "harus berupa objek JSON",
}


# ==================== RESPONSE ====================

def success_response(data: Any = None, message: Optional[str] = None) -> dict:
    """Envelope sukses: {success: true, data, message?}"""
    body = {"success": True, "data": data}
    if message:
        body["message"] = message
    return body


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@contextmanager
def handle_errors(pesan_gagal: str):
    """
    Batas error setiap route.

    Error domain diteruskan apa adanya; error lain dicatat ke log dan
    diganti ServerError dengan pesan umum agar detailnya tidak bocor ke client.
    """
    try:
        yield
    except InventarisError:
        raise
    except Exception:
        logger.exception(pesan_gagal)
        raise ServerError(pesan_gagal)


# ==================== REQUEST PARSING ====================

def parse_id(raw_id: str) -> int:
    """ID path harus bilangan bulat positif"""
    if not _ID_PATTERN.fullmatch(raw_id or ""):
        raise InvalidIdError()
    value = int(raw_id)
    if value <= 0 or value > MAX_ID:
        raise InvalidIdError()
    return value


def list_params(
    page: int = Query(1, description="Nomor halaman, mulai dari 1"),
    limit: int = Query(10, description="Jumlah data per halaman (1-100)"),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder", description="asc atau desc"),
    search: Optional[str] = Query(None, description="Pencarian teks (case-insensitive)"),
) -> ListParams:
    """Dependency parameter list; page dan limit di luar batas dijepit ke rentang valid"""
    return ListParams(
        page=min(MAX_PAGE, max(1, page)),
        limit=min(MAX_LIMIT, max(1, limit)),
        sort_by=sort_by,
        sort_order="asc" if sort_order.lower() == "asc" else "desc",
        search=search or None,
    )


# ==================== EXCEPTION HANDLERS ====================

def format_validation_errors(errors: list) -> str:
    """Ubah error pydantic menjadi pesan berbahasa Indonesia yang menyebut nama field"""
    pesan = []
    for error in errors:
        field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        error_type = error.get("type", "")
        if error_type == "value_error" and "error" in error.get("ctx", {}):
            detail = str(error["ctx"]["error"])
        else:
            detail = VALIDATION_MESSAGES.get(error_type, error.get("msg", "tidak valid"))
        pesan.append(f"{field}: {detail}" if field else f"Data {detail}")
    return ", ".join(pesan) or "Data tidak valid"


async def inventaris_error_handler(request: Request, exc: InventarisError):
    return error_response(exc.message, exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(format_validation_errors(exc.errors()), 400)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error pada %s %s", request.method, request.url.path)
    return error_response("Terjadi kesalahan pada server", 500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InventarisError, inventaris_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
