"""
Exception classes untuk Inventaris Aplikasi

Setiap exception membawa status HTTP dan pesan yang aman ditampilkan ke client.
"""


class InventarisError(Exception):
    """Base error yang dirender sebagai envelope {success: false, error: ...}"""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidIdError(InventarisError):
    """ID pada path bukan bilangan bulat positif"""

    def __init__(self, message: str = "ID tidak valid"):
        super().__init__(message)


class NotFoundError(InventarisError):
    """Baris yang diminta tidak ada"""
    status_code = 404


class ReferenceNotFoundError(InventarisError):
    """Foreign key menunjuk ke baris yang tidak ada"""
    status_code = 400


class ConflictError(InventarisError):
    """Pelanggaran integritas: nama ganda, pasangan ganda, atau data masih dipakai"""
    status_code = 400


class UnauthorizedError(InventarisError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ServerError(InventarisError):
    """Kegagalan tak terduga; pesan asli hanya dicatat di log server"""
    status_code = 500
