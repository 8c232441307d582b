"""
API Routes untuk Authentication
"""
from fastapi import APIRouter, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from app.api.common import handle_errors, success_response
from app.exceptions import ConflictError, UnauthorizedError
from app.services.auth_service import auth_service

router = APIRouter(prefix="/api/auth", tags=["Authentication"])
security = HTTPBearer(auto_error=False)


# === Schemas ===

class UserRegister(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: Optional[str] = None


class UserLogin(BaseModel):
    username: str
    password: str


# === Dependency untuk protected routes ===

def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> dict:
    """
    Dependency untuk mendapatkan current user dari Bearer token.

    Dijalankan sebelum body divalidasi dan sebelum akses data apa pun.
    Token yang kosong atau tidak valid menghasilkan 401 Unauthorized.
    """
    if not credentials:
        raise UnauthorizedError()

    user = auth_service.get_current_user(credentials.credentials)
    if not user:
        raise UnauthorizedError()

    return user


# === Routes ===

@router.post("/register", summary="Register User Baru")
def register(data: UserRegister, current_user: dict = Depends(get_current_user)):
    """
    Register user baru. Hanya bisa dilakukan oleh user yang sudah login.

    - **username**: Username unik (min 3 karakter)
    - **email**: Email valid
    - **password**: Password (min 6 karakter)
    - **full_name**: Nama lengkap (opsional)
    """
    with handle_errors("Gagal mendaftarkan user"):
        result = auth_service.register(
            username=data.username,
            email=data.email,
            password=data.password,
            full_name=data.full_name
        )

    if result["status"] == "error":
        raise ConflictError(result["message"])

    return success_response(result["user"], "User berhasil didaftarkan")


@router.post("/login", summary="Login")
def login(data: UserLogin):
    """
    Login dan dapatkan access token.

    Returns access token yang berlaku sesuai ACCESS_TOKEN_EXPIRE_MINUTES (default 24 jam).
    """
    with handle_errors("Gagal login"):
        result = auth_service.login(data.username, data.password)

    if result["status"] == "error":
        raise UnauthorizedError(result["message"])

    return success_response(
        {
            "access_token": result["access_token"],
            "token_type": result["token_type"],
            "user": result["user"]
        },
        "Login berhasil"
    )


@router.get("/me", summary="Get Current User")
def get_me(current_user: dict = Depends(get_current_user)):
    """Requires: Bearer token di header Authorization"""
    return success_response(current_user)


@router.post("/logout", summary="Logout")
def logout():
    """
    Logout user.

    Note: Karena menggunakan JWT stateless, logout dilakukan di client-side
    dengan menghapus token dari storage.
    """
    return success_response(None, "Logout berhasil. Hapus token dari client.")


@router.get("/verify", summary="Verify Token")
def verify_token(current_user: dict = Depends(get_current_user)):
    """Verify apakah token masih valid"""
    return success_response({"valid": True, "user": current_user})
