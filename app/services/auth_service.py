"""
Authentication Service - Login, Register, Token Management
"""
import logging
from datetime import datetime, timedelta
from typing import Optional, Dict, Any
from passlib.context import CryptContext
from jose import JWTError, jwt
from sqlalchemy import or_

from app.config import get_settings
from app.models import User
from app.database import get_db_context

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"


class AuthService:
    """Service untuk authentication"""

    def hash_password(self, password: str) -> str:
        """Hash password dengan bcrypt"""
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verifikasi password"""
        return pwd_context.verify(plain_password, hashed_password)

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Buat JWT access token"""
        to_encode = data.copy()
        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=settings.access_token_expire_minutes)
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)

    def decode_token(self, token: str) -> Optional[dict]:
        """Decode JWT token, None jika tidak valid atau expired"""
        try:
            return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
        except JWTError:
            return None

    def register(self, username: str, email: str, password: str, full_name: str = None) -> Dict[str, Any]:
        """Register user baru"""
        with get_db_context() as db:
            existing = db.query(User).filter(
                or_(User.username == username, User.email == email)
            ).first()
            if existing:
                if existing.username == username:
                    return {"status": "error", "message": "Username sudah digunakan"}
                return {"status": "error", "message": "Email sudah digunakan"}

            user = User(
                username=username,
                email=email,
                hashed_password=self.hash_password(password),
                full_name=full_name,
                is_active=True,
                is_admin=False
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info("User %s terdaftar", username)
            return {"status": "success", "user": user.to_dict()}

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """Login user dan return token"""
        with get_db_context() as db:
            user = db.query(User).filter(User.username == username).first()

            if not user:
                return {"status": "error", "message": "Username tidak ditemukan"}

            if not user.is_active:
                return {"status": "error", "message": "Akun tidak aktif"}

            if not self.verify_password(password, user.hashed_password):
                return {"status": "error", "message": "Password salah"}

            access_token = self.create_access_token(
                data={"sub": user.username, "user_id": user.id, "is_admin": user.is_admin}
            )

            return {
                "status": "success",
                "access_token": access_token,
                "token_type": "bearer",
                "user": user.to_dict()
            }

    def get_user_by_username(self, username: str) -> Optional[Dict]:
        with get_db_context() as db:
            user = db.query(User).filter(User.username == username).first()
            if user:
                return user.to_dict()
            return None

    def get_current_user(self, token: str) -> Optional[Dict]:
        """Get current user from token; user nonaktif dianggap tidak login"""
        payload = self.decode_token(token)
        if not payload:
            return None
        username = payload.get("sub")
        if not username:
            return None
        user = self.get_user_by_username(username)
        if not user or not user["is_active"]:
            return None
        return user

    def create_default_admin(self) -> bool:
        """Buat admin default jika belum ada"""
        with get_db_context() as db:
            admin = db.query(User).filter(User.username == settings.default_admin_username).first()
            if admin:
                return False

            admin = User(
                username=settings.default_admin_username,
                email=settings.default_admin_email,
                hashed_password=self.hash_password(settings.default_admin_password),
                full_name="Administrator",
                is_active=True,
                is_admin=True
            )
            db.add(admin)
            db.commit()
            logger.info("Default admin created: %s", settings.default_admin_username)
            return True


# Global instance
auth_service = AuthService()
