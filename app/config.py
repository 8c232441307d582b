"""
Inventaris Aplikasi Configuration
"""
import os
from functools import lru_cache
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables"""

    def __init__(self):
        # Database
        self.db_host: str = os.getenv("DB_HOST", "localhost")
        self.db_port: int = int(os.getenv("DB_PORT", "3306"))
        self.db_user: str = os.getenv("DB_USER", "root")
        self.db_password: str = os.getenv("DB_PASSWORD", "")
        self.db_name: str = os.getenv("DB_NAME", "inventaris_aplikasi")
        self.database_url_override: str = os.getenv("DATABASE_URL", "")

        # App
        self.app_env: str = os.getenv("APP_ENV", "development")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Auth
        self.secret_key: str = os.getenv("SECRET_KEY", "inventaris-aplikasi-secret-key-change-in-production")
        self.access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
        self.default_admin_username: str = os.getenv("DEFAULT_ADMIN_USERNAME", "admin")
        self.default_admin_password: str = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")
        self.default_admin_email: str = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@ngawikab.go.id")

    @property
    def database_url(self) -> str:
        """Generate database connection URL"""
        if self.database_url_override:
            return self.database_url_override
        return f"mysql+pymysql://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
