"""
Run script untuk Inventaris Aplikasi
Usage: python run.py

Features:
- Auto-create .env from .env.example
- Auto-create database if not exists
- Auto-create tables and default admin user
"""
import uvicorn
import shutil
from pathlib import Path


def setup_env_file():
    """Copy .env.example to .env if .env doesn't exist"""
    env_file = Path(".env")
    env_example = Path(".env.example")

    if not env_file.exists():
        if env_example.exists():
            shutil.copy(env_example, env_file)
            print("[Setup] Created .env from .env.example")
            print("[Setup] Edit .env if your MySQL config is different from default")
        else:
            default_env = """# Database Configuration (MySQL)
DB_HOST=localhost
DB_PORT=3306
DB_USER=root
DB_PASSWORD=
DB_NAME=inventaris_aplikasi

# App Configuration
APP_ENV=development
"""
            env_file.write_text(default_env)
            print("[Setup] Created default .env file")
    return True


def create_database_if_not_exists():
    """Create MySQL database if it doesn't exist"""
    from app.config import get_settings

    settings = get_settings()
    if settings.database_url_override:
        print("[Database] DATABASE_URL is set, skipping MySQL database creation")
        return True

    import pymysql

    try:
        # Connect without database to create it
        conn = pymysql.connect(
            host=settings.db_host,
            port=settings.db_port,
            user=settings.db_user,
            password=settings.db_password or ''
        )
        cursor = conn.cursor()
        cursor.execute(
            f"CREATE DATABASE IF NOT EXISTS `{settings.db_name}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
        print(f"[Database] Database '{settings.db_name}' ready")

        conn.close()
        return True
    except pymysql.MySQLError as e:
        print(f"[Database] Warning: Could not create database - {e}")
        return False


def create_tables_and_admin():
    """Create all tables and the default admin user"""
    from app.database import init_db
    from app.services.auth_service import auth_service

    init_db()
    print("[Database] Tables ready")
    if auth_service.create_default_admin():
        print("[Auth] Default admin user created")


if __name__ == "__main__":
    print("=" * 50)
    print("  Inventaris Aplikasi - Starting...")
    print("=" * 50)

    # Step 0: Setup .env file if not exists
    setup_env_file()

    # Step 1: Create database if not exists
    create_database_if_not_exists()

    # Step 2: Create tables and default admin
    create_tables_and_admin()

    print("=" * 50)
    print("  Server starting on http://127.0.0.1:8000")
    print("=" * 50)

    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)
