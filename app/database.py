"""
Database Connection Module
"""
import logging
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker, declarative_base
from contextlib import contextmanager

from app.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Base class for models
Base = declarative_base()

if settings.is_sqlite:
    # SQLite is only used for local runs and tests
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        echo=False
    )

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    # Create engine with optimized pool settings
    engine = create_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_recycle=1800,  # Recycle connections every 30 minutes
        pool_size=10,
        max_overflow=20,
        pool_timeout=10,
        echo=False  # Set to True for SQL debugging
    )

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_context():
    """Context manager untuk database session, rollback otomatis jika gagal"""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db():
    """Buat semua tabel yang belum ada"""
    # Register every mapped class on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")


def test_connection() -> dict:
    """Test database connection"""
    try:
        with get_db_context() as db:
            result = db.execute(text("SELECT 1"))
            result.fetchone()
            return {"status": "connected", "database": settings.db_name}
    except Exception as e:
        logger.warning("Database connection check failed: %s", e)
        return {"status": "error", "message": "Database tidak dapat dihubungi"}
