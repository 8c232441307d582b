"""
Inventaris Aplikasi - Main Application
Pemerintah Kabupaten Ngawi
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.database import init_db
from app.api.routes import router
from app.api.auth_routes import router as auth_router
from app.api.perangkat_daerah_routes import router as perangkat_daerah_router
from app.api.bahasa_routes import router as bahasa_router
from app.api.framework_routes import router as framework_router
from app.api.aplikasi_routes import router as aplikasi_router, pic_router
from app.api.vendor_routes import router as vendor_router, aplikasi_vendor_router
from app.api.dashboard_routes import router as dashboard_router
from app.api.common import register_exception_handlers
from app.services.auth_service import auth_service

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    print("=" * 50)
    print("  Inventaris Aplikasi Starting...")
    print("=" * 50)
    init_db()
    if auth_service.create_default_admin():
        print(f"[Auth] Default admin created: {settings.default_admin_username}")
    print("[Server] Ready to accept connections!")

    yield

    # Shutdown
    logger.info("Inventaris Aplikasi stopped")


# Create FastAPI app
app = FastAPI(
    title="Inventaris Aplikasi",
    description="API inventaris aplikasi perangkat daerah - Pemerintah Kabupaten Ngawi",
    version=APP_VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(router)
app.include_router(auth_router)
app.include_router(perangkat_daerah_router)
app.include_router(bahasa_router)
app.include_router(framework_router)
app.include_router(aplikasi_router)
app.include_router(pic_router)
app.include_router(vendor_router)
app.include_router(aplikasi_vendor_router)
app.include_router(dashboard_router)


@app.get("/api-info")
def api_info():
    """API Info endpoint"""
    return {
        "name": "Inventaris Aplikasi",
        "organization": "Pemerintah Kabupaten Ngawi",
        "version": APP_VERSION,
        "features": [
            "Perangkat Daerah",
            "Bahasa Pemrograman",
            "Framework",
            "Aplikasi",
            "PIC",
            "Vendor",
            "Dashboard Statistik"
        ],
        "docs": "/docs"
    }
