"""
API Routes umum
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.database import test_connection

router = APIRouter(prefix="/api", tags=["API"])


@router.get("/health")
def health_check():
    """Check service health and database connection"""
    db_status = test_connection()
    healthy = db_status["status"] == "connected"
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "success": healthy,
            "data": {
                "status": "ok" if healthy else "degraded",
                "service": "Inventaris Aplikasi",
                "database": db_status
            }
        }
    )
