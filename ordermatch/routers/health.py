# ordermatch/routers/health.py

from datetime import datetime, timezone
from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "ordermatch-api",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
