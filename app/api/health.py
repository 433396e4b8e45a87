"""Health check and liveness endpoints"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from datetime import datetime, timezone

router = APIRouter()

@router.get("/health")
async def health_check():
    """Basic health check"""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

@router.get("/ping", response_class=PlainTextResponse)
async def ping():
    return "OK"
