from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from datetime import datetime, timezone

from easysolutions.models.common import HealthStatus

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello World!"


@router.get("/api/health", response_model=HealthStatus)
async def health_check():
    """
    Health check endpoint.

    Does not touch MongoDB or the mail relay, so it reports the process only.
    """
    return {
        "status": "OK",
        "message": "Email & DB server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
