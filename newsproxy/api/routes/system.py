"""System routes for the news proxy."""

from fastapi import APIRouter, Depends

from newsproxy.api.dependencies import get_settings
from newsproxy.api.utils import utc_timestamp
from newsproxy.config import Settings
from newsproxy.infrastructure.health import get_health_status

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """Liveness plus dependency health. Never calls the news provider."""
    health = await get_health_status(settings.news_api)

    return {
        "success": True,
        "status": health["status"],
        "message": "NewsAI Backend is running",
        "dependencies": health["dependencies"],
        "timestamp": utc_timestamp(),
    }
