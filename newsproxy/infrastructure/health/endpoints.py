"""Health check endpoint handler for the news proxy."""

import asyncio
from typing import Any, Dict

from newsproxy.config import NewsAPISettings
from newsproxy.infrastructure.health.checks import check_news_api, check_supabase_connection


async def get_health_status(settings: NewsAPISettings) -> Dict[str, Any]:
    """Get dependency health.

    Args:
        settings: Upstream settings to report on

    Returns:
        Dict with overall status ("OK" or "DEGRADED") and per-dependency health
    """
    news_health, supabase_health = await asyncio.gather(
        check_news_api(settings), check_supabase_connection(), return_exceptions=True
    )

    if isinstance(news_health, Exception):
        news_health = {"status": "error", "error": str(news_health)}
    if isinstance(supabase_health, Exception):
        supabase_health = {"status": "error", "error": str(supabase_health)}

    healthy = news_health.get("status") == "configured" and supabase_health.get("status") == "healthy"

    return {
        "status": "OK" if healthy else "DEGRADED",
        "dependencies": {"newsapi": news_health, "supabase": supabase_health},
    }
