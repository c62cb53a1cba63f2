"""Health monitoring module for the news proxy."""

from newsproxy.infrastructure.health.checks import check_news_api, check_supabase_connection
from newsproxy.infrastructure.health.endpoints import get_health_status

__all__ = [
    "check_news_api",
    "check_supabase_connection",
    "get_health_status",
]
