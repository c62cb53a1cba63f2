"""Health check functions for the news proxy.

Reports on external dependencies (news provider, Supabase).
"""

import asyncio
from typing import Any, Dict

from newsproxy.config import NewsAPISettings
from newsproxy.infrastructure.database import SupabaseClient


async def check_news_api(settings: NewsAPISettings) -> Dict[str, Any]:
    """Report news provider configuration.

    Never calls the provider: every request counts against the API quota.

    Returns:
        Dict with status ("configured" or "unconfigured") and base URL
    """
    if not settings.api_key:
        return {"status": "unconfigured", "error": "NEWS_API_KEY not set"}

    return {"status": "configured", "base_url": settings.base_url}


async def check_supabase_connection() -> Dict[str, Any]:
    """Test Supabase connectivity with minimal query.

    Returns:
        Dict with status ("healthy", "unconfigured", "timeout", "unavailable")
        and optional error message
    """
    try:
        client = SupabaseClient()
        if not client.is_configured():
            return {"status": "unconfigured", "error": "Supabase credentials not set"}

        supabase = client.client

        await asyncio.wait_for(
            asyncio.to_thread(lambda: supabase.table("users").select("id").limit(1).execute()),
            timeout=2.0,
        )

        return {"status": "healthy", "database": "connected"}

    except asyncio.TimeoutError:
        return {"status": "timeout", "error": "Request timed out after 2s"}

    except Exception as e:
        return {"status": "unavailable", "error": str(e)[:100]}
