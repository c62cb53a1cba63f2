"""FastAPI application factory for the news proxy."""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.gzip import GZipMiddleware

from newsproxy import __version__
from newsproxy.api.errors import register_exception_handlers
from newsproxy.api.middleware import request_id_middleware, security_headers_middleware
from newsproxy.api.routes import auth, news, system
from newsproxy.config import Config, Settings
from newsproxy.core.execution import RetryController, UpstreamClient
from newsproxy.core.execution.retry_controller import Sleep
from newsproxy.core.logging import logger
from newsproxy.core.news_service import NewsService
from newsproxy.infrastructure.rate_limit import RateLimiter, enforce_rate_limit
from newsproxy.integrations.newsapi import NewsAPIClient


def create_app(
    settings: Optional[Settings] = None,
    news_client: Optional[UpstreamClient] = None,
    sleep: Sleep = asyncio.sleep,
) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability.

    Args:
        settings: Immutable settings; loaded from the environment if omitted
        news_client: Upstream client override; a pooled NewsAPIClient otherwise
        sleep: Backoff delay function handed to the retry controller

    Returns:
        Configured FastAPI app
    """
    settings = settings or Config.load()
    owns_client = news_client is None
    client = news_client if news_client is not None else NewsAPIClient(settings.news_api)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "app_started",
            version=__version__,
            base_url=settings.news_api.base_url,
            max_attempts=settings.retry.max_attempts,
        )
        yield
        if owns_client:
            await client.aclose()
        logger.info("app_stopped")

    app = FastAPI(
        title="NewsAI Backend",
        description=(
            "Authenticated news proxy: trending, category, general, politics and "
            "search endpoints backed by NewsAPI with retry and error normalization."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )

    app.state.settings = settings
    app.state.news_service = NewsService(
        RetryController(client, settings.retry, sleep=sleep),
        country=settings.news_api.default_country,
    )
    app.state.rate_limiter = RateLimiter(
        max_requests=settings.rate_limit.max_requests,
        window_seconds=settings.rate_limit.window_seconds,
    )

    # Add middleware
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.middleware("http")(security_headers_middleware)
    app.middleware("http")(request_id_middleware)

    register_exception_handlers(app)

    # Register routes
    app.include_router(system.router)
    app.include_router(auth.router)
    app.include_router(news.router)

    return app
