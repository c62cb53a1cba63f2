"""FastAPI dependencies for the news proxy.

Dependency injection functions for route handlers.
"""

from fastapi import Query, Request

from newsproxy.config import Settings
from newsproxy.core.news_service import NewsService
from newsproxy.models.requests import MAX_PAGE_SIZE, Pagination


def get_news_service(request: Request) -> NewsService:
    """Get the NewsService built by the app factory."""
    return request.app.state.news_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pagination(
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int = Query(
        10, ge=1, le=MAX_PAGE_SIZE, alias="pageSize", description="Articles per page"
    ),
) -> Pagination:
    """Parse ``page``/``pageSize`` query parameters."""
    return Pagination(page=page, page_size=page_size)
