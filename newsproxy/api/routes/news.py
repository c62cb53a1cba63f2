"""News routes for the news proxy.

Thin handlers: validate parameters, run the logical fetch, render the envelope.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from newsproxy.api.dependencies import get_news_service, get_pagination
from newsproxy.api.utils import success_body, upstream_error_response
from newsproxy.core.exceptions import ClientInputError
from newsproxy.core.news_service import NewsService
from newsproxy.infrastructure.auth import require_verified_user
from newsproxy.models.news import UpstreamResult
from newsproxy.models.requests import NEWS_CATEGORIES, Pagination

router = APIRouter(
    prefix="/api/news",
    tags=["News"],
    dependencies=[Depends(require_verified_user)],
)


def _render(result: UpstreamResult, operation_error: str):
    """Envelope for a finished logical fetch."""
    if result.ok:
        return success_body(result.payload)
    return upstream_error_response(operation_error, result)


@router.get("/trending")
async def get_trending_news(
    pagination: Pagination = Depends(get_pagination),
    news: NewsService = Depends(get_news_service),
):
    """Top headlines for the configured country."""
    result = await news.trending(pagination)
    return _render(result, "Failed to fetch trending news")


@router.get("/category/{category}")
async def get_news_by_category(
    category: str = Path(..., description=f"One of: {', '.join(NEWS_CATEGORIES)}"),
    pagination: Pagination = Depends(get_pagination),
    news: NewsService = Depends(get_news_service),
):
    """Top headlines for one category."""
    normalized = category.strip().lower()
    if normalized not in NEWS_CATEGORIES:
        raise ClientInputError(
            f"Invalid category '{category}'. Use one of: {', '.join(NEWS_CATEGORIES)}"
        )

    result = await news.by_category(normalized, pagination)
    return _render(result, "Failed to fetch news by category")


@router.get("/general")
async def get_general_news(
    pagination: Pagination = Depends(get_pagination),
    news: NewsService = Depends(get_news_service),
):
    result = await news.general(pagination)
    return _render(result, "Failed to fetch general news")


@router.get("/politics")
async def get_politics_news(
    pagination: Pagination = Depends(get_pagination),
    news: NewsService = Depends(get_news_service),
):
    """Latest politics coverage (full-text search on "politics")."""
    result = await news.politics(pagination)
    return _render(result, "Failed to fetch politics news")


@router.get("/search")
async def search_news(
    q: Optional[str] = Query(None, description="Search text"),
    pagination: Pagination = Depends(get_pagination),
    news: NewsService = Depends(get_news_service),
):
    """Full-text search. Blank ``q`` is rejected before contacting the provider."""
    if q is None or not q.strip():
        raise ClientInputError("Search query is required")

    result = await news.search(q.strip(), pagination)
    return _render(result, "Failed to search news")
