"""News operations for the news proxy.

Each logical operation builds a fresh ``NewsQuery`` and runs it through the
retry controller. Parameter validation happens in the HTTP handlers, before
anything here is called.
"""

from newsproxy.core.execution.retry_controller import RetryController
from newsproxy.models.news import NewsEndpoint, NewsQuery, UpstreamResult
from newsproxy.models.requests import Pagination

POLITICS_KEYWORD = "politics"
DEFAULT_LANGUAGE = "en"


class NewsService:
    """Logical news fetches backed by the upstream provider."""

    def __init__(self, controller: RetryController, country: str = "us"):
        """Initialize NewsService.

        Args:
            controller: RetryController wrapping the upstream client
            country: Country code used for top-headlines queries
        """
        self.controller = controller
        self.country = country

    async def trending(self, pagination: Pagination) -> UpstreamResult:
        """Top headlines for the configured country."""
        query = NewsQuery(
            NewsEndpoint.TOP_HEADLINES,
            {"country": self.country, **pagination.as_params()},
        )
        return await self.controller.execute(query)

    async def by_category(self, category: str, pagination: Pagination) -> UpstreamResult:
        """Top headlines for one provider category."""
        query = NewsQuery(
            NewsEndpoint.TOP_HEADLINES,
            {"country": self.country, "category": category, **pagination.as_params()},
        )
        return await self.controller.execute(query)

    async def general(self, pagination: Pagination) -> UpstreamResult:
        """General headlines; same upstream query as trending."""
        query = NewsQuery(
            NewsEndpoint.TOP_HEADLINES,
            {"country": self.country, **pagination.as_params()},
        )
        return await self.controller.execute(query)

    async def politics(self, pagination: Pagination) -> UpstreamResult:
        """Latest politics coverage via full-text search."""
        query = NewsQuery(
            NewsEndpoint.EVERYTHING,
            {
                "q": POLITICS_KEYWORD,
                "language": DEFAULT_LANGUAGE,
                "sortBy": "publishedAt",
                **pagination.as_params(),
            },
        )
        return await self.controller.execute(query)

    async def search(self, text: str, pagination: Pagination) -> UpstreamResult:
        """Full-text search ordered by relevancy.

        Args:
            text: Non-empty search text (validated by the caller)
            pagination: Paging parameters

        Returns:
            UpstreamResult of the logical fetch
        """
        query = NewsQuery(
            NewsEndpoint.EVERYTHING,
            {
                "q": text,
                "language": DEFAULT_LANGUAGE,
                "sortBy": "relevancy",
                **pagination.as_params(),
            },
        )
        return await self.controller.execute(query)
