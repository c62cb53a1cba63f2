"""Models for the news proxy.

- news: Immutable upstream queries and tagged upstream results
- requests: Validated inbound request parameters
"""

from newsproxy.models.news import (
    ClassifiedError,
    NewsEndpoint,
    NewsQuery,
    RetryState,
    UpstreamResult,
    UpstreamSuccess,
)
from newsproxy.models.requests import NEWS_CATEGORIES, Pagination

__all__ = [
    "ClassifiedError",
    "NewsEndpoint",
    "NewsQuery",
    "RetryState",
    "UpstreamResult",
    "UpstreamSuccess",
    "NEWS_CATEGORIES",
    "Pagination",
]
