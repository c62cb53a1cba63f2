"""Rate limiting module for the news proxy.

Inbound per-client rate limiting applied as an app-wide dependency.
"""

from newsproxy.infrastructure.rate_limit.deps import client_key, enforce_rate_limit
from newsproxy.infrastructure.rate_limit.limiter import RateLimiter

__all__ = [
    "RateLimiter",
    "client_key",
    "enforce_rate_limit",
]
