"""Retry configuration for the news proxy.

Immutable configuration for upstream retry behavior and the error taxonomy
that drives it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    """Error categories surfaced to callers.

    - CLIENT_INPUT: Missing or invalid request parameters (400, never sent upstream)
    - UPSTREAM_AUTH: Provider rejected our credentials (401)
    - UPSTREAM_RATE_LIMITED: Provider rate limit (429, retryable)
    - UPSTREAM_BLOCKED: Provider or CDN anti-bot challenge (403, retryable)
    - UPSTREAM_UNAVAILABLE: Provider 5xx or network-level failure
    - UPSTREAM_GENERIC: Anything unclassified
    """

    CLIENT_INPUT = "client_input"
    UPSTREAM_AUTH = "upstream_auth"
    UPSTREAM_RATE_LIMITED = "upstream_rate_limited"
    UPSTREAM_BLOCKED = "upstream_blocked"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_GENERIC = "upstream_generic"


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    Delay before attempt ``n + 1`` is ``2 ** n * backoff_base_ms`` milliseconds,
    so the defaults wait 2s then 4s.
    """

    max_attempts: int = 3
    backoff_base_ms: int = 1000
    backoff_factor: float = 2.0
    max_delay: Optional[float] = None  # seconds, uncapped by default

    def delay_for(self, attempt: int) -> float:
        """Get backoff delay in seconds after a failed ``attempt``."""
        delay = (self.backoff_factor**attempt) * self.backoff_base_ms / 1000.0
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
