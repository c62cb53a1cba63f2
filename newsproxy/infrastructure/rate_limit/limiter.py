"""Rate limiting for the news proxy.

In-process sliding window limiter keyed by client address.
"""

import time
from collections import deque
from typing import Callable, Deque, Dict

from newsproxy.core.logging import logger


class RateLimiter:
    """Sliding window rate limiter.

    Allows ``max_requests`` per ``window_seconds`` for each key. State lives in
    the process; each worker enforces its own window.
    """

    def __init__(
        self,
        max_requests: int = 100,
        window_seconds: float = 15 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize rate limiter.

        Args:
            max_requests: Requests allowed per window
            window_seconds: Window length in seconds
            clock: Monotonic time source (injectable for tests)
        """
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._next_sweep = clock() + window_seconds

    def check_limit(self, key: str) -> bool:
        """Record a request for ``key`` and report whether it is allowed.

        Args:
            key: Client identifier (IP address)

        Returns:
            True if allowed, False if rate limited
        """
        now = self._clock()
        if now >= self._next_sweep:
            self._sweep(now)

        hits = self._hits.setdefault(key, deque())

        while hits and now - hits[0] >= self.window_seconds:
            hits.popleft()

        if len(hits) >= self.max_requests:
            logger.warning(
                "rate_limit_exceeded",
                client=key,
                count=len(hits),
                limit=self.max_requests,
            )
            return False

        hits.append(now)
        return True

    def _sweep(self, now: float) -> None:
        """Drop keys whose newest hit has left the window."""
        expired = [
            key for key, hits in self._hits.items() if not hits or now - hits[-1] >= self.window_seconds
        ]
        for key in expired:
            del self._hits[key]
        self._next_sweep = now + self.window_seconds

    def retry_after(self, key: str) -> int:
        """Seconds until ``key`` gets a free slot again."""
        hits = self._hits.get(key)
        if not hits:
            return 0
        remaining = self.window_seconds - (self._clock() - hits[0])
        return max(int(remaining + 0.999), 0)
