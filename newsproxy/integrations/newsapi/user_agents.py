"""Browser User-Agent rotation for upstream attempts."""

from typing import Sequence, Tuple

BROWSER_USER_AGENTS: Tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.4 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:125.0) Gecko/20100101 Firefox/125.0",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36 Edg/124.0.0.0",
)


class UserAgentRotation:
    """Deterministic cyclic sequence of User-Agent strings.

    Attempt 1 always gets the first entry, attempt 2 the second and so on,
    wrapping around the pool. Consecutive attempts never repeat as long as the
    pool has more than one entry.
    """

    def __init__(self, pool: Sequence[str] = BROWSER_USER_AGENTS):
        if not pool:
            raise ValueError("User-Agent pool must not be empty")
        self.pool = tuple(pool)

    def for_attempt(self, attempt: int) -> str:
        """Get the User-Agent for a 1-based attempt number."""
        if attempt < 1:
            raise ValueError(f"attempt must be >= 1, got {attempt}")
        return self.pool[(attempt - 1) % len(self.pool)]
