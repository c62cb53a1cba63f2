"""News query and upstream result models.

Type-safe, immutable values passed between the HTTP handlers, the retry
controller and the upstream client.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from newsproxy.core.retry_config import ErrorCategory

CLOUDFLARE_RETRY_AFTER_SECONDS = 300
DEFAULT_RETRY_AFTER_SECONDS = 60


class NewsEndpoint(str, Enum):
    """Upstream endpoints exposed by the news provider."""

    TOP_HEADLINES = "/top-headlines"
    EVERYTHING = "/everything"


@dataclass(frozen=True)
class NewsQuery:
    """One logical upstream query.

    ``params`` is copied into a read-only mapping on construction, so retries
    can only vary transport headers, never the query itself.
    """

    endpoint: NewsEndpoint
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        frozen = MappingProxyType({str(k): str(v) for k, v in self.params.items()})
        object.__setattr__(self, "params", frozen)

    def __hash__(self) -> int:
        return hash((self.endpoint, tuple(sorted(self.params.items()))))


@dataclass(frozen=True)
class UpstreamSuccess:
    """Successful upstream payload, passed through verbatim."""

    payload: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ClassifiedError:
    """Upstream failure normalized into the error taxonomy."""

    kind: ErrorCategory
    http_status: int
    message: str
    is_transient_block: bool = False

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_cloudflare_issue(self) -> bool:
        """True when the provider (or its CDN) is challenging our requests."""
        return self.kind == ErrorCategory.UPSTREAM_BLOCKED

    @property
    def retry_after(self) -> int:
        """Advisory seconds a caller should wait before trying again."""
        if self.is_cloudflare_issue:
            return CLOUDFLARE_RETRY_AFTER_SECONDS
        return DEFAULT_RETRY_AFTER_SECONDS


UpstreamResult = Union[UpstreamSuccess, ClassifiedError]


@dataclass
class RetryState:
    """Progress of one logical fetch; discarded after success or exhaustion."""

    attempt: int = 1
    last_error: Optional[ClassifiedError] = None
