"""Configuration management for the news proxy.

Centralizes all environment variable access for better testability and maintainability.
Upstream settings are resolved once by ``Config.load()`` and handed to the
components that need them.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from newsproxy.core.retry_config import RetryConfig

load_dotenv()

DEFAULT_NEWS_BASE_URL = "https://newsapi.org/v2"
MIN_TIMEOUT_SECONDS = 10.0
MAX_TIMEOUT_SECONDS = 30.0


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable, failing fast on garbage."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class NewsAPISettings:
    """Upstream news provider settings, built once at process start."""

    api_key: Optional[str]
    base_url: str = DEFAULT_NEWS_BASE_URL
    timeout_seconds: float = MAX_TIMEOUT_SECONDS
    default_country: str = "us"

    def __post_init__(self):
        # Per-attempt budget must stay bounded
        clamped = min(max(self.timeout_seconds, MIN_TIMEOUT_SECONDS), MAX_TIMEOUT_SECONDS)
        object.__setattr__(self, "timeout_seconds", clamped)
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"NewsAPISettings(api_key={'***' if self.api_key else None}, "
            f"base_url={self.base_url!r}, timeout_seconds={self.timeout_seconds}, "
            f"default_country={self.default_country!r})"
        )


@dataclass(frozen=True)
class RateLimitSettings:
    """Inbound rate limit: ``max_requests`` per ``window_seconds`` per client IP.

    Forwarded headers are ignored unless ``trust_proxy_headers`` is set.
    """

    max_requests: int = 100
    window_seconds: int = 15 * 60
    trust_proxy_headers: bool = False


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    news_api: NewsAPISettings
    retry: RetryConfig = field(default_factory=RetryConfig)
    rate_limit: RateLimitSettings = field(default_factory=RateLimitSettings)


class Config:
    """Application configuration loaded from environment variables."""

    # News provider
    @staticmethod
    def news_api_key() -> Optional[str]:
        """Get upstream news API key from environment."""
        return os.environ.get("NEWS_API_KEY")

    @staticmethod
    def news_base_url() -> str:
        """Get upstream news API base URL."""
        return os.environ.get("NEWS_BASE_URL") or DEFAULT_NEWS_BASE_URL

    @staticmethod
    def news_timeout_seconds() -> float:
        """Get per-attempt upstream timeout in seconds."""
        return _float_env("NEWS_TIMEOUT_SECONDS", MAX_TIMEOUT_SECONDS)

    @staticmethod
    def news_max_attempts() -> int:
        """Get maximum upstream attempts per logical fetch."""
        return _int_env("NEWS_MAX_ATTEMPTS", 3)

    @staticmethod
    def news_backoff_base_ms() -> int:
        """Get backoff base in milliseconds."""
        return _int_env("NEWS_BACKOFF_BASE_MS", 1000)

    @staticmethod
    def news_default_country() -> str:
        return os.environ.get("NEWS_DEFAULT_COUNTRY") or "us"

    # Auth
    @staticmethod
    def jwt_secret() -> Optional[str]:
        """Get JWT secret for bearer token verification."""
        return os.environ.get("JWT_SECRET")

    # Supabase configuration
    @staticmethod
    def supabase_url() -> Optional[str]:
        """Get Supabase project URL from environment."""
        return os.environ.get("SUPABASE_URL")

    @staticmethod
    def supabase_service_role_key() -> Optional[str]:
        """Get Supabase service role key from environment."""
        return os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

    # Inbound rate limiting
    @staticmethod
    def rate_limit_max_requests() -> int:
        return _int_env("RATE_LIMIT_MAX_REQUESTS", 100)

    @staticmethod
    def rate_limit_window_seconds() -> int:
        return _int_env("RATE_LIMIT_WINDOW_SECONDS", 15 * 60)

    @staticmethod
    def trust_proxy_headers() -> bool:
        """Whether X-Forwarded-For / X-Real-IP identify the client (only behind a trusted proxy)."""
        return (os.environ.get("TRUST_PROXY_HEADERS") or "").strip().lower() in ("1", "true", "yes")

    # Runtime
    @staticmethod
    def log_level() -> str:
        """Get log level name (DEBUG, INFO, WARNING, ERROR)."""
        return (os.environ.get("LOG_LEVEL") or "INFO").upper()

    @staticmethod
    def port() -> int:
        return _int_env("PORT", 5001)

    # Helper methods
    @staticmethod
    def load() -> Settings:
        """Build immutable settings from the environment.

        Returns:
            Settings with upstream, retry and rate limit configuration

        Raises:
            ValueError: If a numeric variable is malformed or out of range
        """
        max_attempts = Config.news_max_attempts()
        if max_attempts < 1:
            raise ValueError("NEWS_MAX_ATTEMPTS must be at least 1")

        backoff_base_ms = Config.news_backoff_base_ms()
        if backoff_base_ms < 0:
            raise ValueError("NEWS_BACKOFF_BASE_MS must not be negative")

        return Settings(
            news_api=NewsAPISettings(
                api_key=Config.news_api_key(),
                base_url=Config.news_base_url(),
                timeout_seconds=Config.news_timeout_seconds(),
                default_country=Config.news_default_country(),
            ),
            retry=RetryConfig(max_attempts=max_attempts, backoff_base_ms=backoff_base_ms),
            rate_limit=RateLimitSettings(
                max_requests=Config.rate_limit_max_requests(),
                window_seconds=Config.rate_limit_window_seconds(),
                trust_proxy_headers=Config.trust_proxy_headers(),
            ),
        )

    @staticmethod
    def get_missing_config() -> list[str]:
        """Get list of missing required configuration keys."""
        missing = []
        if not Config.news_api_key():
            missing.append("NEWS_API_KEY")
        if not Config.jwt_secret():
            missing.append("JWT_SECRET")
        if not Config.supabase_url():
            missing.append("SUPABASE_URL")
        if not Config.supabase_service_role_key():
            missing.append("SUPABASE_SERVICE_ROLE_KEY")
        return missing


# Singleton instance for easy access
config = Config()
