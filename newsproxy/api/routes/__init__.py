"""Routes for the news proxy."""

from newsproxy.api.routes import auth, news, system

__all__ = ["auth", "news", "system"]
