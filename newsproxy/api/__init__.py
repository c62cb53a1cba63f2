"""HTTP API for the news proxy."""

from newsproxy.api.app import create_app

__all__ = ["create_app"]
