"""Middleware for the news proxy."""

from newsproxy.api.middleware.request_id import request_id_middleware
from newsproxy.api.middleware.security_headers import security_headers_middleware

__all__ = ["request_id_middleware", "security_headers_middleware"]
