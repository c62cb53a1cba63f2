"""API utilities for the news proxy."""

from newsproxy.api.utils.envelope import (
    error_body,
    error_response,
    success_body,
    upstream_error_response,
    utc_timestamp,
)

__all__ = [
    "error_body",
    "error_response",
    "success_body",
    "upstream_error_response",
    "utc_timestamp",
]
