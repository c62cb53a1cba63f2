"""Error classifier for upstream news provider calls.

Maps upstream HTTP responses and transport exceptions onto ``ClassifiedError``
values so nothing thrown by the HTTP layer escapes the upstream client.
"""

import asyncio
from typing import Any, Optional

import httpx

from newsproxy.core.retry_config import ErrorCategory
from newsproxy.models.news import ClassifiedError

# Substrings (lowercase) that identify an anti-bot / CDN challenge page
CHALLENGE_MARKERS = (
    "cloudflare",
    "cf-ray",
    "cf-chl",
    "challenge-platform",
    "just a moment",
    "attention required",
    "captcha",
)

INVALID_CREDENTIALS_MESSAGE = "Invalid API key"
RATE_LIMITED_MESSAGE = "Rate limit exceeded"
BLOCKED_MESSAGE = "News service temporarily blocked the request, please try again later"
UNAVAILABLE_MESSAGE = "News service temporarily unavailable"
UNREACHABLE_MESSAGE = "Could not reach news service"
TIMEOUT_MESSAGE = "News service request timed out"
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from news service"
GENERIC_MESSAGE = "News service request failed"


class ErrorClassifier:
    """Classifies upstream failures into the error taxonomy.

    Static methods for stateless classification. Status codes take precedence
    over body inspection, except that a challenge marker in any non-401/429
    body is treated as a block.
    """

    @staticmethod
    def has_challenge_marker(body: Optional[str]) -> bool:
        """Check whether a response body looks like an anti-bot challenge page."""
        if not body:
            return False
        lowered = body.lower()
        return any(marker in lowered for marker in CHALLENGE_MARKERS)

    @staticmethod
    def classify_response(
        status_code: int, body: Optional[str] = None, payload: Any = None
    ) -> ClassifiedError:
        """Classify a non-successful upstream response.

        Args:
            status_code: Upstream HTTP status
            body: Raw response text (used for challenge marker detection)
            payload: Decoded JSON body if available (used for passthrough messages)

        Returns:
            ClassifiedError for the response
        """
        if status_code == 401:
            return ClassifiedError(
                ErrorCategory.UPSTREAM_AUTH, 401, INVALID_CREDENTIALS_MESSAGE, False
            )

        if status_code == 429:
            return ClassifiedError(
                ErrorCategory.UPSTREAM_RATE_LIMITED, 429, RATE_LIMITED_MESSAGE, True
            )

        if status_code == 403 or ErrorClassifier.has_challenge_marker(body):
            return ClassifiedError(ErrorCategory.UPSTREAM_BLOCKED, 403, BLOCKED_MESSAGE, True)

        if 500 <= status_code < 600:
            return ClassifiedError(
                ErrorCategory.UPSTREAM_UNAVAILABLE, status_code, UNAVAILABLE_MESSAGE, False
            )

        upstream_message = None
        if isinstance(payload, dict) and isinstance(payload.get("message"), str):
            upstream_message = payload["message"]

        if 200 <= status_code < 300:
            # Success status but the body was not the JSON we expected
            return ClassifiedError(
                ErrorCategory.UPSTREAM_GENERIC,
                502,
                upstream_message or UNEXPECTED_RESPONSE_MESSAGE,
                False,
            )

        message = upstream_message or GENERIC_MESSAGE
        http_status = status_code if 400 <= status_code < 600 else 500
        return ClassifiedError(ErrorCategory.UPSTREAM_GENERIC, http_status, message, False)

    @staticmethod
    def classify_exception(error: BaseException) -> ClassifiedError:
        """Classify an exception raised while talking to the provider.

        Timeouts and network-level failures (reset, refused, DNS) are transient;
        anything else is a generic non-retryable failure.

        Args:
            error: Exception to classify

        Returns:
            ClassifiedError for the exception
        """
        if isinstance(error, (httpx.TimeoutException, asyncio.TimeoutError)):
            return ClassifiedError(ErrorCategory.UPSTREAM_UNAVAILABLE, 500, TIMEOUT_MESSAGE, True)

        if isinstance(error, (httpx.TransportError, ConnectionError)):
            return ClassifiedError(
                ErrorCategory.UPSTREAM_UNAVAILABLE, 500, UNREACHABLE_MESSAGE, True
            )

        return ClassifiedError(ErrorCategory.UPSTREAM_GENERIC, 500, GENERIC_MESSAGE, False)
