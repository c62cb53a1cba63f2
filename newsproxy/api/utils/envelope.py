"""Uniform JSON response envelope for every route."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from newsproxy.models.news import ClassifiedError


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a trailing Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success_body(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data, "timestamp": utc_timestamp()}


def error_body(
    message: str,
    error: Optional[str] = None,
    is_cloudflare_issue: Optional[bool] = None,
    retry_after: Optional[int] = None,
) -> Dict[str, Any]:
    """Build a failure envelope, omitting fields that do not apply."""
    body: Dict[str, Any] = {"success": False}
    if error is not None:
        body["error"] = error
    body["message"] = message
    if is_cloudflare_issue is not None:
        body["isCloudflareIssue"] = is_cloudflare_issue
    if retry_after is not None:
        body["retryAfter"] = retry_after
    body["timestamp"] = utc_timestamp()
    return body


def error_response(
    status_code: int, message: str, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message), headers=headers)


def upstream_error_response(operation_error: str, error: ClassifiedError) -> JSONResponse:
    """Render a classified upstream failure.

    Args:
        operation_error: Operation label, e.g. "Failed to search news"
        error: Classified failure of the last attempt

    Returns:
        JSONResponse with the classified status and a Retry-After header
    """
    return JSONResponse(
        status_code=error.http_status,
        content=error_body(
            error.message,
            error=operation_error,
            is_cloudflare_issue=error.is_cloudflare_issue,
            retry_after=error.retry_after,
        ),
        headers={"Retry-After": str(error.retry_after)},
    )
