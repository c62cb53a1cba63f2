"""FastAPI rate limiting dependencies for the news proxy."""

from fastapi import HTTPException, Request

from newsproxy.infrastructure.rate_limit.limiter import RateLimiter

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


def client_key(request: Request, trust_proxy_headers: bool = False) -> str:
    """Identify the caller by socket address.

    Forwarded headers are client-controlled, so they are only honoured when
    the app sits behind a proxy that sets them (``TRUST_PROXY_HEADERS``).
    """
    if trust_proxy_headers:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()
    return request.client.host if request.client else "unknown"


async def enforce_rate_limit(request: Request) -> None:
    """App-wide FastAPI dependency for inbound rate limiting.

    Uses the limiter stored on ``app.state.rate_limiter``; does nothing if the
    app has none.

    Raises:
        HTTPException: 429 if rate limit exceeded
    """
    limiter: RateLimiter = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        return

    settings = getattr(request.app.state, "settings", None)
    trust_proxy_headers = bool(settings and settings.rate_limit.trust_proxy_headers)

    key = client_key(request, trust_proxy_headers)
    if not limiter.check_limit(key):
        raise HTTPException(
            status_code=429,
            detail=RATE_LIMIT_MESSAGE,
            headers={"Retry-After": str(limiter.retry_after(key))},
        )
