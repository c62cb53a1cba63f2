"""FastAPI authentication dependencies for the news proxy.

Provides reusable authentication dependencies for route protection.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from newsproxy.core.logging import logger
from newsproxy.infrastructure.auth.jwt import verify_jwt_token
from newsproxy.infrastructure.database import UserRecord, UserRepository


def get_user_repository(request: Request) -> UserRepository:
    """Get the user repository from app state, creating the default on first use."""
    repo = getattr(request.app.state, "user_repository", None)
    if repo is None:
        repo = UserRepository()
        request.app.state.user_repository = repo
    return repo


async def get_current_user(
    authorization: Optional[str] = Header(None),
    users: UserRepository = Depends(get_user_repository),
) -> UserRecord:
    """Resolve the bearer token to a user. Unverified users are allowed.

    Args:
        authorization: Authorization header with Bearer token
        users: User repository

    Returns:
        UserRecord of the token's owner

    Raises:
        HTTPException: 401 if token missing/invalid/expired or user unknown,
            500/503 if the user store is not usable
    """
    if not authorization:
        raise HTTPException(status_code=401, detail="No token provided, authorization denied")

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Invalid Authorization header format. Use: Authorization: Bearer <token>",
        )

    token = authorization[len("Bearer "):].strip()
    if not token:
        raise HTTPException(status_code=401, detail="No token provided, authorization denied")

    user_id = verify_jwt_token(token)

    if not users.is_configured():
        logger.error("user_lookup_failed", reason="Supabase not configured")
        raise HTTPException(
            status_code=500,
            detail="Authentication not configured. Contact administrator.",
        )

    try:
        user = await users.get_by_id(user_id)
    except Exception as e:
        logger.error("user_lookup_failed", user_id=user_id, error=str(e))
        raise HTTPException(status_code=503, detail="Authentication service unavailable")

    if user is None:
        raise HTTPException(status_code=401, detail="Token is not valid - user not found")

    return user


async def require_verified_user(user: UserRecord = Depends(get_current_user)) -> UserRecord:
    """Like ``get_current_user`` but rejects users whose email is not verified.

    Raises:
        HTTPException: 403 if the email is not verified
    """
    if not user.email_verified:
        logger.info("unverified_user_rejected", user_id=user.id)
        raise HTTPException(
            status_code=403,
            detail="Email not verified, please verify your email to access this resource",
        )
    return user


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    users: UserRepository = Depends(get_user_repository),
) -> Optional[UserRecord]:
    """Resolve the bearer token if there is one, never rejecting the request.

    Returns:
        UserRecord, or None when the token is missing, malformed, invalid or
        expired, the user is unknown, or the user store is not usable
    """
    if not authorization or not authorization.startswith("Bearer "):
        return None

    token = authorization[len("Bearer "):].strip()
    if not token:
        return None

    try:
        user_id = verify_jwt_token(token)
    except HTTPException:
        return None

    if not users.is_configured():
        return None

    try:
        return await users.get_by_id(user_id)
    except Exception as e:
        logger.warning("optional_user_lookup_failed", user_id=user_id, error=str(e))
        return None
