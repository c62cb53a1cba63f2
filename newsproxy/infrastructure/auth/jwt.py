"""JWT authentication for the news proxy.

Handles verification of HS256 bearer tokens issued by the account service.
"""

import jwt
from fastapi import HTTPException

from newsproxy.config import config
from newsproxy.core.logging import logger


def verify_jwt_token(token: str) -> str:
    """Verify JWT token locally using the shared JWT secret.

    Args:
        token: JWT token string (without "Bearer " prefix)

    Returns:
        User ID from the ``userId`` claim (or ``sub``)

    Raises:
        HTTPException: 401 if token invalid or expired, 500 if not configured
    """
    jwt_secret = config.jwt_secret()

    if not jwt_secret:
        logger.error("jwt_verification_failed", reason="JWT_SECRET not configured")
        raise HTTPException(
            status_code=500,
            detail="JWT authentication not configured. Contact administrator.",
        )

    try:
        payload = jwt.decode(token, jwt_secret, algorithms=["HS256"])

    except jwt.ExpiredSignatureError:
        logger.warning("jwt_token_expired")
        raise HTTPException(status_code=401, detail="Token expired")

    except jwt.InvalidTokenError as e:
        logger.warning("jwt_token_invalid", error=str(e))
        raise HTTPException(status_code=401, detail="Token is not valid")

    user_id = payload.get("userId") or payload.get("sub")

    if not user_id:
        logger.warning("jwt_token_invalid", error="missing user id")
        raise HTTPException(status_code=401, detail="Token is not valid")

    logger.debug("jwt_token_verified", user_id=user_id)
    return str(user_id)
