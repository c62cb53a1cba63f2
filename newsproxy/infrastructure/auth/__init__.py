"""Authentication module for the news proxy.

Bearer token verification and the user-resolving FastAPI dependencies.
"""

from newsproxy.infrastructure.auth.deps import (
    get_current_user,
    get_optional_user,
    get_user_repository,
    require_verified_user,
)
from newsproxy.infrastructure.auth.jwt import verify_jwt_token

__all__ = [
    "verify_jwt_token",
    "get_current_user",
    "get_optional_user",
    "get_user_repository",
    "require_verified_user",
]
