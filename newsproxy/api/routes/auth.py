"""Auth routes for the news proxy."""

from typing import Optional

from fastapi import APIRouter, Depends

from newsproxy.api.utils import success_body
from newsproxy.infrastructure.auth import get_current_user, get_optional_user
from newsproxy.infrastructure.database import UserRecord

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _user_data(user: UserRecord) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "emailVerified": user.email_verified,
    }


@router.get("/status")
async def auth_status(user: UserRecord = Depends(get_current_user)):
    """Report who the token belongs to and whether their email is verified."""
    return success_body(_user_data(user))


@router.get("/session")
async def auth_session(user: Optional[UserRecord] = Depends(get_optional_user)):
    """Report whether the caller is signed in. Never rejects the request."""
    return success_body(
        {
            "authenticated": user is not None,
            "user": _user_data(user) if user else None,
        }
    )
