"""User repository for the news proxy.

Read-only lookups used by the authentication dependencies.
"""

import asyncio
from typing import Optional

from newsproxy.core.logging import logger
from newsproxy.infrastructure.database.models import UserRecord
from newsproxy.infrastructure.database.repositories.base import BaseRepository

USER_COLUMNS = "id, email, name, email_verified, created_at"


class UserRepository(BaseRepository[UserRecord]):
    """Repository for the users table."""

    def table_name(self) -> str:
        """Return table name."""
        return "users"

    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get a user by ID.

        Args:
            user_id: User ID from the token payload

        Returns:
            UserRecord or None if no such user

        Raises:
            RuntimeError: If Supabase is not configured
        """
        result = await asyncio.to_thread(
            lambda: self.db.table(self.table_name())
            .select(USER_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )

        if not result.data:
            logger.debug("user_not_found", user_id=user_id)
            return None

        return UserRecord.from_row(result.data[0])
