"""Database module for the news proxy.

Provides the Supabase client singleton and repositories for user/session data.
The news fetch path has no dependency on this module.
"""

from newsproxy.infrastructure.database.client import SupabaseClient
from newsproxy.infrastructure.database.models import UserRecord
from newsproxy.infrastructure.database.repositories import BaseRepository, UserRepository

__all__ = [
    "SupabaseClient",
    "UserRecord",
    "BaseRepository",
    "UserRepository",
]
