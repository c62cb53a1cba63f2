"""Base repository interface for the news proxy.

Implements Repository pattern with Dependency Inversion principle.
All concrete repositories inherit from BaseRepository.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from newsproxy.infrastructure.database.client import SupabaseClient

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository for database operations."""

    def __init__(self):
        """Initialize repository with Supabase client."""
        self._client: SupabaseClient = SupabaseClient()

    @property
    def db(self):
        """Get Supabase client instance."""
        return self._client.client

    def is_configured(self) -> bool:
        return self._client.is_configured()

    @abstractmethod
    def table_name(self) -> str:
        """Return the table name this repository manages."""
        pass
