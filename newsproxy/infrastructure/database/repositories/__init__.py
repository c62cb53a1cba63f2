"""Repository implementations for the news proxy."""

from newsproxy.infrastructure.database.repositories.base import BaseRepository
from newsproxy.infrastructure.database.repositories.users import UserRepository

__all__ = ["BaseRepository", "UserRepository"]
