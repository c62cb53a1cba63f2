"""Database models for the news proxy.

Type-safe dataclasses representing database records.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class UserRecord:
    """Represents a record in the users table (password hash never selected)."""

    id: str
    email: str
    name: Optional[str] = None
    email_verified: bool = False
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "UserRecord":
        """Build a record from a Supabase row."""
        return cls(
            id=str(row["id"]),
            email=row.get("email", ""),
            name=row.get("name"),
            email_verified=bool(row.get("email_verified", False)),
            created_at=row.get("created_at"),
        )
