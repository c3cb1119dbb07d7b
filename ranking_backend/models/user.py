"""Database model for ranked users."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow

USERNAME_MAX_LENGTH = 40


class User(SQLModel, table=True):
    """Participant identified by a unique display name."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(index=True, unique=True, max_length=USERNAME_MAX_LENGTH)
    points: int = ORMField(default=0)
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["USERNAME_MAX_LENGTH", "User"]
