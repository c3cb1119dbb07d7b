"""Database model for the append-only claim log."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class ClaimHistory(SQLModel, table=True):
    """One row per successful points claim."""

    __tablename__ = "claim_history"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(foreign_key="user.id", index=True)
    points_claimed: int = ORMField(gt=0)
    claimed_at: datetime = ORMField(default_factory=utcnow, index=True)
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["ClaimHistory"]
