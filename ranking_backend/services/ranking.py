"""Leaderboard ranking computation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.time import isoformat_utc
from ..errors import StorageError
from ..models import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedUser:
    """Snapshot of a user with its position on the leaderboard."""

    id: int
    username: str
    points: int
    rank: int
    created_at: datetime
    updated_at: datetime


def rank_users(users: Iterable[User]) -> List[RankedUser]:
    """Assign competition ranks to users already sorted by points descending.

    Equal scores share a rank and the next distinct score takes its 1-based
    position, so ``[50, 50, 40]`` ranks as ``[1, 1, 3]``.
    """

    ranked: List[RankedUser] = []
    previous_points = None
    current_rank = 0
    for index, user in enumerate(users):
        if user.points != previous_points:
            current_rank = index + 1
        ranked.append(
            RankedUser(
                id=user.id,
                username=user.username,
                points=user.points,
                rank=current_rank,
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
        )
        previous_points = user.points
    return ranked


def compute_rankings(session: Session) -> List[RankedUser]:
    """Fetch every user and return them ranked by points."""

    try:
        users = session.exec(select(User).order_by(User.points.desc())).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch users for ranking")
        raise StorageError("Error fetching users") from exc
    return rank_users(users)


def ranked_user_to_dict(user: RankedUser) -> Dict[str, Any]:
    """Serialise a ranked user to an API-friendly dict."""

    return {
        "id": user.id,
        "username": user.username,
        "points": user.points,
        "rank": user.rank,
        "createdAt": isoformat_utc(user.created_at),
        "updatedAt": isoformat_utc(user.updated_at),
    }


__all__ = ["RankedUser", "compute_rankings", "rank_users", "ranked_user_to_dict"]
