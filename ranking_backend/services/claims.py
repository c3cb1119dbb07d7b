"""Points claim transaction and claim history lookup."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.time import isoformat_utc, utcnow
from ..errors import NotFoundError, StorageError
from ..models import ClaimHistory, User
from .ranking import RankedUser, compute_rankings

logger = logging.getLogger(__name__)

MIN_CLAIM_POINTS = 1
MAX_CLAIM_POINTS = 10


@dataclass(frozen=True)
class ClaimResult:
    user: User
    points_claimed: int
    rankings: List[RankedUser]


@dataclass(frozen=True)
class HistoryEntry:
    """A claim history row joined with the claiming user's name."""

    id: int
    user_id: int
    username: Optional[str]
    points_claimed: int
    claimed_at: datetime


def draw_points(rng: Optional[random.Random] = None) -> int:
    """Pick a claim amount uniformly from the closed claim range."""

    return (rng or random).randint(MIN_CLAIM_POINTS, MAX_CLAIM_POINTS)


def claim_points(
    session: Session, user_id: int, *, rng: Optional[random.Random] = None
) -> ClaimResult:
    """Award a random amount to ``user_id``, log it and return fresh rankings.

    The increment is a single ``UPDATE ... SET points = points + n`` so that
    concurrent claims for the same user cannot lose updates. The history row
    is committed in the same transaction, after the increment.
    """

    points_claimed = draw_points(rng)
    try:
        session.exec(
            update(User)
            .where(User.id == user_id)
            .values(points=User.points + points_claimed, updated_at=utcnow())
        )
        user = session.exec(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        ).first()
        if user is None:
            session.rollback()
            raise NotFoundError("User not found.")

        session.add(ClaimHistory(user_id=user.id, points_claimed=points_claimed))
        session.commit()
        session.refresh(user)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to claim points for user %s", user_id)
        raise StorageError("Error claiming points") from exc

    logger.info(
        "User %s (id=%s) claimed %d points, total %d",
        user.username,
        user.id,
        points_claimed,
        user.points,
    )
    return ClaimResult(
        user=user,
        points_claimed=points_claimed,
        rankings=compute_rankings(session),
    )


def get_history(session: Session, user_id: int) -> List[HistoryEntry]:
    """Return a user's claims, most recent first."""

    try:
        rows = session.exec(
            select(ClaimHistory, User.username)
            .join(User, User.id == ClaimHistory.user_id, isouter=True)
            .where(ClaimHistory.user_id == user_id)
            .order_by(ClaimHistory.claimed_at.desc(), ClaimHistory.id.desc())
        ).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch claim history for user %s", user_id)
        raise StorageError("Error fetching claim history") from exc

    return [
        HistoryEntry(
            id=entry.id,
            user_id=entry.user_id,
            username=username,
            points_claimed=entry.points_claimed,
            claimed_at=entry.claimed_at,
        )
        for entry, username in rows
    ]


def history_entry_to_dict(entry: HistoryEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "username": entry.username,
        "pointsClaimed": entry.points_claimed,
        "claimedAt": isoformat_utc(entry.claimed_at),
    }


__all__ = [
    "ClaimResult",
    "HistoryEntry",
    "MAX_CLAIM_POINTS",
    "MIN_CLAIM_POINTS",
    "claim_points",
    "draw_points",
    "get_history",
    "history_entry_to_dict",
]
