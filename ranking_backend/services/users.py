"""User registration and roster seeding."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from ..core.time import isoformat_utc
from ..errors import DuplicateError, StorageError, ValidationError
from ..models import USERNAME_MAX_LENGTH, User

logger = logging.getLogger(__name__)

DEFAULT_USERNAMES: tuple[str, ...] = (
    "Rahul",
    "Kamal",
    "Sanak",
    "Priya",
    "Amit",
    "Geeta",
    "Mohan",
    "Sara",
    "Vikram",
    "Neha",
)

SEED_POINTS_MAX = 99


@dataclass
class SeedResult:
    """Outcome of seeding the default roster."""

    inserted: List[User] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.skipped)


def normalize_username(raw: Any) -> str:
    """Trim a submitted username and enforce storage rules."""

    username = raw.strip() if isinstance(raw, str) else ""
    if not username:
        raise ValidationError("Username is required.")
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(
            f"Username must be {USERNAME_MAX_LENGTH} characters or less."
        )
    return username


def add_user(session: Session, username: Any) -> User:
    """Register a new user with zero points."""

    user = User(username=normalize_username(username))
    session.add(user)
    try:
        session.commit()
        session.refresh(user)
    except IntegrityError as exc:
        session.rollback()
        logger.info("Rejected duplicate username %r", user.username)
        raise DuplicateError(
            "Username already exists. Please choose a different one."
        ) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to add user %r", user.username)
        raise StorageError("Error adding user") from exc

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


def initialize_users(
    session: Session,
    usernames: Sequence[str] = DEFAULT_USERNAMES,
    *,
    rng: Optional[random.Random] = None,
) -> SeedResult:
    """Insert the roster with random starting points, skipping existing names.

    Each user is committed on its own so a name inserted concurrently by
    another request is reported as skipped instead of failing the whole seed.
    """

    rng = rng or random.Random()
    names = [normalize_username(name) for name in usernames]
    result = SeedResult()
    try:
        existing = set(
            session.exec(select(User.username).where(User.username.in_(names))).all()
        )
        for name in names:
            if name in existing:
                result.skipped.append(name)
                continue
            existing.add(name)
            user = User(username=name, points=rng.randint(0, SEED_POINTS_MAX))
            session.add(user)
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                result.skipped.append(name)
                continue
            result.inserted.append(user)

        for user in result.inserted:
            session.refresh(user)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to initialize users")
        raise StorageError("Error initializing users") from exc

    if result.partial:
        logger.warning(
            "Seeded %d users, %d already existed", len(result.inserted), len(result.skipped)
        )
    else:
        logger.info("Seeded %d users", len(result.inserted))
    return result


def user_to_dict(user: User) -> Dict[str, Any]:
    """Serialise a user model to an API-friendly dict."""

    return {
        "id": user.id,
        "username": user.username,
        "points": user.points,
        "createdAt": isoformat_utc(user.created_at),
        "updatedAt": isoformat_utc(user.updated_at),
    }


def users_to_dicts(users: Iterable[User]) -> List[Dict[str, Any]]:
    return [user_to_dict(user) for user in users]


__all__ = [
    "DEFAULT_USERNAMES",
    "SeedResult",
    "add_user",
    "initialize_users",
    "normalize_username",
    "user_to_dict",
    "users_to_dicts",
]
