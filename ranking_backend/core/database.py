"""Database engine construction and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    SQLite files get their parent directory created; in-memory SQLite shares a
    single connection so every session sees the same database.
    """

    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if not url.database or url.database == ":memory:":
        return create_engine(
            database_url, connect_args=connect_args, poolclass=StaticPool
        )

    Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, connect_args=connect_args)


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a session bound to the app's engine."""

    with Session(request.app.state.engine) as session:
        yield session


__all__ = ["build_engine", "get_session"]
