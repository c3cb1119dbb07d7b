"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    CORS_ALLOW_ALL,
    DATABASE_URL,
    DB_RESET,
    HOST,
    LOG_LEVEL,
    PORT,
)
from .database import build_engine, get_session
from .logging import setup_logging
from .time import isoformat_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "CORS_ALLOW_ALL",
    "DATABASE_URL",
    "DB_RESET",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "build_engine",
    "get_session",
    "isoformat_utc",
    "setup_logging",
    "utcnow",
]
