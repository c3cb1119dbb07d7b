"""Logging setup shared by the application and CLI entry point."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO, name: str = "ranking_backend") -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level."""

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


__all__ = ["setup_logging"]
