"""System-level API endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["system"])


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Plain-text banner for quick manual checks."""

    return "Dynamic Ranking Backend is running!"


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


__all__ = ["router"]
