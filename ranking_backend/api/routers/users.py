"""Leaderboard user endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session

from ...core import get_session
from ...services.ranking import compute_rankings, ranked_user_to_dict
from ...services.users import add_user, initialize_users, user_to_dict, users_to_dicts

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/initialize-users", status_code=201)
def initialize(session: Session = Depends(get_session)):
    """Seed the default roster with random starting points."""

    result = initialize_users(session)
    inserted = users_to_dicts(result.inserted)
    if result.partial:
        return JSONResponse(
            status_code=409,
            content={
                "message": "Some users already exist. Database initialized partially or already exists.",
                "insertedUsers": inserted,
                "skippedUsernames": result.skipped,
            },
        )
    return {
        "message": f"{len(inserted)} users initialized successfully.",
        "insertedUsers": inserted,
    }


@router.get("/users")
def list_users(session: Session = Depends(get_session)):
    """Return every user ranked by points."""

    return [ranked_user_to_dict(user) for user in compute_rankings(session)]


@router.post("/users", status_code=201)
def create_user(
    body: Dict[str, Any] = Body(...), session: Session = Depends(get_session)
):
    """Register a user and return the refreshed leaderboard."""

    user = add_user(session, body.get("username"))
    return {
        "message": "User added successfully!",
        "user": user_to_dict(user),
        "updatedRankings": [
            ranked_user_to_dict(ranked) for ranked in compute_rankings(session)
        ],
    }


__all__ = ["router"]
