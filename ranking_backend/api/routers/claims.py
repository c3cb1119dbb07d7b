"""Points claim and claim history endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services.claims import claim_points, get_history, history_entry_to_dict
from ...services.ranking import ranked_user_to_dict
from ...services.users import user_to_dict

router = APIRouter(prefix="/api", tags=["claims"])


@router.post("/claim-points/{user_id}")
def claim(user_id: int, session: Session = Depends(get_session)):
    """Award a random 1-10 points to a user."""

    result = claim_points(session, user_id)
    return {
        "message": f"Successfully claimed {result.points_claimed} points for {result.user.username}!",
        "user": user_to_dict(result.user),
        "pointsClaimed": result.points_claimed,
        "updatedRankings": [ranked_user_to_dict(user) for user in result.rankings],
    }


@router.get("/claim-history/{user_id}")
def claim_history(user_id: int, session: Session = Depends(get_session)):
    """List a user's claims, newest first."""

    return [history_entry_to_dict(entry) for entry in get_history(session, user_id)]


__all__ = ["router"]
