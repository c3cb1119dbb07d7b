"""Service layer helpers."""

from .claims import ClaimResult, HistoryEntry, claim_points, draw_points, get_history
from .ranking import RankedUser, compute_rankings, rank_users
from .users import DEFAULT_USERNAMES, SeedResult, add_user, initialize_users

__all__ = [
    "ClaimResult",
    "DEFAULT_USERNAMES",
    "HistoryEntry",
    "RankedUser",
    "SeedResult",
    "add_user",
    "claim_points",
    "compute_rankings",
    "draw_points",
    "get_history",
    "initialize_users",
    "rank_users",
]
