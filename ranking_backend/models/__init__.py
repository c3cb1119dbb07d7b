"""Database model exports."""

from .claim_history import ClaimHistory
from .user import USERNAME_MAX_LENGTH, User

__all__ = [
    "ClaimHistory",
    "USERNAME_MAX_LENGTH",
    "User",
]
