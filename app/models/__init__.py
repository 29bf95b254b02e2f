"""Enumerations for the Civic Scorecard domain."""

from app.models.enums import CanonicalVote, Chamber, VoteResult

__all__ = [
    "CanonicalVote",
    "Chamber",
    "VoteResult",
]
