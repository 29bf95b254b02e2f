"""Pydantic schemas module.

This module contains Pydantic models used for:
- API request/response validation
- Data transfer between layers (scorecard core, API, CLI)
"""

from app.schemas.voting_records import (
    ErrorResponse,
    ReconciledVote,
    ScorecardSummary,
    VotingRecordsRequest,
    VotingRecordsResponse,
)

__all__ = [
    "ErrorResponse",
    "ReconciledVote",
    "ScorecardSummary",
    "VotingRecordsRequest",
    "VotingRecordsResponse",
]
