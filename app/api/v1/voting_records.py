"""Voting record endpoints for legislator scorecards."""

from fastapi import APIRouter, Depends

from app.schemas.voting_records import (
    ErrorResponse,
    VotingRecordsRequest,
    VotingRecordsResponse,
)
from scorecard.service import ScorecardService

router = APIRouter()


def get_scorecard_service() -> ScorecardService:
    """Build a service per request so no client state is shared."""
    return ScorecardService()


@router.post(
    "",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request"},
        500: {"model": ErrorResponse, "description": "OpenStates not configured"},
    },
)
async def get_voting_records(
    payload: VotingRecordsRequest,
    service: ScorecardService = Depends(get_scorecard_service),
) -> VotingRecordsResponse:
    """Reconcile a legislator's roll-call ballots into a scorecard.

    Missing legislators and sessions without votes are successful responses
    with ``legislatorFound`` and empty ``votes`` describing the outcome.
    """
    return await service.get_voting_records(payload)
