"""Pydantic schemas for legislator voting records.

These schemas are the scorecard's output records: the reconciliation core
builds them and the API returns them. Field names are snake_case in Python
and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.enums import CanonicalVote, Chamber, VoteResult


class CamelSchema(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReconciledVote(CamelSchema):
    """A legislator's ballot on one roll call, with the event's tallies.

    Attributes:
        bill_id: Upstream bill id.
        bill_number: Human-facing bill number, e.g. "SB 42".
        canonical_vote: The matched ballot, normalized.
        result: Passed/Failed, inferred from the event's result text.
        event_id: Upstream vote event id the ballot came from.
        voter_name: Ballot name that matched the legislator, for auditing.
    """

    bill_id: str
    bill_number: str
    bill_title: str
    date: str = Field("", description="Event date as reported upstream (ISO)")
    motion: str
    canonical_vote: CanonicalVote
    result: VoteResult
    yes_count: int = Field(0, ge=0)
    no_count: int = Field(0, ge=0)
    other_count: int = Field(0, ge=0)
    event_id: str = ""
    voter_name: str = ""


class ScorecardSummary(CamelSchema):
    """Aggregate voting statistics for one legislator in one session."""

    total_votes: int = Field(..., ge=0)
    yes_votes: int = Field(..., ge=0)
    no_votes: int = Field(..., ge=0)
    abstain_votes: int = Field(..., ge=0)
    not_voting_count: int = Field(..., ge=0)
    attendance_percent: int = Field(..., ge=0, le=100)
    majority_alignment_percent: int = Field(
        ...,
        ge=0,
        le=100,
        description="Share of yes/no ballots cast with the event's majority",
    )
    session_used: str
    legislator_name: str
    party: str
    chamber: Chamber


class VotingRecordsRequest(CamelSchema):
    """Request for a legislator's scorecard."""

    legislator_name: str = Field(..., min_length=1)
    chamber: Chamber | None = None
    jurisdiction: str | None = Field(
        None, description="Jurisdiction name (default: configured jurisdiction)"
    )
    page: int = Field(1, ge=1)

    @field_validator("legislator_name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("legislatorName is required")
        return value


class VotingRecordsResponse(CamelSchema):
    """Successful scorecard response.

    ``legislator_found`` is False when the roster lookup came back empty. A
    found legislator with no matching ballots has empty ``votes`` and no
    summary.
    """

    success: bool = True
    votes: list[ReconciledVote] = Field(default_factory=list)
    summary: ScorecardSummary | None = None
    total: int = 0
    legislator_found: bool = False


class ErrorResponse(BaseModel):
    """Failure body for configuration and request errors."""

    success: bool = False
    error: str
