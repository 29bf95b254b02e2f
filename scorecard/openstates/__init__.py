"""OpenStates v3 API client and upstream record types."""

from scorecard.openstates.client import (
    Ballot,
    BillPage,
    BillRecord,
    OpenStatesClient,
    OptionCounts,
    RosterEntry,
    SessionCandidate,
    VoteEvent,
)

__all__ = [
    "Ballot",
    "BillPage",
    "BillRecord",
    "OpenStatesClient",
    "OptionCounts",
    "RosterEntry",
    "SessionCandidate",
    "VoteEvent",
]
