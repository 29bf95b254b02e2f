"""Aggregate reconciled votes into a legislator scorecard."""

import math
from collections import Counter

from app.models.enums import CanonicalVote
from app.schemas.voting_records import ReconciledVote, ScorecardSummary
from scorecard.openstates.client import RosterEntry

# Upstream party spellings reported under a different label
PARTY_LABELS = {"Democratic": "Democrat"}


def _percent(numerator: int, denominator: int) -> int:
    """Percentage rounded half up, clamped to [0, 100]; 0 for an empty denominator."""
    if denominator <= 0:
        return 0
    return max(0, min(100, math.floor(100 * numerator / denominator + 0.5)))


def normalize_party(party: str) -> str:
    return PARTY_LABELS.get(party, party)


def sort_votes(votes: list[ReconciledVote]) -> list[ReconciledVote]:
    """Order votes by date, newest first, keeping retrieval order on ties."""
    return sorted(votes, key=lambda v: v.date, reverse=True)


def majority_vote(vote: ReconciledVote) -> CanonicalVote:
    """The side with more yes/no votes in the event; ties count as No."""
    return CanonicalVote.YES if vote.yes_count > vote.no_count else CanonicalVote.NO


def majority_alignment_percent(votes: list[ReconciledVote]) -> int:
    """Share of the legislator's yes/no ballots that sided with the event majority.

    This compares against the whole chamber's majority in each event, not
    against the legislator's party caucus.
    """
    eligible = [
        v for v in votes if v.canonical_vote in (CanonicalVote.YES, CanonicalVote.NO)
    ]
    aligned = sum(1 for v in eligible if v.canonical_vote == majority_vote(v))
    return _percent(aligned, len(eligible))


def aggregate(
    votes: list[ReconciledVote],
    roster: RosterEntry,
    session_used: str,
) -> ScorecardSummary:
    """Summarize a legislator's reconciled votes for one session."""
    tally = Counter(v.canonical_vote for v in votes)
    total = len(votes)
    yes = tally[CanonicalVote.YES]
    no = tally[CanonicalVote.NO]
    abstain = tally[CanonicalVote.ABSTAIN]

    return ScorecardSummary(
        total_votes=total,
        yes_votes=yes,
        no_votes=no,
        abstain_votes=abstain,
        not_voting_count=tally[CanonicalVote.NOT_VOTING],
        attendance_percent=_percent(yes + no + abstain, total),
        majority_alignment_percent=majority_alignment_percent(votes),
        session_used=session_used,
        legislator_name=roster.name,
        party=normalize_party(roster.party),
        chamber=roster.chamber,
    )
