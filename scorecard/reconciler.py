"""Match a legislator's ballot inside roll-call vote events.

Ballots carry only a free-text voter name, so matching is heuristic: a
ballot belongs to the legislator when its lower-cased name equals the full
name or contains the surname. "Doering" therefore matches "Jane Doe", and
when several ballots match in one event the first one wins.
"""

import logging

from app.models.enums import CanonicalVote, VoteResult
from app.schemas.voting_records import ReconciledVote
from scorecard.exceptions import InvalidRequestError
from scorecard.openstates.client import Ballot, BillRecord, VoteEvent

logger = logging.getLogger(__name__)

NOT_VOTING_OPTIONS = frozenset({"not voting", "absent", "excused"})
PASSING_KEYWORDS = ("pass", "adopt")


def surname(name: str) -> str:
    """Return the last whitespace-delimited token of a name, lower-cased."""
    tokens = name.lower().split()
    return tokens[-1] if tokens else ""


def find_ballot(event: VoteEvent, legislator_name: str) -> Ballot | None:
    """Return the first ballot in the event that matches the legislator."""
    full_name = legislator_name.lower()
    last_name = surname(legislator_name)
    if not last_name:
        raise InvalidRequestError("legislator name must not be blank")

    for ballot in event.ballots:
        voter = ballot.voter_name.lower()
        if voter == full_name or last_name in voter:
            return ballot
    return None


def canonicalize_option(option: str) -> CanonicalVote:
    """Map an upstream vote option to a canonical vote.

    "yes" and "no" map directly, absences map to Not Voting, and every other
    option (including "other" and "abstain") is an abstention.
    """
    normalized = option.strip().lower()
    if normalized == "yes":
        return CanonicalVote.YES
    if normalized == "no":
        return CanonicalVote.NO
    if normalized in NOT_VOTING_OPTIONS:
        return CanonicalVote.NOT_VOTING
    return CanonicalVote.ABSTAIN


def classify_result(result_text: str) -> VoteResult:
    """Classify free-text event results as Passed or Failed.

    Anything without "pass" or "adopt" is Failed, including procedural
    outcomes such as "referred to committee".
    """
    lowered = result_text.lower()
    if any(keyword in lowered for keyword in PASSING_KEYWORDS):
        return VoteResult.PASSED
    return VoteResult.FAILED


def reconcile_event(
    bill: BillRecord, event: VoteEvent, legislator_name: str
) -> ReconciledVote | None:
    """Build the legislator's vote record for one event, if they appear in it."""
    ballot = find_ballot(event, legislator_name)
    if ballot is None:
        return None

    return ReconciledVote(
        bill_id=bill.id,
        bill_number=bill.identifier,
        bill_title=bill.title,
        date=event.date,
        motion=event.motion_text,
        canonical_vote=canonicalize_option(ballot.option),
        result=classify_result(event.result_text),
        yes_count=event.option_counts.yes,
        no_count=event.option_counts.no,
        other_count=event.option_counts.other,
        event_id=event.id,
        voter_name=ballot.voter_name,
    )


def reconcile(bills: list[BillRecord], legislator_name: str) -> list[ReconciledVote]:
    """Extract the legislator's ballots from every vote event of the bills.

    Events without a matching ballot contribute nothing. Output follows
    retrieval order (bill order, then event order within a bill).
    """
    votes: list[ReconciledVote] = []
    events_seen = 0
    for bill in bills:
        for event in bill.vote_events:
            events_seen += 1
            vote = reconcile_event(bill, event, legislator_name)
            if vote is not None:
                votes.append(vote)

    logger.debug(
        f"Matched {legislator_name!r} in {len(votes)} of {events_seen} vote events"
    )
    return votes
