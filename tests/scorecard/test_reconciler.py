"""Tests for ballot matching and vote canonicalization."""

import pytest

from app.models.enums import CanonicalVote, VoteResult
from scorecard.exceptions import InvalidRequestError
from scorecard.openstates.client import Ballot, BillRecord, OptionCounts, VoteEvent
from scorecard.reconciler import (
    canonicalize_option,
    classify_result,
    find_ballot,
    reconcile,
    surname,
)


def _event(
    ballots: list[tuple[str, str]],
    event_id: str = "ocd-vote/1",
    date: str = "2025-03-15",
    result: str = "pass",
) -> VoteEvent:
    return VoteEvent(
        id=event_id,
        date=date,
        motion_text="Do pass",
        result_text=result,
        option_counts=OptionCounts(yes=12, no=8, other=1),
        ballots=[Ballot(voter_name=name, option=option) for name, option in ballots],
    )


class TestSurname:
    """Tests for surname extraction."""

    def test_last_token(self) -> None:
        assert surname("Maria Lopez") == "lopez"

    def test_extra_whitespace(self) -> None:
        """Test that trailing and repeated whitespace is ignored."""
        assert surname("  Jane   Doe ") == "doe"

    def test_blank(self) -> None:
        assert surname("   ") == ""


class TestFindBallot:
    """Tests for free-text ballot matching."""

    def test_case_insensitive_full_name(self) -> None:
        """Test that JANE DOE matches a query for jane doe."""
        event = _event([("JANE DOE", "yes")])

        ballot = find_ballot(event, "jane doe")

        assert ballot is not None
        assert ballot.voter_name == "JANE DOE"

    def test_surname_only_ballot(self) -> None:
        """Test that a surname-only ballot matches the full name."""
        event = _event([("Doe", "no")])

        assert find_ballot(event, "Jane Doe") is not None

    def test_surname_substring_matches(self) -> None:
        """Test that a longer name containing the surname also matches."""
        event = _event([("Doering", "yes")])

        assert find_ballot(event, "Jane Doe") is not None

    def test_first_match_wins(self) -> None:
        """Test that the first matching ballot is selected."""
        event = _event([("Smith", "yes"), ("Doering", "no"), ("Doe", "yes")])

        ballot = find_ballot(event, "Jane Doe")

        assert ballot is not None
        assert ballot.voter_name == "Doering"

    def test_no_match(self) -> None:
        """Test that an absent legislator yields no ballot."""
        event = _event([("Smith", "yes"), ("Nguyen", "no")])

        assert find_ballot(event, "Jane Doe") is None

    def test_blank_name_rejected(self) -> None:
        """Test that a blank name cannot match every ballot."""
        with pytest.raises(InvalidRequestError):
            find_ballot(_event([("Smith", "yes")]), "  ")


class TestCanonicalizeOption:
    """Tests for vote option mapping."""

    @pytest.mark.parametrize(
        ("option", "expected"),
        [
            ("yes", CanonicalVote.YES),
            ("no", CanonicalVote.NO),
            ("not voting", CanonicalVote.NOT_VOTING),
            ("absent", CanonicalVote.NOT_VOTING),
            ("excused", CanonicalVote.NOT_VOTING),
            ("Yes", CanonicalVote.YES),
            (" Not Voting ", CanonicalVote.NOT_VOTING),
            ("other", CanonicalVote.ABSTAIN),
            ("abstain", CanonicalVote.ABSTAIN),
            ("", CanonicalVote.ABSTAIN),
        ],
    )
    def test_mapping(self, option: str, expected: CanonicalVote) -> None:
        assert canonicalize_option(option) == expected


class TestClassifyResult:
    """Tests for free-text result classification."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("pass", VoteResult.PASSED),
            ("Passed committee", VoteResult.PASSED),
            ("Amendment ADOPTED", VoteResult.PASSED),
            ("fail", VoteResult.FAILED),
            ("referred to committee", VoteResult.FAILED),
            ("", VoteResult.FAILED),
        ],
    )
    def test_classification(self, text: str, expected: VoteResult) -> None:
        assert classify_result(text) == expected


class TestReconcile:
    """Tests for reconciling bills into vote records."""

    def test_builds_vote_record(self) -> None:
        """Test that a matched ballot carries bill and event details."""
        bill = BillRecord(
            id="ocd-bill/1",
            identifier="SB 42",
            title="Renewable Energy Standards Update",
            vote_events=[_event([("Lopez", "yes")], result="Passed committee")],
        )

        votes = reconcile([bill], "Maria Lopez")

        assert len(votes) == 1
        vote = votes[0]
        assert vote.bill_id == "ocd-bill/1"
        assert vote.bill_number == "SB 42"
        assert vote.bill_title == "Renewable Energy Standards Update"
        assert vote.date == "2025-03-15"
        assert vote.motion == "Do pass"
        assert vote.canonical_vote == CanonicalVote.YES
        assert vote.result == VoteResult.PASSED
        assert (vote.yes_count, vote.no_count, vote.other_count) == (12, 8, 1)
        assert vote.event_id == "ocd-vote/1"
        assert vote.voter_name == "Lopez"

    def test_events_without_ballot_are_skipped(self) -> None:
        """Test that only events containing the legislator contribute."""
        bill = BillRecord(
            id="ocd-bill/1",
            identifier="AB 1",
            title="Land Regulations",
            vote_events=[
                _event([("Smith", "yes")], event_id="ocd-vote/1"),
                _event([("Lopez", "no")], event_id="ocd-vote/2"),
            ],
        )

        votes = reconcile([bill], "Maria Lopez")

        assert [v.event_id for v in votes] == ["ocd-vote/2"]

    def test_retrieval_order(self) -> None:
        """Test that output follows bill then event order."""
        bills = [
            BillRecord(
                id="ocd-bill/1",
                identifier="AB 1",
                title="A",
                vote_events=[_event([("Lopez", "yes")], event_id="v1")],
            ),
            BillRecord(
                id="ocd-bill/2",
                identifier="AB 2",
                title="B",
                vote_events=[
                    _event([("Lopez", "no")], event_id="v2"),
                    _event([("Lopez", "absent")], event_id="v3"),
                ],
            ),
        ]

        votes = reconcile(bills, "Maria Lopez")

        assert [v.event_id for v in votes] == ["v1", "v2", "v3"]

    def test_no_bills(self) -> None:
        assert reconcile([], "Maria Lopez") == []
