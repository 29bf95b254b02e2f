"""ENUM types shared by the API schemas and the reconciliation core."""

import enum


class Chamber(str, enum.Enum):
    """State legislative chamber, as labelled on the dashboard."""

    SENATE = "Senate"  # OpenStates "upper"
    ASSEMBLY = "Assembly"  # OpenStates "lower"


class CanonicalVote(str, enum.Enum):
    """Normalized ballot cast by a legislator on a roll call."""

    YES = "Yes"
    NO = "No"
    ABSTAIN = "Abstain"
    NOT_VOTING = "Not Voting"


class VoteResult(str, enum.Enum):
    """Outcome of a roll-call vote event.

    Inferred from free-text result strings; there is no Pending state.
    """

    PASSED = "Passed"
    FAILED = "Failed"
