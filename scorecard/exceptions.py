"""Exception hierarchy for scorecard reconciliation."""

from dataclasses import dataclass


@dataclass
class ScorecardError(Exception):
    """Base exception for scorecard errors."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigurationError(ScorecardError):
    """Raised when upstream credentials or settings are missing."""


@dataclass
class InvalidRequestError(ScorecardError):
    """Raised when a reconciliation request is malformed."""


@dataclass
class UpstreamUnavailable(ScorecardError):
    """Raised when a single OpenStates call fails or times out."""

    url: str
    status_code: int | None = None

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} ({self.status_code} from {self.url})"
        return f"{self.message} ({self.url})"
