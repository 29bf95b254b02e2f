"""Discover candidate legislative sessions for a jurisdiction."""

import logging

from scorecard.exceptions import UpstreamUnavailable
from scorecard.openstates.client import OpenStatesClient, SessionCandidate

logger = logging.getLogger(__name__)

# HARDCODED ASSUMPTION: used when jurisdiction metadata cannot be fetched.
# These are Nevada's identifiers, matching the default jurisdiction.
DEFAULT_FALLBACK_SESSIONS = ["2025", "83rd2025", "82nd2023"]


def order_sessions(sessions: list[SessionCandidate]) -> list[SessionCandidate]:
    """Sort sessions most recent first by ISO start date.

    Sessions without a start date sort last; the sort is stable.
    """
    return sorted(sessions, key=lambda s: s.start_date, reverse=True)


class SessionDiscoverer:
    """Lists a jurisdiction's sessions, newest first.

    Which session actually has votes is not known here; the orchestrator
    learns that by probing.
    """

    def __init__(
        self,
        client: OpenStatesClient,
        fallback_sessions: list[str] | None = None,
    ):
        self.client = client
        self.fallback_sessions = (
            fallback_sessions
            if fallback_sessions is not None
            else list(DEFAULT_FALLBACK_SESSIONS)
        )

    def _fallback(self) -> list[SessionCandidate]:
        return [
            SessionCandidate(identifier=identifier, start_date="")
            for identifier in self.fallback_sessions
        ]

    async def list_sessions(self, jurisdiction: str) -> list[SessionCandidate]:
        """Return ordered session candidates for a jurisdiction."""
        try:
            sessions = await self.client.get_legislative_sessions(jurisdiction)
        except UpstreamUnavailable as e:
            logger.warning(
                f"Could not fetch sessions for {jurisdiction}, using defaults: {e}"
            )
            return self._fallback()

        if not sessions:
            logger.warning(f"No sessions listed for {jurisdiction}, using defaults")
            return self._fallback()

        ordered = order_sessions(sessions)
        logger.info(
            f"Available sessions for {jurisdiction}: "
            f"{[s.identifier for s in ordered]}"
        )
        return ordered
