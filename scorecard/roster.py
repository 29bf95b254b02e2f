"""Resolve a free-text legislator name to a roster entry."""

import logging

from scorecard.exceptions import UpstreamUnavailable
from scorecard.openstates.client import OpenStatesClient, RosterEntry

logger = logging.getLogger(__name__)

DEFAULT_ROSTER_PAGE_SIZE = 5


class RosterResolver:
    """Looks a legislator up on the jurisdiction roster.

    The upstream relevance ranking decides: the first candidate is taken as
    canonical and namesakes are not disambiguated.
    """

    def __init__(
        self,
        client: OpenStatesClient,
        page_size: int = DEFAULT_ROSTER_PAGE_SIZE,
    ):
        self.client = client
        self.page_size = page_size

    async def resolve(self, name: str, jurisdiction: str) -> RosterEntry | None:
        """Return the best-matching roster entry, or None when not found.

        An upstream failure is reported as not found rather than raised.
        """
        try:
            candidates = await self.client.search_people(
                name, jurisdiction, per_page=self.page_size
            )
        except UpstreamUnavailable as e:
            logger.warning(f"Roster lookup for {name!r} failed: {e}")
            return None

        if not candidates:
            logger.info(f"No legislator found for {name!r} in {jurisdiction}")
            return None

        entry = candidates[0]
        if len(candidates) > 1:
            logger.debug(
                f"{len(candidates)} roster candidates for {name!r}, using {entry.name}"
            )
        logger.info(f"Found legislator: {entry.name} ({entry.id})")
        return entry
