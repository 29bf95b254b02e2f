"""Harvest bills and their roll-call vote events for one session."""

import logging
from dataclasses import dataclass, field

from app.models.enums import Chamber
from scorecard.jurisdictions import chamber_classification
from scorecard.openstates.client import BillRecord, OpenStatesClient

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


@dataclass
class HarvestResult:
    """Bills collected from one session probe."""

    session: str
    bills: list[BillRecord] = field(default_factory=list)
    total_items: int = 0

    @property
    def vote_event_count(self) -> int:
        return sum(len(b.vote_events) for b in self.bills)


class VoteHarvester:
    """Fetches bills with embedded votes, sorted by most recently updated."""

    def __init__(
        self,
        client: OpenStatesClient,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = 1,
    ):
        self.client = client
        self.page_size = page_size
        self.max_pages = max_pages

    async def harvest(
        self,
        jurisdiction: str,
        session: str,
        chamber: Chamber | str | None = None,
        page: int = 1,
    ) -> HarvestResult:
        """Fetch bills for a session starting at the given page.

        Reads up to ``max_pages`` consecutive pages and stops early on a short
        page. A session with no bills yields an empty result, not an error.
        Upstream failures propagate as UpstreamUnavailable.

        Args:
            jurisdiction: Jurisdiction name, e.g. "Nevada".
            session: Session identifier.
            chamber: Domain chamber label; unmapped labels apply no filter.
            page: 1-indexed first page to read.
        """
        classification = chamber_classification(chamber)
        result = HarvestResult(session=session)

        for page_num in range(page, page + self.max_pages):
            bill_page = await self.client.get_bills_with_votes(
                jurisdiction,
                session,
                chamber=classification,
                page=page_num,
                per_page=self.page_size,
            )
            result.bills.extend(bill_page.bills)
            if page_num == page:
                result.total_items = bill_page.total_items

            if (
                len(bill_page.bills) < self.page_size
                or bill_page.page >= bill_page.max_page
            ):
                break

        logger.info(
            f"Session {session}: {len(result.bills)} bills, "
            f"{result.vote_event_count} vote events"
        )
        return result
