"""Build a legislator's voting scorecard from OpenStates data."""

import logging

from app.models.enums import Chamber
from app.schemas.voting_records import VotingRecordsRequest, VotingRecordsResponse
from scorecard.aggregator import aggregate, sort_votes
from scorecard.exceptions import InvalidRequestError, UpstreamUnavailable
from scorecard.harvester import VoteHarvester
from scorecard.openstates.client import OpenStatesClient
from scorecard.reconciler import reconcile
from scorecard.roster import RosterResolver
from scorecard.sessions import SessionDiscoverer

logger = logging.getLogger(__name__)


class ScorecardService:
    """Reconciles a legislator's roll-call ballots and summarizes them.

    Resolves the roster entry, then probes the newest sessions one at a time
    until one contains a ballot for the legislator. Each call holds its own
    state, so concurrent requests for different legislators do not interact.
    """

    def __init__(
        self,
        client: OpenStatesClient | None = None,
        api_key: str | None = None,
    ):
        """Initialize the service.

        Args:
            client: OpenStates client to use. Built from settings if omitted.
            api_key: OpenStates API key (or set OPENSTATES_API_KEY env var).

        Raises:
            ConfigurationError: If no client is given and no API key is configured.
        """
        from app.config import settings

        self.client = client or OpenStatesClient(api_key=api_key)
        self.default_jurisdiction = settings.default_jurisdiction
        self.max_session_candidates = settings.max_session_candidates
        self.resolver = RosterResolver(self.client, page_size=settings.roster_page_size)
        self.discoverer = SessionDiscoverer(
            self.client, fallback_sessions=settings.fallback_sessions
        )
        self.harvester = VoteHarvester(
            self.client,
            page_size=settings.harvest_page_size,
            max_pages=settings.harvest_max_pages,
        )

    async def get_voting_records(
        self, request: VotingRecordsRequest
    ) -> VotingRecordsResponse:
        """Run the reconciliation for one request.

        Returns:
            legislator_found=False when the roster lookup is empty;
            legislator_found=True with no votes when no probed session has a
            matching ballot; otherwise the stopping session's votes, newest
            first, and their summary.
        """
        return await self.build_scorecard(
            request.legislator_name,
            jurisdiction=request.jurisdiction,
            chamber=request.chamber,
            page=request.page,
        )

    async def build_scorecard(
        self,
        legislator_name: str,
        jurisdiction: str | None = None,
        chamber: Chamber | str | None = None,
        page: int = 1,
    ) -> VotingRecordsResponse:
        """Resolve, probe sessions, reconcile and aggregate.

        Args:
            legislator_name: Free-text legislator name.
            jurisdiction: Jurisdiction name (default: configured jurisdiction).
            chamber: Chamber label used to filter bills.
            page: First bill page to read in each session.
        """
        name = legislator_name.strip()
        if not name:
            raise InvalidRequestError("legislatorName is required")
        if page < 1:
            raise InvalidRequestError("page must be 1 or greater")
        jurisdiction = jurisdiction or self.default_jurisdiction

        logger.info(
            f"Fetching voting records for {name!r} in {jurisdiction}, "
            f"chamber: {chamber}"
        )

        roster = await self.resolver.resolve(name, jurisdiction)
        if roster is None:
            return VotingRecordsResponse(legislator_found=False)

        candidates = await self.discoverer.list_sessions(jurisdiction)
        for candidate in candidates[: self.max_session_candidates]:
            session = candidate.identifier
            try:
                harvest = await self.harvester.harvest(
                    jurisdiction, session, chamber=chamber, page=page
                )
            except UpstreamUnavailable as e:
                logger.warning(f"Skipping session {session}: {e}")
                continue

            votes = reconcile(harvest.bills, name)
            if not votes:
                logger.info(f"Session {session}: no ballots for {name!r}")
                continue

            votes = sort_votes(votes)
            summary = aggregate(votes, roster, session)
            logger.info(
                f"Found {len(votes)} votes for {roster.name} in session {session}: "
                f"attendance {summary.attendance_percent}%, "
                f"majority alignment {summary.majority_alignment_percent}%"
            )
            return VotingRecordsResponse(
                votes=votes,
                summary=summary,
                total=harvest.total_items or len(harvest.bills),
                legislator_found=True,
            )

        logger.info(f"No session with ballots for {roster.name}")
        return VotingRecordsResponse(legislator_found=True)
