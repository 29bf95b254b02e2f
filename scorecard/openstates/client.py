"""OpenStates v3 API client for roster, session and roll-call vote data."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from app.models.enums import Chamber
from scorecard.exceptions import ConfigurationError, UpstreamUnavailable
from scorecard.jurisdictions import chamber_from_classification, ocd_jurisdiction_id

logger = logging.getLogger(__name__)

# =============================================================================
# OpenStates API Configuration
# =============================================================================
# Primary documentation: https://v3.openstates.org/docs
#
# API Key: Required. Register at https://open.pluralpolicy.com/accounts/profile/
# Set via environment variable OPENSTATES_API_KEY or pass to client.
# Sent as the X-API-KEY header.
#
# Rate limits: the default tier is small (roughly 10 requests/minute), so
# a reconciliation request makes at most five sequential calls.
# =============================================================================

OPENSTATES_BASE_URL = "https://v3.openstates.org"

# HARDCODED ASSUMPTION: OpenStates caps per_page at 50 for /bills and /people
MAX_PAGE_SIZE = 50


def _safe_int(value: Any) -> int:
    """Safely convert a value to int, returning 0 if not possible."""
    if value is None:
        return 0
    try:
        return int(value)
    except (ValueError, TypeError):
        return 0


@dataclass
class RosterEntry:
    """A legislator as listed on a jurisdiction's roster."""

    id: str  # e.g., "ocd-person/5a1b..."
    name: str
    party: str  # Free text; "Democratic" and "Democrat" both occur
    chamber: Chamber  # From current_role.org_classification
    district: str | None = None
    jurisdiction: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "RosterEntry":
        """Create from an OpenStates /people result."""
        role = data.get("current_role") or {}
        jurisdiction = data.get("jurisdiction") or {}

        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            party=data.get("party") or "",
            chamber=chamber_from_classification(role.get("org_classification")),
            district=role.get("district"),
            jurisdiction=jurisdiction.get("name"),
        )


@dataclass
class SessionCandidate:
    """A legislative session advertised in jurisdiction metadata."""

    identifier: str  # e.g., "83rd2025"
    start_date: str  # ISO date, may be empty
    name: str | None = None
    end_date: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "SessionCandidate":
        """Create from an entry of legislative_sessions."""
        return cls(
            identifier=data.get("identifier", ""),
            start_date=data.get("start_date") or "",
            name=data.get("name"),
            end_date=data.get("end_date"),
        )


@dataclass
class Ballot:
    """One voter's ballot inside a roll call, identified only by name."""

    voter_name: str
    option: str  # "yes", "no", "other", "not voting", "absent", "excused", ...

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Ballot":
        """Create from an entry of a vote event's votes list."""
        return cls(
            voter_name=data.get("voter_name") or "",
            option=data.get("option") or "",
        )


@dataclass
class OptionCounts:
    """Aggregate tallies reported for a vote event."""

    yes: int = 0
    no: int = 0
    other: int = 0

    @classmethod
    def from_api_response(cls, counts: list[dict[str, Any]]) -> "OptionCounts":
        """Create from a vote event's counts list of {option, value}."""
        by_option = {c.get("option"): _safe_int(c.get("value")) for c in counts}
        return cls(
            yes=by_option.get("yes", 0),
            no=by_option.get("no", 0),
            other=by_option.get("other", 0),
        )


@dataclass
class VoteEvent:
    """A single roll-call vote on a motion."""

    id: str
    date: str
    motion_text: str
    result_text: str
    option_counts: OptionCounts = field(default_factory=OptionCounts)
    ballots: list[Ballot] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "VoteEvent":
        """Create from an entry of a bill's votes list."""
        classifications = data.get("motion_classification") or []

        return cls(
            id=data.get("id", ""),
            date=data.get("start_date") or data.get("created_at") or "",
            motion_text=data.get("motion_text")
            or (classifications[0] if classifications else "")
            or "Vote",
            result_text=data.get("result") or "",
            option_counts=OptionCounts.from_api_response(data.get("counts") or []),
            ballots=[Ballot.from_api_response(v) for v in data.get("votes") or []],
        )


@dataclass
class BillRecord:
    """A bill together with its recorded vote events."""

    id: str
    identifier: str  # e.g., "SB 42"
    title: str
    vote_events: list[VoteEvent] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "BillRecord":
        """Create from an OpenStates /bills result fetched with include=votes."""
        bill_id = data.get("id", "")
        return cls(
            id=bill_id,
            identifier=data.get("identifier") or bill_id,
            title=data.get("title") or "Untitled",
            vote_events=[
                VoteEvent.from_api_response(v) for v in data.get("votes") or []
            ],
        )


@dataclass
class BillPage:
    """One page of the /bills listing."""

    bills: list[BillRecord]
    total_items: int
    page: int
    max_page: int

    @classmethod
    def from_api_response(cls, data: dict[str, Any], page: int) -> "BillPage":
        """Create from a paginated /bills response."""
        results = data.get("results") or []
        pagination = data.get("pagination") or {}
        return cls(
            bills=[BillRecord.from_api_response(b) for b in results],
            total_items=_safe_int(pagination.get("total_items")) or len(results),
            page=_safe_int(pagination.get("page")) or page,
            max_page=_safe_int(pagination.get("max_page")) or page,
        )


class OpenStatesClient:
    """Client for the OpenStates v3 API.

    Provides the three calls the scorecard needs: roster lookup by name,
    jurisdiction session metadata, and bills with roll-call votes.

    API Documentation: https://v3.openstates.org/docs
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        base_url: str | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
    ):
        """Initialize the OpenStates client.

        Args:
            api_key: OpenStates API key. If not provided, reads from app settings
                (which loads from OPENSTATES_API_KEY environment variable or .env).
            timeout: HTTP request timeout in seconds.
            base_url: API root, for pointing at a mirror.
            max_retries: Attempts per call. 1 means a failed call is not retried.
            retry_delay: Base delay for exponential backoff between attempts.

        Raises:
            ConfigurationError: If no API key is provided or found in settings.
        """
        from app.config import settings

        self.api_key = api_key or settings.openstates_api_key
        if not self.api_key:
            raise ConfigurationError(
                "OpenStates API key not configured. Set OPENSTATES_API_KEY "
                "environment variable or pass api_key parameter."
            )
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.base_url = (base_url or settings.openstates_base_url).rstrip("/")
        self.max_retries = max_retries or settings.max_retries
        self.retry_delay = (
            retry_delay if retry_delay is not None else settings.retry_delay
        )

    @property
    def headers(self) -> dict[str, str]:
        return {"X-API-KEY": self.api_key, "Accept": "application/json"}

    async def _request_with_retry(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make HTTP request, retrying 5xx and transport errors if configured.

        Args:
            client: httpx AsyncClient instance.
            method: HTTP method (GET, POST, etc.).
            url: Request URL.
            **kwargs: Additional arguments passed to client.request().

        Returns:
            httpx.Response on success.

        Raises:
            UpstreamUnavailable: On a 4xx response, or after all attempts are
                exhausted for 5xx responses, timeouts and connection errors.
                Each attempt is capped at ``timeout`` seconds overall, on top
                of httpx's per-phase limits.
        """
        for attempt in range(self.max_retries):
            try:
                async with asyncio.timeout(self.timeout):
                    response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if status >= 500 and attempt < self.max_retries - 1:
                    delay = self.retry_delay * (2**attempt)  # Exponential backoff
                    logger.warning(
                        f"Server error {status}, "
                        f"retrying in {delay}s (attempt {attempt + 1}/{self.max_retries})"
                    )
                    await asyncio.sleep(delay)
                    continue
                raise UpstreamUnavailable(
                    "OpenStates request failed", url=url, status_code=status
                ) from e
            except (httpx.RequestError, TimeoutError) as e:
                if attempt < self.max_retries - 1:
                    delay = self.retry_delay * (2**attempt)
                    logger.warning(
                        f"Request error: {e!r}, "
                        f"retrying in {delay}s (attempt {attempt + 1}/{self.max_retries})"
                    )
                    await asyncio.sleep(delay)
                    continue
                raise UpstreamUnavailable(
                    f"OpenStates request error: {e!r}", url=url
                ) from e

        raise RuntimeError("Unexpected error in retry logic")

    async def _get_json(
        self, path: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """GET a path under the API root and decode the JSON object body."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        async with httpx.AsyncClient(
            timeout=self.timeout, headers=self.headers
        ) as client:
            response = await self._request_with_retry(client, "GET", url, params=params)
        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamUnavailable(
                "OpenStates returned a non-JSON body",
                url=url,
                status_code=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise UpstreamUnavailable(
                "OpenStates returned an unexpected body",
                url=url,
                status_code=response.status_code,
            )
        return data

    async def search_people(
        self,
        name: str,
        jurisdiction: str,
        per_page: int = 5,
    ) -> list[RosterEntry]:
        """Search a jurisdiction's roster by name.

        Args:
            name: Free-text name or name fragment.
            jurisdiction: Jurisdiction name, e.g. "Nevada".
            per_page: Number of candidates to request (max 50).

        Returns:
            Roster entries in the upstream's relevance order.
        """
        params = {
            "jurisdiction": jurisdiction,
            "name": name,
            "per_page": min(per_page, MAX_PAGE_SIZE),
        }
        logger.info(f"Searching {jurisdiction} roster for {name!r}")
        data = await self._get_json("/people", params=params)
        people = [RosterEntry.from_api_response(p) for p in data.get("results") or []]
        logger.info(f"Found {len(people)} roster candidates for {name!r}")
        return people

    async def get_legislative_sessions(
        self, jurisdiction: str
    ) -> list[SessionCandidate]:
        """Fetch the legislative sessions listed in jurisdiction metadata.

        Args:
            jurisdiction: Jurisdiction name, e.g. "Nevada".

        Returns:
            Sessions in the order the upstream lists them.
        """
        path = f"/jurisdictions/{ocd_jurisdiction_id(jurisdiction)}"
        logger.info(f"Fetching session metadata for {jurisdiction}")
        data = await self._get_json(path)
        sessions = data.get("legislative_sessions") or []
        return [SessionCandidate.from_api_response(s) for s in sessions]

    async def get_bills_with_votes(
        self,
        jurisdiction: str,
        session: str,
        chamber: str | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> BillPage:
        """Fetch one page of bills with their roll-call votes embedded.

        Args:
            jurisdiction: Jurisdiction name, e.g. "Nevada".
            session: Session identifier, e.g. "83rd2025".
            chamber: Upstream classification ("upper" or "lower"), or None.
            page: 1-indexed page number.
            per_page: Page size (max 50).

        Returns:
            BillPage with bills sorted by most recently updated.
        """
        params: dict[str, Any] = {
            "jurisdiction": jurisdiction,
            "session": session,
            "include": "votes",
            "per_page": min(per_page, MAX_PAGE_SIZE),
            "page": page,
            "sort": "updated_desc",
        }
        if chamber:
            params["chamber"] = chamber

        logger.info(f"Fetching bills for session {session} (page={page})")
        data = await self._get_json("/bills", params=params)
        return BillPage.from_api_response(data, page)
