"""CLI for building legislator voting scorecards."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from app.models.enums import Chamber
from scorecard.exceptions import ConfigurationError, ScorecardError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)-5.5s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


async def scorecard_command(
    legislator_name: str,
    jurisdiction: str | None = None,
    chamber: str | None = None,
    page: int = 1,
    as_json: bool = False,
) -> int:
    """Build and print a legislator's scorecard.

    Args:
        legislator_name: Free-text legislator name.
        jurisdiction: Jurisdiction name (default: configured jurisdiction).
        chamber: "Senate" or "Assembly" to filter bills.
        page: First bill page to read per session.
        as_json: Print the camelCase API response instead of a summary.

    Returns:
        0 on success, 1 on failure.
    """
    from scorecard.service import ScorecardService

    try:
        service = ScorecardService()
        result = await service.build_scorecard(
            legislator_name, jurisdiction=jurisdiction, chamber=chamber, page=page
        )
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    except ScorecardError as e:
        logger.error(f"Could not build scorecard: {e}")
        return 1

    if as_json:
        print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
        return 0

    if not result.legislator_found:
        print(f"\nNo legislator found for {legislator_name!r}")
        return 0

    summary = result.summary
    if summary is None:
        print(f"\nNo recorded votes found for {legislator_name!r}")
        return 0

    print(f"\n{summary.legislator_name} ({summary.party}, {summary.chamber.value})")
    print(f"  Session: {summary.session_used}")
    print(
        f"  Votes: {summary.total_votes} "
        f"(yes {summary.yes_votes}, no {summary.no_votes}, "
        f"abstain {summary.abstain_votes}, not voting {summary.not_voting_count})"
    )
    print(f"  Attendance: {summary.attendance_percent}%")
    print(f"  Majority alignment: {summary.majority_alignment_percent}%")

    if result.votes:
        print("\n  Most recent votes:")
        for vote in result.votes[:10]:
            print(
                f"    {vote.date[:10] or '----------'} {vote.bill_number}: "
                f"{vote.canonical_vote.value} on {vote.motion!r} "
                f"({vote.result.value}, {vote.yes_count}-{vote.no_count})"
            )
    return 0


async def list_sessions_command(jurisdiction: str | None = None) -> int:
    """List a jurisdiction's session candidates, newest first.

    Returns:
        0 on success, 1 on failure.
    """
    from app.config import settings
    from scorecard.openstates.client import OpenStatesClient
    from scorecard.sessions import SessionDiscoverer

    jurisdiction = jurisdiction or settings.default_jurisdiction
    try:
        discoverer = SessionDiscoverer(
            OpenStatesClient(), fallback_sessions=settings.fallback_sessions
        )
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    sessions = await discoverer.list_sessions(jurisdiction)
    print(f"\nSessions for {jurisdiction} ({len(sessions)}):")
    for i, session in enumerate(sessions):
        marker = "*" if i < settings.max_session_candidates else " "
        start = session.start_date or "unknown start"
        dates = f"{start} to {session.end_date}" if session.end_date else start
        label = f" {session.name}" if session.name else ""
        print(f"  {marker} {session.identifier}:{label} ({dates})")
    return 0


async def resolve_roster_command(
    legislator_name: str, jurisdiction: str | None = None
) -> int:
    """Print the roster entry a name resolves to.

    Returns:
        0 when found, 1 on configuration failure or when not found.
    """
    from app.config import settings
    from scorecard.openstates.client import OpenStatesClient
    from scorecard.roster import RosterResolver

    jurisdiction = jurisdiction or settings.default_jurisdiction
    try:
        resolver = RosterResolver(
            OpenStatesClient(), page_size=settings.roster_page_size
        )
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    entry = await resolver.resolve(legislator_name, jurisdiction)
    if entry is None:
        print(f"\nNo legislator found for {legislator_name!r} in {jurisdiction}")
        return 1

    print(f"\n{entry.name}")
    print(f"  ID: {entry.id}")
    print(f"  Party: {entry.party or 'Unknown'}")
    print(f"  Chamber: {entry.chamber.value}")
    if entry.jurisdiction:
        print(f"  Jurisdiction: {entry.jurisdiction}")
    if entry.district:
        print(f"  District: {entry.district}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Legislator voting scorecard CLI")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # scorecard command
    scorecard_parser = subparsers.add_parser(
        "scorecard", help="Build a legislator's voting scorecard"
    )
    scorecard_parser.add_argument(
        "name",
        type=str,
        help='Legislator name (e.g., "Maria Lopez")',
    )
    scorecard_parser.add_argument(
        "--jurisdiction",
        type=str,
        help="Jurisdiction name (default: DEFAULT_JURISDICTION setting)",
    )
    scorecard_parser.add_argument(
        "--chamber",
        choices=[c.value for c in Chamber],
        help="Only consider bills from this chamber",
    )
    scorecard_parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="First bill page to read in each session (default: 1)",
    )
    scorecard_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full response as JSON",
    )

    # sessions command
    sessions_parser = subparsers.add_parser(
        "sessions", help="List legislative sessions, newest first"
    )
    sessions_parser.add_argument(
        "--jurisdiction",
        type=str,
        help="Jurisdiction name (default: DEFAULT_JURISDICTION setting)",
    )

    # roster command
    roster_parser = subparsers.add_parser(
        "roster", help="Resolve a name to a roster entry"
    )
    roster_parser.add_argument(
        "name",
        type=str,
        help="Legislator name or surname",
    )
    roster_parser.add_argument(
        "--jurisdiction",
        type=str,
        help="Jurisdiction name (default: DEFAULT_JURISDICTION setting)",
    )

    args = parser.parse_args(argv)

    if args.command == "scorecard":
        return asyncio.run(
            scorecard_command(
                legislator_name=args.name,
                jurisdiction=args.jurisdiction,
                chamber=args.chamber,
                page=args.page,
                as_json=args.json,
            )
        )
    elif args.command == "sessions":
        return asyncio.run(list_sessions_command(jurisdiction=args.jurisdiction))
    elif args.command == "roster":
        return asyncio.run(
            resolve_roster_command(
                legislator_name=args.name,
                jurisdiction=args.jurisdiction,
            )
        )
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
