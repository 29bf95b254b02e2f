"""Legislator vote reconciliation against OpenStates roll-call data."""

from scorecard.aggregator import aggregate
from scorecard.harvester import HarvestResult, VoteHarvester
from scorecard.reconciler import reconcile
from scorecard.roster import RosterResolver
from scorecard.service import ScorecardService
from scorecard.sessions import SessionDiscoverer

__all__ = [
    "HarvestResult",
    "RosterResolver",
    "ScorecardService",
    "SessionDiscoverer",
    "VoteHarvester",
    "aggregate",
    "reconcile",
]
