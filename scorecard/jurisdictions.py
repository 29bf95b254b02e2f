"""Jurisdiction and chamber vocabulary shared by the OpenStates calls."""

from app.models.enums import Chamber

STATE_ABBREVIATIONS: dict[str, str] = {
    "Alabama": "al",
    "Alaska": "ak",
    "Arizona": "az",
    "Arkansas": "ar",
    "California": "ca",
    "Colorado": "co",
    "Connecticut": "ct",
    "Delaware": "de",
    "Florida": "fl",
    "Georgia": "ga",
    "Hawaii": "hi",
    "Idaho": "id",
    "Illinois": "il",
    "Indiana": "in",
    "Iowa": "ia",
    "Kansas": "ks",
    "Kentucky": "ky",
    "Louisiana": "la",
    "Maine": "me",
    "Maryland": "md",
    "Massachusetts": "ma",
    "Michigan": "mi",
    "Minnesota": "mn",
    "Mississippi": "ms",
    "Missouri": "mo",
    "Montana": "mt",
    "Nebraska": "ne",
    "Nevada": "nv",
    "New Hampshire": "nh",
    "New Jersey": "nj",
    "New Mexico": "nm",
    "New York": "ny",
    "North Carolina": "nc",
    "North Dakota": "nd",
    "Ohio": "oh",
    "Oklahoma": "ok",
    "Oregon": "or",
    "Pennsylvania": "pa",
    "Rhode Island": "ri",
    "South Carolina": "sc",
    "South Dakota": "sd",
    "Tennessee": "tn",
    "Texas": "tx",
    "Utah": "ut",
    "Vermont": "vt",
    "Virginia": "va",
    "Washington": "wa",
    "West Virginia": "wv",
    "Wisconsin": "wi",
    "Wyoming": "wy",
    "District of Columbia": "dc",
    "Puerto Rico": "pr",
}

# Domain chamber label -> OpenStates org classification
CHAMBER_CLASSIFICATIONS: dict[Chamber, str] = {
    Chamber.SENATE: "upper",
    Chamber.ASSEMBLY: "lower",
}


def jurisdiction_abbr(jurisdiction: str) -> str:
    """Return the lower-case state abbreviation used in OCD jurisdiction ids.

    Unknown names fall back to their first two letters.
    """
    return STATE_ABBREVIATIONS.get(jurisdiction) or jurisdiction.lower()[:2]


def ocd_jurisdiction_id(jurisdiction: str) -> str:
    """Build the OCD jurisdiction id for a state name."""
    abbr = jurisdiction_abbr(jurisdiction)
    return f"ocd-jurisdiction/country:us/state:{abbr}/government"


def chamber_classification(chamber: Chamber | str | None) -> str | None:
    """Map a domain chamber label to the upstream classification, if any."""
    if chamber is None:
        return None
    try:
        return CHAMBER_CLASSIFICATIONS.get(Chamber(chamber))
    except ValueError:
        return None


def chamber_from_classification(classification: str | None) -> Chamber:
    """Map an upstream org classification back to a domain chamber label."""
    if classification == "upper":
        return Chamber.SENATE
    return Chamber.ASSEMBLY
