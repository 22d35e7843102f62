"""
US state name resolution.

Single source of the state table, shared by the address parser and by the
field-mapping standardizers.
"""

import re
from types import MappingProxyType
from typing import Mapping

STATE_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {
        "alabama": "AL",
        "alaska": "AK",
        "arizona": "AZ",
        "arkansas": "AR",
        "california": "CA",
        "colorado": "CO",
        "connecticut": "CT",
        "delaware": "DE",
        "florida": "FL",
        "georgia": "GA",
        "hawaii": "HI",
        "idaho": "ID",
        "illinois": "IL",
        "indiana": "IN",
        "iowa": "IA",
        "kansas": "KS",
        "kentucky": "KY",
        "louisiana": "LA",
        "maine": "ME",
        "maryland": "MD",
        "massachusetts": "MA",
        "michigan": "MI",
        "minnesota": "MN",
        "mississippi": "MS",
        "missouri": "MO",
        "montana": "MT",
        "nebraska": "NE",
        "nevada": "NV",
        "new hampshire": "NH",
        "new jersey": "NJ",
        "new mexico": "NM",
        "new york": "NY",
        "north carolina": "NC",
        "north dakota": "ND",
        "ohio": "OH",
        "oklahoma": "OK",
        "oregon": "OR",
        "pennsylvania": "PA",
        "rhode island": "RI",
        "south carolina": "SC",
        "south dakota": "SD",
        "tennessee": "TN",
        "texas": "TX",
        "utah": "UT",
        "vermont": "VT",
        "virginia": "VA",
        "washington": "WA",
        "west virginia": "WV",
        "wisconsin": "WI",
        "wyoming": "WY",
        # Service-area cities used as informal state hints
        "swansea": "MA",
        "boston": "MA",
        "east boston": "MA",
    }
)

_TWO_LETTER_CODE = re.compile(r"^[a-z]{2}$", re.IGNORECASE)


def get_state_abbreviation(state_name: str) -> str:
    """
    Map a state name to its two-letter abbreviation.

    A two-letter input is returned uppercased without a table lookup.

    Args:
        state_name: Full state name, abbreviation, or known city hint

    Returns:
        Two-letter abbreviation, or "" when the name cannot be resolved

    Examples:
        >>> get_state_abbreviation("New York")
        'NY'
        >>> get_state_abbreviation("ma")
        'MA'
        >>> get_state_abbreviation("Atlantis")
        ''
    """
    if not state_name:
        return ""

    normalized = state_name.strip().lower()
    if _TWO_LETTER_CODE.match(normalized):
        return normalized.upper()

    return STATE_ABBREVIATIONS.get(normalized, "")
