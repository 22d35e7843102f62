"""
Address extraction and address component parsing.

extract_address() locates the client address (pickup location first, then
labelled patterns, then a street-number-shaped line).
extract_address_components() splits an address into city/state/ZIP with an
ordered cascade of rules, most specific first:

1. Known service-area locations (Logan Airport / East Boston, Swansea)
2. "Road, City, ST"
3. "Street, City, ST ZIP"
4. "City, State [ZIP]" (does not stop the cascade)
5. Airport names ("Logan International Airport (BOS), Boston, MA")

Component assignments use FieldResult.offer(), so a later, less certain rule
never degrades an earlier one. Known locations use assign() and always win.
"""

import re
from typing import List, Optional, Tuple

import structlog

from .field_result import ExtractionResult
from .rules import CascadeRule, PatternRule, first_match, rule, run_cascade
from .states import get_state_abbreviation
from .text_lines import END_OF_LINE


logger = structlog.get_logger(__name__)

# ============================================================================
# ADDRESS LOCATION PATTERNS
# ============================================================================

ADDRESS_LABEL_RULES: Tuple[PatternRule, ...] = (
    rule("address_label", r"(?:address|location|street|addr)\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("address_label_loose", r"(?:address|location|street|addr)[:\s]\s*(.+?)" + END_OF_LINE, 0.9),
)

# Street number followed by at least two words, but not "4 passengers" or "3 hours"
ADDRESS_LINE_PATTERN = re.compile(
    r"^\d+[A-Za-z]?\s+"
    r"(?!(?:passengers?|people|persons?|pax|hours?|hrs?|minutes?|mins?)\b)"
    r"[A-Za-z][\w.'-]*\s+[A-Za-z][\w.'-]*",
    re.IGNORECASE,
)

# ============================================================================
# COMPONENT PATTERNS
# ============================================================================

BOSTON_MARKERS = ("logan airport", "bos", "east boston")
SWANSEA_MARKER = "swansea"

# A ZIP that ends the text is left to the full-address pattern
ROAD_CITY_STATE_PATTERN = re.compile(
    r"([^,]+)(?:,\s+([^,]+))(?:,\s+([A-Z]{2}))(?![A-Za-z])(?!\s*\d{5}(?:-\d{4})?\s*$)",
    re.IGNORECASE,
)
FULL_ADDRESS_PATTERN = re.compile(
    r"^(.+),\s*([^,]+),\s*([A-Z]{2})(?:\s+(\d{5}(?:-\d{4})?))?$", re.IGNORECASE
)
CITY_STATE_PATTERN = re.compile(
    r"([^,]+),\s*([A-Za-z]+(?:\s+[A-Za-z]+)?)(?:\s+(\d{5}(?:-\d{4})?))?", re.IGNORECASE
)
STREET_WORDS = re.compile(r"road|street|avenue|lane|drive|boulevard|place|plaza", re.IGNORECASE)
AIRPORT_MENTION = re.compile(r"airport|terminal", re.IGNORECASE)
AIRPORT_PATTERN = re.compile(
    r"(.*?)\s*(?:airport|international|terminal)\s*(?:\(([A-Z]{3})\))?"
    r"(?:[,\s]+([A-Za-z\s]+))?(?:[,\s]+([A-Z]{2}))?",
    re.IGNORECASE,
)


def _set_known_location(result: ExtractionResult, city: str, state: str) -> None:
    result["city"].assign(city, 0.95)
    result["state"].assign(state, 0.95)


def _resolve_state_token(token: str) -> str:
    """
    Resolve the state capture of the loose "City, State" rule.

    Tries the whole token ("New York"), then its first word ("MA" from
    "MA please").
    """
    token = token.strip()
    if len(token) == 2:
        return token.upper()

    abbreviation = get_state_abbreviation(token)
    if abbreviation:
        return abbreviation

    first_word = token.split()[0]
    if first_word != token:
        return get_state_abbreviation(first_word)
    return ""


# ============================================================================
# CASCADE RULES
# ============================================================================

def _match_boston(text: str) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in BOSTON_MARKERS)


def _apply_boston(_match: object, result: ExtractionResult) -> None:
    _set_known_location(result, "Boston", "MA")


def _match_swansea(text: str) -> bool:
    return SWANSEA_MARKER in text.lower()


def _apply_swansea(_match: object, result: ExtractionResult) -> None:
    _set_known_location(result, "Swansea", "MA")


def _apply_road_city_state(match: "re.Match[str]", result: ExtractionResult) -> None:
    _road, city, state = match.groups()
    result["city"].offer(city.strip(), 0.95)
    result["state"].offer(state.upper(), 0.95)


def _apply_full_address(match: "re.Match[str]", result: ExtractionResult) -> None:
    street, city, state, zip_code = match.groups()
    result["address"].offer(street.strip(), 0.95)
    result["city"].offer(city.strip(), 0.95)
    result["state"].offer(state.upper(), 0.95)
    if zip_code:
        result["zipCode"].offer(zip_code, 0.95)


def _apply_city_state(match: "re.Match[str]", result: ExtractionResult) -> None:
    city, state_token, zip_code = match.groups()

    # The text before the comma is a road name, not a city; state/ZIP still apply
    if not STREET_WORDS.search(city):
        result["city"].offer(city.strip(), 0.85)

    state = _resolve_state_token(state_token)
    if state:
        result["state"].offer(state, 0.85)

    if zip_code:
        result["zipCode"].offer(zip_code, 0.9)


def _match_airport(text: str) -> Optional["re.Match[str]"]:
    if not AIRPORT_MENTION.search(text):
        return None
    return AIRPORT_PATTERN.search(text)


def _apply_airport(match: "re.Match[str]", result: ExtractionResult) -> None:
    airport_name, airport_code, airport_city, airport_state = match.groups()

    if airport_city and airport_city.strip():
        result["city"].offer(airport_city.strip(), 0.85)

    if airport_state:
        result["state"].offer(airport_state.upper(), 0.85)

    if airport_code == "BOS" or "logan" in (airport_name or "").lower():
        _set_known_location(result, "Boston", "MA")


ADDRESS_COMPONENT_RULES: Tuple[CascadeRule, ...] = (
    CascadeRule("known_location_boston", _match_boston, _apply_boston),
    CascadeRule("known_location_swansea", _match_swansea, _apply_swansea),
    CascadeRule("road_city_state", ROAD_CITY_STATE_PATTERN.search, _apply_road_city_state),
    CascadeRule("full_address", FULL_ADDRESS_PATTERN.search, _apply_full_address),
    CascadeRule("city_state", CITY_STATE_PATTERN.search, _apply_city_state, stop=False),
    CascadeRule("airport", _match_airport, _apply_airport),
)


def extract_address_components(address_text: str, result: ExtractionResult) -> Optional[str]:
    """
    Extract city, state and ZIP (and the street part when present) from an address.

    Args:
        address_text: Address or location text
        result: Extraction result (mutated)

    Returns:
        Name of the rule that ended the cascade, or None

    Examples:
        >>> result = ExtractionResult()
        >>> extract_address_components("123 Main St, Anytown, CA 12345", result)
        'full_address'
        >>> result["city"].text, result["state"].text, result["zipCode"].text
        ('Anytown', 'CA', '12345')
    """
    logger.debug("address_components_start", address_text=address_text)

    applied = run_cascade(ADDRESS_COMPONENT_RULES, address_text, result)

    logger.debug(
        "address_components_complete",
        rule=applied,
        city=result["city"].text,
        state=result["state"].text,
        zip_code=result["zipCode"].text,
    )
    return applied


def looks_like_address_line(line: str) -> bool:
    """Check whether a line starts like a street address ("12 Ocean Ave ...")."""
    return bool(ADDRESS_LINE_PATTERN.match(line.strip()))


def extract_address(text: str, lines: List[str], result: ExtractionResult) -> None:
    """
    Fill address and its components.

    Order:
    1. Components of an already extracted pickup location (stop when city
       and state are both known)
    2. Labelled address ("Address: ...") in the whole text
    3. First line shaped like a street address

    Args:
        text: Normalized text
        lines: Line sequence
        result: Extraction result (mutated)
    """
    pickup = result["pickupLocation"]
    if not pickup.is_empty:
        extract_address_components(pickup.text, result)
        if not result["city"].is_empty and not result["state"].is_empty:
            logger.debug("address_from_pickup_location", pickup_location=pickup.text)
            return

    hit = first_match(ADDRESS_LABEL_RULES, text)
    if hit:
        matched_rule, full_address = hit
        result["address"].assign(full_address, matched_rule.confidence)
        logger.debug("address_found", rule=matched_rule.name, address=full_address)
        extract_address_components(full_address, result)
        return

    for line in lines:
        if looks_like_address_line(line):
            address_line = line.strip()
            result["address"].assign(address_line, 0.8)
            logger.debug("address_found", rule="address_line", address=address_line)
            extract_address_components(address_line, result)
            return
