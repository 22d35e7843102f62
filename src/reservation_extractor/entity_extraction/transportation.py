"""
Transportation / logistics field extraction.

Every field is looked up with an ordered table of labelled patterns against
the whole normalized text first. Pickup location, destination, time and date
then fall back to keyword heuristics on individual lines, and airport lines
fill whichever of pickup/destination is still missing.
"""

import re
from typing import Callable, List, Optional, Pattern, Tuple

import structlog

from .address_parser import extract_address_components
from .field_result import ExtractionResult
from .rules import PatternRule, first_match, rule
from .text_lines import END_OF_LINE, strip_label


logger = structlog.get_logger(__name__)

MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
MONTH_DATE = MONTHS + r"\s+\d{1,2}(?:st|nd|rd|th)?(?:\s*,?\s*\d{2,4})?"
TIME_OF_DAY = r"\d{1,2}(?::\d{2})?\s*(?:am|pm|a\.m\.|p\.m\.)"
SLASH_DATE = r"\d{1,2}/\d{1,2}/\d{2,4}"

# ============================================================================
# WHOLE-TEXT PATTERN TABLES (order is precedence)
# ============================================================================

PICKUP_LOCATION_RULES: Tuple[PatternRule, ...] = (
    rule("pickup_location_label", r"pick(?:\s|-)up\s+location\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("from_label", r"from\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("pickup_label", r"pickup\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule(
        "pick_up_address_label",
        r"pick(?:\s|-)up(?:\s+(?:address|location))?\s*:?\s*(.+?)" + END_OF_LINE,
        0.9,
    ),
    rule("origin_label", r"origin\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
)

DESTINATION_RULES: Tuple[PatternRule, ...] = (
    rule("destination_label", r"destination\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("to_label", r"to\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule(
        "drop_off_label",
        r"drop(?:\s|-)off(?:\s+(?:address|location))?\s*:?\s*(.+?)" + END_OF_LINE,
        0.9,
    ),
)

PICKUP_TIME_RULES: Tuple[PatternRule, ...] = (
    rule("pickup_time_label", r"pick(?:\s|-)up\s+time\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("pickup_at", r"(?:pick(?:\s|-)up|departure)\s+(?:at|@)\s*(" + TIME_OF_DAY + r")", 0.9),
    rule("time_label", r"time\s*:?\s*(" + TIME_OF_DAY + r")", 0.9),
    rule("bare_time", r"(?:^|\s)(" + TIME_OF_DAY + r")(?:\s|$)", 0.9),
)

PICKUP_DATE_RULES: Tuple[PatternRule, ...] = (
    rule("date_label", r"(?:date|event\s+date)\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("on_month_date", r"on\s+(" + MONTH_DATE + r")", 0.9),
    rule("slash_date", r"(" + SLASH_DATE + r")", 0.9),
    rule("dash_date", r"(\d{1,2}-\d{1,2}-\d{2,4})", 0.9),
    rule("month_date", r"(?:^|\s)(" + MONTH_DATE + r")(?:\s|$)", 0.9),
)

PASSENGER_RULES: Tuple[PatternRule, ...] = (
    rule("passengers_label", r"(?:number\s+of\s+passengers|passengers)\s*:?\s*(\d+)", 0.95),
    rule("count_of_people", r"(\d+)\s+(?:passenger|person|people|pax)", 0.95),
    rule("passenger_label", r"passengers?:?\s*(\d+)", 0.95),
)

HOURS_RULES: Tuple[PatternRule, ...] = (
    rule("hours_label", r"(?:number\s+of\s+hours|hours)\s*:?\s*(\d+)", 0.95),
    rule("hour_label", r"hours?:?\s*(\d+(?:\.\d+)?)", 0.95),
)

SERVICE_TYPE_RULES: Tuple[PatternRule, ...] = (
    rule("service_type_label", r"(?:type\s+of\s+service|service\s+type)\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("service_label", r"service\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
)

VEHICLE_TYPE_RULES: Tuple[PatternRule, ...] = (
    rule("vehicle_type_label", r"(?:vehicle\s+type|car\s+type)\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("vehicle_label", r"vehicle\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
    rule("car_label", r"car\s*:?\s*(.+?)" + END_OF_LINE, 0.9),
)

# Fields filled by whole-text tables only
SIMPLE_FIELD_RULES: Tuple[Tuple[str, Tuple[PatternRule, ...]], ...] = (
    ("passengers", PASSENGER_RULES),
    ("hours", HOURS_RULES),
    ("serviceType", SERVICE_TYPE_RULES),
    ("vehicleType", VEHICLE_TYPE_RULES),
)

# ============================================================================
# LINE KEYWORDS
# ============================================================================

PICKUP_KEYWORDS = re.compile(r"pick|from|origin|location", re.IGNORECASE)
DROP_KEYWORDS = re.compile(r"drop|to|destination", re.IGNORECASE)
# Destination lines are only rejected for direction words, not "location"
DESTINATION_REJECT_KEYWORDS = re.compile(r"pick|from|origin", re.IGNORECASE)
TIME_LINE_KEYWORDS = re.compile(r"time|pickup|pick up|pick-up", re.IGNORECASE)
DATE_LINE_KEYWORDS = re.compile(r"date|on|pickup|pick up|pick-up|event", re.IGNORECASE)
AIRPORT_KEYWORDS = re.compile(r"\b(?:airport|terminal|international)\b", re.IGNORECASE)
AIRPORT_PICKUP_KEYWORDS = re.compile(r"pick|from|origin|departure", re.IGNORECASE)
AIRPORT_DROP_KEYWORDS = re.compile(r"drop|to|destination|arrival", re.IGNORECASE)

LINE_TIME_PATTERN = re.compile(r"(" + TIME_OF_DAY + r")", re.IGNORECASE)
LINE_MONTH_DATE_PATTERN = re.compile(MONTH_DATE, re.IGNORECASE)
LINE_SLASH_DATE_PATTERN = re.compile(SLASH_DATE)


# ============================================================================
# HELPERS
# ============================================================================

def _fill_from_rules(field: str, rules: Tuple[PatternRule, ...], text: str, result: ExtractionResult) -> bool:
    hit = first_match(rules, text)
    if not hit:
        return False

    matched_rule, value = hit
    result[field].assign(value, matched_rule.confidence)
    logger.debug("transport_field_found", field=field, rule=matched_rule.name, value=value)
    return True


def _seed_address(location: str, confidence: float, result: ExtractionResult) -> None:
    """Use a pickup location as the client address when none is known yet."""
    if not result["address"].is_empty:
        return
    result["address"].assign(location, confidence)
    extract_address_components(location, result)


def _first_line_value(
    lines: List[str], accept: Callable[[str], bool]
) -> Optional[str]:
    for line in lines:
        if accept(line):
            value = strip_label(line)
            if value:
                return value
    return None


def _first_line_token(
    lines: List[str], keywords: Pattern[str], patterns: Tuple[Pattern[str], ...]
) -> Optional[str]:
    for line in lines:
        if not keywords.search(line):
            continue
        for pattern in patterns:
            match = pattern.search(line)
            if match:
                return match.group(0).strip()
    return None


# ============================================================================
# FIELD EXTRACTORS
# ============================================================================

def _extract_pickup_location(text: str, lines: List[str], result: ExtractionResult) -> None:
    if _fill_from_rules("pickupLocation", PICKUP_LOCATION_RULES, text, result):
        _seed_address(result["pickupLocation"].text, 0.8, result)
        return

    location = _first_line_value(
        lines, lambda line: bool(PICKUP_KEYWORDS.search(line)) and not DROP_KEYWORDS.search(line)
    )
    if location:
        result["pickupLocation"].assign(location, 0.85)
        logger.debug("pickup_location_found", source="line", value=location)
        _seed_address(location, 0.75, result)


def _extract_destination(text: str, lines: List[str], result: ExtractionResult) -> None:
    if _fill_from_rules("destination", DESTINATION_RULES, text, result):
        return

    location = _first_line_value(
        lines, lambda line: bool(DROP_KEYWORDS.search(line)) and not DESTINATION_REJECT_KEYWORDS.search(line)
    )
    if location:
        result["destination"].assign(location, 0.85)
        logger.debug("destination_found", source="line", value=location)


def _extract_pickup_time(text: str, lines: List[str], result: ExtractionResult) -> None:
    if _fill_from_rules("pickupTime", PICKUP_TIME_RULES, text, result):
        return

    value = _first_line_token(lines, TIME_LINE_KEYWORDS, (LINE_TIME_PATTERN,))
    if value:
        result["pickupTime"].assign(value, 0.85)


def _extract_pickup_date(text: str, lines: List[str], result: ExtractionResult) -> None:
    if _fill_from_rules("pickupDate", PICKUP_DATE_RULES, text, result):
        return

    value = _first_line_token(
        lines, DATE_LINE_KEYWORDS, (LINE_MONTH_DATE_PATTERN, LINE_SLASH_DATE_PATTERN)
    )
    if value:
        result["pickupDate"].assign(value, 0.85)


def _assign_airport_lines(lines: List[str], result: ExtractionResult) -> None:
    """
    Fill pickup/destination from lines that mention an airport.

    A line goes to pickup when it has a pickup keyword or no drop keyword;
    otherwise to destination when it has a drop keyword or pickup is still
    empty.
    """
    pickup = result["pickupLocation"]
    destination = result["destination"]

    for line in lines:
        if not AIRPORT_KEYWORDS.search(line):
            continue

        has_pickup_keyword = bool(AIRPORT_PICKUP_KEYWORDS.search(line))
        has_drop_keyword = bool(AIRPORT_DROP_KEYWORDS.search(line))

        if pickup.is_empty and (has_pickup_keyword or not has_drop_keyword):
            pickup.assign(strip_label(line), 0.8)
            logger.debug("airport_line_assigned", field="pickupLocation", line=line)
        elif destination.is_empty and (has_drop_keyword or pickup.is_empty):
            destination.assign(strip_label(line), 0.8)
            logger.debug("airport_line_assigned", field="destination", line=line)


def extract_transportation_info(text: str, lines: List[str], result: ExtractionResult) -> None:
    """
    Fill pickup/destination, time, date, passengers, hours, service and vehicle type.

    A pickup location found while the address is still empty is copied into
    the address and parsed for city/state/ZIP.

    Args:
        text: Normalized text
        lines: Line sequence
        result: Extraction result (mutated)
    """
    _extract_pickup_location(text, lines, result)
    _extract_destination(text, lines, result)
    _extract_pickup_time(text, lines, result)
    _extract_pickup_date(text, lines, result)

    for field, rules in SIMPLE_FIELD_RULES:
        _fill_from_rules(field, rules, text, result)

    if result["pickupLocation"].is_empty or result["destination"].is_empty:
        _assign_airport_lines(lines, result)
