"""
Client name extraction.

Strategies run from most to least specific; the first one that settles the
name ends the pass:
1. "Name: John Smith" style labels (whole text, then each line)
2. Separate "First: ..." / "Last: ..." labels
3. "Firstname Lastname" at the start of one of the first three lines
4. "Here is your lead info" boilerplate from lead-forwarding services
5. Greetings ("Dear John", "Hi John Smith,")
"""

import re
from typing import Callable, List, Tuple

import structlog

from .field_result import ExtractionResult
from .text_lines import END_OF_LINE


logger = structlog.get_logger(__name__)

LABELED_NAME_PATTERN = re.compile(
    r"(?:name|full name|passenger|client|customer)\s*:?\s*([A-Za-z]+)(?:\s+([A-Za-z]+))?",
    re.IGNORECASE,
)
FIRST_NAME_PATTERN = re.compile(r"(?:first name|first|given name)\s*:?\s*([A-Za-z]+)", re.IGNORECASE)
LAST_NAME_PATTERN = re.compile(r"(?:last name|last|surname|family name)\s*:?\s*([A-Za-z]+)", re.IGNORECASE)
LEADING_NAME_PATTERN = re.compile(r"^([A-Z][a-z]+)\s+([A-Z][a-z]+)(?:\s|,|\.)")
LEAD_INFO_PATTERN = re.compile(
    r"here is your lead info!?\s*" + END_OF_LINE + r"\s*name:?\s*([A-Za-z]+)\s+([A-Za-z]+)",
    re.IGNORECASE,
)
GREETING_PATTERN = re.compile(
    r"(?:dear|hello|hi|to)\s+([A-Z][a-z]+)(?:\s+([A-Z][a-z]+))?(?:\s|,|\.)", re.IGNORECASE
)

# Leading-name heuristic only looks at the top of the message
LEADING_NAME_MAX_LINES = 3


def _set_name(result: ExtractionResult, first: str, last: str, confidence: float) -> None:
    if first:
        result["firstName"].assign(first, confidence)
    if last:
        result["lastName"].assign(last, confidence)


def _labeled_name(text: str, lines: List[str], result: ExtractionResult) -> bool:
    match = LABELED_NAME_PATTERN.search(text)
    if not match:
        for line in lines:
            match = LABELED_NAME_PATTERN.search(line)
            if match:
                break

    if not match:
        return False

    _set_name(result, match.group(1), match.group(2), 0.9)
    return True


def _separate_labels(text: str, lines: List[str], result: ExtractionResult) -> bool:
    found_first = False
    found_last = False

    for line in lines:
        if not found_first:
            match = FIRST_NAME_PATTERN.search(line)
            if match:
                result["firstName"].assign(match.group(1), 0.85)
                found_first = True

        if not found_last:
            match = LAST_NAME_PATTERN.search(line)
            if match:
                result["lastName"].assign(match.group(1), 0.85)
                found_last = True

    # A single label is kept but does not end the pass
    return found_first and found_last


def _leading_name(text: str, lines: List[str], result: ExtractionResult) -> bool:
    for line in lines[:LEADING_NAME_MAX_LINES]:
        match = LEADING_NAME_PATTERN.match(line.strip())
        if match:
            _set_name(result, match.group(1), match.group(2), 0.7)
            return True
    return False


def _lead_info(text: str, lines: List[str], result: ExtractionResult) -> bool:
    match = LEAD_INFO_PATTERN.search(text)
    if not match:
        return False
    _set_name(result, match.group(1), match.group(2), 0.95)
    return True


def _greeting(text: str, lines: List[str], result: ExtractionResult) -> bool:
    match = GREETING_PATTERN.search(text)
    if not match:
        return False
    _set_name(result, match.group(1), match.group(2), 0.6)
    return True


NameStrategy = Callable[[str, List[str], ExtractionResult], bool]

NAME_STRATEGIES: Tuple[Tuple[str, NameStrategy], ...] = (
    ("labeled_name", _labeled_name),
    ("separate_labels", _separate_labels),
    ("leading_name", _leading_name),
    ("lead_info", _lead_info),
    ("greeting", _greeting),
)


def extract_name(text: str, lines: List[str], result: ExtractionResult) -> None:
    """
    Fill firstName/lastName from the first strategy that succeeds.

    Args:
        text: Normalized text
        lines: Line sequence
        result: Extraction result (mutated)
    """
    for name, strategy in NAME_STRATEGIES:
        if strategy(text, lines, result):
            logger.debug(
                "name_found",
                strategy=name,
                first_name=result["firstName"].text,
                last_name=result["lastName"].text,
            )
            return
