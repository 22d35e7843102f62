"""
Phone number and email extraction.

Both passes try their pattern table against the whole normalized text first
and fall back to the individual lines.
"""

import re
from typing import List, Optional, Pattern, Tuple

import structlog

from .field_result import ExtractionResult


logger = structlog.get_logger(__name__)

_PHONE_BODY = r"\+?1?[\s.\-]?\(?\d{3}\)?[\s.\-]?\d{3}[\s.\-]?\d{4}"

# Ordered; patterns with three groups capture area code, prefix and line separately
PHONE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"(?:phone|cell|mobile|tel|telephone|number|ph)[:\s]+(" + _PHONE_BODY + r")", re.IGNORECASE),
    re.compile(r"\b(" + _PHONE_BODY + r")\b"),
    re.compile(r"\b\((\d{3})\)[\s.\-]?(\d{3})[\s.\-]?(\d{4})\b"),
    re.compile(r"\b(\d{3})[\s.\-](\d{3})[\s.\-](\d{4})\b"),
)
PHONE_CONFIDENCE = 0.9

_EMAIL_BODY = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
EMAIL_PATTERN = re.compile(r"\b(" + _EMAIL_BODY + r")\b")
LABELED_EMAIL_PATTERN = re.compile(r"(?:email|e-mail|mail):\s*(" + _EMAIL_BODY + r")", re.IGNORECASE)


def format_phone_number(phone: str) -> str:
    """
    Format a US phone number as (AAA) PPP-LLLL.

    Accepts 10 digits, or 11 digits with a leading country code 1; any
    separators are ignored. Anything else is returned unchanged.

    Examples:
        >>> format_phone_number("555.123.4567")
        '(555) 123-4567'
        >>> format_phone_number("+1 555 123 4567")
        '(555) 123-4567'
        >>> format_phone_number("12345")
        '12345'
    """
    if not phone:
        return ""

    digits = re.sub(r"\D", "", phone)

    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11 and digits[0] == "1":
        return f"({digits[1:4]}) {digits[4:7]}-{digits[7:]}"

    return phone


def _match_phone(text: str) -> Optional[str]:
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        groups = match.groups()
        if len(groups) >= 3:
            return f"({groups[0]}) {groups[1]}-{groups[2]}"
        return format_phone_number(groups[0])
    return None


def extract_phone(text: str, lines: List[str], result: ExtractionResult) -> None:
    """
    Fill phone with the first match of the phone patterns.

    Args:
        text: Normalized text
        lines: Line sequence
        result: Extraction result (mutated)
    """
    for candidate in [text, *lines]:
        phone = _match_phone(candidate)
        if phone:
            result["phone"].assign(phone, PHONE_CONFIDENCE)
            logger.debug("phone_found", phone=phone)
            return


def extract_email(text: str, lines: List[str], result: ExtractionResult) -> None:
    """
    Fill email from the whole text, then each line, then labelled lines.

    Args:
        text: Normalized text
        lines: Line sequence
        result: Extraction result (mutated)
    """
    stages = (
        (EMAIL_PATTERN, [text], 0.95),
        (EMAIL_PATTERN, lines, 0.95),
        (LABELED_EMAIL_PATTERN, lines, 0.98),
    )

    for pattern, candidates, confidence in stages:
        for candidate in candidates:
            match = pattern.search(candidate)
            if match:
                result["email"].assign(match.group(1), confidence)
                logger.debug("email_found", email=match.group(1), confidence=confidence)
                return
