"""
Text normalization for rule-based extraction.

Raw input (pasted client text or OCR output) is flattened to a single line
with a sentinel token marking the original line breaks. Whole-text patterns
stop at the sentinel; the line sequence is the fallback search space.
"""

import re
from typing import List

# Sentinel that replaces newline characters in the normalized text
LINE_BREAK = "[NL]"

# End of a captured value: a raw newline, the sentinel, or end of text
END_OF_LINE = r"(?:\n|\[NL\]|$)"

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Normalize raw text for pattern matching.

    Steps:
    1. Replace every newline with the sentinel surrounded by spaces
    2. Drop carriage returns
    3. Collapse whitespace runs to a single space
    4. Strip leading/trailing whitespace

    Args:
        text: Raw input text

    Returns:
        Single-line normalized text

    Examples:
        >>> normalize_text("Name: John Smith\\r\\nPhone:   555-123-4567")
        'Name: John Smith [NL] Phone: 555-123-4567'
    """
    text = text.replace("\n", f" {LINE_BREAK} ").replace("\r", "")
    return _WHITESPACE_RUN.sub(" ", text).strip()


def split_lines(normalized_text: str) -> List[str]:
    """
    Split normalized text on the sentinel into trimmed, non-empty lines.

    Args:
        normalized_text: Output of normalize_text()

    Returns:
        List of logical lines in input order
    """
    lines = (line.strip() for line in normalized_text.split(LINE_BREAK))
    return [line for line in lines if line]


def strip_label(line: str) -> str:
    """
    Remove a leading "Label:" prefix from a line.

    Everything up to and including the first colon is dropped; a line
    without a colon is returned trimmed.
    """
    return re.sub(r"^.*?:\s*", "", line, count=1).strip()
