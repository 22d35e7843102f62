"""
Declarative pattern rules shared by the extraction passes.

A pass is described as an ordered tuple of PatternRule objects; the first rule
that matches wins. Cascades whose rules have side effects on the result use
CascadeRule, a predicate/action pair evaluated by run_cascade().
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Pattern, Sequence, Tuple

import structlog

from .field_result import ExtractionResult


logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PatternRule:
    """
    One regular expression with the confidence it grants.

    Attributes:
        name: Rule identifier used in logs and tests
        pattern: Compiled regular expression
        confidence: Confidence assigned to a value found by this rule
        group: Capture group holding the value
    """

    name: str
    pattern: Pattern[str]
    confidence: float
    group: int = 1

    def search(self, text: str) -> Optional[str]:
        """
        Return the stripped capture of the first match in text.

        Matches whose capture is missing or blank count as no match.
        """
        match = self.pattern.search(text)
        if not match:
            return None
        value = match.group(self.group)
        if value is None:
            return None
        value = value.strip()
        return value or None


def rule(name: str, pattern: str, confidence: float, flags: int = re.IGNORECASE, group: int = 1) -> PatternRule:
    """Compile a PatternRule (case-insensitive unless flags say otherwise)."""
    return PatternRule(name=name, pattern=re.compile(pattern, flags), confidence=confidence, group=group)


def first_match(rules: Iterable[PatternRule], text: str) -> Optional[Tuple[PatternRule, str]]:
    """
    Try rules in order against text.

    Args:
        rules: Ordered rules (precedence matters)
        text: Text to search

    Returns:
        (rule, value) for the first rule that matches, or None
    """
    for candidate in rules:
        value = candidate.search(text)
        if value is not None:
            return candidate, value
    return None


@dataclass(frozen=True)
class CascadeRule:
    """
    Predicate/action pair in an ordered cascade.

    Attributes:
        name: Rule identifier used in logs and tests
        matches: Returns a match object (or any truthy value) when the rule applies
        apply: Mutates the result using the value returned by matches
        stop: Whether the cascade ends after this rule applies
    """

    name: str
    matches: Callable[[str], object]
    apply: Callable[[object, ExtractionResult], None]
    stop: bool = True


def run_cascade(rules: Sequence[CascadeRule], text: str, result: ExtractionResult) -> Optional[str]:
    """
    Evaluate a cascade against text, stopping at the first stopping rule that applies.

    Args:
        rules: Ordered cascade
        text: Text the predicates inspect
        result: Extraction result mutated by the actions

    Returns:
        Name of the rule that ended the cascade, or None if it ran to completion
    """
    for cascade_rule in rules:
        match = cascade_rule.matches(text)
        if not match:
            continue

        cascade_rule.apply(match, result)
        logger.debug("cascade_rule_applied", rule=cascade_rule.name, stop=cascade_rule.stop)

        if cascade_rule.stop:
            return cascade_rule.name

    return None
