"""
Result containers for rule-based entity extraction.

A FieldResult holds the current best value for one field together with the
extractor's confidence in it. Passes update fields in place; the merge rule
lives here so that every pass applies it the same way.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

# Fixed key set of every ExtractionResult (CRM field names)
FIELD_NAMES: Tuple[str, ...] = (
    "firstName",
    "lastName",
    "address",
    "city",
    "state",
    "zipCode",
    "phone",
    "email",
    # Transportation fields
    "pickupLocation",
    "destination",
    "pickupTime",
    "pickupDate",
    "passengers",
    "serviceType",
    "vehicleType",
    "hours",
)


@dataclass
class FieldResult:
    """
    One extracted field value and its confidence.

    Attributes:
        text: Extracted value ("" when nothing was found)
        confidence: Certainty of the value (0.0-1.0)
    """

    text: str = ""
    confidence: float = 0.0

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"FieldResult('{self.text}', {self.confidence})"

    @property
    def is_empty(self) -> bool:
        return not self.text

    def assign(self, text: str, confidence: float) -> None:
        """
        Overwrite the value unconditionally.

        Used by passes that only fill empty fields and by known-location
        overrides, which win regardless of what was there before.
        """
        self.text = text
        self.confidence = confidence

    def offer(self, text: str, confidence: float) -> bool:
        """
        Assign the value only if it improves on the current one.

        The field accepts the offer when it is empty or when the offered
        confidence is strictly greater than the current confidence.

        Args:
            text: Candidate value
            confidence: Confidence of the candidate value

        Returns:
            True if the candidate was accepted

        Examples:
            >>> field = FieldResult("Boston", 0.95)
            >>> field.offer("Quincy", 0.85)
            False
            >>> field.offer("Quincy", 0.99)
            True
        """
        if self.text and confidence <= self.confidence:
            return False
        self.assign(text, confidence)
        return True

    def to_dict(self) -> Dict[str, object]:
        return {"text": self.text, "confidence": self.confidence}


class ExtractionResult:
    """
    Mapping from every name in FIELD_NAMES to its FieldResult.

    The key set is fixed at construction; only the text/confidence pairs
    change during extraction.
    """

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: Dict[str, FieldResult] = {name: FieldResult() for name in FIELD_NAMES}

    def __getitem__(self, name: str) -> FieldResult:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtractionResult):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        filled = ", ".join(f"{name}={field!r}" for name, field in self.items() if field.text)
        return f"ExtractionResult({filled})"

    def items(self) -> Iterator[Tuple[str, FieldResult]]:
        return iter(self._fields.items())

    def apply_threshold(self, threshold: float) -> None:
        """
        Blank out every field whose confidence is below threshold.

        The confidence value is kept for diagnostics; consumers treat the
        empty text as "not found".
        """
        for field in self._fields.values():
            if field.confidence < threshold:
                field.text = ""

    def filled(self) -> Dict[str, str]:
        """Return field -> text for the fields that have a value."""
        return {name: field.text for name, field in self._fields.items() if field.text}

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        """Return field -> {"text", "confidence"} for every field."""
        return {name: field.to_dict() for name, field in self._fields.items()}
