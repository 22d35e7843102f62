"""
Complete rule-based extraction pipeline.

Orchestrates the extraction passes over one piece of client text:
name -> transportation -> address -> phone -> email -> threshold filtering.
Passes run in this order because later ones consult earlier results
(address extraction starts from the pickup location).
"""

from typing import Callable, List, Optional, Tuple

import structlog

from ..config import settings
from .address_parser import extract_address
from .contact_extractor import extract_email, extract_phone
from .errors import InputError
from .field_result import ExtractionResult
from .name_extractor import extract_name
from .text_lines import normalize_text, split_lines
from .transportation import extract_transportation_info


logger = structlog.get_logger(__name__)

ExtractionPass = Callable[[str, List[str], ExtractionResult], None]

EXTRACTION_PASSES: Tuple[Tuple[str, ExtractionPass], ...] = (
    ("name", extract_name),
    ("transportation", extract_transportation_info),
    ("address", extract_address),
    ("phone", extract_phone),
    ("email", extract_email),
)


def _validate_threshold(threshold: float) -> float:
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"confidence_threshold must be between 0 and 1, got {threshold}")
    return threshold


class EntityExtractor:
    """
    Rule-based extractor of reservation and contact fields from free text.

    Holds no per-call state: every extract() call builds its own result, so
    one instance can serve concurrent callers.
    """

    def __init__(self, confidence_threshold: Optional[float] = None):
        """
        Initialize extractor.

        Args:
            confidence_threshold: Fields below this confidence are blanked
                (default: settings.confidence_threshold)
        """
        if confidence_threshold is None:
            confidence_threshold = settings.confidence_threshold
        self.confidence_threshold = _validate_threshold(confidence_threshold)

    def configure(self, confidence_threshold: Optional[float] = None) -> None:
        """Update extractor settings; omitted values are left unchanged."""
        if confidence_threshold is not None:
            self.confidence_threshold = _validate_threshold(confidence_threshold)

    def extract(self, raw_text: str) -> ExtractionResult:
        """
        Extract every known field from raw text.

        Args:
            raw_text: Free-form client text or OCR output

        Returns:
            ExtractionResult with all fields present; fields below the
            confidence threshold have empty text

        Raises:
            InputError: If raw_text is empty or whitespace only

        Examples:
            >>> extractor = EntityExtractor(confidence_threshold=0.3)
            >>> result = extractor.extract("Name: John Smith\\nPhone: 555-123-4567")
            >>> result["firstName"].text, result["phone"].text
            ('John', '(555) 123-4567')
        """
        if not raw_text or not raw_text.strip():
            raise InputError()

        text = normalize_text(raw_text)
        lines = split_lines(text)

        logger.info(
            "entity_extraction_start",
            text_length=len(raw_text),
            lines_count=len(lines),
            confidence_threshold=self.confidence_threshold,
        )

        result = ExtractionResult()
        for name, extraction_pass in EXTRACTION_PASSES:
            extraction_pass(text, lines, result)
            logger.debug("extraction_pass_complete", extraction_pass=name)

        before_filter = len(result.filled())
        result.apply_threshold(self.confidence_threshold)

        logger.info(
            "entity_extraction_complete",
            fields_found=before_filter,
            fields_kept=len(result.filled()),
        )

        return result


def extract_entities(raw_text: str, confidence_threshold: Optional[float] = None) -> ExtractionResult:
    """
    Extract reservation/contact fields with a one-off extractor.

    Args:
        raw_text: Free-form client text or OCR output
        confidence_threshold: Optional threshold override

    Returns:
        ExtractionResult

    Raises:
        InputError: If raw_text is empty or whitespace only
    """
    return EntityExtractor(confidence_threshold=confidence_threshold).extract(raw_text)
