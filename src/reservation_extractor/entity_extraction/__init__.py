"""
Rule-based entity extraction for reservation requests.

Public API:
    - extract_entities / EntityExtractor: Complete pipeline (recommended)
    - FieldResult, ExtractionResult, FIELD_NAMES: Result types
    - InputError: Raised for empty input
    - extract_name, extract_transportation_info, extract_address,
      extract_address_components, extract_phone, extract_email: Individual passes
    - format_phone_number, get_state_abbreviation, STATE_ABBREVIATIONS: Helpers

Example usage:
    >>> from reservation_extractor.entity_extraction import extract_entities
    >>>
    >>> result = extract_entities("Pickup: 10 Ocean Ave, Swansea, MA")
    >>> result["city"].text, result["state"].text
    ('Swansea', 'MA')
"""

from .address_parser import extract_address, extract_address_components, looks_like_address_line
from .contact_extractor import extract_email, extract_phone, format_phone_number
from .errors import InputError
from .field_result import FIELD_NAMES, ExtractionResult, FieldResult
from .name_extractor import extract_name
from .pipeline import EntityExtractor, extract_entities
from .states import STATE_ABBREVIATIONS, get_state_abbreviation
from .text_lines import normalize_text, split_lines
from .transportation import extract_transportation_info

__all__ = [
    # Main API
    "EntityExtractor",
    "extract_entities",
    "ExtractionResult",
    "FieldResult",
    "FIELD_NAMES",
    "InputError",
    # Passes (for advanced usage)
    "extract_name",
    "extract_transportation_info",
    "extract_address",
    "extract_address_components",
    "extract_phone",
    "extract_email",
    # Helpers
    "normalize_text",
    "split_lines",
    "looks_like_address_line",
    "format_phone_number",
    "get_state_abbreviation",
    "STATE_ABBREVIATIONS",
]
