# CRM field mapping and automation macros

from .mapper import FORM_MAPPINGS, FieldMapper
from .models import FieldSpec, FieldType, Macro, MacroCommand
from .standardize import (
    standardize_email,
    standardize_phone,
    standardize_state,
    standardize_zip_code,
)

__all__ = [
    "FieldMapper",
    "FORM_MAPPINGS",
    "FieldSpec",
    "FieldType",
    "Macro",
    "MacroCommand",
    "standardize_state",
    "standardize_phone",
    "standardize_email",
    "standardize_zip_code",
]
