"""
Value standardization applied before values are typed into the CRM form.

Independent of the extractor's own normalization: values may also come from
manual edits in the popup.
"""

import re

from ..entity_extraction.contact_extractor import format_phone_number
from ..entity_extraction.states import get_state_abbreviation


def standardize_state(state: str) -> str:
    """
    Convert a state name to its abbreviation.

    Unresolvable input is returned unchanged so that the form can still
    show what the client wrote.
    """
    if not state:
        return state
    return get_state_abbreviation(state) or state


def standardize_phone(phone: str) -> str:
    """Format 10 (or 1 + 10) digit phone numbers as (AAA) PPP-LLLL."""
    if not phone:
        return phone
    return format_phone_number(phone)


def standardize_email(email: str) -> str:
    if not email:
        return email
    return email.strip().lower()


def standardize_zip_code(zip_code: str) -> str:
    """
    Format a ZIP code as 5 digits or ZIP+4.

    Examples:
        >>> standardize_zip_code("02720 1234")
        '02720-1234'
        >>> standardize_zip_code("027201")
        '02720'
    """
    if not zip_code:
        return zip_code

    digits = re.sub(r"\D", "", zip_code)

    if len(digits) == 9:
        return f"{digits[:5]}-{digits[5:]}"
    if len(digits) >= 5:
        return digits[:5]

    return zip_code


STANDARDIZERS = {
    "state": standardize_state,
    "phone": standardize_phone,
    "email": standardize_email,
    "zipCode": standardize_zip_code,
}
