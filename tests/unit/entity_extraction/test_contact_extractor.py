"""
Unit tests for phone and email extraction (contact_extractor.py).
"""

import pytest

from reservation_extractor.entity_extraction import (
    ExtractionResult,
    extract_email,
    extract_phone,
    format_phone_number,
    normalize_text,
    split_lines,
)


def run_contact_passes(raw_text: str) -> ExtractionResult:
    text = normalize_text(raw_text)
    lines = split_lines(text)
    result = ExtractionResult()
    extract_phone(text, lines, result)
    extract_email(text, lines, result)
    return result


class TestFormatPhoneNumber:
    """Tests for format_phone_number()."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "phone",
        ["555-123-4567", "555.123.4567", "(555) 123-4567", "5551234567", "+1 555 123 4567"],
    )
    def test_formats_us_numbers(self, phone):
        assert format_phone_number(phone) == "(555) 123-4567"

    @pytest.mark.unit
    @pytest.mark.parametrize("phone", ["12345", "25551234567", "+44 20 7946 0958"])
    def test_other_numbers_unchanged(self, phone):
        assert format_phone_number(phone) == phone

    @pytest.mark.unit
    def test_empty(self):
        assert format_phone_number("") == ""


class TestExtractPhone:
    """Tests for extract_phone()."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "phone",
        ["555-123-4567", "(555) 123-4567", "5551234567", "15551234567"],
    )
    def test_phone_in_running_text(self, phone):
        result = run_contact_passes(f"Please call {phone} after six.")

        assert result["phone"].text == "(555) 123-4567"
        assert result["phone"].confidence == 0.9

    @pytest.mark.unit
    def test_labelled_phone(self):
        result = run_contact_passes("Cell: 555.123.4567")

        assert result["phone"].text == "(555) 123-4567"

    @pytest.mark.unit
    def test_labelled_booking_phone(self, labelled_booking):
        result = run_contact_passes(labelled_booking)

        assert result["phone"].text == "(617) 555-0142"

    @pytest.mark.unit
    def test_no_phone(self):
        result = run_contact_passes("Pickup at 4:45 am on 03/15/2025")

        assert result["phone"].is_empty


class TestExtractEmail:
    """Tests for extract_email()."""

    @pytest.mark.unit
    def test_labelled_email(self, labelled_booking):
        result = run_contact_passes(labelled_booking)

        assert result["email"].text == "John.Smith@Example.com"
        assert result["email"].confidence == 0.95

    @pytest.mark.unit
    def test_email_in_running_text(self, free_form_request):
        result = run_contact_passes(free_form_request)

        assert result["email"].text == "sarah.connor@mail.com"

    @pytest.mark.unit
    def test_no_email(self):
        result = run_contact_passes("Reach me at john at example dot com")

        assert result["email"].is_empty
