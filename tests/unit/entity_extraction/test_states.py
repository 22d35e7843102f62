"""
Unit tests for state name resolution (states.py).
"""

import pytest

from reservation_extractor.entity_extraction import STATE_ABBREVIATIONS, get_state_abbreviation


class TestGetStateAbbreviation:
    """Tests for get_state_abbreviation()."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Massachusetts", "MA"),
            ("new york", "NY"),
            ("  WEST VIRGINIA ", "WV"),
            ("Boston", "MA"),
            ("east boston", "MA"),
        ],
    )
    def test_table_lookup(self, name, expected):
        assert get_state_abbreviation(name) == expected

    @pytest.mark.unit
    def test_two_letter_code_uppercased_without_lookup(self):
        assert get_state_abbreviation("ri") == "RI"
        # Not a state, but two letters are passed through
        assert get_state_abbreviation("zz") == "ZZ"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "Atlantis", "Mass."])
    def test_unresolvable_returns_empty(self, name):
        assert get_state_abbreviation(name) == ""

    @pytest.mark.unit
    def test_table_covers_fifty_states(self):
        states = {abbr for name, abbr in STATE_ABBREVIATIONS.items()}

        assert len(states) == 50

    @pytest.mark.unit
    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            STATE_ABBREVIATIONS["atlantis"] = "AT"
