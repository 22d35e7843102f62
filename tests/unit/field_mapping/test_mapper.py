"""
Unit tests for CRM field mapping and macro generation (mapper.py, models.py).
"""

from datetime import date

import pytest

from reservation_extractor.config import settings
from reservation_extractor.entity_extraction import ExtractionResult, FieldResult
from reservation_extractor.field_mapping import FORM_MAPPINGS, FieldMapper, MacroCommand


@pytest.fixture
def mapper() -> FieldMapper:
    return FieldMapper()


@pytest.fixture
def extracted() -> dict:
    return {
        "firstName": FieldResult("John", 0.9),
        "lastName": FieldResult("Smith", 0.9),
        "state": FieldResult("massachusetts", 0.85),
        "email": FieldResult("John@Example.com", 0.95),
    }


def find_commands(commands, target):
    return [c for c in commands if c.target == target]


class TestFormMappings:
    @pytest.mark.unit
    def test_account_creation_form(self, mapper):
        mappings = mapper.get_mappings_for_form("accountCreation")

        assert mappings["firstName"].required
        assert mappings["lastName"].required
        assert mappings["firstName"].selectors[0] == "id=contN1T1"

    @pytest.mark.unit
    def test_reservation_form_has_no_fields_yet(self, mapper):
        assert mapper.get_mappings_for_form("reservation") == {}
        assert mapper.create_form_filling_commands("reservation", ExtractionResult()) == []

    @pytest.mark.unit
    def test_unknown_form_type(self, mapper):
        with pytest.raises(ValueError, match="No mappings found for form type"):
            mapper.get_mappings_for_form("invoice")

    @pytest.mark.unit
    def test_custom_mappings(self):
        custom = FieldMapper(form_mappings={"quick": {"phone": FORM_MAPPINGS["accountCreation"]["phone"]}})

        commands = custom.create_form_filling_commands(
            "quick", {"phone": FieldResult("6175550142", 0.9)}
        )

        assert [c.command for c in commands] == ["click", "type"]
        assert commands[1].value == "(617) 555-0142"


class TestFormFillingCommands:
    @pytest.mark.unit
    def test_text_fields_click_then_type(self, mapper, extracted):
        commands = mapper.create_form_filling_commands("accountCreation", extracted)

        first_name = find_commands(commands, "id=contN1T1")
        assert [c.command for c in first_name] == ["click", "type"]
        assert first_name[1].value == "John"

    @pytest.mark.unit
    def test_values_are_standardized(self, mapper, extracted):
        commands = mapper.create_form_filling_commands("accountCreation", extracted)

        assert find_commands(commands, "name=contState") == [
            MacroCommand(command="select", target="name=contState", value="label=MA")
        ]
        assert find_commands(commands, "id=emailValue1")[1].value == "john@example.com"

    @pytest.mark.unit
    def test_checkbox_defaults_are_clicked(self, mapper, extracted):
        commands = mapper.create_form_filling_commands("accountCreation", extracted)

        for target in ("name=contType1", "name=contType2", "name=emailProp1"):
            assert [c.command for c in find_commands(commands, target)] == ["click"]

    @pytest.mark.unit
    def test_financial_tab_commands_come_last(self, mapper, extracted):
        commands = mapper.create_form_filling_commands("accountCreation", extracted)

        assert [(c.command, c.target, c.value) for c in commands[-3:]] == [
            ("click", "linkText=Financial Data", ""),
            ("select", "name=contPaymentMethod", "label=Credit Card - Offline"),
            ("click", "linkText=Account Info", ""),
        ]

    @pytest.mark.unit
    def test_required_field_empty_is_skipped(self, mapper):
        commands = mapper.create_form_filling_commands("accountCreation", ExtractionResult())

        assert find_commands(commands, "id=contN1T1") == []
        assert find_commands(commands, "id=contN2T1") == []
        # Optional text fields are still cleared
        assert [c.command for c in find_commands(commands, "name=contCity")] == ["click", "type"]

    @pytest.mark.unit
    def test_accepts_extraction_result(self, mapper, extractor, labelled_booking):
        result = extractor.extract(labelled_booking)

        commands = mapper.create_form_filling_commands("accountCreation", result)

        assert find_commands(commands, "name=contCity")[1].value == "Swansea"
        assert find_commands(commands, "name=contState")[0].value == "label=MA"


class TestMacro:
    @pytest.mark.unit
    def test_generate_macro(self, mapper, extracted):
        macro = mapper.generate_macro("accountCreation", extracted, creation_date=date(2025, 3, 1))

        assert macro.name == f"{settings.macro_name_prefix}_accountCreation_AutoFill"
        assert macro.creation_date == "2025-03-01"
        assert macro.commands[0] == MacroCommand(command="open", target=settings.crm_accounts_url)

    @pytest.mark.unit
    def test_automation_dict_uses_tool_keys(self, mapper, extracted):
        macro = mapper.generate_macro("accountCreation", extracted, creation_date=date(2025, 3, 1))

        data = macro.to_automation_dict()

        assert data["Name"] == "LimoAnywhere_accountCreation_AutoFill"
        assert data["CreationDate"] == "2025-03-01"
        assert data["Commands"][0] == {
            "Command": "open",
            "Target": settings.crm_accounts_url,
            "Value": "",
        }

    @pytest.mark.unit
    def test_default_creation_date_is_today(self, mapper, extracted):
        macro = mapper.generate_macro("accountCreation", extracted)

        assert macro.creation_date == date.today().isoformat()

    @pytest.mark.unit
    def test_command_accepts_tool_keys(self):
        command = MacroCommand.model_validate({"Command": "click", "Target": "name=contCity"})

        assert command.command == "click"
        assert command.value == ""


class TestConvertToVariables:
    @pytest.mark.unit
    def test_only_filled_fields(self, extracted):
        extracted["city"] = FieldResult("", 0.4)

        variables = FieldMapper.convert_to_variables(extracted)

        assert variables == {
            "firstName": "John",
            "lastName": "Smith",
            "state": "massachusetts",
            "email": "John@Example.com",
        }
