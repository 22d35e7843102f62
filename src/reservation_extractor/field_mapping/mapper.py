"""
Conversion of extraction results into CRM form-filling macros.

Maps extracted fields onto the CRM's account-creation form and emits the
click/type/select commands the browser-automation extension replays.
"""

from datetime import date
from typing import Dict, List, Mapping, Optional

import structlog

from ..config import settings
from ..entity_extraction.field_result import FieldResult
from .models import FieldSpec, FieldType, Macro, MacroCommand
from .standardize import STANDARDIZERS


logger = structlog.get_logger(__name__)

PAYMENT_METHOD = "Credit Card - Offline"

FORM_MAPPINGS: Dict[str, Dict[str, FieldSpec]] = {
    "accountCreation": {
        "firstName": FieldSpec(selectors=["id=contN1T1", "name=contFName"], required=True),
        "lastName": FieldSpec(selectors=["id=contN2T1", "name=contLName"], required=True),
        "contactType1": FieldSpec(
            selectors=["name=contType1"], type=FieldType.CHECKBOX, default_value=True
        ),
        "contactType2": FieldSpec(
            selectors=["name=contType2"], type=FieldType.CHECKBOX, default_value=True
        ),
        "address": FieldSpec(selectors=["name=contAddr1"]),
        "city": FieldSpec(selectors=["name=contCity"]),
        "state": FieldSpec(selectors=["name=contState"], type=FieldType.SELECT),
        "zipCode": FieldSpec(selectors=["name=contZip"]),
        "phone": FieldSpec(selectors=['xpath=//*[@id="AutoNumber6"]/tbody/tr[3]/td/div/input']),
        "email": FieldSpec(selectors=["id=emailValue1", "name=emailValue1"]),
        "emailProp1": FieldSpec(
            selectors=['xpath=//*[@id="divWithEmailProp"]/div/label/input'],
            type=FieldType.CHECKBOX,
            default_value=True,
        ),
        "emailProp2": FieldSpec(
            selectors=["name=emailProp1"], type=FieldType.CHECKBOX, default_value=True
        ),
        "paymentMethod": FieldSpec(
            selectors=["name=contPaymentMethod"], type=FieldType.SELECT, default_value=PAYMENT_METHOD
        ),
    },
    # Reservation page support not mapped yet
    "reservation": {},
}

_TRUTHY_CHECKBOX_VALUES = {"true", "1", "on"}

ExtractedData = Mapping[str, FieldResult]


def _is_checked(value) -> bool:
    if value is True:
        return True
    return isinstance(value, str) and value.lower() in _TRUTHY_CHECKBOX_VALUES


class FieldMapper:
    """Builds automation commands that fill CRM forms from extraction results."""

    def __init__(self, form_mappings: Optional[Dict[str, Dict[str, FieldSpec]]] = None):
        self.form_mappings = form_mappings if form_mappings is not None else FORM_MAPPINGS

    def get_mappings_for_form(self, form_type: str) -> Dict[str, FieldSpec]:
        """
        Get field mappings for a form.

        Raises:
            ValueError: If the form type is unknown
        """
        if form_type not in self.form_mappings:
            raise ValueError(
                f"No mappings found for form type: {form_type}. "
                f"Known form types: {sorted(self.form_mappings)}"
            )
        return self.form_mappings[form_type]

    def _resolve_value(self, field_name: str, spec: FieldSpec, extracted: ExtractedData):
        if field_name in extracted:
            value = extracted[field_name].text
        elif spec.default_value is not None:
            value = spec.default_value
        else:
            value = ""

        standardize = STANDARDIZERS.get(field_name)
        if standardize and isinstance(value, str):
            value = standardize(value)
        return value

    def create_form_filling_commands(
        self, form_type: str, extracted: ExtractedData
    ) -> List[MacroCommand]:
        """
        Create the commands that fill one form.

        Args:
            form_type: Key of FORM_MAPPINGS (e.g. "accountCreation")
            extracted: ExtractionResult or any field -> FieldResult mapping

        Returns:
            Ordered list of commands

        Raises:
            ValueError: If the form type is unknown
        """
        mappings = self.get_mappings_for_form(form_type)
        commands: List[MacroCommand] = []

        for field_name, spec in mappings.items():
            if not spec.selectors:
                continue

            value = self._resolve_value(field_name, spec, extracted)

            if spec.required and not value:
                logger.warning("required_field_empty", form_type=form_type, field=field_name)
                continue

            selector = spec.selectors[0]

            if spec.type is FieldType.TEXT:
                commands.append(MacroCommand(command="click", target=selector))
                commands.append(MacroCommand(command="type", target=selector, value=str(value)))
            elif spec.type is FieldType.CHECKBOX:
                if _is_checked(value):
                    commands.append(MacroCommand(command="click", target=selector))
            elif spec.type is FieldType.SELECT:
                commands.append(MacroCommand(command="select", target=selector, value=f"label={value}"))

        if form_type == "accountCreation":
            # Payment method lives on the Financial Data tab
            commands.extend(
                [
                    MacroCommand(command="click", target="linkText=Financial Data"),
                    MacroCommand(
                        command="select",
                        target="name=contPaymentMethod",
                        value=f"label={PAYMENT_METHOD}",
                    ),
                    MacroCommand(command="click", target="linkText=Account Info"),
                ]
            )

        logger.debug("form_commands_created", form_type=form_type, commands_count=len(commands))
        return commands

    def generate_macro(
        self, form_type: str, extracted: ExtractedData, creation_date: Optional[date] = None
    ) -> Macro:
        """
        Generate a complete macro: open the CRM accounts page, then fill the form.

        Args:
            form_type: Key of FORM_MAPPINGS
            extracted: ExtractionResult or any field -> FieldResult mapping
            creation_date: Date stamped on the macro (default: today)

        Returns:
            Macro
        """
        commands = self.create_form_filling_commands(form_type, extracted)
        creation_date = creation_date or date.today()

        return Macro(
            name=f"{settings.macro_name_prefix}_{form_type}_AutoFill",
            creation_date=creation_date.isoformat(),
            commands=[MacroCommand(command="open", target=settings.crm_accounts_url), *commands],
        )

    @staticmethod
    def convert_to_variables(extracted: ExtractedData) -> Dict[str, str]:
        """Return field -> text for every field with text (automation variables)."""
        return {name: field.text for name, field in extracted.items() if field and field.text}
