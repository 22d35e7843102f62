"""
Models for CRM form mappings and browser-automation macros.

Macro records serialise with the automation tool's own key names
(Command/Target/Value), hence the field aliases.
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FieldType(str, Enum):
    """Kind of form control a field maps to."""

    TEXT = "text"
    CHECKBOX = "checkbox"
    SELECT = "select"


class FieldSpec(BaseModel):
    """How one field is located and filled on a CRM form."""

    model_config = ConfigDict(frozen=True)

    selectors: List[str] = Field(description="Element locators, first one is used")
    type: FieldType = Field(default=FieldType.TEXT)
    required: bool = Field(default=False)
    default_value: Optional[Union[bool, str]] = Field(
        default=None, description="Used when the field was not extracted"
    )


class MacroCommand(BaseModel):
    """One automation step."""

    model_config = ConfigDict(populate_by_name=True)

    command: str = Field(alias="Command")
    target: str = Field(alias="Target")
    value: str = Field(default="", alias="Value")


class Macro(BaseModel):
    """Complete automation macro for one form."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="Name")
    creation_date: str = Field(alias="CreationDate", description="ISO date (YYYY-MM-DD)")
    commands: List[MacroCommand] = Field(default_factory=list, alias="Commands")

    def to_automation_dict(self) -> dict:
        """Dump with the automation tool's key names."""
        return self.model_dump(by_alias=True)
