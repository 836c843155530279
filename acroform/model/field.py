"""Form field type and state model definitions."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union


class FieldType(str, Enum):
    BUTTON = "button"
    RADIO = "radio"
    CHECK_BOX = "checkbox"
    LIST_BOX = "listbox"
    COMBO_BOX = "combobox"
    TEXT = "text"


class _State:
    __slots__ = ()

    field_type: ClassVar[FieldType]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.field_type.value, **asdict(self)}  # type: ignore[call-overload]


@dataclass(slots=True)
class ButtonState(_State):
    """Push buttons carry no value."""

    field_type: ClassVar[FieldType] = FieldType.BUTTON


@dataclass(slots=True)
class RadioState(_State):
    field_type: ClassVar[FieldType] = FieldType.RADIO

    selected: str = ""
    options: list[str] = field(default_factory=list)


@dataclass(slots=True)
class CheckBoxState(_State):
    field_type: ClassVar[FieldType] = FieldType.CHECK_BOX

    is_checked: bool = False


@dataclass(slots=True)
class ListBoxState(_State):
    field_type: ClassVar[FieldType] = FieldType.LIST_BOX

    selected: list[str] = field(default_factory=list)
    options: list[str] = field(default_factory=list)
    multiselect: bool = False


@dataclass(slots=True)
class ComboBoxState(_State):
    field_type: ClassVar[FieldType] = FieldType.COMBO_BOX

    selected: list[str] = field(default_factory=list)
    options: list[str] = field(default_factory=list)
    editable: bool = False


@dataclass(slots=True)
class TextState(_State):
    field_type: ClassVar[FieldType] = FieldType.TEXT

    text: str = ""


FieldState = Union[
    ButtonState, RadioState, CheckBoxState, ListBoxState, ComboBoxState, TextState
]
