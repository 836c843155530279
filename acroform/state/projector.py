"""Project a field dictionary onto the normalized state for its type.

Value encodings vary between writers: choice selections may be absent, a
single string or an array of strings, and options may be plain strings or
``[export, label]`` pairs. They are normalized here, and only here, into
ordered lists.
"""

from __future__ import annotations

from typing import Any, Iterable

from pypdf.generic import DictionaryObject, IndirectObject

from acroform.config import CHECKED_STATE, OFF_STATE
from acroform.errors import LoadError, MalformedFieldError
from acroform.model import flags
from acroform.model.field import (
    ButtonState,
    CheckBoxState,
    ComboBoxState,
    FieldState,
    FieldType,
    ListBoxState,
    RadioState,
    TextState,
)
from acroform.pdf.graph import ObjectGraph, is_array, is_state_map, name_value, text_value
from acroform.state.classifier import field_dictionary, field_flags, field_value


def project(graph: ObjectGraph, field: DictionaryObject, field_type: FieldType) -> FieldState:
    if field_type is FieldType.BUTTON:
        return ButtonState()
    if field_type is FieldType.RADIO:
        return RadioState(
            selected=effective_state(graph, field) or "",
            options=radio_options(graph, field),
        )
    if field_type is FieldType.CHECK_BOX:
        return CheckBoxState(is_checked=effective_state(graph, field) == CHECKED_STATE)
    if field_type is FieldType.LIST_BOX:
        return ListBoxState(
            selected=selected_labels(graph, field),
            options=choice_options(graph, field),
            multiselect=flags.is_multiselect(field_flags(graph, field)),
        )
    if field_type is FieldType.COMBO_BOX:
        return ComboBoxState(
            selected=selected_labels(graph, field),
            options=choice_options(graph, field),
            editable=flags.is_editable(field_flags(graph, field)),
        )
    return TextState(text=text_value(field_value(graph, field, "/V")) or "")


def effective_state(graph: ObjectGraph, field: DictionaryObject) -> str | None:
    """Return the button state name from ``/V``, falling back to ``/AS``."""
    for key in ("/V", "/AS"):
        raw = field_value(graph, field, key)
        if raw is None:
            continue
        state = name_value(raw)
        if state is None:
            raise MalformedFieldError(f"{key} is not a name: {raw!r}")
        return state
    return None


def radio_options(graph: ObjectGraph, field: DictionaryObject) -> list[str]:
    kids = field_value(graph, field, "/Kids")
    if kids is None:
        return []
    if not is_array(kids):
        raise MalformedFieldError("/Kids is not an array")

    options: list[str] = []
    for index, kid_ref in enumerate(kids):
        kid = field_dictionary(graph, kid_ref)
        # Kids without a usable appearance get their position as a label.
        options.append(widget_on_state(graph, kid) or str(index))
    return _unique(options)


def widget_on_state(graph: ObjectGraph, widget: DictionaryObject) -> str | None:
    """Return the first normal appearance state that is not ``Off``."""
    for state in appearance_states(graph, widget):
        if state != OFF_STATE:
            return state
    return None


def appearance_states(graph: ObjectGraph, widget: DictionaryObject) -> list[str]:
    appearance = field_value(graph, widget, "/AP")
    if not is_state_map(appearance):
        return []
    normal = field_value(graph, appearance, "/N")
    if not is_state_map(normal):
        return []
    return [name_value(key) or str(key) for key in normal.keys()]


def selected_labels(graph: ObjectGraph, field: DictionaryObject) -> list[str]:
    value = field_value(graph, field, "/V")
    single = text_value(value)
    if single is not None:
        return [single]
    if is_array(value):
        labels = (text_value(_resolve(graph, item)) for item in value)
        return [label for label in labels if label is not None]
    return []


def choice_options(graph: ObjectGraph, field: DictionaryObject) -> list[str]:
    raw = field_value(graph, field, "/Opt")
    if not is_array(raw):
        return []

    options: list[str] = []
    for item in raw:
        item = _resolve(graph, item)
        label = text_value(item)
        if label is None and is_array(item) and len(item) == 2:
            # [export value, display label]; only the label is surfaced
            label = text_value(_resolve(graph, item[1]))
        if label:
            options.append(label)
    return _unique(options)


def _resolve(graph: ObjectGraph, value: Any) -> Any:
    if not isinstance(value, IndirectObject):
        return value
    try:
        return graph.dereference(value)
    except LoadError as exc:
        raise MalformedFieldError(str(exc)) from exc


def _unique(labels: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(labels))
