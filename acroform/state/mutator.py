"""Validated writes of new field values into the object graph.

Each setter re-classifies the field and re-derives its options before
touching the graph, so a rejected value leaves the document unchanged.
"""

from __future__ import annotations

import logging
from typing import cast

from pypdf.generic import ArrayObject, DictionaryObject, NameObject

from acroform.config import CHECKED_STATE, OFF_STATE
from acroform.errors import InvalidSelectionError, TooManySelectedError, TypeMismatchError
from acroform.model.field import ComboBoxState, FieldType, ListBoxState, RadioState
from acroform.pdf.graph import ObjectGraph, make_name, make_text
from acroform.state.classifier import classify, field_dictionary, field_value
from acroform.state.projector import appearance_states, project

logger = logging.getLogger(__name__)


def set_text(graph: ObjectGraph, field: DictionaryObject, text: str) -> None:
    _require_type(graph, field, FieldType.TEXT)
    field[NameObject("/V")] = make_text(text)
    # Force viewers to rebuild the appearance from the new value.
    if "/AP" in field:
        del field["/AP"]
    logger.debug(f"set_text: Wrote {len(text)} character(s)")


def set_check_box(graph: ObjectGraph, field: DictionaryObject, is_checked: bool) -> None:
    _require_type(graph, field, FieldType.CHECK_BOX)
    state = CHECKED_STATE if is_checked else OFF_STATE
    field[NameObject("/V")] = make_name(state)
    field[NameObject("/AS")] = make_name(state)
    logger.debug(f"set_check_box: Wrote {state}")


def set_radio(graph: ObjectGraph, field: DictionaryObject, choice: str) -> None:
    _require_type(graph, field, FieldType.RADIO)
    state = cast(RadioState, project(graph, field, FieldType.RADIO))
    if choice not in state.options:
        raise InvalidSelectionError(f"{choice!r} is not one of {state.options}")

    field[NameObject("/V")] = make_name(choice)
    _sync_kid_appearances(graph, field, choice)
    logger.debug(f"set_radio: Selected {choice!r}")


def set_list_box(graph: ObjectGraph, field: DictionaryObject, choices: list[str]) -> None:
    _require_type(graph, field, FieldType.LIST_BOX)
    state = cast(ListBoxState, project(graph, field, FieldType.LIST_BOX))
    if len(choices) > 1 and not state.multiselect:
        raise TooManySelectedError(f"Field allows one selection, got {len(choices)}")
    invalid = [choice for choice in choices if choice not in state.options]
    if invalid:
        raise InvalidSelectionError(f"{invalid} not among {state.options}")

    if not choices:
        if "/V" in field:
            del field["/V"]
    elif len(choices) == 1:
        field[NameObject("/V")] = make_text(choices[0])
    else:
        field[NameObject("/V")] = ArrayObject(make_text(choice) for choice in choices)
    logger.debug(f"set_list_box: Selected {len(choices)} option(s)")


def set_combo_box(graph: ObjectGraph, field: DictionaryObject, choice: str) -> None:
    _require_type(graph, field, FieldType.COMBO_BOX)
    state = cast(ComboBoxState, project(graph, field, FieldType.COMBO_BOX))
    if choice not in state.options and not state.editable:
        raise InvalidSelectionError(f"{choice!r} is not one of {state.options}")

    field[NameObject("/V")] = make_text(choice)
    logger.debug(f"set_combo_box: Selected {choice!r}")


def _require_type(graph: ObjectGraph, field: DictionaryObject, expected: FieldType) -> None:
    actual = classify(graph, field)
    if actual is not expected:
        raise TypeMismatchError(f"Field is {actual.value}, not {expected.value}")


def _sync_kid_appearances(graph: ObjectGraph, field: DictionaryObject, choice: str) -> None:
    kids = field_value(graph, field, "/Kids") or []
    for kid_ref in kids:
        kid = field_dictionary(graph, kid_ref)
        states = appearance_states(graph, kid)
        if not states:
            continue
        kid[NameObject("/AS")] = make_name(choice if choice in states else OFF_STATE)
