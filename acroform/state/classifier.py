"""Decode a field dictionary's subtype and flags into a field type.

Every reader in this package assumes the field was produced by discovery and
treats a present-but-malformed key as a broken contract, raising
``MalformedFieldError`` instead of a recoverable error.
"""

from __future__ import annotations

from typing import Any

from pypdf.generic import DictionaryObject, IndirectObject

from acroform.errors import LoadError, MalformedFieldError
from acroform.model import flags
from acroform.model.field import FieldType
from acroform.pdf.graph import ObjectGraph, int_value, is_dictionary, lookup, name_value


def field_dictionary(graph: ObjectGraph, field_ref: IndirectObject) -> DictionaryObject:
    try:
        field = graph.dereference(field_ref)
    except LoadError as exc:
        raise MalformedFieldError(str(exc)) from exc
    if not is_dictionary(field):
        raise MalformedFieldError(
            f"Field {field_ref.idnum} {field_ref.generation} R is not a dictionary"
        )
    return field


def field_value(graph: ObjectGraph, field: DictionaryObject, key: str) -> Any:
    try:
        return lookup(graph, field, key)
    except LoadError as exc:
        raise MalformedFieldError(f"{key}: {exc}") from exc


def field_flags(graph: ObjectGraph, field: DictionaryObject) -> int:
    raw = field_value(graph, field, "/Ff")
    if raw is None:
        return 0
    value = int_value(raw)
    if value is None:
        raise MalformedFieldError(f"/Ff is not an integer: {raw!r}")
    return flags.to_flags(value)


def classify(graph: ObjectGraph, field: DictionaryObject) -> FieldType:
    raw = field_value(graph, field, "/FT")
    subtype = None
    if raw is not None:
        subtype = name_value(raw)
        if subtype is None:
            raise MalformedFieldError(f"/FT is not a name: {raw!r}")

    if subtype == "Btn":
        bits = field_flags(graph, field)
        if flags.is_radio(bits):
            return FieldType.RADIO
        if flags.is_pushbutton(bits):
            return FieldType.BUTTON
        return FieldType.CHECK_BOX
    if subtype == "Ch":
        if flags.is_combo(field_flags(graph, field)):
            return FieldType.COMBO_BOX
        return FieldType.LIST_BOX
    return FieldType.TEXT
