"""Object graph access used by the field model.

The field model only needs to dereference references, read and write
dictionary keys and pull typed scalars out of values. ``ObjectGraph`` names
that capability; ``PdfObjectGraph`` provides it on top of a pypdf writer.
"""

from __future__ import annotations

from typing import IO, Any, Protocol

from pypdf import PdfWriter
from pypdf.generic import (
    ArrayObject,
    DictionaryObject,
    IndirectObject,
    NameObject,
    NullObject,
    PdfObject,
    StreamObject,
    TextStringObject,
)

from acroform.errors import NoSuchReferenceError, NotAReferenceError


class ObjectGraph(Protocol):
    def root(self) -> PdfObject | None:
        """Return the raw ``/Root`` value of the trailer, or None if absent."""

    def dereference(self, value: PdfObject) -> PdfObject:
        """Resolve a reference to the object it points at."""

    def write(self, stream: IO[bytes]) -> None:
        """Serialize the complete graph."""


class PdfObjectGraph:
    def __init__(self, writer: PdfWriter) -> None:
        self._writer = writer

    @property
    def writer(self) -> PdfWriter:
        return self._writer

    def root(self) -> PdfObject | None:
        return self._writer.root_object.indirect_reference

    def dereference(self, value: PdfObject) -> PdfObject:
        if not isinstance(value, IndirectObject):
            raise NotAReferenceError(f"Expected a reference, found {type(value).__name__}")

        target: PdfObject | None = None
        if value.idnum >= 1:
            try:
                target = self._writer.get_object(value)
            except IndexError:
                target = None
        if target is None or isinstance(target, NullObject):
            raise NoSuchReferenceError(value)
        return target

    def write(self, stream: IO[bytes]) -> None:
        self._writer.write(stream)


def lookup(graph: ObjectGraph, dictionary: DictionaryObject, key: str) -> Any:
    """Return the value stored under ``key`` with references resolved.

    Absent keys and explicit nulls both read as None.
    """
    if key not in dictionary:
        return None
    value = dictionary.raw_get(key)
    if isinstance(value, IndirectObject):
        value = graph.dereference(value)
    if isinstance(value, NullObject):
        return None
    return value


def is_dictionary(value: Any) -> bool:
    return isinstance(value, DictionaryObject)


def is_state_map(value: Any) -> bool:
    """True for a plain dictionary; streams subclass DictionaryObject in pypdf."""
    return isinstance(value, DictionaryObject) and not isinstance(value, StreamObject)


def is_array(value: Any) -> bool:
    return isinstance(value, ArrayObject)


def name_value(value: Any) -> str | None:
    if isinstance(value, NameObject):
        return str(value)[1:]
    return None


def text_value(value: Any) -> str | None:
    if isinstance(value, TextStringObject):
        return str(value)
    return None


def int_value(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    return None


def make_name(label: str) -> NameObject:
    return NameObject(f"/{label}")


def make_text(text: str) -> TextStringObject:
    return TextStringObject(text)
