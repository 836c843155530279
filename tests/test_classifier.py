from __future__ import annotations

import pytest
from pypdf import PdfWriter
from pypdf.generic import DictionaryObject, NameObject, NumberObject

from acroform.errors import MalformedFieldError
from acroform.model import flags
from acroform.model.field import FieldType
from acroform.pdf.graph import PdfObjectGraph
from acroform.state.classifier import classify

from conftest import name, text


@pytest.fixture
def graph() -> PdfObjectGraph:
    return PdfObjectGraph(PdfWriter())


def field(subtype: str | None, ff: int | None = None) -> DictionaryObject:
    entries = DictionaryObject()
    if subtype is not None:
        entries[NameObject("/FT")] = name(subtype)
    if ff is not None:
        entries[NameObject("/Ff")] = NumberObject(ff)
    return entries


@pytest.mark.parametrize(
    ("subtype", "ff", "expected"),
    [
        ("Btn", None, FieldType.CHECK_BOX),
        ("Btn", flags.RADIO, FieldType.RADIO),
        ("Btn", flags.NO_TOGGLE_TO_OFF, FieldType.RADIO),
        ("Btn", flags.PUSHBUTTON, FieldType.BUTTON),
        ("Btn", flags.RADIO | flags.PUSHBUTTON, FieldType.RADIO),
        ("Btn", flags.RADIOS_IN_UNISON, FieldType.CHECK_BOX),
        ("Ch", None, FieldType.LIST_BOX),
        ("Ch", flags.MULTI_SELECT, FieldType.LIST_BOX),
        ("Ch", flags.COMBO, FieldType.COMBO_BOX),
        ("Ch", flags.COMBO | flags.EDIT, FieldType.COMBO_BOX),
        ("Tx", None, FieldType.TEXT),
        ("Sig", None, FieldType.TEXT),
        (None, None, FieldType.TEXT),
    ],
)
def test_classify(graph: PdfObjectGraph, subtype: str | None, ff: int | None, expected: FieldType) -> None:
    assert classify(graph, field(subtype, ff)) is expected


def test_standard_bit_positions() -> None:
    assert flags.NO_TOGGLE_TO_OFF == 0x4000
    assert flags.RADIO == 0x8000
    assert flags.PUSHBUTTON == 0x10000
    assert flags.COMBO == 0x20000
    assert flags.EDIT == 0x40000
    assert flags.MULTI_SELECT == 0x200000


def test_negative_flag_values_are_read_as_unsigned(graph: PdfObjectGraph) -> None:
    # -1 sets every bit, so the radio check wins.
    assert classify(graph, field("Btn", -1)) is FieldType.RADIO


def test_non_name_subtype_is_malformed(graph: PdfObjectGraph) -> None:
    broken = DictionaryObject({NameObject("/FT"): text("Btn")})
    with pytest.raises(MalformedFieldError):
        classify(graph, broken)


def test_non_integer_flags_are_malformed(graph: PdfObjectGraph) -> None:
    broken = field("Ch")
    broken[NameObject("/Ff")] = text("combo")
    with pytest.raises(MalformedFieldError):
        classify(graph, broken)
