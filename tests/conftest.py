"""Builders for in-memory AcroForm documents used across the tests."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest
from pypdf import PdfWriter
from pypdf.generic import (
    ArrayObject,
    DecodedStreamObject,
    DictionaryObject,
    IndirectObject,
    NameObject,
    NumberObject,
    PdfObject,
    TextStringObject,
)

from acroform.model import flags
from acroform.model.form import Form
from acroform.pdf.graph import PdfObjectGraph


def name(value: str) -> NameObject:
    return NameObject(f"/{value}")


def text(value: str) -> TextStringObject:
    return TextStringObject(value)


class FormBuilder:
    def __init__(self) -> None:
        self.writer = PdfWriter()
        self.writer.add_blank_page(width=612, height=792)
        self.fields = ArrayObject()

    def add(self, entries: dict[str, PdfObject], top_level: bool = True) -> IndirectObject:
        field = DictionaryObject({NameObject(key): value for key, value in entries.items()})
        ref = self.writer._add_object(field)
        if top_level:
            self.fields.append(ref)
        return ref

    def text_field(self, field_name: str, value: str | None = None, **extra: PdfObject) -> IndirectObject:
        entries: dict[str, PdfObject] = {"/FT": name("Tx"), "/T": text(field_name)}
        if value is not None:
            entries["/V"] = text(value)
        entries.update(extra)
        return self.add(entries)

    def check_box(self, field_name: str, **extra: PdfObject) -> IndirectObject:
        entries: dict[str, PdfObject] = {"/FT": name("Btn"), "/T": text(field_name)}
        entries.update(extra)
        return self.add(entries)

    def radio(
        self,
        field_name: str,
        options: list[str | None],
        value: str | None = None,
        ff: int = flags.RADIO | flags.NO_TOGGLE_TO_OFF,
    ) -> IndirectObject:
        """Add a radio group; a None option makes a kid without appearances."""
        entries: dict[str, PdfObject] = {
            "/FT": name("Btn"),
            "/T": text(field_name),
            "/Ff": NumberObject(ff),
        }
        if value is not None:
            entries["/V"] = name(value)
        parent_ref = self.add(entries)
        parent = parent_ref.get_object()

        kids = ArrayObject()
        for option in options:
            kid: dict[str, PdfObject] = {
                "/Type": name("Annot"),
                "/Subtype": name("Widget"),
                "/Parent": parent_ref,
            }
            if option is not None:
                kid["/AP"] = DictionaryObject(
                    {
                        NameObject("/N"): DictionaryObject(
                            {
                                NameObject("/Off"): DictionaryObject(),
                                name(option): DictionaryObject(),
                            }
                        )
                    }
                )
                kid["/AS"] = name(option if option == value else "Off")
            kids.append(self.add(kid, top_level=False))
        parent[NameObject("/Kids")] = kids
        return parent_ref

    def choice(
        self,
        field_name: str,
        options: list[PdfObject] | None,
        ff: int = 0,
        value: PdfObject | None = None,
    ) -> IndirectObject:
        entries: dict[str, PdfObject] = {
            "/FT": name("Ch"),
            "/T": text(field_name),
            "/Ff": NumberObject(ff),
        }
        if options is not None:
            entries["/Opt"] = ArrayObject(options)
        if value is not None:
            entries["/V"] = value
        return self.add(entries)

    def form_xobject(self) -> IndirectObject:
        """Add an empty form XObject, the stream a widget appearance points at."""
        stream = DecodedStreamObject()
        stream.set_data(b"")
        stream[NameObject("/Type")] = name("XObject")
        stream[NameObject("/Subtype")] = name("Form")
        stream[NameObject("/BBox")] = ArrayObject([NumberObject(0)] * 4)
        return self.writer._add_object(stream)

    def attach(self) -> None:
        acroform = DictionaryObject({NameObject("/Fields"): self.fields})
        self.writer._root_object[NameObject("/AcroForm")] = self.writer._add_object(acroform)

    def graph(self) -> PdfObjectGraph:
        self.attach()
        return PdfObjectGraph(self.writer)

    def to_bytes(self) -> BytesIO:
        self.attach()
        buffer = BytesIO()
        self.writer.write(buffer)
        buffer.seek(0)
        return buffer

    def save(self, path: Path) -> Path:
        path.write_bytes(self.to_bytes().getvalue())
        return path

    def load(self) -> Form:
        return Form.load_from(self.to_bytes())


def texts(*values: str) -> list[PdfObject]:
    return [text(value) for value in values]


def reload(form: Form) -> Form:
    buffer = BytesIO()
    form.save_to(buffer)
    buffer.seek(0)
    return Form.load_from(buffer)


@pytest.fixture
def builder() -> FormBuilder:
    return FormBuilder()


@pytest.fixture
def sample_form(builder: FormBuilder) -> Form:
    """One field of every type, in this index order."""
    builder.text_field("Name")
    builder.check_box("Agree", **{"/V": name("Off"), "/AS": name("Off")})
    builder.radio("Color", ["Red", "Green", "Blue"], value="Green")
    builder.choice("Sizes", texts("S", "M", "L"), ff=flags.MULTI_SELECT)
    builder.choice("Fruit", texts("Apple", "Pear"), ff=flags.COMBO, value=text("Pear"))
    builder.check_box("Submit", **{"/Ff": NumberObject(flags.PUSHBUTTON)})
    return builder.load()
