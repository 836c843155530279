"""Form aggregate: a loaded document plus its discovered input fields."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import IO

from pypdf.generic import DictionaryObject, IndirectObject

from acroform.errors import FieldValidationError, MalformedFieldError
from acroform.model.field import FieldState, FieldType
from acroform.pdf.discovery import discover_fields
from acroform.pdf.graph import ObjectGraph, text_value
from acroform.pdf.loader import open_graph
from acroform.pdf.writer import request_appearance_rebuild, write_graph
from acroform.state import mutator
from acroform.state.classifier import classify, field_dictionary, field_value
from acroform.state.projector import project

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Form:
    """A PDF with fillable fields, addressed by discovery-order index.

    Read accessors assume every discovered field is well formed and raise
    ``MalformedFieldError`` when one is not. Run ``validate`` once after
    loading to turn that into a recoverable ``FieldValidationError``.
    Indices outside ``range(field_count)`` raise ``IndexError``.
    """

    graph: ObjectGraph
    field_ids: list[IndirectObject]
    path: Path | None = None

    @classmethod
    def load(cls, path: str | Path) -> Form:
        source_path = Path(path)
        return cls.from_graph(open_graph(source_path), path=source_path)

    @classmethod
    def load_from(cls, stream: IO[bytes]) -> Form:
        return cls.from_graph(open_graph(stream))

    @classmethod
    def from_graph(cls, graph: ObjectGraph, path: Path | None = None) -> Form:
        field_ids = discover_fields(graph)
        logger.info(f"Form.from_graph: Loaded form with {len(field_ids)} field(s)")
        return cls(graph=graph, field_ids=field_ids, path=path)

    @property
    def field_count(self) -> int:
        return len(self.field_ids)

    def __len__(self) -> int:
        return self.field_count

    def type_of(self, index: int) -> FieldType:
        return classify(self.graph, self._field(index))

    def name_of(self, index: int) -> str | None:
        """Return the partial field name (``/T``), if it is a text string."""
        return text_value(field_value(self.graph, self._field(index), "/T"))

    def state_of(self, index: int) -> FieldState:
        field = self._field(index)
        return project(self.graph, field, classify(self.graph, field))

    def types(self) -> list[FieldType]:
        return [self.type_of(index) for index in range(self.field_count)]

    def names(self) -> list[str | None]:
        return [self.name_of(index) for index in range(self.field_count)]

    def states(self) -> list[FieldState]:
        return [self.state_of(index) for index in range(self.field_count)]

    def index_of(self, name: str) -> int:
        for index in range(self.field_count):
            if self.name_of(index) == name:
                return index
        raise KeyError(name)

    def validate(self) -> None:
        issues: list[tuple[int, str]] = []
        for index in range(self.field_count):
            try:
                self.name_of(index)
                self.state_of(index)
            except MalformedFieldError as exc:
                issues.append((index, str(exc)))
        if issues:
            raise FieldValidationError(issues)

    def set_text(self, index: int, text: str) -> None:
        mutator.set_text(self.graph, self._field(index), text)

    def set_check_box(self, index: int, is_checked: bool) -> None:
        mutator.set_check_box(self.graph, self._field(index), is_checked)

    def set_radio(self, index: int, choice: str) -> None:
        mutator.set_radio(self.graph, self._field(index), choice)

    def set_list_box(self, index: int, choices: list[str]) -> None:
        mutator.set_list_box(self.graph, self._field(index), list(choices))

    def set_combo_box(self, index: int, choice: str) -> None:
        mutator.set_combo_box(self.graph, self._field(index), choice)

    def save(self, path: str | Path, need_appearances: bool = False) -> None:
        if need_appearances:
            request_appearance_rebuild(self.graph)
        write_graph(self.graph, Path(path))

    def save_to(self, stream: IO[bytes], need_appearances: bool = False) -> None:
        if need_appearances:
            request_appearance_rebuild(self.graph)
        write_graph(self.graph, stream)

    def _field(self, index: int) -> DictionaryObject:
        if not 0 <= index < self.field_count:
            raise IndexError(f"Field index out of range: {index}")
        return field_dictionary(self.graph, self.field_ids[index])
