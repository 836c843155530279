"""Discover the input fields of a document's AcroForm hierarchy."""

from __future__ import annotations

from collections import deque
import logging
from typing import Any

from pypdf.generic import DictionaryObject, IndirectObject

from acroform.errors import DictionaryKeyNotFoundError, UnexpectedTypeError
from acroform.pdf.graph import ObjectGraph, is_array, is_dictionary, lookup

logger = logging.getLogger(__name__)


def discover_fields(graph: ObjectGraph) -> list[IndirectObject]:
    """Return references to every field that accepts input, breadth first.

    A node with ``/FT`` is recorded; a node with ``/Kids`` has its kids
    queued. Radio groups carry both. Any structural problem aborts the
    whole walk.
    """
    root_ref = graph.root()
    if root_ref is None:
        raise DictionaryKeyNotFoundError("/Root")
    catalog = graph.dereference(root_ref)
    if not is_dictionary(catalog):
        raise UnexpectedTypeError("Document catalog is not a dictionary")

    acroform = _require(graph, catalog, "/AcroForm")
    if not is_dictionary(acroform):
        raise UnexpectedTypeError("/AcroForm is not a dictionary")

    top_level = _require(graph, acroform, "/Fields")
    if not is_array(top_level):
        raise UnexpectedTypeError("/Fields is not an array")

    field_ids: list[IndirectObject] = []
    seen: set[tuple[int, int]] = set()
    queue: deque[Any] = deque(top_level)

    while queue:
        field_ref = queue.popleft()
        node = graph.dereference(field_ref)
        if not is_dictionary(node):
            raise UnexpectedTypeError(
                f"Field node {field_ref.idnum} {field_ref.generation} R is not a dictionary"
            )

        key = (field_ref.idnum, field_ref.generation)
        if key in seen:
            continue
        seen.add(key)

        if "/FT" in node:
            field_ids.append(field_ref)
        if "/Kids" in node:
            kids = lookup(graph, node, "/Kids")
            if kids is None:
                continue
            if not is_array(kids):
                raise UnexpectedTypeError(
                    f"/Kids of {field_ref.idnum} {field_ref.generation} R is not an array"
                )
            queue.extend(kids)

    logger.debug(f"discover_fields: Found {len(field_ids)} input field(s)")
    return field_ids


def _require(graph: ObjectGraph, dictionary: DictionaryObject, key: str) -> Any:
    value = lookup(graph, dictionary, key)
    if value is None:
        raise DictionaryKeyNotFoundError(key)
    return value
