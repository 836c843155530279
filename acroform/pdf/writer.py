"""Serialize a form's object graph back to PDF bytes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from pypdf.generic import BooleanObject, NameObject

from acroform.errors import LoadError, PdfWriteError
from acroform.pdf.graph import ObjectGraph, is_dictionary, lookup

logger = logging.getLogger(__name__)


def write_graph(graph: ObjectGraph, output: str | Path | IO[bytes]) -> None:
    """Write the complete graph to a path or an open binary stream."""
    try:
        if isinstance(output, (str, Path)):
            output_path = Path(output)
            with output_path.open("wb") as handle:
                graph.write(handle)
            logger.debug(f"write_graph: Saved {output_path}")
        else:
            graph.write(output)
            logger.debug("write_graph: Saved to stream")
    except Exception as exc:
        raise PdfWriteError(f"Failed to write output PDF: {output}") from exc


def request_appearance_rebuild(graph: ObjectGraph) -> None:
    """Set ``/NeedAppearances`` so viewers regenerate missing appearances."""
    try:
        root_ref = graph.root()
        catalog = graph.dereference(root_ref) if root_ref is not None else None
        acroform = lookup(graph, catalog, "/AcroForm") if is_dictionary(catalog) else None
    except LoadError as exc:
        raise PdfWriteError("Cannot reach /AcroForm to request appearances") from exc
    if not is_dictionary(acroform):
        raise PdfWriteError("Document has no /AcroForm dictionary")
    acroform[NameObject("/NeedAppearances")] = BooleanObject(True)
