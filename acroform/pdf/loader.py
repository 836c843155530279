"""PDF loading helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from pypdf import PdfReader, PdfWriter

from acroform.errors import DocumentIoError
from acroform.pdf.graph import PdfObjectGraph

logger = logging.getLogger(__name__)


def open_graph(source: str | Path | IO[bytes]) -> PdfObjectGraph:
    """Parse ``source`` into a mutable object graph."""
    if isinstance(source, (str, Path)):
        source_path = Path(source)
        if not source_path.exists():
            raise DocumentIoError(f"File not found: {source_path}")
        label = str(source_path)
    else:
        label = "<stream>"

    try:
        reader = PdfReader(source)
        writer = PdfWriter(clone_from=reader)
    except Exception as exc:
        raise DocumentIoError(f"Failed to open PDF: {label}") from exc

    logger.debug(f"open_graph: Loaded {label}")
    return PdfObjectGraph(writer)
