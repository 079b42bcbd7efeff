"""
Loader component - Read content documents into panels and steps.

Shell Layer - handles I/O and logging around the parsing core.

Loading is all-or-nothing: any malformed record raises MalformedInputError
and no document is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from panelkit.domain.entities import ContentDocument

from ._impl import build_document, format_for_path, parse_text
from .adapters import default_reader
from .models import LoadContentInput, LoadTextInput
from .ports import DocumentReaderPort

logger = logging.getLogger(__name__)


def run_load_mapping(data: Mapping[str, Any], *, source: str | None = None) -> ContentDocument:
    """Load an already-parsed document."""
    document = build_document(data, source=source)
    logger.debug(
        "Loaded %d panels and %d steps from %s",
        len(document.panels),
        len(document.steps),
        source or "<mapping>",
    )
    return document


def run_load_text(inp: LoadTextInput) -> ContentDocument:
    """Load a document from a TOML or YAML payload."""
    data = parse_text(inp.text, inp.format, source=inp.source)
    return run_load_mapping(data, source=inp.source)


def run_load(
    inp: LoadContentInput,
    *,
    reader: DocumentReaderPort | None = None,
) -> ContentDocument:
    """
    Load a document from a file.

    Args:
        inp: Input containing the document path.
        reader: Document reader port. Uses the local file system if None.

    Returns:
        ContentDocument with panels and steps in declaration order.

    Raises:
        FileNotFoundError: If the document does not exist.
        MalformedInputError: If the document cannot be parsed or a record is invalid.
    """
    reader = reader or default_reader
    path = Path(inp.path)

    fmt = format_for_path(path)
    if not reader.exists(path):
        raise FileNotFoundError(f"Content document not found: {path}")

    text = reader.read_text(path)
    return run_load_text(LoadTextInput(text=text, format=fmt, source=str(path)))
