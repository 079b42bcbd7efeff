"""
Content document parsing - turns raw TOML/YAML into panels and steps.

Functional Core - pure business logic.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from panelkit.domain.entities import CollectionName, ContentDocument, Panel, Step

from .models import DocumentFormat, MalformedInputError

SUFFIX_FORMATS: dict[str, DocumentFormat] = {
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
}

TOP_LEVEL_KEYS: tuple[CollectionName, ...] = ("panels", "steps")

_RECORD_TYPES: dict[CollectionName, type[Panel] | type[Step]] = {
    "panels": Panel,
    "steps": Step,
}


def format_for_path(path: Path) -> DocumentFormat:
    """Pick the document format from a file suffix."""
    fmt = SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        supported = ", ".join(sorted(SUFFIX_FORMATS))
        raise MalformedInputError(
            f"unsupported file type '{path.suffix}' (expected one of {supported})",
            source=str(path),
        )
    return fmt


def parse_text(text: str, fmt: str, *, source: str | None = None) -> Mapping[str, Any]:
    """Parse a TOML or YAML payload into its top-level mapping."""
    if fmt == "toml":
        try:
            data: Any = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise MalformedInputError(f"invalid TOML: {e}", source=source) from e
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MalformedInputError(f"invalid YAML: {e}", source=source) from e
    else:
        raise MalformedInputError(f"unsupported format '{fmt}'", source=source)

    # An empty YAML document parses to None.
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise MalformedInputError(
            f"top-level value must be a table, got {type(data).__name__}", source=source
        )
    return data


def _describe(error: dict[str, Any]) -> tuple[str | None, str]:
    """Turn the first pydantic error into (field, message)."""
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None
    kind = error.get("type")

    if kind == "missing":
        return field, f"missing required field '{field}'"
    if kind == "extra_forbidden":
        return field, f"unknown field '{field}'"
    if kind == "value_error":
        return field, f"field '{field}' must not be empty"
    return field, f"field '{field}': {error.get('msg', 'invalid value')}"


def build_record(
    collection: CollectionName,
    index: int,
    raw: Any,
    *,
    source: str | None = None,
) -> Panel | Step:
    """Validate one raw record into a Panel or Step."""
    if not isinstance(raw, Mapping):
        raise MalformedInputError(
            f"record must be a table, got {type(raw).__name__}",
            collection=collection,
            index=index,
            source=source,
        )

    model = _RECORD_TYPES[collection]
    try:
        record = model.model_validate(dict(raw))
    except ValidationError as e:
        field, message = _describe(e.errors()[0])
        raise MalformedInputError(
            message,
            collection=collection,
            index=index,
            field=field,
            source=source,
        ) from e
    return record


def _collection(
    data: Mapping[str, Any],
    collection: CollectionName,
    *,
    source: str | None = None,
) -> list[Any]:
    raw = data.get(collection, [])
    if not isinstance(raw, list):
        raise MalformedInputError(
            f"'{collection}' must be a list of tables, got {type(raw).__name__}",
            collection=collection,
            source=source,
        )
    return raw


def build_document(data: Mapping[str, Any], *, source: str | None = None) -> ContentDocument:
    """
    Build a ContentDocument from a parsed mapping.

    All records are checked before anything is returned, so a bad record
    never yields a partial document. Declaration order is kept.
    """
    unknown = [key for key in data if key not in TOP_LEVEL_KEYS]
    if unknown:
        raise MalformedInputError(
            f"unknown top-level key '{unknown[0]}'",
            field=str(unknown[0]),
            source=source,
        )

    panels = tuple(
        build_record("panels", i, raw, source=source)
        for i, raw in enumerate(_collection(data, "panels", source=source))
    )
    steps = tuple(
        build_record("steps", i, raw, source=source)
        for i, raw in enumerate(_collection(data, "steps", source=source))
    )

    return ContentDocument(panels=panels, steps=steps, source=source)
