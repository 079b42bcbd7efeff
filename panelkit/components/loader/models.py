"""
Loader component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from panelkit.domain.entities import CollectionName

DocumentFormat = Literal["toml", "yaml"]


class MalformedInputError(Exception):
    """Raised when a content document cannot be turned into panels and steps."""

    def __init__(
        self,
        message: str,
        *,
        collection: CollectionName | None = None,
        index: int | None = None,
        field: str | None = None,
        source: str | None = None,
    ) -> None:
        self.collection = collection
        self.index = index
        self.field = field
        self.source = source
        self.reason = message

        location = ""
        if collection is not None:
            location = collection if index is None else f"{collection}[{index}]"
        prefix = ": ".join(p for p in (source, location) if p)
        super().__init__(f"{prefix}: {message}" if prefix else message)


# --- Input Models ---


@dataclass(frozen=True)
class LoadContentInput:
    """Input for loading a content document from a file."""

    path: Path | str


@dataclass(frozen=True)
class LoadTextInput:
    """Input for loading a content document from an in-memory payload."""

    text: str
    format: DocumentFormat = "toml"
    source: str | None = None
