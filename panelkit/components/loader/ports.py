"""
Loader component - Port interfaces.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class DocumentReaderPort(Protocol):
    """Source of raw content documents."""

    def read_text(self, path: Path) -> str:
        """Return the document text. Raises FileNotFoundError if missing."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if a document exists."""
        ...
