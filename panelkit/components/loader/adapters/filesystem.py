"""
File system adapter for the loader component.
"""

from __future__ import annotations

from pathlib import Path


class LocalDocumentReader:
    """Reads content documents from the local file system."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read_text(self, path: Path) -> str:
        with open(path, encoding=self._encoding) as f:
            return f.read()

    def exists(self, path: Path) -> bool:
        return path.is_file()


default_reader = LocalDocumentReader()
