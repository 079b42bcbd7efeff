"""
Adapters for the loader component.
"""

from .filesystem import LocalDocumentReader, default_reader

__all__ = [
    "LocalDocumentReader",
    "default_reader",
]
