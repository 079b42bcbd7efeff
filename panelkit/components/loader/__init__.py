"""
Loader component - Read panel and step records from TOML or YAML.
"""

from ._impl import build_document, build_record, format_for_path, parse_text
from .component import run_load, run_load_mapping, run_load_text
from .models import DocumentFormat, LoadContentInput, LoadTextInput, MalformedInputError
from .ports import DocumentReaderPort

__all__ = [
    # Entry points
    "run_load",
    "run_load_text",
    "run_load_mapping",
    # Input models
    "LoadContentInput",
    "LoadTextInput",
    "DocumentFormat",
    # Errors
    "MalformedInputError",
    # Ports
    "DocumentReaderPort",
    # Functional core
    "build_document",
    "build_record",
    "format_for_path",
    "parse_text",
]
