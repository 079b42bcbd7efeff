"""
Pipeline component - Loader followed by validator.
"""

from ._impl import document_to_payload, format_violation
from .component import run
from .models import ContentPipelineOutput

__all__ = [
    "run",
    "ContentPipelineOutput",
    "document_to_payload",
    "format_violation",
]
