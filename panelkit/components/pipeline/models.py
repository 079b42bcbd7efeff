"""
Pipeline component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from panelkit.components.validator.models import ContentViolation
from panelkit.domain.entities import ContentDocument


@dataclass(frozen=True)
class ContentPipelineOutput:
    """Loaded document together with every validation finding."""

    document: ContentDocument
    violations: tuple[ContentViolation, ...]

    @property
    def is_valid(self) -> bool:
        return not self.violations
