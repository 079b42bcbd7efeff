"""
Render payload builder.

Functional Core - pure business logic.
"""

from __future__ import annotations

from typing import Any

from panelkit.components.validator.models import ContentViolation
from panelkit.domain.entities import ContentDocument


def document_to_payload(document: ContentDocument) -> dict[str, Any]:
    """Plain dict of a document, in display order, for an external renderer."""
    default = document.default_panel
    return {
        "source": document.source,
        "default_panel": default.name if default else None,
        "panels": [
            {
                "name": p.name,
                "slug": p.slug,
                "checked": p.checked,
                "content": p.content,
            }
            for p in document.panels
        ],
        "steps": [
            {
                "name": s.name,
                "slug": s.slug,
                "color": s.color,
                "content": s.content,
            }
            for s in document.steps
        ],
    }


def format_violation(violation: ContentViolation) -> str:
    return f"[{violation.code}] {violation.message}"
