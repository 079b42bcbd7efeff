"""
Content validation checks.

Functional Core - pure inspection, inputs are never modified.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence

from panelkit.domain.entities import CollectionName, Panel, Step

from .models import (
    ContentViolation,
    DuplicateNameError,
    MultipleDefaultsError,
    UnknownColorError,
)


def find_duplicate_names(
    collection: CollectionName,
    names: Iterable[str],
) -> list[DuplicateNameError]:
    """One violation per repeated name, in order of its first repeat."""
    seen: set[str] = set()
    reported: set[str] = set()
    errors: list[DuplicateNameError] = []

    for name in names:
        if name in seen and name not in reported:
            errors.append(DuplicateNameError(collection=collection, name=name))
            reported.add(name)
        seen.add(name)

    return errors


def find_multiple_defaults(panels: Sequence[Panel]) -> list[MultipleDefaultsError]:
    checked = tuple(p.name for p in panels if p.checked)
    if len(checked) > 1:
        return [MultipleDefaultsError(panel_names=checked)]
    return []


def find_unknown_colors(
    steps: Sequence[Step],
    allowed: Collection[str],
) -> list[UnknownColorError]:
    return [
        UnknownColorError(step_name=s.name, color=s.color)
        for s in steps
        if s.color not in allowed
    ]


def validate_content(
    panels: Sequence[Panel],
    steps: Sequence[Step],
    allowed_colors: Collection[str],
) -> list[ContentViolation]:
    """Run every check and collect all violations."""
    violations: list[ContentViolation] = []
    violations.extend(find_duplicate_names("panels", (p.name for p in panels)))
    violations.extend(find_duplicate_names("steps", (s.name for s in steps)))
    violations.extend(find_multiple_defaults(panels))
    violations.extend(find_unknown_colors(steps, allowed_colors))
    return violations
