"""
Validator component - Data models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from panelkit.domain.entities import CollectionName, Panel, Step

# --- Violations ---


@dataclass(frozen=True)
class DuplicateNameError:
    """Two or more records in one collection share a name."""

    code: ClassVar[str] = "duplicate_name"

    collection: CollectionName
    name: str

    @property
    def message(self) -> str:
        return f"Duplicate name '{self.name}' in {self.collection}"


@dataclass(frozen=True)
class MultipleDefaultsError:
    """More than one panel is marked checked."""

    code: ClassVar[str] = "multiple_defaults"

    panel_names: tuple[str, ...]

    @property
    def message(self) -> str:
        names = ", ".join(f"'{n}'" for n in self.panel_names)
        return f"At most one panel may be checked, found {len(self.panel_names)}: {names}"


@dataclass(frozen=True)
class UnknownColorError:
    """A step uses a color outside the configured set."""

    code: ClassVar[str] = "unknown_color"

    step_name: str
    color: str

    @property
    def message(self) -> str:
        return f"Step '{self.step_name}' uses unknown color '{self.color}'"


ContentViolation = DuplicateNameError | MultipleDefaultsError | UnknownColorError


# --- Input Models ---


@dataclass(frozen=True)
class ValidateContentInput:
    """Input for validating loaded panels and steps."""

    panels: Sequence[Panel]
    steps: Sequence[Step]


# --- Output Models ---


@dataclass(frozen=True)
class ValidateContentOutput:
    """Output from validation. Violations are listed in check order."""

    violations: tuple[ContentViolation, ...]

    @property
    def is_valid(self) -> bool:
        return not self.violations
