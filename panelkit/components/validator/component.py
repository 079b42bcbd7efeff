"""
Validator component - Structural checks over loaded panels and steps.

Findings are collected rather than raised, so a caller sees every
violation from one pass. Whether they block publishing is the caller's call.
"""

from __future__ import annotations

from panelkit.rules.models import Rules

from ._impl import validate_content
from .models import ValidateContentInput, ValidateContentOutput


def run_validate(
    inp: ValidateContentInput,
    *,
    rules: Rules | None = None,
) -> ValidateContentOutput:
    """
    Validate panels and steps.

    Checks run in order: duplicate names (panels, then steps), more than
    one checked panel, step colors outside the configured set.

    Args:
        inp: Panels and steps as produced by the loader.
        rules: Rules supplying the allowed step colors. Defaults if None.

    Returns:
        ValidateContentOutput with all violations (empty if valid).
    """
    if rules is None:
        rules = Rules()

    violations = validate_content(inp.panels, inp.steps, rules.step_colors)
    return ValidateContentOutput(violations=tuple(violations))
