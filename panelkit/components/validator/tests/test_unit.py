"""
Validator component unit tests.
"""

from __future__ import annotations

import pytest

from panelkit.components.loader import run_load_mapping
from panelkit.components.validator import (
    DuplicateNameError,
    MultipleDefaultsError,
    UnknownColorError,
    ValidateContentInput,
    find_duplicate_names,
    run_validate,
)
from panelkit.domain.entities import Panel, Step
from panelkit.rules.models import ContentRules, Rules


def panel(name: str, checked: bool = False) -> Panel:
    return Panel(name=name, checked=checked, content=f"{name} body")


def step(name: str, color: str = "blue") -> Step:
    return Step(name=name, color=color, content=f"{name} body")


@pytest.fixture
def rules() -> Rules:
    return Rules(content=ContentRules(step_colors=["blue", "purple", "red"]))


class TestCleanContent:
    def test_no_violations(self, rules: Rules) -> None:
        """Unique names, one default, known colors."""
        inp = ValidateContentInput(
            panels=[panel("Routing", checked=True), panel("Responders")],
            steps=[step("Validation", "blue"), step("Processing", "purple")],
        )
        result = run_validate(inp, rules=rules)

        assert result.is_valid is True
        assert result.violations == ()

    def test_empty_collections(self) -> None:
        """Nothing to check is valid."""
        assert run_validate(ValidateContentInput(panels=[], steps=[])).is_valid

    def test_input_not_modified(self, rules: Rules) -> None:
        """Validation is a read-only pass."""
        panels = [panel("A", True), panel("A", True)]
        steps = [step("S", "pink")]
        run_validate(ValidateContentInput(panels=panels, steps=steps), rules=rules)

        assert [p.name for p in panels] == ["A", "A"]
        assert steps == [step("S", "pink")]


class TestDuplicateNames:
    def test_duplicate_panel_name(self) -> None:
        """Repeated panel name is reported with its collection."""
        inp = ValidateContentInput(
            panels=[
                Panel(name="A", checked=True, content="x"),
                Panel(name="A", checked=False, content="y"),
            ],
            steps=[],
        )
        result = run_validate(inp)

        assert result.violations == (DuplicateNameError("panels", "A"),)

    def test_duplicate_step_name(self) -> None:
        inp = ValidateContentInput(panels=[], steps=[step("S"), step("T"), step("S")])
        assert run_validate(inp).violations == (DuplicateNameError("steps", "S"),)

    def test_same_name_across_collections_is_fine(self) -> None:
        """Uniqueness is per collection."""
        inp = ValidateContentInput(panels=[panel("Routing")], steps=[step("Routing")])
        assert run_validate(inp).is_valid

    def test_reported_once_per_name(self) -> None:
        """Three copies of a name give one violation."""
        errors = find_duplicate_names("panels", ["A", "B", "A", "A", "B"])
        assert errors == [DuplicateNameError("panels", "A"), DuplicateNameError("panels", "B")]

    def test_names_are_case_sensitive(self) -> None:
        assert find_duplicate_names("steps", ["Response", "response"]) == []


class TestMultipleDefaults:
    def test_two_checked_panels(self) -> None:
        """Exactly one violation and nothing else."""
        inp = ValidateContentInput(
            panels=[panel("A", True), panel("B", True), panel("C")],
            steps=[step("S")],
        )
        result = run_validate(inp)

        assert result.violations == (MultipleDefaultsError(panel_names=("A", "B")),)

    def test_three_checked_panels_still_one_violation(self) -> None:
        inp = ValidateContentInput(
            panels=[panel("A", True), panel("B", True), panel("C", True)], steps=[]
        )
        violations = run_validate(inp).violations

        assert len(violations) == 1
        assert isinstance(violations[0], MultipleDefaultsError)
        assert violations[0].panel_names == ("A", "B", "C")

    def test_no_checked_panel_is_fine(self) -> None:
        inp = ValidateContentInput(panels=[panel("A"), panel("B")], steps=[])
        assert run_validate(inp).is_valid


class TestUnknownColors:
    def test_unknown_color(self, rules: Rules) -> None:
        """One violation naming the offending step."""
        inp = ValidateContentInput(
            panels=[], steps=[step("Validation", "blue"), step("Processing", "green")]
        )
        result = run_validate(inp, rules=rules)

        assert result.violations == (UnknownColorError("Processing", "green"),)

    def test_default_rules_colors(self) -> None:
        """Default rules allow the standard palette."""
        inp = ValidateContentInput(panels=[], steps=[step("A", "green"), step("B", "pink")])
        assert run_validate(inp).violations == (UnknownColorError("B", "pink"),)

    def test_colors_are_exact_match(self, rules: Rules) -> None:
        inp = ValidateContentInput(panels=[], steps=[step("A", "Blue")])
        assert run_validate(inp, rules=rules).violations == (UnknownColorError("A", "Blue"),)

    @pytest.mark.parametrize("color", ["", "  "])
    def test_blank_color_is_unknown(self, rules: Rules, color: str) -> None:
        """A blank color is a finding, not a load failure."""
        doc = run_load_mapping({"steps": [{"name": "S", "color": color, "content": "x"}]})
        inp = ValidateContentInput(panels=doc.panels, steps=doc.steps)

        assert run_validate(inp, rules=rules).violations == (UnknownColorError("S", color),)


class TestOrderingAndMessages:
    def test_all_violations_collected_in_check_order(self, rules: Rules) -> None:
        """Duplicates, then defaults, then colors."""
        inp = ValidateContentInput(
            panels=[panel("A", True), panel("A", True)],
            steps=[step("S", "pink"), step("S", "blue")],
        )
        result = run_validate(inp, rules=rules)

        assert result.violations == (
            DuplicateNameError("panels", "A"),
            DuplicateNameError("steps", "S"),
            MultipleDefaultsError(panel_names=("A", "A")),
            UnknownColorError("S", "pink"),
        )
        assert result.is_valid is False

    def test_codes_and_messages(self) -> None:
        assert DuplicateNameError("panels", "A").code == "duplicate_name"
        assert DuplicateNameError("panels", "A").message == "Duplicate name 'A' in panels"
        assert MultipleDefaultsError(("A", "B")).code == "multiple_defaults"
        assert "'A', 'B'" in MultipleDefaultsError(("A", "B")).message
        assert UnknownColorError("S", "pink").code == "unknown_color"
        assert UnknownColorError("S", "pink").message == "Step 'S' uses unknown color 'pink'"
