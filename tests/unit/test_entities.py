from __future__ import annotations

import pytest
from pydantic import ValidationError

from panelkit.domain.entities import ContentDocument, Panel, Step, slugify


def test_records_are_immutable():
    panel = Panel(name="Routing", content="x")
    with pytest.raises(ValidationError):
        panel.name = "Other"


@pytest.mark.parametrize(
    "name, slug",
    [
        ("Routing", "routing"),
        ("Dynamic Params", "dynamic-params"),
        ("Request  Guards!", "request-guards"),
        ("  Launching ", "launching"),
    ],
)
def test_slugify(name, slug):
    assert slugify(name) == slug
    assert Step(name=name, color="blue", content="x").slug == slug


def test_default_panel_is_checked_panel():
    doc = ContentDocument(
        panels=(
            Panel(name="A", content="x"),
            Panel(name="B", checked=True, content="y"),
        )
    )
    assert doc.default_panel is not None
    assert doc.default_panel.name == "B"


def test_default_panel_falls_back_to_first():
    doc = ContentDocument(panels=(Panel(name="A", content="x"), Panel(name="B", content="y")))
    assert doc.default_panel == Panel(name="A", content="x")


def test_default_panel_none_without_panels():
    assert ContentDocument().default_panel is None
