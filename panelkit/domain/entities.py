import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

# --- Enums / Literals ---
CollectionName = Literal["panels", "steps"]

DEFAULT_STEP_COLORS: tuple[str, ...] = ("blue", "purple", "red", "green", "yellow", "orange")

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lower-case anchor form of a display name ("Dynamic Params" -> "dynamic-params")."""
    return _SLUG_SEPARATORS.sub("-", name.lower()).strip("-")


class _Record(BaseModel):
    # Records are immutable snapshots of the source document.
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    name: str
    content: str

    @field_validator("name", "content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def slug(self) -> str:
        return slugify(self.name)


# --- Panels & Steps ---

class Panel(_Record):
    """One tab in a tabbed content area."""

    checked: bool = False


class Step(_Record):
    """One stage of a "how it works" walkthrough, tagged with a color."""

    color: str


# --- Document ---

class ContentDocument(BaseModel):
    """Render-ready snapshot of a loaded content document."""

    model_config = ConfigDict(frozen=True)

    panels: tuple[Panel, ...] = ()
    steps: tuple[Step, ...] = ()
    source: str | None = None

    @property
    def default_panel(self) -> Panel | None:
        """Checked panel, else the first one. None when there are no panels."""
        for panel in self.panels:
            if panel.checked:
                return panel
        return self.panels[0] if self.panels else None

    def panel_names(self) -> list[str]:
        return [p.name for p in self.panels]

    def step_names(self) -> list[str]:
        return [s.name for s in self.steps]
