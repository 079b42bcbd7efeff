import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from panelkit.domain.entities import DEFAULT_STEP_COLORS


class ContentRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    step_colors: list[str] = Field(default_factory=lambda: list(DEFAULT_STEP_COLORS), min_length=1)

    @field_validator("step_colors")
    @classmethod
    def _distinct_colors(cls, colors: list[str]) -> list[str]:
        if any(not c.strip() for c in colors):
            raise ValueError("step colors must be non-empty strings")
        if len(set(colors)) != len(colors):
            raise ValueError("step colors must be distinct")
        return colors


class ObservabilityRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, level: str) -> str:
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{level}'")
        return level


class Rules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    schema_version: int = 1
    content: ContentRules = Field(default_factory=ContentRules)
    observability: ObservabilityRules = Field(default_factory=ObservabilityRules)

    @field_validator("schema_version")
    @classmethod
    def _supported_version(cls, version: int) -> int:
        if version != 1:
            raise ValueError(f"unsupported schema_version {version}, expected 1")
        return version

    @property
    def step_colors(self) -> frozenset[str]:
        return frozenset(self.content.step_colors)
