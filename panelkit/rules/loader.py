"""
Rules loader for panelkit.

Reads panelkit_rules.yaml, validates it against the pydantic models and
falls back to built-in defaults when no rules file can be found.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import ValidationError

from panelkit.rules.models import Rules

DEFAULT_RULES_PATH = "panelkit_rules.yaml"
RULES_PATH_ENV = "PANELKIT_RULES_PATH"


class RulesValidationError(Exception):
    """Raised when the rules file fails schema validation."""


class EnvironmentPort(Protocol):
    """Port for environment variable access."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...


class OsEnvironmentAdapter:
    """Adapter for OS environment variables."""

    def get(self, key: str, default: str | None = None) -> str | None:
        return os.environ.get(key, default)


def _find_project_root(start: Path | None = None) -> Path:
    """Find project root by looking for marker files."""
    current = start or Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(
    path: Path | str | None = None,
    *,
    env: EnvironmentPort | None = None,
    start: Path | None = None,
) -> Path | None:
    """
    Work out which rules file to use.

    Explicit path first, then $PANELKIT_RULES_PATH, then panelkit_rules.yaml
    at the project root. Returns None if the project root has no rules file.
    """
    if path is not None:
        return Path(path)

    env = env or OsEnvironmentAdapter()
    env_path = env.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    candidate = _find_project_root(start) / DEFAULT_RULES_PATH
    return candidate if candidate.exists() else None


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises RulesValidationError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RulesValidationError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        data = {}

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise RulesValidationError(f"Rules validation failed:\n{e}") from e


def get_rules(
    path: Path | str | None = None,
    *,
    env: EnvironmentPort | None = None,
) -> Rules:
    """Resolve and load rules, or return the defaults when no file exists."""
    resolved = resolve_rules_path(path, env=env)
    if resolved is None:
        return Rules()
    return load_rules(resolved)
