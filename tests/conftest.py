from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def overview_toml() -> Path:
    """Sample overview document with three panels and three steps."""
    return FIXTURES_DIR / "overview.toml"


@pytest.fixture
def overview_yaml() -> Path:
    return FIXTURES_DIR / "overview.yaml"


@pytest.fixture(autouse=True)
def no_rules_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PANELKIT_RULES_PATH out of the tests."""
    monkeypatch.delenv("PANELKIT_RULES_PATH", raising=False)
