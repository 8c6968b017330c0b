"""
Shared test fixtures and configuration.
"""

import pytest

from guess_scoring.utils.config_loader import CONFIG_ENV_VAR, Config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the repository default config."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def race_top3():
    """Actual podium and a guess with the first two swapped."""
    actual = ["VER", "NOR", "LEC"]
    guess = ["NOR", "VER", "LEC"]
    return actual, guess


@pytest.fixture
def full_race_order():
    """14 scored race positions."""
    return [1, 4, 16, 81, 44, 63, 12, 14, 23, 55, 10, 31, 27, 22]


@pytest.fixture
def full_qualifying_order():
    """12 scored qualifying positions."""
    return ["VER", "NOR", "LEC", "PIA", "HAM", "RUS", "ANT", "ALO", "ALB", "SAI", "GAS", "HUL"]


@pytest.fixture
def live_guesses():
    """Guessed podium as sent by the live timing page."""
    return [
        {"pilot_id": 4, "code": "NOR", "family_name": "Norris", "pilot_name": "Lando Norris"},
        {"pilot_id": 81, "code": "PIA", "family_name": "Piastri", "pilot_name": "Oscar Piastri"},
        {"pilot_id": 1, "code": "VER", "family_name": "Verstappen", "pilot_name": "Max Verstappen"},
    ]


@pytest.fixture
def write_config(tmp_path, monkeypatch):
    """Write a YAML config and point the loader at it."""

    def _write(text: str):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        Config._instance = None
        return path

    return _write
