"""
Configuration loader for guess scoring.

Loads settings from a YAML config file with an environment variable override.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from guess_scoring.utils.config_schema import ScoringAppConfig, validate_config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GUESS_SCORING_CONFIG"
DEFAULT_CONFIG_FILE = "config/default.yaml"


class Config:
    """Central configuration manager."""

    _instance: "Config | None" = None
    _config: dict[str, Any] | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._config is None:
            self._load()

    def _resolve_path(self) -> tuple[Path, bool]:
        """Return the config path and whether it was explicitly requested."""
        config_file = os.getenv(CONFIG_ENV_VAR)
        explicit = config_file is not None
        config_path = Path(config_file or DEFAULT_CONFIG_FILE)

        if not config_path.is_absolute():
            # Try relative to project root
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / config_path

        return config_path, explicit

    def _load(self):
        """Load config from YAML file and validate it."""
        config_path, explicit = self._resolve_path()

        if not config_path.exists():
            if explicit:
                raise FileNotFoundError(f"Config file not found: {config_path}")
            logger.debug(f"No config file at {config_path}, using defaults")
            raw: dict[str, Any] = {}
        else:
            with open(config_path) as f:
                raw = yaml.safe_load(f) or {}
            if not isinstance(raw, dict):
                raise ValueError(f"Config file {config_path} must contain a mapping")
            logger.info(f"Configuration loaded from {config_path}")

        self.settings: ScoringAppConfig = validate_config(raw)
        self._config = self.settings.model_dump()

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value using dot notation, returning default if not found."""
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, section: str) -> dict:
        """Get entire config section."""
        if self._config is None:
            return {}
        value = self._config.get(section, {})
        return value if isinstance(value, dict) else {}

    def reload(self):
        """Force reload config from file."""
        self._config = None
        self._load()


def get_config() -> Config:
    """Return the shared Config, loading it on first use."""
    return Config()


def get(key: str, default: Any = None) -> Any:
    """Get config value."""
    return get_config().get(key, default)


def get_section(section: str) -> dict:
    """Get config section."""
    return get_config().get_section(section)


def reload():
    """Reload config."""
    get_config().reload()
