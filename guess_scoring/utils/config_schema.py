"""Pydantic schemas for configuration validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CalculatorConfig(BaseModel):
    """Rules applied by the calculation boundary."""

    require_equal_length: bool = True
    max_entries: int = Field(ge=1, le=30, default=22)


class LiveTimingConfig(BaseModel):
    """Live timing scoring parameters."""

    placeholder_id_base: int = Field(ge=1000, default=999999)


class LoggingConfig(BaseModel):
    """Logging setup used by scripts."""

    level: str = Field(default="INFO")
    format: str = Field(default="%(levelname)s: %(message)s", min_length=1)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown logging level: {v}")
        return level


class ScoringAppConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="allow")

    calculator: CalculatorConfig = Field(default_factory=CalculatorConfig)
    live_timing: LiveTimingConfig = Field(default_factory=LiveTimingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(config_dict: dict | None) -> ScoringAppConfig:
    """
    Validate configuration dictionary against schema.

    Args:
        config_dict: Raw configuration dictionary from YAML (None for an empty file)

    Returns:
        Validated configuration object

    Raises:
        ValidationError: If configuration is invalid
    """
    return ScoringAppConfig(**(config_dict or {}))
