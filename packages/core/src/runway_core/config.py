"""Configuration system for Runway.

This module provides Pydantic Settings-based configuration with environment
variable support and the defaults used by the command line.

Usage:
    from runway_core.config import RunwaySettings

    # Load from environment variables and .env file
    settings = RunwaySettings()

    # Command line values take precedence
    settings = RunwaySettings(months=24, tax_rate="0.2")
"""

from decimal import Decimal
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_CASH_EVENTS_FILE_PATH = "data/cash_events.csv"
DEFAULT_MONTHS = 12
DEFAULT_TAX_RATE = Decimal("0.169")


class RunwaySettings(BaseSettings):
    """Settings for one projection run.

    Environment Variables:
        RUNWAY_CASH_EVENTS_FILE_PATH: Path to the cash events CSV
        RUNWAY_MONTHS: Projection horizon in months
        RUNWAY_TAX_RATE: Flat tax rate for taxable events (0.0-1.0)
        RUNWAY_VERBOSE: Echo every parsed event before the report
        RUNWAY_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    model_config = SettingsConfigDict(
        env_prefix="RUNWAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cash_events_file_path: str = Field(
        default=DEFAULT_CASH_EVENTS_FILE_PATH,
        description="Path to the cash events CSV",
    )
    months: int = Field(
        default=DEFAULT_MONTHS,
        ge=0,
        description="Projection horizon in whole calendar months",
    )
    tax_rate: Decimal = Field(
        default=DEFAULT_TAX_RATE,
        ge=Decimal("0"),
        le=Decimal("1"),
        description="Flat tax rate applied to taxable events",
    )
    verbose: bool = Field(
        default=False,
        description="Echo each parsed cash event before the report",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    @field_validator("cash_events_file_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure the path is not empty."""
        if not v or not v.strip():
            raise ValueError("Cash events file path cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper


def load_settings(**overrides: Any) -> RunwaySettings:
    """
    Build settings from the environment, applying non-None overrides.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    values = {k: v for k, v in overrides.items() if v is not None}
    try:
        return RunwaySettings(**values)
    except ValidationError as e:
        error = e.errors()[0]
        key = str(error["loc"][0]) if error.get("loc") else None
        raise ConfigurationError(
            f"Invalid configuration: {key}: {error['msg']}",
            config_key=key,
            actual=error.get("input"),
        ) from e
