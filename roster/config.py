"""Configuration loading for the Roster query system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to query defaults and output options
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Query defaults, used when a command omits an argument
    default_house: str = Field(
        default="Stark",
        description="House queried when a command does not name one",
    )
    name_prefix: str = Field(
        default="S",
        description="Default name prefix for the starting-with query",
    )
    salary_ceiling: float = Field(
        default=80_000.0,
        description="Default threshold for the earning-less-than query",
    )
    salary_floor: float = Field(
        default=100_000.0,
        description="Default threshold for the all-earn-more-than query",
    )
    sample_size: int = Field(
        default=3,
        description="Default number of members returned by the sample query",
    )
    name_separator: str = Field(
        default=", ",
        description="Separator used when joining member names",
    )

    # Output configuration
    output_format: Literal["json", "text"] = Field(
        default="json",
        description="Format of command results",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("default_house")
    @classmethod
    def validate_default_house(cls, v: str) -> str:
        """Ensure the default house is named."""
        if not v.strip():
            raise ValueError("default_house must be a non-empty string")
        return v

    @field_validator("salary_ceiling", "salary_floor")
    @classmethod
    def validate_salary_threshold(cls, v: float) -> float:
        """Ensure salary thresholds are non-negative."""
        if v < 0:
            raise ValueError("salary thresholds must be non-negative")
        return v

    @field_validator("sample_size")
    @classmethod
    def validate_sample_size(cls, v: int) -> int:
        """Ensure sample size is non-negative."""
        if v < 0:
            raise ValueError("sample_size must be non-negative")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
