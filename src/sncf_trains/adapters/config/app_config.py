"""12-factor configuration adapter using environment variables and an optional .env file."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sncf_trains.adapters.sncf_api.constants import SNCF_API_BASE_URL
from sncf_trains.domain.errors import ConfigurationError


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # SNCF API configuration
    sncf_api_key: str = Field(
        min_length=1,
        description="SNCF API key, sent as the basic-auth username with an empty password",
    )
    sncf_api_base_url: str = Field(
        default=SNCF_API_BASE_URL,
        description="Base URL of the SNCF coverage API",
    )
    sncf_api_timeout: int | None = Field(
        default=None,
        description="Total timeout for SNCF API requests in seconds (unset: HTTP client default)",
    )
    journey_count: int = Field(
        default=10,
        ge=1,
        description="Maximum number of journeys requested per search",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("sncf_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended with a single slash."""
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level


def load_config() -> AppConfig:
    """Load configuration once at startup.

    Raises:
        ConfigurationError: If the SNCF API key is missing or a setting is invalid.
    """
    try:
        return AppConfig()  # type: ignore[call-arg]
    except ValidationError as e:
        fields = {str(error["loc"][0]) for error in e.errors() if error["loc"]}
        if "sncf_api_key" in fields:
            raise ConfigurationError("SNCF_API_KEY environment variable is required") from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e
