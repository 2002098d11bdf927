"""Configuration management for the Datadog API client."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError


DEFAULT_HOST = "https://api.datadoghq.com"
EU_HOST = "https://api.datadoghq.eu"


class DatadogConfig(BaseModel):
    """Configuration for a Datadog API client.

    Instances are frozen: a configuration is built once and shared by every
    request made through a client.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(
        default=DEFAULT_HOST,
        description="Datadog API host, e.g. https://api.datadoghq.eu for the EU site"
    )
    api_key: str = Field(..., description="Datadog API key", min_length=1)
    application_key: str = Field(..., description="Datadog application key", min_length=1)

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate the API host URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Host must be a valid HTTP/HTTPS URL")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(sorted(valid_levels))}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = {"json", "text"}
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(sorted(valid_formats))}")
        return v_lower

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "DatadogConfig":
        """Create configuration from environment variables.

        Reads ``DATADOG_HOST`` (optional), ``DD_API_KEY`` and ``DD_APP_KEY``
        (both required), plus ``DATADOG_LOG_LEVEL`` and ``DATADOG_LOG_FORMAT``.
        Values from a ``.env`` file are used when the variable is not already
        set in the process environment.

        Args:
            env_file: Optional path to a dotenv file

        Returns:
            DatadogConfig instance

        Raises:
            ConfigurationError: If a credential is missing or a value is invalid
        """
        load_dotenv(env_file)

        api_key = os.getenv("DD_API_KEY")
        if not api_key:
            raise ConfigurationError(
                "Environment variable DD_API_KEY is required",
                config_key="DD_API_KEY"
            )

        application_key = os.getenv("DD_APP_KEY")
        if not application_key:
            raise ConfigurationError(
                "Environment variable DD_APP_KEY is required",
                config_key="DD_APP_KEY"
            )

        try:
            return cls(
                host=os.getenv("DATADOG_HOST") or DEFAULT_HOST,
                api_key=api_key,
                application_key=application_key,
                log_level=os.getenv("DATADOG_LOG_LEVEL", "INFO"),
                log_format=os.getenv("DATADOG_LOG_FORMAT", "json"),
            )
        except ValidationError as e:
            field = ".".join(str(x) for x in e.errors()[0]["loc"])
            raise ConfigurationError(
                f"Invalid configuration: {e.errors()[0]['msg']}",
                config_key=field
            ) from e
