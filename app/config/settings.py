"""Typed runtime settings with dotenv support and startup validation."""

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PUBLIC_DIRECTORY = Path(__file__).resolve().parent.parent / "public"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings read once at process start.

    Environment variable names map directly to field names in uppercase.
    Example: `port` reads from `PORT`, `environment` reads from `ENVIRONMENT`.
    Instances are frozen after validation.

    Attributes:
        environment: Runtime environment label echoed by `/api/info`.
        host: Host interface for web server binding.
        port: Web server port.
        application_name: Human-readable application name.
        application_version: Application release version.
        public_directory: Directory holding static assets and the landing page.
        log_level: Standard logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    environment: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)
    application_name: str = Field(default="LenDen DevSecOps Demo", min_length=1)
    application_version: str = Field(default="1.0.0", min_length=1)
    public_directory: Path = Field(default=DEFAULT_PUBLIC_DIRECTORY)
    log_level: str = Field(default="INFO")

    @field_validator("environment", "application_name", "application_version")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return normalized_value


def config_load_settings(**overrides: object) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        overrides: Field values that take precedence over environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings(**overrides)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
