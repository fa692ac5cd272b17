"""Typed runtime settings for the settings loader itself, with dotenv support."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from startup_settings.domain import RuntimeConfigError

SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RuntimeSettings(BaseSettings):
    """Runtime settings controlling how application settings are sourced.

    Environment variable names are the field name in uppercase with the
    `STARTUP_SETTINGS_` prefix.
    Example: `dotenv_path` reads from `STARTUP_SETTINGS_DOTENV_PATH`.

    Attributes:
        env_prefix: Prefix prepended to application setting names in the environment.
        dotenv_path: Dotenv file used as a fallback source for application settings.
        case_sensitive: Whether environment variable names are matched exactly.
        log_level: Logging level name for host surfaces.
    """

    model_config = SettingsConfigDict(
        env_prefix="STARTUP_SETTINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    env_prefix: str = Field(default="")
    dotenv_path: str = Field(default=".env", min_length=1)
    case_sensitive: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    @field_validator("dotenv_path")
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
        if normalized_value not in SUPPORTED_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(SUPPORTED_LOG_LEVELS)}")
        return normalized_value


def config_load_runtime_settings() -> RuntimeSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        RuntimeSettings: Validated runtime settings object.

    Raises:
        RuntimeConfigError: Raised when runtime settings are invalid.
    """

    try:
        return RuntimeSettings()
    except ValidationError as error:
        raise RuntimeConfigError(
            f"Runtime configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
