"""Startup wiring for lookup sources and validated settings loading."""

from __future__ import annotations

import logging
from typing import TypeVar

from startup_settings.adapters import (
    ChainedLookupSource,
    DotenvLookupSource,
    EnvironmentLookupSource,
    RawLookupPort,
)
from startup_settings.config import RuntimeSettings, config_load_runtime_settings
from startup_settings.validation import validation_load_settings

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT")


def bootstrap_create_lookup(runtime_settings: RuntimeSettings) -> RawLookupPort:
    """Build the default lookup chain: environment variables, then dotenv file.

    Args:
        runtime_settings: Validated runtime settings.

    Returns:
        RawLookupPort: Chained lookup source with environment taking priority.

    Raises:
        OSError: Raised when an existing dotenv file cannot be read.
    """

    return ChainedLookupSource(
        [
            EnvironmentLookupSource(
                prefix=runtime_settings.env_prefix,
                case_sensitive=runtime_settings.case_sensitive,
            ),
            DotenvLookupSource(
                path=runtime_settings.dotenv_path,
                prefix=runtime_settings.env_prefix,
                case_sensitive=runtime_settings.case_sensitive,
            ),
        ]
    )


def bootstrap_load_settings(
    schema_type: type[SchemaT],
    runtime_settings: RuntimeSettings | None = None,
    lookup: RawLookupPort | None = None,
) -> SchemaT:
    """Load validated application settings for process startup.

    Args:
        schema_type: Dataclass type or pydantic model class declaring settings fields.
        runtime_settings: Optional runtime settings; loaded from environment when omitted.
        lookup: Optional lookup source; built from runtime settings when omitted.

    Returns:
        SchemaT: Fully populated, validated settings instance.

    Raises:
        RuntimeConfigError: Raised when runtime settings cannot be loaded.
        SchemaError: Raised when the schema declaration is unsupported.
        MissingSettingsError: Raised when required settings are absent or blank.
        InvalidSettingsError: Raised when present settings fail coercion.
    """

    if lookup is None:
        resolved_runtime_settings = runtime_settings or config_load_runtime_settings()
        lookup = bootstrap_create_lookup(resolved_runtime_settings)

    settings = validation_load_settings(schema_type, lookup)
    logger.info("Loaded %s settings from %s", schema_type.__qualname__, lookup.lookup_source_name())
    return settings
