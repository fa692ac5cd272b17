"""Fail-fast validation of typed application settings from key-value sources."""

from startup_settings.adapters import (
    ChainedLookupSource,
    DotenvLookupSource,
    EnvironmentLookupSource,
    MappingLookupSource,
    RawLookupPort,
)
from startup_settings.bootstrap import bootstrap_load_settings
from startup_settings.domain import (
    FieldKind,
    FieldSpec,
    InvalidSettingsError,
    MissingSettingsError,
    SchemaError,
    SettingsValidationError,
    ValidatedSettings,
)
from startup_settings.schema import schema_derive_fields
from startup_settings.validation import validation_build_settings, validation_load_settings

__all__ = [
    "ChainedLookupSource",
    "DotenvLookupSource",
    "EnvironmentLookupSource",
    "FieldKind",
    "FieldSpec",
    "InvalidSettingsError",
    "MappingLookupSource",
    "MissingSettingsError",
    "RawLookupPort",
    "SchemaError",
    "SettingsValidationError",
    "ValidatedSettings",
    "bootstrap_load_settings",
    "schema_derive_fields",
    "validation_build_settings",
    "validation_load_settings",
]
