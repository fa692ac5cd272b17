"""Domain models and errors used across application layer boundaries."""

from .errors import (
    InvalidSettingsError,
    MissingSettingsError,
    RuntimeConfigError,
    SchemaError,
    SettingsValidationError,
    StartupSettingsError,
    ValidationErrorKind,
)
from .models import FieldKind, FieldSpec, ValidatedSettings

__all__ = [
    "FieldKind",
    "FieldSpec",
    "InvalidSettingsError",
    "MissingSettingsError",
    "RuntimeConfigError",
    "SchemaError",
    "SettingsValidationError",
    "StartupSettingsError",
    "ValidatedSettings",
    "ValidationErrorKind",
]
