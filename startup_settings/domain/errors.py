"""Project-native typed exceptions for schema and settings validation failures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType


class ValidationErrorKind(str, Enum):
    """Operator-facing validation failure categories."""

    MISSING = "missing"
    INVALID = "invalid"


class StartupSettingsError(Exception):
    """Base exception for all startup settings failures."""


class SchemaError(StartupSettingsError, TypeError):
    """Schema declaration is not supported by the coercion engine.

    This signals a programming error in the schema type, never an
    operator-fixable configuration problem.
    """


class RuntimeConfigError(StartupSettingsError, RuntimeError):
    """Raised when the package runtime configuration cannot be loaded or validated."""


class SettingsValidationError(StartupSettingsError, ValueError):
    """Base exception for operator-fixable settings failures.

    Attributes:
        kind: Failure category.
        fields: Offending field names in schema declaration order.
    """

    kind: ValidationErrorKind

    def __init__(self, message: str, fields: Sequence[str]):
        super().__init__(message)
        self.fields: tuple[str, ...] = tuple(fields)


class MissingSettingsError(SettingsValidationError):
    """One or more required settings have no usable (non-blank) raw value."""

    kind = ValidationErrorKind.MISSING

    def __init__(self, fields: Sequence[str]):
        super().__init__(f"Missing required settings: {', '.join(fields)}", fields)


class InvalidSettingsError(SettingsValidationError):
    """All settings are present but one or more failed type coercion.

    Attributes:
        reasons: Per-field coercion failure reasons. Raw values are never included.
    """

    kind = ValidationErrorKind.INVALID

    def __init__(self, fields: Sequence[str], reasons: Mapping[str, str] | None = None):
        resolved_reasons = dict(reasons or {})
        rendered = ", ".join(
            f"{name} ({resolved_reasons[name]})" if name in resolved_reasons else name for name in fields
        )
        super().__init__(f"Invalid settings values: {rendered}", fields)
        self.reasons: Mapping[str, str] = MappingProxyType(resolved_reasons)
