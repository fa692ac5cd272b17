"""Validation layer package for settings presence, coercion and construction."""

from .builder import (
    SECRET_MASK,
    validation_build_settings,
    validation_describe_settings,
    validation_load_settings,
)
from .coercion import (
    FIELD_KIND_COERCERS,
    CoercionFailure,
    CoercionResult,
    CoercionSuccess,
    coerce_raw_value,
)
from .diagnostics import (
    INVALID_SETTINGS_CODE,
    MISSING_SETTINGS_CODE,
    validation_build_diagnostics,
)

__all__ = [
    "FIELD_KIND_COERCERS",
    "INVALID_SETTINGS_CODE",
    "MISSING_SETTINGS_CODE",
    "SECRET_MASK",
    "CoercionFailure",
    "CoercionResult",
    "CoercionSuccess",
    "coerce_raw_value",
    "validation_build_diagnostics",
    "validation_build_settings",
    "validation_describe_settings",
    "validation_load_settings",
]
