"""Diagnostics payload helpers for settings validation failures."""

from __future__ import annotations

from typing import Final

from startup_settings.domain import (
    InvalidSettingsError,
    SettingsValidationError,
    ValidationErrorKind,
)

MISSING_SETTINGS_CODE: Final[str] = "MISSING_SETTINGS"
INVALID_SETTINGS_CODE: Final[str] = "INVALID_SETTINGS"

VALIDATION_ERROR_CODES: Final[dict[ValidationErrorKind, str]] = {
    ValidationErrorKind.MISSING: MISSING_SETTINGS_CODE,
    ValidationErrorKind.INVALID: INVALID_SETTINGS_CODE,
}


# FSN[2026-10-19]: ALWAYS emit diagnostics as a JSON array of objects.
# Context: CLI json output and the settings health router share this payload.
# Guard: builder returns list[dict] with field names only, never raw values.
# Test: test_validation_diagnostics_invalid_payload_carries_reasons
def validation_build_diagnostics(error: SettingsValidationError) -> list[dict[str, object]]:
    """Build deterministic diagnostics array for a settings validation failure.

    Args:
        error: Missing or invalid settings error.

    Returns:
        list[dict[str, object]]: JSON-array-compatible diagnostics payload.

    Raises:
        ValueError: Raised when the error carries no field names.
    """

    if not error.fields:
        raise ValueError("error must include offending field names")

    reasons: dict[str, str] = {}
    if isinstance(error, InvalidSettingsError):
        reasons = dict(error.reasons)

    return [
        {
            "stage": "presence" if error.kind is ValidationErrorKind.MISSING else "coercion",
            "status": "failed",
            "error_code": VALIDATION_ERROR_CODES[error.kind],
            "fields": list(error.fields),
            "reasons": reasons,
            "message": str(error),
        }
    ]
