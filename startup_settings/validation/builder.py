"""Two-pass settings validation and one-shot settings construction."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from startup_settings.adapters import RawLookupPort, lookup_is_blank
from startup_settings.domain import (
    FieldSpec,
    InvalidSettingsError,
    MissingSettingsError,
    ValidatedSettings,
)
from startup_settings.schema import schema_construct, schema_derive_fields

from .coercion import CoercionFailure, coerce_raw_value

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT")

SECRET_MASK = "********"


def validation_build_settings(fields: Sequence[FieldSpec], lookup: RawLookupPort) -> ValidatedSettings:
    """Validate raw lookup values against field specifications and build settings.

    Pass 1 checks presence for every field and raises before any coercion when
    something is missing. Pass 2 coerces every field, accumulating all
    failures before raising. Construction happens only after both passes
    succeed.

    Args:
        fields: Field specifications in schema declaration order.
        lookup: Raw settings source.

    Returns:
        ValidatedSettings: Immutable mapping with one typed value per field.

    Raises:
        MissingSettingsError: Raised when one or more fields are absent or blank.
        InvalidSettingsError: Raised when one or more present fields fail coercion.
        SchemaError: Raised when a field kind has no registered coercer.
    """

    raw_values: dict[str, str] = {}
    missing_fields: list[str] = []
    for field_spec in fields:
        raw_value = lookup.lookup_get(field_spec.name)
        if lookup_is_blank(raw_value):
            missing_fields.append(field_spec.name)
            continue
        raw_values[field_spec.name] = raw_value

    if missing_fields:
        logger.warning("Settings presence check failed; missing=%s", ", ".join(missing_fields))
        raise MissingSettingsError(fields=missing_fields)
    logger.debug("Settings presence check passed for %d fields", len(raw_values))

    typed_values: dict[str, object] = {}
    invalid_reasons: dict[str, str] = {}
    for field_spec in fields:
        coercion_result = coerce_raw_value(field_spec.kind, raw_values[field_spec.name])
        if isinstance(coercion_result, CoercionFailure):
            invalid_reasons[field_spec.name] = coercion_result.reason
            continue
        typed_values[field_spec.name] = coercion_result.value

    if invalid_reasons:
        invalid_fields = [field_spec.name for field_spec in fields if field_spec.name in invalid_reasons]
        logger.warning("Settings coercion check failed; invalid=%s", ", ".join(invalid_fields))
        raise InvalidSettingsError(fields=invalid_fields, reasons=invalid_reasons)
    logger.debug("Settings coercion check passed for %d fields", len(typed_values))

    return ValidatedSettings(typed_values)


def validation_load_settings(schema_type: type[SchemaT], lookup: RawLookupPort) -> SchemaT:
    """Derive schema fields, validate lookup values, and construct the schema instance.

    Args:
        schema_type: Dataclass type or pydantic model class declaring settings fields.
        lookup: Raw settings source.

    Returns:
        SchemaT: Fully populated, validated schema instance.

    Raises:
        SchemaError: Raised when the schema declaration is unsupported.
        MissingSettingsError: Raised when one or more fields are absent or blank.
        InvalidSettingsError: Raised when one or more present fields fail coercion.
    """

    fields = schema_derive_fields(schema_type)
    validated_settings = validation_build_settings(fields, lookup)
    return schema_construct(schema_type, validated_settings)


def validation_describe_settings(
    fields: Sequence[FieldSpec],
    settings: ValidatedSettings,
) -> list[dict[str, str]]:
    """Render validated settings for operator output with secrets masked.

    Args:
        fields: Field specifications in schema declaration order.
        settings: Validated settings mapping.

    Returns:
        list[dict[str, str]]: One row per field with `name`, `kind` and display `value`.

    Raises:
        KeyError: Raised when settings does not contain a declared field.
    """

    return [
        {
            "name": field_spec.name,
            "kind": field_spec.kind.value,
            "value": SECRET_MASK if field_spec.secret else str(settings[field_spec.name]),
        }
        for field_spec in fields
    ]
