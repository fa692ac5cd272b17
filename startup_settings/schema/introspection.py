"""Schema introspection for dataclass and pydantic settings types.

A schema is a static, declarative list of `(name, kind)` pairs. This module
derives that list from a settings type's field declarations and annotations.
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from functools import lru_cache
from typing import Any, Final
from uuid import UUID

from pydantic import BaseModel

from startup_settings.domain import FieldKind, FieldSpec, SchemaError

KIND_METADATA_KEY: Final[str] = "kind"
SECRET_METADATA_KEY: Final[str] = "secret"

ANNOTATION_FIELD_KINDS: Final[dict[Any, FieldKind]] = {
    int: FieldKind.INT,
    str: FieldKind.STRING,
    bool: FieldKind.BOOL,
    UUID: FieldKind.GUID,
    float: FieldKind.FLOAT,
    Decimal: FieldKind.DECIMAL,
    date: FieldKind.DATE,
    datetime: FieldKind.DATETIME,
}


def schema_derive_fields(schema_type: type) -> tuple[FieldSpec, ...]:
    """Derive ordered field specifications from a settings schema type.

    Results are memoized per schema type, so repeated calls return the same
    immutable tuple.

    Args:
        schema_type: Dataclass type or pydantic model class declaring settings fields.

    Returns:
        tuple[FieldSpec, ...]: Field specifications in declaration order.

    Raises:
        SchemaError: Raised when the type or one of its fields is unsupported.
    """

    if not isinstance(schema_type, type):
        raise SchemaError(f"{schema_type!r} is not a dataclass type or pydantic model class")
    return _schema_derive_fields_cached(schema_type)


@lru_cache(maxsize=None)
def _schema_derive_fields_cached(schema_type: type) -> tuple[FieldSpec, ...]:
    if dataclasses.is_dataclass(schema_type):
        field_specs = _schema_derive_dataclass_fields(schema_type)
    elif issubclass(schema_type, BaseModel):
        field_specs = _schema_derive_pydantic_fields(schema_type)
    else:
        raise SchemaError(f"{schema_type!r} is not a dataclass type or pydantic model class")

    if not field_specs:
        raise SchemaError(f"{schema_type.__qualname__} declares no settings fields")
    return field_specs


def schema_construct(schema_type: type, values: Mapping[str, object]) -> object:
    """Construct a schema instance in one call from a complete value map.

    Args:
        schema_type: Schema type previously accepted by `schema_derive_fields`.
        values: Coerced values keyed by field name.

    Returns:
        object: Fully populated schema instance.

    Raises:
        SchemaError: Raised when the schema type is unsupported.
    """

    if isinstance(schema_type, type) and issubclass(schema_type, BaseModel):
        return schema_type.model_construct(**values)
    if isinstance(schema_type, type) and dataclasses.is_dataclass(schema_type):
        return schema_type(**values)
    raise SchemaError(f"{schema_type!r} is not a dataclass type or pydantic model class")


def schema_resolve_kind(owner_name: str, field_name: str, annotation: Any, metadata: Mapping[str, Any]) -> FieldKind:
    """Resolve the semantic kind for one declared field.

    Args:
        owner_name: Schema type name used in error messages.
        field_name: Declared field name.
        annotation: Resolved field type annotation.
        metadata: Field metadata that may carry an explicit kind override.

    Returns:
        FieldKind: Resolved semantic kind.

    Raises:
        SchemaError: Raised when neither the override nor the annotation maps to a supported kind.
    """

    override = metadata.get(KIND_METADATA_KEY)
    if override is not None:
        try:
            return FieldKind(override)
        except ValueError as error:
            raise SchemaError(f"{owner_name}.{field_name}: unsupported kind override {override!r}") from error

    try:
        return ANNOTATION_FIELD_KINDS[annotation]
    except (KeyError, TypeError) as error:
        raise SchemaError(f"{owner_name}.{field_name}: unsupported field type {annotation!r}") from error


def _schema_derive_dataclass_fields(schema_type: type) -> tuple[FieldSpec, ...]:
    try:
        type_hints = typing.get_type_hints(schema_type)
    except NameError as error:
        raise SchemaError(f"{schema_type.__qualname__}: cannot resolve field annotations: {error}") from error

    # dataclasses.fields() omits InitVar pseudo-fields, which are still __init__ parameters.
    for hint_name, hint in type_hints.items():
        if isinstance(hint, dataclasses.InitVar) or hint is dataclasses.InitVar:
            raise SchemaError(f"{schema_type.__qualname__}.{hint_name}: InitVar fields are not supported")

    field_specs = []
    for declared_field in dataclasses.fields(schema_type):
        if not declared_field.init:
            raise SchemaError(f"{schema_type.__qualname__}.{declared_field.name}: init=False fields are not supported")
        metadata = declared_field.metadata
        field_specs.append(
            FieldSpec(
                name=declared_field.name,
                kind=schema_resolve_kind(
                    schema_type.__qualname__,
                    declared_field.name,
                    type_hints[declared_field.name],
                    metadata,
                ),
                secret=bool(metadata.get(SECRET_METADATA_KEY, False)),
            )
        )
    return tuple(field_specs)


def _schema_derive_pydantic_fields(schema_type: type[BaseModel]) -> tuple[FieldSpec, ...]:
    field_specs = []
    for field_name, field_info in schema_type.model_fields.items():
        extra = field_info.json_schema_extra if isinstance(field_info.json_schema_extra, dict) else {}
        field_specs.append(
            FieldSpec(
                name=field_name,
                kind=schema_resolve_kind(schema_type.__qualname__, field_name, field_info.annotation, extra),
                secret=bool(extra.get(SECRET_METADATA_KEY, False)),
            )
        )
    return tuple(field_specs)
