"""Regression tests for schema introspection of dataclass and pydantic types."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import pytest
from pydantic import BaseModel, ConfigDict, Field

from startup_settings.domain import FieldKind, FieldSpec, SchemaError
from startup_settings.schema import schema_construct, schema_derive_fields


@dataclass(frozen=True)
class _ApiSettings:
    """Schema used by end-to-end scenarios."""

    ApiId: UUID
    HostName: str
    Timeout: int
    SecretKey: str = field(metadata={"secret": True})


@dataclass(frozen=True)
class _AllKindsSettings:
    """Schema declaring every supported annotation."""

    count: int
    name: str
    enabled: bool
    identifier: UUID
    ratio: float
    price: Decimal
    start_date: date
    started_at: datetime


class _PydanticSettings(BaseModel):
    """Pydantic schema with secret metadata."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    token: str = Field(json_schema_extra={"secret": True})


@dataclass(frozen=True)
class _OptionalSettings:
    """Schema with an unsupported optional annotation."""

    port: Optional[int]


@dataclass(frozen=True)
class _ListSettings:
    """Schema with an unsupported container annotation."""

    hosts: list[str]


@dataclass(frozen=True)
class _OverrideSettings:
    """Schema using explicit kind overrides."""

    api_key: str = field(metadata={"kind": FieldKind.GUID})
    retries: str = field(metadata={"kind": "int"})


@dataclass
class _InitFalseSettings:
    """Schema with a non-init field."""

    host: str
    computed: str = field(init=False, default="x")


@dataclass(frozen=True)
class _InitVarSettings:
    """Schema with an InitVar pseudo-field."""

    host: str
    seed: InitVar[int]

    def __post_init__(self, seed: int) -> None:
        _ = seed


@dataclass(frozen=True)
class _EmptySettings:
    """Schema with no fields."""


def test_schema_derive_fields_preserves_declaration_order_and_kinds() -> None:
    """Derive field specs in declaration order with resolved kinds.

    Returns:
        None: Assertions validate derived field specs.

    Raises:
        AssertionError: Raised when order or kinds are incorrect.
    """

    fields = schema_derive_fields(_ApiSettings)

    assert fields == (
        FieldSpec(name="ApiId", kind=FieldKind.GUID),
        FieldSpec(name="HostName", kind=FieldKind.STRING),
        FieldSpec(name="Timeout", kind=FieldKind.INT),
        FieldSpec(name="SecretKey", kind=FieldKind.STRING, secret=True),
    )


def test_schema_derive_fields_maps_every_supported_annotation() -> None:
    """Map every supported annotation to its field kind.

    Returns:
        None: Assertions validate kind mapping.

    Raises:
        AssertionError: Raised when a kind mapping is incorrect.
    """

    kinds = [field_spec.kind for field_spec in schema_derive_fields(_AllKindsSettings)]

    assert kinds == [
        FieldKind.INT,
        FieldKind.STRING,
        FieldKind.BOOL,
        FieldKind.GUID,
        FieldKind.FLOAT,
        FieldKind.DECIMAL,
        FieldKind.DATE,
        FieldKind.DATETIME,
    ]


def test_schema_derive_fields_is_memoized_per_schema_type() -> None:
    """Return the same immutable tuple for repeated calls.

    Returns:
        None: Assertions validate memoization.

    Raises:
        AssertionError: Raised when derivation is repeated.
    """

    first = schema_derive_fields(_ApiSettings)
    second = schema_derive_fields(_ApiSettings)

    assert first is second
    assert isinstance(first, tuple)


def test_schema_derive_fields_supports_pydantic_models() -> None:
    """Derive field specs from pydantic model fields and extra metadata.

    Returns:
        None: Assertions validate pydantic support.

    Raises:
        AssertionError: Raised when pydantic fields are not derived.
    """

    fields = schema_derive_fields(_PydanticSettings)

    assert [field_spec.name for field_spec in fields] == ["host", "port", "token"]
    assert fields[1].kind is FieldKind.INT
    assert fields[2].secret is True


def test_schema_derive_fields_honours_kind_overrides() -> None:
    """Use explicit metadata kind overrides instead of annotations.

    Returns:
        None: Assertions validate override handling.

    Raises:
        AssertionError: Raised when overrides are ignored.
    """

    fields = schema_derive_fields(_OverrideSettings)

    assert fields[0].kind is FieldKind.GUID
    assert fields[1].kind is FieldKind.INT


@pytest.mark.parametrize(
    ("schema_type", "message"),
    [
        (_OptionalSettings, "unsupported field type"),
        (_ListSettings, "unsupported field type"),
        (_InitFalseSettings, "init=False"),
        (_InitVarSettings, "InitVar fields are not supported"),
        ([], "is not a dataclass type or pydantic model class"),
        (_EmptySettings, "declares no settings fields"),
        (dict, "is not a dataclass type or pydantic model class"),
    ],
)
def test_schema_derive_fields_rejects_unsupported_schemas(schema_type: type, message: str) -> None:
    """Raise SchemaError for schema declarations the engine cannot coerce.

    Args:
        schema_type: Unsupported schema type.
        message: Expected error message fragment.

    Returns:
        None: Assertions validate schema rejection.

    Raises:
        AssertionError: Raised when an unsupported schema is accepted.
    """

    with pytest.raises(SchemaError, match=message):
        schema_derive_fields(schema_type)


def test_schema_error_is_not_a_settings_validation_error() -> None:
    """Keep developer-facing schema errors distinct from operator-facing errors.

    Returns:
        None: Assertions validate error type separation.

    Raises:
        AssertionError: Raised when error hierarchies overlap.
    """

    from startup_settings.domain import SettingsValidationError

    assert not issubclass(SchemaError, SettingsValidationError)
    assert issubclass(SchemaError, TypeError)


def test_schema_construct_builds_dataclass_and_pydantic_instances() -> None:
    """Construct schema instances in one call from complete value maps.

    Returns:
        None: Assertions validate one-shot construction.

    Raises:
        AssertionError: Raised when constructed instances are incorrect.
    """

    dataclass_instance = schema_construct(
        _ApiSettings,
        {
            "ApiId": UUID("3fa85f64-5717-4562-b3fc-2c963f66afa6"),
            "HostName": "api.example.com",
            "Timeout": 30,
            "SecretKey": "s3cr3t",
        },
    )
    pydantic_instance = schema_construct(_PydanticSettings, {"host": "localhost", "port": 8080, "token": "t"})

    assert isinstance(dataclass_instance, _ApiSettings)
    assert dataclass_instance.Timeout == 30
    assert isinstance(pydantic_instance, _PydanticSettings)
    assert pydantic_instance.port == 8080
