"""Typed domain models shared across runtime layers.

This module provides the field and settings contracts exchanged between schema
introspection, validation, and host surfaces.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class FieldKind(str, Enum):
    """Semantic value kinds supported by the coercion engine."""

    INT = "int"
    STRING = "string"
    BOOL = "bool"
    GUID = "guid"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATE = "date"
    DATETIME = "datetime"


@dataclass(frozen=True)
class FieldSpec:
    """Declared settings field derived once from a schema type.

    Attributes:
        name: Field name, also used as the lookup key.
        kind: Semantic value kind used for coercion.
        secret: Whether the value must be masked in diagnostics output.
    """

    name: str
    kind: FieldKind
    secret: bool = False


class ValidatedSettings(Mapping[str, object]):
    """Immutable mapping of field name to coerced value.

    Instances are created once from a complete value map and preserve schema
    declaration order.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, object]):
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: str) -> object:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValidatedSettings):
            return dict(self._values) == dict(other._values)
        if isinstance(other, Mapping):
            return dict(self._values) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        return f"ValidatedSettings({dict(self._values)!r})"
