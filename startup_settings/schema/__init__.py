"""Schema introspection for declarative settings types."""

from .introspection import (
    KIND_METADATA_KEY,
    SECRET_METADATA_KEY,
    schema_construct,
    schema_derive_fields,
    schema_resolve_kind,
)

__all__ = [
    "KIND_METADATA_KEY",
    "SECRET_METADATA_KEY",
    "schema_construct",
    "schema_derive_fields",
    "schema_resolve_kind",
]
