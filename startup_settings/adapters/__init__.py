"""Adapters package for raw settings lookup sources."""

from .interfaces import RawLookupPort
from .lookup_sources import (
    ChainedLookupSource,
    DotenvLookupSource,
    EnvironmentLookupSource,
    MappingLookupSource,
    lookup_is_blank,
)

__all__ = [
    "ChainedLookupSource",
    "DotenvLookupSource",
    "EnvironmentLookupSource",
    "MappingLookupSource",
    "RawLookupPort",
    "lookup_is_blank",
]
