"""Raw lookup source implementations for environment, dotenv and in-memory values."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from dotenv import dotenv_values

from .interfaces import RawLookupPort


def lookup_is_blank(raw_value: str | None) -> bool:
    """Return whether a raw value counts as missing.

    Args:
        raw_value: Raw value returned by a lookup source.

    Returns:
        bool: True when the value is absent, empty, or whitespace-only.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return raw_value is None or not raw_value.strip()


class MappingLookupSource(RawLookupPort):
    """Lookup source backed by an in-memory mapping."""

    def __init__(self, values: Mapping[str, str | None], source_name: str = "mapping"):
        """Initialize mapping lookup source.

        Args:
            values: Raw values keyed by setting name. The mapping is copied.
            source_name: Label used in diagnostics.

        Raises:
            ValueError: Raised when values is None.
        """

        if values is None:
            raise ValueError("values must not be None")
        self._values = dict(values)
        self._source_name = source_name

    def lookup_source_name(self) -> str:
        return self._source_name

    def lookup_get(self, name: str) -> str | None:
        return self._values.get(name)


class EnvironmentLookupSource(RawLookupPort):
    """Lookup source backed by a snapshot of process environment variables.

    Environment variable names are the field name with `prefix` prepended.
    When `case_sensitive` is false, an exact-case match wins; otherwise names
    are matched through an upper-cased index built once at construction.
    Colliding names resolve to the lexicographically first original name.
    """

    def __init__(
        self,
        prefix: str = "",
        case_sensitive: bool = False,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize environment lookup source.

        Args:
            prefix: Prefix prepended to each field name.
            case_sensitive: Whether variable names are matched exactly.
            environ: Optional environment mapping; defaults to `os.environ`.

        Raises:
            ValueError: Raised when prefix is None.
        """

        if prefix is None:
            raise ValueError("prefix must not be None")
        self._prefix = prefix
        self._case_sensitive = case_sensitive
        self._environ = dict(os.environ if environ is None else environ)
        self._upper_index: dict[str, str] = {}
        for candidate_name in sorted(self._environ):
            self._upper_index.setdefault(candidate_name.upper(), self._environ[candidate_name])

    def lookup_source_name(self) -> str:
        return f"environment(prefix={self._prefix!r})"

    def lookup_get(self, name: str) -> str | None:
        variable_name = f"{self._prefix}{name}"
        if self._case_sensitive or variable_name in self._environ:
            return self._environ.get(variable_name)
        return self._upper_index.get(variable_name.upper())


class DotenvLookupSource(RawLookupPort):
    """Lookup source backed by a dotenv file read once at construction."""

    def __init__(self, path: str | Path, prefix: str = "", case_sensitive: bool = False):
        """Initialize dotenv lookup source.

        A missing file yields an empty source.

        Args:
            path: Dotenv file path.
            prefix: Prefix prepended to each field name.
            case_sensitive: Whether variable names are matched exactly.

        Raises:
            OSError: Raised when an existing file cannot be read.
        """

        self._path = Path(path)
        values: dict[str, str] = {}
        if self._path.is_file():
            values = {key: value for key, value in dotenv_values(self._path, encoding="utf-8").items() if value is not None}
        self._delegate = EnvironmentLookupSource(prefix=prefix, case_sensitive=case_sensitive, environ=values)

    def lookup_source_name(self) -> str:
        return f"dotenv({self._path})"

    def lookup_get(self, name: str) -> str | None:
        return self._delegate.lookup_get(name)


class ChainedLookupSource(RawLookupPort):
    """Lookup source returning the first non-blank value across ordered sources."""

    def __init__(self, sources: Sequence[RawLookupPort]):
        """Initialize chained lookup source.

        Args:
            sources: Lookup sources in priority order.

        Raises:
            ValueError: Raised when sources is empty.
        """

        if not sources:
            raise ValueError("sources must not be empty")
        self._sources = tuple(sources)

    def lookup_source_name(self) -> str:
        return " -> ".join(source.lookup_source_name() for source in self._sources)

    def lookup_get(self, name: str) -> str | None:
        last_value: str | None = None
        for source in self._sources:
            raw_value = source.lookup_get(name)
            if not lookup_is_blank(raw_value):
                return raw_value
            if raw_value is not None:
                last_value = raw_value
        return last_value
