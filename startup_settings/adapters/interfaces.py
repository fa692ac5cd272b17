"""Typed interfaces for raw settings lookup sources."""

from typing import Protocol


class RawLookupPort(Protocol):
    """Port definition for string-keyed raw settings sources."""

    def lookup_source_name(self) -> str:
        """Return source identifier for diagnostics.

        Returns:
            str: Human-readable source identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def lookup_get(self, name: str) -> str | None:
        """Return the raw value for one setting name.

        Args:
            name: Settings field name.

        Returns:
            str | None: Raw string value, or None when the source has no entry.

        Raises:
            RuntimeError: Raised when the source cannot be read.
        """
