"""Safe raw-string coercion for supported field kinds.

Every parser returns a `CoercionResult` instead of raising, so a parse
failure is never confused with a legitimately parsed falsy value such as `0`.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Final, Union
from uuid import UUID

from startup_settings.domain import FieldKind, SchemaError

INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

BOOL_TRUE_LITERALS: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on"})
BOOL_FALSE_LITERALS: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class CoercionSuccess:
    """Successful coercion outcome.

    Attributes:
        value: Typed value parsed from the raw string.
    """

    value: object


@dataclass(frozen=True)
class CoercionFailure:
    """Failed coercion outcome.

    Attributes:
        reason: Short reason suitable for operators; never echoes the raw value.
    """

    reason: str


CoercionResult = Union[CoercionSuccess, CoercionFailure]


def coerce_int(raw_value: str) -> CoercionResult:
    text = raw_value.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return CoercionFailure(reason="expected a base-10 integer")
    try:
        return CoercionSuccess(value=int(text, 10))
    except ValueError:
        return CoercionFailure(reason="expected a base-10 integer within the interpreter digit limit")


def coerce_string(raw_value: str) -> CoercionResult:
    return CoercionSuccess(value=raw_value)


def coerce_bool(raw_value: str) -> CoercionResult:
    text = raw_value.strip().lower()
    if text in BOOL_TRUE_LITERALS:
        return CoercionSuccess(value=True)
    if text in BOOL_FALSE_LITERALS:
        return CoercionSuccess(value=False)
    return CoercionFailure(reason="expected a boolean (true/false, yes/no, on/off, 1/0)")


def coerce_guid(raw_value: str) -> CoercionResult:
    try:
        return CoercionSuccess(value=UUID(raw_value.strip()))
    except ValueError:
        return CoercionFailure(reason="expected a GUID")


def coerce_float(raw_value: str) -> CoercionResult:
    try:
        parsed_value = float(raw_value.strip())
    except ValueError:
        return CoercionFailure(reason="expected a number")
    if not math.isfinite(parsed_value):
        return CoercionFailure(reason="expected a finite number")
    return CoercionSuccess(value=parsed_value)


def coerce_decimal(raw_value: str) -> CoercionResult:
    try:
        parsed_value = Decimal(raw_value.strip())
    except InvalidOperation:
        return CoercionFailure(reason="expected a decimal number")
    if not parsed_value.is_finite():
        return CoercionFailure(reason="expected a finite decimal number")
    return CoercionSuccess(value=parsed_value)


def coerce_date(raw_value: str) -> CoercionResult:
    try:
        return CoercionSuccess(value=date.fromisoformat(raw_value.strip()))
    except ValueError:
        return CoercionFailure(reason="expected an ISO 8601 date (YYYY-MM-DD)")


def coerce_datetime(raw_value: str) -> CoercionResult:
    try:
        return CoercionSuccess(value=datetime.fromisoformat(raw_value.strip()))
    except ValueError:
        return CoercionFailure(reason="expected an ISO 8601 datetime")


FIELD_KIND_COERCERS: Final[dict[FieldKind, Callable[[str], CoercionResult]]] = {
    FieldKind.INT: coerce_int,
    FieldKind.STRING: coerce_string,
    FieldKind.BOOL: coerce_bool,
    FieldKind.GUID: coerce_guid,
    FieldKind.FLOAT: coerce_float,
    FieldKind.DECIMAL: coerce_decimal,
    FieldKind.DATE: coerce_date,
    FieldKind.DATETIME: coerce_datetime,
}


def coerce_raw_value(kind: FieldKind, raw_value: str) -> CoercionResult:
    """Coerce one raw string to the declared field kind without raising.

    Args:
        kind: Declared semantic kind.
        raw_value: Non-blank raw string from the lookup source.

    Returns:
        CoercionResult: Success with the typed value, or failure with a reason.

    Raises:
        SchemaError: Raised when no coercer is registered for the kind.
    """

    coercer = FIELD_KIND_COERCERS.get(kind)
    if coercer is None:
        raise SchemaError(f"no coercer registered for field kind {kind!r}")
    return coercer(raw_value)
