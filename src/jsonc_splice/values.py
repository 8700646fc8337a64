"""Typed value coercion for edited row text.

An editor collects every value as raw text.  ``coerce`` turns that text back
into a typed value according to the row's declared ``ScalarKind``.  It never
raises: numeric text that does not parse comes back as a ``Fallback``
carrying the raw string, so an in-progress edit can always be saved.

Coercion table::

    coerce("42", ScalarKind.NUMBER)     -> Coerced(42)
    coerce("abc", ScalarKind.NUMBER)    -> Fallback("abc")
    coerce("true", ScalarKind.BOOLEAN)  -> Coerced(True)
    coerce("TRUE", ScalarKind.BOOLEAN)  -> Coerced(False)
    coerce("x", ScalarKind.NULL)        -> Coerced(None)
    coerce("x", ScalarKind.STRING)      -> Coerced("x")
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["Coerced", "CoercionResult", "Fallback", "ScalarKind", "coerce", "coerce_value"]

# Decimal literal with optional sign, fraction and exponent ("1.", ".5" allowed)
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Unsigned radix literals: 0x1F, 0o17, 0b101
_RADIX = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

# JavaScript prints integral doubles below this without an exponent
_EXPONENT_THRESHOLD = 1e21


class ScalarKind(StrEnum):
    """Declared kind of a scalar row.

    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


@dataclass(frozen=True, slots=True)
class Coerced:
    """The raw text was converted to a value of the declared kind."""

    value: Any


@dataclass(frozen=True, slots=True)
class Fallback:
    """The raw text could not be converted; the raw string is kept as the value."""

    value: str


CoercionResult = Coerced | Fallback


def _parse_number(raw: str) -> int | float | None:
    text = raw.strip()
    if not text:
        return 0
    if _RADIX.fullmatch(text):
        return int(text, 0)
    if not _DECIMAL.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    if number.is_integer() and abs(number) < _EXPONENT_THRESHOLD:
        return int(number)
    return number


def coerce(raw: str, kind: ScalarKind | str) -> CoercionResult:
    """Convert ``raw`` into a value of the given scalar kind.

    Args:
        raw:  Text typed by the user.
        kind: The row's declared kind.  Unrecognised kinds are treated as
              STRING.

    Returns:
        ``Coerced(value)`` on success, ``Fallback(raw)`` when a NUMBER row
        holds text that is not a finite numeric literal.
    """
    if kind == ScalarKind.NUMBER:
        number = _parse_number(raw)
        return Fallback(raw) if number is None else Coerced(number)
    if kind == ScalarKind.BOOLEAN:
        return Coerced(raw == "true")
    if kind == ScalarKind.NULL:
        return Coerced(None)
    return Coerced(raw)


def coerce_value(raw: str, kind: ScalarKind | str) -> Any:
    """Like ``coerce`` but returns the bare value of either variant."""
    return coerce(raw, kind).value
