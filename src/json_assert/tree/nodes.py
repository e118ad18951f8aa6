"""ValueKind StrEnum and scalar helpers for the JSON value model.

Comparison works directly on plain Python JSON values (``dict``, ``list``,
``str``, numbers, ``bool``, ``None``).  ``kind_of`` maps every value onto the
closed ``ValueKind`` set so that comparison routines dispatch on a tag
instead of ad-hoc ``isinstance`` chains.

Numbers compare by mathematical value: ``int``, ``float`` and ``Decimal``
are all converted to ``Decimal`` (floats through their shortest ``repr``)
so ``12345 == 12345.0`` and ``310.1e-1 == 31.01``.
"""

from __future__ import annotations

import json
from collections.abc import Hashable
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any

from json_assert.errors import InvalidValueError

__all__ = [
    "COMPOSITE_KINDS",
    "SCALAR_KINDS",
    "ValueKind",
    "describe",
    "is_composite",
    "kind_of",
    "scalar_key",
    "scalars_equal",
    "to_decimal",
]


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names (Python 3.11+):
    - NULL    -> "null"    : ``None``
    - BOOLEAN -> "boolean" : ``True`` / ``False``
    - NUMBER  -> "number"  : ``int``, ``float``, ``Decimal``
    - STRING  -> "string"  : ``str``
    - OBJECT  -> "object"  : ``dict`` with string keys
    - ARRAY   -> "array"   : ``list`` or ``tuple``
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()


SCALAR_KINDS = frozenset(
    {ValueKind.NULL, ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING}
)
COMPOSITE_KINDS = frozenset({ValueKind.OBJECT, ValueKind.ARRAY})


def kind_of(value: Any) -> ValueKind:
    """Classify a plain Python value.

    The dispatch order matters: bool MUST be checked before int because
    bool is a subclass of int in Python.

    Raises:
        InvalidValueError: If ``value`` is not a JSON value.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    raise InvalidValueError(f"Unsupported JSON value type: {type(value)!r}")


def is_composite(value: Any) -> bool:
    return kind_of(value) in COMPOSITE_KINDS


def to_decimal(number: int | float | Decimal) -> Decimal:
    """Convert a JSON number to an exact ``Decimal`` for value comparison."""
    if isinstance(number, Decimal):
        return number
    if isinstance(number, float):
        # repr gives the shortest round-tripping literal: 0.1 -> Decimal("0.1")
        return Decimal(repr(number))
    return Decimal(number)


def scalars_equal(expected: Any, actual: Any) -> bool:
    """Default leaf equality: same kind and same value.

    Numbers compare numerically across ``int``/``float``/``Decimal``.  Two
    NaN values are considered equal so that every value equals itself.
    """
    kind = kind_of(expected)
    if kind != kind_of(actual):
        return False
    if kind == ValueKind.NUMBER:
        left = to_decimal(expected)
        right = to_decimal(actual)
        if left.is_nan() or right.is_nan():
            return left.is_nan() and right.is_nan()
        return left == right
    return bool(expected == actual)


def scalar_key(value: Any) -> Hashable:
    """Return a hashable key such that equal scalars share the same key.

    Used for multiset matching of unordered scalar arrays and for unique-key
    lookups.  ``Decimal`` hashing is consistent with numeric equality, so
    ``1`` and ``1.0`` collapse onto one key; the kind tag keeps ``True`` and
    ``1`` apart.
    """
    kind = kind_of(value)
    if kind == ValueKind.NUMBER:
        number = to_decimal(value)
        return (kind, "NaN") if number.is_nan() else (kind, number)
    return (kind, value)


def describe(value: Any) -> str:
    """Render a value for diagnostic messages.

    Composites are described by kind rather than dumped, which keeps one
    message line per recorded issue.
    """
    kind = kind_of(value)
    if kind == ValueKind.OBJECT:
        return "a JSON object"
    if kind == ValueKind.ARRAY:
        return "a JSON array"
    if kind == ValueKind.NULL:
        return "null"
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind == ValueKind.NUMBER:
        return repr(value) if isinstance(value, float) else str(value)
    return json.dumps(value, ensure_ascii=False)
