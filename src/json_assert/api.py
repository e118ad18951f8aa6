"""Public API functions for json-assert.

``compare`` is the canonical entry point: it takes two JSON values and a
strictness argument and returns a ``JSONCompareResult``.  Everything else
is a thin adapter around it:

- ``compare_json`` parses JSON text before comparing.
- ``assert_equals`` / ``assert_not_equals`` raise ``AssertionError`` for
  use in test suites; the ``*_json_*`` variants accept JSON text.

The strictness argument may be a ``ComparisonMode``, any ``Comparator``,
or a bool (``True`` for STRICT, ``False`` for LENIENT).  Each call that
receives a mode builds a fresh ``DefaultComparator``; no state is kept
between calls.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, TypeAlias

from json_assert.algorithm.config import ComparisonMode
from json_assert.comparator import DefaultComparator
from json_assert.errors import InvalidStrictnessError
from json_assert.protocols import Comparator
from json_assert.result import JSONCompareResult

__all__ = [
    "Strictness",
    "assert_equals",
    "assert_json_equals",
    "assert_json_not_equals",
    "assert_not_equals",
    "compare",
    "compare_json",
    "parse_json",
    "resolve_comparator",
]

logger = logging.getLogger(__name__)

Strictness: TypeAlias = "bool | ComparisonMode | Comparator"


def resolve_comparator(strictness: Strictness) -> Comparator:
    """Normalize a strictness argument into a ``Comparator``.

    Args:
        strictness: ``True`` (STRICT), ``False`` (LENIENT), a
            ``ComparisonMode``, or an object implementing ``Comparator``.

    Raises:
        InvalidStrictnessError: For any other argument.
    """
    # bool is checked first: a bare True/False selects a named mode.
    if isinstance(strictness, bool):
        mode = ComparisonMode.from_strict(strictness)
        logger.debug("Boolean strictness %s resolved to %s", strictness, mode)
        return DefaultComparator(mode)
    if isinstance(strictness, ComparisonMode):
        return DefaultComparator(strictness)
    if isinstance(strictness, Comparator):
        return strictness
    msg = (
        "strictness must be a bool, ComparisonMode or Comparator, "
        f"got {type(strictness).__name__}"
    )
    raise InvalidStrictnessError(msg)


def parse_json(text: str) -> Any:
    """Parse JSON text into the value model.

    Fractional numbers become ``Decimal`` so no precision is lost before
    comparison.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
    """
    return json.loads(text, parse_float=Decimal)


def compare(
    expected: Any,
    actual: Any,
    strictness: Strictness,
) -> JSONCompareResult:
    """Compare two JSON values and return the result.

    Args:
        expected:   Reference JSON value (dict, list, str, number, bool, None).
        actual:     JSON value under test.
        strictness: Mode, comparator, or legacy bool flag.

    Returns:
        A ``JSONCompareResult``; ``passed()`` is True when ``actual``
        satisfies ``expected`` under the given strictness.
    """
    return resolve_comparator(strictness).compare(expected, actual)


def compare_json(
    expected: str,
    actual: str,
    strictness: Strictness,
) -> JSONCompareResult:
    """Parse two JSON documents and compare them."""
    return compare(parse_json(expected), parse_json(actual), strictness)


def _combined_message(message: str | None, result: JSONCompareResult) -> str:
    parts = [part for part in (message, result.message) if part]
    return " ".join(parts)


def assert_equals(
    expected: Any,
    actual: Any,
    strictness: Strictness,
    message: str | None = None,
) -> None:
    """Assert that ``actual`` satisfies ``expected``.

    Raises:
        AssertionError: When the comparison fails.  The error message is
            ``message`` (when given) followed by the rendered diff.
    """
    result = compare(expected, actual, strictness)
    if result.failed():
        raise AssertionError(_combined_message(message, result))


def assert_not_equals(
    expected: Any,
    actual: Any,
    strictness: Strictness,
    message: str | None = None,
) -> None:
    """Assert that ``actual`` does NOT satisfy ``expected``.

    Raises:
        AssertionError: When the comparison passes.  The error message is
            ``message`` (when given) followed by the rendered diff, which is
            empty for a passing comparison.
    """
    result = compare(expected, actual, strictness)
    if result.passed():
        raise AssertionError(
            _combined_message(message, result) or "Documents are equal"
        )


def assert_json_equals(
    expected: str,
    actual: str,
    strictness: Strictness,
    message: str | None = None,
) -> None:
    """``assert_equals`` for JSON text inputs."""
    assert_equals(parse_json(expected), parse_json(actual), strictness, message)


def assert_json_not_equals(
    expected: str,
    actual: str,
    strictness: Strictness,
    message: str | None = None,
) -> None:
    """``assert_not_equals`` for JSON text inputs."""
    assert_not_equals(parse_json(expected), parse_json(actual), strictness, message)
