"""Structural protocols for the json-assert extension points.

Users can plug in their own comparators and value matchers without
inheriting from any base class: any object with a conformant method passes
``isinstance`` checks.

Example::

    from json_assert.protocols import ValueMatcher

    def any_positive(expected, actual):
        return isinstance(actual, int) and actual > 0

    assert isinstance(any_positive, ValueMatcher)  # True, functions are callable
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_assert.result import JSONCompareResult


@runtime_checkable
class ValueMatcher(Protocol):
    """Structural protocol for path-scoped equality overrides.

    A value matcher is called with the expected and actual values found at
    a customized path and returns True when they should be considered
    equal.  It may raise ``ValueMatcherError`` to reject the actual value
    with an explanation.
    """

    def __call__(self, expected: Any, actual: Any) -> bool: ...


@runtime_checkable
class Comparator(Protocol):
    """Structural protocol for comparison strategies.

    ``compare`` must be a pure function of its two inputs: it must not
    mutate them and must return a fresh, finished ``JSONCompareResult``.
    """

    def compare(self, expected: Any, actual: Any) -> JSONCompareResult: ...
