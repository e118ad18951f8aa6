"""Built-in value matchers for customizations.

Every matcher satisfies the ``ValueMatcher`` protocol structurally: it is
called as ``matcher(expected, actual)`` and returns a bool.
"""

from __future__ import annotations

import re
from typing import Any

from json_assert.errors import InvalidPatternError, ValueMatcherError
from json_assert.tree.nodes import ValueKind, describe, kind_of

__all__ = ["DefaultValueMatcher", "RegularExpressionValueMatcher"]


class DefaultValueMatcher:
    """Plain ``==`` equality, ignoring the engine's numeric normalisation."""

    def __call__(self, expected: Any, actual: Any) -> bool:
        return bool(expected == actual)

    def __repr__(self) -> str:
        return "DefaultValueMatcher()"


class RegularExpressionValueMatcher:
    """Match the actual value's textual form against a regular expression.

    The whole text must match (``re.fullmatch``).  With a constant
    ``pattern`` the expected value is ignored.  Without one, the expected
    value itself is compiled as the regular expression, so the expected
    document can carry per-field patterns.

    Example::

        matcher = RegularExpressionValueMatcher(r"\\d+")
        matcher("x", "123")   # True
        matcher("x", "12a")   # False

    Args:
        pattern: Regular expression applied to every actual value, or None
            to take the expression from the expected value.

    Raises:
        InvalidPatternError: If ``pattern`` is not a valid expression.
    """

    def __init__(self, pattern: str | None = None) -> None:
        self._pattern: re.Pattern[str] | None = None
        if pattern is not None:
            self._pattern = self._compile(pattern)

    @property
    def pattern(self) -> str | None:
        return self._pattern.pattern if self._pattern is not None else None

    def __call__(self, expected: Any, actual: Any) -> bool:
        regex = self._pattern
        if regex is None:
            if kind_of(expected) != ValueKind.STRING:
                raise ValueMatcherError(
                    f"expected value {describe(expected)} is not a regular "
                    "expression string"
                )
            try:
                regex = self._compile(expected)
            except InvalidPatternError as exc:
                raise ValueMatcherError(str(exc)) from exc

        return regex.fullmatch(_text_of(actual)) is not None

    def __repr__(self) -> str:
        return f"RegularExpressionValueMatcher({self.pattern!r})"

    @staticmethod
    def _compile(pattern: str) -> re.Pattern[str]:
        try:
            return re.compile(pattern)
        except re.error as exc:
            msg = f"invalid regular expression {pattern!r}: {exc}"
            raise InvalidPatternError(msg) from exc


def _text_of(value: Any) -> str:
    """Textual form of a JSON value as it would appear in the document."""
    kind = kind_of(value)
    if kind == ValueKind.STRING:
        return value
    return describe(value)
