"""Exception hierarchy for json-assert usage errors.

Comparison outcomes (mismatches, missing or unexpected content) are never
raised: they are recorded in a ``JSONCompareResult``.  The exceptions below
signal programming errors in how the engine is called or configured.
"""

from __future__ import annotations

__all__ = [
    "InvalidPatternError",
    "InvalidStrictnessError",
    "InvalidValueError",
    "JSONAssertError",
    "ValueMatcherError",
]


class JSONAssertError(Exception):
    """Base class for every exception raised by json-assert."""


class InvalidValueError(JSONAssertError, TypeError):
    """An input tree holds something that is not a JSON value.

    Attributes:
        path: Location of the offending value (``""`` for the root).
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class InvalidStrictnessError(JSONAssertError, TypeError):
    """The strictness argument is not a bool, ComparisonMode or Comparator."""


class InvalidPatternError(JSONAssertError, ValueError):
    """A customization path pattern or regular expression is malformed."""


class ValueMatcherError(JSONAssertError):
    """Raised by a value matcher to reject a value with an explanation.

    The comparator catches it and records a value mismatch whose message is
    the exception text.
    """
