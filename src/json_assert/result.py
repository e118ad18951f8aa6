"""Comparison result types and the accumulator that builds them.

A ``ResultAccumulator`` lives for exactly one comparison call: the
comparator appends entries to it during the recursive walk and calls
``finish()`` once to obtain the frozen ``JSONCompareResult`` returned to the
caller.  Entries keep their discovery order, which is also the order of the
lines in the rendered message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_assert.tree.nodes import describe
from json_assert.tree.paths import display_path

__all__ = [
    "FailureKind",
    "FieldComparisonFailure",
    "JSONCompareResult",
    "ResultAccumulator",
]


class FailureKind(StrEnum):
    """Category of a recorded comparison issue."""

    TYPE_MISMATCH = auto()
    VALUE_MISMATCH = auto()
    MISSING = auto()
    UNEXPECTED = auto()
    ARRAY_LENGTH_MISMATCH = auto()
    ARRAY_ORDER_MISMATCH = auto()


@dataclass(frozen=True, slots=True)
class FieldComparisonFailure:
    """A single mismatch at one path.

    Attributes:
        field: Path of the mismatch, e.g. ``"friends[1].pets"``.
        expected: Expected value (``None`` for UNEXPECTED entries).  For
            ARRAY_LENGTH_MISMATCH this is the expected length.
        actual: Actual value (``None`` for MISSING entries).  For
            ARRAY_LENGTH_MISMATCH this is the actual length.
        kind: Category of the issue.
        reason: Explanation supplied by a custom value matcher, if any.
    """

    field: str
    expected: Any
    actual: Any
    kind: FailureKind = FailureKind.VALUE_MISMATCH
    reason: str | None = None

    def render(self) -> str:
        """Return the single message line describing this failure."""
        path = display_path(self.field)
        if self.reason is not None:
            return f"{path}: {self.reason}"
        if self.kind == FailureKind.MISSING:
            return f"{path}: expected {describe(self.expected)} but none found"
        if self.kind == FailureKind.UNEXPECTED:
            return f"{path}: unexpected {describe(self.actual)}"
        if self.kind == FailureKind.ARRAY_LENGTH_MISMATCH:
            return (
                f"{self.field}[]: expected {self.expected} values "
                f"but got {self.actual}"
            )
        line = (
            f"{path}: expected {describe(self.expected)} "
            f"but got {describe(self.actual)}"
        )
        if self.kind == FailureKind.ARRAY_ORDER_MISMATCH:
            line += " (out of order)"
        return line


@dataclass(frozen=True, slots=True)
class JSONCompareResult:
    """Immutable outcome of one comparison call.

    Attributes:
        failures: Every recorded issue in discovery order.
        message: One line per issue, joined with newlines; empty on success.
    """

    failures: tuple[FieldComparisonFailure, ...] = ()
    message: str = ""

    def passed(self) -> bool:
        return not self.failures

    def failed(self) -> bool:
        return bool(self.failures)

    @property
    def field_failures(self) -> tuple[FieldComparisonFailure, ...]:
        """Mismatches between values present on both sides."""
        return tuple(
            f
            for f in self.failures
            if f.kind not in (FailureKind.MISSING, FailureKind.UNEXPECTED)
        )

    @property
    def field_missing(self) -> tuple[FieldComparisonFailure, ...]:
        """Expected fields or elements that the actual document lacks."""
        return tuple(f for f in self.failures if f.kind == FailureKind.MISSING)

    @property
    def field_unexpected(self) -> tuple[FieldComparisonFailure, ...]:
        """Actual fields or elements not sanctioned by the expected document."""
        return tuple(f for f in self.failures if f.kind == FailureKind.UNEXPECTED)

    def __str__(self) -> str:
        return self.message


@dataclass
class ResultAccumulator:
    """Mutable collector of failures for a single comparison call.

    ``tolerated`` counts actual fields and elements that an extensible mode
    accepted without complaint.  It never affects pass/fail; the array
    matcher uses it to prefer the closest candidate among equally failing
    pairings.
    """

    entries: list[FieldComparisonFailure] = field(default_factory=list)
    tolerated: int = 0
    _result: JSONCompareResult | None = field(default=None, repr=False)

    @property
    def failure_count(self) -> int:
        return len(self.entries)

    def record_mismatch(self, path: str, expected: Any, actual: Any) -> None:
        self._append(FieldComparisonFailure(path, expected, actual))

    def record_type_mismatch(self, path: str, expected: Any, actual: Any) -> None:
        self._append(
            FieldComparisonFailure(path, expected, actual, FailureKind.TYPE_MISMATCH)
        )

    def record_order_mismatch(self, path: str, expected: Any, actual: Any) -> None:
        self._append(
            FieldComparisonFailure(
                path, expected, actual, FailureKind.ARRAY_ORDER_MISMATCH
            )
        )

    def record_matcher_failure(
        self, path: str, expected: Any, actual: Any, reason: str
    ) -> None:
        self._append(FieldComparisonFailure(path, expected, actual, reason=reason))

    def record_missing(self, path: str, expected: Any) -> None:
        self._append(FieldComparisonFailure(path, expected, None, FailureKind.MISSING))

    def record_unexpected(self, path: str, actual: Any) -> None:
        self._append(
            FieldComparisonFailure(path, None, actual, FailureKind.UNEXPECTED)
        )

    def record_length_mismatch(
        self, path: str, expected_length: int, actual_length: int
    ) -> None:
        self._append(
            FieldComparisonFailure(
                path,
                expected_length,
                actual_length,
                FailureKind.ARRAY_LENGTH_MISMATCH,
            )
        )

    def record_tolerated(self, count: int = 1) -> None:
        self.tolerated += count

    def merge(self, other: ResultAccumulator) -> None:
        """Append everything ``other`` recorded, preserving its order."""
        for entry in other.entries:
            self._append(entry)
        self.tolerated += other.tolerated

    def finish(self) -> JSONCompareResult:
        """Freeze the accumulated entries into a ``JSONCompareResult``.

        Idempotent: later calls return the same result object, and the
        accumulator rejects further entries once finished.
        """
        if self._result is None:
            failures = tuple(self.entries)
            message = "\n".join(f.render() for f in failures)
            self._result = JSONCompareResult(failures=failures, message=message)
        return self._result

    def _append(self, entry: FieldComparisonFailure) -> None:
        if self._result is not None:
            msg = "ResultAccumulator is finished; no further entries accepted"
            raise RuntimeError(msg)
        self.entries.append(entry)
