"""algorithm subpackage - comparison modes and array matching.

Provides the strictness modes, the unordered-array pairing strategies and
the assignment solvers behind them.  Import from this module (not from
sub-modules directly) to stay on the stable public interface.

Example::

    from json_assert.algorithm import LENIENT, PairingStrategy
    from json_assert.comparator import DefaultComparator

    cmp = DefaultComparator(LENIENT, pairing=PairingStrategy.OPTIMAL)
    cmp.compare([{"a": 1}, {"a": 2}], [{"a": 2}, {"a": 1}]).passed()  # True
"""

from __future__ import annotations

from json_assert.algorithm.config import (
    LENIENT,
    NON_EXTENSIBLE,
    STRICT,
    STRICT_ORDER,
    ComparisonMode,
    PairingStrategy,
)
from json_assert.algorithm.matcher import greedy_match, hungarian_match

__all__ = [
    "LENIENT",
    "NON_EXTENSIBLE",
    "STRICT",
    "STRICT_ORDER",
    "ComparisonMode",
    "PairingStrategy",
    "greedy_match",
    "hungarian_match",
]
