"""Array matching for the structural comparator.

Architecture:
- Ordered arrays (``strict_order``): lengths must agree, then element ``i``
  is compared against element ``i`` for every index.
- Unordered arrays: elements are partitioned into scalars, objects and
  arrays, and each partition is matched independently:

  * Scalars are matched as multisets by canonical value.  Elements whose
    path carries a customization are matched afterwards against the
    remaining actual scalars using the matcher's verdict.
  * Objects are paired by a unique key when one exists: a field present in
    every element on both sides with scalar, pairwise distinct values.
  * Everything else (objects without a unique key, nested arrays) goes
    through best-effort pairing over a matrix of failure counts.

Failures of a paired element are computed once into a scratch
``ResultAccumulator`` and merged into the caller's accumulator afterwards,
so the emitted order follows the expected array regardless of the order
in which pairs were committed.  Unclaimed actual elements are reported as
unexpected only when the mode is not extensible.
"""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from json_assert.algorithm.config import PairingStrategy
from json_assert.algorithm.matcher import (
    greedy_match,
    hungarian_match,
    lexicographic_cost,
)
from json_assert.result import ResultAccumulator
from json_assert.tree.nodes import (
    SCALAR_KINDS,
    ValueKind,
    kind_of,
    scalar_key,
    scalars_equal,
)
from json_assert.tree.paths import field_path, index_path

if TYPE_CHECKING:
    from json_assert.comparator import DefaultComparator

__all__ = ["compare_arrays", "find_unique_key"]

logger = logging.getLogger(__name__)

_SCALAR = "scalar"


def compare_arrays(
    comparator: DefaultComparator,
    path: str,
    expected: Sequence[Any],
    actual: Sequence[Any],
    acc: ResultAccumulator,
) -> None:
    """Compare two arrays at ``path`` and record every difference in ``acc``."""
    if comparator.mode.strict_order:
        _compare_ordered(comparator, path, expected, actual, acc)
    else:
        _compare_unordered(comparator, path, expected, actual, acc)


# ----------------------------------------------------------------------
# Ordered arrays
# ----------------------------------------------------------------------


def _compare_ordered(
    comparator: DefaultComparator,
    path: str,
    expected: Sequence[Any],
    actual: Sequence[Any],
    acc: ResultAccumulator,
) -> None:
    if len(expected) != len(actual):
        acc.record_length_mismatch(path, len(expected), len(actual))
        return

    expected_keys = {
        scalar_key(item) for item in expected if kind_of(item) in SCALAR_KINDS
    }
    for idx, (exp_item, act_item) in enumerate(zip(expected, actual, strict=True)):
        item_path = index_path(path, idx)
        if (
            kind_of(exp_item) in SCALAR_KINDS
            and kind_of(act_item) in SCALAR_KINDS
            and comparator.registry.find(item_path) is None
            and not scalars_equal(exp_item, act_item)
            and scalar_key(act_item) in expected_keys
        ):
            acc.record_order_mismatch(item_path, exp_item, act_item)
            continue
        comparator.compare_values(item_path, exp_item, act_item, acc)


# ----------------------------------------------------------------------
# Unordered arrays
# ----------------------------------------------------------------------


def _compare_unordered(
    comparator: DefaultComparator,
    path: str,
    expected: Sequence[Any],
    actual: Sequence[Any],
    acc: ResultAccumulator,
) -> None:
    extensible = comparator.mode.extensible
    if not extensible and len(expected) != len(actual):
        acc.record_length_mismatch(path, len(expected), len(actual))

    # expected index -> scratch accumulator holding that pair's failures
    paired: dict[int, ResultAccumulator] = {}
    claimed: set[int] = set()

    partitions: dict[str, tuple[list[int], list[int]]] = {
        kind: ([], []) for kind in (_SCALAR, ValueKind.OBJECT, ValueKind.ARRAY)
    }
    for idx, item in enumerate(expected):
        partitions[_partition_of(item)][0].append(idx)
    for idx, item in enumerate(actual):
        partitions[_partition_of(item)][1].append(idx)

    exp_scalars, act_scalars = partitions[_SCALAR]
    _match_scalars(
        comparator, path, expected, actual, exp_scalars, act_scalars, paired, claimed
    )

    exp_objects, act_objects = partitions[ValueKind.OBJECT]
    if exp_objects and act_objects:
        unique_key = find_unique_key(
            comparator,
            path,
            [(i, expected[i]) for i in exp_objects],
            [actual[j] for j in act_objects],
        )
        if unique_key is not None:
            logger.debug("Pairing %s elements by unique key %r", path, unique_key)
            _pair_by_key(
                comparator,
                path,
                expected,
                actual,
                exp_objects,
                act_objects,
                unique_key,
                paired,
                claimed,
            )
        else:
            logger.debug(
                "No unique key for objects in %s; %s pairing",
                path,
                comparator.pairing,
            )
            _pair_best_effort(
                comparator,
                path,
                expected,
                actual,
                exp_objects,
                act_objects,
                paired,
                claimed,
            )

    exp_arrays, act_arrays = partitions[ValueKind.ARRAY]
    _pair_best_effort(
        comparator, path, expected, actual, exp_arrays, act_arrays, paired, claimed
    )

    for idx, item in enumerate(expected):
        sub = paired.get(idx)
        if sub is None:
            acc.record_missing(index_path(path, idx), item)
        else:
            acc.merge(sub)

    leftovers = [j for j in range(len(actual)) if j not in claimed]
    if extensible:
        acc.record_tolerated(len(leftovers))
    else:
        for j in leftovers:
            acc.record_unexpected(index_path(path, j), actual[j])


def _partition_of(item: Any) -> str:
    kind = kind_of(item)
    return _SCALAR if kind in SCALAR_KINDS else kind


def _match_scalars(
    comparator: DefaultComparator,
    path: str,
    expected: Sequence[Any],
    actual: Sequence[Any],
    exp_indices: list[int],
    act_indices: list[int],
    paired: dict[int, ResultAccumulator],
    claimed: set[int],
) -> None:
    """Multiset matching of scalar elements, customized elements last."""
    pool: defaultdict[Hashable, deque[int]] = defaultdict(deque)
    for j in act_indices:
        pool[scalar_key(actual[j])].append(j)

    customized: list[int] = []
    for i in exp_indices:
        if comparator.registry.find(index_path(path, i)) is not None:
            customized.append(i)
            continue
        candidates = pool.get(scalar_key(expected[i]))
        if candidates:
            claimed.add(candidates.popleft())
            paired[i] = ResultAccumulator()

    for i in customized:
        item_path = index_path(path, i)
        for j in act_indices:
            if j in claimed:
                continue
            sub = ResultAccumulator()
            comparator.compare_values(item_path, expected[i], actual[j], sub)
            if sub.failure_count == 0:
                claimed.add(j)
                paired[i] = sub
                break


def find_unique_key(
    comparator: DefaultComparator,
    path: str,
    expected: list[tuple[int, dict[str, Any]]],
    actual: list[dict[str, Any]],
) -> str | None:
    """Find a field usable as a de-facto identifier for object elements.

    Candidates are the fields of the first expected object, in key order.
    A candidate qualifies when every expected and every actual object has
    it with a scalar value, the values are pairwise distinct on each side,
    and no customization overrides equality at that field.

    Args:
        comparator: Comparator whose registry is consulted.
        path: Path of the array holding the objects.
        expected: ``(index, object)`` pairs from the expected array.
        actual: Object elements of the actual array.

    Returns:
        The first qualifying field name, or None.
    """
    if not expected:
        return None
    first = expected[0][1]
    for candidate in first:
        if not _is_unique_key(candidate, [obj for _, obj in expected]):
            continue
        if not _is_unique_key(candidate, actual):
            continue
        if comparator.registry and any(
            comparator.registry.find(field_path(index_path(path, i), candidate))
            for i, _ in expected
        ):
            continue
        return candidate
    return None


def _is_unique_key(candidate: str, objects: list[dict[str, Any]]) -> bool:
    seen: set[Hashable] = set()
    for obj in objects:
        if candidate not in obj:
            return False
        value = obj[candidate]
        if kind_of(value) not in SCALAR_KINDS:
            return False
        key = scalar_key(value)
        if key in seen:
            return False
        seen.add(key)
    return True


def _pair_by_key(
    comparator: DefaultComparator,
    path: str,
    expected: Sequence[Any],
    actual: Sequence[Any],
    exp_indices: list[int],
    act_indices: list[int],
    unique_key: str,
    paired: dict[int, ResultAccumulator],
    claimed: set[int],
) -> None:
    by_key = {scalar_key(actual[j][unique_key]): j for j in act_indices}
    for i in exp_indices:
        j = by_key.get(scalar_key(expected[i][unique_key]))
        if j is None:
            continue
        sub = ResultAccumulator()
        comparator.compare_values(index_path(path, i), expected[i], actual[j], sub)
        paired[i] = sub
        claimed.add(j)


def _pair_best_effort(
    comparator: DefaultComparator,
    path: str,
    expected: Sequence[Any],
    actual: Sequence[Any],
    exp_indices: list[int],
    act_indices: list[int],
    paired: dict[int, ResultAccumulator],
    claimed: set[int],
) -> None:
    """Pair composite elements by fewest failures.

    Every candidate pair is compared once.  The failure counts form the
    primary cost matrix; the number of tolerated extras (non-zero only in
    extensible modes) breaks ties so that ``[]`` prefers ``[]`` over
    ``[1, 2]``.  Remaining ties fall to expected order, then actual order.
    """
    if not exp_indices or not act_indices:
        return

    m = len(exp_indices)
    n = len(act_indices)
    failures = np.empty((m, n), dtype=float)
    extras = np.empty((m, n), dtype=float)
    scratch: dict[tuple[int, int], ResultAccumulator] = {}

    for r, i in enumerate(exp_indices):
        item_path = index_path(path, i)
        for c, j in enumerate(act_indices):
            sub = ResultAccumulator()
            comparator.compare_values(item_path, expected[i], actual[j], sub)
            failures[r, c] = sub.failure_count
            extras[r, c] = sub.tolerated
            scratch[(r, c)] = sub

    if comparator.pairing == PairingStrategy.OPTIMAL:
        rows, cols = hungarian_match(lexicographic_cost(failures, extras))
    else:
        rows, cols = greedy_match(failures, tie_breaker=extras)

    for r, c in zip(rows.tolist(), cols.tolist(), strict=True):
        paired[exp_indices[r]] = scratch[(r, c)]
        claimed.add(act_indices[c])
