"""Pair assignment over cost matrices for unordered array matching.

Two strategies are provided:

- ``greedy_match`` repeatedly commits the cheapest remaining pair.  Ties on
  the primary cost are broken by a secondary cost matrix, then by row
  order, then by column order (``np.argmin`` returns the first minimum in
  row-major order).
- ``hungarian_match`` wraps scipy's ``linear_sum_assignment`` so that
  infinite-cost cells never reach the solver (which would raise
  ``ValueError``).  After assignment, pairs that landed on
  originally-infinite positions are filtered out.

Guard value formula: ``finite_max * 2.0 + 1.0``

Infinite cells mark forbidden pairs in both strategies.
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["greedy_match", "hungarian_match", "lexicographic_cost"]


def _empty() -> tuple[np.ndarray, np.ndarray]:
    return np.array([], dtype=int), np.array([], dtype=int)


def greedy_match(
    cost_matrix: np.ndarray,
    tie_breaker: np.ndarray | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Compute a greedy bipartite assignment.

    Args:
        cost_matrix: 2-D primary cost matrix of shape ``(m, n)``.  May contain
            ``np.inf`` to mark forbidden assignments.
        tie_breaker: Optional secondary cost matrix of the same shape,
            consulted only among cells sharing the minimal primary cost.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays listing the
        committed pairs in commit order.  Empty arrays are returned when no
        valid assignment exists.
    """
    cost = np.asarray(cost_matrix, dtype=float)
    if cost.size == 0:
        return _empty()
    secondary = (
        np.zeros_like(cost)
        if tie_breaker is None
        else np.asarray(tie_breaker, dtype=float)
    )
    if secondary.shape != cost.shape:
        msg = f"tie_breaker shape {secondary.shape} != cost shape {cost.shape}"
        raise ValueError(msg)

    available = np.isfinite(cost)
    rows: list[int] = []
    cols: list[int] = []

    while available.any():
        primary = np.where(available, cost, np.inf)
        best = primary.min()
        candidates = available & (primary == best)
        flat = int(np.argmin(np.where(candidates, secondary, np.inf)))
        r, c = divmod(flat, cost.shape[1])
        rows.append(r)
        cols.append(c)
        available[r, :] = False
        available[:, c] = False

    return np.array(rows, dtype=int), np.array(cols, dtype=int)


def hungarian_match(
    cost_matrix: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Compute optimal bipartite assignment with np.inf guard.

    Args:
        cost_matrix: 2-D cost matrix of shape ``(m, n)``.  May contain
            ``np.inf`` to mark forbidden assignments.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays giving the
        optimal assignment, with any pair whose *original* cost was
        infinite removed.  Empty arrays are returned when no valid
        assignment exists.
    """
    if cost_matrix.size == 0:
        return _empty()

    cost = np.asarray(cost_matrix, dtype=float)

    inf_mask = np.isinf(cost)

    # All-inf: no valid assignment
    if inf_mask.all():
        return _empty()

    # Replace inf with a guard value that dominates all finite costs
    if inf_mask.any():
        finite_max = float(cost[~inf_mask].max())
        guard_value = finite_max * 2.0 + 1.0
        cost = np.where(inf_mask, guard_value, cost)

    row_ind, col_ind = linear_sum_assignment(cost)

    # Filter out pairs whose original cost was infinite
    if inf_mask.any():
        original = np.asarray(cost_matrix, dtype=float)
        keep = np.isfinite(original[row_ind, col_ind])
        row_ind = row_ind[keep]
        col_ind = col_ind[keep]

    return row_ind, col_ind


def lexicographic_cost(primary: np.ndarray, secondary: np.ndarray) -> np.ndarray:
    """Fold two non-negative integer cost matrices into one.

    The result orders cells by ``primary`` first and ``secondary`` second,
    which lets ``hungarian_match`` honour the same tie-break as
    ``greedy_match``.  Infinite primary cells stay infinite.
    """
    primary = np.asarray(primary, dtype=float)
    secondary = np.asarray(secondary, dtype=float)
    if primary.size == 0:
        return primary
    finite = np.isfinite(primary)
    # Sum of all secondaries bounds any assignment's secondary total.
    scale = float(secondary[finite].sum()) + 1.0 if finite.any() else 1.0
    return np.where(finite, primary * scale + secondary, np.inf)
