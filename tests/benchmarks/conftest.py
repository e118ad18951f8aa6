"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers of unordered arrays: 10, 100 and 500 records.  Each tier
provides a keyed pair (records carry a unique ``id``, so pairing is linear)
and an anonymous pair (no usable key, so every candidate pair is compared).

Anonymous tiers stay small because best-effort pairing compares m x n
element pairs before assignment.
"""

from __future__ import annotations

from typing import Any

import pytest


def _record(i: int) -> dict[str, Any]:
    return {
        "id": i,
        "name": f"name_{i}",
        "tags": [f"t{i % 3}", f"t{i % 5}"],
        "address": {"city": f"city_{i % 7}", "zip": f"{10000 + i}"},
    }


def _make_keyed_pair(n: int) -> tuple[list[Any], list[Any]]:
    """Keyed records, actual reversed with one changed field."""
    expected = [_record(i) for i in range(n)]
    actual = [_record(i) for i in reversed(range(n))]
    actual[0]["name"] = "changed"
    return expected, actual


def _make_anonymous_pair(n: int) -> tuple[list[Any], list[Any]]:
    """Records without a unique scalar field, actual rotated by one."""
    expected = [{"kind": "row", "cells": [i, i + 1, i * 2]} for i in range(n)]
    actual = expected[1:] + expected[:1]
    return expected, [dict(row, cells=list(row["cells"])) for row in actual]


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10_keyed() -> tuple[list[Any], list[Any]]:
    """10 keyed records."""
    return _make_keyed_pair(10)


@pytest.fixture
def pair_10_anonymous() -> tuple[list[Any], list[Any]]:
    """10 records without a unique key."""
    return _make_anonymous_pair(10)


@pytest.fixture
def pair_100_keyed() -> tuple[list[Any], list[Any]]:
    """100 keyed records."""
    return _make_keyed_pair(100)


@pytest.fixture
def pair_100_anonymous() -> tuple[list[Any], list[Any]]:
    """100 records without a unique key."""
    return _make_anonymous_pair(100)


@pytest.fixture
def pair_500_keyed() -> tuple[list[Any], list[Any]]:
    """500 keyed records."""
    return _make_keyed_pair(500)
