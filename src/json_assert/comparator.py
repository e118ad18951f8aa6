"""DefaultComparator and CustomComparator: the structural comparison engine.

This is the central layer between the value model and the public API.  It
walks the expected and actual trees in lock-step and records every
difference in a ``ResultAccumulator``.

Architecture:
- compare() validates both inputs, creates a fresh accumulator, walks the
  trees from the root and returns the finished, immutable result.
- compare_values() is the per-path dispatcher: a customization matching
  the path decides the verdict outright; otherwise scalars use default
  equality, objects recurse key by key, arrays go to the array matcher and
  any other pairing of kinds is a type mismatch.
- Failures accumulate: a mismatch never stops evaluation of siblings, so
  one call reports the complete set of differences.
- The comparator holds only immutable configuration and can be shared
  between threads and reused across calls.
"""

from __future__ import annotations

from typing import Any

from json_assert.algorithm.arrays import compare_arrays
from json_assert.algorithm.config import ComparisonMode, PairingStrategy
from json_assert.customization import Customization, CustomizationRegistry
from json_assert.errors import ValueMatcherError
from json_assert.protocols import ValueMatcher
from json_assert.result import JSONCompareResult, ResultAccumulator
from json_assert.tree.nodes import SCALAR_KINDS, ValueKind, kind_of, scalars_equal
from json_assert.tree.paths import ROOT, field_path
from json_assert.tree.validator import validate_tree

__all__ = ["CustomComparator", "DefaultComparator"]


class DefaultComparator:
    """Structural comparator configured with a ``ComparisonMode``.

    Example::

        from json_assert.algorithm.config import LENIENT
        from json_assert.comparator import DefaultComparator

        cmp = DefaultComparator(LENIENT)
        result = cmp.compare({"id": 1}, {"id": 1, "name": "Joe"})
        result.passed()   # True, extra fields are allowed in LENIENT
    """

    def __init__(
        self,
        mode: ComparisonMode,
        registry: CustomizationRegistry | None = None,
        pairing: PairingStrategy = PairingStrategy.GREEDY,
    ) -> None:
        """Initialise the comparator.

        Args:
            mode: Strictness policy (extensibility and array ordering).
            registry: Path-scoped equality overrides.  Defaults to an empty
                registry.
            pairing: Strategy for pairing composite elements of unordered
                arrays that carry no unique key.  Defaults to GREEDY.
        """
        if not isinstance(mode, ComparisonMode):
            msg = f"mode must be a ComparisonMode, got {mode!r}"
            raise TypeError(msg)
        self._mode = mode
        self._registry = registry if registry is not None else CustomizationRegistry()
        self._pairing = PairingStrategy(pairing)

    @property
    def mode(self) -> ComparisonMode:
        return self._mode

    @property
    def registry(self) -> CustomizationRegistry:
        return self._registry

    @property
    def pairing(self) -> PairingStrategy:
        return self._pairing

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._mode.name})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, expected: Any, actual: Any) -> JSONCompareResult:
        """Compare two JSON values and return the finished result.

        The comparison is a pure function of its inputs: calling this method
        twice with the same values yields equal results, and neither input
        is modified.

        Args:
            expected: The reference document.
            actual:   The document under test.

        Returns:
            A ``JSONCompareResult`` listing every difference found.

        Raises:
            InvalidValueError: If either input is not a JSON value.
        """
        validate_tree(expected)
        validate_tree(actual)

        acc = ResultAccumulator()
        self.compare_values(ROOT, expected, actual, acc)
        return acc.finish()

    # ------------------------------------------------------------------
    # Recursive walk
    # ------------------------------------------------------------------

    def compare_values(
        self, path: str, expected: Any, actual: Any, acc: ResultAccumulator
    ) -> None:
        """Compare the values found at ``path`` and record any difference."""
        matcher = self._registry.lookup(path)
        if matcher is not None:
            self._apply_matcher(matcher, path, expected, actual, acc)
            return

        expected_kind = kind_of(expected)
        actual_kind = kind_of(actual)

        if expected_kind in SCALAR_KINDS and actual_kind in SCALAR_KINDS:
            if not scalars_equal(expected, actual):
                acc.record_mismatch(path, expected, actual)
        elif expected_kind != actual_kind:
            acc.record_type_mismatch(path, expected, actual)
        elif expected_kind == ValueKind.OBJECT:
            self.compare_objects(path, expected, actual, acc)
        else:
            compare_arrays(self, path, expected, actual, acc)

    def compare_objects(
        self,
        path: str,
        expected: dict[str, Any],
        actual: dict[str, Any],
        acc: ResultAccumulator,
    ) -> None:
        """Compare two objects field by field.

        Expected keys are visited in their insertion order; extra actual keys
        are reported (or tolerated, in extensible modes) in actual order.
        """
        for key, expected_value in expected.items():
            key_path = field_path(path, key)
            if key in actual:
                self.compare_values(key_path, expected_value, actual[key], acc)
            else:
                acc.record_missing(key_path, expected_value)

        extras = [key for key in actual if key not in expected]
        if self._mode.extensible:
            acc.record_tolerated(len(extras))
        else:
            for key in extras:
                acc.record_unexpected(field_path(path, key), actual[key])

    @staticmethod
    def _apply_matcher(
        matcher: ValueMatcher,
        path: str,
        expected: Any,
        actual: Any,
        acc: ResultAccumulator,
    ) -> None:
        try:
            matched = matcher(expected, actual)
        except ValueMatcherError as exc:
            acc.record_matcher_failure(path, expected, actual, str(exc))
            return
        if not matched:
            acc.record_mismatch(path, expected, actual)


class CustomComparator(DefaultComparator):
    """Default comparator parameterized with customizations.

    Example::

        from json_assert import Customization, CustomComparator, STRICT
        from json_assert.matchers import RegularExpressionValueMatcher

        cmp = CustomComparator(
            STRICT, Customization("entry.id", RegularExpressionValueMatcher(r"\\d"))
        )
        cmp.compare({"entry": {"id": "x"}}, {"entry": {"id": "1"}}).passed()  # True
    """

    def __init__(
        self,
        mode: ComparisonMode,
        *customizations: Customization,
        pairing: PairingStrategy = PairingStrategy.GREEDY,
        max_cache_size: int = 256,
    ) -> None:
        super().__init__(
            mode,
            registry=CustomizationRegistry(customizations, max_cache_size=max_cache_size),
            pairing=pairing,
        )

    def __repr__(self) -> str:
        paths = ", ".join(c.path for c in self.registry.customizations)
        return f"{type(self).__name__}({self.mode.name}, [{paths}])"
