"""json-assert - semantic comparison of JSON documents."""

from __future__ import annotations

from json_assert.algorithm.config import (
    LENIENT,
    NON_EXTENSIBLE,
    STRICT,
    STRICT_ORDER,
    ComparisonMode,
    PairingStrategy,
)
from json_assert.api import (
    assert_equals,
    assert_json_equals,
    assert_json_not_equals,
    assert_not_equals,
    compare,
    compare_json,
)
from json_assert.comparator import CustomComparator, DefaultComparator
from json_assert.customization import Customization, CustomizationRegistry
from json_assert.errors import (
    InvalidPatternError,
    InvalidStrictnessError,
    InvalidValueError,
    JSONAssertError,
    ValueMatcherError,
)
from json_assert.matchers import RegularExpressionValueMatcher
from json_assert.result import FailureKind, FieldComparisonFailure, JSONCompareResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "LENIENT",
    "NON_EXTENSIBLE",
    "STRICT",
    "STRICT_ORDER",
    "ComparisonMode",
    "CustomComparator",
    "Customization",
    "CustomizationRegistry",
    "DefaultComparator",
    "FailureKind",
    "FieldComparisonFailure",
    "InvalidPatternError",
    "InvalidStrictnessError",
    "InvalidValueError",
    "JSONAssertError",
    "JSONCompareResult",
    "PairingStrategy",
    "RegularExpressionValueMatcher",
    "ValueMatcherError",
    "assert_equals",
    "assert_json_equals",
    "assert_json_not_equals",
    "assert_not_equals",
    "compare",
    "compare_json",
]
