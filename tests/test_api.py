"""Unit tests for the public API functions: compare, compare_json and the
assertion front end."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any

import pytest

from json_assert import (
    LENIENT,
    NON_EXTENSIBLE,
    STRICT,
    CustomComparator,
    Customization,
    DefaultComparator,
    InvalidStrictnessError,
    JSONCompareResult,
    RegularExpressionValueMatcher,
    assert_equals,
    assert_json_equals,
    assert_json_not_equals,
    assert_not_equals,
    compare,
    compare_json,
)
from json_assert.api import parse_json, resolve_comparator


class TestResolveComparator:
    def test_true_is_strict(self) -> None:
        cmp = resolve_comparator(True)
        assert isinstance(cmp, DefaultComparator)
        assert cmp.mode == STRICT

    def test_false_is_lenient(self) -> None:
        cmp = resolve_comparator(False)
        assert isinstance(cmp, DefaultComparator)
        assert cmp.mode == LENIENT

    def test_mode_builds_default_comparator(self) -> None:
        cmp = resolve_comparator(NON_EXTENSIBLE)
        assert isinstance(cmp, DefaultComparator)
        assert cmp.mode == NON_EXTENSIBLE

    def test_comparator_is_used_as_is(self) -> None:
        custom = CustomComparator(STRICT)
        assert resolve_comparator(custom) is custom

    def test_duck_typed_comparator(self) -> None:
        class Always:
            def compare(self, expected: Any, actual: Any) -> JSONCompareResult:
                return JSONCompareResult()

        assert compare(1, 2, Always()).passed()  # type: ignore[arg-type]

    @pytest.mark.parametrize("strictness", [None, "STRICT", 1, 0.5, object()])
    def test_rejects_other_arguments(self, strictness: Any) -> None:
        with pytest.raises(InvalidStrictnessError):
            resolve_comparator(strictness)

    def test_invalid_strictness_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            compare({}, {}, "LENIENT")  # type: ignore[arg-type]

    def test_bool_resolution_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="json_assert.api"):
            resolve_comparator(True)
        assert "STRICT" in caplog.text


class TestCompare:
    def test_returns_result(self) -> None:
        result = compare({"id": 1}, {"id": 1}, STRICT)
        assert isinstance(result, JSONCompareResult)
        assert result.passed()

    def test_bool_strictness(self) -> None:
        assert compare({"id": 1}, {"id": 1, "name": "john"}, False).passed()
        assert compare({"id": 1}, {"id": 1, "name": "john"}, True).failed()


class TestCompareJson:
    def test_parses_both_documents(self) -> None:
        assert compare_json('{"id": 12345}', '{"id": 12345}', LENIENT).passed()

    def test_fractional_numbers_keep_precision(self) -> None:
        assert parse_json("0.1") == Decimal("0.1")
        assert compare_json("310.1e-1", "31.01", STRICT).passed()

    def test_int_and_double_are_equivalent(self) -> None:
        assert compare_json('{"id": 12345}', '{"id": 12345.0}', STRICT).passed()

    def test_top_level_scalars(self) -> None:
        assert compare_json('"Joe"', '"Joe"', STRICT).passed()
        assert compare_json('"Joe"', '"Joe1"', STRICT).failed()

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            compare_json("{id: 1}", '{"id": 1}', STRICT)

    def test_field_failure_details(self) -> None:
        result = compare_json('{"name": "Pat"}', '{"name": "Sue"}', STRICT)
        failure = result.field_failures[0]
        assert (failure.field, failure.expected, failure.actual) == ("name", "Pat", "Sue")


class TestAssertEquals:
    def test_passes_silently(self) -> None:
        assert_equals([1, 2, 3], [1, 2, 3], True)
        assert_equals({"id": 12345}, {"id": 12345, "name": "john"}, LENIENT)

    def test_raises_with_diff(self) -> None:
        with pytest.raises(AssertionError) as exc_info:
            assert_equals({"id": 1}, {"id": 2}, STRICT)
        assert str(exc_info.value) == "id: expected 1 but got 2"

    def test_message_prefix(self) -> None:
        with pytest.raises(AssertionError) as exc_info:
            assert_equals([1, 2, 3], [1, 2, 4], False, message="Message")
        assert str(exc_info.value).startswith("Message ")

    def test_prefixed_message_keeps_every_line(self) -> None:
        with pytest.raises(AssertionError) as exc_info:
            assert_equals({"a": 1, "b": 1}, {"a": 2, "b": 2}, STRICT, message="Message")
        assert str(exc_info.value) == (
            "Message a: expected 1 but got 2\nb: expected 1 but got 2"
        )

    def test_custom_comparator(self) -> None:
        cmp = CustomComparator(
            STRICT, Customization("entry.id", RegularExpressionValueMatcher(r"\d"))
        )
        assert_json_equals('{"entry": {"id": "x"}}', '{"entry": {"id": 1, "id": 2}}', cmp)
        with pytest.raises(AssertionError, match=r"^Message"):
            assert_json_equals(
                '{"entry": {"id": "x"}}', '{"entry": {"id": "as"}}', cmp, "Message"
            )


class TestAssertNotEquals:
    @pytest.mark.parametrize("strictness", [True, False, STRICT, LENIENT])
    def test_raises_when_equal(self, strictness: Any) -> None:
        with pytest.raises(AssertionError):
            assert_not_equals({"id": 12345}, {"id": 12345}, strictness)

    def test_equal_message_text(self) -> None:
        with pytest.raises(AssertionError, match="^Documents are equal$"):
            assert_not_equals(1, 1, STRICT)

    def test_equal_message_with_prefix(self) -> None:
        with pytest.raises(AssertionError, match="^Message$"):
            assert_not_equals(1, 1, STRICT, message="Message")

    def test_passes_when_different(self) -> None:
        assert_not_equals([1, 2, 3], [1, 3, 2], STRICT)
        assert_not_equals([1, 2, 3], [1, 2, 4], LENIENT)
        assert_not_equals({"id": 12345}, {"id": 12346}, True)

    def test_lenient_extra_field_counts_as_equal(self) -> None:
        with pytest.raises(AssertionError):
            assert_not_equals({"id": 1}, {"id": 1, "name": "Joe"}, False)

    def test_strict_extra_field_counts_as_different(self) -> None:
        assert_not_equals({"id": 1}, {"id": 1, "name": "Joe"}, True)


class TestJsonTextAssertions:
    def test_assert_json_equals(self) -> None:
        assert_json_equals("[1,2,3]", "[1,2,3]", True)
        assert_json_equals('{"id": 12345}', '{"id": 12345, "name": "john"}', LENIENT)

    def test_assert_json_not_equals(self) -> None:
        assert_json_not_equals("[1,2,3]", "[1,3,2]", STRICT)
        assert_json_not_equals("[1,2,3]", "[1,2,4]", False)

    def test_assert_json_not_equals_raises_with_prefix(self) -> None:
        with pytest.raises(AssertionError, match="^Message"):
            assert_json_not_equals('{"id": 1}', '{"id": 1}', LENIENT, "Message")
