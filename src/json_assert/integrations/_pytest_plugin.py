"""pytest plugin for json-assert.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_assert import LENIENT, assert_equals, assert_not_equals
from json_assert.api import Strictness, parse_json


def _load(value: Any) -> Any:
    return parse_json(value) if isinstance(value, str) else value


@pytest.fixture(scope="session")
def assert_json_equals() -> Any:
    """Fixture that returns a callable JSON equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to assert_equals() which builds a fresh comparator per call).
    String arguments are parsed as JSON text; any other value is compared
    as-is.

    Usage in tests::

        def test_user(assert_json_equals):
            assert_json_equals('{"id": 1}', {"id": 1, "name": "Joe"})

        def test_strict(assert_json_equals):
            with pytest.raises(AssertionError, match=r"unexpected"):
                assert_json_equals({"id": 1}, {"id": 1, "name": "Joe"}, STRICT)

    Returns:
        A callable ``_assert(expected, actual, strictness=LENIENT, message=None)``
        that raises ``AssertionError`` when ``actual`` does not satisfy
        ``expected``.
    """

    def _assert(
        expected: Any,
        actual: Any,
        strictness: Strictness = LENIENT,
        message: str | None = None,
    ) -> None:
        assert_equals(_load(expected), _load(actual), strictness, message)

    return _assert


@pytest.fixture(scope="session")
def assert_json_not_equals() -> Any:
    """Fixture that returns a callable JSON inequality asserter.

    Mirror of ``assert_json_equals``: the callable raises ``AssertionError``
    when ``actual`` DOES satisfy ``expected``.
    """

    def _assert(
        expected: Any,
        actual: Any,
        strictness: Strictness = LENIENT,
        message: str | None = None,
    ) -> None:
        assert_not_equals(_load(expected), _load(actual), strictness, message)

    return _assert
