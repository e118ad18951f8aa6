"""TreeValidator: checks that a Python value is a well-formed JSON tree.

The comparator validates both inputs before walking them, so a malformed
document is reported as a usage error up front instead of surfacing halfway
through a comparison (or never, when the bad value sits in a subtree that
the walk does not reach).

Paths in error messages use the same ``a.b[1]`` notation as comparison
failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_assert.errors import InvalidValueError
from json_assert.tree.nodes import ValueKind, kind_of
from json_assert.tree.paths import ROOT, display_path, field_path, index_path

__all__ = ["TreeValidator", "validate_tree"]


@dataclass
class TreeValidator:
    """Recursively validates any JSON value.

    Accepted values: ``None``, ``bool``, ``int``, ``float``, ``Decimal``,
    ``str``, ``dict`` with ``str`` keys, ``list`` and ``tuple``.  Inputs are
    only read, never modified.

    Example::

        TreeValidator().validate({"id": 1, "tags": ["a", "b"]})  # ok
        TreeValidator().validate({"id": {1, 2}})  # InvalidValueError at "id"
    """

    def validate(self, value: Any, path: str = ROOT) -> None:
        """Validate ``value`` and everything below it.

        Raises:
            InvalidValueError: On an unsupported type or a non-string key.
        """
        try:
            kind = kind_of(value)
        except InvalidValueError:
            raise InvalidValueError(
                f"Unsupported JSON value type at {display_path(path)}: "
                f"{type(value)!r}",
                path=path,
            ) from None

        if kind == ValueKind.OBJECT:
            self._validate_object(value, path)
        elif kind == ValueKind.ARRAY:
            for idx, item in enumerate(value):
                self.validate(item, index_path(path, idx))

    def _validate_object(self, obj: dict[Any, Any], path: str) -> None:
        for key, val in obj.items():
            if not isinstance(key, str):
                raise InvalidValueError(
                    f"Object keys must be strings, got {key!r} at "
                    f"{display_path(path)}",
                    path=path,
                )
            self.validate(val, field_path(path, key))


# Module-level validator (stateless, safe to share)
_validator = TreeValidator()


def validate_tree(value: Any) -> None:
    """Validate a whole document with the shared validator."""
    _validator.validate(value)
