"""Customization and CustomizationRegistry: path-scoped matcher overrides.

A ``Customization`` binds a path pattern to a value matcher.  Patterns are
written in the same notation as failure paths (``entry.id``,
``friends[1].pets``) with two wildcards:

- ``[*]`` matches any array index, e.g. ``friends[*].id``.
- ``*`` as a whole field token matches any single field name, e.g.
  ``*.id``.

Every other token must match exactly.  A ``CustomizationRegistry`` holds an
ordered list of customizations; the first one whose pattern matches a path
wins.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from json_assert.cache import PathLookupCache
from json_assert.errors import InvalidPatternError
from json_assert.protocols import ValueMatcher

__all__ = ["Customization", "CustomizationRegistry"]

# One field token, optionally followed by index suffixes: name[0][*]
_TOKEN = re.compile(r"(?P<name>[^.\[\]]+)?(?P<indices>(?:\[(?:\d+|\*)\])*)")
_INDEX = re.compile(r"\[(\d+|\*)\]")


def _compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a path pattern into an anchored regular expression.

    Raises:
        InvalidPatternError: On an empty pattern or an empty field token.
    """
    if not pattern:
        raise InvalidPatternError("customization path must not be empty")

    parts: list[str] = []
    for position, token in enumerate(pattern.split(".")):
        match = _TOKEN.fullmatch(token)
        if match is None or not token:
            msg = f"malformed token {token!r} in customization path {pattern!r}"
            raise InvalidPatternError(msg)
        name = match.group("name")
        if name is None and position > 0:
            msg = f"missing field name before index in {pattern!r}"
            raise InvalidPatternError(msg)

        piece = ""
        if name == "*":
            piece = r"[^.\[\]]+"
        elif name is not None:
            piece = re.escape(name)
        for index in _INDEX.findall(match.group("indices")):
            piece += r"\[\d+\]" if index == "*" else rf"\[{index}\]"
        parts.append(piece)

    return re.compile(r"\.".join(parts))


@dataclass(frozen=True, slots=True)
class Customization:
    """A path pattern bound to a value matcher.

    Attributes:
        path: Pattern addressing one or more values, e.g. ``"entry.id"``.
        matcher: Callable ``(expected, actual) -> bool`` deciding equality
            at matching paths.
    """

    path: str
    matcher: ValueMatcher
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not callable(self.matcher):
            msg = f"matcher must be callable, got {self.matcher!r}"
            raise TypeError(msg)
        object.__setattr__(self, "_regex", _compile_pattern(self.path))

    def applies_to(self, path: str) -> bool:
        return self._regex.fullmatch(path) is not None

    def matches(self, expected: Any, actual: Any) -> bool:
        return bool(self.matcher(expected, actual))


class CustomizationRegistry:
    """Ordered, immutable collection of customizations.

    Registration order is the tie-break: when several patterns match a
    path, the earliest customization wins.  Lookups are memoized per path in
    a ``PathLookupCache``; the registry is otherwise read-only and may be
    shared by concurrent comparisons.

    Example::

        from json_assert.customization import Customization, CustomizationRegistry
        from json_assert.matchers import RegularExpressionValueMatcher

        registry = CustomizationRegistry(
            [Customization("entry.id", RegularExpressionValueMatcher(r"\\d"))]
        )
        registry.lookup("entry.id")    # the regex matcher
        registry.lookup("entry.name")  # None
    """

    def __init__(
        self,
        customizations: Iterable[Customization] = (),
        max_cache_size: int = 256,
    ) -> None:
        self._customizations: tuple[Customization, ...] = tuple(customizations)
        for item in self._customizations:
            if not isinstance(item, Customization):
                msg = f"expected Customization, got {item!r}"
                raise TypeError(msg)
        self._cache = PathLookupCache(self._resolve, max_size=max_cache_size)

    @property
    def customizations(self) -> tuple[Customization, ...]:
        return self._customizations

    def __len__(self) -> int:
        return len(self._customizations)

    def __bool__(self) -> bool:
        return bool(self._customizations)

    def find(self, path: str) -> Customization | None:
        """Return the first customization whose pattern matches ``path``."""
        if not self._customizations:
            return None
        index = self._cache.get(path)
        return None if index is None else self._customizations[index]

    def lookup(self, path: str) -> ValueMatcher | None:
        """Return the value matcher overriding equality at ``path``, if any."""
        customization = self.find(path)
        return None if customization is None else customization.matcher

    def _resolve(self, path: str) -> int | None:
        for index, customization in enumerate(self._customizations):
            if customization.applies_to(path):
                return index
        return None
