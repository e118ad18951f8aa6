"""PathLookupCache: thread-safe LRU memo of customization lookups.

A ``CustomizationRegistry`` answers the same question ("which customization,
if any, applies to this path?") for every value the comparator visits, and
documents under test tend to repeat the same paths across calls.  This
cache stores the index of the winning customization per path (``None``
when nothing applies) so repeated lookups skip pattern matching.

Each ``PathLookupCache`` instance owns its own ``LRUCache`` and lock; there
is no class-level shared state, so two registries never interfere.  The
lock makes a registry safe to share between threads even though the cache
mutates internally.

Example::

    from json_assert.cache import PathLookupCache

    cache = PathLookupCache(resolve=lambda path: 0 if path == "id" else None)
    cache.get("id")    # 0, resolved and stored
    cache.get("id")    # 0, served from memory
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from cachetools import LRUCache

__all__ = ["PathLookupCache"]


class PathLookupCache:
    """LRU-backed memo around a ``path -> index | None`` resolver.

    Args:
        resolve: Function computing the uncached answer for a path.
        max_size: Maximum number of paths held in memory.  Defaults to 256.
            When exceeded, the least-recently-used entry is silently evicted.
    """

    def __init__(
        self, resolve: Callable[[str], int | None], max_size: int = 256
    ) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._resolve = resolve
        self._cache: LRUCache[str, int | None] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        with self._lock:
            return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, path: str) -> int | None:
        """Return the resolved answer for ``path``, computing it at most once
        while it stays cached.
        """
        with self._lock:
            if path in self._cache:
                return self._cache[path]

        # Resolvers are pure; two threads may both resolve the same path.
        answer = self._resolve(path)
        with self._lock:
            self._cache[path] = answer
        return answer

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
