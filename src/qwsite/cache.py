"""Resolution cache - memoizes locator lookups for one build.

Entries are never invalidated: the source tree is assumed not to change while
a build is running. Call `clear()` (or create a new cache) for a fresh build.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Hashable, TypeVar

T = TypeVar("T")

_MISSING = object()


def _freeze(value: Any) -> Hashable:
    """Turn dicts/lists into hashable, order-independent equivalents."""
    if isinstance(value, dict):
        return tuple(sorted((str(k), _freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, set):
        return frozenset(_freeze(v) for v in value)
    return value


class ResolutionCache:
    """Key -> value memo table owned by an Application."""

    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}
        self._lock = threading.RLock()

    def fetch(self, *key: Any, factory: Callable[[], T]) -> T:
        """Return the cached value for `key`, computing it with `factory` once.

        `None` results are cached as well.
        """
        frozen = _freeze(key)
        with self._lock:
            value = self._entries.get(frozen, _MISSING)
            if value is _MISSING:
                value = factory()
                self._entries[frozen] = value
            return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        if not isinstance(key, tuple):
            key = (key,)
        return _freeze(key) in self._entries
