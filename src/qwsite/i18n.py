"""Current-locale accessors and the scoped locale switch.

Rendering only talks to a `LocaleAccessor`, so the process-wide default can be
swapped for a context-local one in concurrent builds.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator, Protocol

log = logging.getLogger(__name__)


class LocaleAccessor(Protocol):
    """Get/set the current locale."""

    def get(self) -> str | None: ...

    def set(self, lang: str | None) -> None: ...


class GlobalLocale:
    """Process-wide current locale. Not safe to switch from several threads."""

    def __init__(self, default: str | None = None) -> None:
        self._current = default

    def get(self) -> str | None:
        return self._current

    def set(self, lang: str | None) -> None:
        self._current = lang


class ContextLocale:
    """Current locale stored in a ContextVar (per thread / per task)."""

    def __init__(self, default: str | None = None) -> None:
        self._var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
            "qwsite_locale", default=default
        )

    def get(self) -> str | None:
        return self._var.get()

    def set(self, lang: str | None) -> None:
        self._var.set(lang)


@contextmanager
def switch_locale(
    accessor: LocaleAccessor | None, lang: str | None
) -> Iterator[str | None]:
    """Switch to `lang` for the block; always restore the previous locale.

    With no accessor this is a no-op. With no `lang` the locale is left as is
    but still restored afterwards (nested renders may change it).
    """
    if accessor is None:
        yield None
        return

    previous = accessor.get()
    if lang:
        log.debug(f"Switching locale {previous!r} -> {lang!r}")
        accessor.set(lang)
    try:
        yield accessor.get()
    finally:
        accessor.set(previous)
