"""Template engines and the extension registry.

The registry is the single place that answers:
- which engine renders a given extension (`engine_for`)
- which extensions belong to an engine (`extensions_for`)
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Iterable

from qwsite.engines.base import CONTENT_SLOT, Engine
from qwsite.engines.interp import InterpEngine
from qwsite.engines.jinja import JinjaEngine
from qwsite.engines.mustache import MustacheEngine

if TYPE_CHECKING:
    from qwsite.config import SiteConfig


def last_extension(path: str) -> str:
    """'a/b.css.j2' -> 'j2'; '' when the basename has no extension."""
    return os.path.splitext(path)[1].lstrip(".")


class EngineRegistry:
    """Mapping between file extensions and engines."""

    def __init__(self, engines: Iterable[Engine] = ()) -> None:
        self._engines: dict[str, Engine] = {}
        self._by_extension: dict[str, Engine] = {}
        for engine in engines:
            self.register(engine)

    def register(self, engine: Engine, extensions: Iterable[str] | None = None) -> None:
        """Register `engine` for its extensions (or the given ones).

        An extension already mapped to another engine is taken over.
        """
        self._engines[engine.name] = engine
        for ext in extensions if extensions is not None else engine.extensions:
            self._by_extension[ext.lstrip(".")] = engine

    def get(self, name: str) -> Engine | None:
        """Look up an engine by id, falling back to extension."""
        return self._engines.get(name) or self._by_extension.get(name)

    def engine_for(self, extension: str) -> Engine | None:
        return self._by_extension.get(extension.lstrip("."))

    def engine_for_path(self, path: str) -> Engine | None:
        ext = last_extension(path)
        return self._by_extension.get(ext) if ext else None

    def is_template(self, path: str) -> bool:
        return self.engine_for_path(path) is not None

    def extensions_for(self, engine: str) -> list[str]:
        """Every registered extension mapped to `engine` (id or extension)."""
        found = self.get(engine)
        if found is None:
            return []
        return [ext for ext, e in self._by_extension.items() if e is found]

    def names(self) -> list[str]:
        return list(self._engines)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None


def default_registry(config: SiteConfig | None = None) -> EngineRegistry:
    """Registry with the built-in engines, configured from `config.engines`."""
    jinja_options: dict = {}
    searchpath = None
    if config is not None:
        jinja_options = dict(config.engine_options("jinja").options)
        searchpath = config.source_dir

    return EngineRegistry(
        [
            JinjaEngine(searchpath, **jinja_options),
            InterpEngine(),
            MustacheEngine(),
        ]
    )


__all__ = [
    "CONTENT_SLOT",
    "Engine",
    "EngineRegistry",
    "InterpEngine",
    "JinjaEngine",
    "MustacheEngine",
    "default_registry",
    "last_extension",
]
