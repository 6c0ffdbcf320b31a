"""Jinja2 engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, meta

from qwsite.engines.base import CONTENT_SLOT, Engine


class JinjaEngine(Engine):
    """Renders `.j2` / `.jinja` / `.jinja2` files.

    Layouts embed the body with `{{ yield_content() }}`. Templates may
    `{% include %}` other files relative to `searchpath` (the source root).
    """

    name = "jinja"
    extensions = ("j2", "jinja", "jinja2")

    def __init__(self, searchpath: Path | str | None = None, **env_options: Any):
        options: dict[str, Any] = {"keep_trailing_newline": True}
        options.update(env_options)
        if searchpath is not None:
            options.setdefault("loader", FileSystemLoader(str(searchpath)))
        self.env = Environment(**options)

    def render(
        self, source: str, variables: Mapping[str, Any], block: str | None = None
    ) -> str:
        tmpl = self.env.from_string(source)
        names = dict(variables)
        if block is not None:
            names[CONTENT_SLOT] = lambda: block
        return tmpl.render(**names)

    def embeds_content(self, source: str) -> bool:
        ast = self.env.parse(source)
        return CONTENT_SLOT in meta.find_undeclared_variables(ast)
