"""The `.tpl` engine: `${{ name }}` substitution and nothing else.

Names are dotted paths into the template variables (`${{ page.title }}`).
Each segment is looked up as a mapping key first, then as an attribute.
Helpers such as `${{ current_locale }}` are called with no arguments.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from qwsite.engines.base import CONTENT_SLOT, Engine
from qwsite.exceptions import TemplateError

PLACEHOLDER = re.compile(r"\$\{\{\s*([^}]+?)\s*\}\}")

_UNDEFINED = object()


def lookup(names: Mapping[str, Any], dotted: str) -> Any:
    """Value for `dotted` in `names`, or `_UNDEFINED` when any segment is missing."""
    value: Any = names
    for segment in dotted.split("."):
        if isinstance(value, Mapping):
            value = value.get(segment, _UNDEFINED)
        else:
            value = getattr(value, segment, _UNDEFINED)
        if value is _UNDEFINED:
            break
    return value


def interpolate(source: str, names: Mapping[str, Any]) -> str:
    """Substitute every `${{ name }}` in `source`.

    >>> interpolate("Hello ${{ site.name }}", {"site": {"name": "world"}})
    'Hello world'

    Raises:
        TemplateError: A placeholder names something that is not defined.
    """

    def substitute(match: re.Match[str]) -> str:
        dotted = match.group(1)
        value = lookup(names, dotted)
        if value is _UNDEFINED:
            raise TemplateError(f"Undefined name in .tpl template: {dotted}")
        return str(value() if callable(value) else value)

    return PLACEHOLDER.sub(substitute, source)


class InterpEngine(Engine):
    """Renders `.tpl` files; layouts embed the body with `${{ yield_content }}`."""

    name = "interp"
    extensions = ("tpl",)

    def render(
        self, source: str, variables: Mapping[str, Any], block: str | None = None
    ) -> str:
        names = dict(variables)
        if block is not None:
            names[CONTENT_SLOT] = block
        return interpolate(source, names)

    def embeds_content(self, source: str) -> bool:
        return any(
            match.group(1).strip() == CONTENT_SLOT
            for match in PLACEHOLDER.finditer(source)
        )
