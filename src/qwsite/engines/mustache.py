"""Mustache engine backed by chevron."""

from __future__ import annotations

import inspect
from typing import Any, Mapping, cast

import chevron  # type: ignore[import-untyped]
from chevron.tokenizer import tokenize  # type: ignore[import-untyped]

from qwsite.engines.base import CONTENT_SLOT, Engine


def _takes_no_arguments(value: Any) -> bool:
    if not callable(value):
        return False
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return False
    return all(
        param.default is not param.empty
        or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD)
        for param in signature.parameters.values()
    )


class MustacheEngine(Engine):
    """Renders `.mustache` / `.hbs` files.

    Layouts embed the body with `{{{ yield_content }}}`. chevron only calls
    section lambdas, so helpers like `current_locale` are evaluated up front.
    """

    name = "mustache"
    extensions = ("mustache", "hbs")

    def render(
        self, source: str, variables: Mapping[str, Any], block: str | None = None
    ) -> str:
        data = {
            key: value() if _takes_no_arguments(value) else value
            for key, value in variables.items()
        }
        if block is not None:
            data[CONTENT_SLOT] = block
        return cast(str, chevron.render(source, data))

    def embeds_content(self, source: str) -> bool:
        return any(
            tag != "literal" and key == CONTENT_SLOT for tag, key in tokenize(source)
        )
