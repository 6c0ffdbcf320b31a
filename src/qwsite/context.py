"""Per-render evaluation context.

A fresh TemplateContext is created for every render call. It carries the
frozen locals and the working options, and supplies helper functions that are
visible to every engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping

if TYPE_CHECKING:
    from qwsite.app import Application


class TemplateContext:
    """Sandbox handed to every file rendered during one render call."""

    def __init__(
        self, app: "Application", locals: Mapping[str, Any], options: dict[str, Any]
    ) -> None:
        self.app = app
        self.locals = locals
        self.options = options
        self.helpers: dict[str, Callable[..., Any]] = {}
        self.current_engine: str | None = None

    def init_helpers(self) -> None:
        """Install the default helpers."""
        self.helpers["current_locale"] = self.current_locale

    def current_locale(self) -> str | None:
        """Active locale, or the `lang` option when no locale accessor is set."""
        if self.app.locale is not None:
            return self.app.locale.get()
        return self.options.get("lang") or self.app.config.default_lang

    def variables(self) -> dict[str, Any]:
        """Names visible to templates: helpers, then `lang`, then locals."""
        names: dict[str, Any] = dict(self.helpers)
        names["lang"] = self.current_locale()
        names.update(self.locals)
        return names
