"""FileRenderer - renders exactly one file through its engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from qwsite.engines import Engine
from qwsite.exceptions import UnknownEngineError

if TYPE_CHECKING:
    from qwsite.app import Application
    from qwsite.context import TemplateContext

log = logging.getLogger(__name__)


class FileRenderer:
    """Renders a single template file.

    The source is the file's text, unless `options["template_body"]` carries
    content produced by a previous pass (chained extensions).
    """

    def __init__(self, app: "Application", path: str):
        self.app = app
        self.path = str(path)
        self._file_source: str | None = None

    @property
    def engine(self) -> Engine:
        engine = self.app.engines.engine_for_path(self.path)
        if engine is None:
            raise UnknownEngineError(self.path)
        return engine

    def template_source(self, options: Mapping[str, Any]) -> str:
        body = options.get("template_body")
        if body is not None:
            return body
        if self._file_source is None:
            self._file_source = self.app.filesystem.read_text(self.path)
        return self._file_source

    def embeds_content(self, options: Mapping[str, Any]) -> bool:
        """Whether this file is a layout (references the content slot)."""
        return self.engine.embeds_content(self.template_source(options))

    def render(
        self,
        locals: Mapping[str, Any],
        options: Mapping[str, Any],
        context: "TemplateContext",
        block: str | None = None,
    ) -> str:
        """Render the file with `locals` visible, embedding `block` if given."""
        engine = self.engine
        source = self.template_source(options)

        context.current_engine = engine.name
        variables = context.variables()
        variables.update(locals)

        log.debug(f"Rendering {self.path} with {engine.name}")
        return engine.render(source, variables, block=block)
