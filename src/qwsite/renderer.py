"""TemplateRenderer - renders one path, pass by pass, then its layout."""

from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from qwsite import locator
from qwsite.config import AUTO_LAYOUT
from qwsite.engines import last_extension
from qwsite.exceptions import LayoutMisuseError, TemplateNotFound
from qwsite.file_renderer import FileRenderer
from qwsite.i18n import switch_locale

if TYPE_CHECKING:
    from qwsite.app import Application

log = logging.getLogger(__name__)


class TemplateRenderer:
    """Renders a template file, with layout, given its on-disk path."""

    def __init__(self, app: "Application", path: str):
        self.app = app
        self.path = str(path)

    def render(
        self,
        locals: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Render the template, with layout.

        Keeps rendering until every engine extension is used up, which handles
        chains like `style.css.j2.tpl`: the `.tpl` pass runs first and its
        output becomes the source of the `.j2` pass.

        Args:
            locals: Variables visible to the templates (copied, read-only).
            options: layout, layout_engine, lang (copied).

        Returns:
            Rendered text.

        Raises:
            TemplateNotFound: An explicit layout could not be located.
            LayoutMisuseError: A layout was rendered as a plain template.
        """
        path = self.path
        locs: Mapping[str, Any] = MappingProxyType(dict(locals or {}))
        opts: dict[str, Any] = dict(options or {})

        engine = self._engine_hint(path)

        with switch_locale(self.app.locale, opts.get("lang")):
            context = self.app.template_context_class(self.app, locs, opts)
            init_helpers = getattr(context, "init_helpers", None)
            if callable(init_helpers):
                init_helpers()

            content: str | None = None
            while self.app.engines.is_template(path):
                if content is not None:
                    opts["template_body"] = content

                content_renderer = FileRenderer(self.app, path)
                if content_renderer.embeds_content(opts):
                    raise LayoutMisuseError(
                        path, str(self.app.source_dir), self.app.config.layouts_dir
                    )
                content = content_renderer.render(locs, opts, context)

                path = os.path.splitext(path)[0]

            # Files without an engine extension are served as-is, never wrapped
            if content is None:
                log.debug(f"{self.path} has no engine extension, returning raw")
                return self.app.filesystem.read_text(self.path)

            # The layout reads its own file, never a previous pass's output
            opts.pop("template_body", None)

            layout_path = self.fetch_layout(engine, opts)
            if layout_path:
                log.debug(f"Wrapping {self.path} in layout {layout_path}")
                layout_renderer = FileRenderer(self.app, layout_path)
                content = layout_renderer.render(locs, opts, context, block=content)

            return content

    def _engine_hint(self, path: str) -> str:
        """Engine id for the path's extension, or the bare extension."""
        ext = last_extension(path)
        engine = self.app.engines.engine_for(ext) if ext else None
        return engine.name if engine is not None else ext

    def fetch_layout(self, engine: str, options: Mapping[str, Any]) -> str | bool:
        """Find the layout for a given engine.

        Returns:
            Layout path, or False when no layout applies.
        """
        # The layout name comes from either the options or the site default
        if "layout" in options:
            local_layout = options["layout"]
        else:
            local_layout = self.app.config.layout
        if not local_layout:
            return False

        # The layout engine can be set in options, engine options or defaults
        # to the template's own engine
        engine_options = self.app.config.engine_options(engine)
        if "layout_engine" in options:
            layout_engine = options["layout_engine"]
        elif engine_options.layout_engine:
            layout_engine = engine_options.layout_engine
        else:
            layout_engine = engine

        if local_layout == AUTO_LAYOUT:
            return self.locate_layout("layout", layout_engine) or False

        layout_path = self.locate_layout(local_layout, layout_engine)
        if layout_path:
            return layout_path
        raise TemplateNotFound(str(local_layout))

    def locate_layout(self, name: str, preferred_engine: str | None = None) -> str | None:
        return locator.locate_layout(self.app, name, preferred_engine or None)

    def resolve_template(
        self, request_path: str, options: dict[str, Any] | None = None
    ) -> str | None:
        return locator.resolve_template(self.app, request_path, options)
