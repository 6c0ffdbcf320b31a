"""Application - the build context shared by every render call.

Owns the config, the engine registry, the resolution cache (one per build),
the filesystem and the optional locale accessor.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from qwsite.cache import ResolutionCache
from qwsite.config import SiteConfig
from qwsite.context import TemplateContext
from qwsite.exceptions import PageNotFound
from qwsite.engines import EngineRegistry, default_registry
from qwsite.filesystem import FileSystem
from qwsite.i18n import GlobalLocale, LocaleAccessor
from qwsite.locator import resolve_template
from qwsite.renderer import TemplateRenderer

log = logging.getLogger(__name__)


class Application:
    """A site being built."""

    template_context_class: type[TemplateContext] = TemplateContext

    def __init__(
        self,
        config: SiteConfig | None = None,
        engines: EngineRegistry | None = None,
        filesystem: FileSystem | None = None,
        locale: LocaleAccessor | None = None,
        cache: ResolutionCache | None = None,
    ):
        self.config = config or SiteConfig()
        if engines is None:
            engines = default_registry(self.config)
        self.engines = engines
        self.filesystem = filesystem or FileSystem()
        self.locale = locale
        self.cache = cache if cache is not None else ResolutionCache()

    @classmethod
    def from_config_file(cls, path: Path, **kwargs: Any) -> "Application":
        """Build an application from qwsite.yaml.

        A process-wide locale accessor seeded with `default_lang` is installed
        unless one is passed in.
        """
        config = SiteConfig.load(path)
        kwargs.setdefault("locale", GlobalLocale(config.default_lang))
        log.debug(f"Loaded config from {path} (source: {config.source_dir})")
        return cls(config, **kwargs)

    @property
    def source_dir(self) -> Path:
        return self.config.source_dir

    def resolve(
        self, request_path: str, options: dict[str, Any] | None = None
    ) -> str | None:
        """Resolve a logical path to a template file, or None."""
        return resolve_template(self, request_path, options)

    def render(
        self,
        request_path: str,
        locals: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Resolve `request_path` (templates or static files) and render it.

        Raises:
            PageNotFound: If nothing matches the path.
        """
        path = self.resolve(request_path, {"try_static": True})
        if path is None:
            raise PageNotFound(request_path, str(self.source_dir))
        return TemplateRenderer(self, path).render(locals, options)
