"""qwsite - template resolution and rendering for static sites.

Resolves logical output paths to template files, renders them through one or
more engines (chained extensions) and wraps them in layouts.
"""

from qwsite._version import __version__
from qwsite.app import Application
from qwsite.cache import ResolutionCache
from qwsite.config import AUTO_LAYOUT, EngineOptions, SiteConfig
from qwsite.context import TemplateContext
from qwsite.engines import Engine, EngineRegistry, default_registry
from qwsite.exceptions import (
    ConfigError,
    LayoutMisuseError,
    PageNotFound,
    QwsiteError,
    TemplateError,
    TemplateNotFound,
    UnknownEngineError,
)
from qwsite.file_renderer import FileRenderer
from qwsite.filesystem import FileSystem
from qwsite.i18n import ContextLocale, GlobalLocale, switch_locale
from qwsite.locator import locate_layout, resolve_template
from qwsite.renderer import TemplateRenderer

__all__ = [
    "__version__",
    # Build context
    "Application",
    "SiteConfig",
    "EngineOptions",
    "AUTO_LAYOUT",
    "ResolutionCache",
    "FileSystem",
    # Engines
    "Engine",
    "EngineRegistry",
    "default_registry",
    # Resolution / rendering
    "resolve_template",
    "locate_layout",
    "TemplateRenderer",
    "FileRenderer",
    "TemplateContext",
    # Locale
    "GlobalLocale",
    "ContextLocale",
    "switch_locale",
    # Errors
    "QwsiteError",
    "TemplateNotFound",
    "PageNotFound",
    "LayoutMisuseError",
    "UnknownEngineError",
    "TemplateError",
    "ConfigError",
]
