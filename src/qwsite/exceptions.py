"""Qwsite Exceptions

Custom exceptions for template resolution and rendering.
"""

from __future__ import annotations


class QwsiteError(Exception):
    """Base exception for all qwsite errors."""

    pass


class TemplateNotFound(QwsiteError):
    """Raised when an explicitly requested layout cannot be located."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Could not locate layout: {name}")


class LayoutMisuseError(QwsiteError):
    """Raised when a layout (embeds content) is rendered as a plain template."""

    def __init__(self, path: str, source_dir: str, layouts_dir: str):
        self.path = path
        self.layouts_dir = layouts_dir
        super().__init__(
            f"Tried to render a layout (embeds content) at {path} like it was a "
            f"template. Non-default layouts need to be in {source_dir}/{layouts_dir}."
        )


class UnknownEngineError(QwsiteError):
    """Raised when no engine is registered for a file being rendered."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No template engine registered for: {path}")


class PageNotFound(QwsiteError):
    """Raised when a logical path matches neither a template nor a static file."""

    def __init__(self, request_path: str, source_dir: str):
        self.request_path = request_path
        super().__init__(f"No template found for {request_path} in {source_dir}")


class ConfigError(QwsiteError):
    """Raised when the site configuration cannot be loaded."""

    pass


class TemplateError(QwsiteError):
    """Raised when an engine fails to interpolate a template."""

    pass
