"""Configuration parsing for qwsite.yaml

Schema:
- source: content source root (relative to the config file)
- layouts_dir: layouts directory, relative to source
- layout: default layout (false, "_auto_layout" or a layout name)
- default_lang: locale used when a render call does not pass `lang`
- engines: per-engine options (e.g. layout_engine overrides)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from qwsite.exceptions import ConfigError

# Sentinel for "use layout.* if one exists"
AUTO_LAYOUT = "_auto_layout"


class EngineOptions(BaseModel):
    """Options for a single template engine."""

    model_config = {"extra": "allow"}

    layout_engine: str | None = Field(
        default=None, description="Engine used to look up layouts for this engine"
    )
    options: dict[str, Any] = Field(
        default_factory=dict, description="Engine-specific settings"
    )


class SiteConfig(BaseModel):
    """Main qwsite.yaml configuration."""

    base_dir: Path = Field(default_factory=Path.cwd, description="Project root")
    source: str = Field(default="source", description="Content source directory")
    layouts_dir: str = Field(default="layouts", description="Layouts directory")
    layout: bool | str = Field(default=AUTO_LAYOUT, description="Default layout")
    default_lang: str | None = Field(default=None, description="Default locale")
    engines: dict[str, EngineOptions] = Field(
        default_factory=dict, description="Per-engine options"
    )

    @field_validator("layout", mode="before")
    @classmethod
    def normalize_layout(cls, value: Any) -> Any:
        """`layout: true` means automatic mode, `null` disables layouts."""
        if value is True:
            return AUTO_LAYOUT
        if value is None:
            return False
        return value

    @property
    def source_dir(self) -> Path:
        """Absolute content source root."""
        return (self.base_dir / self.source).resolve()

    def engine_options(self, engine: str) -> EngineOptions:
        """Options for `engine`, or empty defaults."""
        return self.engines.get(engine) or EngineOptions()

    @classmethod
    def load(cls, path: Path) -> "SiteConfig":
        """Load config from a yaml file.

        A missing file yields the defaults rooted at the file's directory.
        """
        base_dir = path.parent.resolve()
        if not path.exists():
            return cls(base_dir=base_dir)

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        data.setdefault("base_dir", base_dir)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config in {path}: {e}") from e


def find_config_file(start: Path | None = None) -> Path | None:
    """Find qwsite.yaml in `start` (default cwd) or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / "qwsite.yaml"
        if candidate.exists():
            return candidate
    return None
