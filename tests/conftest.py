"""Shared fixtures: small source trees and an instrumented filesystem."""

from pathlib import Path

import pytest

from qwsite import Application, SiteConfig
from qwsite.filesystem import FileSystem


class CountingFileSystem(FileSystem):
    """FileSystem that records every lookup."""

    def __init__(self) -> None:
        self.globs: list[str] = []
        self.checks: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.globs) + len(self.checks)

    def glob(self, pattern: str) -> list[str]:
        self.globs.append(pattern)
        return super().glob(pattern)

    def is_file(self, path: str) -> bool:
        self.checks.append(path)
        return super().is_file(path)


def write(root: Path, relative: str, content: str = "") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def source(tmp_path):
    d = tmp_path / "source"
    d.mkdir()
    return d


@pytest.fixture
def make_app(tmp_path, source):
    """Build an Application rooted at tmp_path with `source/` as content root.

    `engines` is the EngineRegistry handed to the Application; per-engine
    config goes in `engine_options`.
    """

    def _make(**kwargs) -> Application:
        config_fields = ("layout", "layouts_dir", "default_lang")
        config_kwargs = {k: kwargs.pop(k) for k in config_fields if k in kwargs}
        if "engine_options" in kwargs:
            config_kwargs["engines"] = kwargs.pop("engine_options")
        config = SiteConfig(base_dir=tmp_path, **config_kwargs)
        return Application(config, **kwargs)

    return _make
