"""Filesystem access used by the locator and renderers.

Kept behind a small class so tests can count or fake disk access.
"""

from __future__ import annotations

import glob as _glob
import re
from pathlib import Path

BRACE_PATTERN = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand shell-style brace alternatives, left to right.

    Example:
        >>> expand_braces("a.{css,scss}")
        ['a.css', 'a.scss']
    """
    match = BRACE_PATTERN.search(pattern)
    if match is None:
        return [pattern]

    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for alternative in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{alternative}{tail}"))
    return expanded


class FileSystem:
    """Blocking filesystem access."""

    def glob(self, pattern: str) -> list[str]:
        """Glob `pattern`, matches sorted by name."""
        return sorted(_glob.glob(pattern))

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")
