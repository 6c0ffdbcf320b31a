"""Base Engine class - one template backend.

An Engine is stateless with respect to a render call:
- Takes template source and the variables visible to it
- Has a render() method that returns text
- Optionally embeds child content (a layout's body) at its slot
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

# Name under which a layout's body is exposed to templates
CONTENT_SLOT = "yield_content"


class Engine(ABC):
    """Base class for template engines."""

    # Engine identifier, e.g. "jinja"
    name: str = ""

    # File extensions (without dot) handled by this engine, most preferred first
    extensions: tuple[str, ...] = ()

    @abstractmethod
    def render(
        self, source: str, variables: Mapping[str, Any], block: str | None = None
    ) -> str:
        """Render template source.

        Args:
            source: Template text
            variables: Names visible to the template
            block: Already-rendered body to expose at the content slot (layouts)

        Returns:
            Rendered text
        """
        pass

    @abstractmethod
    def embeds_content(self, source: str) -> bool:
        """Whether `source` references the content slot (i.e. is a layout)."""
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name} {list(self.extensions)}>"
