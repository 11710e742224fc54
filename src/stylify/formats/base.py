"""Abstract base class for output formats."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from stylify.formatting.ir import Content, RenderedSpan, Style

if TYPE_CHECKING:
    from stylify.core.stylifier import Stylifier


class OutputFormat(ABC):
    """Abstract base class for output formats.

    A format decides how unstyled text is rendered, how one style wraps
    rendered content, and how the resulting units are joined into the
    final string.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name used to select this format (e.g. 'html')."""
        ...

    @abstractmethod
    def render_plain(self, text: str, key: int) -> Content:
        """Render a run of unstyled text."""
        ...

    @abstractmethod
    def wrap(self, style: Style, content: Content) -> Content:
        """Apply one style to already-rendered content."""
        ...

    @abstractmethod
    def finish(self, units: Sequence[Content]) -> str:
        """Join rendered units into the final output."""
        ...

    def unwrap(self, unit: Content) -> Content:
        """Strip the RenderedSpan envelope off a styled unit."""
        if isinstance(unit, RenderedSpan):
            return unit.content
        return unit

    def render(self, stylifier: "Stylifier", text: str) -> str:
        """Style ``text`` and produce this format's output."""
        units = stylifier.style(text, self.render_plain, self.wrap)
        if not isinstance(units, list):
            units = [units]
        return self.finish([self.unwrap(unit) for unit in units])
