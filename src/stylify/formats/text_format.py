"""Plain text output."""

from collections.abc import Sequence

from stylify.formats.base import OutputFormat
from stylify.formatting.ir import Content, Style


class TextFormat(OutputFormat):
    """Drop the delimiters of matched runs and keep only the text."""

    @property
    def name(self) -> str:
        return "text"

    def render_plain(self, text: str, key: int) -> str:
        return text

    def wrap(self, style: Style, content: Content) -> str:
        return str(content)

    def finish(self, units: Sequence[Content]) -> str:
        return "".join(str(unit) for unit in units)
