"""ANSI terminal output using rich."""

import io
from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from stylify.formats.base import OutputFormat
from stylify.formatting.ir import Content, Style, TextStyle

RICH_STYLES: dict[TextStyle, str] = {
    TextStyle.BOLD: "bold",
    TextStyle.ITALIC: "italic",
    TextStyle.STRIKE: "strike",
}


class ANSIFormat(OutputFormat):
    """Render styles as ANSI escape sequences.

    Styles without a terminal equivalent are rendered unstyled.
    """

    def __init__(self, color_system: str = "standard") -> None:
        self.color_system = color_system

    @property
    def name(self) -> str:
        return "ansi"

    def render_plain(self, text: str, key: int) -> Text:
        return Text(text)

    def wrap(self, style: Style, content: Content) -> Text:
        text = content.copy() if isinstance(content, Text) else Text(str(content))
        rich_style = RICH_STYLES.get(style.text_style)
        if rich_style:
            text.stylize(rich_style)
        return text

    def finish(self, units: Sequence[Content]) -> str:
        line = Text.assemble(*(u if isinstance(u, Text) else Text(str(u)) for u in units))
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            force_terminal=True,
            color_system=self.color_system,
            soft_wrap=True,
            highlight=False,
        )
        console.print(line, end="")
        return buffer.getvalue()
