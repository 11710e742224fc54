"""HTML output."""

from collections.abc import Sequence
from html import escape as html_escape

from stylify.formats.base import OutputFormat
from stylify.formatting.ir import Content, Style, TextStyle

HTML_TAGS: dict[TextStyle, str] = {
    TextStyle.BOLD: "strong",
    TextStyle.ITALIC: "em",
    TextStyle.STRIKE: "s",
}


class Markup(str):
    """A string that is already escaped HTML."""


class HTMLFormat(OutputFormat):
    """Render styles as inline HTML elements.

    Bold, italic and strike map to ``<strong>``, ``<em>`` and ``<s>``.
    Any other style becomes ``<span class="style-NAME">``.
    """

    @property
    def name(self) -> str:
        return "html"

    def render_plain(self, text: str, key: int) -> Markup:
        return Markup(html_escape(text, quote=False))

    def wrap(self, style: Style, content: Content) -> Markup:
        if isinstance(content, Markup):
            inner = str(content)
        else:
            inner = html_escape(str(content), quote=False)
        tag = HTML_TAGS.get(style.text_style)
        if tag is None:
            return Markup(f'<span class="style-{html_escape(style.name)}">{inner}</span>')
        return Markup(f"<{tag}>{inner}</{tag}>")

    def finish(self, units: Sequence[Content]) -> str:
        return "".join(str(unit) for unit in units)
