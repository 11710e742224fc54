"""JSON dump of merged spans, for debugging and tooling."""

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

from stylify.formats.base import OutputFormat
from stylify.formatting.ir import Content, Style

if TYPE_CHECKING:
    from stylify.core.stylifier import Stylifier


class SpansFormat(OutputFormat):
    """Emit the merged spans as a JSON list instead of rendered text."""

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent

    @property
    def name(self) -> str:
        return "spans"

    def render_plain(self, text: str, key: int) -> str:
        return text

    def wrap(self, style: Style, content: Content) -> Content:
        return content

    def finish(self, units: Sequence[Content]) -> str:
        return json.dumps(list(units), indent=self.indent, ensure_ascii=False)

    def render(self, stylifier: "Stylifier", text: str) -> str:
        return self.finish([span.to_dict() for span in stylifier.match(text)])
