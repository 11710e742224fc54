"""Main styling pipeline."""

from typing import Optional, Union

from stylify.config import get_settings
from stylify.formats import get_format
from stylify.formatting.catalog import StyleCatalog
from stylify.formatting.ir import (
    Content,
    MergedSpan,
    RenderedSpan,
    StyledContent,
    TextBlock,
    TextStyle,
)
from stylify.formatting.matcher import SpanMatcher
from stylify.formatting.merger import SpanMerger
from stylify.formatting.renderer import (
    RenderPlain,
    SpanRenderer,
    Wrap,
    render_plain_text,
)
from stylify.utils.logger import get_logger

logger = get_logger(__name__)


class Stylifier:
    """Orchestrates the styling pipeline.

    Pipeline:
    1. Skip everything if the text holds no registered delimiter
    2. Find raw spans for every style (SpanMatcher)
    3. Sort and fold them into non-overlapping spans (SpanMerger)
    4. Render plain gaps and styled spans (SpanRenderer)

    The catalog is only read, so one Stylifier can be shared freely.
    """

    def __init__(self, catalog: Optional[StyleCatalog] = None) -> None:
        """Initialize the stylifier.

        Args:
            catalog: Styles to recognise (default: bold, italic, strike)
        """
        self.catalog = catalog if catalog is not None else StyleCatalog.default()
        self.matcher = SpanMatcher(self.catalog)
        self.merger = SpanMerger()
        self.renderer = SpanRenderer(self.catalog)

    def has_delimiters(self, text: str) -> bool:
        """Check whether any registered delimiter occurs in ``text``."""
        return any(char in text for char in self.catalog.chars)

    def match(self, text: str) -> list[MergedSpan]:
        """Find the merged, non-overlapping styled spans of ``text``."""
        return self.merger.fold(self.matcher.find_all_styles(text))

    def style(
        self,
        text: str,
        render_plain: RenderPlain = render_plain_text,
        wrap: Optional[Wrap] = None,
    ) -> Union[Content, list[Content]]:
        """Run the full pipeline.

        Args:
            text: Text with inline delimiters
            render_plain: Called as ``render_plain(text, key)`` for unstyled text
            wrap: Optional ``wrap(style, content)`` overriding style transforms

        Returns:
            ``render_plain(text, 0)`` when no delimiter occurs at all,
            otherwise the list of rendered units in text order
        """
        if not self.has_delimiters(text):
            logger.debug("No delimiters in %d character(s), rendering as plain", len(text))
            return render_plain(text, 0)

        spans = self.match(text)
        return self.renderer.render(text, spans, render_plain, wrap)

    def render(self, text: str, format_name: str = "html") -> str:
        """Style ``text`` into one of the output formats.

        Raises:
            ValueError: If ``format_name`` is not a supported format
        """
        return get_format(format_name)().render(self, text)

    def style_block(self, text: str) -> TextBlock:
        """Style ``text`` into a TextBlock of flat runs."""
        block = TextBlock()
        units = self.style(text)
        if not isinstance(units, list):
            units = [units]

        for unit in units:
            if isinstance(unit, RenderedSpan):
                block.append(*_flatten(unit.content))
            elif unit:
                block.append(str(unit))
        return block


def _flatten(content: Content) -> tuple[str, TextStyle]:
    if isinstance(content, StyledContent):
        return content.text, content.combined_style
    return str(content), TextStyle.NONE


# Global stylifier instance
_stylifier: Optional[Stylifier] = None


def get_stylifier() -> Stylifier:
    """Get the global stylifier, building its catalog from settings once."""
    global _stylifier
    if _stylifier is None:
        settings = get_settings()
        catalog = StyleCatalog.build_all(settings.style_definitions())
        _stylifier = Stylifier(catalog)
    return _stylifier


def reset_stylifier() -> None:
    """Forget the global stylifier so the next call rebuilds it."""
    global _stylifier
    _stylifier = None


def match(text: str) -> list[MergedSpan]:
    """Match ``text`` with the global stylifier."""
    return get_stylifier().match(text)


def style(
    text: str,
    render_plain: RenderPlain = render_plain_text,
) -> Union[Content, list[Content]]:
    """Style ``text`` with the global stylifier."""
    return get_stylifier().style(text, render_plain)
