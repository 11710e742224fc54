"""Turn merged spans back into a sequence of rendered units."""

from collections.abc import Sequence
from typing import Callable, Optional

from stylify.formatting.catalog import StyleCatalog
from stylify.formatting.ir import Content, MergedSpan, RenderedSpan, Style

RenderPlain = Callable[[str, int], Content]
Wrap = Callable[[Style, Content], Content]


def render_plain_text(text: str, key: int) -> str:
    """Default plain renderer: the text itself."""
    return text


def strip_delimiters(raw: str, styles: Sequence[str]) -> str:
    """Remove the delimiters of ``styles`` from both ends of ``raw``.

    One character is tried at each end per style. A character is removed
    only if it is one of the span's delimiters, so the pieces of a split
    span keep their own text (``*bold `` loses only the ``*``).
    """
    content = raw
    for _ in styles:
        if content and content[0] in styles:
            content = content[1:]
        if content and content[-1] in styles:
            content = content[:-1]
    return content


class SpanRenderer:
    """Walk merged spans and the plain gaps between them."""

    def __init__(self, catalog: StyleCatalog) -> None:
        self.catalog = catalog

    def render(
        self,
        text: str,
        spans: Sequence[MergedSpan],
        render_plain: RenderPlain = render_plain_text,
        wrap: Optional[Wrap] = None,
    ) -> list[Content]:
        """Render ``text`` given its merged spans.

        Args:
            text: The original text
            spans: Merged spans, ordered and non-overlapping
            render_plain: Called as ``render_plain(text, key)`` for each gap
            wrap: Optional ``wrap(style, content)`` replacing each style's
                own transform

        Returns:
            Plain units and RenderedSpan units in text order, keyed 0, 1, ...
        """
        results: list[Content] = []
        last = 0
        key = 0

        for span in spans:
            if last < span.start:
                results.append(render_plain(text[last : span.start], key))
                key += 1

            results.append(self.render_span(text, span, key, wrap))
            key += 1
            last = span.end + 1

        if last < len(text):
            results.append(render_plain(text[last:], key))

        return results

    def render_span(
        self,
        text: str,
        span: MergedSpan,
        key: int,
        wrap: Optional[Wrap] = None,
    ) -> RenderedSpan:
        """Render one styled span, innermost style first."""
        content: Content = strip_delimiters(text[span.start : span.end + 1], span.styles)

        for char in reversed(span.styles):
            style = self.catalog.by_char(char)
            if style is None:
                continue
            content = wrap(style, content) if wrap else style.wrap(content)

        return RenderedSpan(key=key, content=content, styles=tuple(span.styles))
