"""Scan text for candidate emphasis runs, one style at a time."""

from collections.abc import Iterator

from stylify.formatting.catalog import StyleCatalog
from stylify.formatting.ir import RawSpan, Style


class SpanMatcher:
    """Find raw single-style spans.

    Matches of one style never overlap each other. Matches of different
    styles are found independently and usually do overlap; resolving
    that is the merger's job.
    """

    def __init__(self, catalog: StyleCatalog) -> None:
        self.catalog = catalog

    @staticmethod
    def find_all(text: str, style: Style) -> list[RawSpan]:
        """Find every match of one style, left to right."""
        return [
            RawSpan(start=m.start(), end=m.end() - 1, styles=[style.char])
            for m in style.pattern.finditer(text)
        ]

    def iter_spans(self, text: str) -> Iterator[RawSpan]:
        """Yield raw spans for every style, in registration order."""
        for style in self.catalog:
            if style.char not in text:
                continue
            yield from self.find_all(text, style)

    def find_all_styles(self, text: str) -> list[RawSpan]:
        """Pool raw spans of every style, sorted by start.

        The sort is stable, so spans starting at the same index keep
        the registration order of their styles.
        """
        return sorted(self.iter_spans(text), key=lambda span: span.start)
