"""Fold overlapping raw spans into a flat, non-overlapping span list.

Spans arrive sorted by start. Each one is folded into the running result
against the merged span it starts in:

* no overlap: inserted as a new merged span;
* contained: its styles are added to that span, splitting off leading
  and trailing pieces first when they are too far away to be the same
  run of delimiters (``*bold _italic_ bold*``);
* crossing the end of that span: dropped.

Whether two delimiter pairs are "the same run" is judged by the style
distance, the number of styles the two spans would carry together. In
``*_both_*`` the inner run starts one character after the outer one, so
the two collapse into a single span tagged ``['*', '_']``.
"""

from collections.abc import Iterable

from stylify.formatting.ir import MergedSpan, RawSpan, Span
from stylify.utils.logger import get_logger

logger = get_logger(__name__)


class SpanMerger:
    """Resolve overlaps between raw spans of different styles."""

    def fold(self, spans: Iterable[RawSpan]) -> list[MergedSpan]:
        """Fold sorted raw spans into merged spans.

        Args:
            spans: Raw spans sorted ascending by start

        Returns:
            Merged spans ordered by start, with ``spans[i].end <
            spans[i + 1].start`` for every adjacent pair
        """
        result: list[MergedSpan] = []
        for span in spans:
            self.fold_in(result, span.copy())
        return result

    def fold_in(self, result: list[MergedSpan], span: Span) -> bool:
        """Fold one span into ``result`` in place.

        Returns:
            False if the span was dropped as an ambiguous overlap
        """
        i = _target_index(result, span.start)
        if i < 0 or span.start > result[i].end:
            following = result[i + 1] if i + 1 < len(result) else None
            if following is not None and span.end >= following.start:
                _log_drop(span, following)
                return False
            result.insert(i + 1, span)
            return True

        target = result[i]
        if span.end > target.end:
            _log_drop(span, target)
            return False

        max_style_distance = len(target.styles) + len(span.styles)

        if span.start - target.start > max_style_distance:
            result.insert(i, Span(target.start, span.start - 1, list(target.styles)))
            i += 1
            target.start = span.start

        if target.end - span.end > max_style_distance:
            result.insert(i + 1, Span(span.end + 1, target.end, list(target.styles)))
            target.end = span.end

        target.styles.extend(span.styles)
        return True


def _target_index(result: list[MergedSpan], start: int) -> int:
    """Index of the last merged span starting at or before ``start``."""
    i = len(result) - 1
    while i >= 0 and result[i].start > start:
        i -= 1
    return i


def _log_drop(span: Span, other: Span) -> None:
    logger.debug(
        "Dropping %r span [%d, %d]: crosses %r span [%d, %d]",
        "".join(span.styles),
        span.start,
        span.end,
        "".join(other.styles),
        other.start,
        other.end,
    )
