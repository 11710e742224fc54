"""Matching, merging and rendering of inline emphasis."""

from stylify.formatting.ir import (
    TextStyle,
    StyleDefinition,
    Style,
    Span,
    RawSpan,
    MergedSpan,
    StyledContent,
    RenderedSpan,
    TextRun,
    TextBlock,
)
from stylify.formatting.catalog import StyleCatalog, DEFAULT_STYLE_DEFINITIONS
from stylify.formatting.matcher import SpanMatcher
from stylify.formatting.merger import SpanMerger
from stylify.formatting.renderer import SpanRenderer, render_plain_text

__all__ = [
    "TextStyle",
    "StyleDefinition",
    "Style",
    "Span",
    "RawSpan",
    "MergedSpan",
    "StyledContent",
    "RenderedSpan",
    "TextRun",
    "TextBlock",
    "StyleCatalog",
    "DEFAULT_STYLE_DEFINITIONS",
    "SpanMatcher",
    "SpanMerger",
    "SpanRenderer",
    "render_plain_text",
]
