"""Tests for rendering merged spans."""

import pytest

from stylify.formatting.catalog import StyleCatalog
from stylify.formatting.ir import RenderedSpan, Span, StyledContent, TextStyle
from stylify.formatting.renderer import SpanRenderer, strip_delimiters


@pytest.fixture
def renderer(catalog: StyleCatalog) -> SpanRenderer:
    return SpanRenderer(catalog)


class TestStripDelimiters:
    """Tests for removing delimiters from a span's raw text."""

    def test_single_style(self):
        assert strip_delimiters("*bold*", ["*"]) == "bold"

    def test_combined_styles(self):
        assert strip_delimiters("~*_all three_*~", ["~", "*", "_"]) == "all three"

    def test_split_pieces_keep_whitespace(self):
        assert strip_delimiters("*bold text ", ["*"]) == "bold text "
        assert strip_delimiters(" inside*", ["*"]) == " inside"

    def test_other_characters_untouched(self):
        assert strip_delimiters("(x)", ["*"]) == "(x)"

    def test_never_fails_on_short_text(self):
        assert strip_delimiters("*", ["*", "_"]) == ""
        assert strip_delimiters("", ["*"]) == ""


class TestSpanRenderer:
    """Tests for walking spans and gaps."""

    def test_gaps_rendered_plain(self, renderer: SpanRenderer, keyed_plain):
        text = "(*bold*) _italic_,"
        spans = [Span(1, 6, ["*"]), Span(9, 16, ["_"])]

        units = renderer.render(text, spans, keyed_plain)

        assert units == [
            ("(", 0),
            RenderedSpan(1, StyledContent(TextStyle.BOLD, "bold"), ("*",)),
            (") ", 2),
            RenderedSpan(3, StyledContent(TextStyle.ITALIC, "italic"), ("_",)),
            (",", 4),
        ]

    def test_innermost_style_wraps_first(self, renderer: SpanRenderer):
        units = renderer.render("*_both_*", [Span(0, 7, ["*", "_"])])

        assert units == [
            RenderedSpan(
                0,
                StyledContent(TextStyle.BOLD, StyledContent(TextStyle.ITALIC, "both")),
                ("*", "_"),
            )
        ]

    def test_no_spans_renders_whole_text(self, renderer: SpanRenderer, keyed_plain):
        assert renderer.render("a *b", [], keyed_plain) == [("a *b", 0)]

    def test_empty_text(self, renderer: SpanRenderer, keyed_plain):
        assert renderer.render("", [], keyed_plain) == []

    def test_keys_strictly_increase(self, renderer: SpanRenderer, keyed_plain):
        text = "a *b* c _d_ e"
        units = renderer.render(text, [Span(2, 4, ["*"]), Span(8, 10, ["_"])], keyed_plain)

        keys = [u.key if isinstance(u, RenderedSpan) else u[1] for u in units]
        assert keys == [0, 1, 2, 3, 4]

    def test_wrap_hook_overrides_transform(self, renderer: SpanRenderer):
        def wrap(style, content):
            return f"<{style.name}>{content}</{style.name}>"

        units = renderer.render("*_x_*", [Span(0, 4, ["*", "_"])], wrap=wrap)

        assert units[0].content == "<bold><italic>x</italic></bold>"

    def test_unknown_delimiter_ignored(self, renderer: SpanRenderer):
        units = renderer.render("=x=", [Span(0, 2, ["="])])

        assert units == [RenderedSpan(0, "x", ("=",))]
