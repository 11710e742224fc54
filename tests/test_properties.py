"""Property-based tests for pipeline invariants using Hypothesis.

These hold for any input text, including badly formed markup.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from stylify.core.stylifier import Stylifier
from stylify.formats import TextFormat
from stylify.formatting.ir import RenderedSpan

STYLIFIER = Stylifier()

MARKUP = st.text(alphabet="ab *_~\\\n().,$", max_size=80)
NO_DELIMITERS = st.text(alphabet="abcXYZ .,()\n\t$\\-#é", max_size=200)


class TestSpanInvariants:
    """Invariants of the merged span list."""

    @given(MARKUP)
    @settings(max_examples=300)
    def test_spans_never_overlap(self, text: str) -> None:
        spans = STYLIFIER.match(text)

        for left, right in zip(spans, spans[1:]):
            assert left.end < right.start

    @given(MARKUP)
    @settings(max_examples=200)
    def test_spans_within_text(self, text: str) -> None:
        for span in STYLIFIER.match(text):
            assert 0 <= span.start <= span.end < len(text)
            assert span.styles

    @given(MARKUP)
    @settings(max_examples=200)
    def test_gaps_and_spans_cover_text(self, text: str) -> None:
        pieces: list[str] = []
        last = 0
        for span in STYLIFIER.match(text):
            pieces.append(text[last : span.start])
            pieces.append(text[span.start : span.end + 1])
            last = span.end + 1
        pieces.append(text[last:])

        assert "".join(pieces) == text

    @given(MARKUP)
    @settings(max_examples=100)
    def test_deterministic(self, text: str) -> None:
        assert STYLIFIER.match(text) == STYLIFIER.match(text)
        assert STYLIFIER.style(text) == STYLIFIER.style(text)


class TestRenderInvariants:
    """Invariants of rendered output."""

    @given(NO_DELIMITERS)
    @settings(max_examples=100)
    def test_plain_fallback(self, text: str) -> None:
        def render_plain(chunk: str, key: int) -> tuple[str, int]:
            return (chunk, key)

        assert STYLIFIER.style(text, render_plain) == (text, 0)

    @given(MARKUP)
    @settings(max_examples=200)
    def test_keys_strictly_increase(self, text: str) -> None:
        units = STYLIFIER.style(text, lambda chunk, key: (chunk, key))
        if not isinstance(units, list):
            units = [units]

        keys = [u.key if isinstance(u, RenderedSpan) else u[1] for u in units]
        assert keys == list(range(len(keys)))

    @given(MARKUP)
    @settings(max_examples=100)
    def test_text_format_only_removes_characters(self, text: str) -> None:
        assert len(TextFormat().render(STYLIFIER, text)) <= len(text)
