"""Intermediate Representation for inline-styled text.

This module defines the data structures shared by the matching, merging
and rendering stages: style configuration, the spans produced while
scanning, and the rendered units handed back to the host.
"""

from dataclasses import dataclass, field
from enum import Flag, auto
from re import Pattern
from typing import Any, Callable, Optional


class TextStyle(Flag):
    """Text styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    STRIKE = auto()

    @classmethod
    def from_name(cls, name: str) -> "TextStyle":
        """Resolve a style name to its variant, NONE if unknown."""
        member = cls.__members__.get(name.upper())
        return member if member is not None else cls.NONE

    def wrap(self, content: "Content") -> "StyledContent":
        """Wrap already-rendered content in this style."""
        return StyledContent(style=self, content=content)


# Anything a transform or render callback may produce.
Content = Any

StyleTransform = Callable[[Content], Content]


@dataclass(frozen=True)
class StyleDefinition:
    """Configuration input for a single style.

    Attributes:
        name: Semantic name (e.g. "bold")
        char: The single delimiter character (e.g. "*")
        transform: Optional callable wrapping rendered content; falls back
            to the TextStyle variant matching ``name``
        editor_attrs: Passthrough attributes a hosting editor applies
        editor_attrs_reverse: Passthrough attributes that undo editor_attrs
    """

    name: str
    char: str
    transform: Optional[StyleTransform] = None
    editor_attrs: dict = field(default_factory=dict)
    editor_attrs_reverse: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Style:
    """A registered style with its compiled boundary pattern."""

    name: str
    char: str
    pattern: Pattern[str]
    text_style: TextStyle = TextStyle.NONE
    transform: Optional[StyleTransform] = None
    editor_attrs: dict = field(default_factory=dict)
    editor_attrs_reverse: dict = field(default_factory=dict)

    def wrap(self, content: Content) -> Content:
        """Apply this style to rendered content."""
        if self.transform is not None:
            return self.transform(content)
        return self.text_style.wrap(content)


@dataclass
class Span:
    """An inclusive ``[start, end]`` region tagged with delimiter characters.

    Raw spans coming out of the matcher carry exactly one style. Merged
    spans may carry several, ordered outermost first.
    """

    start: int
    end: int
    styles: list[str] = field(default_factory=list)

    def copy(self) -> "Span":
        return Span(self.start, self.end, list(self.styles))

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end, "styles": list(self.styles)}


# Aliases naming the two lifecycle stages of a span.
RawSpan = Span
MergedSpan = Span


@dataclass
class StyledContent:
    """Content wrapped in one style; nests for combined styles."""

    style: TextStyle
    content: Content

    @property
    def text(self) -> str:
        """Get the innermost plain text."""
        inner = self.content
        while isinstance(inner, StyledContent):
            inner = inner.content
        return str(inner)

    @property
    def combined_style(self) -> TextStyle:
        """Union of every style in the nesting chain."""
        style = self.style
        inner = self.content
        while isinstance(inner, StyledContent):
            style |= inner.style
            inner = inner.content
        return style


@dataclass
class RenderedSpan:
    """A styled unit of rendered output.

    Attributes:
        key: Sequence key, strictly increasing across one rendering
        content: Result of applying every style's transform
        styles: Delimiter characters applied, outermost first
    """

    key: int
    content: Content
    styles: tuple[str, ...] = ()


@dataclass
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content
        style: Combined style flags
    """

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style

    @property
    def strike(self) -> bool:
        """Check if this run is struck through."""
        return TextStyle.STRIKE in self.style

    def __str__(self) -> str:
        return self.text


@dataclass
class TextBlock:
    """A line or paragraph of text made of styled runs.

    Attributes:
        runs: List of TextRun objects making up this block
    """

    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get the plain text content without styling."""
        return "".join(run.text for run in self.runs)

    def append(self, text: str, style: TextStyle = TextStyle.NONE) -> None:
        """Append a new run to this block."""
        self.runs.append(TextRun(text=text, style=style))

    def __str__(self) -> str:
        return self.plain_text
