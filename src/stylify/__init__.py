"""Stylify - inline emphasis markers to styled spans.

Typical use:
    >>> from stylify import Stylifier
    >>> Stylifier().match("*bold*")
    [Span(start=0, end=5, styles=['*'])]
"""

__version__ = "0.1.0"

from stylify.errors import ConfigurationError, StylifyError
from stylify.formatting.catalog import StyleCatalog
from stylify.formatting.ir import (
    MergedSpan,
    RawSpan,
    RenderedSpan,
    Span,
    Style,
    StyleDefinition,
    StyledContent,
    TextStyle,
)
from stylify.core.stylifier import Stylifier, get_stylifier, match, style

__all__ = [
    "__version__",
    "ConfigurationError",
    "StylifyError",
    "StyleCatalog",
    "MergedSpan",
    "RawSpan",
    "RenderedSpan",
    "Span",
    "Style",
    "StyleDefinition",
    "StyledContent",
    "TextStyle",
    "Stylifier",
    "get_stylifier",
    "match",
    "style",
]
