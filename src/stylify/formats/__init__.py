"""Output formats for styled text."""

from stylify.formats.base import OutputFormat
from stylify.formats.html_format import HTMLFormat
from stylify.formats.text_format import TextFormat
from stylify.formats.ansi_format import ANSIFormat
from stylify.formats.delta_format import DeltaFormat
from stylify.formats.spans_format import SpansFormat

__all__ = [
    "OutputFormat",
    "HTMLFormat",
    "TextFormat",
    "ANSIFormat",
    "DeltaFormat",
    "SpansFormat",
]

# Map format names to classes
FORMAT_MAP: dict[str, type[OutputFormat]] = {
    "html": HTMLFormat,
    "text": TextFormat,
    "ansi": ANSIFormat,
    "delta": DeltaFormat,
    "spans": SpansFormat,
}

SUPPORTED_FORMATS = tuple(FORMAT_MAP.keys())


def get_format(name: str) -> type[OutputFormat]:
    """Get the output format class for a format name."""
    key = name.lower()
    if key not in FORMAT_MAP:
        raise ValueError(
            f"Unsupported output format: {name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    return FORMAT_MAP[key]
