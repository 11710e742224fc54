"""Core styling pipeline for Stylify."""

from stylify.core.stylifier import (
    Stylifier,
    get_stylifier,
    reset_stylifier,
    match,
    style,
)

__all__ = [
    "Stylifier",
    "get_stylifier",
    "reset_stylifier",
    "match",
    "style",
]
