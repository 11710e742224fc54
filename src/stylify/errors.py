"""Exception classes for Stylify.

Only configuration problems are reported to callers. Malformed or
unmatched markup is never an error: it renders as plain text.
"""

from typing import Optional


class StylifyError(Exception):
    """Base exception for all Stylify errors."""

    pass


class ConfigurationError(StylifyError):
    """Invalid style configuration, raised when a catalog is built.

    Raised for duplicate delimiter characters or style names, delimiters
    that are not a single usable character, and styles with no way to
    render them.
    """

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        char: Optional[str] = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Description of the problem
            name: Name of the offending style (optional)
            char: Offending delimiter character (optional)
        """
        self.name = name
        self.char = char

        subject = ""
        if name is not None:
            subject = f"Style '{name}'"
            if char is not None:
                subject += f" ({char!r})"
        elif char is not None:
            subject = f"Delimiter {char!r}"
        if subject:
            message = f"{subject}: {message}"

        super().__init__(message)
