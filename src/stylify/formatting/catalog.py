"""Registry of delimiter styles and their boundary patterns."""

import re
import string
from collections.abc import Iterable
from typing import Optional

from stylify.errors import ConfigurationError
from stylify.formatting.ir import (
    Style,
    StyleDefinition,
    StyleTransform,
    TextStyle,
)
from stylify.utils.logger import get_logger

logger = get_logger(__name__)

# POSIX [:punct:] minus "$" and the "\" escape character.
BOUNDARY_PUNCTUATION = "".join(c for c in string.punctuation if c not in "$\\")

ESCAPE_CHAR = "\\"

DEFAULT_STYLE_DEFINITIONS: tuple[StyleDefinition, ...] = (
    StyleDefinition(
        name="bold",
        char="*",
        editor_attrs={"bold": True},
        editor_attrs_reverse={"bold": False},
    ),
    StyleDefinition(
        name="italic",
        char="_",
        editor_attrs={"italic": True},
        editor_attrs_reverse={"italic": False},
    ),
    StyleDefinition(
        name="strike",
        char="~",
        editor_attrs={"strike": True},
        editor_attrs_reverse={"strike": False},
    ),
)


def boundary_class(chars: Iterable[str]) -> str:
    """Build the body of a regex character class of valid boundaries.

    The class holds punctuation, whitespace and every delimiter in
    ``chars``, so one style treats the others' delimiters as punctuation.
    """
    members = BOUNDARY_PUNCTUATION + "".join(chars)
    return "".join(re.escape(c) for c in dict.fromkeys(members)) + r"\s"


def compile_pattern(char: str, boundary: str) -> re.Pattern[str]:
    """Compile the matching pattern for one delimiter.

    Matches ``d<content>d`` where the content has no whitespace at either
    end, holds neither ``d`` nor a line break, and both delimiters sit
    next to a boundary character or the edge of the text.
    """
    d = re.escape(char)
    edge = rf"[^\s{d}]"
    content = rf"(?:{edge}|{edge}[^{d}\n\r]*{edge})"
    return re.compile(rf"(?<![^{boundary}]){d}{content}{d}(?![^{boundary}])")


class StyleCatalog:
    """The fixed set of registered styles.

    Every style's pattern is compiled against the same boundary class,
    which is recomputed whenever a style is registered.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, StyleDefinition] = {}
        self._styles: dict[str, Style] = {}
        self._by_char: dict[str, Style] = {}

    @classmethod
    def build_all(cls, definitions: Iterable[StyleDefinition]) -> "StyleCatalog":
        """Build a catalog from a batch of definitions.

        The whole batch is validated before anything is compiled.

        Raises:
            ConfigurationError: On a duplicate delimiter or name, or an
                invalid definition
        """
        definitions = list(definitions)
        seen_chars: dict[str, str] = {}
        seen_names: set[str] = set()
        for definition in definitions:
            _validate(definition)
            if definition.char in seen_chars:
                raise ConfigurationError(
                    f"delimiter already registered by '{seen_chars[definition.char]}'",
                    name=definition.name,
                    char=definition.char,
                )
            if definition.name in seen_names:
                raise ConfigurationError(
                    "name registered twice", name=definition.name
                )
            seen_chars[definition.char] = definition.name
            seen_names.add(definition.name)

        catalog = cls()
        for definition in definitions:
            catalog._definitions[definition.name] = definition
        catalog._compile()
        return catalog

    @classmethod
    def default(cls) -> "StyleCatalog":
        """Catalog with bold (*), italic (_) and strike (~)."""
        return cls.build_all(DEFAULT_STYLE_DEFINITIONS)

    def register(
        self,
        name: str,
        char: str,
        transform: Optional[StyleTransform] = None,
        editor_attrs: Optional[dict] = None,
        editor_attrs_reverse: Optional[dict] = None,
    ) -> Style:
        """Register one more style and recompile every pattern.

        Raises:
            ConfigurationError: If ``name`` or ``char`` is already taken
                or the definition is invalid
        """
        definition = StyleDefinition(
            name=name,
            char=char,
            transform=transform,
            editor_attrs=editor_attrs or {},
            editor_attrs_reverse=editor_attrs_reverse or {},
        )
        _validate(definition)
        if char in self._by_char:
            raise ConfigurationError(
                f"delimiter already registered by '{self._by_char[char].name}'",
                name=name,
                char=char,
            )
        if name in self._definitions:
            raise ConfigurationError("name registered twice", name=name)

        self._definitions[name] = definition
        self._compile()
        return self._styles[name]

    def _compile(self) -> None:
        boundary = boundary_class(d.char for d in self._definitions.values())
        styles: dict[str, Style] = {}
        for name, definition in self._definitions.items():
            styles[name] = Style(
                name=name,
                char=definition.char,
                pattern=compile_pattern(definition.char, boundary),
                text_style=TextStyle.from_name(name),
                transform=definition.transform,
                editor_attrs=dict(definition.editor_attrs),
                editor_attrs_reverse=dict(definition.editor_attrs_reverse),
            )
        self._styles = styles
        self._by_char = {style.char: style for style in styles.values()}
        logger.debug("Compiled %d style pattern(s): %s", len(styles), self.chars)

    @property
    def styles(self) -> dict[str, Style]:
        """Mapping of name to Style, in registration order."""
        return dict(self._styles)

    @property
    def chars(self) -> tuple[str, ...]:
        """Delimiter characters in registration order."""
        return tuple(style.char for style in self._styles.values())

    def by_char(self, char: str) -> Optional[Style]:
        """Look up the style owning a delimiter character."""
        return self._by_char.get(char)

    def __getitem__(self, name: str) -> Style:
        return self._styles[name]

    def __iter__(self):
        return iter(self._styles.values())

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, name: object) -> bool:
        return name in self._styles


def _validate(definition: StyleDefinition) -> None:
    """Check one definition in isolation."""
    name, char = definition.name, definition.char
    if not name:
        raise ConfigurationError("style name must not be empty", char=char)
    if len(char) != 1:
        raise ConfigurationError(
            "delimiter must be exactly one character", name=name, char=char
        )
    if char.isspace() or char == ESCAPE_CHAR:
        raise ConfigurationError(
            "whitespace and the escape character cannot be delimiters",
            name=name,
            char=char,
        )
    if definition.transform is None and TextStyle.from_name(name) == TextStyle.NONE:
        raise ConfigurationError(
            "no transform given and the name is not a built-in style", name=name
        )
