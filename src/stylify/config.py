"""Configuration management for Stylify."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stylify.formatting.catalog import DEFAULT_STYLE_DEFINITIONS
from stylify.formatting.ir import StyleDefinition


class StyleConfig(BaseModel):
    """One configured style: a name and its delimiter character."""

    name: str = Field(min_length=1)
    char: str = Field(min_length=1, max_length=1)
    editor_attrs: dict = Field(default_factory=dict)
    editor_attrs_reverse: dict = Field(default_factory=dict)

    def to_definition(self) -> StyleDefinition:
        """Convert to the catalog's definition type."""
        return StyleDefinition(
            name=self.name,
            char=self.char,
            editor_attrs=dict(self.editor_attrs),
            editor_attrs_reverse=dict(self.editor_attrs_reverse),
        )


def _default_styles() -> list[StyleConfig]:
    return [
        StyleConfig(
            name=d.name,
            char=d.char,
            editor_attrs=d.editor_attrs,
            editor_attrs_reverse=d.editor_attrs_reverse,
        )
        for d in DEFAULT_STYLE_DEFINITIONS
    ]


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output format used by the command line when --format is not given
    default_format: str = Field(
        default="html",
        alias="STYLIFY_FORMAT",
    )
    log_level: str = Field(
        default="WARNING",
        alias="STYLIFY_LOG_LEVEL",
    )

    # JSON list, e.g. [{"name": "bold", "char": "*"}]
    styles: list[StyleConfig] = Field(
        default_factory=_default_styles,
        alias="STYLIFY_STYLES",
    )

    def style_definitions(self) -> list[StyleDefinition]:
        """Configured styles as catalog definitions, in order."""
        return [style.to_definition() for style in self.styles]


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
