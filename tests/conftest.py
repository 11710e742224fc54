"""Pytest fixtures for Stylify tests."""

import logging

import pytest

from stylify import config
from stylify.core.stylifier import Stylifier, reset_stylifier
from stylify.formatting.catalog import StyleCatalog


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Give every test fresh settings and a fresh global stylifier."""
    monkeypatch.setattr(config, "_settings", None)
    for var in ("STYLIFY_FORMAT", "STYLIFY_LOG_LEVEL", "STYLIFY_STYLES"):
        monkeypatch.delenv(var, raising=False)
    reset_stylifier()
    yield
    reset_stylifier()
    logging.getLogger("stylify").handlers.clear()


@pytest.fixture
def catalog() -> StyleCatalog:
    """The default bold/italic/strike catalog."""
    return StyleCatalog.default()


@pytest.fixture
def stylifier(catalog: StyleCatalog) -> Stylifier:
    """A stylifier over the default catalog."""
    return Stylifier(catalog)


@pytest.fixture
def keyed_plain():
    """A plain renderer that records the sequence key."""

    def render(text: str, key: int) -> tuple[str, int]:
        return (text, key)

    return render
