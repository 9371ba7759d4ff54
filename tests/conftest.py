"""Pytest fixtures for Tagged Text tests."""

import pytest

from tagged_text import config
from tagged_text.core.builder import FragmentBuilder
from tagged_text.formatting.ir import TextRun, TextStyle
from tagged_text.formatting.parser import TaggedMarkupParser


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Make every test read settings from a clean environment."""
    for name in ("TAGGED_TEXT_LOG_LEVEL", "TAGGED_TEXT_NESTING", "TAGGED_TEXT_SCALE_FACTOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)


def wrap_bold(text: str) -> TextRun:
    """Builder used throughout the tests."""
    return TextRun(text=text, style=TextStyle.BOLD)


def wrap_italic(text: str) -> TextRun:
    return TextRun(text=text, style=TextStyle.ITALIC)


@pytest.fixture
def tag_to_builder() -> dict:
    """A valid mapping with two custom tags."""
    return {"hl": wrap_bold, "note": wrap_italic}


@pytest.fixture
def parser() -> TaggedMarkupParser:
    return TaggedMarkupParser()


@pytest.fixture
def builder() -> FragmentBuilder:
    return FragmentBuilder()
