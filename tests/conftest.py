"""Test setup for eureblog."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from eureblog.highlight import CodeHighlighter  # noqa: E402
from eureblog.schemas import Document, Frontmatter, NormalItem, Section, Text  # noqa: E402


@pytest.fixture(scope="session")
def highlighter() -> CodeHighlighter:
    """Shared read-only highlighting context."""
    return CodeHighlighter()


def make_section(title: str, **items) -> NormalItem:
    """Wrap a section with the given keyed items in a normal item."""
    return NormalItem(value=Section(header=Text(content=title), sections=dict(items)))


def make_text(content: str, language: str = "plaintext", **mark) -> NormalItem:
    """Wrap a text leaf in a normal item."""
    return NormalItem(value=Text(content=content, language=language, mark=mark))


def make_document(**items) -> Document:
    """Build a document whose top-level mapping holds the given keyed items."""
    return Document(
        frontmatter=Frontmatter(
            title=Text(content="Test Article"),
            description=Text(content="A test article."),
        ),
        header=Text(content="Test Article"),
        sections=dict(items),
    )
