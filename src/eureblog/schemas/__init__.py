"""Shared schemas for eureblog."""

from eureblog.schemas.document import (
    AlertType,
    Document,
    Frontmatter,
    Item,
    LanguageKind,
    Leaf,
    ListItem,
    MarkOptions,
    NormalItem,
    Section,
    Text,
    TocItem,
)
from eureblog.schemas.rendering import RenderedDocument
from eureblog.schemas.toc import TocEntry

__all__ = [
    "AlertType",
    "Document",
    "Frontmatter",
    "Item",
    "LanguageKind",
    "Leaf",
    "ListItem",
    "MarkOptions",
    "NormalItem",
    "RenderedDocument",
    "Section",
    "Text",
    "TocEntry",
    "TocItem",
]
