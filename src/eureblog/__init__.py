"""eureblog: render Eure documents into HTML articles."""

from eureblog.exceptions import (
    DuplicateSectionIdError,
    EureblogError,
    HighlightError,
    MarkOptionsError,
    RenderError,
)
from eureblog.highlight import CodeHighlighter
from eureblog.schemas import (
    AlertType,
    Document,
    Frontmatter,
    ListItem,
    MarkOptions,
    NormalItem,
    RenderedDocument,
    Section,
    Text,
    TocEntry,
    TocItem,
)
from eureblog.sections import render_document
from eureblog.templates import render_article_page, render_source_page
from eureblog.toc import build_toc

__all__ = [
    "AlertType",
    "CodeHighlighter",
    "Document",
    "DuplicateSectionIdError",
    "EureblogError",
    "Frontmatter",
    "HighlightError",
    "ListItem",
    "MarkOptions",
    "MarkOptionsError",
    "NormalItem",
    "RenderError",
    "RenderedDocument",
    "Section",
    "Text",
    "TocEntry",
    "TocItem",
    "build_toc",
    "render_article_page",
    "render_document",
    "render_source_page",
]
