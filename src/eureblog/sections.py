"""Render the section tree of a document."""

from __future__ import annotations

from dataclasses import dataclass

from eureblog.highlight import CodeHighlighter
from eureblog.html_utils import escape_attr
from eureblog.schemas import (
    Document,
    Item,
    Leaf,
    ListItem,
    NormalItem,
    RenderedDocument,
    Section,
    TocItem,
)
from eureblog.schemas.document import TOP_SECTION_LEVEL
from eureblog.text import render_text
from eureblog.toc import build_toc, render_toc


@dataclass(frozen=True)
class _RenderContext:
    highlighter: CodeHighlighter
    toc_html: str


def render_document(document: Document, highlighter: CodeHighlighter) -> RenderedDocument:
    """Render every section of a document.

    The table of contents is built first; a duplicate key aborts the render
    before any markup is produced.

    Raises:
        DuplicateSectionIdError: If any key appears twice in the document.
        MarkOptionsError: If a leaf carries invalid mark options.
    """
    toc = build_toc(document, highlighter)
    context = _RenderContext(highlighter=highlighter, toc_html=render_toc(toc))
    content = _render_items(document.sections, TOP_SECTION_LEVEL, context)
    return RenderedDocument(toc=toc, content=content)


def _render_items(sections: dict[str, Item], level: int, context: _RenderContext) -> str:
    return "".join(_render_item(key, item, level, context) for key, item in sections.items())


def _render_item(key: str, item: Item, level: int, context: _RenderContext) -> str:
    if isinstance(item, TocItem):
        return context.toc_html

    data_key = escape_attr(key)
    if isinstance(item, NormalItem):
        body = _render_leaf(key, item.value, level, context)
        return f'<div class="content-item" data-key="{data_key}">{body}</div>'

    if isinstance(item, ListItem):
        body = "".join(
            f'<div class="content-list-item">{_render_leaf(key, value, level, context)}</div>'
            for value in item.values
        )
        return f'<div class="content-list" data-key="{data_key}">{body}</div>'

    raise TypeError(f"Unsupported item type: {type(item).__name__}")


def _render_leaf(key: str, leaf: Leaf, level: int, context: _RenderContext) -> str:
    if isinstance(leaf, Section):
        return _render_section(key, leaf, level, context)
    return render_text(leaf, context.highlighter)


def _render_section(key: str, section: Section, level: int, context: _RenderContext) -> str:
    tag = f"h{level}"
    header = render_text(section.header, context.highlighter)
    children = _render_items(section.sections, level + 1, context)
    return (
        f'<section class="article-section article-section-{tag}">'
        f'<{tag} class="section-header section-header-{tag}" id="{escape_attr(key)}">'
        f"{header}</{tag}>"
        f"{children}"
        "</section>"
    )
