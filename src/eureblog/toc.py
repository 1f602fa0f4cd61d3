"""Table of contents construction and rendering."""

from __future__ import annotations

import logging

from eureblog.exceptions import DuplicateSectionIdError
from eureblog.highlight import CodeHighlighter
from eureblog.html_utils import escape_attr, escape_html
from eureblog.schemas import Document, Item, Section, TocEntry
from eureblog.schemas.document import MAX_SECTION_LEVEL, TOP_SECTION_LEVEL
from eureblog.text import text_to_plain

logger = logging.getLogger(__name__)

# Deepest level that gets a visible entry; deeper keys are only checked for uniqueness.
MAX_TOC_LEVEL = 3


def build_toc(document: Document, highlighter: CodeHighlighter) -> list[TocEntry]:
    """Collect visible entries and check that every key in the document is unique.

    Section keys are registered at every depth; a list item holding several
    sections claims its key once per section. Keys of text leaves and markers
    are registered only inside level-6 sections, the deepest level. Only level 2
    and 3 sections become entries.

    Raises:
        DuplicateSectionIdError: On the first key seen twice, anywhere.
    """
    seen: set[str] = set()
    entries = _collect_entries(document.sections, TOP_SECTION_LEVEL, seen, highlighter)
    logger.debug("Registered %d keys, %d top-level toc entries", len(seen), len(entries))
    return entries


def count_entries(entries: list[TocEntry]) -> int:
    """Count entries in the tree."""
    total = 0
    for entry in entries:
        total += 1
        total += count_entries(entry.children)
    return total


def render_toc(entries: list[TocEntry]) -> str:
    """Render a collapsible table of contents, or nothing when it would be empty."""
    if not entries:
        return ""
    return (
        '<details class="article-toc" open>'
        "<summary>Table of Contents</summary>"
        f"<nav>{_render_entries(entries)}</nav>"
        "</details>"
    )


def _collect_entries(
    sections: dict[str, Item],
    level: int,
    seen: set[str],
    highlighter: CodeHighlighter,
) -> list[TocEntry]:
    entries: list[TocEntry] = []
    for key, item in sections.items():
        nested = [leaf for leaf in item.leaves if isinstance(leaf, Section)]
        # Each nested section claims the key as its anchor id; other keys
        # only count below the deepest section level.
        claims = len(nested) or int(level > MAX_SECTION_LEVEL)
        for _ in range(claims):
            if key in seen:
                raise DuplicateSectionIdError(key)
            seen.add(key)

        for leaf in nested:
            children = _collect_entries(leaf.sections, level + 1, seen, highlighter)
            if level <= MAX_TOC_LEVEL:
                entries.append(
                    TocEntry(
                        id=key,
                        title=text_to_plain(leaf.header, highlighter),
                        level=level,
                        children=children,
                    )
                )
    return entries


def _render_entries(entries: list[TocEntry]) -> str:
    items = []
    for entry in entries:
        children = _render_entries(entry.children) if entry.children else ""
        items.append(
            f'<li><a href="#{escape_attr(entry.id)}">{escape_html(entry.title)}</a>{children}</li>'
        )
    return f"<ul>{''.join(items)}</ul>"
