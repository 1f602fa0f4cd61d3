"""Highlight Eure text together with the code blocks embedded in it.

Eure text is tokenized by :mod:`eureblog.highlight.eure_lexer`. Fenced code
blocks inside it are highlighted with their own language and spliced into the
gaps of the Eure token stream. Blocks tagged ``eure`` are run through this
module again, so nested Eure examples get the same classes as a top-level
document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eureblog.config import HOST_LANGUAGE
from eureblog.highlight.code import CodeHighlighter
from eureblog.highlight.eure_lexer import scan_eure
from eureblog.highlight.fences import FenceMatch
from eureblog.highlight.tokens import render_tokens
from eureblog.html_utils import escape_html

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodeRegion:
    """Body of a fenced code block, excluding its fences and language tag."""

    content_start: int
    content_end: int
    language: str


def find_code_regions(content: str) -> list[CodeRegion]:
    """Fenced code blocks of Eure text, in source order.

    Uses the tokenizer's own fence matches. Unterminated fences produce no
    region; their text stays ordinary Eure.
    """
    _, fences = scan_eure(content)
    return _regions(fences)


def render_eure_tokens(content: str, highlighter: CodeHighlighter) -> str:
    """Render Eure text as bare highlighted markup, without a wrapper."""
    tokens, fences = scan_eure(content)
    render_gap = _GapRenderer(content, _regions(fences), highlighter)
    return render_tokens(content, tokens, render_gap=render_gap)


def render_eure_highlighted(content: str, highlighter: CodeHighlighter) -> str:
    """Render Eure text as a highlighted code block."""
    body = render_eure_tokens(content, highlighter)
    return f'<pre class="code-block code-block-eure"><code>{body}</code></pre>'


def render_eure_highlighted_with_line_numbers(
    content: str, highlighter: CodeHighlighter
) -> str:
    """Render Eure text as a code block with one ``span.line`` per source line.

    Line numbers come from a CSS counter on ``.line``.
    """
    body = render_eure_tokens(content, highlighter)
    lines = "\n".join(f'<span class="line">{line}</span>' for line in body.split("\n"))
    return (
        '<pre class="code-block code-block-eure code-block-numbered">'
        f"<code>{lines}</code></pre>"
    )


def _regions(fences: list[FenceMatch]) -> list[CodeRegion]:
    return [
        CodeRegion(
            content_start=fence.content_start,
            content_end=fence.content_end,
            language=fence.language,
        )
        for fence in fences
    ]


class _GapRenderer:
    """Renders token gaps in order, splicing in highlighted region bodies.

    ``render_tokens`` asks for gaps in ascending order and regions are sorted,
    so a cursor walks the region list once per document.
    """

    def __init__(
        self, content: str, regions: list[CodeRegion], highlighter: CodeHighlighter
    ) -> None:
        # Regions without a language stay plain text.
        self.regions = [region for region in regions if region.language]
        self.content = content
        self.highlighter = highlighter
        self.cursor = 0

    def __call__(self, start: int, end: int) -> str:
        regions = self.regions
        while self.cursor < len(regions) and regions[self.cursor].content_end <= start:
            self.cursor += 1

        parts: list[str] = []
        pos = start
        index = self.cursor
        while index < len(regions) and regions[index].content_start < end:
            region = regions[index]
            overlap_start = max(region.content_start, pos)
            overlap_end = min(region.content_end, end)
            parts.append(escape_html(self.content[pos:overlap_start]))
            parts.append(
                _highlight_region(
                    self.content[overlap_start:overlap_end], region.language, self.highlighter
                )
            )
            pos = overlap_end
            index += 1
        parts.append(escape_html(self.content[pos:end]))
        return "".join(parts)


def _highlight_region(code: str, language: str, highlighter: CodeHighlighter) -> str:
    if language == HOST_LANGUAGE:
        # Region bodies exclude their fences, so the recursion always shrinks.
        return render_eure_tokens(code, highlighter)

    if not highlighter.has_language(language):
        logger.debug("Code region tagged %r left unhighlighted", language)
        return escape_html(code)

    # Line highlighting has no block wrapper, so newlines are re-inserted here.
    lines: list[str] = []
    for line in code.split("\n"):
        highlighted = highlighter.highlight_line(line, language)
        lines.append(escape_html(line) if highlighted is None else highlighted)
    return "\n".join(lines)
