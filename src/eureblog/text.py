"""Render text leaves to HTML."""

from __future__ import annotations

import logging

try:
    from markdown_it import MarkdownIt
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "markdown-it-py is required for Markdown rendering (pip install markdown-it-py)."
    ) from exc

from eureblog.alerts import wrap_alert
from eureblog.config import HOST_LANGUAGE
from eureblog.exceptions import MarkOptionsError
from eureblog.highlight import CodeHighlighter, render_eure_highlighted
from eureblog.html_utils import escape_html, extract_plain_text, normalize_text
from eureblog.schemas import LanguageKind, Text

logger = logging.getLogger(__name__)

_RAW_HTML_LANGUAGE = "html"


def render_text(text: Text, highlighter: CodeHighlighter) -> str:
    """Render a text leaf, then apply its mark options.

    Raises:
        MarkOptionsError: If raw HTML output is requested for a leaf whose
            language is not ``html``.
    """
    mark = text.mark
    if mark.dangerously_inner_html:
        if text.language != _RAW_HTML_LANGUAGE:
            raise MarkOptionsError(
                "dangerously-inner-html requires language 'html', "
                f"got {text.language!r}"
            )
        return text.content

    content = _render_content(text, highlighter)
    if mark.alert is not None:
        return wrap_alert(content, mark.alert)
    return content


def text_to_plain(text: Text, highlighter: CodeHighlighter) -> str:
    """Plain-text form of a leaf, as used for table of contents titles."""
    if text.language_kind is LanguageKind.MARKDOWN:
        return extract_plain_text(render_markdown(text.content, highlighter))
    return normalize_text(text.content)


def render_markdown(content: str, highlighter: CodeHighlighter) -> str:
    """Compile Markdown (raw HTML allowed) into a ``div.markdown-content``.

    Compilation failures degrade to the escaped source.
    """
    try:
        html = _markdown_parser(highlighter).render(content)
    except Exception:
        logger.warning("Markdown compilation failed, emitting source text", exc_info=True)
        html = escape_html(content)
    return f'<div class="markdown-content">{html}</div>'


def _render_content(text: Text, highlighter: CodeHighlighter) -> str:
    kind = text.language_kind
    if kind is LanguageKind.PLAINTEXT:
        return f'<span class="text-plain">{escape_html(text.content)}</span>'
    if kind is LanguageKind.IMPLICIT:
        return f'<code class="code-inline">{escape_html(text.content)}</code>'
    if kind is LanguageKind.MARKDOWN:
        return render_markdown(text.content, highlighter)
    if kind is LanguageKind.HOST:
        return render_eure_highlighted(text.content, highlighter)
    return highlighter.highlight(text.content, text.language)


def _markdown_parser(highlighter: CodeHighlighter) -> MarkdownIt:
    def highlight_fence(code: str, language: str, _attrs: str) -> str:
        if not language:
            return ""
        if language == HOST_LANGUAGE:
            return render_eure_highlighted(code, highlighter)
        return highlighter.highlight(code, language)

    return MarkdownIt(
        "commonmark", {"html": True, "highlight": highlight_fence}
    ).enable(["table", "strikethrough"])
