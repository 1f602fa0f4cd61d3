"""Tests for text leaf rendering."""

from __future__ import annotations

import logging

import pytest

from eureblog import text as text_module
from eureblog.alerts import alert_icon
from eureblog.exceptions import MarkOptionsError
from eureblog.highlight import CodeHighlighter
from eureblog.schemas import AlertType, MarkOptions, Text
from eureblog.text import render_markdown, render_text, text_to_plain


class TestRenderText:
    """Tests for render_text."""

    def test_plaintext_is_escaped(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(content="a <b> & c")

        assert render_text(leaf, highlighter) == '<span class="text-plain">a &lt;b&gt; &amp; c</span>'

    def test_implicit_is_inline_code(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(content="x < y", language="implicit")

        assert render_text(leaf, highlighter) == '<code class="code-inline">x &lt; y</code>'

    def test_markdown(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(content="Hello *world*", language="markdown")

        html = render_text(leaf, highlighter)

        assert html.startswith('<div class="markdown-content">')
        assert "<p>Hello <em>world</em></p>" in html

    def test_markdown_allows_raw_html_and_tables(self, highlighter: CodeHighlighter) -> None:
        source = '<kbd>Ctrl</kbd>\n\n| a | b |\n|---|---|\n| 1 | 2 |\n\n~~gone~~'

        html = render_markdown(source, highlighter)

        assert "<kbd>Ctrl</kbd>" in html
        assert "<table>" in html
        assert "<s>gone</s>" in html

    def test_eure_leaf_is_highlighted(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(content='a = "b"', language="eure")

        html = render_text(leaf, highlighter)

        assert html.startswith('<pre class="code-block code-block-eure">')
        assert '<span class="eure-string">"b"</span>' in html

    def test_registered_language(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(content="fn main() {}\n", language="rust")

        html = render_text(leaf, highlighter)

        assert html.startswith('<pre class="hl-code" data-language="Rust">')

    def test_unregistered_language_degrades(self, highlighter: CodeHighlighter) -> None:
        """An unknown language tag renders as an escaped monospace block."""
        leaf = Text(content='fn main() { "<x>" }', language="rust-is-not-registered")

        html = render_text(leaf, highlighter)

        assert html == (
            '<pre class="code-block code-block-plain" data-language="RUST-IS-NOT-REGISTERED">'
            '<code>fn main() { "&lt;x&gt;" }</code></pre>'
        )


class TestMarkdownFences:
    """Tests for fenced code inside Markdown."""

    def test_nested_eure_fences(self, highlighter: CodeHighlighter) -> None:
        """A 4-backtick eure fence may hold a 3-backtick eure fence."""
        source = "Example:\n\n````eure\nexample = ```eure\nx = 1\n```\n````\n"

        html = render_markdown(source, highlighter)

        assert '<pre class="code-block code-block-eure"><code>' in html
        assert html.count('<span class="eure-property eure-mod-declaration">') == 2
        assert '<span class="eure-number">1</span>' in html
        assert '<span class="eure-decorator">eure</span>' in html

    def test_other_language_fence(self, highlighter: CodeHighlighter) -> None:
        html = render_markdown("```python\nx = 1\n```\n", highlighter)

        assert '<pre class="hl-code" data-language="Python">' in html

    def test_untagged_fence_uses_default_markup(self, highlighter: CodeHighlighter) -> None:
        html = render_markdown("```\na < b\n```\n", highlighter)

        assert "<pre><code>a &lt; b\n</code></pre>" in html

    def test_compilation_failure_falls_back_to_source(
        self,
        highlighter: CodeHighlighter,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        class BrokenParser:
            def render(self, content: str) -> str:
                raise ValueError("boom")

        monkeypatch.setattr(text_module, "_markdown_parser", lambda _highlighter: BrokenParser())

        with caplog.at_level(logging.WARNING, logger="eureblog.text"):
            html = render_markdown("<b>bold</b>", highlighter)

        assert html == '<div class="markdown-content">&lt;b&gt;bold&lt;/b&gt;</div>'
        assert "Markdown compilation failed" in caplog.text


class TestMarkOptions:
    """Tests for alerts and raw HTML."""

    def test_raw_html_is_emitted_verbatim(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(
            content='<iframe src="x"></iframe>',
            language="html",
            mark=MarkOptions(dangerously_inner_html=True),
        )

        assert render_text(leaf, highlighter) == '<iframe src="x"></iframe>'

    def test_raw_html_requires_html_language(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(content="<b>x</b>", language="markdown", mark=MarkOptions(dangerously_inner_html=True))

        with pytest.raises(MarkOptionsError, match="markdown"):
            render_text(leaf, highlighter)

    def test_raw_html_ignores_alert(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(
            content="<hr>",
            language="html",
            mark=MarkOptions(alert=AlertType.NOTE, dangerously_inner_html=True),
        )

        assert render_text(leaf, highlighter) == "<hr>"

    def test_warning_alert(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(content="Disk usage high", mark=MarkOptions(alert=AlertType.WARNING))

        html = render_text(leaf, highlighter)

        assert html.startswith('<div class="alert alert-warning">')
        assert '<p class="alert-title"><span class="alert-icon"><svg class="octicon octicon-warning"' in html
        assert "</svg></span>Warning</p>" in html
        assert (
            '<div class="alert-content"><span class="text-plain">Disk usage high</span></div></div>'
        ) in html

    @pytest.mark.parametrize("alert", list(AlertType))
    def test_every_alert_kind(self, alert: AlertType, highlighter: CodeHighlighter) -> None:
        leaf = Text(content="body", language="markdown", mark=MarkOptions(alert=alert))

        html = render_text(leaf, highlighter)

        assert html.startswith(f'<div class="alert alert-{alert.value.lower()}">')
        assert f"{alert.value.capitalize()}</p>" in html
        assert '<div class="markdown-content">' in html

    def test_alert_icons_are_distinct(self) -> None:
        icons = {alert_icon(alert) for alert in AlertType}

        assert len(icons) == len(AlertType)


class TestTextToPlain:
    """Tests for text_to_plain."""

    def test_plaintext_is_normalized(self, highlighter: CodeHighlighter) -> None:
        assert text_to_plain(Text(content="  A   <b>  title "), highlighter) == "A <b> title"

    def test_markdown_is_stripped(self, highlighter: CodeHighlighter) -> None:
        leaf = Text(content="**Bold** and [link](https://example.com)", language="markdown")

        assert text_to_plain(leaf, highlighter) == "Bold and link"
