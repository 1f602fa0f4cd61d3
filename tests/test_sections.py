"""Tests for document rendering."""

from __future__ import annotations

import pytest

from conftest import make_document, make_section, make_text
from eureblog.exceptions import DuplicateSectionIdError, MarkOptionsError
from eureblog.highlight import CodeHighlighter
from eureblog.schemas import ListItem, Section, Text, TocItem
from eureblog.sections import render_document


class TestRenderDocument:
    """Tests for render_document."""

    def test_normal_text_item(self, highlighter: CodeHighlighter) -> None:
        document = make_document(greeting=make_text("Hello"))

        rendered = render_document(document, highlighter)

        assert rendered.toc == []
        assert rendered.content == (
            '<div class="content-item" data-key="greeting">'
            '<span class="text-plain">Hello</span></div>'
        )

    def test_list_item(self, highlighter: CodeHighlighter) -> None:
        document = make_document(
            steps=ListItem(values=[Text(content="one"), Text(content="two", language="implicit")])
        )

        rendered = render_document(document, highlighter)

        assert rendered.content == (
            '<div class="content-list" data-key="steps">'
            '<div class="content-list-item"><span class="text-plain">one</span></div>'
            '<div class="content-list-item"><code class="code-inline">two</code></div>'
            "</div>"
        )

    def test_section_headings_follow_depth(self, highlighter: CodeHighlighter) -> None:
        document = make_document(
            intro=make_section("Intro", details=make_section("Details", body=make_text("x")))
        )

        content = render_document(document, highlighter).content

        assert content.startswith(
            '<div class="content-item" data-key="intro">'
            '<section class="article-section article-section-h2">'
            '<h2 class="section-header section-header-h2" id="intro">'
            '<span class="text-plain">Intro</span></h2>'
        )
        assert '<h3 class="section-header section-header-h3" id="details">' in content
        assert '<div class="content-item" data-key="body">' in content

    def test_level_six_heading(self, highlighter: CodeHighlighter) -> None:
        level6 = make_section("Six", body=make_text("deep"))
        document = make_document(
            two=make_section(
                "Two",
                three=make_section(
                    "Three", four=make_section("Four", five=make_section("Five", six=level6))
                ),
            )
        )

        content = render_document(document, highlighter).content

        assert '<h6 class="section-header section-header-h6" id="six">' in content
        assert "<h7" not in content

    def test_toc_marker_renders_table_of_contents(self, highlighter: CodeHighlighter) -> None:
        """A marker becomes the table of contents with one link per visible section."""
        document = make_document(
            toc=TocItem(),
            a=make_section("A", body=make_text("text")),
            b=make_section("B"),
            c=make_section("C"),
        )

        rendered = render_document(document, highlighter)

        assert rendered.content.startswith(
            '<details class="article-toc" open><summary>Table of Contents</summary>'
            '<nav><ul><li><a href="#a">A</a></li><li><a href="#b">B</a></li>'
            '<li><a href="#c">C</a></li></ul></nav></details>'
        )
        assert [entry.id for entry in rendered.toc] == ["a", "b", "c"]

    def test_toc_marker_nests_level_three_links(self, highlighter: CodeHighlighter) -> None:
        document = make_document(
            toc=TocItem(),
            a=make_section("A", a1=make_section("A1", a11=make_section("A11"))),
        )

        content = render_document(document, highlighter).content

        assert '<li><a href="#a">A</a><ul><li><a href="#a1">A1</a></li></ul></li>' in content
        assert 'href="#a11"' not in content

    def test_toc_marker_without_sections_renders_nothing(self, highlighter: CodeHighlighter) -> None:
        document = make_document(toc=TocItem(), p=make_text("only text"))

        content = render_document(document, highlighter).content

        assert "article-toc" not in content
        assert content.startswith('<div class="content-item" data-key="p">')

    def test_key_attributes_are_escaped(self, highlighter: CodeHighlighter) -> None:
        document = make_document(**{'a"b': make_text("x")})

        content = render_document(document, highlighter).content

        assert 'data-key="a&quot;b"' in content

    def test_list_of_sections_share_key_fails(self, highlighter: CodeHighlighter) -> None:
        document = make_document(
            parts=ListItem(values=[Section(header=Text(content="P1")), Section(header=Text(content="P2"))])
        )

        with pytest.raises(DuplicateSectionIdError):
            render_document(document, highlighter)

    def test_invalid_mark_options_abort_render(self, highlighter: CodeHighlighter) -> None:
        document = make_document(
            ok=make_text("fine"),
            bad=make_text("<b>x</b>", dangerously_inner_html=True),
        )

        with pytest.raises(MarkOptionsError):
            render_document(document, highlighter)
