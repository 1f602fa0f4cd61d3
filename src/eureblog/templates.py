"""Full HTML pages around rendered documents."""

from __future__ import annotations

from dataclasses import dataclass

from eureblog.config import (
    EUREBLOG_BASE_URL,
    EUREBLOG_DEFAULT_DESCRIPTION,
    EUREBLOG_GITHUB_REPO,
    EUREBLOG_SITE_NAME,
)
from eureblog.highlight import CodeHighlighter, render_eure_highlighted_with_line_numbers
from eureblog.html_utils import escape_attr, escape_html
from eureblog.schemas import Document
from eureblog.sections import render_document
from eureblog.text import render_text, text_to_plain


@dataclass
class OgpMeta:
    """OpenGraph metadata for a page."""

    title: str
    description: str
    url: str
    og_type: str = "website"


def base_layout(title: str, content: str, ogp: OgpMeta) -> str:
    """Wrap page content in the site layout."""
    page_title = escape_html(f"{title} | {EUREBLOG_SITE_NAME}")
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{page_title}</title>"
        f'<meta name="description" content="{escape_attr(ogp.description)}">'
        f'<meta property="og:title" content="{escape_attr(ogp.title)}">'
        f'<meta property="og:description" content="{escape_attr(ogp.description)}">'
        f'<meta property="og:url" content="{escape_attr(ogp.url)}">'
        f'<meta property="og:type" content="{escape_attr(ogp.og_type)}">'
        f'<meta property="og:site_name" content="{escape_attr(EUREBLOG_SITE_NAME)}">'
        f'<meta property="og:image" content="{escape_attr(EUREBLOG_BASE_URL)}/ogp.png">'
        '<link rel="icon" href="/favicon.ico">'
        '<link rel="stylesheet" href="/styles/main.css">'
        '<link rel="stylesheet" href="/styles/syntax.css">'
        '<link rel="stylesheet" href="/styles/eure-syntax.css">'
        "</head>"
        "<body>"
        '<header class="site-header"><nav class="site-nav">'
        f'<a class="site-title" href="/">{escape_html(EUREBLOG_SITE_NAME)}</a>'
        "</nav></header>"
        f'<main class="site-main">{content}</main>'
        '<footer class="site-footer"><p>Powered by Eure</p></footer>'
        "</body>"
        "</html>"
    )


def github_source_url(slug: str, commit_hash: str) -> str:
    return f"https://github.com/{EUREBLOG_GITHUB_REPO}/blob/{commit_hash}/articles/{slug}.eure"


def render_article_page(
    document: Document,
    slug: str,
    commit_hash: str | None,
    highlighter: CodeHighlighter,
) -> str:
    """Render a document as a complete article page.

    Raises:
        DuplicateSectionIdError: If any key appears twice in the document.
        MarkOptionsError: If a leaf carries invalid mark options.
    """
    rendered = render_document(document, highlighter)
    frontmatter = document.frontmatter

    meta = ""
    if frontmatter.date is not None:
        meta = (
            '<div class="article-meta">'
            f'<time class="article-date">{escape_html(frontmatter.date.content)}</time>'
            "</div>"
        )

    tags = ""
    if frontmatter.tags:
        tags = (
            '<div class="article-tags">'
            + "".join(f'<span class="article-tag">{escape_html(tag)}</span>' for tag in frontmatter.tags)
            + "</div>"
        )

    links = [f'<a class="article-source-link" href="/source/{escape_attr(slug)}.html">View source</a>']
    if commit_hash:
        links.append(
            f'<a class="article-github-link" href="{escape_attr(github_source_url(slug, commit_hash))}" '
            'target="_blank" rel="noopener noreferrer">GitHub</a>'
        )

    content = (
        '<article class="article">'
        '<header class="article-header">'
        f'<h1 class="article-title">{render_text(document.header, highlighter)}</h1>'
        f"{meta}"
        f'<div class="article-links">{"".join(links)}</div>'
        f"{tags}"
        "</header>"
        f'<div class="article-content">{rendered.content}</div>'
        "</article>"
    )

    title = text_to_plain(frontmatter.title, highlighter)
    ogp = OgpMeta(
        title=title,
        description=text_to_plain(frontmatter.description, highlighter),
        url=f"{EUREBLOG_BASE_URL}/articles/{slug}.html",
        og_type="article",
    )
    return base_layout(title, content, ogp)


def render_source_page(
    slug: str,
    title: str,
    source_content: str,
    commit_hash: str | None,
    highlighter: CodeHighlighter,
) -> str:
    """Render the line-numbered Eure source of an article."""
    actions = [
        f'<a class="source-back-link" href="/articles/{escape_attr(slug)}.html">← Back to article</a>'
    ]
    if commit_hash:
        actions.append(
            f'<a class="source-github-link" href="{escape_attr(github_source_url(slug, commit_hash))}" '
            'target="_blank" rel="noopener noreferrer">GitHub</a>'
        )

    content = (
        '<article class="source-view">'
        '<header class="source-header">'
        f'<h1 class="source-title">Source: {escape_html(title)}</h1>'
        f'<div class="source-actions">{"".join(actions)}</div>'
        "</header>"
        '<div class="source-content">'
        f"{render_eure_highlighted_with_line_numbers(source_content, highlighter)}"
        "</div>"
        "</article>"
    )

    ogp = OgpMeta(
        title=f"Source: {title}",
        description=EUREBLOG_DEFAULT_DESCRIPTION,
        url=f"{EUREBLOG_BASE_URL}/source/{slug}.html",
    )
    return base_layout(f"Source: {title}", content, ogp)
