"""Semantic token types and token stream rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Callable, Iterable

from eureblog.html_utils import escape_html

CSS_PREFIX = "eure-"


class TokenType(str, Enum):
    """Closed set of token classifications produced by the Eure tokenizer."""

    KEYWORD = "keyword"
    NUMBER = "number"
    STRING = "string"
    COMMENT = "comment"
    OPERATOR = "operator"
    PROPERTY = "property"
    PUNCTUATION = "punctuation"
    MACRO = "macro"
    DECORATOR = "decorator"
    SECTION_MARKER = "section-marker"
    EXTENSION_MARKER = "extension-marker"
    EXTENSION_IDENT = "extension-ident"

    @property
    def css_class(self) -> str:
        return f"{CSS_PREFIX}{self.value}"


class TokenModifier(IntFlag):
    """Independent modifier bits attached to a token."""

    NONE = 0
    DECLARATION = 1
    DEFINITION = 2
    SECTION_HEADER = 4


MODIFIER_CLASSES: dict[TokenModifier, str] = {
    TokenModifier.DECLARATION: f"{CSS_PREFIX}mod-declaration",
    TokenModifier.DEFINITION: f"{CSS_PREFIX}mod-definition",
    TokenModifier.SECTION_HEADER: f"{CSS_PREFIX}mod-section-header",
}


@dataclass(frozen=True)
class SemanticToken:
    """A classified range ``[start, start + length)`` of the source text."""

    start: int
    length: int
    token_type: TokenType
    modifiers: TokenModifier = TokenModifier.NONE

    @property
    def end(self) -> int:
        return self.start + self.length


GapRenderer = Callable[[int, int], str]


def build_classes(token: SemanticToken) -> str:
    """Space-separated CSS classes for a token: its type, then any modifiers."""
    classes = [token.token_type.css_class]
    for modifier, css_class in MODIFIER_CLASSES.items():
        if token.modifiers & modifier:
            classes.append(css_class)
    return " ".join(classes)


def render_tokens(
    content: str,
    tokens: Iterable[SemanticToken],
    *,
    render_gap: GapRenderer | None = None,
) -> str:
    """Render a sorted, non-overlapping token stream into HTML.

    Text between tokens is passed to ``render_gap`` (escaped verbatim by
    default). Un-escaping the result yields ``content`` exactly.
    """
    gap = render_gap or (lambda start, end: escape_html(content[start:end]))
    parts: list[str] = []
    last_end = 0

    for token in tokens:
        if token.start > last_end:
            parts.append(gap(last_end, token.start))
        parts.append(_render_token(content[token.start : token.end], build_classes(token)))
        last_end = token.end

    if last_end < len(content):
        parts.append(gap(last_end, len(content)))

    return "".join(parts)


def _render_token(text: str, classes: str) -> str:
    # One span per line so that per-line wrapping never splits an element.
    return "\n".join(
        f'<span class="{classes}">{escape_html(line)}</span>' if line else ""
        for line in text.split("\n")
    )


_PALETTE: dict[TokenType, str] = {
    TokenType.KEYWORD: "color: #cba6f7;",
    TokenType.NUMBER: "color: #fab387;",
    TokenType.STRING: "color: #a6e3a1;",
    TokenType.COMMENT: "color: #6c7086; font-style: italic;",
    TokenType.OPERATOR: "color: #89dceb;",
    TokenType.PROPERTY: "color: #89b4fa;",
    TokenType.PUNCTUATION: "color: #9399b2;",
    TokenType.MACRO: "color: #f38ba8;",
    TokenType.DECORATOR: "color: #f9e2af;",
    TokenType.SECTION_MARKER: "color: #f5c2e7; font-weight: bold;",
    TokenType.EXTENSION_MARKER: "color: #94e2d5;",
    TokenType.EXTENSION_IDENT: "color: #94e2d5;",
}

_MODIFIER_STYLES: dict[TokenModifier, str] = {
    TokenModifier.DECLARATION: "font-weight: 600;",
    TokenModifier.DEFINITION: "font-weight: bold;",
    TokenModifier.SECTION_HEADER: "text-decoration: underline;",
}


def generate_eure_css() -> str:
    """Stylesheet for Eure highlighting (Catppuccin Mocha colors)."""
    lines = [
        "/* Eure Syntax Highlighting - Catppuccin Mocha */",
        ".code-block-eure {",
        "    background-color: #1e1e2e;",
        "    color: #cdd6f4;",
        "    padding: 1rem;",
        "    border-radius: 0.5rem;",
        "    overflow-x: auto;",
        "    font-family: 'JetBrains Mono', 'Fira Code', monospace;",
        "    font-size: 0.9rem;",
        "    line-height: 1.5;",
        "}",
        "",
        ".code-block-numbered { counter-reset: line; }",
        ".code-block-numbered .line::before {",
        "    counter-increment: line;",
        "    content: counter(line);",
        "    display: inline-block;",
        "    width: 3ch;",
        "    margin-right: 1.5ch;",
        "    text-align: right;",
        "    color: #585b70;",
        "    user-select: none;",
        "}",
        "",
    ]
    for token_type in TokenType:
        lines.append(f".{token_type.css_class} {{ {_PALETTE[token_type]} }}")
    lines.append("")
    lines.append("/* Modifiers */")
    for modifier, css_class in MODIFIER_CLASSES.items():
        lines.append(f".{css_class} {{ {_MODIFIER_STYLES[modifier]} }}")
    return "\n".join(lines) + "\n"
