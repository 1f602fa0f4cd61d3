"""Syntax highlighting for Eure text and embedded code."""

from eureblog.highlight.code import CodeHighlighter, format_language_name
from eureblog.highlight.compositor import (
    CodeRegion,
    find_code_regions,
    render_eure_highlighted,
    render_eure_highlighted_with_line_numbers,
    render_eure_tokens,
)
from eureblog.highlight.eure_lexer import scan_eure, semantic_tokens
from eureblog.highlight.tokens import (
    SemanticToken,
    TokenModifier,
    TokenType,
    generate_eure_css,
    render_tokens,
)

__all__ = [
    "CodeHighlighter",
    "CodeRegion",
    "SemanticToken",
    "TokenModifier",
    "TokenType",
    "find_code_regions",
    "format_language_name",
    "generate_eure_css",
    "render_eure_highlighted",
    "render_eure_highlighted_with_line_numbers",
    "render_eure_tokens",
    "render_tokens",
    "scan_eure",
    "semantic_tokens",
]
