"""Pygments-backed highlighting for embedded code in any registered language."""

from __future__ import annotations

import logging

from pygments import format as format_tokens
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_all_lexers, get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from eureblog.config import EUREBLOG_CSS_CLASS_PREFIX, EUREBLOG_PYGMENTS_STYLE
from eureblog.exceptions import HighlightError
from eureblog.html_utils import escape_attr, escape_html

logger = logging.getLogger(__name__)

_ACRONYMS = {"toml", "yaml", "json", "html", "css", "sql", "xml", "php", "r", "c"}
_DISPLAY_NAMES = {
    "rust": "Rust",
    "bash": "Bash",
    "shellscript": "Bash",
    "shell": "Bash",
    "sh": "Bash",
    "javascript": "JavaScript",
    "js": "JavaScript",
    "typescript": "TypeScript",
    "ts": "TypeScript",
    "python": "Python",
    "py": "Python",
    "ruby": "Ruby",
    "rb": "Ruby",
    "go": "Go",
    "golang": "Go",
    "java": "Java",
    "kotlin": "Kotlin",
    "swift": "Swift",
    "cpp": "C++",
    "c++": "C++",
    "csharp": "C#",
    "c#": "C#",
    "perl": "Perl",
    "lua": "Lua",
    "scala": "Scala",
    "haskell": "Haskell",
    "elixir": "Elixir",
    "erlang": "Erlang",
    "clojure": "Clojure",
    "markdown": "Markdown",
    "md": "Markdown",
    "dockerfile": "Dockerfile",
    "makefile": "Makefile",
}


def format_language_name(language: str) -> str:
    """Format a language tag for display in a code block badge."""
    lowered = language.lower()
    if lowered in _ACRONYMS:
        return lowered.upper()
    return _DISPLAY_NAMES.get(lowered, language.upper())


class CodeHighlighter:
    """Read-only highlighting context shared by every render call.

    Built once; holds the set of known language aliases, the Pygments style
    and the CSS class prefix. Nothing is written after construction, so one
    instance can serve any number of documents.
    """

    def __init__(
        self,
        *,
        style: str = EUREBLOG_PYGMENTS_STYLE,
        class_prefix: str = EUREBLOG_CSS_CLASS_PREFIX,
    ) -> None:
        try:
            get_style_by_name(style)
        except ClassNotFound as exc:
            raise HighlightError(f"Unknown Pygments style: {style!r}") from exc
        self.style = style
        self.class_prefix = class_prefix
        self.languages = frozenset(
            alias.lower() for _, aliases, _, _ in get_all_lexers() for alias in aliases
        )

    def has_language(self, language: str) -> bool:
        return language.lower() in self.languages

    def generate_css(self) -> str:
        """Stylesheet for blocks produced by :meth:`highlight`."""
        formatter = HtmlFormatter(style=self.style, classprefix=self.class_prefix)
        return formatter.get_style_defs(f".{self.class_prefix}code")

    def highlight(self, code: str, language: str) -> str:
        """Highlight a code block, falling back to an escaped ``<pre>`` block.

        Never raises: unknown languages and lexer failures degrade to plain
        monospace output.
        """
        display_name = format_language_name(language)
        try:
            lexer = self._lexer(language)
            html = pygments_highlight(code, lexer, self._formatter())
        except HighlightError:
            logger.warning("No highlighter for language %r, rendering plain block", language)
            return _plain_block(code, display_name)
        except Exception:
            logger.warning("Highlighting failed for language %r", language, exc_info=True)
            return _plain_block(code, display_name)

        return (
            f'<pre class="{self.class_prefix}code" data-language="{escape_attr(display_name)}">'
            f"<code>{html}</code></pre>"
        )

    def highlight_line(self, line: str, language: str) -> str | None:
        """Highlight a single line into bare ``<span>`` markup with no wrapper.

        Returns None when the language is unknown, the lexer fails, or the
        lexer's tokens do not reproduce the line exactly (Pygments normalizes
        carriage returns and drops a leading byte order mark).
        """
        body = line.removesuffix("\r")
        try:
            lexer = self._lexer(language, stripnl=False, ensurenl=False)
            tokens = list(lexer.get_tokens(body))
            if "".join(value for _, value in tokens) != body:
                logger.debug("Lexer %r altered line text, leaving it plain", language)
                return None
            html = format_tokens(tokens, self._formatter())
        except HighlightError:
            return None
        except Exception:
            logger.warning("Highlighting failed for language %r", language, exc_info=True)
            return None
        # The formatter terminates its last line; the input line has no newline.
        return html.removesuffix("\n") + escape_html(line[len(body) :])

    def _lexer(self, language: str, **options: object) -> Lexer:
        try:
            return get_lexer_by_name(language, **options)
        except ClassNotFound as exc:
            raise HighlightError(f"Unknown language: {language!r}") from exc

    def _formatter(self) -> HtmlFormatter:
        # Bare spans; callers add their own wrapper.
        return HtmlFormatter(nowrap=True, classprefix=self.class_prefix)


def _plain_block(code: str, display_name: str) -> str:
    return (
        f'<pre class="code-block code-block-plain" data-language="{escape_attr(display_name)}">'
        f"<code>{escape_html(code)}</code></pre>"
    )
