"""Tolerant semantic tokenizer for Eure source text.

The tokenizer never fails: anything it does not recognize is left out of the
token stream and shows up as gap text when rendered. Fenced code block bodies
are also left as gaps so that the region compositor can highlight them with
the block's own language.
"""

from __future__ import annotations

import re

from eureblog.highlight.fences import FENCE_RUN_RE, FenceMatch, match_fence
from eureblog.highlight.tokens import SemanticToken, TokenModifier, TokenType

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
_HASH_KEY_RE = re.compile(r"#+")
_NUMBER_RE = re.compile(
    r"[+-]?(?:0x[0-9A-Fa-f_]+|\d[\d_]*(?:\.\d[\d_]*)?(?:[eE][+-]?\d+)?)"
)
_STRING_RE = re.compile(r'"(?:[^"\\\n]|\\.)*"?')
_LINE_COMMENT_RE = re.compile(r"//[^\n]*")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL)
_SPACES_RE = re.compile(r"[ \t]*")

KEYWORDS = frozenset({"true", "false", "null"})
_KEY_FOLLOWERS = frozenset("=:{.[")
_PUNCTUATION = frozenset("(),.")


def semantic_tokens(content: str) -> list[SemanticToken]:
    """Tokenize Eure text into a sorted, non-overlapping token list."""
    return scan_eure(content)[0]


def scan_eure(content: str) -> tuple[list[SemanticToken], list[FenceMatch]]:
    """Tokenize Eure text and return the fenced code blocks found on the way.

    Backticks inside strings, comments and text bindings belong to those
    tokens, so they never open a block.
    """
    tokenizer = _Tokenizer(content)
    tokens = tokenizer.run()
    return tokens, tokenizer.fences


class _Tokenizer:
    def __init__(self, content: str) -> None:
        self.content = content
        self.pos = 0
        self.tokens: list[SemanticToken] = []
        self.fences: list[FenceMatch] = []
        # Open brackets: "{" holds bindings, "[" holds values.
        self.contexts: list[str] = []
        self.after_equals = False
        self.in_section_header = False
        self.key_index_depth = 0

    def run(self) -> list[SemanticToken]:
        content = self.content
        while self.pos < len(content):
            char = content[self.pos]
            if char == "\n":
                self._end_line()
                self.pos += 1
            elif char in " \t\r":
                self.pos += 1
            elif content.startswith("//", self.pos):
                self._emit_match(_LINE_COMMENT_RE, TokenType.COMMENT)
            elif content.startswith("/*", self.pos):
                self._emit_match(_BLOCK_COMMENT_RE, TokenType.COMMENT)
            elif char == "`":
                self._backticks()
            elif char == '"':
                self._string()
            elif char == "@" and self._at_line_start():
                self._emit(self.pos, 1, TokenType.SECTION_MARKER)
                self.in_section_header = True
                self.pos += 1
            elif char == "$":
                self._extension()
            elif char == "#":
                self._hash_key()
            elif char == "=":
                self._emit(self.pos, 1, TokenType.OPERATOR)
                self.after_equals = True
                self.pos += 1
            elif char == ":":
                self._colon()
            elif char == "!":
                self._emit(self.pos, 1, TokenType.OPERATOR)
                self.pos += 1
            elif char in "{}[]":
                self._bracket(char)
            elif char in _PUNCTUATION:
                self._emit(self.pos, 1, TokenType.PUNCTUATION)
                if char == "," and not self._in_array():
                    self.after_equals = False
                self.pos += 1
            elif char.isdigit() or (char in "+-" and self._digit_follows()):
                self._emit_match(_NUMBER_RE, TokenType.NUMBER)
            elif _IDENT_RE.match(content, self.pos):
                self._identifier()
            else:
                self.pos += 1
        return self.tokens

    # -- helpers -----------------------------------------------------------

    def _emit(
        self,
        start: int,
        length: int,
        token_type: TokenType,
        modifiers: TokenModifier = TokenModifier.NONE,
    ) -> None:
        if length > 0:
            self.tokens.append(SemanticToken(start, length, token_type, modifiers))

    def _emit_match(
        self,
        pattern: re.Pattern[str],
        token_type: TokenType,
        modifiers: TokenModifier = TokenModifier.NONE,
    ) -> None:
        match = pattern.match(self.content, self.pos)
        if not match or match.end() == self.pos:
            self.pos += 1
            return
        self._emit(self.pos, match.end() - self.pos, token_type, modifiers)
        self.pos = match.end()

    def _end_line(self) -> None:
        self.after_equals = False
        self.in_section_header = False
        self.key_index_depth = 0

    def _at_line_start(self) -> bool:
        line_start = self.content.rfind("\n", 0, self.pos) + 1
        return not self.content[line_start : self.pos].strip()

    def _in_array(self) -> bool:
        return bool(self.contexts) and self.contexts[-1] == "["

    def _in_value(self) -> bool:
        return self.after_equals or self._in_array()

    def _digit_follows(self) -> bool:
        nxt = self.pos + 1
        return nxt < len(self.content) and self.content[nxt].isdigit()

    def _next_significant(self, pos: int) -> str:
        pos = _SPACES_RE.match(self.content, pos).end()
        return self.content[pos] if pos < len(self.content) else ""

    def _key_modifiers(self, end: int) -> TokenModifier:
        if self.in_section_header:
            return TokenModifier.SECTION_HEADER
        if self._next_significant(end) == "{":
            return TokenModifier.DEFINITION
        return TokenModifier.DECLARATION

    # -- token kinds -------------------------------------------------------

    def _backticks(self) -> None:
        run = FENCE_RUN_RE.match(self.content, self.pos)
        fence = match_fence(self.content, self.pos)
        if fence:
            self.fences.append(fence)
            self._emit(fence.start, fence.fence_length, TokenType.PUNCTUATION)
            self._emit(fence.language_start, len(fence.language), TokenType.DECORATOR)
            self._emit(fence.content_end, fence.fence_length, TokenType.PUNCTUATION)
            self.pos = fence.end
            return

        run_length = len(run.group())
        if run_length <= 2:
            line_end = self.content.find("\n", run.end())
            if line_end == -1:
                line_end = len(self.content)
            for close in FENCE_RUN_RE.finditer(self.content, run.end(), line_end):
                if len(close.group()) == run_length:
                    self._emit(self.pos, close.end() - self.pos, TokenType.STRING)
                    self.pos = close.end()
                    return

        self._emit(self.pos, run_length, TokenType.PUNCTUATION)
        self.pos = run.end()

    def _string(self) -> None:
        match = _STRING_RE.match(self.content, self.pos)
        end = match.end()
        if not self._in_value() and self._next_significant(end) in _KEY_FOLLOWERS:
            self._emit(self.pos, end - self.pos, TokenType.PROPERTY, self._key_modifiers(end))
        else:
            self._emit(self.pos, end - self.pos, TokenType.STRING)
        self.pos = end

    def _extension(self) -> None:
        self._emit(self.pos, 1, TokenType.EXTENSION_MARKER)
        self.pos += 1
        ident = _IDENT_RE.match(self.content, self.pos)
        if ident:
            self._emit(self.pos, ident.end() - self.pos, TokenType.EXTENSION_IDENT)
            self.pos = ident.end()

    def _hash_key(self) -> None:
        match = _HASH_KEY_RE.match(self.content, self.pos)
        end = match.end()
        if not self._in_value() and self._next_significant(end) in _KEY_FOLLOWERS:
            self._emit(self.pos, end - self.pos, TokenType.PROPERTY, self._key_modifiers(end))
        self.pos = end

    def _colon(self) -> None:
        self._emit(self.pos, 1, TokenType.OPERATOR)
        self.pos += 1
        if self._in_value():
            return
        # Text binding: the rest of the line is literal text.
        text_start = _SPACES_RE.match(self.content, self.pos).end()
        line_end = self.content.find("\n", text_start)
        if line_end == -1:
            line_end = len(self.content)
        text = self.content[text_start:line_end]
        if not text.strip() or text.startswith("`"):
            return
        text_end = text_start + len(text.rstrip())
        self._emit(text_start, text_end - text_start, TokenType.STRING)
        self.pos = text_end

    def _bracket(self, char: str) -> None:
        self._emit(self.pos, 1, TokenType.PUNCTUATION)
        self.pos += 1
        if char == "{":
            self.contexts.append("{")
            self.after_equals = False
        elif char == "}":
            if self.contexts and self.contexts[-1] == "{":
                self.contexts.pop()
            self.after_equals = False
        elif char == "[":
            if self._in_value():
                self.contexts.append("[")
            else:
                self.key_index_depth += 1
        elif self.key_index_depth:
            self.key_index_depth -= 1
        elif self._in_array():
            self.contexts.pop()

    def _identifier(self) -> None:
        match = _IDENT_RE.match(self.content, self.pos)
        start, end = self.pos, match.end()
        self.pos = end
        if end < len(self.content) and self.content[end] == "`":
            # Language prefix of inline code or a code block.
            self._emit(start, end - start, TokenType.DECORATOR)
        elif self._in_value():
            if match.group() in KEYWORDS:
                self._emit(start, end - start, TokenType.KEYWORD)
            else:
                self._emit(start, end - start, TokenType.PROPERTY)
        else:
            self._emit(start, end - start, TokenType.PROPERTY, self._key_modifiers(end))
