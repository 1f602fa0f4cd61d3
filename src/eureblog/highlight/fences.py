"""Fenced code block matching for the Eure tokenizer."""

from __future__ import annotations

import re
from dataclasses import dataclass

FENCE_CHAR = "`"
MIN_FENCE_LENGTH = 3
MAX_FENCE_LENGTH = 6

FENCE_RUN_RE = re.compile(r"`+")
_LANGUAGE_RE = re.compile(r"[^\s`]*")


@dataclass(frozen=True)
class FenceMatch:
    """A complete fenced block: opening run, language tag, body, closing run."""

    start: int
    fence_length: int
    language: str
    content_start: int
    content_end: int

    @property
    def language_start(self) -> int:
        return self.start + self.fence_length

    @property
    def end(self) -> int:
        return self.content_end + self.fence_length


def match_fence(text: str, pos: int) -> FenceMatch | None:
    """Match a fenced block whose opening run starts at ``pos``.

    Returns None when ``pos`` is not the start of a 3-6 character run or when
    no closing run of the same length follows.
    """
    run = FENCE_RUN_RE.match(text, pos)
    if not run:
        return None
    fence_length = len(run.group())
    if not MIN_FENCE_LENGTH <= fence_length <= MAX_FENCE_LENGTH:
        return None

    language = _LANGUAGE_RE.match(text, run.end())
    content_start = language.end()
    for close in FENCE_RUN_RE.finditer(text, content_start):
        if len(close.group()) == fence_length:
            return FenceMatch(
                start=pos,
                fence_length=fence_length,
                language=language.group(),
                content_start=content_start,
                content_end=close.start(),
            )
    return None
