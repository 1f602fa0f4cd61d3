"""Shared HTML utilities for document rendering."""

from __future__ import annotations

import html
import re

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def escape_html(text: str) -> str:
    """Escape text for use inside an element body."""
    return html.escape(text, quote=False)


def escape_attr(value: str) -> str:
    """Escape text for use inside a double-quoted attribute value."""
    return html.escape(value, quote=True)


def extract_plain_text(fragment: str) -> str:
    """Reduce an HTML fragment to its visible text with collapsed whitespace."""
    if not fragment.strip():
        return ""
    soup = BeautifulSoup(fragment, "lxml")
    return normalize_text(soup.get_text())


def normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
