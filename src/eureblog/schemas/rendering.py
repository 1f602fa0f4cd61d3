"""Render output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from eureblog.schemas.toc import TocEntry


class RenderedDocument(BaseModel):
    """Rendered section markup plus the table of contents it was built with."""

    toc: list[TocEntry] = Field(default_factory=list)
    content: str
