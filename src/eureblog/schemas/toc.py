"""Table of contents models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TocEntry(BaseModel):
    """A visible, anchorable table of contents node."""

    id: str
    title: str
    level: int = Field(..., ge=2, le=3)
    children: list["TocEntry"] = Field(default_factory=list)
