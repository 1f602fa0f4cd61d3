"""Document tree models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from eureblog.config import HOST_LANGUAGE

# Deepest section level; sections at this level hold text leaves only.
MAX_SECTION_LEVEL = 6
TOP_SECTION_LEVEL = 2

PLAINTEXT = "plaintext"
IMPLICIT = "implicit"
MARKDOWN = "markdown"


class AlertType(str, Enum):
    """GitHub-style alert kinds."""

    NOTE = "NOTE"
    TIP = "TIP"
    IMPORTANT = "IMPORTANT"
    WARNING = "WARNING"
    CAUTION = "CAUTION"

    @property
    def css_suffix(self) -> str:
        return self.value.lower()

    @property
    def label(self) -> str:
        return self.value.capitalize()


class LanguageKind(str, Enum):
    """How a text leaf is rendered, derived from its language tag."""

    PLAINTEXT = "plaintext"
    IMPLICIT = "implicit"
    MARKDOWN = "markdown"
    HOST = "host"
    OTHER = "other"


def classify_language(language: str) -> LanguageKind:
    """Map a language tag onto the closed set of rendering kinds."""
    if language == PLAINTEXT:
        return LanguageKind.PLAINTEXT
    if language == IMPLICIT:
        return LanguageKind.IMPLICIT
    if language == MARKDOWN:
        return LanguageKind.MARKDOWN
    if language == HOST_LANGUAGE:
        return LanguageKind.HOST
    return LanguageKind.OTHER


class MarkOptions(BaseModel):
    """Visual markers attached to a text leaf."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    alert: AlertType | None = None
    dangerously_inner_html: bool = Field(default=False, alias="dangerously-inner-html")


class Text(BaseModel):
    """A text leaf with a language tag.

    Attributes:
        content: The raw text.
        language: ``plaintext`` for untagged text, ``implicit`` for inline code
            without a tag, otherwise the tag itself (``markdown``, ``eure``,
            ``rust``, ...).
        mark: Optional alert / raw HTML markers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    content: str
    language: str = PLAINTEXT
    mark: MarkOptions = Field(default_factory=MarkOptions)

    @property
    def language_kind(self) -> LanguageKind:
        return classify_language(self.language)


class Section(BaseModel):
    """A header plus an ordered mapping of keyed child items.

    The nesting level is not stored; it follows from the section's position in
    the tree (sections directly under the document are level 2).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    header: Text
    sections: dict[str, Item] = Field(default_factory=dict)


Leaf = Union[Text, Section]


class NormalItem(BaseModel):
    """A single leaf."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["normal"] = "normal"
    value: Leaf

    @property
    def leaves(self) -> list[Leaf]:
        return [self.value]


class ListItem(BaseModel):
    """An ordered sequence of leaves rendered under one key."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["list"] = "list"
    values: list[Leaf] = Field(default_factory=list)

    @property
    def leaves(self) -> list[Leaf]:
        return list(self.values)


class TocItem(BaseModel):
    """Marks where the table of contents is placed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["toc"] = "toc"

    @property
    def leaves(self) -> list[Leaf]:
        return []


Item = Annotated[Union[NormalItem, ListItem, TocItem], Field(discriminator="kind")]


class Frontmatter(BaseModel):
    """Document metadata. ``draft`` is read by callers deciding what to publish."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: Text
    description: Text
    date: Text | None = None
    tags: list[str] = Field(default_factory=list)
    draft: bool = False


class Document(BaseModel):
    """Root of a parsed document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    frontmatter: Frontmatter
    header: Text
    sections: dict[str, Item] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_nesting_depth(self) -> Document:
        """Reject sections nested below the deepest allowed level."""
        _check_depth(self.sections, TOP_SECTION_LEVEL)
        return self


def _check_depth(sections: dict[str, Item], level: int) -> None:
    for key, item in sections.items():
        for leaf in item.leaves:
            if not isinstance(leaf, Section):
                continue
            if level > MAX_SECTION_LEVEL:
                err = f"Section {key!r} is nested deeper than level {MAX_SECTION_LEVEL}"
                raise ValueError(err)
            _check_depth(leaf.sections, level + 1)


Section.model_rebuild()
NormalItem.model_rebuild()
ListItem.model_rebuild()
Document.model_rebuild()
