"""Document tree models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

FORMAT_FLAGS: tuple[str, ...] = (
    "italic",
    "bold",
    "underline",
    "strikethrough",
    "code",
    "highlight",
    "small",
    "subscript",
    "superscript",
)


class ListType(str, Enum):
    """Kind of list container."""

    ORDERED = "ordered"
    UNORDERED = "unordered"


class TextNode(BaseModel):
    """A run of text sharing one set of formatting flags.

    Flags are either ``True`` or unset; ``False`` is normalized to unset so the
    serialized form only ever carries ``true`` flags.
    """

    type: Literal["text"] = "text"
    value: str
    italic: bool | None = None
    bold: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    code: bool | None = None
    highlight: bool | None = None
    small: bool | None = None
    subscript: bool | None = None
    superscript: bool | None = None

    @field_validator(*FORMAT_FLAGS)
    @classmethod
    def _drop_false_flags(cls, v: bool | None) -> bool | None:
        return True if v else None

    @classmethod
    def with_flags(cls, value: str, flags: frozenset[str] | set[str] = frozenset()) -> TextNode:
        """Build a run from a value and a set of flag names."""
        return cls(value=value, **{flag: True for flag in flags})

    def flags(self) -> frozenset[str]:
        """Return the names of the flags set on this run."""
        return frozenset(flag for flag in FORMAT_FLAGS if getattr(self, flag))


class ParagraphNode(BaseModel):
    """A ``<p>`` block."""

    type: Literal["paragraph"] = "paragraph"
    children: list[TextNode] = Field(default_factory=list)


class HeadingNode(BaseModel):
    """An ``<h1>``..``<h6>`` block."""

    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    children: list[TextNode] = Field(default_factory=list)


class ListItemNode(BaseModel):
    """A single ``<li>`` inside a list."""

    type: Literal["listItem"] = "listItem"
    children: list[TextNode] = Field(default_factory=list)


class ListNode(BaseModel):
    """A ``<ul>`` or ``<ol>`` block."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["list"] = "list"
    list_type: ListType = Field(..., alias="listType")
    children: list[ListItemNode] = Field(default_factory=list)


BlockNode = Annotated[
    Union[ParagraphNode, HeadingNode, ListNode],
    Field(discriminator="type"),
]


class RootNode(BaseModel):
    """Top of the document tree; children are block nodes only."""

    type: Literal["root"] = "root"
    children: list[BlockNode] = Field(default_factory=list)
