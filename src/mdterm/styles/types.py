# src/mdterm/styles/types.py

from dataclasses import dataclass, fields, replace
from enum import Enum


class ElementType(str, Enum):
    """Tag carried by every styled segment."""

    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    HEADING4 = "heading4"
    PARAGRAPH = "paragraph"
    CODE_BLOCK = "codeBlock"
    INLINE_CODE = "inlineCode"
    LIST = "list"
    ORDERED_LIST = "orderedList"
    BLOCKQUOTE = "blockquote"
    HORIZONTAL_RULE = "horizontalRule"
    LINK = "link"
    IMAGE = "image"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    TEXT = "text"
    BLANK = "blank"

    @classmethod
    def heading(cls, level: int) -> "ElementType":
        return cls(f"heading{min(max(level, 1), 4)}")


@dataclass(frozen=True)
class TerminalStyle:
    """Attribute bag for terminal rendering.

    Every attribute defaults to None, meaning "not set".
    """

    color: str | None = None
    background_color: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    dim: bool | None = None

    def merge(self, other: "TerminalStyle") -> "TerminalStyle":
        """Return a copy where every attribute set on `other` wins."""
        overrides = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **overrides)

    def with_dim(self) -> "TerminalStyle":
        return replace(self, dim=True)
