# parsers/models.py

from dataclasses import dataclass

from mdterm.styles.types import ElementType, TerminalStyle

UNTITLED = "Untitled Document"


@dataclass(frozen=True)
class StyledSegment:
    text: str
    style: TerminalStyle
    type: ElementType


@dataclass(frozen=True)
class RenderedLine:
    line_number: int
    segments: tuple[StyledSegment, ...]
    indent: int
    is_blank: bool
    source_line_start: int
    source_line_end: int

    @property
    def plain_text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    line_number: int


TocEntry = Heading


@dataclass(frozen=True)
class SegmentResult:
    """Raw output of the block segmenter, before the title fallback."""

    lines: tuple[RenderedLine, ...]
    headings: tuple[Heading, ...]
    title: str | None


@dataclass(frozen=True)
class ParsedDocument:
    lines: tuple[RenderedLine, ...]
    total_lines: int
    title: str
    headings: tuple[Heading, ...]


def build_document(result: SegmentResult) -> ParsedDocument:
    """
    Aggregate segmenter output into an immutable document.

    - total_lines always equals len(lines)
    - title falls back to "Untitled Document" when no level-1 heading exists
    """
    return ParsedDocument(
        lines=tuple(result.lines),
        total_lines=len(result.lines),
        title=result.title or UNTITLED,
        headings=tuple(result.headings),
    )
