from .base import DocumentParser
from .highlight import highlight_code
from .inline import format_inline
from .markdown_parser import MarkdownParser, parse
from .models import (
    Heading,
    ParsedDocument,
    RenderedLine,
    SegmentResult,
    StyledSegment,
    TocEntry,
    build_document,
)
from .segmenter import BlockSegmenter

__all__ = [
    "BlockSegmenter",
    "DocumentParser",
    "Heading",
    "MarkdownParser",
    "ParsedDocument",
    "RenderedLine",
    "SegmentResult",
    "StyledSegment",
    "TocEntry",
    "build_document",
    "format_inline",
    "highlight_code",
    "parse",
]
