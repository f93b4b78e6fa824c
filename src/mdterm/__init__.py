# Loaders
from .loaders import (
    LoadedMarkdown,
    MarkdownConfig,
    load_config,
    load_document,
    read_markdown_file,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DocumentParser,
    Heading,
    MarkdownParser,
    ParsedDocument,
    RenderedLine,
    StyledSegment,
    TocEntry,
    parse,
)

# Search
from .search import SearchMatch, search_document

# Styles
from .styles import ElementType, TerminalStyle

# Table of contents
from .toc import table_of_contents

# Wrapping
from .wrapping import word_wrap

__all__ = [
    # Loaders
    "LoadedMarkdown",
    "MarkdownConfig",
    "load_config",
    "load_document",
    "read_markdown_file",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentParser",
    "Heading",
    "MarkdownParser",
    "ParsedDocument",
    "RenderedLine",
    "StyledSegment",
    "TocEntry",
    "parse",
    # Search
    "SearchMatch",
    "search_document",
    # Styles
    "ElementType",
    "TerminalStyle",
    # Table of contents
    "table_of_contents",
    # Wrapping
    "word_wrap",
]
