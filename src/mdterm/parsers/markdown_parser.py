# parsers/markdown_parser.py

import logging
from time import monotonic

from mdterm.observability import names
from mdterm.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .models import ParsedDocument, build_document
from .segmenter import BlockSegmenter

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_WIDTH = 80
BYTE_ORDER_MARK = "\ufeff"


class MarkdownParser(DocumentParser):
    """
    Markdown to styled terminal lines.
    - Block segmentation, then document assembly
    - terminal_width only sizes horizontal rules, paragraphs are not reflowed
    - Stateless between calls
    """

    def __init__(
        self,
        terminal_width: int = DEFAULT_TERMINAL_WIDTH,
        syntax_highlighting: bool = True,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.terminal_width = terminal_width
        self.syntax_highlighting = syntax_highlighting
        self.metrics_hook = metrics_hook
        logger.debug(
            "Initialized MarkdownParser with terminal_width=%s, syntax_highlighting=%s",
            terminal_width,
            syntax_highlighting,
        )

    def parse(self, content: str) -> ParsedDocument:
        start = monotonic()
        content = content.removeprefix(BYTE_ORDER_MARK)
        source_lines = content.replace("\r\n", "\n").split("\n")

        segmenter = BlockSegmenter(
            terminal_width=self.terminal_width,
            syntax_highlighting=self.syntax_highlighting,
        )
        document = build_document(segmenter.segment(source_lines))

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_TOTAL)
        self.metrics_hook.increment(names.PARSE_LINES_RENDERED, document.total_lines)
        self.metrics_hook.record_gauge(
            names.PARSE_HEADINGS_FOUND, len(document.headings)
        )
        logger.debug(
            "Parsed document %r: %d lines, %d headings",
            document.title,
            document.total_lines,
            len(document.headings),
        )
        return document


def parse(
    content: str,
    terminal_width: int = DEFAULT_TERMINAL_WIDTH,
    *,
    syntax_highlighting: bool = True,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument:
    """Parse markdown text into a ParsedDocument.

    Example:
        >>> doc = parse("# Title\\n\\nHello **world**")
        >>> doc.title
        'Title'
    """
    parser = MarkdownParser(
        terminal_width=terminal_width,
        syntax_highlighting=syntax_highlighting,
        metrics_hook=metrics_hook,
    )
    return parser.parse(content)
