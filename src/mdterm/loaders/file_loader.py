import logging
from dataclasses import dataclass
from pathlib import Path

from mdterm.observability import names
from mdterm.observability.base import MetricsHook, NoOpMetricsHook
from mdterm.parsers.markdown_parser import DEFAULT_TERMINAL_WIDTH, MarkdownParser
from mdterm.parsers.models import ParsedDocument

from .config import MarkdownConfig

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown", ".mdx"})


@dataclass(frozen=True)
class LoadedMarkdown:
    path: str | None
    content: str
    document: ParsedDocument


def read_markdown_file(
    path: str | Path,
    *,
    terminal_width: int = DEFAULT_TERMINAL_WIDTH,
    syntax_highlighting: bool = True,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LoadedMarkdown | None:
    """
    Read and parse a markdown file.

    - Returns None when the file does not exist
    - Other extensions are parsed anyway, with a warning
    """
    file_path = Path(path)
    if not file_path.is_file():
        logger.info("Markdown file not found: %s", file_path)
        metrics_hook.increment(names.FILES_MISSING_TOTAL)
        return None

    if file_path.suffix.lower() not in MARKDOWN_EXTENSIONS:
        logger.warning("File %s is not a markdown file", file_path)

    # utf-8-sig drops a leading BOM; undecodable bytes become U+FFFD
    content = file_path.read_text(encoding="utf-8-sig", errors="replace")
    parser = MarkdownParser(
        terminal_width=terminal_width,
        syntax_highlighting=syntax_highlighting,
        metrics_hook=metrics_hook,
    )
    document = parser.parse(content)
    metrics_hook.increment(names.FILES_LOADED_TOTAL)
    logger.info("Loaded %s (%d rendered lines)", file_path, document.total_lines)
    return LoadedMarkdown(path=str(file_path), content=content, document=document)


def load_document(
    config: MarkdownConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LoadedMarkdown:
    """Resolve a config to a parsed document.

    Direct content wins over file_path.

    Raises:
        FileNotFoundError: If file_path is set but missing.
        ValueError: If the config names neither content nor file_path.
    """
    if config.content:
        parser = MarkdownParser(
            terminal_width=config.terminal_width,
            syntax_highlighting=config.syntax_highlighting,
            metrics_hook=metrics_hook,
        )
        return LoadedMarkdown(
            path=None, content=config.content, document=parser.parse(config.content)
        )

    if config.file_path:
        loaded = read_markdown_file(
            config.file_path,
            terminal_width=config.terminal_width,
            syntax_highlighting=config.syntax_highlighting,
            metrics_hook=metrics_hook,
        )
        if loaded is None:
            raise FileNotFoundError(f"File not found: {config.file_path}")
        return loaded

    raise ValueError("config must provide content or file_path")
