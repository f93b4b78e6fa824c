from .config import MarkdownConfig, load_config
from .file_loader import (
    MARKDOWN_EXTENSIONS,
    LoadedMarkdown,
    load_document,
    read_markdown_file,
)

__all__ = [
    "MARKDOWN_EXTENSIONS",
    "LoadedMarkdown",
    "MarkdownConfig",
    "load_config",
    "load_document",
    "read_markdown_file",
]
