import logging
from pathlib import Path

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class MarkdownConfig(BaseModel):
    title: str | None = None
    file_path: str | None = None
    content: str | None = None
    terminal_width: int = 80
    show_line_numbers: bool = True
    syntax_highlighting: bool = True
    wrap_lines: bool = True

    class Config:
        extra = "forbid"


def load_config(path: str | Path) -> MarkdownConfig:
    """Read a MarkdownConfig from a YAML file. An empty file gives defaults."""
    logger.info("Loading markdown config from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return MarkdownConfig(**data)
