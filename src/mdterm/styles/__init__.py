from .tables import (
    DEFAULT_LANGUAGE,
    KEYWORDS,
    MARKDOWN_STYLES,
    SYNTAX_COLORS,
    keywords_for,
)
from .types import ElementType, TerminalStyle

__all__ = [
    "DEFAULT_LANGUAGE",
    "ElementType",
    "KEYWORDS",
    "MARKDOWN_STYLES",
    "SYNTAX_COLORS",
    "TerminalStyle",
    "keywords_for",
]
