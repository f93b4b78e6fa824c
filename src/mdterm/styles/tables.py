# src/mdterm/styles/tables.py

"""Process-wide style and keyword tables.

Built once at import time and exposed through read-only mappings.
"""

from collections.abc import Mapping
from types import MappingProxyType

from .types import ElementType, TerminalStyle

MARKDOWN_STYLES: Mapping[ElementType, TerminalStyle] = MappingProxyType(
    {
        ElementType.HEADING1: TerminalStyle(color="cyan", bold=True),
        ElementType.HEADING2: TerminalStyle(color="cyan", bold=True),
        ElementType.HEADING3: TerminalStyle(color="magenta", bold=True),
        ElementType.HEADING4: TerminalStyle(color="yellow", bold=True),
        ElementType.PARAGRAPH: TerminalStyle(color="white"),
        ElementType.CODE_BLOCK: TerminalStyle(
            color="green", background_color="blackBright"
        ),
        ElementType.INLINE_CODE: TerminalStyle(
            color="green", background_color="blackBright"
        ),
        ElementType.LIST: TerminalStyle(color="white"),
        ElementType.ORDERED_LIST: TerminalStyle(color="white"),
        ElementType.BLOCKQUOTE: TerminalStyle(color="gray", italic=True),
        ElementType.HORIZONTAL_RULE: TerminalStyle(color="gray", dim=True),
        ElementType.LINK: TerminalStyle(color="blue", underline=True),
        ElementType.IMAGE: TerminalStyle(color="magenta"),
        ElementType.BOLD: TerminalStyle(bold=True),
        ElementType.ITALIC: TerminalStyle(italic=True),
        ElementType.STRIKETHROUGH: TerminalStyle(strikethrough=True, dim=True),
        ElementType.TEXT: TerminalStyle(color="white"),
        ElementType.BLANK: TerminalStyle(),
    }
)

SYNTAX_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "keyword": "magenta",
        "string": "green",
        "number": "yellow",
        "comment": "gray",
        "function": "blue",
        "variable": "cyan",
        "operator": "white",
        "type": "yellow",
        "builtin": "cyan",
    }
)

_JAVASCRIPT = frozenset(
    {
        "const", "let", "var", "function", "return", "if", "else", "for",
        "while", "class", "import", "export", "from", "async", "await", "try",
        "catch", "throw", "new", "this", "true", "false", "null", "undefined",
    }
)  # fmt: skip

KEYWORDS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "javascript": _JAVASCRIPT,
        "typescript": _JAVASCRIPT
        | {
            "interface", "type", "enum", "implements", "extends", "public",
            "private", "protected",
        },
        "python": frozenset(
            {
                "def", "class", "import", "from", "return", "if", "elif",
                "else", "for", "while", "try", "except", "finally", "with",
                "as", "lambda", "True", "False", "None", "and", "or", "not",
                "in", "is", "pass", "break", "continue",
            }
        ),
        "go": frozenset(
            {
                "func", "package", "import", "return", "if", "else", "for",
                "range", "switch", "case", "default", "struct", "interface",
                "type", "var", "const", "true", "false", "nil", "go", "defer",
                "chan",
            }
        ),
        "rust": frozenset(
            {
                "fn", "let", "mut", "const", "pub", "struct", "enum", "impl",
                "trait", "use", "mod", "if", "else", "match", "for", "while",
                "loop", "return", "true", "false", "self", "Self",
            }
        ),
        "bash": frozenset(
            {
                "if", "then", "else", "elif", "fi", "for", "while", "do",
                "done", "case", "esac", "function", "return", "export",
                "local", "echo", "exit",
            }
        ),
    }
)  # fmt: skip

DEFAULT_LANGUAGE = "javascript"


def keywords_for(language: str) -> frozenset[str]:
    """Keyword set for a fence language; unknown tags use JavaScript's."""
    return KEYWORDS.get(language, KEYWORDS[DEFAULT_LANGUAGE])
