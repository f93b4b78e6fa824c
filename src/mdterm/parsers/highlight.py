# parsers/highlight.py

import re
import string

from mdterm.styles.tables import SYNTAX_COLORS, keywords_for
from mdterm.styles.types import ElementType, TerminalStyle

from .models import StyledSegment

# One token per match, left to right. The trailing word-run and single
# character alternatives make sure no input character is ever skipped.
_TOKEN_PATTERN = re.compile(
    r"\s+"
    r'|"[^"]*"'
    r"|'[^']*'"
    r"|`[^`]*`"
    r"|//[^\n]*"
    r"|/\*[\s\S]*?\*/"
    r"|#[^\n]*"
    r"|\b\d+\.?\d*\b"
    r"|\b[a-zA-Z_]\w*\b"
    r"|[^\s\w\"'`]+"
    r"|\w+"
    r"|\S",
    re.ASCII,
)

_IDENTIFIER = re.compile(r"[a-zA-Z_]\w*", re.ASCII)

_WHITESPACE_STYLE = TerminalStyle()
_STRING_STYLE = TerminalStyle(color=SYNTAX_COLORS["string"])
_COMMENT_STYLE = TerminalStyle(color=SYNTAX_COLORS["comment"], dim=True)
_NUMBER_STYLE = TerminalStyle(color=SYNTAX_COLORS["number"])
_KEYWORD_STYLE = TerminalStyle(color=SYNTAX_COLORS["keyword"], bold=True)
_IDENTIFIER_STYLE = TerminalStyle(color="white")
_OPERATOR_STYLE = TerminalStyle(color=SYNTAX_COLORS["operator"])


def highlight_code(code: str, language: str) -> list[StyledSegment]:
    """Tokenize a single code line and style each token.

    Returns an empty list for an empty line.
    """
    keywords = keywords_for(language)
    return [
        StyledSegment(
            text=token,
            style=_token_style(token, keywords),
            type=ElementType.CODE_BLOCK,
        )
        for token in _TOKEN_PATTERN.findall(code)
    ]


def _token_style(token: str, keywords: frozenset[str]) -> TerminalStyle:
    if token.isspace():
        return _WHITESPACE_STYLE
    if token[0] in "\"'`":
        return _STRING_STYLE
    if token.startswith(("//", "#", "/*")):
        return _COMMENT_STYLE
    if token[0] in string.digits:
        return _NUMBER_STYLE
    if token in keywords:
        return _KEYWORD_STYLE
    if _IDENTIFIER.fullmatch(token):
        return _IDENTIFIER_STYLE
    return _OPERATOR_STYLE
