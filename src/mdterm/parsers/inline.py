# parsers/inline.py

import re

from mdterm.styles.tables import MARKDOWN_STYLES
from mdterm.styles.types import ElementType, TerminalStyle

from .models import StyledSegment

# Alternation order is the priority order: the first alternative that
# matches at a given position wins. Nested markup is not resolved.
_INLINE_PATTERN = re.compile(
    r"\*\*\*(?P<bold_italic>.+?)\*\*\*"
    r"|\*\*(?P<bold>.+?)\*\*"
    r"|__(?P<bold_alt>.+?)__"
    r"|\*(?P<italic>.+?)\*"
    r"|_(?P<italic_alt>.+?)_"
    r"|~~(?P<strike>.+?)~~"
    r"|`(?P<code>[^`]+)`"
    r"|\[(?P<link_text>[^\]]+)\]\((?P<link_url>[^)]+)\)"
    r"|!\[(?P<image_alt>[^\]]*)\]\((?P<image_url>[^)]+)\)"
)

_BOLD_ITALIC_STYLE = TerminalStyle(bold=True, italic=True)


def format_inline(text: str) -> list[StyledSegment]:
    """Split one logical line into styled segments.

    Always returns at least one segment; text with no markup comes back
    as a single plain-text segment.
    """
    segments: list[StyledSegment] = []
    last_end = 0

    for match in _INLINE_PATTERN.finditer(text):
        if match.start() > last_end:
            segments.append(_plain(text[last_end : match.start()]))
        segments.append(_styled(match))
        last_end = match.end()

    if last_end < len(text):
        segments.append(_plain(text[last_end:]))

    if not segments:
        segments.append(_plain(text))

    return segments


def _plain(text: str) -> StyledSegment:
    return StyledSegment(
        text=text, style=MARKDOWN_STYLES[ElementType.TEXT], type=ElementType.TEXT
    )


def _styled(match: re.Match[str]) -> StyledSegment:
    groups = match.groupdict()

    if groups["bold_italic"] is not None:
        return StyledSegment(
            text=groups["bold_italic"],
            style=_BOLD_ITALIC_STYLE,
            type=ElementType.BOLD,
        )

    for name, element_type in (
        ("bold", ElementType.BOLD),
        ("bold_alt", ElementType.BOLD),
        ("italic", ElementType.ITALIC),
        ("italic_alt", ElementType.ITALIC),
        ("strike", ElementType.STRIKETHROUGH),
        ("code", ElementType.INLINE_CODE),
    ):
        if groups[name] is not None:
            return StyledSegment(
                text=groups[name],
                style=MARKDOWN_STYLES[element_type],
                type=element_type,
            )

    if groups["link_text"] is not None:
        return StyledSegment(
            text=f"{groups['link_text']} ({groups['link_url']})",
            style=MARKDOWN_STYLES[ElementType.LINK],
            type=ElementType.LINK,
        )

    # Only the image alternative is left.
    label = groups["image_alt"] or groups["image_url"]
    return StyledSegment(
        text=f"[IMG: {label}]",
        style=MARKDOWN_STYLES[ElementType.IMAGE],
        type=ElementType.IMAGE,
    )
