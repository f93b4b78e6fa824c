# parsers/segmenter.py

import logging
import re
from collections.abc import Sequence
from typing import cast

from mdterm.styles.tables import MARKDOWN_STYLES
from mdterm.styles.types import ElementType, TerminalStyle

from .highlight import highlight_code
from .inline import format_inline
from .models import Heading, RenderedLine, SegmentResult, StyledSegment

logger = logging.getLogger(__name__)

_HEADING = re.compile(r"^(#{1,6})\s+(.*)$")
_HORIZONTAL_RULE = re.compile(r"^[-*_]{3,}\s*$")
_UNORDERED_ITEM = re.compile(r"^[-*+]\s+")
_ORDERED_ITEM = re.compile(r"^(\d+)\.\s+")
_QUOTE_MARKER = re.compile(r"^>\s?")

FENCE = "```"
DEFAULT_FENCE_LANGUAGE = "text"
RULE_GLYPH = "─"
RULE_MAX_WIDTH = 60
BULLET_GLYPH = "• "
QUOTE_GLYPH = "│ "
BLOCK_INDENT = 2

_MARKER_STYLE = TerminalStyle(color="cyan")
_QUOTE_BAR_STYLE = TerminalStyle(color="gray")


def _is_heading(trimmed: str) -> bool:
    match = _HEADING.match(trimmed)
    return bool(match and match.group(2))


def _is_horizontal_rule(trimmed: str) -> bool:
    return bool(_HORIZONTAL_RULE.match(trimmed))


def _is_fence(trimmed: str) -> bool:
    return trimmed.startswith(FENCE)


def _is_blockquote(trimmed: str) -> bool:
    return trimmed.startswith(">")


def _is_unordered_item(trimmed: str) -> bool:
    return bool(_UNORDERED_ITEM.match(trimmed))


def _is_ordered_item(trimmed: str) -> bool:
    return bool(_ORDERED_ITEM.match(trimmed))


_BLOCK_STARTERS = (
    _is_heading,
    _is_horizontal_rule,
    _is_fence,
    _is_blockquote,
    _is_unordered_item,
    _is_ordered_item,
)


def starts_block(trimmed: str) -> bool:
    """True if a non-blank trimmed line opens a non-paragraph block."""
    return any(check(trimmed) for check in _BLOCK_STARTERS)


class BlockSegmenter:
    """
    Line-classification state machine.

    - Walks the source lines with an explicit cursor
    - Tries block classes in fixed priority order, first match wins
    - Emits one or more rendered lines per consumed span
    - Numbers output lines 1..N without gaps
    """

    def __init__(self, terminal_width: int = 80, syntax_highlighting: bool = True):
        self.terminal_width = terminal_width
        self.syntax_highlighting = syntax_highlighting

    def segment(self, source_lines: Sequence[str]) -> SegmentResult:
        self._lines: list[RenderedLine] = []
        self._headings: list[Heading] = []
        self._title: str | None = None

        i = 0
        total = len(source_lines)
        while i < total:
            trimmed = source_lines[i].strip()

            if trimmed == "":
                i = self._blank(i)
            elif _is_heading(trimmed):
                i = self._heading(trimmed, i)
            elif _is_horizontal_rule(trimmed):
                i = self._horizontal_rule(i)
            elif _is_fence(trimmed):
                i = self._code_block(source_lines, trimmed, i)
            elif _is_blockquote(trimmed):
                i = self._blockquote(source_lines, i)
            elif _is_unordered_item(trimmed):
                i = self._unordered_item(trimmed, i)
            elif _is_ordered_item(trimmed):
                i = self._ordered_item(trimmed, i)
            else:
                i = self._paragraph(source_lines, trimmed, i)

        logger.debug(
            "Segmented %d source lines into %d rendered lines (%d headings)",
            total,
            len(self._lines),
            len(self._headings),
        )
        return SegmentResult(
            lines=tuple(self._lines),
            headings=tuple(self._headings),
            title=self._title,
        )

    # --- emit helper ---

    def _emit(
        self,
        segments: Sequence[StyledSegment],
        *,
        start: int,
        end: int,
        indent: int = 0,
        is_blank: bool = False,
    ) -> None:
        self._lines.append(
            RenderedLine(
                line_number=len(self._lines) + 1,
                segments=tuple(segments),
                indent=indent,
                is_blank=is_blank,
                source_line_start=start,
                source_line_end=end,
            )
        )

    # --- block handlers: each returns the next cursor position ---

    def _blank(self, i: int) -> int:
        blank = StyledSegment(
            text="", style=MARKDOWN_STYLES[ElementType.BLANK], type=ElementType.BLANK
        )
        self._emit([blank], start=i + 1, end=i + 1, is_blank=True)
        return i + 1

    def _heading(self, trimmed: str, i: int) -> int:
        match = cast(re.Match[str], _HEADING.match(trimmed))
        level = min(len(match.group(1)), 4)
        text = match.group(2)
        heading_type = ElementType.heading(level)
        heading_style = MARKDOWN_STYLES[heading_type]

        self._headings.append(
            Heading(level=level, text=text, line_number=len(self._lines) + 1)
        )
        if self._title is None and level == 1:
            self._title = text

        prefix = StyledSegment(
            text="#" * level + " ",
            style=heading_style.with_dim(),
            type=heading_type,
        )
        body = [
            StyledSegment(
                text=seg.text, style=seg.style.merge(heading_style), type=seg.type
            )
            for seg in format_inline(text)
        ]
        self._emit([prefix, *body], start=i + 1, end=i + 1)
        return i + 1

    def _horizontal_rule(self, i: int) -> int:
        width = min(self.terminal_width - 4, RULE_MAX_WIDTH)
        rule = StyledSegment(
            text=RULE_GLYPH * max(width, 0),
            style=MARKDOWN_STYLES[ElementType.HORIZONTAL_RULE],
            type=ElementType.HORIZONTAL_RULE,
        )
        self._emit([rule], start=i + 1, end=i + 1)
        return i + 1

    def _code_block(self, source_lines: Sequence[str], trimmed: str, i: int) -> int:
        language = trimmed[len(FENCE) :].strip() or DEFAULT_FENCE_LANGUAGE
        total = len(source_lines)
        start = i + 1
        i += 1

        code_lines: list[str] = []
        while i < total and not _is_fence(source_lines[i].strip()):
            code_lines.append(source_lines[i])
            i += 1

        # i is the closing fence, or total when the fence never closes;
        # clamp so both bounds stay inside the source.
        end = min(i + 1, total)
        if i >= total:
            logger.debug("Unterminated code fence opened on line %d", start)

        for code_line in code_lines:
            self._emit(
                self._code_segments(code_line, language),
                start=start,
                end=end,
                indent=BLOCK_INDENT,
            )
        return min(i + 1, total)

    def _code_segments(self, code_line: str, language: str) -> list[StyledSegment]:
        if self.syntax_highlighting:
            segments = highlight_code(code_line, language)
            if segments:
                return segments
        return [
            StyledSegment(
                text=code_line,
                style=MARKDOWN_STYLES[ElementType.CODE_BLOCK],
                type=ElementType.CODE_BLOCK,
            )
        ]

    def _blockquote(self, source_lines: Sequence[str], i: int) -> int:
        start = i + 1
        quote_style = MARKDOWN_STYLES[ElementType.BLOCKQUOTE]

        while i < len(source_lines):
            line = source_lines[i]
            if line.strip() == "":
                break
            if not line.startswith((">", " ")) and not line.lstrip().startswith(">"):
                break

            content = _QUOTE_MARKER.sub("", line.lstrip(), count=1)
            bar = StyledSegment(
                text=QUOTE_GLYPH, style=_QUOTE_BAR_STYLE, type=ElementType.BLOCKQUOTE
            )
            body = [
                StyledSegment(
                    text=seg.text,
                    style=seg.style.merge(quote_style),
                    type=ElementType.BLOCKQUOTE,
                )
                for seg in format_inline(content)
            ]
            self._emit([bar, *body], start=start, end=i + 1)
            i += 1

        return i

    def _unordered_item(self, trimmed: str, i: int) -> int:
        text = _UNORDERED_ITEM.sub("", trimmed, count=1)
        bullet = StyledSegment(
            text=BULLET_GLYPH, style=_MARKER_STYLE, type=ElementType.LIST
        )
        self._emit(
            [bullet, *format_inline(text)],
            start=i + 1,
            end=i + 1,
            indent=BLOCK_INDENT,
        )
        return i + 1

    def _ordered_item(self, trimmed: str, i: int) -> int:
        match = _ORDERED_ITEM.match(trimmed)
        number = match.group(1) if match else "1"
        text = _ORDERED_ITEM.sub("", trimmed, count=1)
        marker = StyledSegment(
            text=f"{number}. ", style=_MARKER_STYLE, type=ElementType.ORDERED_LIST
        )
        self._emit(
            [marker, *format_inline(text)],
            start=i + 1,
            end=i + 1,
            indent=BLOCK_INDENT,
        )
        return i + 1

    def _paragraph(self, source_lines: Sequence[str], trimmed: str, i: int) -> int:
        start = i + 1
        parts = [trimmed]
        i += 1

        while i < len(source_lines):
            candidate = source_lines[i].strip()
            if candidate == "" or starts_block(candidate):
                break
            parts.append(candidate)
            i += 1

        self._emit(format_inline(" ".join(parts)), start=start, end=i)
        return i
