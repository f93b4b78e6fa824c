from mdterm.parsers.inline import format_inline
from mdterm.styles.tables import MARKDOWN_STYLES
from mdterm.styles.types import ElementType, TerminalStyle


def _pairs(text: str) -> list[tuple[str, ElementType]]:
    return [(s.text, s.type) for s in format_inline(text)]


class TestPlainText:
    def test_no_markup_returns_single_text_segment(self) -> None:
        segments = format_inline("just words")

        assert len(segments) == 1
        assert segments[0].text == "just words"
        assert segments[0].type == ElementType.TEXT
        assert segments[0].style == MARKDOWN_STYLES[ElementType.TEXT]

    def test_empty_string_still_yields_one_segment(self) -> None:
        segments = format_inline("")

        assert len(segments) == 1
        assert segments[0].text == ""

    def test_unclosed_marker_is_plain_text(self) -> None:
        assert _pairs("a * b") == [("a * b", ElementType.TEXT)]


class TestEmphasis:
    def test_bold_between_plain_text(self) -> None:
        assert _pairs("Hello **world**!") == [
            ("Hello ", ElementType.TEXT),
            ("world", ElementType.BOLD),
            ("!", ElementType.TEXT),
        ]

    def test_underscore_bold(self) -> None:
        assert _pairs("__strong__") == [("strong", ElementType.BOLD)]

    def test_triple_emphasis_is_bold_and_italic(self) -> None:
        segments = format_inline("***both***")

        assert len(segments) == 1
        assert segments[0].type == ElementType.BOLD
        assert segments[0].style == TerminalStyle(bold=True, italic=True)

    def test_italic_with_either_marker(self) -> None:
        assert _pairs("*one* and _two_") == [
            ("one", ElementType.ITALIC),
            (" and ", ElementType.TEXT),
            ("two", ElementType.ITALIC),
        ]

    def test_strikethrough(self) -> None:
        segments = format_inline("~~gone~~")

        assert segments[0].type == ElementType.STRIKETHROUGH
        assert segments[0].style.strikethrough is True

    def test_nested_markup_is_not_resolved(self) -> None:
        """The outer bold match swallows the inner italic markers."""
        assert _pairs("**bold *it* x**") == [("bold *it* x", ElementType.BOLD)]


class TestCodeLinksImages:
    def test_inline_code(self) -> None:
        assert _pairs("run `make test` now") == [
            ("run ", ElementType.TEXT),
            ("make test", ElementType.INLINE_CODE),
            (" now", ElementType.TEXT),
        ]

    def test_markup_inside_code_span_wins_by_position(self) -> None:
        assert _pairs("`**x**`") == [("**x**", ElementType.INLINE_CODE)]

    def test_link_renders_label_and_url(self) -> None:
        segments = format_inline("see [docs](https://example.com)")

        assert segments[1].text == "docs (https://example.com)"
        assert segments[1].type == ElementType.LINK
        assert segments[1].style.underline is True

    def test_image_uses_alt_text(self) -> None:
        assert _pairs("![logo](img/logo.png)") == [
            ("[IMG: logo]", ElementType.IMAGE)
        ]

    def test_image_without_alt_uses_url(self) -> None:
        assert _pairs("![](img/logo.png)") == [
            ("[IMG: img/logo.png]", ElementType.IMAGE)
        ]
