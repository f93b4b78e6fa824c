from mdterm.parsers.highlight import highlight_code
from mdterm.styles.tables import SYNTAX_COLORS
from mdterm.styles.types import ElementType, TerminalStyle


def _by_text(code: str, language: str) -> dict[str, TerminalStyle]:
    return {s.text: s.style for s in highlight_code(code, language)}


class TestTokenizing:
    def test_tokens_reproduce_the_line(self) -> None:
        code = "let total = price * 1.5; // with tax"

        segments = highlight_code(code, "javascript")

        assert "".join(s.text for s in segments) == code

    def test_no_characters_are_dropped(self) -> None:
        """Word runs like 123abc and non-ASCII letters still become tokens."""
        code = "x = 123abc + café + 'unterminated"

        segments = highlight_code(code, "python")

        assert "".join(s.text for s in segments) == code

    def test_empty_line_has_no_tokens(self) -> None:
        assert highlight_code("", "python") == []

    def test_tokens_are_code_block_typed(self) -> None:
        segments = highlight_code("x = 1", "python")

        assert {s.type for s in segments} == {ElementType.CODE_BLOCK}


class TestClassification:
    def test_keyword_and_number(self) -> None:
        styles = _by_text("const x = 1;", "javascript")

        assert styles["const"] == TerminalStyle(
            color=SYNTAX_COLORS["keyword"], bold=True
        )
        assert styles["1"] == TerminalStyle(color=SYNTAX_COLORS["number"])
        assert styles["x"] == TerminalStyle(color="white")
        assert styles[";"] == TerminalStyle(color=SYNTAX_COLORS["operator"])
        assert styles[" "] == TerminalStyle()

    def test_strings(self) -> None:
        styles = _by_text('print("hi", \'there\')', "python")

        assert styles['"hi"'].color == SYNTAX_COLORS["string"]
        assert styles["'there'"].color == SYNTAX_COLORS["string"]
        assert styles["("] == TerminalStyle(color=SYNTAX_COLORS["operator"])

    def test_comments_are_dimmed(self) -> None:
        for code, comment in [
            ("x = 1 # note", "# note"),
            ("y(); // note", "// note"),
            ("/* block */ z", "/* block */"),
        ]:
            styles = _by_text(code, "javascript")
            assert styles[comment] == TerminalStyle(
                color=SYNTAX_COLORS["comment"], dim=True
            )

    def test_language_specific_keywords(self) -> None:
        assert _by_text("def f", "python")["def"].bold is True
        assert _by_text("def f", "javascript")["def"].bold is None

    def test_unknown_language_falls_back_to_javascript(self) -> None:
        styles = _by_text("let y", "cobol")

        assert styles["let"].color == SYNTAX_COLORS["keyword"]
