import pytest

from mdterm.styles.tables import KEYWORDS, MARKDOWN_STYLES, keywords_for
from mdterm.styles.types import ElementType, TerminalStyle


class TestStyleTables:
    def test_every_element_type_has_a_style(self) -> None:
        assert set(MARKDOWN_STYLES) == set(ElementType)

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            MARKDOWN_STYLES[ElementType.TEXT] = TerminalStyle()  # type: ignore

        with pytest.raises(TypeError):
            KEYWORDS["cobol"] = frozenset()  # type: ignore

    def test_keyword_sets_exist_for_supported_languages(self) -> None:
        assert set(KEYWORDS) == {
            "javascript",
            "typescript",
            "python",
            "go",
            "rust",
            "bash",
        }

    def test_typescript_extends_javascript(self) -> None:
        assert KEYWORDS["javascript"] < KEYWORDS["typescript"]
        assert "interface" in KEYWORDS["typescript"]

    def test_unknown_language_uses_javascript_keywords(self) -> None:
        assert keywords_for("text") is KEYWORDS["javascript"]
        assert keywords_for("python") is KEYWORDS["python"]


class TestElementType:
    def test_values_are_wire_tags(self) -> None:
        assert ElementType.CODE_BLOCK == "codeBlock"
        assert ElementType("horizontalRule") is ElementType.HORIZONTAL_RULE

    def test_heading_level_is_clamped(self) -> None:
        assert ElementType.heading(1) is ElementType.HEADING1
        assert ElementType.heading(6) is ElementType.HEADING4


class TestTerminalStyle:
    def test_merge_overrides_only_set_attributes(self) -> None:
        base = TerminalStyle(color="green", background_color="blackBright")

        merged = base.merge(TerminalStyle(color="cyan", bold=True))

        assert merged == TerminalStyle(
            color="cyan", background_color="blackBright", bold=True
        )

    def test_merge_returns_new_instance(self) -> None:
        base = TerminalStyle(color="white")

        base.merge(TerminalStyle(color="gray"))

        assert base.color == "white"

    def test_with_dim(self) -> None:
        assert TerminalStyle(color="cyan").with_dim() == TerminalStyle(
            color="cyan", dim=True
        )
