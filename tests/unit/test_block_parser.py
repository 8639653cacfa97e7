#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the block parser."""

from dataclasses import dataclass
from enum import Enum

import pytest

from linemark.ast import (
    BlockQuote,
    CodeBlock,
    CodeLine,
    Document,
    Heading,
    List,
    ListItem,
    Paragraph,
    Table,
    ThematicBreak,
)
from linemark.exceptions import ParsingError
from linemark.parsers import BlockParser, ParserState, parse
from linemark.tokenizer import Token, TokenKind, tokenize


def parse_text(text: str) -> Document:
    return parse(tokenize(text))


@pytest.mark.unit
class TestLeaves:
    """Test leaf tokens become leaf nodes under the root."""

    def test_heading(self) -> None:
        """Test headings keep their level and text."""
        doc = parse_text("### Three")
        assert doc.children == [Heading(level=3, text="Three")]

    def test_each_line_is_its_own_paragraph(self) -> None:
        """Test consecutive text lines are never merged."""
        doc = parse_text("one\ntwo")
        assert doc.children == [Paragraph(text="one"), Paragraph(text="two")]

    def test_blockquote_and_rule(self) -> None:
        """Test blockquotes and rules attach to the root."""
        doc = parse_text("> said\n---")
        assert doc.children == [BlockQuote(text="said"), ThematicBreak()]

    def test_empty_input(self) -> None:
        """Test empty input yields one empty paragraph."""
        assert parse_text("").children == [Paragraph(text="")]

    def test_empty_token_stream(self) -> None:
        """Test no tokens yields an empty document."""
        assert parse([]) == Document()


@pytest.mark.unit
class TestLists:
    """Test list grouping."""

    def test_consecutive_items_share_one_list(self) -> None:
        """Test adjacent list items are collected into a single list."""
        doc = parse_text("* a\n* b\n* c")
        assert doc.children == [List(children=[ListItem("a"), ListItem("b"), ListItem("c")])]

    def test_mixed_markers_share_one_list(self) -> None:
        """Test marker style does not split a list."""
        doc = parse_text("- a\n1. b")
        assert len(doc.children) == 1
        assert len(doc.children[0].children) == 2

    def test_leaf_after_list_attaches_inside_list(self) -> None:
        """Test leaves stay in an open list until a code fence closes."""
        doc = parse_text("* a\n# Heading\ntext")
        assert doc.children == [List(children=[ListItem("a"), Heading(level=1, text="Heading"), Paragraph("text")])]

    def test_code_block_closes_list(self) -> None:
        """Test a closing fence resets the current container to the root."""
        doc = parse_text("* a\n```\ncode\n```\n* b")
        assert [type(child) for child in doc.children] == [List, CodeBlock, List]
        assert doc.children[2].children == [ListItem("b")]

    def test_list_after_code_block(self) -> None:
        """Test a list following a code block starts a new list under root."""
        doc = parse_text("```\n```\n* x")
        assert isinstance(doc.children[1], List)


@pytest.mark.unit
class TestCodeBlocks:
    """Test code block grouping."""

    def test_code_lines_collected(self) -> None:
        """Test code lines attach to their block in order."""
        doc = parse_text("```js\nlet a;\n\nlet b;\n```")
        assert doc.children == [
            CodeBlock(language="js", children=[CodeLine("let a;"), CodeLine(""), CodeLine("let b;")])
        ]

    def test_unterminated_block_keeps_lines(self) -> None:
        """Test an unclosed fence still yields a code block."""
        doc = parse_text("```\na\nb")
        assert doc.children == [CodeBlock(language="", children=[CodeLine("a"), CodeLine("b")])]

    def test_code_line_without_block_raises(self) -> None:
        """Test a stray code line token is rejected."""
        with pytest.raises(ParsingError) as exc_info:
            parse([Token(TokenKind.CODE_LINE, "x", 1)])
        assert exc_info.value.parsing_stage == "block"

    def test_leaf_inside_code_block_raises(self) -> None:
        """Test a leaf token cannot land inside an open code block."""
        tokens = [Token(TokenKind.CODE_BLOCK_START, "", 1), Token(TokenKind.PARAGRAPH, "x", 2)]
        with pytest.raises(ParsingError):
            parse(tokens)


@pytest.mark.unit
class TestTables:
    """Test table buffering and flushing."""

    def test_table_run_becomes_one_table(self) -> None:
        """Test a run of table rows is flushed as one table node."""
        doc = parse_text("| a | b |\n|---|---|\n| 1 | 2 |\nafter")
        assert doc.children == [
            Table(source="| a | b |\n|---|---|\n| 1 | 2 |"),
            Paragraph("after"),
        ]

    def test_table_at_end_of_input_is_flushed(self) -> None:
        """Test a trailing table is not dropped."""
        doc = parse_text("intro\n| a |\n|---|")
        assert doc.children[-1] == Table(source="| a |\n|---|")

    def test_separator_token_flushes_immediately(self) -> None:
        """Test a separator token ends the buffered table."""
        tokens = [
            Token(TokenKind.TABLE_ROW, "| h |", 1),
            Token(TokenKind.TABLE_SEPARATOR, "|---|", 2),
            Token(TokenKind.TABLE_ROW, "| b |", 3),
        ]
        doc = parse(tokens)
        assert doc.children == [Table(source="| h |\n|---|"), Table(source="| b |")]

    def test_table_after_list_attaches_to_root(self) -> None:
        """Test tables always attach to the root, even with a list open."""
        doc = parse_text("* a\n| x |\n* b")
        assert [type(child) for child in doc.children] == [List, Table]
        assert doc.children[0].children == [ListItem("a"), ListItem("b")]


@pytest.mark.unit
class TestParserState:
    """Test the explicit state threaded through each step."""

    def test_default_state(self) -> None:
        """Test a fresh state points at its own root."""
        state = ParserState()
        assert state.current is state.root
        assert state.table_buffer == ()

    def test_step_returns_new_state(self) -> None:
        """Test opening a code block yields a new state value."""
        parser = BlockParser()
        before = ParserState()
        after = parser.step(before, Token(TokenKind.CODE_BLOCK_START, "py", 1))
        assert before.current is before.root
        assert isinstance(after.current, CodeBlock)
        assert after.root is before.root

    def test_step_buffers_table_lines(self) -> None:
        """Test table rows accumulate in the buffer until flushed."""
        state = BlockParser().step(ParserState(), Token(TokenKind.TABLE_ROW, "| a |", 1))
        assert state.table_buffer == ("| a |",)
        assert state.root.children == []

    def test_missing_container_raises(self) -> None:
        """Test a state stripped of its container is rejected."""
        state = ParserState()
        object.__setattr__(state, "current", None)
        with pytest.raises(ParsingError, match="no current container"):
            state.container


class _ForeignKind(Enum):
    STRANGE = "strange"


@dataclass(frozen=True)
class _ForeignToken:
    kind: object
    value: str = ""
    line: int = 0


@pytest.mark.unit
class TestUnknownTokens:
    """Test tokens outside the closed kind set are rejected."""

    def test_foreign_enum_kind(self) -> None:
        """Test an enum member from another enum raises."""
        with pytest.raises(ParsingError, match="Unknown token type"):
            parse([_ForeignToken(_ForeignKind.STRANGE, "x", 1)])

    def test_string_kind(self) -> None:
        """Test a raw string kind raises."""
        with pytest.raises(ParsingError, match="Unknown token type"):
            parse([_ForeignToken("paragraph", "x", 1)])
