#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for document tree nodes and the visitor base."""

import pytest

from linemark.ast import (
    BLOCK_NODE_TYPES,
    BlockQuote,
    CodeBlock,
    CodeLine,
    Document,
    Heading,
    List,
    ListItem,
    NodeVisitor,
    Paragraph,
    Table,
    ThematicBreak,
    get_node_children,
)


class KindCollector(NodeVisitor):
    """Visitor that records the variant names it sees, depth first."""

    def __init__(self):
        self.seen: list[str] = []

    def _walk(self, node, name):
        self.seen.append(name)
        for child in get_node_children(node):
            child.accept(self)

    def visit_document(self, node):
        self._walk(node, "document")

    def visit_list(self, node):
        self._walk(node, "list")

    def visit_code_block(self, node):
        self._walk(node, "code_block")

    def visit_heading(self, node):
        self.seen.append("heading")

    def visit_paragraph(self, node):
        self.seen.append("paragraph")

    def visit_block_quote(self, node):
        self.seen.append("block_quote")

    def visit_thematic_break(self, node):
        self.seen.append("thematic_break")

    def visit_list_item(self, node):
        self.seen.append("list_item")

    def visit_code_line(self, node):
        self.seen.append("code_line")

    def visit_table(self, node):
        self.seen.append("table")


@pytest.mark.unit
class TestNodes:
    """Test node construction rules."""

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_validated(self, level: int) -> None:
        with pytest.raises(ValueError, match="Heading level must be 1-6"):
            Heading(level=level)

    def test_table_lines(self) -> None:
        assert Table(source="| a |\n|---|").lines == ["| a |", "|---|"]

    def test_get_node_children(self) -> None:
        items = [ListItem("a")]
        assert get_node_children(List(children=items)) == items
        assert get_node_children(Paragraph("x")) == []

    def test_closed_variant_set(self) -> None:
        assert len(BLOCK_NODE_TYPES) == 10


@pytest.mark.unit
class TestVisitorDispatch:
    """Test accept() routes to the matching visit method."""

    def test_every_variant_dispatches(self) -> None:
        doc = Document(
            children=[
                Heading(level=1, text="h"),
                Paragraph("p"),
                BlockQuote("q"),
                ThematicBreak(),
                List(children=[ListItem("i")]),
                CodeBlock(children=[CodeLine("c")]),
                Table(source="| t |"),
            ]
        )
        collector = KindCollector()
        doc.accept(collector)
        assert collector.seen == [
            "document",
            "heading",
            "paragraph",
            "block_quote",
            "thematic_break",
            "list",
            "list_item",
            "code_block",
            "code_line",
            "table",
        ]

    def test_incomplete_visitor_cannot_be_built(self) -> None:
        class HeadingsOnly(NodeVisitor):
            def visit_heading(self, node):
                return node.text

        with pytest.raises(TypeError):
            HeadingsOnly()
