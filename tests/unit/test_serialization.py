#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for tree and token JSON dumps."""

import json

import pytest

from linemark.ast import CodeBlock, CodeLine, Document, Heading, List, ListItem, Table, ThematicBreak, ast_to_dict
from linemark.ast.serialization import ast_to_json, tokens_to_json
from linemark.tokenizer import tokenize


@pytest.mark.unit
class TestAstToDict:
    """Test dictionary conversion of each node kind."""

    def test_nested_document(self) -> None:
        doc = Document(
            children=[
                Heading(level=2, text="T"),
                List(children=[ListItem("a")]),
                CodeBlock(language="sh", children=[CodeLine("ls")]),
                ThematicBreak(),
                Table(source="| a |"),
            ]
        )
        assert ast_to_dict(doc) == {
            "node_type": "Document",
            "children": [
                {"node_type": "Heading", "level": 2, "text": "T"},
                {"node_type": "List", "children": [{"node_type": "ListItem", "text": "a"}]},
                {"node_type": "CodeBlock", "language": "sh", "children": [{"node_type": "CodeLine", "text": "ls"}]},
                {"node_type": "ThematicBreak"},
                {"node_type": "Table", "source": "| a |"},
            ],
        }

    def test_unknown_node_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            ast_to_dict(object())  # type: ignore[arg-type]


@pytest.mark.unit
class TestJsonDumps:
    """Test JSON text output."""

    def test_schema_version(self) -> None:
        data = json.loads(ast_to_json(Document()))
        assert data == {"schema_version": 1, "node_type": "Document", "children": []}

    def test_non_ascii_kept(self) -> None:
        assert "café" in ast_to_json(Document(children=[Heading(level=1, text="café")]))

    def test_indent(self) -> None:
        assert "\n  " in ast_to_json(Document(), indent=2)

    def test_tokens(self) -> None:
        data = json.loads(tokens_to_json(tokenize("# A\n* b")))
        assert data == [
            {"kind": "header1", "value": "A", "line": 1},
            {"kind": "listItem", "value": "b", "line": 2},
        ]
