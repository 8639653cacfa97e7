#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/ast/serialization.py
"""JSON serialization of document trees and token streams.

These dumps exist for inspection (``linemark --emit tree`` and
``--emit tokens``); there is no loader, since the tree is always rebuilt
from markdown source.

Examples
--------
    >>> from linemark.ast import Document, Heading
    >>> from linemark.ast.serialization import ast_to_json
    >>> print(ast_to_json(Document(children=[Heading(level=1, text="Title")])))
    {"schema_version": 1, "node_type": "Document", "children": [{"node_type": "Heading", "level": 1, "text": "Title"}]}

"""

from __future__ import annotations

import json
from typing import Any, Iterable

from linemark.ast.nodes import (
    BlockQuote,
    CodeBlock,
    CodeLine,
    Document,
    Heading,
    List,
    ListItem,
    Node,
    Paragraph,
    Table,
    ThematicBreak,
    get_node_children,
)
from linemark.tokenizer import Token


def _serialize_children_node(node: Node, node_type: str) -> dict[str, Any]:
    """Serialize container nodes (Document, List)."""
    return {
        "node_type": node_type,
        "children": [ast_to_dict(child) for child in get_node_children(node)],
    }


def _serialize_text_node(node: Node, node_type: str) -> dict[str, Any]:
    """Serialize leaves that carry a single ``text`` field."""
    return {"node_type": node_type, "text": node.text}  # type: ignore[attr-defined]


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return {"node_type": "Heading", "level": node.level, "text": node.text}


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    return {
        "node_type": "CodeBlock",
        "language": node.language,
        "children": [ast_to_dict(child) for child in node.children],
    }


def _serialize_table(node: Table) -> dict[str, Any]:
    return {"node_type": "Table", "source": node.source}


_SERIALIZATION_DISPATCH: dict[type, Any] = {
    Document: lambda n: _serialize_children_node(n, "Document"),
    List: lambda n: _serialize_children_node(n, "List"),
    CodeBlock: _serialize_code_block,
    Heading: _serialize_heading,
    Paragraph: lambda n: _serialize_text_node(n, "Paragraph"),
    BlockQuote: lambda n: _serialize_text_node(n, "BlockQuote"),
    ListItem: lambda n: _serialize_text_node(n, "ListItem"),
    CodeLine: lambda n: _serialize_text_node(n, "CodeLine"),
    ThematicBreak: lambda n: {"node_type": "ThematicBreak"},
    Table: _serialize_table,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a tree node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary with a ``node_type`` key plus the variant's fields

    Raises
    ------
    ValueError
        If ``node`` is not one of the known node variants

    Examples
    --------
    >>> ast_to_dict(Paragraph(text="Hello"))
    {'node_type': 'Paragraph', 'text': 'Hello'}

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a tree node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned_dict = {"schema_version": 1, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def tokens_to_json(tokens: Iterable[Token], indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array."""
    return json.dumps([token.to_dict() for token in tokens], indent=indent, ensure_ascii=False)
