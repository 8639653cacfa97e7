#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/ast/__init__.py
"""Document tree for linemark.

The module consists of:

- nodes: block-level node variants produced by the block parser
- visitors: visitor base class used by renderers
- serialization: JSON dumps of trees and token streams

Examples
--------
    >>> from linemark.ast import Document, Heading, Paragraph
    >>> from linemark.renderers.html import HtmlRenderer
    >>> doc = Document(children=[Heading(level=1, text="Title"), Paragraph(text="Hello")])
    >>> HtmlRenderer().render_to_string(doc)
    '<h1>Title</h1>\\n<p>Hello</p>'

"""

from linemark.ast.nodes import (
    BLOCK_NODE_TYPES,
    BlockQuote,
    CodeBlock,
    CodeLine,
    Container,
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
from linemark.ast.serialization import ast_to_dict, ast_to_json
from linemark.ast.visitors import NodeVisitor

__all__ = [
    "BLOCK_NODE_TYPES",
    "BlockQuote",
    "CodeBlock",
    "CodeLine",
    "Container",
    "Document",
    "Heading",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Table",
    "ThematicBreak",
    "ast_to_dict",
    "ast_to_json",
    "get_node_children",
]
