#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/ast/nodes.py
"""Block-level node classes for the linemark document tree.

The tree is a closed set of dataclass variants. Each variant carries only the
fields its HTML template needs, and dispatches to the matching ``visit_*``
method of a visitor through :meth:`Node.accept`.

Node Hierarchy
--------------
Containers:
    - Document (root), List, CodeBlock

Leaves:
    - Heading, Paragraph, BlockQuote, ThematicBreak, ListItem, CodeLine, Table

Leaf text is stored exactly as the tokenizer extracted it. Inline markup is
resolved at render time, and only for Paragraph and ListItem.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union


class Node(ABC):
    """Base class for all tree nodes.

    Every concrete node supports the visitor pattern for traversal and
    rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Containers
# ============================================================================


@dataclass
class Document(Node):
    """Root node of a parsed document.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes in source order

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


@dataclass
class List(Node):
    """Unordered list node.

    A list collects consecutive list items. It also collects any heading,
    paragraph, blockquote or rule that arrives while it is the parser's
    current container, which is why ``children`` is typed as ``Node``
    rather than ``ListItem``.

    Parameters
    ----------
    children : list of Node, default = empty list
        List items, plus any leaves attached while the list was open

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block node.

    Parameters
    ----------
    language : str, default = ""
        Label written after the opening fence, possibly empty
    children : list of CodeLine, default = empty list
        Literal code lines between the fences

    """

    language: str = ""
    children: list[CodeLine] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


# ============================================================================
# Leaves
# ============================================================================


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    text : str, default = ""
        Heading text, rendered without inline processing

    """

    level: int
    text: str = ""

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """A single source line of running text."""

    text: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class BlockQuote(Node):
    """A single quoted line, rendered without inline processing."""

    text: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self)


@dataclass
class ListItem(Node):
    """A single list entry holding one line of inline text."""

    text: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class CodeLine(Node):
    """One literal line inside a code block."""

    text: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_line``."""
        return visitor.visit_code_line(self)


@dataclass
class Table(Node):
    """Table node holding its raw source rows.

    Cells are not pre-split: the renderer re-parses ``source`` so that rows
    keep exactly the text the tokenizer saw.

    Parameters
    ----------
    source : str
        Newline-joined table lines: header, separator, then body rows

    """

    source: str = ""

    @property
    def lines(self) -> list[str]:
        """Source split back into its table lines."""
        return self.source.split("\n")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self)


Container = Union[Document, List, CodeBlock]

BLOCK_NODE_TYPES: frozenset[type[Node]] = frozenset(
    {
        Document,
        List,
        CodeBlock,
        Heading,
        Paragraph,
        BlockQuote,
        ThematicBreak,
        ListItem,
        CodeLine,
        Table,
    }
)


def get_node_children(node: Node) -> list[Node]:
    """Return the child nodes of ``node`` (empty for leaves).

    Parameters
    ----------
    node : Node
        Any tree node

    Returns
    -------
    list of Node
        The node's children; a new empty list for leaf nodes

    """
    children: Optional[list[Any]] = getattr(node, "children", None)
    return list(children) if children is not None else []
