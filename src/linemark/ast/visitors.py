#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/ast/visitors.py
"""Visitor pattern base class for tree traversal.

Renderers and other tree consumers subclass :class:`NodeVisitor` and
implement one ``visit_*`` method per node variant. Because every variant is
abstract here, a visitor that forgets one fails at instantiation rather than
silently skipping nodes.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from linemark.ast.nodes import (
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


class NodeVisitor(ABC):
    """Abstract base class for tree visitors.

    Examples
    --------
    Visitor that counts list items:

        >>> class ItemCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_list_item(self, node):
        ...         self.count += 1
        ...     # ... remaining visit_* methods ...

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit the root Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_code_line(self, node: CodeLine) -> Any:
        """Visit a CodeLine node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
