#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/renderers/html.py
"""HTML rendering from the document tree.

This module provides the HtmlRenderer class, which walks a parsed document
with the visitor pattern and returns an HTML fragment. Every node variant has
one fixed template:

==============  =====================================================
Node            Output
==============  =====================================================
Document        children joined with a newline
Heading         ``<hN>text</hN>``
Paragraph       ``<p>`` + inline-rendered text + ``</p>``
BlockQuote      ``<blockquote>text</blockquote>``
ThematicBreak   ``<hr />``
List            ``<ul>`` + children + ``</ul>``
ListItem        ``<li>`` + inline-rendered text + ``</li>``
CodeBlock       ``<pre><code class="LANG">`` + lines + ``</code></pre>``
CodeLine        the raw line
Table           see :mod:`linemark.renderers.table`
==============  =====================================================

Only paragraph and list item text goes through inline rendering. Heading,
blockquote, code and table text is emitted exactly as written.

Warnings
--------
The output is not escaped or sanitized. Treat it as trusted content and only
render documents from trusted authors.

"""

from __future__ import annotations

import html
import logging

from linemark.ast.nodes import (
    BLOCK_NODE_TYPES,
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
)
from linemark.ast.visitors import NodeVisitor
from linemark.constants import DEFAULT_DOCUMENT_LANGUAGE, DEFAULT_DOCUMENT_TITLE
from linemark.exceptions import RenderingError
from linemark.renderers.base import BaseRenderer
from linemark.renderers.inline import InlineRenderer
from linemark.renderers.table import TableRenderer

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render a document tree to an HTML fragment.

    The renderer keeps no state between nodes, so every ``visit_*`` method is
    a pure function of its node and one instance may be shared freely.

    Parameters
    ----------
    inline_renderer : InlineRenderer or None, default = None
        Renderer for paragraph and list item text
    table_renderer : TableRenderer or None, default = None
        Renderer for table nodes

    Examples
    --------
        >>> from linemark.ast import Document, Heading
        >>> HtmlRenderer().render_to_string(Document(children=[Heading(level=2, text="Hi")]))
        '<h2>Hi</h2>'

    """

    def __init__(
        self,
        inline_renderer: InlineRenderer | None = None,
        table_renderer: TableRenderer | None = None,
    ):
        """Initialize the HTML renderer with its inline and table collaborators."""
        self.inline_renderer = inline_renderer or InlineRenderer()
        self.table_renderer = table_renderer or TableRenderer()

    def render_to_string(self, doc: Document) -> str:
        """Render a document tree to an HTML string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            HTML fragment

        Raises
        ------
        RenderingError
            If the tree contains a node that is not a known variant

        """
        return self.render_node(doc)

    def render_node(self, node: Node) -> str:
        """Render any single node and its descendants."""
        if type(node) not in BLOCK_NODE_TYPES:
            raise RenderingError(f"Unknown node type: {type(node).__name__}", rendering_stage="block")
        return node.accept(self)

    def _render_children(self, children: list, separator: str) -> str:
        return separator.join(self.render_node(child) for child in children)

    def visit_document(self, node: Document) -> str:
        """Render document children separated by newlines."""
        return self._render_children(node.children, "\n")

    def visit_heading(self, node: Heading) -> str:
        """Render a heading as a raw ``<hN>`` element."""
        return f"<h{node.level}>{node.text}</h{node.level}>"

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a paragraph with inline spans resolved."""
        return f"<p>{self.inline_renderer.render(node.text)}</p>"

    def visit_block_quote(self, node: BlockQuote) -> str:
        """Render a blockquote with its text unchanged."""
        return f"<blockquote>{node.text}</blockquote>"

    def visit_thematic_break(self, node: ThematicBreak) -> str:
        """Render a horizontal rule."""
        return "<hr />"

    def visit_list(self, node: List) -> str:
        """Render a list and its children back to back."""
        return f"<ul>{self._render_children(node.children, '')}</ul>"

    def visit_list_item(self, node: ListItem) -> str:
        """Render a list item with inline spans resolved."""
        return f"<li>{self.inline_renderer.render(node.text)}</li>"

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a code block with its language as the class."""
        code = self._render_children(node.children, "\n")
        return f'<pre><code class="{node.language}">{code}</code></pre>'

    def visit_code_line(self, node: CodeLine) -> str:
        """Render a code line verbatim."""
        return node.text

    def visit_table(self, node: Table) -> str:
        """Render a table through the table renderer."""
        return self.table_renderer.render(node)


def wrap_in_document(
    content: str, title: str = DEFAULT_DOCUMENT_TITLE, language: str = DEFAULT_DOCUMENT_LANGUAGE
) -> str:
    """Wrap an HTML fragment in a minimal standalone HTML5 document.

    Parameters
    ----------
    content : str
        Rendered HTML fragment, inserted unchanged
    title : str, default = "Document"
        Text for the ``<title>`` element (escaped)
    language : str, default = "en"
        Value of the ``lang`` attribute (escaped)

    Returns
    -------
    str
        Complete HTML document

    """
    parts = [
        "<!DOCTYPE html>",
        f'<html lang="{html.escape(language)}">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{html.escape(title)}</title>",
        "</head>",
        "<body>",
        "<main>",
        content,
        "</main>",
        "</body>",
        "</html>",
    ]
    return "\n".join(parts)


def render_html(doc: Document) -> str:
    """Render ``doc`` with a default :class:`HtmlRenderer`."""
    logger.debug(f"Rendering {len(doc.children)} top-level nodes to HTML")
    return HtmlRenderer().render_to_string(doc)
