#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/linemark/renderers/__init__.py
"""Renderers for converting document trees to HTML.

- HtmlRenderer: block-level templates, one per node variant
- InlineRenderer: ordered inline substitutions for paragraph and list text
- TableRenderer: pipe-table source to ``<table>`` markup

"""

from linemark.renderers.base import BaseRenderer
from linemark.renderers.html import HtmlRenderer, render_html, wrap_in_document
from linemark.renderers.inline import InlineRenderer, render_inline
from linemark.renderers.table import TableRenderer, split_row, split_table

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "InlineRenderer",
    "TableRenderer",
    "render_html",
    "render_inline",
    "split_row",
    "split_table",
    "wrap_in_document",
]
