#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/api.py
"""Public conversion API.

``convert`` runs the whole pipeline; the remaining functions expose each
stage for callers that want to inspect or reuse intermediate results.

Every call builds its own tokenizer, parser and renderer, so concurrent
calls share no mutable state.

"""

from __future__ import annotations

import logging
from typing import Iterable

from linemark.ast import Document
from linemark.parsers.block import BlockParser
from linemark.renderers.html import HtmlRenderer
from linemark.tokenizer import Token, Tokenizer
from linemark.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def tokenize(markdown_text: str) -> list[Token]:
    """Classify every line of ``markdown_text`` into a token.

    Parameters
    ----------
    markdown_text : str
        Markdown source

    Returns
    -------
    list of Token
        One token per source line

    """
    with debug_timer(logger, "Tokenizing"):
        tokens = Tokenizer().tokenize(markdown_text)
    logger.debug(f"Tokenized {len(tokens)} line(s)")
    return tokens


def parse(tokens: Iterable[Token]) -> Document:
    """Build the document tree from a token stream.

    Raises
    ------
    ParsingError
        If the token stream contains a kind the parser has no rule for

    """
    with debug_timer(logger, "Parsing"):
        return BlockParser().parse(tokens)


def to_ast(markdown_text: str) -> Document:
    """Tokenize and parse ``markdown_text`` into a document tree."""
    return parse(tokenize(markdown_text))


def render(doc: Document) -> str:
    """Render a document tree to an HTML fragment.

    Raises
    ------
    RenderingError
        If the tree contains a node that is not a known variant

    """
    with debug_timer(logger, "Rendering"):
        return HtmlRenderer().render_to_string(doc)


def convert(markdown_text: str) -> str:
    """Convert markdown text to an HTML fragment.

    Parameters
    ----------
    markdown_text : str
        Markdown source

    Returns
    -------
    str
        HTML fragment. The output is not escaped; only pass it to trusted
        display surfaces.

    Examples
    --------
        >>> convert("# Title")
        '<h1>Title</h1>'
        >>> convert("- a\\n- b")
        '<ul><li>a</li><li>b</li></ul>'

    """
    return render(to_ast(markdown_text))
