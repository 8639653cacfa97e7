#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/parsers/block.py
"""Token stream to document tree.

The block parser is the second pipeline stage. It folds the flat token list
into a :class:`~linemark.ast.Document`, threading an explicit
:class:`ParserState` through every step instead of keeping mutable parser
attributes.

Grouping rules
--------------
- Leaves (headings, paragraphs, blockquotes, rules) attach to the current
  container. Only a closing code fence resets the current container to the
  root, so leaves that follow a list are attached inside that list.
- List items open a new list under the root unless a list is already
  current.
- A code fence opens a code block under the root; code lines attach to it
  until the closing fence.
- Table rows are buffered. The buffer becomes a Table node under the root
  on a separator token, and when the run of table lines ends.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable

from linemark.ast.nodes import (
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
)
from linemark.exceptions import ParsingError
from linemark.tokenizer import HEADING_KINDS, Token, TokenKind

logger = logging.getLogger(__name__)

TABLE_KINDS = frozenset({TokenKind.TABLE_ROW, TokenKind.TABLE_SEPARATOR})


@dataclass(frozen=True)
class ParserState:
    """Snapshot of the parser between two tokens.

    Parameters
    ----------
    root : Document
        Document being built
    current : Document, List or CodeBlock
        Container that receives leaves and code lines
    table_buffer : tuple of str
        Raw table lines seen since the last flush

    """

    root: Document = field(default_factory=Document)
    current: Container | None = None
    table_buffer: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Default the current container to the root."""
        if self.current is None:
            object.__setattr__(self, "current", self.root)

    @property
    def container(self) -> Container:
        """Current container, never ``None`` once constructed."""
        if self.current is None:
            raise ParsingError("Parser state has no current container", parsing_stage="block")
        return self.current


class BlockParser:
    """Build a document tree from tokenizer output.

    Examples
    --------
        >>> from linemark.tokenizer import tokenize
        >>> doc = BlockParser().parse(tokenize("* a\\n* b"))
        >>> len(doc.children[0].children)
        2

    """

    def __init__(self) -> None:
        self._handlers: dict[TokenKind, Callable[[ParserState, Token], ParserState]] = {
            TokenKind.HR: self._handle_leaf,
            TokenKind.PARAGRAPH: self._handle_leaf,
            TokenKind.BLOCKQUOTE: self._handle_leaf,
            TokenKind.LIST_ITEM: self._handle_list_item,
            TokenKind.CODE_BLOCK_START: self._handle_code_block_start,
            TokenKind.CODE_LINE: self._handle_code_line,
            TokenKind.CODE_BLOCK_END: self._handle_code_block_end,
            TokenKind.TABLE_ROW: self._handle_table_line,
            TokenKind.TABLE_SEPARATOR: self._handle_table_line,
        }
        for kind in HEADING_KINDS:
            self._handlers[kind] = self._handle_leaf

    def parse(self, tokens: Iterable[Token]) -> Document:
        """Parse a token stream into a document tree.

        Parameters
        ----------
        tokens : iterable of Token
            Tokenizer output, in source order

        Returns
        -------
        Document
            Root of the parsed tree

        Raises
        ------
        ParsingError
            If a token kind has no grouping rule, or a code line arrives
            while no code block is open

        """
        state = ParserState()
        for token in tokens:
            state = self.step(state, token)
        state = self._flush_table(state, reason="end of input")
        logger.debug(f"Parsed document with {len(state.root.children)} top-level nodes")
        return state.root

    def step(self, state: ParserState, token: Token) -> ParserState:
        """Apply one token to ``state`` and return the resulting state."""
        handler = self._handlers.get(token.kind) if isinstance(token.kind, TokenKind) else None
        if handler is None:
            raise ParsingError(
                f"Unknown token type: {getattr(token.kind, 'value', token.kind)!r} (line {token.line})",
                parsing_stage="block",
            )

        if token.kind not in TABLE_KINDS:
            state = self._flush_table(state, reason="table run ended")
        return handler(state, token)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _handle_leaf(self, state: ParserState, token: Token) -> ParserState:
        self._append(state.container, self._make_leaf(token))
        return state

    def _handle_list_item(self, state: ParserState, token: Token) -> ParserState:
        if not isinstance(state.current, List):
            new_list = List()
            state.root.children.append(new_list)
            state = replace(state, current=new_list)
        self._append(state.container, ListItem(text=token.value))
        return state

    def _handle_code_block_start(self, state: ParserState, token: Token) -> ParserState:
        code_block = CodeBlock(language=token.value)
        state.root.children.append(code_block)
        return replace(state, current=code_block)

    def _handle_code_line(self, state: ParserState, token: Token) -> ParserState:
        if not isinstance(state.current, CodeBlock):
            raise ParsingError(
                f"Code line outside of a code block (line {token.line})",
                parsing_stage="block",
            )
        state.current.children.append(CodeLine(text=token.value))
        return state

    def _handle_code_block_end(self, state: ParserState, token: Token) -> ParserState:
        return replace(state, current=state.root)

    def _handle_table_line(self, state: ParserState, token: Token) -> ParserState:
        state = replace(state, table_buffer=state.table_buffer + (token.value,))
        if token.kind is TokenKind.TABLE_SEPARATOR:
            state = self._flush_table(state, reason="separator")
        return state

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _flush_table(state: ParserState, reason: str) -> ParserState:
        """Turn a non-empty table buffer into a Table node under the root."""
        if not state.table_buffer:
            return state
        logger.debug(f"Flushing {len(state.table_buffer)} table line(s) on {reason}")
        state.root.children.append(Table(source="\n".join(state.table_buffer)))
        return replace(state, table_buffer=())

    @staticmethod
    def _make_leaf(token: Token) -> Node:
        level = token.kind.heading_level
        if level is not None:
            return Heading(level=level, text=token.value)
        if token.kind is TokenKind.PARAGRAPH:
            return Paragraph(text=token.value)
        if token.kind is TokenKind.BLOCKQUOTE:
            return BlockQuote(text=token.value)
        return ThematicBreak()

    @staticmethod
    def _append(container: Container, node: Node) -> None:
        # A code block only ever holds code lines.
        if isinstance(container, CodeBlock):
            raise ParsingError(
                f"{type(node).__name__} cannot be placed inside a code block",
                parsing_stage="block",
            )
        container.children.append(node)


def parse(tokens: Iterable[Token]) -> Document:
    """Parse ``tokens`` with a fresh :class:`BlockParser`."""
    return BlockParser().parse(tokens)
