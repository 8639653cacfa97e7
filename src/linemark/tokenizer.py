#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/tokenizer.py
"""Line tokenizer for linemark documents.

The tokenizer is the first pipeline stage. It reads the source one physical
line at a time and classifies every line into exactly one :class:`Token`.
No structural nesting is recorded here; grouping lines into lists, code
blocks and tables is left to the block parser.

Classification is a two-state machine. Inside a fenced code block every line
is literal until the closing fence. Outside one, the block grammars are tried
in a fixed priority order and the first match wins:

1. code fence
2. heading (``#`` to ``######``)
3. horizontal rule (three or more ``-``)
4. list item (``*``, ``-`` or ``1.`` markers)
5. blockquote
6. table row (line wrapped in ``|``)
7. table separator (``|---|``)
8. paragraph (everything else, blank lines included)

Numbered list markers and fence labels are ASCII only: ``٣. item`` and
```` ```日本 ```` are paragraphs.

Note that every line the separator grammar accepts is already accepted by the
table row grammar, so text input never produces ``TABLE_SEPARATOR`` tokens.
The parser flushes tables at the end of each run of table lines, so tables
still render.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"^```([A-Za-z0-9_]*)$")
HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.*)$")
HR_PATTERN = re.compile(r"^-{3,}$")
LIST_ITEM_PATTERN = re.compile(r"^([*-]|[0-9]+\.)\s+(.*)$")
BLOCKQUOTE_PATTERN = re.compile(r"^>\s+(.*)$")
TABLE_ROW_PATTERN = re.compile(r"^\|.*\|$")
TABLE_SEPARATOR_PATTERN = re.compile(r"^\|-{3,}\|$")


class TokenKind(Enum):
    """Closed set of line classifications produced by the tokenizer."""

    HEADER1 = "header1"
    HEADER2 = "header2"
    HEADER3 = "header3"
    HEADER4 = "header4"
    HEADER5 = "header5"
    HEADER6 = "header6"
    HR = "hr"
    LIST_ITEM = "listItem"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK_START = "codeBlockStart"
    CODE_LINE = "codeLine"
    CODE_BLOCK_END = "codeBlockEnd"
    TABLE_ROW = "tableRow"
    TABLE_SEPARATOR = "tableSeparator"
    PARAGRAPH = "paragraph"

    @classmethod
    def heading(cls, level: int) -> TokenKind:
        """Return the heading kind for ``level`` (1-6)."""
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {level}")
        return cls(f"header{level}")

    @property
    def heading_level(self) -> int | None:
        """Heading level for ``HEADER*`` kinds, ``None`` for every other kind."""
        if self.value.startswith("header"):
            return int(self.value[len("header") :])
        return None


HEADING_KINDS = frozenset(kind for kind in TokenKind if kind.heading_level is not None)


@dataclass(frozen=True)
class Token:
    """One classified source line.

    Parameters
    ----------
    kind : TokenKind
        Classification of the line
    value : str
        Extracted payload: heading text, list item text, fence language,
        or the whole line for table rows, code lines and paragraphs
    line : int, default = 0
        1-based source line number, for diagnostics only

    """

    kind: TokenKind
    value: str = ""
    line: int = 0

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation of the token."""
        return {"kind": self.kind.value, "value": self.value, "line": self.line}


class Tokenizer:
    """Split markdown text into a flat list of :class:`Token` objects.

    A tokenizer holds only the code-block flag, and resets it on every call
    to :meth:`tokenize`, so one instance can be reused but not shared across
    threads mid-call.

    Examples
    --------
        >>> tokens = Tokenizer().tokenize("# Title\\nSome text")
        >>> [token.kind.value for token in tokens]
        ['header1', 'paragraph']

    """

    def __init__(self) -> None:
        self._in_code_block = False

    def tokenize(self, text: str) -> list[Token]:
        """Classify every line of ``text``.

        Parameters
        ----------
        text : str
            Markdown source. Lines are split on ``\\n``; a trailing ``\\r`` is
            dropped from each line.

        Returns
        -------
        list of Token
            Exactly one token per source line, in source order

        """
        self._in_code_block = False
        tokens: list[Token] = []

        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
            if self._in_code_block:
                tokens.append(self._classify_code_line(line, line_number))
            else:
                tokens.append(self._classify_line(line, line_number))

        if self._in_code_block:
            logger.debug("Code fence left open at end of input; remaining lines kept as code")

        return tokens

    def _classify_code_line(self, line: str, line_number: int) -> Token:
        if FENCE_PATTERN.match(line):
            self._in_code_block = False
            return Token(TokenKind.CODE_BLOCK_END, "", line_number)
        return Token(TokenKind.CODE_LINE, line, line_number)

    def _classify_line(self, line: str, line_number: int) -> Token:
        """Apply the block grammars in priority order; the first match wins."""
        match = FENCE_PATTERN.match(line)
        if match:
            self._in_code_block = True
            return Token(TokenKind.CODE_BLOCK_START, match.group(1), line_number)

        match = HEADING_PATTERN.match(line)
        if match:
            return Token(TokenKind.heading(len(match.group(1))), match.group(2), line_number)

        if HR_PATTERN.match(line):
            return Token(TokenKind.HR, "", line_number)

        match = LIST_ITEM_PATTERN.match(line)
        if match:
            return Token(TokenKind.LIST_ITEM, match.group(2), line_number)

        match = BLOCKQUOTE_PATTERN.match(line)
        if match:
            return Token(TokenKind.BLOCKQUOTE, match.group(1), line_number)

        if TABLE_ROW_PATTERN.match(line):
            return Token(TokenKind.TABLE_ROW, line, line_number)

        if TABLE_SEPARATOR_PATTERN.match(line):
            return Token(TokenKind.TABLE_SEPARATOR, line, line_number)

        return Token(TokenKind.PARAGRAPH, line, line_number)


def tokenize(text: str) -> list[Token]:
    """Tokenize ``text`` with a fresh :class:`Tokenizer`.

    Parameters
    ----------
    text : str
        Markdown source

    Returns
    -------
    list of Token
        One token per source line

    """
    return Tokenizer().tokenize(text)
