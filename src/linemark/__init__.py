"""linemark - line-oriented markdown to HTML conversion.

linemark converts a small, line-oriented markdown dialect into an HTML
fragment. Conversion runs in three stages:

1. the tokenizer classifies every source line;
2. the block parser groups tokens into a document tree;
3. the HTML renderer walks the tree, resolving inline spans in paragraph
   and list item text and splitting pipe tables into cells.

Supported Syntax
----------------
- Headings ``#`` to ``######``
- Horizontal rules ``---``
- List items ``* item``, ``- item``, ``1. item``
- Blockquotes ``> text``
- Fenced code blocks with an optional language label
- Pipe tables
- Inline images, links, ``**bold**``, ``*italic*`` and ```code```

Each source line is its own block: consecutive lines are never merged into
one paragraph.

Security
--------
Output is not escaped or sanitized. Render trusted input only.

Examples
--------
    >>> from linemark import convert
    >>> convert("# Title\\nSome **bold** text")
    '<h1>Title</h1>\\n<p>Some <strong>bold</strong> text</p>'

Working with the stages directly:

    >>> from linemark import tokenize, parse, render
    >>> doc = parse(tokenize("* one\\n* two"))
    >>> render(doc)
    '<ul><li>one</li><li>two</li></ul>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "linemark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from linemark.api import convert, parse, render, to_ast, tokenize  # noqa: E402
from linemark.exceptions import (  # noqa: E402
    FileError,
    LinemarkError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from linemark.tokenizer import Token, TokenKind  # noqa: E402

__all__ = [
    "__version__",
    "convert",
    "parse",
    "render",
    "to_ast",
    "tokenize",
    "Token",
    "TokenKind",
    "LinemarkError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
