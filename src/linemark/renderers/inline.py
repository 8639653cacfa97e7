#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/renderers/inline.py
"""Inline span rendering for paragraph and list item text.

Inline markup is resolved with five global substitutions applied in a fixed
order, each pass reading the output of the previous one:

1. images ``![alt](url)``
2. links ``[text](url)``
3. bold ``**text**``
4. italic ``*text*``
5. code spans ```text```

Images run before links so the ``!`` prefix is not left behind. Link and image
passes do not protect their URLs from the later passes: asterisks or
backticks inside a URL are still rewritten, so ``[a](http://x/**y**)``
renders as ``<a href="http://x/<strong>y</strong>">a</a>``.

Bold runs before italic so a balanced ``**x**`` is never read as two empty
italic spans. Unbalanced delimiters are left for the later
passes to pair up as best they can; no pass ever fails.

Code spans run last, which means their content has already been through the
emphasis passes: ```a*b*c``` renders as ``<code>a<em>b</em>c</code>``.

Warnings
--------
Nothing is escaped. ``<`` and ``&`` in the input, and quotes inside URLs,
pass straight into the output. Only feed trusted text through this module.

"""

from __future__ import annotations

import re

INLINE_PASSES: tuple[tuple[str, re.Pattern[str], str], ...] = (
    ("image", re.compile(r"!\[([^\]]*)\]\(([^)]+)\)"), r'<img src="\2" alt="\1" />'),
    ("link", re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), r'<a href="\2">\1</a>'),
    ("bold", re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    ("italic", re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    ("code", re.compile(r"`([^`]+)`"), r"<code>\1</code>"),
)


class InlineRenderer:
    """Apply the ordered inline substitution passes to a line of text.

    Examples
    --------
        >>> InlineRenderer().render("**bold** and [link](http://example.com)")
        '<strong>bold</strong> and <a href="http://example.com">link</a>'

    """

    def __init__(self, passes: tuple[tuple[str, re.Pattern[str], str], ...] = INLINE_PASSES):
        self.passes = passes

    def render(self, text: str) -> str:
        """Return ``text`` with every inline span replaced by its HTML."""
        for _name, pattern, replacement in self.passes:
            text = pattern.sub(replacement, text)
        return text


_default_renderer = InlineRenderer()


def render_inline(text: str) -> str:
    """Render inline spans in ``text`` with the default pass order."""
    return _default_renderer.render(text)
