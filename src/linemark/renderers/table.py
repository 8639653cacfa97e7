#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/renderers/table.py
"""Pipe-table rendering.

A table node keeps the raw lines it was built from. This module splits them
into cells at render time:

- the first line is the header row;
- the second line is the separator and is skipped by position, whatever it
  contains;
- every later line is a body row.

Each line loses its wrapping ``|`` characters, is split on the remaining
``|`` characters, and every cell is stripped of surrounding whitespace. Rows
are not padded or truncated to the header width. Cell text is emitted as-is,
without inline rendering or escaping.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from linemark.ast.nodes import Table

logger = logging.getLogger(__name__)


def split_row(line: str) -> list[str]:
    """Split one pipe-table line into trimmed cell strings.

    Parameters
    ----------
    line : str
        A table line such as ``"| a | b |"``

    Returns
    -------
    list of str
        Cell text with surrounding whitespace removed

    Examples
    --------
        >>> split_row("| Name |  Age |")
        ['Name', 'Age']

    """
    line = line.strip()
    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|"):
        line = line[:-1]
    return [cell.strip() for cell in line.split("|")]


@dataclass
class TableCells:
    """Header and body cells of one table."""

    header: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


def split_table(lines: list[str]) -> TableCells:
    """Split raw table lines into header and body cells.

    Parameters
    ----------
    lines : list of str
        Table lines in source order

    Returns
    -------
    TableCells
        Header cells from line 0 and body rows from line 2 onward. A table
        with fewer than two lines has an empty body.

    """
    header = split_row(lines[0])
    if len(lines) < 2:
        logger.debug("Table has no separator line; rendering header only")
        return TableCells(header=header)
    return TableCells(header=header, rows=[split_row(line) for line in lines[2:]])


class TableRenderer:
    """Render a table node to an HTML ``<table>``."""

    def render(self, node: Table) -> str:
        """Return the HTML table for ``node``."""
        cells = split_table(node.lines)
        header_html = "".join(f"<th>{cell}</th>" for cell in cells.header)
        rows_html = "".join("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in cells.rows)
        return f"<table><thead><tr>{header_html}</tr></thead><tbody>{rows_html}</tbody></table>"
