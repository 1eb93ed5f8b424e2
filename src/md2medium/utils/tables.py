#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/utils/tables.py
"""Flattening of tables into aligned monospace text.

Medium has no table element, so a table is reduced to rows of plain cell
text and laid out as a pipe-delimited block:

    | Name  | Qty |
    |-------|-----|
    | Apple | 3   |

Cells are always left aligned and never truncated.
"""

from __future__ import annotations

import logging
from typing import Sequence

from md2medium.ast.nodes import (
    Code,
    FootnoteReference,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Node,
    Table,
    Text,
    get_node_children,
)
from md2medium.constants import DEFAULT_MIN_COLUMN_WIDTH, TABLE_CELL_SEPARATOR, TABLE_RULE_CHAR
from md2medium.utils.display_width import WidthFunction, display_width

logger = logging.getLogger(__name__)


def extract_cell_text(cell: Node) -> str:
    """Flatten the content of a table cell into plain text.

    Text and code spans contribute their raw content, line breaks become a
    single space and images contribute their alt text. Formatting containers
    (emphasis, links, paragraphs, ...) contribute only their children. Raw
    HTML and footnote references contribute nothing.

    Parameters
    ----------
    cell : Node
        Usually a TableCell, but any node is accepted

    Returns
    -------
    str
        The flattened text with surrounding whitespace removed

    Examples
    --------
    >>> from md2medium.ast import TableCell, Strong, Text, Code
    >>> extract_cell_text(TableCell(content=[Strong(content=[Text("Use ")]), Code("x < y")]))
    'Use x < y'

    """
    parts: list[str] = []

    def visit(node: Node) -> None:
        if isinstance(node, (Text, Code)):
            parts.append(node.content)
        elif isinstance(node, LineBreak):
            parts.append(" ")
        elif isinstance(node, Image):
            parts.append(node.alt_text)
        elif isinstance(node, (HTMLInline, HTMLBlock, FootnoteReference)):
            return
        else:
            for child in get_node_children(node):
                visit(child)

    visit(cell)
    return "".join(parts).strip()


def table_to_rows(table: Table) -> tuple[list[list[str]], int]:
    """Extract the cell text of every row of a table.

    Parameters
    ----------
    table : Table
        Table node

    Returns
    -------
    tuple
        (rows, header_row_count) where rows holds the header row first when
        present, and header_row_count counts rows marked ``is_header``

    """
    all_rows = table.all_rows()
    rows = [[extract_cell_text(cell) for cell in row.cells] for row in all_rows]
    header_row_count = sum(1 for row in all_rows if row.is_header)
    return rows, header_row_count


def compute_column_widths(
    rows: Sequence[Sequence[str]],
    width_fn: WidthFunction = display_width,
    min_width: int = DEFAULT_MIN_COLUMN_WIDTH,
) -> list[int]:
    """Compute the width of every column.

    Parameters
    ----------
    rows : sequence of sequence of str
        Cell text per row; rows may have different lengths
    width_fn : callable, default display_width
        Function measuring the display width of a string
    min_width : int, default 3
        Floor applied to every column

    Returns
    -------
    list of int
        One width per column, the widest cell in the column but at least
        ``min_width``

    """
    column_count = max((len(row) for row in rows), default=0)
    widths = [min_width] * column_count
    for row in rows:
        for col, cell in enumerate(row):
            widths[col] = max(widths[col], width_fn(cell))
    return widths


def layout_table(
    rows: Sequence[Sequence[str]],
    header_row_count: int,
    width_fn: WidthFunction = display_width,
    min_width: int = DEFAULT_MIN_COLUMN_WIDTH,
) -> str:
    """Lay out rows of cell text as a pipe-delimited monospace table.

    Parameters
    ----------
    rows : sequence of sequence of str
        Cell text per row. Short rows are padded with empty cells.
    header_row_count : int
        Number of leading header rows. A separator line follows the last
        header row unless it is also the last row of the table.
    width_fn : callable, default display_width
        Function measuring the display width of a string
    min_width : int, default 3
        Narrowest column width

    Returns
    -------
    str
        Lines joined with ``\\n``. Row lines end with ``"| "`` except the
        last one, whose trailing space is trimmed with the rest of the block.
        Empty when there are no rows.

    Examples
    --------
    >>> layout_table([["Name", "Qty"], ["Apple", "3"]], header_row_count=1).split("\\n")
    ['| Name  | Qty | ', '|-------|-----|', '| Apple | 3   |']

    """
    if not rows:
        return ""

    widths = compute_column_widths(rows, width_fn, min_width)
    separator = TABLE_CELL_SEPARATOR + "".join(
        TABLE_RULE_CHAR * (width + 2) + TABLE_CELL_SEPARATOR for width in widths
    )

    lines: list[str] = []
    for index, row in enumerate(rows):
        line = TABLE_CELL_SEPARATOR + " "
        for col, width in enumerate(widths):
            cell = row[col] if col < len(row) else ""
            line += cell + " " * (width - width_fn(cell)) + " " + TABLE_CELL_SEPARATOR + " "
        lines.append(line)

        if index == header_row_count - 1 and index < len(rows) - 1:
            lines.append(separator)

    logger.debug(f"Laid out table: {len(rows)} rows, {len(widths)} columns, widths={widths}")
    # only the end of the block is trimmed
    return "\n".join(lines).rstrip()


__all__ = ["compute_column_widths", "extract_cell_text", "layout_table", "table_to_rows"]
