"""
Table layout algorithm.

Computes column widths and the bordered lines of a table:

    -------------------------------
    |         Test table          |
    -------------------------------
    | column0 | column1 | column2 |
    -------------------------------
    |  row0   |  row0   |  row0   |
    |  row1   |  row1   |  row1   |
    -------------------------------

Widths are measured with ``len()``, so wide or combining characters are
counted as one column each.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import TableLayout

# "| " before the content and " " after it
CELL_PADDING = 3
# Closing "|" of every line
RIGHT_BORDER = 1
# "| " and " |" around the title
TITLE_PADDING = 4


def center(text: str, width: int) -> str:
    """Center text in width, putting the odd extra space on the right.

    Text wider than ``width`` is returned unchanged.
    """
    deficit = width - len(text)
    left = deficit // 2
    right = deficit - left
    return " " * left + text + " " * right


def column_widths(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    """Calculate column widths (max of header and all cell values).

    Cells past the last column do not widen anything.
    """
    widths = [len(c) for c in columns]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(cell))
    return widths


def table_width(widths: Sequence[int]) -> int:
    """Total line width for the given column widths."""
    return sum(w + CELL_PADDING for w in widths) + RIGHT_BORDER


def format_line(cells: Sequence[str], widths: Sequence[int]) -> str:
    """Frame cells as ``| a | b |``, centering each in its column."""
    parts = []
    for i, cell in enumerate(cells):
        w = widths[i] if i < len(widths) else len(cell)
        parts.append("| " + center(cell, w) + " ")
    return "".join(parts) + "|"


def build_layout(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> TableLayout:
    """Lay out a table.

    Args:
        title: Table title
        columns: Column names
        rows: Rows of cell values

    Returns:
        The computed layout
    """
    widths = column_widths(columns, rows)
    total = table_width(widths)

    return TableLayout(
        widths=tuple(widths),
        divider="-" * total,
        title_line="| " + center(title, total - TITLE_PADDING) + " |",
        header_line=format_line(columns, widths),
        row_lines=tuple(format_line(row, widths) for row in rows),
    )
