"""
printtable: ASCII tables for console output.

Example:
    from printtable import TableRenderer

    table = TableRenderer()
    table.set_title("Test table")
    for name in ("column0", "column1", "column2"):
        table.add_column(name)
    table.add_rows([["row0"] * 3, ["row1"] * 3])
    table.render()

Output:
    -------------------------------
    |         Test table          |
    -------------------------------
    | column0 | column1 | column2 |
    -------------------------------
    |  row0   |  row0   |  row0   |
    |  row1   |  row1   |  row1   |
    -------------------------------
"""

from .exceptions import (
    IncompleteTableError,
    PrintTableError,
    RenderError,
    RowArityMismatchError,
    SchemaError,
    SchemaLockedError,
    TitleOverflowError,
)
from .layout import build_layout, center, column_widths
from .manifest import TableManifest
from .models import LayoutState, TableLayout
from .renderer import TableRenderer

__version__ = "0.1.0"

__all__ = [
    # Renderer
    "TableRenderer",
    "TableManifest",
    # Models
    "LayoutState",
    "TableLayout",
    # Layout
    "build_layout",
    "center",
    "column_widths",
    # Exceptions
    "PrintTableError",
    "SchemaError",
    "RenderError",
    "SchemaLockedError",
    "RowArityMismatchError",
    "IncompleteTableError",
    "TitleOverflowError",
]
