"""
Stateful ASCII table renderer.

``TableRenderer`` accumulates a title, column names and rows, and prints
them as a bordered table. The layout is built on the first render and reused
until the content changes.

Example:
    table = TableRenderer()
    table.set_title("Test table")
    for name in ("column0", "column1", "column2"):
        table.add_column(name)
    table.add_rows([["row0"] * 3, ["row1"] * 3])
    table.render()

Problems such as a wrong-sized row are reported, not raised: the call
returns the error, appends it to ``diagnostics`` and logs a warning.
Diagnostics accumulate across calls until ``clear_diagnostics()`` or
``reset()``.

Content is only changed through the mutators; the public attributes are
read-only copies.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .exceptions import (
    IncompleteTableError,
    PrintTableError,
    RowArityMismatchError,
    SchemaLockedError,
    TitleOverflowError,
)
from .layout import TITLE_PADDING, build_layout
from .models import LayoutState, TableLayout

logger = logging.getLogger(__name__)


class TableRenderer:
    """Accumulate table content and render it as bordered text.

    Not thread-safe; callers sharing an instance must serialize access.
    """

    def __init__(self) -> None:
        self._title = ""
        self._column_names: list[str] = []
        self._rows: list[list[str]] = []
        self._has_rows = False
        self._diagnostics: list[PrintTableError] = []
        self._layout: TableLayout | None = None
        self._state = LayoutState.DIRTY

    @property
    def title(self) -> str:
        return self._title

    @property
    def column_names(self) -> list[str]:
        """Copy of the column names."""
        return list(self._column_names)

    @property
    def rows(self) -> list[list[str]]:
        """Copy of the rows, in insertion order."""
        return [list(row) for row in self._rows]

    @property
    def has_rows(self) -> bool:
        """True once a row has been accepted; columns are then locked."""
        return self._has_rows

    @property
    def diagnostics(self) -> list[PrintTableError]:
        """Copy of the errors reported since the last clear or reset."""
        return list(self._diagnostics)

    @property
    def state(self) -> LayoutState:
        """CLEAN when the cached layout reflects the current content."""
        return self._state

    @property
    def layout(self) -> TableLayout | None:
        """The cached layout, or None if it is stale or was never built."""
        if self._state is LayoutState.DIRTY:
            return None
        return self._layout

    def _mark_dirty(self) -> None:
        self._state = LayoutState.DIRTY

    def _report(self, error: PrintTableError) -> PrintTableError:
        self._diagnostics.append(error)
        logger.warning("%s", error)
        return error

    def _append_row(self, cells: Sequence[str]) -> None:
        self._rows.append(list(cells))
        self._has_rows = True
        self._mark_dirty()

    def clear_diagnostics(self) -> None:
        """Forget reported errors without touching table content."""
        self._diagnostics = []

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def set_title(self, title: str) -> None:
        """Replace the title."""
        self._title = title
        self._mark_dirty()

    def add_column(self, name: str) -> PrintTableError | None:
        """
        Append a column.

        Columns are locked once the first row has been added; later calls
        report ``SchemaLockedError`` and leave the columns unchanged.
        """
        if self._has_rows:
            return self._report(SchemaLockedError(self._title, name))
        self._column_names.append(name)
        self._mark_dirty()
        return None

    def add_row(self, cells: Sequence[str]) -> PrintTableError | None:
        """
        Append one row.

        A row whose length differs from the column count is reported as
        ``RowArityMismatchError`` and not appended.
        """
        if len(cells) != len(self._column_names):
            return self._report(
                RowArityMismatchError(self._title, len(cells), len(self._column_names))
            )
        self._append_row(cells)
        return None

    def add_rows(self, rows: Iterable[Sequence[str]]) -> list[PrintTableError]:
        """
        Append several rows.

        Unlike ``add_row``, a row of the wrong length is reported but still
        appended. Such rows render with only the cells they have, and cells
        past the last column are shown at their own width.

        Rows appended before an exception from ``rows`` are kept.

        Returns:
            Errors reported for this call (empty on success)
        """
        errors: list[PrintTableError] = []
        for cells in rows:
            if len(cells) != len(self._column_names):
                errors.append(
                    self._report(
                        RowArityMismatchError(self._title, len(cells), len(self._column_names))
                    )
                )
            self._append_row(cells)
        return errors

    def reset(self) -> None:
        """Clear all content and diagnostics, as if newly created."""
        self._title = ""
        self._column_names = []
        self._rows = []
        self._has_rows = False
        self._diagnostics = []
        self._layout = None
        self._mark_dirty()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _check_complete(self) -> None:
        if not self._title or not self._column_names or not self._rows:
            raise IncompleteTableError(self._title, len(self._column_names), len(self._rows))

    def _ensure_layout(self) -> TableLayout:
        if self._state is LayoutState.CLEAN and self._layout is not None:
            return self._layout

        logger.debug(
            "Building layout for table '%s' (%d columns, %d rows)",
            self._title,
            len(self._column_names),
            len(self._rows),
        )
        layout = build_layout(self._title, self._column_names, self._rows)
        available = layout.width - TITLE_PADDING
        if len(self._title) > available:
            self._report(TitleOverflowError(self._title, available))

        self._layout = layout
        self._state = LayoutState.CLEAN
        return layout

    def lines(self) -> list[str]:
        """
        Return the rendered lines without printing them.

        Raises:
            IncompleteTableError: If the title, columns or rows are empty
        """
        self._check_complete()
        return self._ensure_layout().lines()

    def format(self) -> str:
        """
        Return the rendered table as a single string.

        Raises:
            IncompleteTableError: If the title, columns or rows are empty
        """
        return "\n".join(self.lines())

    def render(self, file: TextIO | None = None) -> PrintTableError | None:
        """
        Print the table.

        Args:
            file: Stream to write to (default: ``sys.stdout``)

        Returns:
            ``IncompleteTableError`` if nothing could be printed, else None
        """
        try:
            lines = self.lines()
        except IncompleteTableError as e:
            return self._report(e)

        file = file or sys.stdout
        for line in lines:
            print(line, file=file)
        return None
