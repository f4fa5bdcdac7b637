"""Exceptions for printtable."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class PrintTableError(Exception):
    """
    Base exception for all printtable errors.

    Table mutators and ``TableRenderer.render()`` never raise these; they
    report them as diagnostics and return the instance instead. Only the
    strict accessors (``lines()``, ``format()``) raise.
    """

    kind = "error"

    def as_dict(self) -> dict[str, Any]:
        """Serialize for machine-readable output."""
        return {"error": self.kind, "message": str(self)}


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class SchemaError(PrintTableError):
    """
    Base exception for column/row shape errors.

    Raised (or reported) when content does not fit the table's columns.
    """

    pass


class RenderError(PrintTableError):
    """Base exception for errors detected while laying out a table."""

    pass


# ---------------------------------------------------------------------------
# Schema Exceptions
# ---------------------------------------------------------------------------


class SchemaLockedError(SchemaError):
    """Reported when a column is added after the first row."""

    kind = "schema_locked"

    def __init__(self, title: str, column_name: str) -> None:
        self.title = title
        self.column_name = column_name
        super().__init__(
            f"Table '{title}' already has rows added: "
            f"additional columns cannot be added (rejected '{column_name}')."
        )

    def as_dict(self) -> dict[str, Any]:
        return {**super().as_dict(), "column_name": self.column_name}


class RowArityMismatchError(SchemaError):
    """Reported when a row's cell count differs from the column count."""

    kind = "row_arity_mismatch"

    def __init__(self, title: str, actual: int, expected: int) -> None:
        self.title = title
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Trying to add row with {actual} elements while table '{title}' "
            f"requires {expected} elements per row."
        )

    def as_dict(self) -> dict[str, Any]:
        return {**super().as_dict(), "actual": self.actual, "expected": self.expected}


# ---------------------------------------------------------------------------
# Render Exceptions
# ---------------------------------------------------------------------------


class IncompleteTableError(RenderError):
    """
    Raised when a table is rendered without a title, columns, or rows.

    Attributes:
        title: Current title (may be empty)
        column_count: Number of columns defined
        row_count: Number of rows added
    """

    kind = "incomplete_table"

    def __init__(self, title: str, column_count: int, row_count: int) -> None:
        self.title = title
        self.column_count = column_count
        self.row_count = row_count
        super().__init__(
            "Missing some necessary data to print table:\n"
            f"\tTitle: '{title}' (must not be empty)\n"
            f"\tNumber of columns: {column_count} (min=1)\n"
            f"\tNumber of rows: {row_count} (min=1)"
        )

    @property
    def missing(self) -> list[str]:
        """Names of the missing parts, in display order."""
        parts = []
        if not self.title:
            parts.append("title")
        if self.column_count < 1:
            parts.append("columns")
        if self.row_count < 1:
            parts.append("rows")
        return parts

    def as_dict(self) -> dict[str, Any]:
        return {**super().as_dict(), "missing": self.missing}


class TitleOverflowError(RenderError):
    """Reported when the title is wider than the space its columns provide."""

    kind = "title_overflow"

    def __init__(self, title: str, available: int) -> None:
        self.title = title
        self.available = available
        super().__init__(
            f"Title '{title}' is {len(title)} characters wide but the columns "
            f"only leave room for {available}; the title line will overrun."
        )
