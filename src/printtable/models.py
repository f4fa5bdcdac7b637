"""Core models for printtable."""

from dataclasses import dataclass
from enum import Enum


class LayoutState(Enum):
    """Whether a renderer's cached layout matches its content."""

    CLEAN = "clean"
    DIRTY = "dirty"


@dataclass(frozen=True)
class TableLayout:
    """
    Pre-rendered lines for one version of a table's content.

    Attributes:
        widths: Content width reserved for each column
        divider: Full-width line of dashes
        title_line: Bordered, centered title
        header_line: Bordered column names
        row_lines: One bordered line per row, in insertion order
    """

    widths: tuple[int, ...]
    divider: str
    title_line: str
    header_line: str
    row_lines: tuple[str, ...]

    @property
    def width(self) -> int:
        """Total table width in characters."""
        return len(self.divider)

    def lines(self) -> list[str]:
        """Return the lines in output order."""
        return [
            self.divider,
            self.title_line,
            self.divider,
            self.header_line,
            self.divider,
            *self.row_lines,
            self.divider,
        ]
