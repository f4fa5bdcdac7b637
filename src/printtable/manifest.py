"""YAML manifest parsing for table content.

A manifest describes one table:

    title: My Friends' Gaming GPUs
    columns: [Vendor, GPU Name, Release Year]
    rows:
      - [Nvidia, GTX 980 Ti, 2015]
      - [Nvidia, GTX 1070, 2016]

Scalar cells are converted with ``str()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .exceptions import PrintTableError
    from .renderer import TableRenderer


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class TableManifest:
    """Parsed table declaration."""

    title: str
    columns: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TableManifest:
        title = d.get("title")
        if title is None or title == "":
            raise ValueError("'title' is required in table manifest")

        columns = d.get("columns", [])
        if not isinstance(columns, list):
            raise ValueError("'columns' must be a list")

        rows = d.get("rows", [])
        if not isinstance(rows, list):
            raise ValueError("'rows' must be a list")
        for idx, row in enumerate(rows):
            if not isinstance(row, list):
                raise ValueError(f"row {idx} must be a list, got {type(row).__name__}")

        return cls(
            title=_cell(title),
            columns=tuple(_cell(c) for c in columns),
            rows=tuple(tuple(_cell(v) for v in row) for row in rows),
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> TableManifest:
        import yaml

        data = yaml.safe_load(yaml_str)
        if not isinstance(data, dict):
            raise ValueError("table manifest must be a mapping")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "columns": list(self.columns),
            "rows": [list(row) for row in self.rows],
        }

    def apply(self, renderer: TableRenderer) -> list[PrintTableError]:
        """Load this manifest into a renderer.

        Rows go through ``add_rows``, so wrong-sized rows are reported but
        kept.

        Returns:
            Errors reported while loading
        """
        errors: list[PrintTableError] = []
        renderer.set_title(self.title)
        for name in self.columns:
            error = renderer.add_column(name)
            if error is not None:
                errors.append(error)
        errors.extend(renderer.add_rows(self.rows))
        return errors
