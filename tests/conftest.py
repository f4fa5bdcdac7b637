"""Pytest fixtures for printtable tests."""

import logging

import pytest

from printtable import TableRenderer


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler and level changes made by ``configure_logging``."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def table() -> TableRenderer:
    """An empty renderer."""
    return TableRenderer()


@pytest.fixture
def sample_table() -> TableRenderer:
    """The three-column, two-row table from the package docs."""
    t = TableRenderer()
    t.set_title("Test table")
    for name in ("column0", "column1", "column2"):
        t.add_column(name)
    t.add_rows([["row0", "row0", "row0"], ["row1", "row1", "row1"]])
    return t
