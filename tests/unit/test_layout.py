"""Tests for the layout algorithm."""

import pytest

from printtable.layout import (
    build_layout,
    center,
    column_widths,
    format_line,
    table_width,
)


class TestCenter:
    """Tests for center()."""

    @pytest.mark.parametrize(
        "text,width,expected",
        [
            ("ab", 2, "ab"),
            ("ab", 3, "ab "),
            ("ab", 4, " ab "),
            ("ab", 5, " ab  "),
            ("", 3, "   "),
        ],
    )
    def test_extra_space_goes_right(self, text: str, width: int, expected: str) -> None:
        """Odd padding puts the extra space after the text."""
        assert center(text, width) == expected

    def test_left_padding_is_floor_of_half(self) -> None:
        """The text starts at column (width - len) // 2."""
        for width in range(4, 12):
            result = center("abcd", width)
            left = (width - 4) // 2
            assert len(result) == width
            assert result.index("a") == left
            assert result == " " * left + "abcd" + " " * (width - 4 - left)

    def test_text_wider_than_width_unchanged(self) -> None:
        """Overlong text is not truncated."""
        assert center("abcdef", 3) == "abcdef"


class TestColumnWidths:
    """Tests for column_widths()."""

    def test_header_is_widest(self) -> None:
        assert column_widths(["column0"], [["a"], ["bb"]]) == [7]

    def test_cell_is_widest(self) -> None:
        assert column_widths(["ID", "Name"], [["1", "x"], ["12345", "y"]]) == [5, 4]

    def test_no_rows(self) -> None:
        assert column_widths(["A", "BB"], []) == [1, 2]

    def test_extra_cells_ignored(self) -> None:
        """Cells past the last column do not add or widen columns."""
        assert column_widths(["A"], [["x", "very long"]]) == [1]

    def test_short_rows_tolerated(self) -> None:
        assert column_widths(["A", "B"], [["xyz"]]) == [3, 1]


class TestFormatLine:
    """Tests for format_line() and table_width()."""

    def test_table_width(self) -> None:
        assert table_width([1, 2]) == 10
        assert table_width([7, 7, 7]) == 31

    def test_frames_cells(self) -> None:
        assert format_line(["x", "y"], [1, 2]) == "| x | y  |"

    def test_extra_cell_uses_own_width(self) -> None:
        assert format_line(["a", "b", "cde"], [1, 1]) == "| a | b | cde |"

    def test_short_row(self) -> None:
        assert format_line(["a"], [1, 1]) == "| a |"


class TestBuildLayout:
    """Tests for build_layout()."""

    def test_worked_example(self) -> None:
        """Title T, columns A/BB, one row x/y."""
        layout = build_layout("T", ["A", "BB"], [["x", "y"]])

        assert layout.widths == (1, 2)
        assert layout.divider == "-" * 10
        assert layout.width == 10
        assert layout.title_line == "|   T    |"
        assert layout.header_line == "| A | BB |"
        assert layout.row_lines == ("| x | y  |",)

    def test_sample_table(self) -> None:
        layout = build_layout(
            "Test table",
            ["column0", "column1", "column2"],
            [["row0"] * 3, ["row1"] * 3],
        )

        assert layout.lines() == [
            "-------------------------------",
            "|         Test table          |",
            "-------------------------------",
            "| column0 | column1 | column2 |",
            "-------------------------------",
            "|  row0   |  row0   |  row0   |",
            "|  row1   |  row1   |  row1   |",
            "-------------------------------",
        ]

    def test_header_centered_when_cells_wider(self) -> None:
        layout = build_layout("Ids", ["ID"], [["abcde"]])
        assert layout.header_line == "|  ID   |"
        assert layout.row_lines == ("| abcde |",)

    def test_all_lines_same_width(self) -> None:
        """A well-formed table has 6 + rows lines of equal width."""
        rows = [["Nvidia", "GTX 980 Ti", "2015"], ["AMD", "RX 580", "2017"]]
        layout = build_layout("GPUs", ["Vendor", "GPU Name", "Release Year"], rows)

        lines = layout.lines()
        assert len(lines) == 6 + len(rows)
        assert {len(line) for line in lines} == {layout.width}
        assert layout.width == sum(w + 3 for w in layout.widths) + 1

    def test_widths_match_column_law(self) -> None:
        columns = ["a", "bbbb", "cc"]
        rows = [["xxx", "y", "z"], ["x", "yy", "zzzzz"]]
        layout = build_layout("Title", columns, rows)

        for i, name in enumerate(columns):
            assert layout.widths[i] == max(len(name), *(len(r[i]) for r in rows))

    def test_title_overflow_left_unpadded(self) -> None:
        layout = build_layout("Long title", ["A"], [["x"]])
        assert layout.title_line == "| Long title |"
        assert layout.width == 5
