import pytest

from namegrid.layout import densest_column, fill_gaps, find_blank_cells, find_gap_indices
from namegrid.layout.model import Column, Row


def _col(x, *rows):
    return Column(anchor_x=x, rows=[Row(y, (t,)) for y, t in rows])


def test_find_gap_indices_scenario():
    columns = [_col(0, (0, "Alice"), (400, "Bob")), _col(700, (0, "Carol"))]
    assert find_gap_indices(columns) == [[], [1]]


def test_find_gap_indices_skips_columns_tied_with_densest():
    # misaligned but equally long columns are not checked
    columns = [_col(0, (0, "A"), (400, "B")), _col(700, (1000, "C"), (2000, "D"))]
    assert find_gap_indices(columns) == [[], []]


def test_densest_column_prefers_first_on_tie():
    a = _col(0, (0, "A"))
    b = _col(700, (0, "B"))
    assert densest_column([a, b]) is a


def test_densest_column_empty_layout():
    with pytest.raises(ValueError):
        densest_column([])


def test_find_blank_cells_window_is_open():
    full = [Row(0, ("A",)), Row(400, ("B",))]
    assert find_blank_cells(full, [Row(149, ("x",))]) == [1]
    assert find_blank_cells(full, [Row(150, ("x",))]) == [0, 1]
    assert find_blank_cells(full, [Row(-149, ("x",))]) == [1]


def test_find_blank_cells_custom_half_window():
    full = [Row(0, ("A",)), Row(400, ("B",))]
    assert find_blank_cells(full, [Row(200, ("x",))], half_window=250) == []


def test_fill_gaps_applies_indices_left_to_right():
    reference = _col(0, (0, "a"), (400, "b"), (800, "c"), (1200, "d"))
    sparse = _col(700, (400, "x"))
    columns = [reference, sparse]
    gaps = find_gap_indices(columns)
    assert gaps == [[], [0, 2, 3]]
    fill_gaps(columns, gaps)
    assert [r.tokens for r in sparse.rows] == [("Empty",), ("x",), ("Empty",), ("Empty",)]
    assert [r.y for r in sparse.rows] == [0, 400, 0, 0]


def test_fill_gaps_custom_placeholder():
    columns = [_col(0, (0, "a"), (400, "b")), _col(700, (0, "x"))]
    fill_gaps(columns, [[], [1]], placeholder_text="-")
    assert columns[1].rows[1].tokens == ("-",)


def test_fill_gaps_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        fill_gaps([_col(0, (0, "a"))], [])


def test_fill_gaps_two_rows_near_one_reference_row_overflow():
    # both sparse rows sit in the window of reference row 0, so only
    # rows 1 and 2 count as gaps and the column ends up longer
    columns = [_col(0, (0, "a"), (400, "b"), (800, "c")), _col(700, (0, "x"), (10, "y"))]
    gaps = find_gap_indices(columns)
    assert gaps == [[], [1, 2]]
    fill_gaps(columns, gaps)
    assert [r.tokens for r in columns[1].rows] == [("x",), ("Empty",), ("Empty",), ("y",)]
    assert len(columns[1].rows) == 4


def test_fill_gaps_row_near_no_reference_row_is_kept():
    columns = [_col(0, (0, "a"), (400, "b"), (800, "c")), _col(700, (200, "x"))]
    gaps = find_gap_indices(columns)
    assert gaps == [[], [0, 1, 2]]
    fill_gaps(columns, gaps)
    assert len(columns[1].rows) == 4
