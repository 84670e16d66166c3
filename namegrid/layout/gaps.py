"""Missing-cell inference against the densest column.

The heuristic assumes the column with the most rows has no gaps of its own.
Layouts where every column is missing some cell are aligned incorrectly; a
different alignment can be plugged in through ``GapStrategy``.
"""

from __future__ import annotations

from typing import Callable, List

from .model import PLACEHOLDER_TEXT, Column, Row, placeholder_row

GAP_HALF_WINDOW = 150

GapStrategy = Callable[[List[Column]], List[List[int]]]


def densest_column(columns: List[Column]) -> Column:
    """Return the first column with the maximum row count.

    Doxygen:
    - @param columns: Non-empty list of columns.
    - @return: The reference column.
    - @throws ValueError: If ``columns`` is empty.
    """
    if not columns:
        raise ValueError("Cannot pick a reference column from an empty layout.")
    return max(columns, key=lambda c: len(c.rows))


def find_blank_cells(full: List[Row], actual: List[Row], half_window: int = GAP_HALF_WINDOW) -> List[int]:
    """Indices of ``full`` with no row of ``actual`` inside the open y-window.

    Doxygen:
    - @param full: Rows of the reference (densest) column.
    - @param actual: Rows of the column being checked.
    - @param half_window: Half width of the open interval around each reference y.
    - @return: Ascending list of gap indices.
    """
    blanks: List[int] = []
    for i, ref in enumerate(full):
        lo, hi = ref.y - half_window, ref.y + half_window
        if not any(lo < row.y < hi for row in actual):
            blanks.append(i)
    return blanks


def find_gap_indices(columns: List[Column], half_window: int = GAP_HALF_WINDOW) -> List[List[int]]:
    """Per-column gap indices relative to the densest column.

    Columns with as many rows as the densest one (the densest one included)
    get an empty list.
    """
    full = densest_column(columns).rows
    gaps: List[List[int]] = []
    for col in columns:
        if len(col.rows) == len(full):
            gaps.append([])
        else:
            gaps.append(find_blank_cells(full, col.rows, half_window))
    return gaps


def fill_gaps(columns: List[Column], gaps: List[List[int]], placeholder_text: str = PLACEHOLDER_TEXT) -> List[Column]:
    """Insert placeholder rows at the recorded gap indices, in place.

    Indices are absolute target positions and are applied left to right, so
    each insertion shifts the ones after it.
    """
    if len(gaps) != len(columns):
        raise ValueError(f"Expected {len(columns)} gap lists, got {len(gaps)}.")
    for col, indices in zip(columns, gaps):
        for idx in sorted(indices):
            col.rows.insert(idx, placeholder_row(placeholder_text))
    return columns


def densest_column_strategy(half_window: int = GAP_HALF_WINDOW) -> GapStrategy:
    def _strategy(columns: List[Column]) -> List[List[int]]:
        return find_gap_indices(columns, half_window)

    return _strategy
