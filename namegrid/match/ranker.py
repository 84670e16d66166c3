"""Closest-cell lookup over a reconstructed grid using Levenshtein distance."""

from __future__ import annotations

from typing import Optional, Tuple

from rapidfuzz.distance import Levenshtein

from namegrid.layout.model import Grid


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insert/delete/substitute costs."""
    return int(Levenshtein.distance(str(a), str(b)))


def find_closest_cell_with_distance(grid: Grid, query: str) -> Tuple[Optional[Tuple[int, int]], Optional[int]]:
    """Like `find_closest_cell`, also returning the winning distance.

    Doxygen:
    - @param grid: Columns of cells, each cell a list of tokens.
    - @param query: Target string compared against every single token.
    - @return: ((column_index, row_index), distance), or (None, None) when
      the grid has no cells.
    """
    best: Optional[Tuple[int, int]] = None
    best_distance: Optional[int] = None
    for c_idx, column in enumerate(grid):
        for r_idx, cell in enumerate(column):
            # a cell without tokens compares as the empty string
            for token in cell or ("",):
                distance = edit_distance(token, query)
                # strict '<': the first cell reaching the minimum wins
                if best_distance is None or distance < best_distance:
                    best_distance = distance
                    best = (c_idx, r_idx)
    return best, best_distance


def find_closest_cell(grid: Grid, query: str) -> Optional[Tuple[int, int]]:
    """Return (column_index, row_index) of the cell holding the token closest to ``query``.

    The coordinate identifies the cell, not the token inside it. Returns
    None when the grid has no cells (zero columns, or only empty columns).
    """
    coord, _ = find_closest_cell_with_distance(grid, query)
    return coord
