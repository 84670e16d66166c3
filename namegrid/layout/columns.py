"""Column clustering of OCR fragments by horizontal proximity."""

from __future__ import annotations

from typing import Iterable, List

from .model import Column, Fragment, Row

COLUMN_BOUND = 300


def find_near_column_index(x: int, columns: List[Column], bound: int = COLUMN_BOUND) -> int:
    """Return the index of the column whose anchor is within ``bound`` of ``x``.

    Doxygen:
    - @param x: Horizontal origin of the fragment being placed.
    - @param columns: Columns created so far, in creation order.
    - @param bound: Inclusive distance allowed between ``x`` and an anchor.
    - @return: Index of the LAST matching column, or -1 if none matches.
    """
    found = -1
    for idx, col in enumerate(columns):
        if col.anchor_x - bound <= x <= col.anchor_x + bound:
            found = idx
    return found


def cluster_columns(fragments: Iterable[Fragment], bound: int = COLUMN_BOUND) -> List[Column]:
    """Group fragments into columns, processing them in input order.

    The first fragment of a column fixes its anchor; later members never move
    it. Rows are appended in arrival order and are not sorted here.

    Doxygen:
    - @param fragments: Fragments in OCR engine order.
    - @param bound: Horizontal proximity threshold.
    - @return: Columns in creation order (empty list for empty input).
    """
    columns: List[Column] = []
    for frag in fragments:
        row = Row(y=frag.origin_y, tokens=tuple(frag.tokens))
        idx = find_near_column_index(frag.origin_x, columns, bound)
        if idx == -1:
            columns.append(Column(anchor_x=frag.origin_x, rows=[row]))
        else:
            columns[idx].rows.append(row)
    return columns
