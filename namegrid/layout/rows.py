from __future__ import annotations

from typing import List

from .model import Column


def sort_rows(columns: List[Column]) -> List[Column]:
    """Sort columns by anchor and each column's rows by ``y``, in place.

    Both sorts are stable, so equal anchors or equal ``y`` keep their
    clustering order. Must run once, before gap placeholders are inserted.
    """
    columns.sort(key=lambda c: c.anchor_x)
    for col in columns:
        col.rows.sort(key=lambda r: r.y)
    return columns
