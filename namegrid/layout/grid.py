"""Grid assembly: clustering, row ordering, gap filling and projection."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .columns import COLUMN_BOUND, cluster_columns
from .gaps import GAP_HALF_WINDOW, GapStrategy, densest_column_strategy, fill_gaps
from .model import PLACEHOLDER_TEXT, Column, EmptyInputError, Fragment, Grid
from .rows import sort_rows


def project_grid(columns: List[Column]) -> Grid:
    """Drop positions and keep only each row's tokens."""
    return [[list(row.tokens) for row in col.rows] for col in columns]


def build_columns(
    fragments: Sequence[Fragment],
    bound: int = COLUMN_BOUND,
    half_window: int = GAP_HALF_WINDOW,
    placeholder_text: str = PLACEHOLDER_TEXT,
    gap_strategy: Optional[GapStrategy] = None,
) -> List[Column]:
    """Cluster, sort and gap-fill fragments, keeping positional metadata.

    Doxygen:
    - @param fragments: Fragments in OCR engine order.
    - @param bound: Horizontal threshold for column clustering.
    - @param half_window: Vertical half-window for gap detection.
    - @param placeholder_text: Token used for inferred empty cells.
    - @param gap_strategy: Optional replacement for densest-column gap detection.
    - @return: Columns ascending by anchor with placeholders inserted.
    - @throws EmptyInputError: If ``fragments`` is empty.
    """
    if not fragments:
        raise EmptyInputError("No text found: no fragments were supplied.")
    columns = sort_rows(cluster_columns(fragments, bound))
    strategy = gap_strategy or densest_column_strategy(half_window)
    return fill_gaps(columns, strategy(columns), placeholder_text)


def build_grid(
    fragments: Sequence[Fragment],
    bound: int = COLUMN_BOUND,
    half_window: int = GAP_HALF_WINDOW,
    placeholder_text: str = PLACEHOLDER_TEXT,
    gap_strategy: Optional[GapStrategy] = None,
) -> Grid:
    """Reconstruct the table grid (columns of token lists) from fragments.

    Doxygen:
    - @param fragments: Fragments in OCR engine order; order decides column anchors.
    - @return: Grid, one list of cells per column, columns ascending by anchor.
    - @throws EmptyInputError: If ``fragments`` is empty.
    """
    return project_grid(
        build_columns(
            list(fragments),
            bound=bound,
            half_window=half_window,
            placeholder_text=placeholder_text,
            gap_strategy=gap_strategy,
        )
    )
