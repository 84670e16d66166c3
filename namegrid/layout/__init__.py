"""Table layout reconstruction from positioned OCR fragments.

Fragments are clustered into columns by horizontal proximity, ordered by
vertical position inside each column, aligned against the densest column
with placeholder cells, and finally projected into a grid of token lists.
"""

from .model import (
    PLACEHOLDER_TEXT,
    Cell,
    Column,
    EmptyInputError,
    Fragment,
    Grid,
    LayoutError,
    MissingGeometryError,
    Row,
    placeholder_row,
)
from .tokenize import (
    Tokenizer,
    make_regex_tokenizer,
    make_separator_tokenizer,
    whitespace_tokenizer,
)
from .columns import COLUMN_BOUND, cluster_columns, find_near_column_index
from .rows import sort_rows
from .gaps import (
    GAP_HALF_WINDOW,
    GapStrategy,
    densest_column,
    densest_column_strategy,
    fill_gaps,
    find_blank_cells,
    find_gap_indices,
)
from .grid import build_columns, build_grid, project_grid

__all__ = [
    "PLACEHOLDER_TEXT",
    "Cell",
    "Column",
    "EmptyInputError",
    "Fragment",
    "Grid",
    "LayoutError",
    "MissingGeometryError",
    "Row",
    "placeholder_row",
    "Tokenizer",
    "make_regex_tokenizer",
    "make_separator_tokenizer",
    "whitespace_tokenizer",
    "COLUMN_BOUND",
    "cluster_columns",
    "find_near_column_index",
    "sort_rows",
    "GAP_HALF_WINDOW",
    "GapStrategy",
    "densest_column",
    "densest_column_strategy",
    "fill_gaps",
    "find_blank_cells",
    "find_gap_indices",
    "build_columns",
    "build_grid",
    "project_grid",
]
