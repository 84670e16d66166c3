from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


PLACEHOLDER_TEXT = "Empty"


class LayoutError(ValueError):
    """Base class for layout reconstruction errors."""


class EmptyInputError(LayoutError):
    """Raised when no fragments were supplied (e.g. OCR found no text)."""


class MissingGeometryError(LayoutError):
    """Raised when a text block has no usable bounding-box origin."""


@dataclass(frozen=True)
class Fragment:
    origin_x: int
    origin_y: int
    tokens: Tuple[str, ...]


@dataclass
class Row:
    y: int
    tokens: Tuple[str, ...]


@dataclass
class Column:
    anchor_x: int
    rows: List[Row] = field(default_factory=list)


def placeholder_row(text: str = PLACEHOLDER_TEXT) -> Row:
    return Row(y=0, tokens=(text,))


Cell = List[str]
Grid = List[List[Cell]]
