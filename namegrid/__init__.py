"""Table layout reconstruction and name lookup for OCR output.

Packages:
- namegrid.layout: fragment model, column/row clustering, gap inference, grid building
- namegrid.match: Levenshtein closest-cell lookup
- namegrid.ocr: Tesseract text blocks and fragment conversion
- namegrid.image: image loading with EXIF orientation
- namegrid.render: text and image presentation of the result
- namegrid.pipeline: high-level orchestration
"""

from namegrid.layout import (
    EmptyInputError,
    Fragment,
    LayoutError,
    MissingGeometryError,
    build_grid,
)
from namegrid.match import find_closest_cell

__all__ = [
    "EmptyInputError",
    "Fragment",
    "LayoutError",
    "MissingGeometryError",
    "build_grid",
    "find_closest_cell",
]
