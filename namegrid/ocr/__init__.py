"""OCR (Optical Character Recognition) utilities.

This package includes preprocessing, text block extraction built on top of
pytesseract and OpenCV, and conversion of blocks into layout fragments.
"""

from .reader import (
    build_dataframe_from_tesseract,
    group_words_to_blocks,
    preprocess_image_for_ocr,
    ocr_text_blocks,
)
from .fragments import (
    block_origin,
    fragment_from_block,
    fragments_from_blocks,
)

__all__ = [
    "build_dataframe_from_tesseract",
    "group_words_to_blocks",
    "preprocess_image_for_ocr",
    "ocr_text_blocks",
    "block_origin",
    "fragment_from_block",
    "fragments_from_blocks",
]
