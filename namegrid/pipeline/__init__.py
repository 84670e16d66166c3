"""High-level pipeline orchestration for OCR → Layout → Match → Render."""

from .process import (
    MatchResult,
    find_name_in_fragments,
    process_image_find,
    recognize_fragments,
)

__all__ = [
    "MatchResult",
    "find_name_in_fragments",
    "process_image_find",
    "recognize_fragments",
]
