"""Image source helpers (loading, orientation)."""

from .loading import (
    apply_exif_orientation,
    load_image_oriented,
)

__all__ = [
    "apply_exif_orientation",
    "load_image_oriented",
]
