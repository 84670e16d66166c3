"""Image loading with EXIF orientation applied.

Phone cameras store portrait photos unrotated and record the rotation in the
EXIF Orientation tag; OCR needs the pixels upright.
"""

from __future__ import annotations

import os

import cv2
import numpy as np
from PIL import Image, ImageOps


def apply_exif_orientation(img: Image.Image) -> Image.Image:
    """Rotate pixels according to EXIF Orientation and return an RGB image."""
    return ImageOps.exif_transpose(img).convert("RGB")


def load_image_oriented(image_path: str) -> np.ndarray:
    """Load an image file as an upright BGR array.

    Doxygen:
    - @param image_path: Path to the image on disk.
    - @return: BGR uint8 array with EXIF rotation applied.
    - @throws FileNotFoundError: If the file does not exist.
    - @throws RuntimeError: If the file cannot be decoded as an image.
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Image file not found: {image_path}")
    try:
        with Image.open(image_path) as pil_img:
            upright = apply_exif_orientation(pil_img)
    except (OSError, ValueError) as e:
        raise RuntimeError(f"Failed to load image: {image_path}") from e
    return cv2.cvtColor(np.array(upright), cv2.COLOR_RGB2BGR)
