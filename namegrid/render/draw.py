"""Presentation helpers: grid flattening to text and result overlay drawing.

Uses PIL to render text, then converts back to numpy arrays.
"""

from __future__ import annotations

import os
from typing import List, Optional, Sequence, Tuple

import cv2
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from namegrid.layout.model import Grid

_ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
_CONFIG_FONTS_DIR = os.path.join(_ROOT_DIR, "config", "fonts")

CANDIDATE_FONTS = [
    "DejaVuSans.ttf",
    "arial.ttf",
    "segoeui.ttf",
    "verdana.ttf",
    "LiberationSans-Regular.ttf",
]

HIGHLIGHT_COLOR = (200, 0, 0)
TEXT_COLOR = (0, 0, 0)


def format_cell(cell: Sequence[str]) -> str:
    return " ".join(cell)


def format_grid_lines(grid: Grid, match: Optional[Tuple[int, int]] = None) -> List[str]:
    """Flatten a grid into display lines, one column after another.

    Each column starts with an empty separator line; the matched cell is
    wrapped as ``[ ... ]``.

    Doxygen:
    - @param grid: Columns of cells (token lists).
    - @param match: (column_index, row_index) to highlight, or None.
    - @return: List of text lines.
    """
    lines: List[str] = []
    for c_idx, column in enumerate(grid):
        lines.append("")
        for r_idx, cell in enumerate(column):
            text = format_cell(cell)
            if match is not None and (c_idx, r_idx) == tuple(match):
                text = f"[ {text} ]"
            lines.append(text)
    return lines


def format_grid_text(grid: Grid, match: Optional[Tuple[int, int]] = None) -> str:
    return "\n".join(format_grid_lines(grid, match))


def _find_font_path(name: str) -> str | None:
    if os.path.isabs(name) and os.path.exists(name):
        return name
    search_dirs = [p for p in os.environ.get("FONT_PATH", "").split(os.pathsep) if p.strip()]
    windir = os.environ.get("WINDIR") or os.environ.get("SystemRoot")
    if windir:
        search_dirs.append(os.path.join(windir, "Fonts"))
    search_dirs += [
        _CONFIG_FONTS_DIR,
        "/usr/share/fonts/truetype/dejavu",
        "/usr/share/fonts/TTF",
        "/Library/Fonts",
    ]
    for d in search_dirs:
        candidate = os.path.join(d, name)
        if os.path.exists(candidate):
            return candidate
    return None


def load_font(size: int, names: Sequence[str] = CANDIDATE_FONTS) -> ImageFont.ImageFont:
    """Load the first available candidate font, or PIL's default font."""
    for name in names:
        path = _find_font_path(name)
        if not path:
            continue
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        # Pillow < 10.1 has no sized default font
        return ImageFont.load_default()


def dim_image(img: np.ndarray, alpha: float = 0.1) -> np.ndarray:
    """Blend an image over white so only ``alpha`` of it stays visible."""
    alpha = min(1.0, max(0.0, float(alpha)))
    white = np.full_like(img, 255)
    return cv2.addWeighted(img, alpha, white, 1.0 - alpha, 0)


def draw_result_overlay(
    img: np.ndarray,
    lines: Sequence[str],
    alpha: float = 0.1,
    font_size: int | None = None,
) -> np.ndarray:
    """Draw result lines onto a dimmed copy of the BGR image.

    Lines wrapped as ``[ ... ]`` are drawn in the highlight color.

    Doxygen:
    - @param img: Input BGR image array.
    - @param lines: Lines from `format_grid_lines`.
    - @param alpha: Remaining opacity of the source image.
    - @param font_size: Font size in pixels; derived from image height if None.
    - @return: New BGR image with the result text drawn.
    """
    height, width = img.shape[:2]
    size = int(font_size or max(12, height // 40))
    font = load_font(size)
    line_h = size + max(2, size // 4)
    margin = max(4, size // 2)

    img_pil = Image.fromarray(cv2.cvtColor(dim_image(img, alpha), cv2.COLOR_BGR2RGB))
    draw = ImageDraw.Draw(img_pil)
    y = margin
    for line in lines:
        if y + line_h > height:
            break
        highlighted = line.startswith("[ ") and line.endswith(" ]")
        draw.text((margin, y), line, font=font, fill=HIGHLIGHT_COLOR if highlighted else TEXT_COLOR)
        y += line_h
    return cv2.cvtColor(np.array(img_pil), cv2.COLOR_RGB2BGR)
