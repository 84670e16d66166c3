"""Rendering of reconstructed grids as text and as image overlays."""

from .draw import (
    dim_image,
    draw_result_overlay,
    format_cell,
    format_grid_lines,
    format_grid_text,
    load_font,
)

__all__ = [
    "dim_image",
    "draw_result_overlay",
    "format_cell",
    "format_grid_lines",
    "format_grid_text",
    "load_font",
]
