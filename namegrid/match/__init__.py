"""Approximate matching of a query string against grid cells."""

from .ranker import edit_distance, find_closest_cell, find_closest_cell_with_distance

__all__ = [
    "edit_distance",
    "find_closest_cell",
    "find_closest_cell_with_distance",
]
