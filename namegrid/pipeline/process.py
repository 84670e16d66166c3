"""High-level pipeline: image → OCR fragments → grid → closest name → render.

`find_name_in_fragments` is the pure core and can be called with fragments
from any OCR engine; `process_image_find` wires it to Tesseract and writes
the rendered result next to the input image.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

import cv2
import pytesseract

from namegrid.config import LayoutSettings, load_layout_settings
from namegrid.image import load_image_oriented
from namegrid.layout import (
    Fragment,
    GapStrategy,
    Grid,
    Tokenizer,
    EmptyInputError,
    cluster_columns,
    densest_column_strategy,
    fill_gaps,
    project_grid,
    sort_rows,
    whitespace_tokenizer,
)
from namegrid.match import find_closest_cell_with_distance
from namegrid.ocr import fragments_from_blocks, ocr_text_blocks, preprocess_image_for_ocr
from namegrid.render import draw_result_overlay, format_grid_lines


class MatchResult(NamedTuple):
    grid: Grid
    match: Optional[Tuple[int, int]]
    distance: Optional[int]


def find_name_in_fragments(
    fragments: Sequence[Fragment],
    query: str,
    settings: Optional[LayoutSettings] = None,
    gap_strategy: Optional[GapStrategy] = None,
    debug: bool = False,
) -> MatchResult:
    """Rebuild the table from fragments and locate the cell closest to ``query``.

    Doxygen:
    - @param fragments: Fragments in OCR engine order.
    - @param query: Target string.
    - @param settings: Layout thresholds; defaults when None.
    - @param gap_strategy: Optional replacement for densest-column gap detection.
    - @param debug: Print the sorted columns, the gap indices and the final grid.
    - @return: MatchResult(grid, match, distance).
    - @throws EmptyInputError: If ``fragments`` is empty.
    """
    settings = settings or LayoutSettings()
    if not fragments:
        raise EmptyInputError("No text found: no fragments were supplied.")
    columns = sort_rows(cluster_columns(list(fragments), settings.column_bound))
    strategy = gap_strategy or densest_column_strategy(settings.gap_half_window)
    gaps = strategy(columns)
    if debug:
        for col in columns:
            print(f"Column @x={col.anchor_x}: " + ", ".join(f"{' '.join(r.tokens)}@{r.y}" for r in col.rows))
        print(f"Gap indices: {gaps}")
    grid = project_grid(fill_gaps(columns, gaps, settings.placeholder_text))
    match, distance = find_closest_cell_with_distance(grid, query)
    if debug:
        print(f"Grid: {grid}")
        print(f"Closest cell: {match} (distance={distance})")
    return MatchResult(grid=grid, match=match, distance=distance)


def recognize_fragments(
    img_bgr,
    settings: LayoutSettings,
    ocr_mode: str = 'auto',
    tokenizer: Tokenizer = whitespace_tokenizer,
) -> List[Fragment]:
    """Run Tesseract on an image and convert its blocks into fragments."""
    if ocr_mode == 'raw':
        ocr_input_img = img_bgr
        print("OCR mode: 'raw'. Skipping image preprocessing.")
    else:
        ocr_input_img = preprocess_image_for_ocr(img_bgr)
        print("OCR mode: 'auto'. Applying image preprocessing.")
    blocks = ocr_text_blocks(ocr_input_img, lang=settings.tesseract_lang, conf_threshold=settings.conf_threshold)
    return fragments_from_blocks(blocks, tokenizer)


def process_image_find(
    image_path: str,
    target: str,
    settings: Optional[LayoutSettings] = None,
    output_path: str = 'result.jpg',
    ocr_mode: str = 'auto',
    tokenizer: Tokenizer = whitespace_tokenizer,
    alpha: float = 0.1,
    debug: bool = False,
) -> Dict[str, Any]:
    """Run the full image → grid → match → render flow.

    Outputs are written to a folder named after the image, next to it.

    Doxygen:
    - @param image_path: Path to input image file.
    - @param target: Name to look for.
    - @param settings: Layout/OCR settings; loaded from config/layout.json if None.
    - @param output_path: Output image file name (basename used inside folder).
    - @param ocr_mode: 'auto' for preprocessing, 'raw' for direct OCR.
    - @param tokenizer: Splits block text into tokens.
    - @param alpha: Opacity of the source image under the rendered result.
    - @param debug: Print intermediate structures.
    - @return: Dict with keys {'output_path', 'text_path', 'fragments', 'grid', 'match', 'distance', 'lines'}.
    - @throws FileNotFoundError: If the image does not exist.
    - @throws EmptyInputError: If OCR found no text.
    """
    settings = settings or load_layout_settings()
    try:
        _ = pytesseract.get_tesseract_version()
        print("Tesseract found")
    except pytesseract.TesseractNotFoundError:
        print("Warning: Tesseract binary not found; configure config/dependencies.json")

    img_bgr = load_image_oriented(image_path)
    fragments = recognize_fragments(img_bgr, settings, ocr_mode=ocr_mode, tokenizer=tokenizer)
    print(f"File found and OCR completed: {len(fragments)} text blocks")

    result = find_name_in_fragments(fragments, target, settings=settings, debug=debug)
    lines = format_grid_lines(result.grid, result.match)

    base_filename = os.path.basename(image_path)
    base_name_no_ext = os.path.splitext(base_filename)[0] or base_filename
    out_dir = os.path.join(os.path.dirname(image_path), base_name_no_ext)
    try:
        os.makedirs(out_dir, exist_ok=True)
    except OSError as e:
        print(f"Warning: failed to create output directory '{out_dir}': {e}")
        out_dir = os.path.dirname(image_path)

    out_image_name = os.path.basename(output_path) if output_path else f"result_{base_filename}"
    output_image_path = os.path.join(out_dir, out_image_name)
    cv2.imwrite(output_image_path, draw_result_overlay(img_bgr, lines, alpha=alpha))

    text_path: Optional[str] = os.path.join(out_dir, "result.txt")
    try:
        with open(text_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines).lstrip("\n") + "\n")
    except OSError as e:
        print(f"Warning: failed to write result text: {e}")
        text_path = None

    return {
        'output_path': output_image_path,
        'text_path': text_path,
        'fragments': fragments,
        'grid': result.grid,
        'match': result.match,
        'distance': result.distance,
        'lines': lines,
    }
