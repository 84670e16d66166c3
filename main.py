"""
Entry point for the image → OCR → table layout → name lookup pipeline.

Packages:
- namegrid.layout: Column/row clustering, gap inference and grid building
- namegrid.match: Closest-cell lookup by edit distance
- namegrid.ocr: Tesseract text blocks and fragment conversion
- namegrid.image: Image loading with EXIF orientation
- namegrid.render: Result text and overlay drawing
- namegrid.pipeline: High-level orchestration (`process_image_find`)
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from namegrid.config import configure_dependencies, load_layout_settings
from namegrid.layout import EmptyInputError, make_separator_tokenizer, whitespace_tokenizer
from namegrid.ocr import fragments_from_blocks
from namegrid.pipeline import find_name_in_fragments, process_image_find
from namegrid.render import format_grid_text


def _load_blocks(path: str) -> List[Dict[str, Any]]:
    """Read pre-recognized text blocks from a JSON file.

    Accepts either a list of blocks or an object with a "blocks" list.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("blocks", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of text blocks in {path}")
    return data


def _cli(argv: List[str] | None = None) -> None:
    """CLI for finding a name in a photographed table.

    --image / -i: Path to input image
    --fragments / -f: JSON file with pre-recognized blocks (skips OCR)
    --target / -t: Name to look for
    --out / -o: Output image filename (default: result.jpg)
    --lang: Tesseract languages (default from config/layout.json)
    --conf: OCR confidence threshold
    --bound: Horizontal column clustering threshold
    --half-window: Vertical gap detection half-window
    --ocr-mode: 'auto' for preprocessing, 'raw' for clean images (default: auto)
    --separator: Split block text on this literal string instead of whitespace runs
    --debug: Print intermediate columns and grid
    """
    import argparse

    parser = argparse.ArgumentParser(description="Find the table cell closest to a target name in OCR output.")
    parser.add_argument("--image", "-i", type=str, help="Path to input image")
    parser.add_argument("--fragments", "-f", type=str, help="JSON file with text blocks ({'x','y','text'} each); skips OCR")
    parser.add_argument("--target", "-t", type=str, required=True, help="Name to look for")
    parser.add_argument("--out", "-o", type=str, default="result.jpg", help="Output image filename (default: result.jpg)")
    parser.add_argument("--lang", type=str, default=None, help="Tesseract languages (default: from config, 'eng')")
    parser.add_argument("--conf", type=int, default=None, help="Confidence threshold for OCR words (default: from config, 30)")
    parser.add_argument("--bound", type=int, default=None, help="Horizontal column clustering threshold (default: from config, 300)")
    parser.add_argument("--half-window", type=int, default=None, help="Vertical gap detection half-window (default: from config, 150)")
    parser.add_argument("--ocr-mode", type=str, default="auto", choices=["auto", "raw"], help="OCR preprocessing mode (default: auto)")
    parser.add_argument("--separator", type=str, default=None, help="Literal token separator (default: runs of whitespace)")
    parser.add_argument("--debug", action="store_true", help="Print intermediate columns and grid")

    args = parser.parse_args(argv)

    settings = load_layout_settings().with_overrides(
        column_bound=args.bound,
        gap_half_window=args.half_window,
        tesseract_lang=args.lang,
        conf_threshold=args.conf,
    )
    try:
        tokenizer = make_separator_tokenizer(args.separator) if args.separator is not None else whitespace_tokenizer
    except ValueError as e:
        print(str(e))
        raise SystemExit(2)

    try:
        if args.fragments:
            fragments = fragments_from_blocks(_load_blocks(args.fragments), tokenizer)
            result = find_name_in_fragments(fragments, args.target, settings=settings, debug=args.debug)
            print(format_grid_text(result.grid, result.match).lstrip("\n"))
            print(f"Closest cell: {result.match} (distance={result.distance})")
            return

        if not args.image:
            print("Please provide either --image or --fragments.")
            print("Examples:\n  python main.py --image photo.jpg --target Alice\n  python main.py --fragments blocks.json --target Alice")
            raise SystemExit(2)

        configure_dependencies()
        result = process_image_find(
            image_path=args.image,
            target=args.target,
            settings=settings,
            output_path=args.out,
            ocr_mode=args.ocr_mode,
            tokenizer=tokenizer,
            debug=args.debug,
        )
    except EmptyInputError:
        print("No text found")
        raise SystemExit(1)
    except (ValueError, OSError, RuntimeError) as e:
        # LayoutError, bad JSON and unreadable images end up here
        print(f"Error: {e}")
        raise SystemExit(1)

    print("\n".join(result['lines']).lstrip("\n"))
    print(f"Closest cell: {result['match']} (distance={result['distance']})")
    print(f"Saved result image to: {result['output_path']}")


if __name__ == "__main__":
    _cli()
