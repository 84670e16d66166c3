"""Conversion of OCR text blocks into layout fragments."""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

from namegrid.layout.model import Fragment, MissingGeometryError
from namegrid.layout.tokenize import Tokenizer, whitespace_tokenizer


def _as_coordinate(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    return int(f)


def block_origin(block: Dict[str, Any]) -> Tuple[int, int]:
    """Return the (x, y) origin of a block.

    Accepts either explicit ``x``/``y`` keys or a ``corner_points`` list whose
    first point is the top-left corner.

    Doxygen:
    - @param block: OCR block dict.
    - @return: Integer (x, y) origin.
    - @throws MissingGeometryError: If no valid origin can be read.
    """
    corners = block.get('corner_points')
    if corners:
        first = corners[0]
        if isinstance(first, dict):
            x, y = _as_coordinate(first.get('x')), _as_coordinate(first.get('y'))
        else:
            try:
                x, y = _as_coordinate(first[0]), _as_coordinate(first[1])
            except (TypeError, IndexError):
                x, y = None, None
    else:
        x, y = _as_coordinate(block.get('x')), _as_coordinate(block.get('y'))
    if x is None or y is None:
        raise MissingGeometryError(f"Text block has no bounding-box origin: {block.get('text', '')!r}")
    return x, y


def fragment_from_block(block: Dict[str, Any], tokenizer: Tokenizer = whitespace_tokenizer) -> Fragment:
    x, y = block_origin(block)
    return Fragment(origin_x=x, origin_y=y, tokens=tuple(tokenizer(str(block.get('text', '')))))


def fragments_from_blocks(
    blocks: Iterable[Dict[str, Any]],
    tokenizer: Tokenizer = whitespace_tokenizer,
) -> List[Fragment]:
    """Convert OCR blocks to fragments, preserving their order.

    Blocks whose text yields no tokens are skipped.
    """
    fragments: List[Fragment] = []
    for block in blocks:
        frag = fragment_from_block(block, tokenizer)
        if frag.tokens:
            fragments.append(frag)
    return fragments
