from __future__ import annotations

import re
from typing import Callable, Tuple

Tokenizer = Callable[[str], Tuple[str, ...]]


def whitespace_tokenizer(text: str) -> Tuple[str, ...]:
    """Split on runs of whitespace, dropping empty pieces."""
    return tuple(str(text or "").split())


def make_separator_tokenizer(separator: str) -> Tokenizer:
    """Build a tokenizer that splits on a literal separator.

    Empty pieces are kept, so ``"a  b"`` split on ``" "`` yields three tokens.
    """
    if not separator:
        raise ValueError("Separator must be a non-empty string.")

    def _split(text: str) -> Tuple[str, ...]:
        return tuple(str(text or "").split(separator))

    return _split


def make_regex_tokenizer(pattern: str) -> Tokenizer:
    compiled = re.compile(pattern)

    def _split(text: str) -> Tuple[str, ...]:
        return tuple(p for p in compiled.split(str(text or "")) if p)

    return _split
