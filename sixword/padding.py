"""
Padding extension for inputs that are not a multiple of 8 bytes.

A short final chunk is zero-extended to a full block before encoding and the
number of appended zero bytes (1..7) is written as a single digit after the
sixth word of that block, e.g. "A2". Parity still covers the full zero-extended
block, so once the digit is removed the sentence is a valid standard sentence.
"""
from __future__ import annotations

from typing import Tuple

from .constants import BLOCK_SIZE, MAX_PADDING, PADDING_DIGITS


def pad_block(chunk: bytes) -> Tuple[bytes, int]:
    """Zero-extend a 1..8 byte chunk to a full block.

    Returns:
        (block, padding) where padding is the number of zero bytes appended.
    """
    if not 0 < len(chunk) <= BLOCK_SIZE:
        raise ValueError(f"chunk must be 1..{BLOCK_SIZE} bytes, got {len(chunk)}")
    padding = BLOCK_SIZE - len(chunk)
    return bytes(chunk) + b"\x00" * padding, padding


def apply_padding(word: str, padding: int) -> str:
    if padding == 0:
        return word
    if not 0 < padding <= MAX_PADDING:
        raise ValueError(f"padding must be 0..{MAX_PADDING}, got {padding!r}")
    return word + str(padding)


def has_padding(word: str) -> bool:
    return bool(word) and word[-1] in PADDING_DIGITS


def extract_padding(word: str) -> Tuple[str, int]:
    """Split a padded word into the bare word and the padding amount.

    >>> extract_padding("WORD3")
    ('WORD', 3)
    """
    if not has_padding(word):
        raise ValueError(f"Not a valid padded word: {word!r}")
    return word[:-1], int(word[-1])
