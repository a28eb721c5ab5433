"""
Decoding side of the sequence driver.

Input is either a single string of whitespace-separated words or an already
split sequence of words. Words are decoded six at a time and the recovered
bytes concatenated in order.
"""
from __future__ import annotations

from typing import Iterable, List, Union

from .codec import decode_6_words_to_bytes
from .constants import SENTENCE_LENGTH
from .errors import FormatError


WordsInput = Union[str, Iterable[str]]


def split_words(string_or_words: WordsInput) -> List[str]:
    """Resolve a text blob or a token sequence into a list of tokens."""
    if isinstance(string_or_words, str):
        return string_or_words.split()
    if isinstance(string_or_words, (bytes, bytearray)):
        raise TypeError("decode expects text or a sequence of words, not bytes")
    return list(string_or_words)


def decode(string_or_words: WordsInput, padding_ok: bool = False) -> bytes:
    """Decode six-word encoded text back to bytes.

    Args:
        string_or_words: Whitespace separated words, or a sequence of words.
        padding_ok: Accept the padding digit on the last word of the input.

    Returns:
        The decoded bytes; b"" for empty input.

    Raises:
        FormatError: the number of words is not a multiple of 6.
        UnknownWord, InvalidWord, InvalidParity: see sixword.codec.

    >>> decode("ACRE ADEN INN SLID MAD PAP")
    b'Hi world'
    >>> decode("COAT ACHE A A A ACT6", padding_ok=True)
    b'hi'
    """
    words = split_words(string_or_words)
    if len(words) % SENTENCE_LENGTH != 0:
        raise FormatError(f"Must enter a multiple of {SENTENCE_LENGTH} words")

    out = bytearray()
    last = len(words) - SENTENCE_LENGTH
    for off in range(0, len(words), SENTENCE_LENGTH):
        # Only the final sentence of an input can carry a padding marker.
        out += decode_6_words_to_bytes(words[off:off + SENTENCE_LENGTH], padding_ok and off == last)
    return bytes(out)


def pad_decode(string_or_words: WordsInput) -> bytes:
    return decode(string_or_words, padding_ok=True)
