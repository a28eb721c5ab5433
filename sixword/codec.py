from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .constants import (
    BLOCK_SIZE,
    PARITY_MASK,
    SENTENCE_LENGTH,
    TAIL_DATA_BITS,
    TAIL_DATA_MASK,
    WORD_BITS,
    WORD_MASK,
)
from .errors import InvalidParity
from .padding import extract_padding, has_padding
from .words import code_for_word, word_for_code


def bytes_to_int(data: Iterable[int]) -> int:
    """Pack bytes into an integer, most significant byte first.

    >>> bytes_to_int(b"\\x01\\x02")
    258
    """
    value = 0
    for b in data:
        value = (value << 8) | b
    return value


def int_to_bytes(value: int, length: Optional[int] = None) -> bytes:
    """Unpack a non-negative integer into big-endian bytes.

    Args:
        value: Integer to unpack.
        length: Left zero-pad the result to this many bytes. When omitted the
            result carries no leading zero bytes (0 becomes b"").
    """
    if value < 0:
        raise ValueError("Not sure what to do with negative numbers")
    if length is None:
        length = (value.bit_length() + 7) // 8
    elif length < 0:
        raise ValueError("Cannot pad to length < 0")
    else:
        length = max(length, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, "big")


def parity_int(value: int) -> int:
    """Two-bit parity: sum of every pair of bits, modulo 4."""
    parity = 0
    while value > 0:
        parity += value & PARITY_MASK
        value >>= 2
    return parity & PARITY_MASK


def parity_bytes(data: Iterable[int]) -> int:
    """Same parity as parity_int, computed byte by byte."""
    parity = 0
    for b in data:
        while b > 0:
            parity += b & PARITY_MASK
            b >>= 2
    return parity & PARITY_MASK


def encode_64_bits(block: bytes) -> List[str]:
    """Encode one 8-byte block as six words.

    The first five words carry 11 bits each, the sixth carries the low 9 data
    bits followed by the 2 parity bits.
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Must pass an {BLOCK_SIZE}-byte block, got {len(block)}")

    value = bytes_to_int(block)
    parity = parity_int(value)

    encoded: List[str] = [""] * SENTENCE_LENGTH
    encoded[-1] = word_for_code(((value & TAIL_DATA_MASK) << 2) | parity)
    value >>= TAIL_DATA_BITS

    for i in range(SENTENCE_LENGTH - 2, -1, -1):
        encoded[i] = word_for_code(value & WORD_MASK)
        value >>= WORD_BITS

    return encoded


def decode_6_words(words: Sequence[str], padding_ok: bool) -> Tuple[int, int]:
    """Decode six words into the block integer and its byte length.

    Args:
        words: Exactly six word tokens, any case.
        padding_ok: Accept a padding digit on the last word.

    Returns:
        (value, length): the decoded integer with any padding bytes shifted
        out, and the number of bytes it represents (8 unless padded).

    Raises:
        UnknownWord, InvalidWord: a token is not a dictionary word.
        InvalidParity: the checksum bits do not match the data.
    """
    if len(words) != SENTENCE_LENGTH:
        raise ValueError(f"Must pass a {SENTENCE_LENGTH}-word sequence, got {len(words)}")

    words = list(words)
    padding = 0
    if padding_ok and has_padding(words[-1]):
        words[-1], padding = extract_padding(words[-1])

    codes = [code_for_word(w) for w in words]

    value = 0
    for code in codes[:-1]:
        value = (value << WORD_BITS) | code

    parity = codes[-1] & PARITY_MASK
    value = (value << TAIL_DATA_BITS) | (codes[-1] >> 2)

    if parity_int(value) != parity:
        raise InvalidParity("Parity bits do not match")

    value >>= padding * 8
    return value, BLOCK_SIZE - padding


def decode_6_words_to_bytes(words: Sequence[str], padding_ok: bool) -> bytes:
    value, length = decode_6_words(words, padding_ok)
    return int_to_bytes(value, length)
