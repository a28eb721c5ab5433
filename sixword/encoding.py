"""
Encoding side of the sequence driver.

A byte string is walked in 8-byte blocks; each block becomes one six-word
sentence. With padding enabled, a short final block is zero-extended and its
last word is marked with the padding amount (see sixword.padding).
"""
from __future__ import annotations

from typing import Iterator, List

from .codec import encode_64_bits
from .constants import BLOCK_SIZE, MAX_WORDS_PER_GROUP, MIN_WORDS_PER_GROUP, SENTENCE_LENGTH
from .errors import FormatError
from .padding import apply_padding, pad_block


class EncodeIter:
    """Finite, restartable iterable of encoded word groups.

    Each iteration starts over from the beginning of the (immutable) input and
    yields strings of up to ``words_per_group`` space-separated words. A group
    never spans two sentences, so with e.g. 4 words per group every sentence
    yields one 4-word and one 2-word string.
    """

    def __init__(self, data: bytes, words_per_group: int = 1, pad: bool = False):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"data must be bytes-like, not {type(data).__name__}")
        data = bytes(data)
        if not isinstance(words_per_group, int) or not MIN_WORDS_PER_GROUP <= words_per_group <= MAX_WORDS_PER_GROUP:
            raise ValueError(f"words_per_group must be in {MIN_WORDS_PER_GROUP}..{MAX_WORDS_PER_GROUP}")
        if not pad and len(data) % BLOCK_SIZE != 0:
            raise FormatError(f"Must pad bytes to multiple of {BLOCK_SIZE} or use pad_encode")
        self.data = data
        self.words_per_group = words_per_group
        self.pad = pad

    @property
    def block_count(self) -> int:
        return -(-len(self.data) // BLOCK_SIZE)

    def __len__(self) -> int:
        groups_per_sentence = -(-SENTENCE_LENGTH // self.words_per_group)
        return self.block_count * groups_per_sentence

    def __iter__(self) -> Iterator[str]:
        for sentence in self.sentences():
            for i in range(0, SENTENCE_LENGTH, self.words_per_group):
                yield " ".join(sentence[i:i + self.words_per_group])

    def sentences(self) -> Iterator[List[str]]:
        """Yield one six-word list per block."""
        for off in range(0, len(self.data), BLOCK_SIZE):
            chunk = self.data[off:off + BLOCK_SIZE]
            block, padding = pad_block(chunk)
            encoded = encode_64_bits(block)
            encoded[-1] = apply_padding(encoded[-1], padding)
            yield encoded

    def __repr__(self) -> str:
        return f"EncodeIter(<{len(self.data)} bytes>, words_per_group={self.words_per_group}, pad={self.pad})"


def encode_iter(data: bytes, words_per_group: int = 1, pad: bool = False) -> EncodeIter:
    """Encode bytes lazily (full API).

    Args:
        data: Bytes to encode. Without ``pad`` the length must be a multiple of 8.
        words_per_group: Number of words (1..6) joined into each yielded string.
        pad: Use the padding extension for a short final block.

    Raises:
        FormatError: ``data`` is not a multiple of 8 bytes and ``pad`` is False.
        ValueError: ``words_per_group`` is out of range.
        TypeError: ``data`` is not bytes-like.
    """
    return EncodeIter(data, words_per_group=words_per_group, pad=pad)


def encode(data: bytes) -> List[str]:
    """Encode a multiple of 8 bytes as a list of words.

    >>> encode(b"Hi world")
    ['ACRE', 'ADEN', 'INN', 'SLID', 'MAD', 'PAP']
    """
    return list(encode_iter(data))


def pad_encode(data: bytes) -> List[str]:
    """Like encode(), but accepts any length using the padding extension."""
    return list(encode_iter(data, pad=True))


def encode_to_sentences(data: bytes) -> List[str]:
    return list(encode_iter(data, words_per_group=SENTENCE_LENGTH))


def pad_encode_to_sentences(data: bytes) -> List[str]:
    """
    >>> pad_encode_to_sentences(b"Hi worl" * 2)
    ['ACRE ADEN INN SLID MAD LEW', 'CODY AS SIGH SUIT MUDD ABE2']
    """
    return list(encode_iter(data, words_per_group=SENTENCE_LENGTH, pad=True))


def encode_to_s(data: bytes) -> str:
    return " ".join(encode(data))


def pad_encode_to_s(data: bytes) -> str:
    return " ".join(pad_encode(data))
