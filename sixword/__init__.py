"""
sixword: binary encoding using the six-word scheme of S/Key (RFC 2289,
RFC 1760, RFC 1751).

Every 8 bytes become six short English words, the last of which carries a
2-bit checksum so that most single-word transcription errors are caught on
decode:

    >>> import sixword
    >>> sixword.encode(b"Hi world")
    ['ACRE', 'ADEN', 'INN', 'SLID', 'MAD', 'PAP']
    >>> sixword.decode("acre aden inn slid mad pap")
    b'Hi world'

Inputs whose length is not a multiple of 8 can be encoded with pad_encode();
the last word then carries a digit recording how many zero bytes were added
(e.g. "A2"). This padding scheme is specific to this library; decode it with
pad_decode() or decode(..., padding_ok=True).

The checksum detects accidents, not tampering. See sixword.cli for the
`sixword` command line tool.
"""

__version__ = "0.1"

from .decoding import decode, pad_decode, split_words
from .encoding import (
    EncodeIter,
    encode,
    encode_iter,
    encode_to_s,
    encode_to_sentences,
    pad_encode,
    pad_encode_to_s,
    pad_encode_to_sentences,
)
from .errors import (
    CLIError,
    FormatError,
    InputError,
    InvalidParity,
    InvalidWord,
    SixwordError,
    UnknownWord,
)

__all__ = [
    "encode",
    "pad_encode",
    "encode_iter",
    "encode_to_sentences",
    "pad_encode_to_sentences",
    "encode_to_s",
    "pad_encode_to_s",
    "EncodeIter",
    "decode",
    "pad_decode",
    "split_words",
    "SixwordError",
    "InputError",
    "FormatError",
    "InvalidParity",
    "UnknownWord",
    "InvalidWord",
    "CLIError",
]
