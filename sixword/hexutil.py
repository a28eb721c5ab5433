"""
Hexadecimal helpers used by the command line: plain lowercase hex, GPG style
fingerprints ("3954 5D42 F003 39FF") and colon separated bytes
("39:54:5d:42:f0:03:39:ff").
"""
from __future__ import annotations

import binascii
import re


_HEX_VALID = re.compile(r"\A[a-fA-F0-9]+\Z")
_HEX_STRIP = re.compile(r"[ \t\r\n\f\v:.-]+")


def valid_hex(s: str) -> bool:
    return bool(_HEX_VALID.match(s))


def strip_char(c: str) -> bool:
    """Whether a single character is a delimiter that may be dropped from hex input."""
    if len(c) != 1:
        raise ValueError("Must pass single character string")
    return bool(_HEX_STRIP.match(c))


def encode(data: bytes) -> str:
    return binascii.hexlify(data).decode("ascii")


def encode_slice(data: bytes, slice_len: int, delimiter: str) -> str:
    h = encode(data)
    return delimiter.join(h[i:i + slice_len] for i in range(0, len(h), slice_len))


def encode_fingerprint(data: bytes) -> str:
    return encode_slice(data, 4, " ").upper()


def encode_colons(data: bytes) -> str:
    return encode_slice(data, 2, ":")


def decode(hex_string: str, strip_chars: bool = True) -> bytes:
    """Decode hex text to bytes.

    Args:
        hex_string: Hex digits, optionally separated by whitespace, ':', '.' or '-'.
        strip_chars: Drop those separators first. When False they are rejected.

    Raises:
        ValueError: invalid characters or an odd number of digits.
    """
    if strip_chars:
        hex_string = _HEX_STRIP.sub("", hex_string)
    if not valid_hex(hex_string):
        raise ValueError(f"Invalid value for hex: {hex_string!r}")
    if len(hex_string) % 2:
        raise ValueError(f"Odd length hex: {hex_string!r}")
    return binascii.unhexlify(hex_string)
