from __future__ import annotations

import string
import unittest

from rfc_vectors import HEX_STYLE_VECTORS
from sixword import hexutil


class HexTests(unittest.TestCase):
    def test_styles_roundtrip(self):
        for data, (lower, finger, colons) in HEX_STYLE_VECTORS.items():
            self.assertEqual(hexutil.encode(data), lower)
            self.assertEqual(hexutil.encode_fingerprint(data), finger)
            self.assertEqual(hexutil.encode_colons(data), colons)
            for text in (lower, finger, colons, lower.upper()):
                self.assertEqual(hexutil.decode(text), data)

    def test_encode_slice(self):
        self.assertEqual(hexutil.encode_slice(b"\x01\x02\x03", 4, "-"), "0102-03")
        self.assertEqual(hexutil.encode(b""), "")

    def test_valid_hex(self):
        self.assertTrue(hexutil.valid_hex("abcdefABCDEF0123456789"))
        self.assertFalse(hexutil.valid_hex(""))
        for c in string.ascii_lowercase[6:] + string.ascii_uppercase[6:]:
            self.assertFalse(hexutil.valid_hex(c), c)
        self.assertFalse(hexutil.valid_hex("ab\n"))

    def test_strip_char(self):
        for c in " \t\n:.-":
            self.assertTrue(hexutil.strip_char(c), repr(c))
        for c in "\x1c\x1f\x85\xa0\u2003":
            self.assertFalse(hexutil.strip_char(c), repr(c))
        for c in "a0g_,":
            self.assertFalse(hexutil.strip_char(c), repr(c))
        with self.assertRaises(ValueError):
            hexutil.strip_char("ab")
        with self.assertRaises(ValueError):
            hexutil.strip_char("")

    def test_decode_errors(self):
        with self.assertRaises(ValueError):
            hexutil.decode("54\x1c65\xa0")
        with self.assertRaises(ValueError):
            hexutil.decode("abc")
        with self.assertRaises(ValueError):
            hexutil.decode("zz")
        with self.assertRaises(ValueError):
            hexutil.decode("ab:cd", strip_chars=False)
        self.assertEqual(hexutil.decode("ab.cd-ef 01"), b"\xab\xcd\xef\x01")


if __name__ == "__main__":
    unittest.main()
