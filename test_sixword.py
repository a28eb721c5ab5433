from __future__ import annotations

import os
import random
import threading
import unittest

import sixword
from rfc_vectors import iter_hex_vectors
from sixword import (
    EncodeIter,
    FormatError,
    InputError,
    InvalidParity,
    InvalidWord,
    UnknownWord,
    decode,
    encode,
    encode_iter,
    encode_to_s,
    encode_to_sentences,
    pad_decode,
    pad_encode,
    pad_encode_to_s,
    pad_encode_to_sentences,
    split_words,
)


class EncodeTests(unittest.TestCase):
    def test_rfc_vectors(self):
        for data, sentence in iter_hex_vectors():
            self.assertEqual(encode(data), sentence.split())
            self.assertEqual(encode_to_s(data), sentence)

    def test_examples(self):
        self.assertEqual(encode(b"Hi world"), ["ACRE", "ADEN", "INN", "SLID", "MAD", "PAP"])
        self.assertEqual(encode(b"\x00" * 8), ["A"] * 6)
        self.assertEqual(encode(bytes.fromhex("D1854218EBBB0B51")), ["ROME", "MUG", "FRED", "SCAN", "LIVE", "LACE"])
        self.assertEqual(encode(b""), [])

    def test_accepts_bytes_like(self):
        self.assertEqual(encode(bytearray(b"Hi world")), encode(b"Hi world"))
        self.assertEqual(encode(memoryview(b"Hi world")), encode(b"Hi world"))

    def test_rejects_unpadded_length(self):
        for size in (1, 7, 9, 15):
            with self.assertRaises(FormatError):
                encode(b"x" * size)
        with self.assertRaises(InputError):
            encode(b"abc")

    def test_rejects_text(self):
        with self.assertRaises(TypeError):
            encode("Hi world")
        with self.assertRaises(TypeError):
            encode(None)
        with self.assertRaises(TypeError):
            encode(5)
        with self.assertRaises(TypeError):
            pad_encode(3)
        self.assertEqual(encode(bytearray(b"Hi world")), encode(memoryview(b"Hi world")))

    def test_sentences(self):
        self.assertEqual(encode_to_sentences(b"Hi world" * 2), ["ACRE ADEN INN SLID MAD PAP"] * 2)
        self.assertEqual(
            pad_encode_to_sentences(b"Hi worl" * 2),
            ["ACRE ADEN INN SLID MAD LEW", "CODY AS SIGH SUIT MUDD ABE2"],
        )
        self.assertEqual(
            pad_encode_to_s(b"Hi worl" * 2),
            "ACRE ADEN INN SLID MAD LEW CODY AS SIGH SUIT MUDD ABE2",
        )

    def test_padded_vectors(self):
        cases = {
            b"\x00\x00\x00foo": ["A", "A", "HAY", "SLEW", "TROT", "A2"],
            b"\x00\x00\x00foo\x00\x00": ["A", "A", "HAY", "SLEW", "TROT", "A"],
            b"foo\x00\x00": ["CHUB", "EMIL", "MUDD", "A", "A", "A3"],
            b"foo": ["CHUB", "EMIL", "MUDD", "A", "A", "A5"],
            b"hi": ["COAT", "ACHE", "A", "A", "A", "ACT6"],
        }
        for data, words in cases.items():
            self.assertEqual(pad_encode(data), words)
            self.assertEqual(pad_decode(words), data)
            self.assertEqual(decode(" ".join(words), padding_ok=True), data)

    def test_pad_encode_matches_encode_on_aligned_input(self):
        data = os.urandom(32)
        self.assertEqual(pad_encode(data), encode(data))


class EncodeIterTests(unittest.TestCase):
    def test_words_per_group(self):
        data = b"Hi world"
        self.assertEqual(list(encode_iter(data, words_per_group=2)), ["ACRE ADEN", "INN SLID", "MAD PAP"])
        self.assertEqual(list(encode_iter(data, words_per_group=4)), ["ACRE ADEN INN SLID", "MAD PAP"])
        self.assertEqual(list(encode_iter(data, words_per_group=6)), ["ACRE ADEN INN SLID MAD PAP"])

    def test_groups_do_not_span_sentences(self):
        groups = list(encode_iter(b"Hi world" * 2, words_per_group=5))
        self.assertEqual(groups, ["ACRE ADEN INN SLID MAD", "PAP", "ACRE ADEN INN SLID MAD", "PAP"])

    def test_length(self):
        self.assertEqual(len(encode_iter(b"x" * 24, words_per_group=6)), 3)
        self.assertEqual(len(encode_iter(b"x" * 17, words_per_group=6, pad=True)), 3)
        self.assertEqual(len(encode_iter(b"x" * 16)), 12)
        self.assertEqual(len(encode_iter(b"x" * 16, words_per_group=4)), 4)
        self.assertEqual(len(encode_iter(b"")), 0)
        it = encode_iter(os.urandom(21), words_per_group=4, pad=True)
        self.assertEqual(len(it), len(list(it)))

    def test_restartable(self):
        it = encode_iter(os.urandom(40), words_per_group=3)
        self.assertIsInstance(it, EncodeIter)
        first = list(it)
        second = list(it)
        self.assertEqual(first, second)
        self.assertEqual(len(first), 10)

    def test_validation_is_eager(self):
        with self.assertRaises(FormatError):
            encode_iter(b"abc")
        for bad in (0, 7, -1):
            with self.assertRaises(ValueError):
                encode_iter(b"x" * 8, words_per_group=bad)


class DecodeTests(unittest.TestCase):
    def test_rfc_vectors(self):
        for data, sentence in iter_hex_vectors():
            self.assertEqual(decode(sentence), data)
            self.assertEqual(decode(sentence.lower().split()), data)

    def test_string_and_list_input(self):
        self.assertEqual(decode("ACRE ADEN INN SLID MAD PAP"), b"Hi world")
        self.assertEqual(decode(" ACRE\tADEN\nINN  SLID MAD PAP\n"), b"Hi world")
        self.assertEqual(decode(["ACRE", "ADEN", "INN", "SLID", "MAD", "PAP"]), b"Hi world")
        self.assertEqual(decode(("acre", "aden", "inn", "slid", "mad", "pap")), b"Hi world")

    def test_empty(self):
        self.assertEqual(decode(""), b"")
        self.assertEqual(decode([]), b"")
        self.assertEqual(pad_decode(""), b"")

    def test_word_count(self):
        for n in (1, 5, 7, 11):
            with self.assertRaises(FormatError):
                decode(["A"] * n)

    def test_error_kinds(self):
        with self.assertRaises(InvalidParity):
            decode("BEAK NET SITE ROTH SWIM FOR")
        with self.assertRaises(UnknownWord):
            decode("ZZZZ A A A A A")
        with self.assertRaises(InvalidWord):
            decode("AAAAAA A A A A A")

    def test_padding_requires_opt_in(self):
        with self.assertRaises(UnknownWord):
            decode("CHUB EMIL MUDD A A A5")
        self.assertEqual(decode("CHUB EMIL MUDD A A A5", padding_ok=True), b"foo")

    def test_padding_only_on_last_sentence(self):
        with self.assertRaises(UnknownWord):
            pad_decode("CHUB EMIL MUDD A A A5 ACRE ADEN INN SLID MAD PAP")
        self.assertEqual(pad_decode("ACRE ADEN INN SLID MAD PAP CHUB EMIL MUDD A A A5"), b"Hi worldfoo")

    def test_padding_marker_then_invalid_word(self):
        with self.assertRaises(InvalidWord):
            pad_decode("A A A A A 2")

    def test_split_words(self):
        self.assertEqual(split_words("a  b\nc"), ["a", "b", "c"])
        self.assertEqual(split_words(iter(["a", "b"])), ["a", "b"])
        with self.assertRaises(TypeError):
            split_words(b"A A A A A A")


class RoundTripTests(unittest.TestCase):
    def test_aligned(self):
        rng = random.Random(2289)
        for n in range(0, 65, 8):
            data = bytes(rng.getrandbits(8) for _ in range(n))
            self.assertEqual(decode(encode(data)), data)

    def test_padded_any_length(self):
        rng = random.Random(1751)
        for n in range(0, 50):
            data = bytes(rng.getrandbits(8) for _ in range(n))
            words = pad_encode(data)
            self.assertEqual(len(words), -(-n // 8) * 6)
            padding = (8 - n % 8) % 8
            if padding:
                self.assertTrue(words[-1].endswith(str(padding)))
            else:
                self.assertFalse(words and words[-1][-1].isdigit())
            self.assertEqual(pad_decode(words), data)

    def test_padded_sentence_decodes_without_marker(self):
        # parity covers the zero padding, so a standard decoder accepts the bare words
        words = pad_encode(b"foo")
        words[-1] = words[-1][:-1]
        self.assertEqual(decode(words), b"foo" + b"\x00" * 5)

    def test_concurrent_use(self):
        errors = []

        def worker(seed):
            rng = random.Random(seed)
            try:
                for _ in range(50):
                    data = bytes(rng.getrandbits(8) for _ in range(rng.randrange(40)))
                    if pad_decode(pad_encode(data)) != data:
                        errors.append(seed)
            except Exception as exc:  # surfaced through the assertion below
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(errors, [])


class PackageTests(unittest.TestCase):
    def test_version_and_exports(self):
        self.assertEqual(sixword.__version__, "0.1")
        for name in sixword.__all__:
            self.assertTrue(hasattr(sixword, name), name)


if __name__ == "__main__":
    unittest.main()
