from __future__ import annotations

import unittest

from sixword.errors import InvalidWord, UnknownWord
from sixword.words import WORDS, WORDS_INDEX, code_for_word, word_for_code


class DictionaryTests(unittest.TestCase):
    def test_table_shape(self):
        self.assertEqual(len(WORDS), 2048)
        self.assertEqual(len(set(WORDS)), 2048)
        for w in WORDS:
            self.assertTrue(1 <= len(w) <= 4, w)
            self.assertEqual(w, w.upper())
            self.assertTrue(w.isalpha(), w)

    def test_standard_order(self):
        self.assertEqual(WORDS[0], "A")
        self.assertEqual(WORDS[1], "ABE")
        self.assertEqual(WORDS[570], "YOU")
        self.assertEqual(WORDS[571], "ABED")
        self.assertEqual(WORDS[2046], "YOGA")
        self.assertEqual(WORDS[2047], "YOKE")
        # both runs are alphabetical
        self.assertEqual(list(WORDS[:571]), sorted(WORDS[:571]))
        self.assertEqual(list(WORDS[571:]), sorted(WORDS[571:]))

    def test_index_is_inverse(self):
        for code, w in enumerate(WORDS):
            self.assertEqual(WORDS_INDEX[w], code)
            self.assertEqual(word_for_code(code), w)
            self.assertEqual(code_for_word(w), code)

    def test_lookup_is_case_insensitive(self):
        self.assertEqual(code_for_word("yoke"), 2047)
        self.assertEqual(code_for_word("YoKe"), 2047)
        self.assertEqual(code_for_word("a"), 0)

    def test_unknown_vs_invalid_by_length(self):
        with self.assertRaises(UnknownWord):
            code_for_word("ZZZZ")
        with self.assertRaises(UnknownWord):
            code_for_word("ZZZ")
        with self.assertRaises(UnknownWord):
            code_for_word("A5")
        with self.assertRaises(InvalidWord):
            code_for_word("AAAAAA")
        with self.assertRaises(InvalidWord):
            code_for_word("ACRES")
        with self.assertRaises(InvalidWord):
            code_for_word("")

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            code_for_word("ZZZZ")

    def test_code_out_of_range_is_internal_error(self):
        for bad in (-1, 2048, 1 << 20, None):
            with self.assertRaises(RuntimeError):
                word_for_code(bad)


if __name__ == "__main__":
    unittest.main()
