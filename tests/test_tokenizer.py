#!/usr/bin/env python3
"""
分词器的单元测试
"""

import unittest

from sim_measures.tokenizer import CharTokenizer, NgramTokenizer, WordTokenizer


class TestCharTokenizer(unittest.TestCase):
    """字符分词测试"""

    def test_basic(self):
        self.assertEqual(CharTokenizer().tokenize("abc"), ["a", "b", "c"])
        self.assertEqual(CharTokenizer().tokenize("你好"), ["你", "好"])

    def test_empty_and_none(self):
        self.assertEqual(CharTokenizer().tokenize(""), [])
        self.assertEqual(CharTokenizer().tokenize(None), [])

    def test_keeps_whitespace_and_case(self):
        """不做任何归一化"""
        self.assertEqual(CharTokenizer().tokenize("A a"), ["A", " ", "a"])


class TestNgramTokenizer(unittest.TestCase):
    """n-gram分词测试"""

    def test_bigrams(self):
        self.assertEqual(NgramTokenizer(2).tokenize("hello"), ["he", "el", "ll", "lo"])

    def test_trigrams_chinese(self):
        self.assertEqual(NgramTokenizer(3).tokenize("你好世界"), ["你好世", "好世界"])

    def test_keeps_duplicates_in_order(self):
        """保留顺序与重复项"""
        self.assertEqual(NgramTokenizer(2).tokenize("aaaa"), ["aa", "aa", "aa"])

    def test_padding(self):
        """两侧各补 token_size-1 个填充字符"""
        self.assertEqual(NgramTokenizer(2, padding=True).tokenize("ab"), ["#a", "ab", "b#"])
        self.assertEqual(
            NgramTokenizer(3, padding=True, pad_char="_").tokenize("ab"),
            ["__a", "_ab", "ab_", "b__"],
        )

    def test_short_text(self):
        """文本短于n时整体作为一个token"""
        self.assertEqual(NgramTokenizer(3).tokenize("ab"), ["ab"])
        self.assertEqual(NgramTokenizer(3).tokenize("a"), ["a"])

    def test_unigrams(self):
        self.assertEqual(NgramTokenizer(1).tokenize("abc"), ["a", "b", "c"])
        self.assertEqual(NgramTokenizer(1, padding=True).tokenize("abc"), ["a", "b", "c"])

    def test_empty_and_none(self):
        """空输入不产生填充token"""
        self.assertEqual(NgramTokenizer(2, padding=True).tokenize(""), [])
        self.assertEqual(NgramTokenizer(2).tokenize(None), [])

    def test_invalid_parameters(self):
        with self.assertRaises(ValueError):
            NgramTokenizer(0)
        with self.assertRaises(ValueError):
            NgramTokenizer(-1)
        with self.assertRaises(ValueError):
            NgramTokenizer(2, pad_char="##")

    def test_deterministic(self):
        tokenizer = NgramTokenizer(2, padding=True)
        self.assertEqual(tokenizer.tokenize("data"), tokenizer.tokenize("data"))


class TestWordTokenizer(unittest.TestCase):
    """词级分词测试"""

    def test_basic(self):
        self.assertEqual(WordTokenizer().tokenize("Hello, big world!"), ["Hello", "big", "world"])

    def test_lowercase(self):
        self.assertEqual(WordTokenizer(lowercase=True).tokenize("Hello World"), ["hello", "world"])

    def test_unicode_words(self):
        self.assertEqual(WordTokenizer().tokenize("café naïve"), ["café", "naïve"])

    def test_custom_pattern(self):
        self.assertEqual(WordTokenizer(pattern=r"\p{Han}").tokenize("你好abc世界"), ["你", "好", "世", "界"])

    def test_empty_and_none(self):
        self.assertEqual(WordTokenizer().tokenize(""), [])
        self.assertEqual(WordTokenizer().tokenize(None), [])
        self.assertEqual(WordTokenizer().tokenize("  ,, "), [])

    def test_invalid_pattern(self):
        with self.assertRaises(ValueError):
            WordTokenizer(pattern="(")

    def test_equality_ignores_compiled_pattern(self):
        self.assertEqual(WordTokenizer(pattern=r"\w+"), WordTokenizer())
        self.assertNotEqual(WordTokenizer(lowercase=True), WordTokenizer())
        self.assertNotIn("_compiled", repr(WordTokenizer()))


if __name__ == '__main__':
    unittest.main()
