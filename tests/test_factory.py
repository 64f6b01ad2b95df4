#!/usr/bin/env python3
"""
度量工厂的单元测试
"""

import os
import unittest
from unittest.mock import patch

from sim_measures.config import Config, default_config
from sim_measures.factory import (
    create_measure,
    create_tokenizer,
    get_measure_info,
    list_available_measures,
    list_available_tokenizers,
    measure_from_config,
)
from sim_measures.jaccard import Jaccard
from sim_measures.levenshtein import Levenshtein
from sim_measures.tokenizer import CharTokenizer, NgramTokenizer, WordTokenizer


class TestCreateTokenizer(unittest.TestCase):

    def test_kinds(self):
        self.assertIsInstance(create_tokenizer("char"), CharTokenizer)
        self.assertEqual(create_tokenizer("ngram", token_size=3), NgramTokenizer(token_size=3))
        self.assertEqual(create_tokenizer("WORD", lowercase=True), WordTokenizer(lowercase=True))

    def test_unknown_kind(self):
        with self.assertRaises(ValueError) as context:
            create_tokenizer("sentencepiece")
        self.assertIn("不支持的分词器类型", str(context.exception))


class TestCreateMeasure(unittest.TestCase):

    def test_jaccard(self):
        measure = create_measure("jaccard", bag_semantics=True)
        self.assertEqual(measure, Jaccard(bag_semantics=True))

    def test_levenshtein(self):
        self.assertEqual(create_measure("levenshtein"), Levenshtein())
        self.assertEqual(create_measure("levenshtein", with_damerau=True), Levenshtein(with_damerau=True))
        self.assertEqual(create_measure("damerau_levenshtein"), Levenshtein(with_damerau=True))

    def test_custom_tokenizer(self):
        tokenizer = NgramTokenizer(2, padding=True)
        measure = create_measure("jaccard", tokenizer=tokenizer)
        self.assertIs(measure.tokenizer, tokenizer)

    def test_unknown_measure(self):
        with self.assertRaises(ValueError) as context:
            create_measure("cosine")
        self.assertIn("不支持的度量类型", str(context.exception))

    def test_listing(self):
        self.assertEqual(list_available_measures(), ["jaccard", "levenshtein", "damerau_levenshtein"])
        self.assertEqual(list_available_tokenizers(), ["char", "ngram", "word"])
        self.assertEqual(get_measure_info("jaccard")["name"], "Jaccard")
        with self.assertRaises(ValueError):
            get_measure_info("cosine")


class TestMeasureFromConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = Config(data={"measure": {}, "tokenizer": {}})
        self.assertEqual(measure_from_config(cfg), Levenshtein())

    def test_default_config(self):
        measure = measure_from_config(default_config())
        self.assertIsInstance(measure, Levenshtein)

    def test_jaccard_ngram(self):
        cfg = Config(data={
            "measure": {"name": "jaccard", "bag_semantics": True},
            "tokenizer": {"kind": "ngram", "token_size": 3, "padding": True},
        })
        measure = measure_from_config(cfg)
        self.assertEqual(measure, Jaccard(tokenizer=NgramTokenizer(3, padding=True), bag_semantics=True))

    def test_damerau_word(self):
        cfg = Config(data={
            "measure": {"name": "levenshtein", "with_damerau": True},
            "tokenizer": {"kind": "word", "lowercase": True},
        })
        measure = measure_from_config(cfg)
        self.assertEqual(measure.calculate("Big Hello", "hello big"), 0.5)

    def test_env_uppercase_tokenizer_kind(self):
        """环境变量里的大写分词器类型同样带上token_size"""
        with patch.dict(os.environ, {"SIM_TOKENIZER": "NGRAM", "SIM_TOKEN_SIZE": "3"}):
            measure = measure_from_config(default_config())
        self.assertEqual(measure.tokenizer, NgramTokenizer(3))

    def test_string_switch_rejected(self):
        cfg = Config(data={
            "measure": {"name": "jaccard", "bag_semantics": "no"},
            "tokenizer": {"kind": "char"},
        })
        with self.assertRaises(ValueError):
            measure_from_config(cfg)

    def test_out_of_range_token_size_rejected(self):
        cfg = Config(data={
            "measure": {"name": "jaccard"},
            "tokenizer": {"kind": "ngram", "token_size": 50},
        })
        with self.assertRaises(ValueError):
            measure_from_config(cfg)


if __name__ == '__main__':
    unittest.main()
