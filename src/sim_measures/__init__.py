"""
sim-measures: 字符串与token序列的相似度度量
"""

from .base import SimilarityMeasure
from .factory import create_measure, create_tokenizer, measure_from_config
from .jaccard import Jaccard
from .levenshtein import Levenshtein, edit_distance
from .tokenizer import CharTokenizer, NgramTokenizer, Tokenizer, WordTokenizer

__version__ = "0.1.0"

__all__ = [
    "SimilarityMeasure",
    "Jaccard",
    "Levenshtein",
    "edit_distance",
    "Tokenizer",
    "CharTokenizer",
    "NgramTokenizer",
    "WordTokenizer",
    "create_measure",
    "create_tokenizer",
    "measure_from_config",
]
