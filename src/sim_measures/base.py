from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, Optional, Sequence, Union

from .tokenizer import CharTokenizer, Tokenizer

MeasureInput = Union[str, Sequence[Hashable], None]


class SimilarityMeasure(ABC):
    """相似度度量基类：输入两个字符串或两个token序列，输出[0, 1]内的分数"""

    tokenizer: Tokenizer

    def calculate(self, a: MeasureInput, b: MeasureInput) -> float:
        """统一入口：字符串先分词，序列直接计算，None视为空"""
        return self.calculate_sequences(self._as_tokens(a), self._as_tokens(b))

    def calculate_strings(self, s1: Optional[str], s2: Optional[str]) -> float:
        return self.calculate_sequences(
            self.tokenizer.tokenize(s1),
            self.tokenizer.tokenize(s2),
        )

    @abstractmethod
    def calculate_sequences(
        self,
        seq1: Optional[Sequence[Hashable]],
        seq2: Optional[Sequence[Hashable]],
    ) -> float:
        ...

    def _as_tokens(self, value: MeasureInput) -> Sequence[Hashable]:
        if value is None:
            return []
        if isinstance(value, str):
            return self.tokenizer.tokenize(value)
        return value


def as_sequence(value: Optional[Sequence[Hashable]]) -> Sequence[Hashable]:
    return [] if value is None else value


def default_tokenizer() -> Tokenizer:
    return CharTokenizer()
