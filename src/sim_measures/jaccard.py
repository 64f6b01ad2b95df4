"""
Jaccard相似度（集合/多重集两种语义）
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Hashable, Optional, Sequence

from .base import SimilarityMeasure, as_sequence, default_tokenizer
from .tokenizer import Tokenizer


@dataclass(frozen=True)
class Jaccard(SimilarityMeasure):
    """
    Jaccard相似度

    - 集合语义 (bag_semantics=False): |A ∩ B| / |A ∪ B|，重复token先去重，最大值1.0
    - 多重集语义 (bag_semantics=True): Σ min(countA, countB) / (lenA + lenB)，
      分母是两个多重集大小之和，因此完全相同的输入得分为0.5

    两边都为空返回1.0，仅一边为空返回0.0。
    """

    tokenizer: Tokenizer = field(default_factory=default_tokenizer)
    bag_semantics: bool = False

    def calculate_sequences(
        self,
        seq1: Optional[Sequence[Hashable]],
        seq2: Optional[Sequence[Hashable]],
    ) -> float:
        tokens1, tokens2 = as_sequence(seq1), as_sequence(seq2)
        if not tokens1 and not tokens2:
            return 1.0
        if not tokens1 or not tokens2:
            return 0.0

        if self.bag_semantics:
            return self._bag_jaccard(tokens1, tokens2)
        return self._set_jaccard(tokens1, tokens2)

    @staticmethod
    def _set_jaccard(tokens1: Sequence[Hashable], tokens2: Sequence[Hashable]) -> float:
        A, B = set(tokens1), set(tokens2)
        inter = len(A & B)
        union = len(A | B)
        return inter / union

    @staticmethod
    def _bag_jaccard(tokens1: Sequence[Hashable], tokens2: Sequence[Hashable]) -> float:
        counts1, counts2 = Counter(tokens1), Counter(tokens2)
        inter = sum((counts1 & counts2).values())
        total = len(tokens1) + len(tokens2)
        return inter / total
