"""
Levenshtein / Damerau-Levenshtein 相似度

动态规划只保留三行滚动缓冲：
- upper_upper: i-2 行，供相邻换位查找
- upper: i-1 行，常规查找
- lower: 当前填充行
每处理完外层一个元素后按引用轮换，内存随较短序列长度线性增长。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Optional, Sequence

from .base import MeasureInput, SimilarityMeasure, as_sequence, default_tokenizer
from .tokenizer import Tokenizer


def edit_distance(
    seq1: Sequence[Hashable],
    seq2: Sequence[Hashable],
    with_damerau: bool = False,
) -> int:
    """
    计算两个序列的编辑距离（插入、删除、替换各计1次；with_damerau时相邻换位计1次）

    字符串按字符比较，列表/元组按元素相等比较，算法完全相同。

    Args:
        seq1: 第一个序列
        seq2: 第二个序列
        with_damerau: 是否启用相邻换位规则（受限Damerau，即OSA）

    Returns:
        最小编辑次数
    """
    # 距离对称，行宽取较短的一方
    if len(seq1) > len(seq2):
        seq1, seq2 = seq2, seq1
    len1, len2 = len(seq1), len(seq2)
    if len1 == 0:
        return len2

    upper_upper = [0] * (len1 + 1)
    upper = list(range(len1 + 1))  # 从空序列构造 seq1 前缀的代价
    lower = [0] * (len1 + 1)

    for j in range(1, len2 + 1):
        b = seq2[j - 1]
        lower[0] = j
        for i in range(1, len1 + 1):
            a = seq1[i - 1]
            cost = 0 if a == b else 1
            value = min(
                upper[i] + 1,         # 删除
                lower[i - 1] + 1,     # 插入
                upper[i - 1] + cost,  # 替换
            )
            if (
                with_damerau
                and i > 1
                and j > 1
                and a == seq2[j - 2]
                and seq1[i - 2] == b
            ):
                value = min(value, upper_upper[i - 2] + 1)
            lower[i] = value

        upper_upper, upper, lower = upper, lower, upper_upper

    return upper[len1]


@dataclass(frozen=True)
class Levenshtein(SimilarityMeasure):
    """
    Levenshtein相似度 = 1 - 编辑距离 / max(lenA, lenB)

    with_damerau=True 时计算Damerau-Levenshtein（仅相邻换位）。
    字符串默认按字符分词；token序列按元素比较。
    """

    with_damerau: bool = False
    tokenizer: Tokenizer = field(default_factory=default_tokenizer)

    def calculate_sequences(
        self,
        seq1: Optional[Sequence[Hashable]],
        seq2: Optional[Sequence[Hashable]],
    ) -> float:
        tokens1, tokens2 = as_sequence(seq1), as_sequence(seq2)
        len1, len2 = len(tokens1), len(tokens2)
        if len1 == 0 and len2 == 0:
            return 1.0
        if len1 == 0 or len2 == 0:
            return 0.0

        distance = edit_distance(tokens1, tokens2, self.with_damerau)
        return 1.0 - distance / max(len1, len2)

    def distance(self, a: MeasureInput, b: MeasureInput) -> int:
        """原始编辑距离（不归一化）"""
        return edit_distance(self._as_tokens(a), self._as_tokens(b), self.with_damerau)
