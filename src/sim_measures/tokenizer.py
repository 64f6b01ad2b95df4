"""
分词器模块
把字符串切分为有序token列表，供相似度度量的字符串入口使用
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

import regex as re


class Tokenizer(ABC):
    """分词器接口：确定性、全函数（None视为空串）"""

    def tokenize(self, text: Optional[str]) -> List[str]:
        if not text:
            return []
        return self._tokenize(text)

    @abstractmethod
    def _tokenize(self, text: str) -> List[str]:
        ...


@dataclass(frozen=True)
class CharTokenizer(Tokenizer):
    """每个字符一个token"""

    def _tokenize(self, text: str) -> List[str]:
        return list(text)


@dataclass(frozen=True)
class NgramTokenizer(Tokenizer):
    """
    字符n-gram分词器

    与集合版 char_ngrams 不同，这里保留顺序和重复项，多重集Jaccard需要计数。
    padding=True 时两侧各补 token_size-1 个填充字符，保证每个字符出现在 token_size 个gram中。
    """

    token_size: int = 2
    padding: bool = False
    pad_char: str = "#"

    def __post_init__(self) -> None:
        if self.token_size < 1:
            raise ValueError(f"token_size必须>=1，当前: {self.token_size}")
        if len(self.pad_char) != 1:
            raise ValueError(f"pad_char必须是单个字符，当前: {self.pad_char!r}")

    def _tokenize(self, text: str) -> List[str]:
        n = self.token_size
        if self.padding:
            pad = self.pad_char * (n - 1)
            text = f"{pad}{text}{pad}"
        # 文本短于n时整体作为一个token
        if len(text) < n:
            return [text]
        return [text[i : i + n] for i in range(len(text) - n + 1)]


@dataclass(frozen=True)
class WordTokenizer(Tokenizer):
    """基于正则的词级分词器，默认 \\w+ (Unicode感知)"""

    pattern: str = r"\w+"
    lowercase: bool = False
    _compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern)
        except re.error as e:
            raise ValueError(f"无效的分词正则: {self.pattern!r} ({e})") from e
        object.__setattr__(self, "_compiled", compiled)

    def _tokenize(self, text: str) -> List[str]:
        if self.lowercase:
            text = text.lower()
        return self._compiled.findall(text)
