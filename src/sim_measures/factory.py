"""
度量与分词器工厂
按名称创建 Jaccard / Levenshtein 以及配套分词器
"""

from typing import Any, Dict, List, Optional

from .config import Config
from .jaccard import Jaccard
from .levenshtein import Levenshtein
from .base import SimilarityMeasure
from .tokenizer import CharTokenizer, NgramTokenizer, Tokenizer, WordTokenizer

MEASURE_INFO: Dict[str, Dict[str, Any]] = {
    "jaccard": {
        "name": "Jaccard",
        "description": "集合/多重集重叠度，token无序",
        "options": ["bag_semantics"],
    },
    "levenshtein": {
        "name": "Levenshtein",
        "description": "1 - 编辑距离/最大长度，token有序",
        "options": ["with_damerau"],
    },
    "damerau_levenshtein": {
        "name": "Damerau-Levenshtein",
        "description": "Levenshtein + 相邻换位计1次编辑",
        "options": [],
    },
}

TOKENIZER_INFO: Dict[str, str] = {
    "char": "每个字符一个token",
    "ngram": "字符n-gram，保留顺序与重复 (token_size, padding, pad_char)",
    "word": "正则词级分词 (pattern, lowercase)",
}


def create_tokenizer(kind: str = "char", **kwargs) -> Tokenizer:
    """
    创建分词器实例

    Args:
        kind: 分词器类型 ("char", "ngram" 或 "word")
        **kwargs: 分词器参数

    Returns:
        分词器实例
    """
    kind = kind.lower()
    if kind == "char":
        return CharTokenizer()
    elif kind == "ngram":
        return NgramTokenizer(**kwargs)
    elif kind == "word":
        return WordTokenizer(**kwargs)
    else:
        raise ValueError(f"不支持的分词器类型: {kind}")


def create_measure(
    name: str = "levenshtein",
    tokenizer: Optional[Tokenizer] = None,
    **kwargs
) -> SimilarityMeasure:
    """
    创建相似度度量实例

    Args:
        name: 度量名称 ("jaccard", "levenshtein" 或 "damerau_levenshtein")
        tokenizer: 字符串入口使用的分词器，默认按字符
        **kwargs: 度量参数 (bag_semantics / with_damerau)

    Returns:
        相似度度量实例
    """
    tokenizer = tokenizer or CharTokenizer()
    name = name.lower()
    if name == "jaccard":
        return Jaccard(tokenizer=tokenizer, bag_semantics=kwargs.get("bag_semantics", False))
    elif name == "levenshtein":
        return Levenshtein(with_damerau=kwargs.get("with_damerau", False), tokenizer=tokenizer)
    elif name == "damerau_levenshtein":
        return Levenshtein(with_damerau=True, tokenizer=tokenizer)
    else:
        raise ValueError(f"不支持的度量类型: {name}")


def measure_from_config(cfg: Config) -> SimilarityMeasure:
    """根据配置创建度量"""
    cfg.validate()
    tokenizer_kwargs = {}
    kind = str(cfg.get("tokenizer.kind", "char")).lower()
    if kind == "ngram":
        tokenizer_kwargs = {
            "token_size": cfg.get("tokenizer.token_size", 2),
            "padding": cfg.get("tokenizer.padding", False),
            "pad_char": cfg.get("tokenizer.pad_char", "#"),
        }
    elif kind == "word":
        tokenizer_kwargs = {
            "pattern": cfg.get("tokenizer.pattern", r"\w+"),
            "lowercase": cfg.get("tokenizer.lowercase", False),
        }
    tokenizer = create_tokenizer(kind, **tokenizer_kwargs)

    return create_measure(
        str(cfg.get("measure.name", "levenshtein")),
        tokenizer=tokenizer,
        bag_semantics=cfg.get("measure.bag_semantics", False),
        with_damerau=cfg.get("measure.with_damerau", False),
    )


def list_available_measures() -> List[str]:
    return list(MEASURE_INFO.keys())


def list_available_tokenizers() -> List[str]:
    return list(TOKENIZER_INFO.keys())


def get_measure_info(name: str) -> Dict[str, Any]:
    if name not in MEASURE_INFO:
        raise ValueError(f"不支持的度量类型: {name}")
    return MEASURE_INFO[name]
