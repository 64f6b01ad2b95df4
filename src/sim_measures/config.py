"""
配置管理模块
YAML配置 + 环境变量覆盖 + 基本校验
"""

import copy
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

MEASURE_NAMES = ("jaccard", "levenshtein", "damerau_levenshtein")
TOKENIZER_KINDS = ("char", "ngram", "word")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
BOOL_OPTIONS = (
    "measure.bag_semantics",
    "measure.with_damerau",
    "tokenizer.padding",
    "tokenizer.lowercase",
    "observe.structured",
)

# =========================
# 配置参数（默认值）
# =========================

DEFAULTS: Dict[str, Any] = {
    "measure": {
        "name": "levenshtein",
        "bag_semantics": False,
        "with_damerau": False,
    },
    "tokenizer": {
        "kind": "char",
        "token_size": 2,
        "padding": False,
        "pad_char": "#",
    },
    "observe": {
        "log_level": "INFO",
        "structured": False,
    },
}

ENV_MAPPING = {
    "SIM_MEASURE": "measure.name",
    "SIM_BAG_SEMANTICS": "measure.bag_semantics",
    "SIM_WITH_DAMERAU": "measure.with_damerau",
    "SIM_TOKENIZER": "tokenizer.kind",
    "SIM_TOKEN_SIZE": "tokenizer.token_size",
    "SIM_LOG_LEVEL": "observe.log_level",
}


@dataclass
class Config:
    data: Dict[str, Any]
    source_file: Optional[str] = None

    def get(self, path: str, default: Any = None) -> Any:
        """获取配置值，支持点号分隔的路径"""
        cur: Any = self.data
        for key in path.split('.'):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        return cur

    def set(self, path: str, value: Any) -> None:
        """设置配置值，支持点号分隔的路径"""
        keys = path.split('.')
        cur = self.data
        for key in keys[:-1]:
            if not isinstance(cur.get(key), dict):
                cur[key] = {}
            cur = cur[key]
        cur[keys[-1]] = value

    def merge_from_env(self, env_mapping: Dict[str, str]) -> None:
        """从环境变量合并配置"""
        for env_var, config_path in env_mapping.items():
            value = os.environ.get(env_var)
            if value is not None:
                self.set(config_path, _coerce_env_value(value))

    def validate(self) -> None:
        """校验当前配置，不合法时抛出ValueError"""
        _validate_config(self.data)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return copy.deepcopy(self.data)


def _coerce_env_value(value: str) -> Any:
    """环境变量类型转换，无法识别时保持字符串"""
    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    if value.isdigit():
        return int(value)
    if '.' in value and value.replace('.', '', 1).isdigit():
        return float(value)
    return value


def default_config() -> Config:
    """内置默认配置（叠加环境变量）"""
    config = Config(data=copy.deepcopy(DEFAULTS))
    config.merge_from_env(ENV_MAPPING)
    config.validate()
    return config


def load_config(path: str) -> Config:
    """
    加载YAML配置文件并进行基本验证

    缺失的可选项使用默认值补齐。

    Args:
        path: 配置文件路径

    Returns:
        Config对象

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: YAML格式错误
        ValueError: 配置验证失败
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"配置文件不存在: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"配置文件顶层必须是映射: {path}")

    _validate_config(data)

    merged = copy.deepcopy(DEFAULTS)
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values

    config = Config(data=merged, source_file=path)
    config.merge_from_env(ENV_MAPPING)
    _validate_config(config.data)

    return config


def _validate_config(data: Dict[str, Any]) -> None:
    """验证配置文件的基本结构和参数合理性"""
    required_sections = ['measure', 'tokenizer']
    for section in required_sections:
        if section not in data:
            raise ValueError(f"缺少配置节: {section}")

    measure = data.get('measure') or {}
    tokenizer = data.get('tokenizer') or {}

    name = str(measure.get('name', 'levenshtein')).lower()
    if name not in MEASURE_NAMES:
        raise ValueError(f"measure.name应为{'/'.join(MEASURE_NAMES)}之一，当前: {name}")

    kind = str(tokenizer.get('kind', 'char')).lower()
    if kind not in TOKENIZER_KINDS:
        raise ValueError(f"tokenizer.kind应为{'/'.join(TOKENIZER_KINDS)}之一，当前: {kind}")

    token_size = tokenizer.get('token_size', 2)
    if isinstance(token_size, bool) or not isinstance(token_size, int) or not (1 <= token_size <= 10):
        raise ValueError(f"tokenizer.token_size应在1-10范围内，当前: {token_size}")

    # 开关项必须是布尔值，"no"/"off" 之类的字符串不做猜测
    for path in BOOL_OPTIONS:
        section, key = path.split('.')
        value = (data.get(section) or {}).get(key, False)
        if not isinstance(value, bool):
            raise ValueError(f"{path}应为true/false，当前: {value!r}")

    log_level = str((data.get('observe') or {}).get('log_level', 'INFO')).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"observe.log_level应为{'/'.join(LOG_LEVELS)}之一，当前: {log_level}")


def dump_json(path: str, obj: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
