"""
sim-measures 命令行接口
"""

import argparse
import sys
from typing import Any, List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .config import Config, default_config, dump_json, load_config
from .factory import (
    MEASURE_INFO,
    TOKENIZER_INFO,
    list_available_measures,
    list_available_tokenizers,
    measure_from_config,
)
from .io_utils import read_data_file, write_data_file
from .levenshtein import Levenshtein
from .logger import LogLevel, cleanup_logger, get_logger, setup_logger


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "info":
            show_measure_info(args)
            return 0

        cfg = build_config(args)
        setup_logger(
            log_file=args.log_file,
            level=LogLevel.parse(cfg.get("observe.log_level", "INFO")),
            structured=cfg.get("observe.structured", False),
        )
        if args.command == "compare":
            compare_strings(args, cfg)
        elif args.command == "score":
            score_pair_file(args, cfg)
    except Exception as e:
        print(f"❌ 错误: {e}", file=sys.stderr)
        return 1
    finally:
        cleanup_logger()
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog="sim-measures",
        description="字符串/Token序列相似度计算 (Jaccard, Levenshtein)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  # 编辑距离相似度
  sim-measures compare kitten sitting

  # 多重集Jaccard + 字符bigram
  sim-measures compare "如何开发票" "怎么开发票" --measure jaccard --bag --tokenizer ngram --token-size 2

  # 为文件中的每一对文本打分
  sim-measures score pairs.csv --left q1 --right q2 --output scored.csv
        """
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", "-c", help="YAML配置文件路径")
    common.add_argument("--measure", "-m", choices=list_available_measures(), help="相似度度量")
    common.add_argument("--bag", action="store_true", default=None, help="Jaccard使用多重集语义")
    common.add_argument("--damerau", action="store_true", default=None, help="Levenshtein启用相邻换位")
    common.add_argument("--tokenizer", "-t", choices=list_available_tokenizers(), help="字符串分词器")
    common.add_argument("--token-size", type=int, help="n-gram大小 (tokenizer=ngram)")
    common.add_argument("--padding", action="store_true", default=None, help="n-gram两侧填充")
    common.add_argument("--log-level", choices=[level.name for level in LogLevel], help="日志级别")
    common.add_argument("--log-file", help="日志文件路径")
    common.add_argument("--structured-log", action="store_true", default=None, help="JSON格式日志")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # compare 命令
    compare_parser = subparsers.add_parser("compare", parents=[common], help="计算两个字符串的相似度")
    compare_parser.add_argument("left", help="第一个字符串")
    compare_parser.add_argument("right", help="第二个字符串")
    compare_parser.add_argument("--tokens", action="store_true", help="按空白切分为token序列再比较")
    compare_parser.add_argument("--distance", action="store_true", help="同时输出原始编辑距离 (仅Levenshtein)")

    # score 命令
    score_parser = subparsers.add_parser("score", parents=[common], help="为数据文件中的文本对逐行打分")
    score_parser.add_argument("input", help="输入文件路径 (CSV/Excel/Parquet)")
    score_parser.add_argument("--left", required=True, help="左侧文本列名")
    score_parser.add_argument("--right", required=True, help="右侧文本列名")
    score_parser.add_argument("--output", "-o", help="输出文件路径")
    score_parser.add_argument("--score-col", default="score", help="分数列名 (默认: score)")
    score_parser.add_argument("--summary", help="统计摘要JSON输出路径")

    # info 命令
    subparsers.add_parser("info", help="显示可用的度量与分词器")

    return parser


def build_config(args) -> Config:
    """加载配置并应用命令行覆盖"""
    cfg = load_config(args.config) if args.config else default_config()

    overrides = {
        "measure.name": args.measure,
        "measure.bag_semantics": args.bag,
        "measure.with_damerau": args.damerau,
        "tokenizer.kind": args.tokenizer,
        "tokenizer.token_size": args.token_size,
        "tokenizer.padding": args.padding,
        "observe.log_level": args.log_level,
        "observe.structured": args.structured_log,
    }
    for path, value in overrides.items():
        if value is not None:
            cfg.set(path, value)
    cfg.validate()
    return cfg


def compare_strings(args, cfg: Config) -> None:
    """计算并输出两个字符串的相似度"""
    logger = get_logger()
    measure = measure_from_config(cfg)
    logger.debug("compare", f"度量: {measure}")

    if args.tokens:
        left: Any = args.left.split()
        right: Any = args.right.split()
    else:
        left, right = args.left, args.right

    score = measure.calculate(left, right)
    print(f"{score:.6f}")

    if args.distance:
        if not isinstance(measure, Levenshtein):
            logger.warning("compare", "--distance 仅适用于Levenshtein度量，已忽略")
        else:
            print(measure.distance(left, right))


def _cell_text(value: Any) -> Optional[str]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return str(value)


def score_pair_file(args, cfg: Config) -> None:
    """逐行计算文本对相似度并写出结果"""
    logger = get_logger()
    measure = measure_from_config(cfg)

    with logger.timed("score", f"读取数据 {args.input}"):
        df = read_data_file(args.input)

    for col in (args.left, args.right):
        if col not in df.columns:
            raise ValueError(f"列 '{col}' 不存在，可用列: {', '.join(map(str, df.columns))}")

    logger.info("score", f"读取到 {len(df)} 对文本，度量: {cfg.get('measure.name')}")

    with logger.timed("score", "相似度计算"):
        scores = [
            measure.calculate(_cell_text(a), _cell_text(b))
            for a, b in tqdm(zip(df[args.left], df[args.right]), total=len(df), desc="scoring", disable=len(df) < 1000)
        ]
    df[args.score_col] = scores

    summary = summarize_scores(scores)
    summary["measure"] = cfg.get("measure")
    summary["tokenizer"] = cfg.get("tokenizer")
    logger.info("score", "分数统计", data=summary)

    if args.output:
        path = write_data_file(df, args.output)
        logger.info("score", f"结果已保存到: {path}")
    else:
        print(df.to_csv(index=False), end="")

    if args.summary:
        dump_json(args.summary, summary)


def summarize_scores(scores: List[float]) -> dict:
    """分数统计摘要"""
    if not scores:
        return {"count": 0}
    arr = np.asarray(scores, dtype=float)
    return {
        "count": int(arr.size),
        "mean": float(arr.mean()),
        "median": float(np.median(arr)),
        "min": float(arr.min()),
        "max": float(arr.max()),
    }


def show_measure_info(args) -> None:
    """显示度量与分词器信息"""
    print("🔍 可用的相似度度量:\n")
    for name in list_available_measures():
        info = MEASURE_INFO[name]
        print(f"📊 {info['name']} ({name})")
        print(f"   描述: {info['description']}")
        if info["options"]:
            print(f"   选项: {', '.join(info['options'])}")
        print()

    print("🔤 可用的分词器:\n")
    for kind in list_available_tokenizers():
        print(f"   {kind}: {TOKENIZER_INFO[kind]}")


if __name__ == "__main__":
    sys.exit(main())
