import os

import pandas as pd


def ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def read_data_file(path: str) -> pd.DataFrame:
    """
    智能读取数据文件，支持多种格式：parquet, xlsx, csv

    Args:
        path: 输入文件路径

    Returns:
        pandas.DataFrame: 读取的数据

    Raises:
        ValueError: 不支持的文件格式
        FileNotFoundError: 文件不存在
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"文件不存在: {path}")

    _, ext = os.path.splitext(path.lower())

    if ext == '.parquet':
        return pd.read_parquet(path)
    elif ext in ['.xlsx', '.xls']:
        return pd.read_excel(path)
    elif ext == '.csv':
        # 尝试不同分隔符
        for sep in [',', '\t', ';']:
            try:
                df = pd.read_csv(path, sep=sep, keep_default_na=False)
            except (pd.errors.ParserError, UnicodeDecodeError):
                continue
            if df.shape[1] >= 2:
                return df
        return pd.read_csv(path, keep_default_na=False)
    else:
        raise ValueError(f"不支持的文件格式: {ext}。支持的格式: .parquet, .xlsx, .xls, .csv")


def write_data_file(df: pd.DataFrame, path: str) -> str:
    """按扩展名写出数据文件，未知扩展名默认CSV，返回实际写入路径"""
    ensure_parent_dir(path)
    _, ext = os.path.splitext(path.lower())
    if ext == '.parquet':
        df.to_parquet(path, index=False)
    elif ext in ['.xlsx', '.xls']:
        df.to_excel(path, index=False)
    else:
        if ext != '.csv':
            path = os.path.splitext(path)[0] + '.csv'
        df.to_csv(path, index=False, encoding='utf-8')
    return path
