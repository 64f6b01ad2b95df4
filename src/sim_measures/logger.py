"""
命令行日志

计算结果走stdout，日志只写stderr（或 stream 指定的流）和可选的日志文件。
每条日志一行，纯文本或JSON。
"""

from __future__ import annotations

import json
import os
import sys
import threading
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, Iterator, Optional, TextIO


class LogLevel(IntEnum):
    """日志级别，数值越大越严重"""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        name = str(value).upper()
        if name not in cls.__members__:
            raise ValueError(f"未知的日志级别: {value}")
        return cls[name]


@dataclass
class LogRecord:
    """一条日志；JSON模式下原样序列化"""
    time: str
    level: str
    stage: str
    message: str
    elapsed: Optional[float] = None
    data: Optional[Dict[str, Any]] = None

    def render(self) -> str:
        text = f"{self.time} {self.level:<7} {self.stage}: {self.message}"
        if self.elapsed is not None:
            text += f" [{self.elapsed:.3f}s]"
        return text


class SimLogger:
    """按级别过滤、线程安全地输出 LogRecord"""

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        log_file: Optional[str] = None,
        structured: bool = False,
        stream: Optional[TextIO] = None,
        console_output: bool = True,
    ):
        self.level = level
        self.structured = structured
        self._stream = stream
        self._console_output = console_output
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = None
        if log_file:
            os.makedirs(os.path.dirname(log_file) or '.', exist_ok=True)
            self._file = open(log_file, 'w', encoding='utf-8')

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def log(
        self,
        level: LogLevel,
        stage: str,
        message: str,
        elapsed: Optional[float] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        if level < self.level:
            return
        record = LogRecord(
            time=datetime.now().isoformat(timespec='milliseconds'),
            level=level.name,
            stage=stage,
            message=message,
            elapsed=elapsed,
            data=data,
        )
        line = json.dumps(asdict(record), ensure_ascii=False) if self.structured else record.render()
        with self._lock:
            if self._console_output:
                out = self._stream or sys.stderr
                print(line, file=out, flush=True)
            if self._file is not None:
                print(line, file=self._file, flush=True)

    def debug(self, stage: str, message: str, **kwargs) -> None:
        self.log(LogLevel.DEBUG, stage, message, **kwargs)

    def info(self, stage: str, message: str, **kwargs) -> None:
        self.log(LogLevel.INFO, stage, message, **kwargs)

    def warning(self, stage: str, message: str, **kwargs) -> None:
        self.log(LogLevel.WARNING, stage, message, **kwargs)

    def error(self, stage: str, message: str, **kwargs) -> None:
        self.log(LogLevel.ERROR, stage, message, **kwargs)

    @contextmanager
    def timed(self, stage: str, what: str) -> Iterator[None]:
        """记录一段操作的耗时；异常照常抛出"""
        started = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.error(stage, f"{what} 失败: {e}", elapsed=time.perf_counter() - started)
            raise
        self.info(stage, f"{what} 完成", elapsed=time.perf_counter() - started)


_logger: Optional[SimLogger] = None


def setup_logger(**kwargs) -> SimLogger:
    """创建全局日志器，替换并关闭旧的"""
    global _logger
    cleanup_logger()
    _logger = SimLogger(**kwargs)
    return _logger


def get_logger() -> SimLogger:
    if _logger is None:
        raise RuntimeError("日志器未初始化，请先调用 setup_logger()")
    return _logger


def cleanup_logger() -> None:
    global _logger
    if _logger is not None:
        _logger.close()
        _logger = None
