"""gitvendor 日志配置

日志统一写到 stderr，stdout 留给命令本身的结果输出。
请求的级别只作用于 gitvendor 命名空间，其余库保持 WARNING。
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

LOGGER_NAMESPACE = "gitvendor"
TEXT_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """结构化 JSON 日志格式器，异常为 GitVendorError 时附带错误码"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[1]:
            exc = record.exc_info[1]
            code = getattr(exc, "code", None)
            if isinstance(code, str):
                entry["code"] = code
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """配置日志输出

    参数:
        level: gitvendor 日志级别（DEBUG, INFO, WARNING, ERROR）
        json_output: 为 True 时输出 JSON 行，否则输出人类可读文本
    """
    reset_logging()
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)


def reset_logging() -> None:
    """清理根日志器的 handlers 并恢复 gitvendor 命名空间的级别"""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.NOTSET)
