"""
中央日志配置

统一的 logger 出口。引擎内部只打日志，不在导入时添加文件输出；
需要写文件时由调用方（如命令行）调用 configure_logging。
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    """重设日志输出

    Args:
        level: stderr 输出级别
        log_file: 可选的日志文件，按 10 MB 滚动、保留 7 天
    """
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )


__all__ = ["logger", "configure_logging"]
