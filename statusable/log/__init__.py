"""日志模块

使用示例:
    from statusable.log import get_logger, setup_root_logger

    setup_root_logger(level="DEBUG")
    logger = get_logger()
"""

from .logger import (
    setup_logger,
    setup_root_logger,
    DEFAULT_LOG_FORMAT,
    logger,
    get_logger,
)

__all__ = [
    "setup_logger",
    "setup_root_logger",
    "DEFAULT_LOG_FORMAT",
    "logger",
    "get_logger",
]
