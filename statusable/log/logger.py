"""
日志工具

库内模块通过 get_logger() 取得 "statusable.*" 日志器，只记录不配置；
应用启动时用 setup_root_logger(config=settings.logging) 决定输出位置。
"""

import inspect
import logging
import os
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..config import LoggingSettings

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: Optional[str] = None,
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    propagate: bool = True,
    encoding: str = "utf-8",
) -> logging.Logger:
    """配置日志器，替换它原有的处理器

    Args:
        name: 日志器名称，None 为根日志器
        level: DEBUG / INFO / WARNING / ERROR / CRITICAL
        log_file: 日志文件路径，目录不存在时自动创建
        console: 是否输出到控制台
        propagate: 是否传播到父日志器
        encoding: 日志文件编码

    使用示例:
        logger = setup_logger("statusable.orm.statusable", level="DEBUG")
    """
    _logger = logging.getLogger(name)
    _logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _logger.propagate = propagate
    _logger.handlers.clear()

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    if console:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        _logger.addHandler(handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding=encoding)
        handler.setFormatter(formatter)
        _logger.addHandler(handler)

    return _logger


def setup_root_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    config: "Optional[LoggingSettings]" = None,
) -> logging.Logger:
    """配置根日志器，提供 config 时忽略其余参数

    使用示例:
        setup_root_logger(config=settings.logging)
    """
    encoding = "utf-8"
    if config is not None:
        level = config.level
        log_file = config.file_path or None
        console = config.enable_console
        encoding = config.file_encoding

    return setup_logger(
        level=level,
        log_file=log_file,
        console=console,
        propagate=False,
        encoding=encoding,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """获取日志器

    - 不传名称：使用调用方模块的 __name__
    - 简写名称自动加前缀："orm" -> "statusable.orm"
    - 带点的完整名称原样使用
    """
    if name is None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        name = caller.f_globals.get("__name__", "statusable") if caller is not None else "statusable"
    elif name != "statusable" and "." not in name:
        name = f"statusable.{name}"
    return logging.getLogger(name)


logger = logging.getLogger("statusable")
