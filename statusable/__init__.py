"""
Statusable - 模型状态集合声明

为 SQLAlchemy 模型的字符串列声明有序的状态标签，自动生成查询、赋值、判断方法和取值校验。
"""

__version__ = "0.1.0"

# 导出ORM
from .orm import (
    CoreModel,
    init_database,
    get_engine,
    db_session_scope,
    has_statuses,
    HasStatusesMixin,
    StatusFieldMixin,
    StatusSet,
    configure_statuses,
    StatusConfigurationError,
    StatusMethodConflictError,
)

# 导出异常
from .exceptions import (
    ErrorCode,
    BusinessException,
    ValidationException,
)

# 导出日志
from .log import get_logger, setup_logger, setup_root_logger

# 导出配置
from .config import AppSettings, load_yaml_config

__all__ = [
    "__version__",
    # ORM
    "CoreModel",
    "init_database",
    "get_engine",
    "db_session_scope",
    "has_statuses",
    "HasStatusesMixin",
    "StatusFieldMixin",
    "StatusSet",
    "configure_statuses",
    "StatusConfigurationError",
    "StatusMethodConflictError",
    # 异常
    "ErrorCode",
    "BusinessException",
    "ValidationException",
    # 日志
    "get_logger",
    "setup_logger",
    "setup_root_logger",
    # 配置
    "AppSettings",
    "load_yaml_config",
]
