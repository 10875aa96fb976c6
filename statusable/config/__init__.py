"""配置模块

提供配置管理功能：
- AppSettings: 应用基础配置，支持 YAML + 环境变量
- 子配置类: DatabaseSettings, LoggingSettings, StatusSettings
- load_yaml_config: 从 YAML 创建配置

快速开始:
    from statusable.config import AppSettings, load_yaml_config

    settings = load_yaml_config("config/settings.yaml", AppSettings)

配置优先级: 初始化参数 > 环境变量 > 默认值
"""

from .settings import (
    AppSettings,
    DatabaseSettings,
    LoggingSettings,
    StatusSettings,
)

from .loader import (
    read_yaml,
    load_yaml_config,
)

__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "StatusSettings",
    "read_yaml",
    "load_yaml_config",
]
