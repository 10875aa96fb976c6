"""
配置类

每个子配置都可以单独从环境变量读取，也可以通过 AppSettings 从 YAML 整体加载。
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class DatabaseSettings(BaseSettings):
    """init_database(config=...) 使用的连接配置"""
    url: str = Field(default="", description="数据库连接URL")
    echo: bool = Field(default=False, description="是否打印SQL语句")

    class Config:
        env_prefix = "STATUSABLE_DB_"


class LoggingSettings(BaseSettings):
    """setup_root_logger(config=...) 使用的日志配置，file_path 为空时不写文件"""
    level: str = Field(default="INFO", description="日志级别")
    file_path: str = Field(default="", description="日志文件路径")
    file_encoding: str = Field(default="utf-8", description="文件编码")
    enable_console: bool = Field(default=True, description="是否启用控制台输出")

    class Config:
        env_prefix = "STATUSABLE_LOG_"


class StatusSettings(BaseSettings):
    """has_statuses() 未显式传入的选项

    要在定义模型之前生效：

        configure_statuses_from_settings(StatusSettings(default_col_name="state"))
    """
    default_col_name: str = Field(default="status", description="默认状态字段名")
    validate_presence: bool = Field(default=False, description="默认是否校验非空")
    validate_inclusion: bool = Field(default=True, description="默认是否校验取值范围")

    class Config:
        env_prefix = "STATUSABLE_STATUS_"


class AppSettings(BaseSettings):
    """聚合配置

    子配置及环境变量前缀:
        - database: STATUSABLE_DB_
        - logging:  STATUSABLE_LOG_
        - statuses: STATUSABLE_STATUS_

    YAML 示例:
        app_name: "Job Runner"
        database:
          url: "sqlite:///./jobs.db"
        statuses:
          validate_presence: true
    """
    app_name: str = Field(default="statusable", description="应用名称")
    debug: bool = Field(default=False, description="调试模式")

    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()
    statuses: StatusSettings = StatusSettings()

    class Config:
        env_prefix = "STATUSABLE_"
