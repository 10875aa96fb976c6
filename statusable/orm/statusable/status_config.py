"""
状态声明全局配置管理

提供 has_statuses 的默认选项：默认列名、是否校验非空、是否校验取值范围。
"""

from typing import Any


class StatusConfig:
    """状态声明全局配置类

    使用类变量存储全局配置，has_statuses 未显式传入的选项从这里读取。
    """

    _default_col_name: str = "status"
    _validate_presence: bool = False
    _validate_inclusion: bool = True

    @classmethod
    def configure(
        cls,
        default_col_name: str = "status",
        validate_presence: bool = False,
        validate_inclusion: bool = True
    ):
        """配置全局默认选项

        Args:
            default_col_name: 默认绑定的列名
            validate_presence: 默认是否校验非空
            validate_inclusion: 默认是否校验取值范围

        Raises:
            ValueError: 列名不是合法标识符

        Examples:
            >>> configure_statuses(default_col_name="state", validate_presence=True)
        """
        if not isinstance(default_col_name, str) or not default_col_name.isidentifier():
            raise ValueError(f"默认列名必须是合法的标识符，当前值: {default_col_name!r}")

        cls._default_col_name = default_col_name
        cls._validate_presence = bool(validate_presence)
        cls._validate_inclusion = bool(validate_inclusion)

    @classmethod
    def get_default_col_name(cls) -> str:
        """获取默认列名"""
        return cls._default_col_name

    @classmethod
    def get_validate_presence(cls) -> bool:
        """获取默认非空校验开关"""
        return cls._validate_presence

    @classmethod
    def get_validate_inclusion(cls) -> bool:
        """获取默认取值范围校验开关"""
        return cls._validate_inclusion

    @classmethod
    def reset(cls):
        """重置为默认配置（主要用于测试）"""
        cls._default_col_name = "status"
        cls._validate_presence = False
        cls._validate_inclusion = True


def configure_statuses(
    default_col_name: str = "status",
    validate_presence: bool = False,
    validate_inclusion: bool = True
):
    """配置状态声明默认选项（便捷函数）

    这是 StatusConfig.configure() 的便捷封装。

    Examples:
        >>> from statusable.orm import configure_statuses
        >>> configure_statuses(validate_presence=True)
    """
    StatusConfig.configure(
        default_col_name=default_col_name,
        validate_presence=validate_presence,
        validate_inclusion=validate_inclusion
    )


def configure_statuses_from_settings(settings: Any):
    """从 StatusSettings 配置对象读取默认选项

    Args:
        settings: StatusSettings 或带有 statuses 属性的 AppSettings

    Examples:
        >>> from statusable.config import AppSettings
        >>> configure_statuses_from_settings(AppSettings())
    """
    settings = getattr(settings, "statuses", settings)
    StatusConfig.configure(
        default_col_name=getattr(settings, "default_col_name", "status"),
        validate_presence=getattr(settings, "validate_presence", False),
        validate_inclusion=getattr(settings, "validate_inclusion", True)
    )


__all__ = [
    "StatusConfig",
    "configure_statuses",
    "configure_statuses_from_settings",
]
