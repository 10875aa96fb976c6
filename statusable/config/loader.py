"""YAML 配置加载

使用示例:
    from statusable.config import AppSettings, load_yaml_config
    from statusable.orm import configure_statuses_from_settings

    settings = load_yaml_config("config/settings.yaml", AppSettings)
    configure_statuses_from_settings(settings)
"""

import os
from typing import Any, Dict, Type, TypeVar

import yaml

T = TypeVar("T")


def read_yaml(config_path: str) -> Dict[str, Any]:
    """读取 YAML 文件，空文件返回 {}

    Raises:
        FileNotFoundError: 文件不存在
        ValueError: 顶层不是映射
    """
    abs_path = os.path.abspath(config_path)
    if not os.path.exists(abs_path):
        raise FileNotFoundError(f"配置文件不存在: {abs_path}")

    with open(abs_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"配置文件顶层必须是映射: {abs_path}")
    return data


def load_yaml_config(config_path: str, settings_class: Type[T], **overrides) -> T:
    """读取 YAML 并创建 Settings 实例，overrides 优先于文件内容"""
    config = read_yaml(config_path)
    config.update(overrides)
    return settings_class(**config)
