"""状态声明异常定义

声明阶段（类定义或调用 has_statuses 时）抛出的异常。
运行时的取值校验不抛异常，错误收集在 record.errors 中。
"""

from typing import Any, Iterable, Tuple


def _model_name(model: Any) -> str:
    if model is None:
        return "<unknown>"
    return getattr(model, "__name__", type(model).__name__)


class StatusableError(Exception):
    """状态声明基础异常"""
    pass


class StatusConfigurationError(StatusableError):
    """状态声明参数无效

    例如状态列表为空白字符串、列名不存在等。

    Attributes:
        model: 声明所在的模型类
        reason: 失败原因
    """

    def __init__(self, model: Any, reason: str):
        self.model = model
        self.reason = reason
        super().__init__(f"Invalid status declaration on {_model_name(model)}: {reason}")


class StatusMethodConflictError(StatusableError):
    """生成的方法名与模型已有属性冲突

    同一列重复声明、两个状态生成相同后缀、或生成的名字覆盖已有属性时抛出。

    Attributes:
        model: 声明所在的模型类
        names: 冲突的属性名
    """

    def __init__(self, model: Any, names: Iterable[str]):
        self.model = model
        self.names: Tuple[str, ...] = tuple(names)
        super().__init__(
            f"Status declaration on {_model_name(model)} would overwrite "
            f"existing attributes: {', '.join(self.names)}"
        )


__all__ = [
    "StatusableError",
    "StatusConfigurationError",
    "StatusMethodConflictError",
]
