"""状态集合描述

StatusSet 是一次 has_statuses 声明的不可变描述：绑定的列、有序的状态标签、
校验开关，以及由这些推导出的名称（后缀、复数列名、可读列表）。
生成的方法都只读取 StatusSet，声明完成后不再修改。
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from ..utils import pluralize
from .naming import humanize_list, status_method_suffix

# 字符串和字节串可迭代，但始终是单个值
SCALAR_TYPES = (str, bytes)


def is_value_sequence(value: Any) -> bool:
    """是否为多个候选值（列表、集合、生成器、dict 视图等）"""
    return isinstance(value, Iterable) and not isinstance(value, SCALAR_TYPES)


def as_candidates(candidate: Any) -> Tuple[Any, ...]:
    """候选值规范化为元组

    Examples:
        >>> as_candidates("Pending")
        ('Pending',)
        >>> as_candidates(["Pending", "Running"])
        ('Pending', 'Running')
        >>> as_candidates(None)
        ()
    """
    if candidate is None:
        return ()
    if is_value_sequence(candidate):
        return tuple(candidate)
    return (candidate,)


@dataclass(frozen=True)
class StatusSet:
    """一个状态列的声明描述

    Attributes:
        col_name: 绑定的列名
        labels: 有序的状态标签
        validate_presence: 是否校验非空
        validate_inclusion: 是否校验取值范围
        humanized_list: 可读列表，如 "Pending, Running, or Completed"
        plural_col_name: 复数列名，如 "statuses"
        suffixes: 标签 → 方法名后缀（有序、只读）

    使用示例:
        status_set = StatusSet("status", ("Pending", "Not Ready"))
        status_set.suffixes["Not Ready"]    # "not_ready"
        status_set.inclusion_message        # "must be one of Pending or Not Ready"
    """
    col_name: str
    labels: Tuple[str, ...]
    validate_presence: bool = False
    validate_inclusion: bool = True
    humanized_list: str = field(init=False)
    plural_col_name: str = field(init=False)
    suffixes: Mapping[str, str] = field(init=False, compare=False, hash=False)

    def __post_init__(self):
        labels = tuple(self.labels)
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "humanized_list", humanize_list(labels))
        object.__setattr__(self, "plural_col_name", pluralize(self.col_name))
        object.__setattr__(
            self,
            "suffixes",
            MappingProxyType({label: status_method_suffix(label) for label in labels}),
        )

    @property
    def inclusion_message(self) -> str:
        return f"must be one of {self.humanized_list}"

    # ==================== 生成的名称 ====================

    def collection_method_names(self) -> List[str]:
        """与具体状态无关的属性名"""
        c = self.col_name
        return [
            f"for_{c}",
            f"not_for_{c}",
            f"by_{c}_asc",
            f"by_{c}_desc",
            f"group_by_{c}",
            f"{c}_options",
            f"humanized_{self.plural_col_name}_list",
            f"is_{c}",
            f"is_not_{c}",
        ]

    def label_method_names(self, label: str) -> List[str]:
        """单个状态生成的属性名"""
        c = self.col_name
        n = self.suffixes[label]
        return [
            f"for_{c}_{n}",
            f"not_for_{c}_{n}",
            f"{c}_{n}",
            f"set_{c}_{n}",
            f"is_{c}_{n}",
            f"is_not_{c}_{n}",
        ]

    def method_names(self) -> List[str]:
        """本次声明生成的全部属性名（顺序稳定）"""
        names = self.collection_method_names()
        for label in self.labels:
            names.extend(self.label_method_names(label))
        return names

    def label_for(self, suffix: str) -> Optional[str]:
        """根据后缀反查状态标签"""
        for label, label_suffix in self.suffixes.items():
            if label_suffix == suffix:
                return label
        return None

    # ==================== 查询与判断 ====================

    @staticmethod
    def filter_clause(column, value):
        """等值或 IN 条件"""
        if is_value_sequence(value):
            return column.in_(list(value))
        return column == value

    @staticmethod
    def exclude_clause(column, value):
        """不等或 NOT IN 条件"""
        if is_value_sequence(value):
            return column.not_in(list(value))
        return column != value

    @staticmethod
    def matches(current: Any, candidate: Any) -> bool:
        """current 是否在候选值中（None 视为空候选）"""
        return current in as_candidates(candidate)


__all__ = [
    "StatusSet",
    "as_candidates",
    "is_value_sequence",
]
