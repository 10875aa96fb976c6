"""状态集合声明

为模型的一个字符串列声明一组有序的状态标签，自动生成查询、常量、
赋值和判断方法，并注册取值校验。没有状态转换规则，任何赋值都允许，
取值是否合法只在 validate() / save() 时检查。

使用示例:
    from sqlalchemy import String
    from sqlalchemy.orm import Mapped, mapped_column
    from statusable.orm import CoreModel
    from statusable.orm.statusable import StatusFieldMixin, HasStatusesMixin, has_statuses

    # 方式1：Mixin 声明
    class Job(CoreModel, StatusFieldMixin, HasStatusesMixin):
        __statuses__ = ["Pending", "Running", "Completed"]

    # 方式2：函数声明
    class Task(CoreModel):
        lifecycle_state: Mapped[str] = mapped_column(String(50), nullable=True)

    has_statuses(Task, ["Pending", "Running"], col_name="lifecycle_state",
                 validate_presence=True, validate_inclusion=False)

    # 生成的方法
    Job.status_options                      # ("Pending", "Running", "Completed")
    Job.humanized_statuses_list             # "Pending, Running, or Completed"
    Job.for_status(["Pending", "Running"])  # Query
    Job.for_status_running().count()

    job = Job()
    job.set_status_running()                # 只赋值
    job.is_status_running()                 # True
    job.set_status_completed(save=True)     # 赋值、校验并提交
"""

from collections.abc import Iterable
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import Column
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import ColumnProperty, MappedColumn, QueryableAttribute

from ...log import get_logger
from .exceptions import StatusConfigurationError, StatusMethodConflictError
from .status_config import StatusConfig
from .status_set import StatusSet

logger = get_logger("statusable.orm.statusable")

STATUS_SETS_ATTR = "__status_sets__"

# 映射前类字典中代表列的对象
COLUMN_TYPES = (Column, MappedColumn, ColumnProperty)


# ==================== 参数规范化 ====================

def _flatten_labels(model: Any, labels: Any) -> List[str]:
    if labels is None:
        raise StatusConfigurationError(model, "status labels are required")
    if isinstance(labels, str):
        raise StatusConfigurationError(
            model, f"status labels must be a list of strings, got the string {labels!r}"
        )
    if not isinstance(labels, Iterable):
        raise StatusConfigurationError(
            model, f"status labels must be a list of strings, got {type(labels).__name__}"
        )

    flat: List[str] = []
    for label in labels:
        if isinstance(label, (list, tuple)):
            flat.extend(_flatten_labels(model, label))
            continue
        if not isinstance(label, str):
            raise StatusConfigurationError(
                model, f"status label must be a string, got {label!r}"
            )
        if not label.strip():
            raise StatusConfigurationError(model, "status label must not be blank")
        flat.append(label)
    return flat


def _is_declared(model: Any, col_name: str) -> bool:
    """模型是否把 col_name 声明为列

    已映射的类只看 mapper 的列。未映射的类（类定义过程中、抽象类、普通类）
    沿 MRO 查找 mapped_column / Column、类型注解或普通数据属性。
    方法、property 等描述符不算列。
    """
    mapper = sa_inspect(model, raiseerr=False)
    if mapper is not None:
        return col_name in mapper.columns

    for klass in model.__mro__:
        if col_name in vars(klass):
            value = vars(klass)[col_name]
            if isinstance(value, QueryableAttribute):
                owner = sa_inspect(klass, raiseerr=False)
                return owner is not None and col_name in owner.columns
            if isinstance(value, COLUMN_TYPES):
                return True
            return not (callable(value) or hasattr(value, "__get__"))
        if col_name in (getattr(klass, "__annotations__", None) or {}):
            return True
    return False


def _check_model(model: Any, col_name: str) -> None:
    if not isinstance(model, type):
        raise StatusConfigurationError(model, "has_statuses expects a model class")
    for registry_method in ("validates_presence_of", "validates_inclusion_of"):
        if not callable(getattr(model, registry_method, None)):
            raise StatusConfigurationError(
                model, f"model has no validation registry ({registry_method} missing)"
            )
    if not isinstance(col_name, str) or not col_name.isidentifier():
        raise StatusConfigurationError(model, f"invalid column name {col_name!r}")
    if not _is_declared(model, col_name):
        raise StatusConfigurationError(model, f"column {col_name!r} is not declared")


def _check_suffixes(model: Any, status_set: StatusSet) -> None:
    seen: Dict[str, str] = {}
    for label, suffix in status_set.suffixes.items():
        if not suffix:
            raise StatusConfigurationError(
                model, f"status label {label!r} has no usable characters for a method name"
            )
        if suffix in seen:
            raise StatusMethodConflictError(
                model,
                [f"{status_set.col_name}_{suffix} ({seen[suffix]!r} and {label!r})"],
            )
        seen[suffix] = label


def _check_conflicts(model: Any, status_set: StatusSet) -> None:
    if status_set.col_name in getattr(model, STATUS_SETS_ATTR, {}):
        raise StatusMethodConflictError(
            model, [f"statuses for column {status_set.col_name!r} already declared"]
        )

    names = status_set.method_names()
    duplicated = sorted({name for name in names if names.count(name) > 1})
    if duplicated:
        raise StatusMethodConflictError(model, duplicated)

    existing = [name for name in names if hasattr(model, name)]
    if existing:
        raise StatusMethodConflictError(model, existing)


# ==================== 方法生成 ====================

def _named(func: Callable, name: str, doc: str) -> Callable:
    func.__name__ = name
    func.__qualname__ = name
    func.__doc__ = doc
    return func


def _base_query(model_cls: Any, query: Any):
    if query is not None:
        return query
    if getattr(model_cls, "query", None) is None:
        raise RuntimeError(
            f"{model_cls.__name__}.query 未设置，请先调用 init_database() 或传入 query"
        )
    return model_cls.query


def _collection_methods(status_set: StatusSet) -> Dict[str, Any]:
    c = status_set.col_name
    candidates_doc = "value 可以是单个值或列表（列表生成 IN 条件）"

    def for_col(cls, value, query=None):
        column = getattr(cls, c)
        return _base_query(cls, query).filter(status_set.filter_clause(column, value))

    def not_for_col(cls, value, query=None):
        column = getattr(cls, c)
        return _base_query(cls, query).filter(status_set.exclude_clause(column, value))

    def by_col_asc(cls, query=None):
        return _base_query(cls, query).order_by(getattr(cls, c).asc())

    def by_col_desc(cls, query=None):
        return _base_query(cls, query).order_by(getattr(cls, c).desc())

    def group_by_col(cls, query=None):
        return _base_query(cls, query).group_by(getattr(cls, c))

    def is_col(self, candidate) -> bool:
        return status_set.matches(getattr(self, c), candidate)

    def is_not_col(self, candidate) -> bool:
        return not status_set.matches(getattr(self, c), candidate)

    return {
        f"for_{c}": classmethod(_named(
            for_col, f"for_{c}", f"{c} 等于 value 的记录，{candidates_doc}"
        )),
        f"not_for_{c}": classmethod(_named(
            not_for_col, f"not_for_{c}", f"{c} 不等于 value 的记录，{candidates_doc}"
        )),
        f"by_{c}_asc": classmethod(_named(by_col_asc, f"by_{c}_asc", f"按 {c} 升序")),
        f"by_{c}_desc": classmethod(_named(by_col_desc, f"by_{c}_desc", f"按 {c} 降序")),
        f"group_by_{c}": classmethod(_named(group_by_col, f"group_by_{c}", f"按 {c} 分组")),
        f"{c}_options": status_set.labels,
        f"humanized_{status_set.plural_col_name}_list": status_set.humanized_list,
        f"is_{c}": _named(is_col, f"is_{c}", f"当前 {c} 是否在 candidate 中"),
        f"is_not_{c}": _named(is_not_col, f"is_not_{c}", f"当前 {c} 是否不在 candidate 中"),
    }


def _label_methods(status_set: StatusSet, label: str) -> Dict[str, Any]:
    c = status_set.col_name
    n = status_set.suffixes[label]

    def for_label(cls, query=None):
        return _base_query(cls, query).filter(getattr(cls, c) == label)

    def not_for_label(cls, query=None):
        return _base_query(cls, query).filter(getattr(cls, c) != label)

    def set_label(self, save: bool = False, commit: bool = True):
        setattr(self, c, label)
        if save:
            self.save(commit=commit)
        return self

    def is_label(self) -> bool:
        return getattr(self, c) == label

    def is_not_label(self) -> bool:
        return getattr(self, c) != label

    return {
        f"for_{c}_{n}": classmethod(_named(
            for_label, f"for_{c}_{n}", f"{c} 为 {label!r} 的记录"
        )),
        f"not_for_{c}_{n}": classmethod(_named(
            not_for_label, f"not_for_{c}_{n}", f"{c} 不为 {label!r} 的记录"
        )),
        f"{c}_{n}": label,
        f"set_{c}_{n}": _named(
            set_label, f"set_{c}_{n}",
            f"将 {c} 设为 {label!r}；save=True 时校验并保存（失败抛出 ValidationException）"
        ),
        f"is_{c}_{n}": _named(is_label, f"is_{c}_{n}", f"{c} 是否为 {label!r}"),
        f"is_not_{c}_{n}": _named(is_not_label, f"is_not_{c}_{n}", f"{c} 是否不为 {label!r}"),
    }


# ==================== 公开 API ====================

def has_statuses(
    model: Any,
    labels: Iterable[Any],
    *,
    col_name: Optional[str] = None,
    validate_presence: Optional[bool] = None,
    validate_inclusion: Optional[bool] = None,
) -> StatusSet:
    """为模型的一个列声明状态集合

    Args:
        model: 模型类（需要提供 validates_presence_of / validates_inclusion_of）
        labels: 有序的状态标签，嵌套列表会被展开
        col_name: 绑定的列名，默认取 StatusConfig（"status"）
        validate_presence: 是否校验非空，默认取 StatusConfig（False）
        validate_inclusion: 是否校验取值范围（空白值跳过），默认取 StatusConfig（True）

    Returns:
        StatusSet: 本次声明的描述

    Raises:
        StatusConfigurationError: 标签或列名无效
        StatusMethodConflictError: 生成的方法名与已有属性冲突，不会覆盖任何属性
    """
    if col_name is None:
        col_name = StatusConfig.get_default_col_name()
    if validate_presence is None:
        validate_presence = StatusConfig.get_validate_presence()
    if validate_inclusion is None:
        validate_inclusion = StatusConfig.get_validate_inclusion()

    _check_model(model, col_name)
    status_set = StatusSet(
        col_name=col_name,
        labels=tuple(_flatten_labels(model, labels)),
        validate_presence=bool(validate_presence),
        validate_inclusion=bool(validate_inclusion),
    )
    _check_suffixes(model, status_set)
    _check_conflicts(model, status_set)

    attributes = _collection_methods(status_set)
    for label in status_set.labels:
        attributes.update(_label_methods(status_set, label))
    for name, value in attributes.items():
        setattr(model, name, value)

    if status_set.validate_presence:
        model.validates_presence_of(col_name)
    if status_set.validate_inclusion:
        model.validates_inclusion_of(
            col_name,
            status_set.labels,
            allow_blank=True,
            message=status_set.inclusion_message,
        )

    # 复制后赋值，不修改父类的映射
    status_sets = dict(getattr(model, STATUS_SETS_ATTR, {}))
    status_sets[col_name] = status_set
    setattr(model, STATUS_SETS_ATTR, status_sets)

    logger.debug(
        f"{model.__name__}.{col_name} 声明了 {len(status_set.labels)} 个状态，"
        f"生成 {len(attributes)} 个方法"
    )
    return status_set


def get_status_sets(model: Any) -> Dict[str, StatusSet]:
    """获取模型声明的全部状态集合（列名 → StatusSet）"""
    return dict(getattr(model, STATUS_SETS_ATTR, {}))


class HasStatusesMixin:
    """状态集合声明 Mixin

    配置属性（子类可覆盖）:
        __statuses__: 状态声明，支持两种格式
            - 列表：绑定默认列
                __statuses__ = ["Pending", "Running"]
            - 字典：列名 → 标签列表，或列名 → 选项字典
                __statuses__ = {
                    "status": ["Pending", "Running"],
                    "lifecycle_state": {
                        "labels": ["Draft", "Live"],
                        "validate_presence": True,
                        "validate_inclusion": False,
                    },
                }

    抽象类（__abstract__ = True）只声明不生成，由第一个具体子类生成。
    已由具体父类生成过的声明不会在子类中重复处理。
    """

    __statuses__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("__abstract__", False):
            return
        declared = cls.__statuses__
        if declared is None:
            return
        if "__statuses__" not in cls.__dict__ and getattr(cls, STATUS_SETS_ATTR, None) is not None:
            return
        for col_name, options in cls._normalize_status_declaration(declared).items():
            has_statuses(cls, col_name=col_name, **options)

    @classmethod
    def _normalize_status_declaration(cls, declared: Any) -> Dict[Optional[str], Dict[str, Any]]:
        if not isinstance(declared, dict):
            return {None: {"labels": declared}}

        normalized: Dict[Optional[str], Dict[str, Any]] = {}
        for col_name, options in declared.items():
            if isinstance(options, dict):
                unknown = set(options) - {"labels", "validate_presence", "validate_inclusion"}
                if unknown:
                    raise StatusConfigurationError(
                        cls, f"unknown status options for {col_name!r}: {', '.join(sorted(unknown))}"
                    )
                if "labels" not in options:
                    raise StatusConfigurationError(cls, f"status labels for {col_name!r} are required")
                normalized[col_name] = dict(options)
            else:
                normalized[col_name] = {"labels": options}
        return normalized

    @classmethod
    def status_sets(cls) -> Dict[str, StatusSet]:
        """全部状态集合（列名 → StatusSet）"""
        return get_status_sets(cls)

    @classmethod
    def get_status_set(cls, col_name: Optional[str] = None) -> Optional[StatusSet]:
        """获取某列的状态集合

        不传列名时：只有一个状态列则返回它，否则按默认列名查找。
        """
        status_sets = get_status_sets(cls)
        if col_name is None:
            if len(status_sets) == 1:
                return next(iter(status_sets.values()))
            col_name = StatusConfig.get_default_col_name()
        return status_sets.get(col_name)


__all__ = [
    "has_statuses",
    "get_status_sets",
    "HasStatusesMixin",
]
