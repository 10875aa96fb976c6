"""
模型基类

CoreModel 把声明基类、整数主键和字段校验组合在一起。状态集合生成的
set_<列>_<状态>(save=True) 通过这里的 save() 完成校验和持久化。
"""

from __future__ import annotations

from typing import ClassVar, Optional, TYPE_CHECKING

from sqlalchemy import inspect
from sqlalchemy.orm import declared_attr, Session, Query

if TYPE_CHECKING:
    from typing_extensions import Self

from ..exceptions import ValidationException
from ..log import get_logger
from .id_model import IdModel
from .utils import to_snake_case
from .validation import ValidatableMixin

logger = get_logger("statusable.orm.core_model")


class CoreModel(IdModel, ValidatableMixin):
    """模型基类

    - 表名默认由类名转换（JobRun -> job_run）
    - 构造时填入列的标量默认值
    - save() 先校验，失败时抛出 ValidationException 且不加入 session

    使用示例:
        class Job(CoreModel, StatusFieldMixin, HasStatusesMixin):
            __statuses__ = ["Pending", "Running", "Completed"]

        init_database("sqlite:///./jobs.db")
        Job(status="Pending").save(commit=True)
    """
    __abstract__ = True

    # 允许 _session 这类非 Mapped[] 注解
    __allow_unmapped__ = True

    # 由 init_database() 或测试设置为 scoped_session.query_property()
    if TYPE_CHECKING:
        query: ClassVar[Query[Self]]

    _session: Session = None

    @declared_attr.directive
    def __tablename__(cls) -> str:
        name = cls.__name__
        if '_' in name:
            raise ValueError(f'{name} 含有下划线，无法自动生成表名，请指定 __tablename__')
        return to_snake_case(name)

    def __init__(self, **kwargs):
        """未传入的列使用列定义上的标量默认值（如 status 的 "Initializing"）

        保存前的校验看到的就是将要写入的值。显式传入的值（包括 None）保持不变。
        """
        for attr in inspect(self.__class__).column_attrs:
            if attr.key in kwargs:
                continue
            default = getattr(attr.columns[0], "default", None)
            if default is not None and default.is_scalar:
                kwargs[attr.key] = default.arg
        super().__init__(**kwargs)

    def __repr__(self):
        return f"<{type(self).__name__} id={self.id}>"

    @property
    def session(self) -> Session:
        """对象使用的 session：优先取 query 绑定的 session，其次取全局 scoped_session"""
        if self._session is None:
            query = getattr(type(self), 'query', None)
            if query is not None:
                self._session = query.session
            else:
                from .db_session import db_manager
                self._session = db_manager.get_session()
        return self._session

    def save(self, commit: bool = False, validate: bool = True) -> Self:
        """校验后加入 session

        Args:
            commit: 是否立即提交
            validate: 是否先执行字段校验

        Raises:
            ValidationException: 校验失败，对象不会加入 session
        """
        if validate:
            try:
                self.validate_or_raise()
            except ValidationException:
                logger.info(f"{type(self).__name__} 保存被校验拦截: {self.errors.to_dict()}")
                raise
        self.session.add(self)
        if commit:
            self.session.commit()
        return self

    def refresh(self, attribute_names: Optional[list] = None) -> Self:
        """从数据库重新加载，丢弃未保存的赋值"""
        self.session.refresh(self, attribute_names)
        return self

    @classmethod
    def get(cls, id: int):
        """按主键获取，不存在返回 None"""
        return cls.query.filter_by(id=id).first()
