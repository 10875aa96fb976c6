"""ORM模块

提供状态声明所需的模型层：
- CoreModel: 模型基类，整数主键、构造时默认值、校验后保存
- ValidatableMixin: 字段校验注册与错误收集
- 数据库会话管理
- 状态集合声明（has_statuses / HasStatusesMixin）

使用示例:
    from statusable.orm import CoreModel, StatusFieldMixin, HasStatusesMixin, init_database

    init_database("sqlite:///./jobs.db")

    class Job(CoreModel, StatusFieldMixin, HasStatusesMixin):
        __statuses__ = ["Pending", "Running", "Completed"]

    Job.for_status_running().all()
"""

from .id_model import IdModel, Base
from .core_model import CoreModel
from .validation import (
    is_blank,
    Errors,
    Validator,
    PresenceValidator,
    InclusionValidator,
    ValidatableMixin,
)
from .db_session import (
    DatabaseManager,
    db_manager,
    init_database,
    get_engine,
    db_session_scope,
)
from .utils import to_snake_case, pluralize, humanize

from .statusable import (
    has_statuses,
    get_status_sets,
    HasStatusesMixin,
    StatusFieldMixin,
    DEFAULT_STATUS,
    StatusSet,
    status_method_suffix,
    humanize_list,
    StatusConfig,
    configure_statuses,
    configure_statuses_from_settings,
    StatusableError,
    StatusConfigurationError,
    StatusMethodConflictError,
)

__all__ = [
    # 模型
    "Base",
    "IdModel",
    "CoreModel",
    # 校验
    "is_blank",
    "Errors",
    "Validator",
    "PresenceValidator",
    "InclusionValidator",
    "ValidatableMixin",
    # 会话
    "DatabaseManager",
    "db_manager",
    "init_database",
    "get_engine",
    "db_session_scope",
    # 工具
    "to_snake_case",
    "pluralize",
    "humanize",
    # 状态集合
    "has_statuses",
    "get_status_sets",
    "HasStatusesMixin",
    "StatusFieldMixin",
    "DEFAULT_STATUS",
    "StatusSet",
    "status_method_suffix",
    "humanize_list",
    "StatusConfig",
    "configure_statuses",
    "configure_statuses_from_settings",
    "StatusableError",
    "StatusConfigurationError",
    "StatusMethodConflictError",
]
