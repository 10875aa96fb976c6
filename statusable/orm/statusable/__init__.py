"""状态集合模块

为模型的字符串列声明一组有序的状态标签，自动生成查询、常量、赋值、判断方法和取值校验。
没有状态转换规则，这是与状态机的区别。

导出:
    - has_statuses: 函数式声明
    - HasStatusesMixin: 类属性 __statuses__ 声明
    - StatusFieldMixin: 状态字段 Mixin（提供 status 字段）
    - StatusSet: 声明描述
    - StatusConfig / configure_statuses: 全局默认选项
    - 异常类

使用示例:
    from statusable.orm import CoreModel
    from statusable.orm.statusable import StatusFieldMixin, HasStatusesMixin

    class Job(CoreModel, StatusFieldMixin, HasStatusesMixin):
        __statuses__ = ["Pending", "Running", "Completed"]

    Job.status_options                   # ("Pending", "Running", "Completed")
    Job.for_status_pending().all()       # 查询
    job.set_status_running(save=True)    # 赋值并保存
    job.is_status(["Running", "Completed"])
"""

from .exceptions import (
    StatusableError,
    StatusConfigurationError,
    StatusMethodConflictError,
)
from .naming import status_method_suffix, humanize_list
from .status_set import StatusSet, as_candidates
from .status_field import DEFAULT_STATUS, StatusFieldMixin
from .status_config import (
    StatusConfig,
    configure_statuses,
    configure_statuses_from_settings,
)
from .has_statuses import has_statuses, get_status_sets, HasStatusesMixin

__all__ = [
    # 声明
    "has_statuses",
    "get_status_sets",
    "HasStatusesMixin",
    "StatusFieldMixin",
    "DEFAULT_STATUS",
    "StatusSet",
    "as_candidates",
    # 名称工具
    "status_method_suffix",
    "humanize_list",
    # 配置
    "StatusConfig",
    "configure_statuses",
    "configure_statuses_from_settings",
    # 异常
    "StatusableError",
    "StatusConfigurationError",
    "StatusMethodConflictError",
]
