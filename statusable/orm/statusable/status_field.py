"""状态字段定义

提供标准的状态字段定义 Mixin。

使用示例:
    from statusable.orm import CoreModel
    from statusable.orm.statusable import StatusFieldMixin, HasStatusesMixin

    class Job(CoreModel, StatusFieldMixin, HasStatusesMixin):
        __statuses__ = ["Pending", "Running", "Completed"]
        # status 字段由 StatusFieldMixin 自动提供
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

DEFAULT_STATUS = "Initializing"


class StatusFieldMixin:
    """状态字段 Mixin

    字段说明:
        - status: 字符串类型，最大50字符，非空，默认 "Initializing"，带索引

    注意:
        CoreModel 在构造时填入默认值，Job().status == "Initializing"。
        默认值不在状态列表中时，开启取值校验的模型必须先赋值才能保存。
        自定义列名时请自行定义字段，例如:

            lifecycle_state: Mapped[str] = mapped_column(String(50), nullable=True)
    """

    status: Mapped[str] = mapped_column(
        String(50),
        default=DEFAULT_STATUS,
        nullable=False,
        index=True,
        comment="状态"
    )


__all__ = [
    "DEFAULT_STATUS",
    "StatusFieldMixin",
]
