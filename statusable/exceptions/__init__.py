"""异常处理模块

使用示例:
    from statusable.exceptions import ValidationException

    try:
        job.save(commit=True)
    except ValidationException as e:
        return {"errors": e.extra["errors"]}
"""

from .exceptions import (
    ErrorCode,
    ErrorCodeType,
    BusinessException,
    ValidationException,
)

__all__ = [
    "ErrorCode",
    "ErrorCodeType",
    "BusinessException",
    "ValidationException",
]
