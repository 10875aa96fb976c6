"""业务异常

模型保存被校验拦截时抛出 ValidationException，携带按字段的错误和完整消息。
"""

import copy
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from fastapi import status


class ErrorCode(str, Enum):
    """错误代码，继承 str，可直接当字符串比较"""

    BUSINESS_ERROR = "BUSINESS_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"


ErrorCodeType = Union[str, ErrorCode]


class BusinessException(Exception):
    """业务异常基类

    属性:
        message: 面向用户的错误消息
        code: 错误代码
        status_code: 对应的 HTTP 状态码
        details: 完整错误消息列表
        extra: 上下文信息（如 errors、model）
    """

    def __init__(
        self,
        message: str,
        code: ErrorCodeType = ErrorCode.BUSINESS_ERROR,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or []
        self.extra = extra
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，details 和 extra 为副本"""
        return {
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "details": copy.deepcopy(self.details),
            "extra": copy.deepcopy(self.extra),
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code!r}, status_code={self.status_code})"
        )


class ValidationException(BusinessException):
    """模型校验失败

    使用示例:
        try:
            job.set_status_running(save=True)
        except ValidationException as e:
            e.details             # ["Status must be one of Pending, Running, or Completed"]
            e.extra["errors"]     # {"status": ["must be one of Pending, Running, or Completed"]}
    """

    def __init__(
        self,
        message: str = "数据验证失败",
        code: ErrorCodeType = ErrorCode.VALIDATION_ERROR,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        # Starlette 重命名过 422 常量，这里直接写数值
        super().__init__(message, code=code, status_code=422, details=details, **extra)
