"""模型字段校验

提供模型级的字段校验注册与错误收集，校验失败不会阻止赋值，
只在显式调用 validate() 或保存时检查。

使用示例:
    class Job(CoreModel):
        status: Mapped[str] = mapped_column(String(50), nullable=True)

    Job.validates_presence_of("status")
    Job.validates_inclusion_of("status", ["Pending", "Running"], allow_blank=True)

    job = Job(status="Unknown")
    job.validate()            # False
    job.errors["status"]      # ["is not included in the list"]
    job.errors.full_messages()  # ["Status is not included in the list"]
"""

from typing import Any, ClassVar, Dict, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import ValidationException
from ..log import get_logger
from .utils import humanize

logger = get_logger("statusable.orm.validation")


def is_blank(value: Any) -> bool:
    """判断值是否为空白

    None、仅含空白字符的字符串、空容器都视为空白。

    Examples:
        >>> is_blank(None), is_blank("  "), is_blank([])
        (True, True, True)
        >>> is_blank("Pending"), is_blank(0)
        (False, False)
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


class Errors:
    """按字段收集的校验错误

    errors[field] 总是返回列表（没有错误时为空列表），不会抛出 KeyError。
    """

    def __init__(self):
        self._messages: Dict[str, List[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._messages.setdefault(field, []).append(message)

    def __getitem__(self, field: str) -> List[str]:
        return list(self._messages.get(field, []))

    def __contains__(self, field: str) -> bool:
        return bool(self._messages.get(field))

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"<Errors {self._messages!r}>"

    def is_empty(self) -> bool:
        return len(self) == 0

    def clear(self) -> None:
        self._messages.clear()

    def to_dict(self) -> Dict[str, List[str]]:
        return {field: list(messages) for field, messages in self._messages.items()}

    def full_messages(self) -> List[str]:
        """带字段名的完整错误消息

        Example:
            ["Status can't be blank", "Status must be one of A or B"]
        """
        return [
            f"{humanize(field)} {message}"
            for field, messages in self._messages.items()
            for message in messages
        ]


class Validator:
    """字段校验器基类"""

    default_message: ClassVar[str] = "is invalid"

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        self.message = message or self.default_message

    def validate(self, record: Any, errors: Errors) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} field={self.field!r}>"


class PresenceValidator(Validator):
    """非空校验"""

    default_message = "can't be blank"

    def validate(self, record: Any, errors: Errors) -> None:
        if is_blank(getattr(record, self.field, None)):
            errors.add(self.field, self.message)


class InclusionValidator(Validator):
    """取值范围校验

    Args:
        field: 字段名
        choices: 允许的取值
        allow_blank: 为 True 时空白值跳过校验
        message: 自定义错误消息
    """

    default_message = "is not included in the list"

    def __init__(
        self,
        field: str,
        choices: Iterable[Any],
        allow_blank: bool = False,
        message: Optional[str] = None,
    ):
        super().__init__(field, message)
        self.choices = tuple(choices)
        self.allow_blank = allow_blank

    def validate(self, record: Any, errors: Errors) -> None:
        value = getattr(record, self.field, None)
        if self.allow_blank and is_blank(value):
            return
        if value not in self.choices:
            errors.add(self.field, self.message)


class ValidatableMixin:
    """模型校验 Mixin

    校验器按类注册，子类在父类的基础上追加，不会修改父类的注册表。
    """

    __validators__: ClassVar[Tuple[Validator, ...]] = ()

    # ==================== 注册 ====================

    @classmethod
    def add_validator(cls, validator: Validator) -> Validator:
        """注册一个校验器"""
        cls.__validators__ = tuple(cls.__validators__) + (validator,)
        return validator

    @classmethod
    def validates_presence_of(cls, *fields: str, message: Optional[str] = None) -> None:
        """注册非空校验

        Example:
            Job.validates_presence_of("status", "name")
        """
        for field in fields:
            cls.add_validator(PresenceValidator(field, message=message))

    @classmethod
    def validates_inclusion_of(
        cls,
        field: str,
        choices: Iterable[Any],
        allow_blank: bool = False,
        message: Optional[str] = None,
    ) -> None:
        """注册取值范围校验

        Example:
            Job.validates_inclusion_of(
                "status", ["Pending", "Running"],
                allow_blank=True,
                message="must be one of Pending or Running",
            )
        """
        cls.add_validator(
            InclusionValidator(field, choices, allow_blank=allow_blank, message=message)
        )

    @classmethod
    def get_validators(cls, field: Optional[str] = None) -> List[Validator]:
        """获取已注册的校验器，可按字段过滤"""
        return [v for v in cls.__validators__ if field is None or v.field == field]

    # ==================== 实例方法 ====================

    @property
    def errors(self) -> Errors:
        """最近一次 validate() 的错误集合"""
        errors = getattr(self, "_errors", None)
        if errors is None:
            errors = Errors()
            self._errors = errors
        return errors

    def validate(self) -> bool:
        """执行全部校验

        先清空上一次的错误，再逐个执行校验器。只收集错误，不抛出异常。

        Returns:
            是否校验通过
        """
        errors = self.errors
        errors.clear()
        for validator in type(self).__validators__:
            validator.validate(self, errors)
        if errors:
            logger.debug(f"{type(self).__name__} 校验未通过: {errors.to_dict()}")
        return errors.is_empty()

    def is_valid(self) -> bool:
        return self.validate()

    def validate_or_raise(self):
        """执行校验，失败时抛出 ValidationException

        Returns:
            self: 校验通过时返回自身

        Raises:
            ValidationException: details 为完整错误消息，extra["errors"] 为按字段的错误
        """
        if not self.validate():
            raise ValidationException(
                f"{type(self).__name__} 数据验证失败",
                details=self.errors.full_messages(),
                errors=self.errors.to_dict(),
                model=type(self).__name__,
            )
        return self


__all__ = [
    "is_blank",
    "Errors",
    "Validator",
    "PresenceValidator",
    "InclusionValidator",
    "ValidatableMixin",
]
