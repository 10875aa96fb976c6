"""状态名称转换工具

- status_method_suffix: 状态标签 → 方法名后缀（"Not Ready" → "not_ready"）
- humanize_list: 标签列表 → 可读文本（"A, B, or C"）
"""

import re
import unicodedata
from typing import Iterable

_SEPARATOR = "-"
_UNSAFE_CHARS = re.compile(r"[^a-z0-9_-]+")
_REPEATED_SEPARATOR = re.compile(r"-{2,}")


def status_method_suffix(label: str) -> str:
    """状态标签转方法名后缀

    先转写为 ASCII 并转小写，非 [a-z0-9_-] 的连续字符替换为一个分隔符，
    去掉首尾分隔符后把 "-" 换成 "_"。结果可能为空字符串，由调用方判断。

    Examples:
        >>> status_method_suffix("Not Ready")
        'not_ready'
        >>> status_method_suffix("In-Progress")
        'in_progress'
        >>> status_method_suffix("Ünïcode")
        'unicode'
        >>> status_method_suffix("!!!")
        ''
    """
    text = unicodedata.normalize("NFKD", label).encode("ascii", "ignore").decode("ascii")
    text = _UNSAFE_CHARS.sub(_SEPARATOR, text.lower())
    text = _REPEATED_SEPARATOR.sub(_SEPARATOR, text)
    text = text.strip(_SEPARATOR)
    return text.replace(_SEPARATOR, "_")


def humanize_list(
    labels: Iterable[str],
    words_connector: str = ", ",
    two_words_connector: str = " or ",
    last_word_connector: str = ", or ",
) -> str:
    """标签列表转为可读文本

    Examples:
        >>> humanize_list([])
        ''
        >>> humanize_list(["Pending"])
        'Pending'
        >>> humanize_list(["Pending", "Running"])
        'Pending or Running'
        >>> humanize_list(["Pending", "Running", "Completed"])
        'Pending, Running, or Completed'
    """
    items = [str(label) for label in labels]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]}{two_words_connector}{items[1]}"
    return f"{words_connector.join(items[:-1])}{last_word_connector}{items[-1]}"


__all__ = [
    "status_method_suffix",
    "humanize_list",
]
