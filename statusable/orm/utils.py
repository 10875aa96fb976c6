"""命名转换：表名、复数列名（humanized_statuses_list）、错误消息里的字段名"""
import re


def to_snake_case(name: str) -> str:
    """类名转表名

    Examples:
        >>> to_snake_case("JobRun")
        'job_run'
        >>> to_snake_case("HTTPJob")
        'http_job'
    """
    # 连续大写缩写后接单词：HTTPJob -> HTTP_Job
    result = re.sub(r'([A-Z\d]+)([A-Z][a-z])', r'\1_\2', name)
    # 小写后接大写：jobRun -> job_Run
    result = re.sub(r'([a-z])([A-Z])', r'\1_\2', result)
    return result.lower()


def pluralize(name: str) -> str:
    """列名的英文复数

    Examples:
        >>> pluralize("status")
        'statuses'
        >>> pluralize("category")
        'categories'
        >>> pluralize("lifecycle_state")
        'lifecycle_states'
        >>> pluralize("stages")
        'stages'
    """
    if re.search(r'[^aeiou]y$', name):
        return name[:-1] + 'ies'
    if re.search(r'(ss|us|x|z|ch|sh)$', name):
        return name + 'es'
    if name.endswith('s'):
        return name
    return name + 's'


def humanize(name: str) -> str:
    """字段名转可读形式

    Examples:
        >>> humanize("lifecycle_state")
        'Lifecycle state'
        >>> humanize("status")
        'Status'
    """
    text = name.replace('_', ' ').strip()
    return text[:1].upper() + text[1:]


__all__ = [
    "to_snake_case",
    "pluralize",
    "humanize",
]
