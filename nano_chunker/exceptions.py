"""
异常定义模块

分块过程中可能出现的错误都是调用方的输入或配置错误，不存在需要重试的瞬时错误：
- ChunkerError: 所有分块相关异常的基类
- ConfigurationError: 配置非法（块大小、分隔符、长度函数等）
- MalformedPatternError: 分隔符在正则模式下无法编译
- NonTerminatingSplitError: 分隔符列表缺少通用的终止分隔符 ""
"""

from typing import Optional


class ChunkerError(Exception):
    """分块相关异常的基类"""


class ConfigurationError(ChunkerError, ValueError):
    """
    配置错误

    在构造配置或分割器时立即抛出，此时尚未进行任何分割工作。
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MalformedPatternError(ChunkerError, ValueError):
    """分隔符不是合法的正则表达式（仅在 is_separator_regex=True 时出现）"""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"非法的分隔符正则表达式 {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class NonTerminatingSplitError(ConfigurationError):
    """严格模式下，分隔符列表没有以 "" 结尾，无法保证递归分割终止"""

    def __init__(self, separators):
        super().__init__(
            f"分隔符列表必须以空字符串 \"\" 结尾才能保证分割终止: {list(separators)!r}",
            field="separators",
        )
        self.separators = tuple(separators)


__all__ = [
    "ChunkerError",
    "ConfigurationError",
    "MalformedPatternError",
    "NonTerminatingSplitError",
]
