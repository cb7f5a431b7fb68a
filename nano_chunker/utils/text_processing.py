"""
文本处理工具模块

本模块提供展示分块结果时用到的文本处理函数：
- 文本规范化（合并空白）
- 按宽度截断预览
"""

import re


def normalize_text(text: str) -> str:
    """
    规范化文本，将连续空白合并为单个空格并去除首尾空白

    Args:
        text: 输入文本

    Returns:
        规范化后的文本

    Example:
        >>> normalize_text("  hello \\n\\n  world  ")
        'hello world'
    """
    if not text:
        return ""

    # 替换多个空白为单个空格
    text = re.sub(r'\s+', ' ', text)

    return text.strip()


def truncate_text(text: str, max_width: int, ellipsis: str = "...") -> str:
    """
    截断文本到指定宽度，超出部分用省略号代替

    Args:
        text: 输入文本
        max_width: 最大宽度（字符数），包含省略号
        ellipsis: 省略号

    Returns:
        截断后的文本

    Example:
        >>> truncate_text("hello world", 8)
        'hello...'
    """
    if max_width <= 0:
        return ""
    if len(text) <= max_width:
        return text
    if max_width <= len(ellipsis):
        return text[:max_width]
    return text[:max_width - len(ellipsis)] + ellipsis
