"""
哈希工具模块

本模块提供哈希相关的工具函数，包括：
- 文本哈希ID生成（用于文本块ID）
"""

import hashlib


def compute_mdhash_id(text: str, prefix: str = "") -> str:
    """
    计算文本的MD5哈希ID

    Args:
        text: 输入文本
        prefix: ID前缀

    Returns:
        哈希ID

    Example:
        >>> compute_mdhash_id("hello world")
        '5eb63bbbe01eeed093cb22bb8f5acdc3'
        >>> compute_mdhash_id("hello world", "chunk-")
        'chunk-5eb63bbbe01eeed093cb22bb8f5acdc3'
    """
    hash_value = hashlib.md5(text.encode('utf-8')).hexdigest()
    return f"{prefix}{hash_value}" if prefix else hash_value
