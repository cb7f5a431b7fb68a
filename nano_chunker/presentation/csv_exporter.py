"""
CSV导出模块

每个文本块导出为一行：序号、长度、文本。文本中的双引号按CSV规则写成两个双引号。
"""

import os
import logging
from typing import Callable, Sequence

from .table import chunks_to_dataframe

logger = logging.getLogger("nano-chunker")


def chunks_to_csv(chunks: Sequence[str], length_function: Callable[[str], int] = len) -> str:
    """
    把文本块列表序列化为CSV文本

    Args:
        chunks: 文本块列表
        length_function: 长度计算函数

    Returns:
        CSV文本，表头为 Index,Chunk Length,Chunk Text

    Example:
        >>> chunks_to_csv(["one two", "three"])
        'Index,Chunk Length,Chunk Text\\n0,7,one two\\n1,5,three\\n'
    """
    df = chunks_to_dataframe(chunks, length_function)
    return df.to_csv(index=False, lineterminator="\n")


def export_chunks_as_csv(
    chunks: Sequence[str],
    output_path: str = "chunks.csv",
    length_function: Callable[[str], int] = len,
) -> str:
    """
    导出文本块为CSV文件

    Args:
        chunks: 文本块列表
        output_path: 输出文件路径
        length_function: 长度计算函数

    Returns:
        输出文件路径
    """
    # 确保目录存在
    os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)

    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(chunks_to_csv(chunks, length_function))

    logger.info(f"已导出 {len(chunks)} 个文本块到 {output_path}")
    return output_path
