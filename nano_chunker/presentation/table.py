"""
分块结果展示模块

把文本块列表转换为表格行（序号、长度、文本），用于控制台展示和导出。
"""

from typing import Any, Callable, Dict, List, Sequence

import pandas as pd

from ..utils import normalize_text, truncate_text

COLUMNS = ["Index", "Chunk Length", "Chunk Text"]


def chunks_to_rows(chunks: Sequence[str], length_function: Callable[[str], int] = len) -> List[Dict[str, Any]]:
    """
    把文本块列表转换为表格行

    Args:
        chunks: 文本块列表
        length_function: 长度计算函数

    Returns:
        行列表，每行包含 Index、Chunk Length、Chunk Text

    Example:
        >>> chunks_to_rows(["one two", "three"])
        [{'Index': 0, 'Chunk Length': 7, 'Chunk Text': 'one two'}, {'Index': 1, 'Chunk Length': 5, 'Chunk Text': 'three'}]
    """
    return [
        {"Index": index, "Chunk Length": length_function(chunk), "Chunk Text": chunk}
        for index, chunk in enumerate(chunks)
    ]


def chunks_to_dataframe(chunks: Sequence[str], length_function: Callable[[str], int] = len) -> pd.DataFrame:
    """把文本块列表转换为DataFrame，列顺序固定为 Index、Chunk Length、Chunk Text"""
    return pd.DataFrame(chunks_to_rows(chunks, length_function), columns=COLUMNS)


def format_chunk_table(
    chunks: Sequence[str],
    length_function: Callable[[str], int] = len,
    preview_width: int = 60,
) -> str:
    """
    生成控制台展示用的表格文本

    文本列会合并空白并截断到 preview_width，完整文本请使用CSV导出。

    Args:
        chunks: 文本块列表
        length_function: 长度计算函数
        preview_width: 文本预览宽度

    Returns:
        表格字符串，没有文本块时返回空字符串
    """
    if not chunks:
        return ""
    df = chunks_to_dataframe(chunks, length_function)
    df["Chunk Text"] = df["Chunk Text"].map(
        lambda text: truncate_text(normalize_text(text), preview_width)
    )
    return df.to_string(index=False)
