"""
分块管理器

提供文档批量分块功能：把 {doc_id: {"content": ...}} 形式的文档切分为带哈希ID的文本块记录。
"""

import logging
from typing import Any, Dict, Optional

from .base import TextSplitter
from .splitter import RecursiveCharacterTextSplitter
from ..utils import compute_mdhash_id, timer

logger = logging.getLogger("nano-chunker")


@timer
def get_chunks(
    new_docs: Dict[str, Dict[str, Any]],
    splitter: Optional[TextSplitter] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    获取文档分块

    Args:
        new_docs: 新文档字典，格式为 {doc_id: {"content": "文档内容"}}
        splitter: 分割器，默认为None（使用默认配置的递归分割器）

    Returns:
        分块结果字典，格式为 {chunk_id: chunk_data}，chunk_data 包含
        content、length（按分割器的长度函数计算）、chunk_order_index、full_doc_id

    Example:
        >>> get_chunks({"doc-1": {"content": "hello world"}})
        {'chunk-5eb63bbbe01eeed093cb22bb8f5acdc3': {'content': 'hello world', 'length': 11, ...}}
    """
    if splitter is None:
        splitter = RecursiveCharacterTextSplitter()
    length_function = splitter.length_function

    inserting_chunks = {}
    for doc_key, doc in new_docs.items():
        chunks = splitter.split_text(doc["content"])
        for index, chunk in enumerate(chunks):
            inserting_chunks[compute_mdhash_id(chunk, prefix="chunk-")] = {
                "content": chunk,
                "length": length_function(chunk),
                "chunk_order_index": index,
                "full_doc_id": doc_key,
            }
        logger.debug(f"文档 {doc_key} 切分为 {len(chunks)} 个文本块")

    logger.info(f"{len(new_docs)} 个文档共生成 {len(inserting_chunks)} 个文本块")
    return inserting_chunks
