"""
基于token大小的分割器

提供基于tiktoken token数量的分割功能：
- TokenTextSplitter: 按固定token窗口切分文本，支持重叠
- tiktoken_length_function: 按token计数的长度函数，可用于 SplitterConfig.length_function
"""

import logging
from typing import Callable, List, Optional

import tiktoken

from .base import SplitterConfig, TextSplitter
from ..exceptions import ConfigurationError

logger = logging.getLogger("nano-chunker")


def get_tiktoken_encoding(model_name: str = "gpt-4o", encoding_name: str = "cl100k_base"):
    """
    获取tiktoken编码器

    Args:
        model_name: 模型名称，优先按模型查找编码
        encoding_name: 模型名称未知时使用的编码名称

    Returns:
        tiktoken编码器实例
    """
    try:
        return tiktoken.encoding_for_model(model_name)
    except KeyError:
        logger.warning(f"tiktoken 不认识模型 {model_name}，改用编码 {encoding_name}")
        return tiktoken.get_encoding(encoding_name)


def tiktoken_length_function(model_name: str = "gpt-4o", encoding=None) -> Callable[[str], int]:
    """
    创建按token计数的长度函数

    Args:
        model_name: 模型名称，用于选择编码
        encoding: 已有的编码器（任何带 encode 方法的对象），为None时按模型名称获取

    Returns:
        长度函数 text -> token数量

    Example:
        >>> config = SplitterConfig(chunk_size=512, length_function=tiktoken_length_function())
    """
    if encoding is None:
        encoding = get_tiktoken_encoding(model_name)

    def _token_length(text: str) -> int:
        return len(encoding.encode(text))

    return _token_length


class TokenTextSplitter(TextSplitter):
    """
    token窗口分割器

    把文本编码为token后，按 chunk_size 个token一个窗口切分，窗口之间重叠
    chunk_overlap 个token。块大小和文本块长度都以token计，配置中的 length_function 不起作用。
    """

    def __init__(
        self,
        config: Optional[SplitterConfig] = None,
        chunk_overlap: int = 0,
        model_name: str = "gpt-4o",
        encoding_name: str = "cl100k_base",
        encoding=None,
        **overrides,
    ):
        """
        初始化分割器

        Args:
            config: 分割配置
            chunk_overlap: 相邻块之间重叠的token数量，必须小于 chunk_size
            model_name: tiktoken模型名称
            encoding_name: 模型名称未知时使用的编码名称
            encoding: 直接指定编码器（带 encode/decode 方法的对象）
            **overrides: 配置字段
        """
        super().__init__(config, **overrides)
        if isinstance(chunk_overlap, bool) or not isinstance(chunk_overlap, int):
            raise ConfigurationError("chunk_overlap 必须是整数", field="chunk_overlap")
        if not 0 <= chunk_overlap < self._chunk_size:
            raise ConfigurationError(
                f"chunk_overlap 必须满足 0 <= chunk_overlap < chunk_size，"
                f"实际为 {chunk_overlap} / {self._chunk_size}",
                field="chunk_overlap",
            )
        self._chunk_overlap = chunk_overlap
        self._encoding = encoding if encoding is not None else get_tiktoken_encoding(model_name, encoding_name)
        # 文本块长度以token计
        self._length_function = tiktoken_length_function(encoding=self._encoding)

    def split_text(self, text: str) -> List[str]:
        """
        按token窗口分割文本

        Args:
            text: 要分割的文本

        Returns:
            解码后去除首尾空白的非空文本块列表
        """
        tokens = self._encoding.encode(text)
        step = self._chunk_size - self._chunk_overlap

        chunks = []
        for start in range(0, len(tokens), step):
            window = tokens[start:start + self._chunk_size]
            chunk = self._join_docs([self._encoding.decode(window)], "")
            if chunk is not None:
                chunks.append(chunk)
            # 最后一个窗口已经覆盖到结尾，后面的窗口只会是重叠部分
            if start + self._chunk_size >= len(tokens):
                break
        return chunks
