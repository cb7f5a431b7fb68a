"""
文本分块模块

提供多种文本分块策略：
- 基于分隔符优先级的递归分块
- 基于token窗口的分块
- 文档批量分块管理
"""

# 配置与接口
from .base import DEFAULT_SEPARATORS, SplitterConfig, TextSplitter

# 分块策略
from .splitter import RecursiveCharacterTextSplitter, split_text_with_regex
from .token_chunker import TokenTextSplitter, get_tiktoken_encoding, tiktoken_length_function

# 主要分块函数
from .chunk_manager import get_chunks

__all__ = [
    # 配置与接口
    "DEFAULT_SEPARATORS",
    "SplitterConfig",
    "TextSplitter",

    # 分块策略
    "RecursiveCharacterTextSplitter",
    "split_text_with_regex",
    "TokenTextSplitter",
    "get_tiktoken_encoding",
    "tiktoken_length_function",

    # 主要函数
    "get_chunks",
]
