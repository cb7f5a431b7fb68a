"""
分割器基础模块

提供所有分割策略共用的部分：
- SplitterConfig: 不可变的分割配置，构造时一次性校验
- TextSplitter: 分割策略接口，包含把小片段贪心合并为文本块的逻辑
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence, Tuple

from ..exceptions import ConfigurationError

logger = logging.getLogger("nano-chunker")

DEFAULT_SEPARATORS: Tuple[str, ...] = ("\n\n", "\n", " ", "")


@dataclass(frozen=True)
class SplitterConfig:
    """
    分割配置

    Attributes:
        chunk_size: 块大小上限（单位由 length_function 决定），必须为正整数
        length_function: 长度计算函数，默认为字符数
        keep_separator: 是否保留分隔符（附着在其后一个片段的开头）
        separators: 分隔符列表，从粗到细排列；"" 表示按字符分割
        is_separator_regex: 分隔符是否已经是正则表达式（否则使用前会转义）。
            不保留分隔符时，合并片段用的是正则表达式原文，应配合 keep_separator=True 使用
        strict_separators: 分隔符列表不以 "" 结尾时是否直接报错（否则自动补上 ""）
    """
    chunk_size: int = 4000
    length_function: Callable[[str], int] = len
    keep_separator: bool = False
    separators: Sequence[str] = DEFAULT_SEPARATORS
    is_separator_regex: bool = False
    strict_separators: bool = False

    def __post_init__(self):
        """校验配置，分隔符统一保存为元组"""
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int):
            raise ConfigurationError(
                f"chunk_size 必须是整数，实际为 {type(self.chunk_size).__name__}",
                field="chunk_size",
            )
        if self.chunk_size <= 0:
            raise ConfigurationError(
                f"chunk_size 必须为正整数，实际为 {self.chunk_size}", field="chunk_size"
            )
        if not callable(self.length_function):
            raise ConfigurationError("length_function 必须是可调用对象", field="length_function")

        if isinstance(self.separators, str):
            raise ConfigurationError("separators 必须是字符串列表，而不是单个字符串", field="separators")
        separators = tuple(self.separators)
        if not separators:
            raise ConfigurationError("separators 不能为空", field="separators")
        for sep in separators:
            if not isinstance(sep, str):
                raise ConfigurationError(
                    f"分隔符必须是字符串，实际为 {sep!r}", field="separators"
                )
        # frozen dataclass 只能通过 object.__setattr__ 修改
        object.__setattr__(self, "separators", separators)


class TextSplitter(ABC):
    """
    文本分割器接口

    子类实现 split_text；基类负责持有配置，并提供片段合并逻辑。
    """

    def __init__(self, config: Optional[SplitterConfig] = None, **overrides):
        """
        初始化分割器

        Args:
            config: 分割配置，为None时使用默认配置
            **overrides: 配置字段，用于在 config 基础上覆盖或直接构造配置

        Example:
            >>> splitter = RecursiveCharacterTextSplitter(chunk_size=1000)
            >>> splitter = RecursiveCharacterTextSplitter(SplitterConfig(chunk_size=1000))
        """
        if config is None:
            config = SplitterConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self._config = config
        self._chunk_size = config.chunk_size
        self._length_function = config.length_function

    @property
    def config(self) -> SplitterConfig:
        return self._config

    @property
    def length_function(self) -> Callable[[str], int]:
        """分割器衡量文本块长度所用的函数"""
        return self._length_function

    @abstractmethod
    def split_text(self, text: str) -> List[str]:
        """把文本分割为有序的文本块列表"""

    def _join_docs(self, docs: List[str], separator: str) -> Optional[str]:
        """用分隔符连接片段并去除首尾空白，结果为空时返回None"""
        text = separator.join(docs).strip()
        return text or None

    def _merge_splits(self, splits: Sequence[str], separator: str) -> List[str]:
        """
        把片段贪心合并为不超过 chunk_size 的文本块

        片段之间按顺序合并，不会在片段内部切分；单个超长片段单独成块。

        Args:
            splits: 有序片段列表
            separator: 连接片段使用的分隔符

        Returns:
            合并后的文本块列表

        Example:
            >>> splitter = RecursiveCharacterTextSplitter(chunk_size=7)
            >>> splitter._merge_splits(["one", "two", "three"], " ")
            ['one two', 'three']
        """
        separator_len = self._length_function(separator)

        docs = []
        current_doc: List[str] = []
        total = 0
        for d in splits:
            _len = self._length_function(d)
            if current_doc and total + _len + separator_len > self._chunk_size:
                self._append_doc(docs, current_doc, separator, total)
                current_doc = []
                total = 0
            current_doc.append(d)
            total += _len + (separator_len if len(current_doc) > 1 else 0)

        if current_doc:
            self._append_doc(docs, current_doc, separator, total)
        return docs

    def _append_doc(self, docs: List[str], current_doc: List[str], separator: str, total: int) -> None:
        if total > self._chunk_size:
            logger.warning(
                f"生成了长度为 {total} 的文本块，超过了设定的块大小 {self._chunk_size}"
            )
        doc = self._join_docs(current_doc, separator)
        if doc is not None:
            docs.append(doc)
