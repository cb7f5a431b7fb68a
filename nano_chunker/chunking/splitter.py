"""
递归分割器模块

按分隔符优先级递归分割文本：先用最粗的分隔符（段落）分割，过长的片段再用更细的
分隔符（换行、空格、字符）继续分割，最后把相邻的小片段合并成尽可能大的文本块。
"""

import re
import logging
from typing import Dict, List, Optional, Sequence

from .base import SplitterConfig, TextSplitter
from ..exceptions import MalformedPatternError, NonTerminatingSplitError

logger = logging.getLogger("nano-chunker")


def split_text_with_regex(text: str, separator: str, keep_separator: bool) -> List[str]:
    """
    按正则表达式分割文本

    Args:
        text: 要分割的文本
        separator: 正则表达式，空字符串表示按字符分割
        keep_separator: 是否保留分隔符，保留时分隔符放在其后一个片段的开头

    Returns:
        去除空片段后的片段列表

    Example:
        >>> split_text_with_regex("a b c", " ", False)
        ['a', 'b', 'c']
        >>> split_text_with_regex("a b c", " ", True)
        ['a', ' b', ' c']
    """
    if not separator:
        return list(text)

    # 用 finditer 而不是 re.split，分隔符自带的捕获组不会混入结果
    splits = []
    start = 0
    for match in re.finditer(separator, text):
        splits.append(text[start:match.start()])
        start = match.start() if keep_separator else match.end()
    splits.append(text[start:])
    return [s for s in splits if s]


class RecursiveCharacterTextSplitter(TextSplitter):
    """
    递归字符分割器

    分隔符的优先级完全由其在列表中的位置决定，第一个在文本中出现的分隔符胜出。

    Example:
        >>> splitter = RecursiveCharacterTextSplitter(chunk_size=7, separators=[" ", ""])
        >>> splitter.split_text("one two three")
        ['one two', 'three']
    """

    def __init__(self, config: Optional[SplitterConfig] = None, **overrides):
        super().__init__(config, **overrides)
        self._keep_separator = self._config.keep_separator
        self._is_separator_regex = self._config.is_separator_regex

        separators = list(self._config.separators)
        if separators[-1] != "":
            if self._config.strict_separators:
                raise NonTerminatingSplitError(separators)
            logger.warning(f"分隔符列表没有以 \"\" 结尾，已自动补充按字符分割: {separators!r}")
            separators.append("")
        self._separators = separators

        if self._is_separator_regex and not self._keep_separator:
            logger.warning(
                "is_separator_regex=True 且 keep_separator=False 时，合并片段会用正则表达式原文连接，"
                "文本块中可能出现原文没有的字符，建议同时设置 keep_separator=True"
            )

        # 已编译的分隔符正则，key 为转义后的模式
        self._patterns: Dict[str, re.Pattern] = {}

    @property
    def separators(self) -> List[str]:
        """实际使用的分隔符列表（可能比配置多一个结尾的 ""）"""
        return list(self._separators)

    def split_text(self, text: str) -> List[str]:
        """
        分割文本

        Args:
            text: 要分割的文本

        Returns:
            有序的文本块列表，每个块都已去除首尾空白且非空
        """
        return self._split_text(text, self._separators)

    def _split_text(self, text: str, separators: Sequence[str]) -> List[str]:
        final_chunks = []
        index = self._get_separator_index(text, separators)
        separator = separators[index]
        logger.debug(f"选择分隔符 {separator!r}，文本长度 {len(text)}")

        final_separator = "" if self._keep_separator else separator
        splits = split_text_with_regex(text, self._pattern_source(separator), self._keep_separator)
        new_separators = separators[index + 1:]

        good_splits = []
        for s in splits:
            if self._length_function(s) < self._chunk_size:
                good_splits.append(s)
                continue

            if good_splits:
                final_chunks.extend(self._merge_splits(good_splits, final_separator))
                good_splits = []

            if new_separators:
                final_chunks.extend(self._split_text(s, new_separators))
            else:
                # 没有更细的分隔符了，片段原样输出
                _len = self._length_function(s)
                if _len > self._chunk_size:
                    logger.warning(
                        f"片段长度 {_len} 超过块大小 {self._chunk_size}，"
                        f"且没有更细的分隔符可用，将作为超长文本块输出"
                    )
                chunk = self._join_docs([s], "")
                if chunk is not None:
                    final_chunks.append(chunk)

        if good_splits:
            final_chunks.extend(self._merge_splits(good_splits, final_separator))
        return final_chunks

    def _get_separator_index(self, text: str, separators: Sequence[str]) -> int:
        """返回第一个在文本中出现的分隔符的下标，都不出现时返回最后一个的下标"""
        for i, sep in enumerate(separators):
            if sep == "" or self._compile(sep).search(text):
                return i
        return len(separators) - 1

    def _pattern_source(self, separator: str) -> str:
        return separator if self._is_separator_regex else re.escape(separator)

    def _compile(self, separator: str) -> re.Pattern:
        source = self._pattern_source(separator)
        pattern = self._patterns.get(source)
        if pattern is None:
            try:
                pattern = re.compile(source)
            except re.error as e:
                raise MalformedPatternError(separator, str(e)) from e
            self._patterns[source] = pattern
        return pattern
