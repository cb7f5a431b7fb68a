"""
Nano Chunker - 递归文本分块工具

按分隔符优先级把长文本切分为不超过指定大小的文本块：
- RecursiveCharacterTextSplitter：段落 → 换行 → 空格 → 字符，逐级细分并贪心合并
- TokenTextSplitter：按tiktoken token窗口切分
- get_chunks：文档批量分块，生成带哈希ID的文本块记录
- 结果表格展示与CSV导出
"""

__version__ = "0.1.0"
__author__ = "Nano Chunker Team"

# 工具函数与日志
from ._utils import (
    logger,
    compute_mdhash_id,
    normalize_text,
)

# 异常
from .exceptions import (
    ChunkerError,
    ConfigurationError,
    MalformedPatternError,
    NonTerminatingSplitError,
)

# 核心分块模块
from .chunking import (
    DEFAULT_SEPARATORS,
    SplitterConfig,
    TextSplitter,
    RecursiveCharacterTextSplitter,
    TokenTextSplitter,
    split_text_with_regex,
    tiktoken_length_function,
    get_chunks,
)

# 展示与导出
from .presentation import (
    chunks_to_rows,
    chunks_to_dataframe,
    format_chunk_table,
    chunks_to_csv,
    export_chunks_as_csv,
)

# 配置管理
from .config import (
    load_config,
    save_config,
    create_config_from_template,
    validate_config,
    get_default_config,
    create_splitter_from_config,
)

__all__ = [
    # 版本信息
    "__version__",
    "__author__",

    # 异常
    "ChunkerError",
    "ConfigurationError",
    "MalformedPatternError",
    "NonTerminatingSplitError",

    # 核心分块
    "DEFAULT_SEPARATORS",
    "SplitterConfig",
    "TextSplitter",
    "RecursiveCharacterTextSplitter",
    "TokenTextSplitter",
    "split_text_with_regex",
    "tiktoken_length_function",
    "get_chunks",

    # 展示与导出
    "chunks_to_rows",
    "chunks_to_dataframe",
    "format_chunk_table",
    "chunks_to_csv",
    "export_chunks_as_csv",

    # 配置管理
    "load_config",
    "save_config",
    "create_config_from_template",
    "validate_config",
    "get_default_config",
    "create_splitter_from_config",

    # 工具函数
    "compute_mdhash_id",
    "normalize_text",
]

logger.debug(f"Nano Chunker v{__version__} loaded")
