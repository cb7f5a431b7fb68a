"""
工具函数模块

日志配置集中在这里，其余工具函数位于 utils 包中：
- utils.hash_utils: 哈希ID计算
- utils.text_processing: 文本规范化与预览
- utils.decorators: 装饰器

为了方便使用，这里统一重新导出。
"""

# 配置日志
import logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# 创建日志记录器
logger = logging.getLogger("nano-chunker")

from nano_chunker.utils import (
    # 哈希
    compute_mdhash_id,

    # 文本处理
    normalize_text,
    truncate_text,

    # 装饰器
    timer,
)

__all__ = [
    'logger',

    # 哈希
    'compute_mdhash_id',

    # 文本处理
    'normalize_text',
    'truncate_text',

    # 装饰器
    'timer',
]
