"""
工具函数包

- hash_utils: 文本哈希ID
- text_processing: 文本规范化、截断预览
- decorators: 计时装饰器
"""

# 哈希功能
from .hash_utils import (
    compute_mdhash_id
)

# 文本处理功能
from .text_processing import (
    normalize_text,
    truncate_text
)

# 装饰器功能
from .decorators import (
    timer
)

__all__ = [
    # 哈希
    'compute_mdhash_id',

    # 文本处理
    'normalize_text',
    'truncate_text',

    # 装饰器
    'timer'
]
