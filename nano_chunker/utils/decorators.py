"""
装饰器工具模块

本模块提供通用装饰器：
- 函数执行计时
"""

import time
import logging
import functools
from typing import Callable, Any

# 创建日志记录器
logger = logging.getLogger("nano-chunker")


def timer(func: Callable) -> Callable:
    """
    函数执行计时装饰器

    Args:
        func: 要计时的函数

    Returns:
        包装后的函数

    Example:
        @timer
        def get_chunks(new_docs):
            # 函数执行时会自动记录耗时
            pass
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()
        logger.info(f"函数 {func.__name__} 执行耗时: {end_time - start_time:.4f}秒")
        return result
    return wrapper
