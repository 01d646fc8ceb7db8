"""
Utils 模块初始化文件
"""

from .logger import (
    ElemLogger,
    get_logger,
    setup_logging,
)

__all__ = [
    'ElemLogger',
    'get_logger',
    'setup_logging',
]
