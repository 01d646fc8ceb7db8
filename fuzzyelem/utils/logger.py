"""
fuzzyelem 日志系统

提供统一的日志接口，支持:
- 标准 Python logging 模块
- success 级别
- 文件日志输出

日志统一输出到 stderr，stdout 只保留搜索结果路径。

用法:
    from fuzzyelem.utils.logger import get_logger, setup_logging

    # 初始化日志系统（命令行启动时调用）
    setup_logging()

    # 获取模块日志器
    logger = get_logger(__name__)
    logger.info("开始搜索")
    logger.success("找到相似元素")

    if logger.is_enabled_for(logging.DEBUG):
        logger.debug(f"指纹: {fingerprint.to_dict()}")
"""

import logging
import sys
from typing import Optional
from pathlib import Path


# 日志格式
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s - %(message)s"
TIME_FORMAT = "%H:%M:%S"


class ElemLogger:
    """
    fuzzyelem 日志封装

    在标准 logging 基础上增加:
    - success 级别（介于 info 和 warning 之间）
    - 简化的 API
    """

    # 自定义 success 级别（25，介于 INFO=20 和 WARNING=30 之间）
    SUCCESS_LEVEL = 25

    def __init__(self, name: str):
        """
        Args:
            name: 日志器名称（通常为 __name__）
        """
        self.logger = logging.getLogger(name)

        # 注册 success 级别
        if logging.getLevelName(self.SUCCESS_LEVEL) != 'SUCCESS':
            logging.addLevelName(self.SUCCESS_LEVEL, 'SUCCESS')

    def is_enabled_for(self, level: int) -> bool:
        """是否会输出该级别（用于跳过昂贵的消息拼接）"""
        return self.logger.isEnabledFor(level)

    def debug(self, message: str):
        """调试级别日志"""
        self.logger.debug(message)

    def info(self, message: str):
        """信息级别日志"""
        self.logger.info(message)

    def success(self, message: str):
        """成功级别日志（带 ✅ 前缀）"""
        self.logger.log(self.SUCCESS_LEVEL, f"✅ {message}")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT
):
    """
    初始化日志系统

    Args:
        level: 日志级别
        log_file: 日志文件路径（可选）
        format_string: 日志格式
    """
    handlers = [logging.StreamHandler(sys.stderr)]

    # 文件日志
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt=TIME_FORMAT,
        handlers=handlers,
        force=True
    )

    # 降低第三方库日志级别
    logging.getLogger('bs4').setLevel(logging.WARNING)


def get_logger(name: str) -> ElemLogger:
    """
    获取 fuzzyelem 日志器

    Args:
        name: 日志器名称（通常为 __name__）

    Returns:
        ElemLogger 实例
    """
    return ElemLogger(name)

