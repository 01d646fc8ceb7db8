"""
fuzzyelem 配置中心

集中管理所有可调参数（搜索深度、相似度阈值、评分权重、解析器），
避免硬编码散落在各模块中。支持从环境变量读取配置。

用法:
    from fuzzyelem.config import search_config, scoring_config

    # 访问配置
    depth = search_config.max_depth_from_root
    weight = scoring_config.text_weight

    # 显式传入搜索入口（测试中可使用独立实例）
    search(element_id, source, target, config=SearchConfig(root_depth=1))
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """
    搜索配置

    控制锚点定位与并发树搜索的剪枝参数。
    """
    root_depth: int = 2                     # 从源元素向上攀爬的祖先层数
    max_depth_from_root: int = 4            # 相对锚点的最大搜索深度
    possible_similarity_threshold: int = 3  # 高于此分数才成为候选
    certain_similarity_threshold: int = 6   # 高于此分数不再向下搜索
    max_workers: Optional[int] = None       # 线程池大小，None 表示 CPU 核数

    @property
    def worker_count(self) -> int:
        """实际使用的线程数"""
        if self.max_workers and self.max_workers > 0:
            return self.max_workers
        return os.cpu_count() or 1


@dataclass
class ScoringConfig:
    """
    评分配置

    精确匹配各字段时累加的分值。
    """
    max_score: int = 10     # id 精确匹配直接返回的分数
    text_weight: int = 5    # 文本一致
    class_weight: int = 3   # class 一致
    href_weight: int = 1    # href 一致
    title_weight: int = 1   # title 一致


@dataclass
class ParserConfig:
    """
    解析器配置

    控制 HTML 文档的加载方式。
    """
    parser: str = "lxml"            # BeautifulSoup 解析器名称
    encoding: Optional[str] = None  # 强制编码，None 表示自动探测


@dataclass
class CLIConfig:
    """命令行默认值"""
    default_element_id: str = "make-everything-ok-button"


def _get_env_int(key: str, default: Optional[int]) -> Optional[int]:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_str(key: str, default: str) -> str:
    """从环境变量获取字符串配置"""
    value = os.environ.get(key)
    if value and value.strip():
        return value.strip()
    return default


def _load_search_config() -> SearchConfig:
    return SearchConfig(
        root_depth=_get_env_int('FUZZYELEM_ROOT_DEPTH', 2),
        max_depth_from_root=_get_env_int('FUZZYELEM_MAX_DEPTH', 4),
        possible_similarity_threshold=_get_env_int('FUZZYELEM_POSSIBLE_THRESHOLD', 3),
        certain_similarity_threshold=_get_env_int('FUZZYELEM_CERTAIN_THRESHOLD', 6),
        max_workers=_get_env_int('FUZZYELEM_MAX_WORKERS', None),
    )


def _load_parser_config() -> ParserConfig:
    return ParserConfig(
        parser=_get_env_str('FUZZYELEM_PARSER', 'lxml'),
    )


# ============================================================
# 全局配置实例
# ============================================================

# 搜索配置
search_config = _load_search_config()

# 评分配置
scoring_config = ScoringConfig()

# 解析器配置
parser_config = _load_parser_config()

# 命令行配置
cli_config = CLIConfig()


# ============================================================
# 便捷函数
# ============================================================

def reload_config():
    """
    重新加载配置

    从环境变量重新读取配置。
    """
    global search_config, parser_config

    search_config = _load_search_config()
    parser_config = _load_parser_config()
