"""
搜索结果相关数据模型

包含:
- ScoredCandidate: 单个被访问节点的候选记录
- SearchResult: 一次搜索的最终结果
"""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class ScoredCandidate:
    """候选元素（带索引路径 + 分数）"""
    path: str       # 带兄弟索引的完整路径
    score: int      # 相似度分数
    depth: int = 0  # 相对锚点的深度


@dataclass
class SearchResult:
    """搜索结果"""
    path: str = ""                      # 最佳候选路径，空字符串表示未找到
    score: int = 0                      # 最佳候选分数
    visited: int = 0                    # 已评分的节点数
    candidates: int = 0                 # 超过候选阈值的节点数
    anchor_path: Optional[str] = None   # 锚点的无索引路径

    @property
    def found(self) -> bool:
        """是否找到相似元素"""
        return self.path != ""

    @classmethod
    def empty(cls, anchor_path: Optional[str] = None) -> 'SearchResult':
        return cls(anchor_path=anchor_path)

    def to_dict(self) -> dict:
        return asdict(self)
