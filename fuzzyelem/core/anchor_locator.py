"""
锚点定位器

从源元素向上攀爬固定层数，得到一个粗粒度的结构位置，
再用该祖先的无索引路径在目标文档中找到对应元素，作为树搜索的起点。
"""

from typing import Optional, Tuple

from bs4 import BeautifulSoup, Tag

from fuzzyelem.core.path_builder import PathBuilder
from fuzzyelem.utils.logger import get_logger

logger = get_logger(__name__)


class AnchorLocator:
    """
    锚点定位器

    - 找到锚点: 返回目标文档中的元素
    - 找不到锚点: 返回 None，表示两份文档结构无关（不是错误）
    """

    def __init__(self, root_depth: int = 2):
        """
        Args:
            root_depth: 向上攀爬的祖先层数
        """
        self.root_depth = max(0, root_depth)

    def climb(self, element: Tag) -> Tag:
        """
        向上攀爬 root_depth 层，到达根元素时提前停止

        Returns:
            攀爬后的祖先元素
        """
        current = element
        for _ in range(self.root_depth):
            parent = current.parent
            if parent is None or isinstance(parent, BeautifulSoup):
                break
            current = parent
        return current

    def locate(self, source_element: Tag, target_document: Tag) -> Tuple[Optional[Tag], str]:
        """
        在目标文档中定位锚点

        Args:
            source_element: 源文档中的指定元素
            target_document: 目标文档

        Returns:
            (锚点元素或 None, 锚点的无索引路径)
        """
        ancestor = self.climb(source_element)
        anchor_path = PathBuilder.full_path(ancestor, with_index=False)

        anchor = PathBuilder.find_first(target_document, anchor_path)
        if anchor is None:
            logger.info(f"目标文档中未找到锚点: {anchor_path}")
        else:
            logger.debug(f"锚点: {anchor_path}")
        return anchor, anchor_path
