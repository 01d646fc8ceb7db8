"""
路径构建器 - 为元素生成 CSS 风格的层级路径

路径由各层选择器片段以 " > " 连接，从文档根元素开始:
    html > body > div#main > div.btn.primary[1]

两种形式:
- 无索引路径: 合法的 CSS 选择器，用于在另一份文档中重新定位（取第一个匹配）
- 带索引路径: 在同名兄弟中追加 [index]，用于报告唯一结果
"""

from typing import List, Optional, Tuple

import soupsieve
from bs4 import BeautifulSoup, Tag

from fuzzyelem.domain.entities import get_attribute_text, get_class_tokens
from fuzzyelem.domain.errors import InvalidInputError

PATH_SEPARATOR = " > "


class PathBuilder:
    """
    元素路径构建器

    所有方法均为纯函数，不修改文档。
    """

    @staticmethod
    def selector(element: Tag, with_index: bool = False) -> str:
        """
        生成单层选择器片段

        格式: tag[#id][.class1.class2][[index]]

        Args:
            element: 目标元素
            with_index: 是否在存在同片段兄弟时追加索引

        Returns:
            选择器片段
        """
        segment = PathBuilder._segment(element)
        if not with_index:
            return segment

        index, count = PathBuilder._sibling_position(element, segment)
        if count > 1:
            segment = f"{segment}[{index}]"
        return segment

    @staticmethod
    def full_path(element: Tag, with_index: bool = False) -> str:
        """
        生成从根元素到当前元素的完整路径

        Args:
            element: 目标元素
            with_index: 是否为每一层追加兄弟索引

        Returns:
            " > " 连接的路径，最老的祖先在前
        """
        chain = [element]
        chain.extend(
            parent for parent in element.parents
            if not isinstance(parent, BeautifulSoup)
        )
        chain.reverse()
        return PATH_SEPARATOR.join(
            PathBuilder.selector(node, with_index) for node in chain
        )

    @staticmethod
    def find_first(document: Tag, path: str) -> Optional[Tag]:
        """
        在文档中查找第一个匹配无索引路径的元素

        Args:
            document: 被搜索的文档（或子树）
            path: full_path(..., with_index=False) 生成的路径

        Returns:
            第一个匹配的元素，未找到返回 None

        Raises:
            InvalidInputError: 路径不是合法的选择器
        """
        if not path:
            return None
        try:
            return document.select_one(path)
        except soupsieve.SelectorSyntaxError as e:
            raise InvalidInputError(f"invalid path '{path}': {e}") from e

    @staticmethod
    def _segment(element: Tag) -> str:
        """tag + #id + .class 片段（不含索引）"""
        parts = [soupsieve.escape(element.name)]

        element_id = get_attribute_text(element, 'id')
        if element_id:
            parts.append(f"#{soupsieve.escape(element_id)}")

        classes = get_class_tokens(element)
        if classes:
            parts.append('.' + '.'.join(soupsieve.escape(c) for c in classes))

        return ''.join(parts)

    @staticmethod
    def _sibling_position(element: Tag, segment: str) -> Tuple[int, int]:
        """
        计算元素在同片段兄弟中的位置

        Returns:
            (index, count): 从 0 开始的位置，以及同片段兄弟总数（含自身）
        """
        parent = element.parent
        if parent is None:
            return 0, 1

        siblings: List[Tag] = [
            child for child in parent.children
            if isinstance(child, Tag) and PathBuilder._segment(child) == segment
        ]

        index = 0
        for position, sibling in enumerate(siblings):
            # Tag 的 == 比较结构，这里必须按身份比较
            if sibling is element:
                index = position
                break
        return index, len(siblings)
