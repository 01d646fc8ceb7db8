"""
相似元素查找入口

串联整个流程:
1. 校验 id
2. 在源文档中提取指纹
3. 在目标文档中定位锚点
4. 从锚点并发搜索，取最高分候选

使用示例:
    from fuzzyelem import search, search_files

    path = search("make-everything-ok-button", source_doc, target_doc)
    path = search_files("make-everything-ok-button", "origin.html", "diff.html")
"""

import logging
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup

from fuzzyelem import config as settings
from fuzzyelem.config import ParserConfig, ScoringConfig, SearchConfig
from fuzzyelem.core.anchor_locator import AnchorLocator
from fuzzyelem.core.element_scorer import ElementScorer
from fuzzyelem.core.fingerprint_extractor import extract_fingerprint
from fuzzyelem.core.tree_search import TreeSearch
from fuzzyelem.domain.entities import SearchResult
from fuzzyelem.domain.errors import InvalidInputError
from fuzzyelem.infrastructure.html import DocumentLoader
from fuzzyelem.utils.logger import get_logger

logger = get_logger(__name__)


class SimilarElementFinder:
    """
    相似元素查找器 (Facade 门面类)

    所有调参都通过构造参数显式传入，便于在测试中使用不同参数。
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        scoring: Optional[ScoringConfig] = None
    ):
        self.config = config or settings.search_config
        self.scoring = scoring

    def find(self, element_id: str, source: BeautifulSoup, target: BeautifulSoup) -> SearchResult:
        """
        在目标文档中查找与源元素最相似的元素

        Args:
            element_id: 源元素 id
            source: 源文档
            target: 目标文档

        Returns:
            SearchResult，未找到时 path 为空字符串

        Raises:
            InvalidInputError: id 为空
            ElementNotFoundError: 源文档中没有该 id
        """
        _require_id(element_id)

        source_element, fingerprint = extract_fingerprint(source, element_id)
        if logger.is_enabled_for(logging.DEBUG):
            logger.debug(f"源指纹: {fingerprint.to_dict()}")

        anchor, anchor_path = AnchorLocator(self.config.root_depth).locate(source_element, target)
        if anchor is None:
            return SearchResult.empty(anchor_path=anchor_path)

        scorer = ElementScorer(fingerprint, self.scoring)
        result = TreeSearch(scorer, self.config).run(anchor)
        result.anchor_path = anchor_path

        if result.found:
            logger.success(f"{result.path} (分数:{result.score})")
        else:
            logger.info(f"未找到相似元素 (访问 {result.visited} 个节点)")
        return result


def _require_id(element_id: str):
    if not element_id:
        raise InvalidInputError("empty id")


def find_similar(
    element_id: str,
    source: BeautifulSoup,
    target: BeautifulSoup,
    config: Optional[SearchConfig] = None,
    scoring: Optional[ScoringConfig] = None
) -> SearchResult:
    """查找相似元素，返回完整结果（路径、分数、访问数）"""
    return SimilarElementFinder(config, scoring).find(element_id, source, target)


def search(
    element_id: str,
    source: BeautifulSoup,
    target: BeautifulSoup,
    config: Optional[SearchConfig] = None,
    scoring: Optional[ScoringConfig] = None
) -> str:
    """
    查找相似元素

    Returns:
        最佳元素的带索引路径，未找到返回空字符串
    """
    return find_similar(element_id, source, target, config, scoring).path


def search_files(
    element_id: str,
    source_path: Union[str, Path],
    target_path: Union[str, Path],
    config: Optional[SearchConfig] = None,
    scoring: Optional[ScoringConfig] = None,
    parser: Optional[ParserConfig] = None
) -> str:
    """
    读取两个 HTML 文件并查找相似元素

    id 与两个路径都在读取任何文件之前校验。

    Raises:
        InvalidInputError: id 或文件路径为空
        DocumentIOError: 文件无法读取
        DocumentParseError: 文件无法解析
        ElementNotFoundError: 源文档中没有该 id
    """
    _require_id(element_id)
    if not source_path:
        raise InvalidInputError("source file path is missing")
    if not target_path:
        raise InvalidInputError("target file path is missing")

    loader = DocumentLoader(parser)
    source = loader.load(source_path, "source")
    target = loader.load(target_path, "target")
    return search(element_id, source, target, config, scoring)
