"""
指纹提取 - 在源文档中按 id 定位元素并生成指纹
"""

from typing import Tuple

from bs4 import BeautifulSoup, Tag

from fuzzyelem.domain.entities import ElementFingerprint
from fuzzyelem.domain.errors import ElementNotFoundError


def find_source_element(document: BeautifulSoup, element_id: str) -> Tag:
    """
    按 id 查找源元素

    Raises:
        ElementNotFoundError: 源文档中不存在该 id
    """
    element = document.find(id=element_id)
    if element is None:
        raise ElementNotFoundError(element_id, side="source")
    return element


def extract_fingerprint(document: BeautifulSoup, element_id: str) -> Tuple[Tag, ElementFingerprint]:
    """
    定位源元素并提取指纹

    Args:
        document: 源文档
        element_id: 源元素 id

    Returns:
        (源元素, 指纹)
    """
    element = find_source_element(document, element_id)
    return element, ElementFingerprint.from_element(element, element_id)
