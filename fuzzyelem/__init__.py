"""
fuzzyelem - 在目标 HTML 文档中查找与源文档指定元素最相似的元素

用法:
    from fuzzyelem import search_files

    path = search_files("make-everything-ok-button", "origin.html", "diff.html")
"""

from fuzzyelem.core.similar_element_finder import (
    SimilarElementFinder,
    find_similar,
    search,
    search_files,
)
from fuzzyelem.domain.errors import (
    FuzzyElemError,
    InvalidInputError,
    DocumentIOError,
    DocumentParseError,
    ElementNotFoundError,
)

__version__ = "1.0.0"

__all__ = [
    'SimilarElementFinder',
    'find_similar',
    'search',
    'search_files',
    'FuzzyElemError',
    'InvalidInputError',
    'DocumentIOError',
    'DocumentParseError',
    'ElementNotFoundError',
]
