# Domain Entities

"""
领域实体 - 核心业务对象

提供搜索过程使用的数据模型。
"""

from .element_fingerprint import ElementFingerprint, get_attribute_text, get_class_tokens
from .search_models import ScoredCandidate, SearchResult

__all__ = [
    'ElementFingerprint',
    'ScoredCandidate',
    'SearchResult',
    'get_attribute_text',
    'get_class_tokens',
]
