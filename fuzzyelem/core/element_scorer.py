"""
元素评分器 - 计算候选元素与源指纹的相似度

评分规则（默认权重，见 ScoringConfig）:
1. 标签名不同 → 0 分（前置条件）
2. 非空 id 与指纹 id 相同 → 10 分（直接判定）
3. 其余字段精确匹配累加:
   - 文本 +5
   - class +3
   - href +1
   - title +1
   指纹中为空的字段不参与比较。
"""

from typing import Optional

from bs4 import Tag

from fuzzyelem import config as settings
from fuzzyelem.config import ScoringConfig
from fuzzyelem.domain.entities import ElementFingerprint, get_attribute_text


class ElementScorer:
    """
    元素评分器

    只做精确比较，结果确定且开销很小。
    """

    def __init__(self, fingerprint: ElementFingerprint, config: Optional[ScoringConfig] = None):
        """
        Args:
            fingerprint: 源元素指纹
            config: 评分权重，默认使用全局 scoring_config
        """
        self.fingerprint = fingerprint
        self.config = config or settings.scoring_config

    @property
    def max_score(self) -> int:
        return self.config.max_score

    def score(self, element: Tag) -> int:
        """
        计算候选元素的相似度分数

        Args:
            element: 目标文档中的候选元素

        Returns:
            非负整数分数
        """
        fp = self.fingerprint
        cfg = self.config

        # 标签必须一致
        if element.name != fp.tag:
            return 0

        element_id = get_attribute_text(element, 'id')
        if element_id and element_id == fp.id:
            return cfg.max_score

        score = 0
        if fp.has_text and element.get_text().strip() == fp.text:
            score += cfg.text_weight
        if fp.has_class and get_attribute_text(element, 'class') == fp.class_name:
            score += cfg.class_weight
        if fp.has_href and get_attribute_text(element, 'href') == fp.href:
            score += cfg.href_weight
        if fp.has_title and get_attribute_text(element, 'title') == fp.title:
            score += cfg.title_weight

        return score
