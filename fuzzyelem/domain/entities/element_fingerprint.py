"""
元素指纹实体

提供 ElementFingerprint 类，记录源元素用于相似度比较的全部特征。
指纹在搜索开始前构建一次，之后不再修改。

核心字段:
- tag / id: 必比字段
- text / class / href / title: 非空时才参与比较
"""

from dataclasses import dataclass, asdict
from typing import Dict, List

from bs4 import Tag


def get_attribute_text(element: Tag, name: str) -> str:
    """
    读取属性的字符串值

    缺失属性与空属性统一返回空字符串。多值属性（如 class）以空格连接。
    """
    value = element.get(name)
    if value is None:
        return ''
    if isinstance(value, (list, tuple)):
        return ' '.join(token for token in value if token)
    return str(value)


def get_class_tokens(element: Tag) -> List[str]:
    """读取 class 属性拆分后的类名列表"""
    return get_attribute_text(element, 'class').split()


@dataclass(frozen=True)
class ElementFingerprint:
    """
    元素指纹

    Attributes:
        tag: 标签名
        id: 定位源元素使用的 id
        text: 去除首尾空白后的文本内容
        class_name: class 属性（类名以单个空格连接）
        href: href 属性
        title: title 属性
    """
    tag: str
    id: str
    text: str = ''
    class_name: str = ''
    href: str = ''
    title: str = ''

    @classmethod
    def from_element(cls, element: Tag, element_id: str) -> 'ElementFingerprint':
        """
        从文档元素创建指纹

        Args:
            element: BeautifulSoup 元素
            element_id: 定位该元素所用的 id

        Returns:
            ElementFingerprint 实例
        """
        return cls(
            tag=element.name,
            id=element_id,
            text=element.get_text().strip(),
            class_name=get_attribute_text(element, 'class'),
            href=get_attribute_text(element, 'href'),
            title=get_attribute_text(element, 'title'),
        )

    # 空字符串表示"不参与比较"
    @property
    def has_text(self) -> bool:
        return self.text != ''

    @property
    def has_class(self) -> bool:
        return self.class_name != ''

    @property
    def has_href(self) -> bool:
        return self.href != ''

    @property
    def has_title(self) -> bool:
        return self.title != ''

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def __repr__(self) -> str:
        return f"<ElementFingerprint: {self.tag}#{self.id}>"
