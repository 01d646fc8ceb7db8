"""
错误类型

搜索过程中所有对外报告的失败都继承自 FuzzyElemError。
"未找到相似元素" 不是错误，以空路径表示。
"""


class FuzzyElemError(Exception):
    """fuzzyelem 错误基类"""


class InvalidInputError(FuzzyElemError):
    """输入参数无效（空 id、缺少文件路径），在访问任何文档之前抛出"""


class DocumentIOError(FuzzyElemError):
    """文档无法打开或读取"""

    def __init__(self, side: str, reason: str):
        self.side = side
        super().__init__(f"{side}: {reason}")


class DocumentParseError(FuzzyElemError):
    """文档内容被解析器拒绝"""

    def __init__(self, side: str, reason: str):
        self.side = side
        super().__init__(f"{side}: {reason}")


class ElementNotFoundError(FuzzyElemError):
    """源文档中不存在指定 id 的元素"""

    def __init__(self, element_id: str, side: str = "source"):
        self.element_id = element_id
        self.side = side
        super().__init__(f"{side}: element with id '{element_id}' not found")
