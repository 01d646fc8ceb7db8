"""
HTML 文档加载器

负责读取 HTML 文件并解析为 BeautifulSoup 文档。
读取或解析失败时抛出带 source/target 前缀的错误。
"""

from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup

from fuzzyelem import config as settings
from fuzzyelem.config import ParserConfig
from fuzzyelem.domain.errors import DocumentIOError, DocumentParseError, InvalidInputError
from fuzzyelem.utils.logger import get_logger

logger = get_logger(__name__)


class DocumentLoader:
    """
    文档加载器

    解析后的文档在搜索期间只读。
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Args:
            config: 解析器配置，默认使用全局 parser_config
        """
        self.config = config or settings.parser_config

    def parse(self, markup: Union[bytes, str], side: str) -> BeautifulSoup:
        """
        解析 HTML 内容

        Args:
            markup: HTML 字节或字符串
            side: "source" 或 "target"，用于错误前缀

        Returns:
            BeautifulSoup 文档

        Raises:
            DocumentParseError: 解析器拒绝该内容或解析器不可用
        """
        try:
            return BeautifulSoup(
                markup,
                self.config.parser,
                from_encoding=self.config.encoding if isinstance(markup, bytes) else None,
            )
        except ParserRejectedMarkup as e:
            raise DocumentParseError(side, f"malformed document: {e}") from e
        except FeatureNotFound as e:
            raise DocumentParseError(side, f"parser '{self.config.parser}' is not available") from e

    def load(self, file_path: Union[str, Path], side: str) -> BeautifulSoup:
        """
        读取并解析 HTML 文件

        Args:
            file_path: 文件路径
            side: "source" 或 "target"

        Returns:
            BeautifulSoup 文档

        Raises:
            InvalidInputError: 路径为空
            DocumentIOError: 文件无法读取
            DocumentParseError: 内容无法解析
        """
        if not file_path:
            raise InvalidInputError(f"{side} file path is missing")

        path = Path(file_path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise DocumentIOError(side, f"cannot read '{path}': {e.strerror or e}") from e

        logger.debug(f"[{side}] 读取 {path} ({len(content)} 字节)")
        return self.parse(content, side)
