"""
DocumentLoader 单元测试
"""

from unittest import mock

import pytest
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from fuzzyelem.config import ParserConfig
from fuzzyelem.domain.errors import DocumentIOError, DocumentParseError, InvalidInputError
from fuzzyelem.infrastructure.html import DocumentLoader


class TestDocumentLoader:
    """文档加载测试"""

    def test_load_file(self, html_files):
        source, _ = html_files
        doc = DocumentLoader().load(source, "source")

        assert isinstance(doc, BeautifulSoup)
        assert doc.find(id="make-everything-ok-button") is not None

    def test_load_accepts_string_path(self, html_files):
        _, target = html_files
        doc = DocumentLoader().load(str(target), "target")

        assert doc.title.get_text() == "Diff"

    def test_missing_file_raises_io_error_with_side(self, tmp_path):
        with pytest.raises(DocumentIOError) as exc_info:
            DocumentLoader().load(tmp_path / "missing.html", "target")

        assert exc_info.value.side == "target"
        assert str(exc_info.value).startswith("target: ")

    def test_directory_raises_io_error(self, tmp_path):
        with pytest.raises(DocumentIOError):
            DocumentLoader().load(tmp_path, "source")

    def test_empty_path_raises_invalid_input(self):
        with pytest.raises(InvalidInputError, match="source file path is missing"):
            DocumentLoader().load("", "source")

    def test_unknown_parser_raises_parse_error(self):
        loader = DocumentLoader(ParserConfig(parser="no-such-parser"))

        with pytest.raises(DocumentParseError) as exc_info:
            loader.parse(b"<html></html>", "source")

        assert str(exc_info.value).startswith("source: ")

    def test_rejected_markup_raises_parse_error_with_side(self):
        """解析器拒绝内容时转换为带 side 前缀的 DocumentParseError"""
        rejected = ParserRejectedMarkup("bad markup")

        with mock.patch(
            "fuzzyelem.infrastructure.html.document_loader.BeautifulSoup",
            side_effect=rejected,
        ):
            with pytest.raises(DocumentParseError) as exc_info:
                DocumentLoader().parse(b"<html></html>", "target")

        assert exc_info.value.side == "target"
        assert str(exc_info.value).startswith("target: malformed document: ")
        assert exc_info.value.__cause__ is rejected

    def test_parse_string_markup(self):
        doc = DocumentLoader(ParserConfig(parser="html.parser")).parse("<p id='x'>hi</p>", "source")
        assert doc.find(id="x").get_text() == "hi"

    def test_parse_bytes_with_encoding(self):
        markup = "<html><body><p>héllo</p></body></html>".encode("latin-1")
        doc = DocumentLoader(ParserConfig(encoding="latin-1")).parse(markup, "source")

        assert doc.p.get_text() == "héllo"
