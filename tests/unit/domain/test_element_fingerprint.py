"""
ElementFingerprint 单元测试

测试元素指纹的构建和提取。
"""

import dataclasses

import pytest

from fuzzyelem.core.fingerprint_extractor import extract_fingerprint, find_source_element
from fuzzyelem.domain.entities import ElementFingerprint, get_attribute_text, get_class_tokens
from fuzzyelem.domain.errors import ElementNotFoundError

BUTTON_ID = "make-everything-ok-button"


class TestElementFingerprintBasic:
    """ElementFingerprint 基础功能测试"""

    def test_from_element_populates_fields(self, source_doc):
        button = source_doc.find(id=BUTTON_ID)
        fp = ElementFingerprint.from_element(button, BUTTON_ID)

        assert fp.tag == 'a'
        assert fp.id == BUTTON_ID
        assert fp.text == 'Make everything OK'
        assert fp.class_name == 'btn btn-success'
        assert fp.href == '#ok'
        assert fp.title == 'Make-Button'

    def test_missing_attributes_are_empty(self, parse_html):
        doc = parse_html('<html><body><p id="p1">hello</p></body></html>')
        fp = ElementFingerprint.from_element(doc.p, 'p1')

        assert fp.class_name == ''
        assert fp.href == ''
        assert fp.title == ''
        assert not fp.has_class
        assert not fp.has_href
        assert not fp.has_title
        assert fp.has_text

    def test_fingerprint_is_immutable(self):
        fp = ElementFingerprint(tag='a', id='x')
        with pytest.raises(dataclasses.FrozenInstanceError):
            fp.text = 'changed'

    def test_to_dict(self):
        fp = ElementFingerprint(tag='a', id='x', href='#')
        data = fp.to_dict()

        assert data['tag'] == 'a'
        assert data['href'] == '#'
        assert data['class_name'] == ''


class TestAttributeHelpers:
    """属性读取测试"""

    def test_class_tokens(self, parse_html):
        doc = parse_html('<html><body><div class=" a   b ">x</div></body></html>')

        assert get_class_tokens(doc.div) == ['a', 'b']
        assert get_attribute_text(doc.div, 'class') == 'a b'

    def test_absent_and_empty_are_both_empty(self, parse_html):
        doc = parse_html('<html><body><a title="">x</a></body></html>')

        assert get_attribute_text(doc.a, 'title') == ''
        assert get_attribute_text(doc.a, 'href') == ''


class TestExtractFingerprint:
    """指纹提取测试"""

    def test_extract_returns_element_and_fingerprint(self, source_doc):
        element, fp = extract_fingerprint(source_doc, BUTTON_ID)

        assert element is source_doc.find(id=BUTTON_ID)
        assert fp.id == BUTTON_ID

    def test_missing_id_raises(self, source_doc):
        with pytest.raises(ElementNotFoundError) as exc_info:
            find_source_element(source_doc, 'no-such-id')

        assert exc_info.value.element_id == 'no-such-id'
        assert 'source' in str(exc_info.value)
