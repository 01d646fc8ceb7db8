"""
Pytest 配置文件

提供测试所需的 fixtures 和共享配置。
"""

import sys
import threading
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

# 确保项目根目录在 Python 路径中
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fuzzyelem.core.element_scorer import ElementScorer


BUTTON_ID = "make-everything-ok-button"


# ============================================================
# HTML 样本
# ============================================================

SOURCE_HTML = """
<html>
<head><title>Origin</title></head>
<body>
<div id="wrapper">
  <div class="panel">
    <div class="panel-body">
      <a id="make-everything-ok-button" class="btn btn-success" href="#ok" title="Make-Button">
        Make everything OK
      </a>
    </div>
  </div>
</div>
</body>
</html>
"""

TARGET_HTML = """
<html>
<head><title>Diff</title></head>
<body>
<div id="wrapper">
  <div class="panel">
    <div class="panel-body">
      <a class="btn btn-danger" href="#cancel">Cancel</a>
      <a class="btn btn-success" href="#ok" title="Make-Button">Make everything OK</a>
    </div>
  </div>
</div>
</body>
</html>
"""

UNRELATED_HTML = """
<html>
<body>
<section class="content">
  <a class="btn btn-success" href="#ok">Make everything OK</a>
</section>
</body>
</html>
"""


def parse(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "lxml")


@pytest.fixture
def parse_html():
    """HTML 字符串 → BeautifulSoup"""
    return parse


@pytest.fixture
def source_doc():
    """源文档"""
    return parse(SOURCE_HTML)


@pytest.fixture
def target_doc():
    """结构相似的目标文档"""
    return parse(TARGET_HTML)


@pytest.fixture
def unrelated_doc():
    """结构无关的目标文档"""
    return parse(UNRELATED_HTML)


@pytest.fixture
def html_files(tmp_path):
    """写入磁盘的源/目标文件"""
    source = tmp_path / "origin.html"
    target = tmp_path / "diff.html"
    source.write_text(SOURCE_HTML, encoding="utf-8")
    target.write_text(TARGET_HTML, encoding="utf-8")
    return source, target


# ============================================================
# 评分器探针
# ============================================================

class RecordingScorer(ElementScorer):
    """记录每个被评分元素的评分器，用于统计访问节点"""

    def __init__(self, fingerprint, config=None):
        super().__init__(fingerprint, config)
        self.visited = []
        self._lock = threading.Lock()

    def score(self, element):
        with self._lock:
            self.visited.append(element)
        return super().score(element)

    def was_visited(self, element) -> bool:
        return any(node is element for node in self.visited)


@pytest.fixture
def recording_scorer_cls():
    return RecordingScorer
