"""
fuzzyelem - 相似 HTML 元素查找工具

程序入口，未安装时可直接运行:
    python main.py --id make-everything-ok-button origin.html diff.html
"""

import sys
import os

# 确保程序根目录在 Python 路径中
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fuzzyelem.cli import main


if __name__ == "__main__":
    sys.exit(main())
