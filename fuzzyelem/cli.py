"""
命令行入口

用法:
    fuzzyelem [--id ID] [--verbose] [--log-file PATH] source target

结果路径输出到 stdout，失败时错误信息输出到 stderr 并以 1 退出。
"""

import argparse
import logging
import sys
from typing import List, Optional

from fuzzyelem.config import cli_config
from fuzzyelem.core.similar_element_finder import search_files
from fuzzyelem.domain.errors import FuzzyElemError
from fuzzyelem.utils.logger import SIMPLE_FORMAT, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzyelem",
        description="search in a target document for html element similar to element from source document",
        usage="fuzzyelem [OPTIONS] source target",
    )
    parser.add_argument(
        "--id",
        dest="element_id",
        default=cli_config.default_element_id,
        help="source document element 'id' attribute value (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="print debug logs to stderr")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    # 参数个数在 main() 中校验
    parser.add_argument("files", nargs="*", metavar="FILE", help="source and target html files")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    命令行主函数

    Returns:
        进程退出码
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
        format_string=SIMPLE_FORMAT,
    )

    if len(args.files) < 2:
        print("not enough arguments", file=sys.stderr)
        return 1
    if len(args.files) > 2:
        print("too much arguments", file=sys.stderr)
        return 1

    source_path, target_path = args.files
    try:
        path = search_files(args.element_id, source_path, target_path)
    except FuzzyElemError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
