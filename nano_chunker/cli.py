#!/usr/bin/env python3
"""
命令行分块工具

读取文本，按配置分块，打印结果表格，并可导出为CSV：
    nano-chunker split document.txt --chunk-size 500 --export chunks.csv
    cat document.txt | nano-chunker split --separator '\\n\\n' --separator ''
"""

import argparse
import re
import sys

from ._utils import logger
from .config import create_splitter_from_config, load_config
from .exceptions import ChunkerError
from .presentation import export_chunks_as_csv, format_chunk_table

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\"}


def decode_separator(value: str) -> str:
    """
    把命令行中的转义序列还原为实际字符

    Example:
        >>> decode_separator("\\\\n\\\\n")
        '\\n\\n'
    """
    return re.sub(r"\\(.)", lambda m: _ESCAPES.get(m.group(1), m.group(0)), value)


def read_input(path: str) -> str:
    """读取输入文本，路径为 - 时读取标准输入"""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_config(args) -> dict:
    """合并配置文件与命令行参数，命令行参数优先"""
    config = load_config(args.config) if args.config else {}

    if args.chunk_size is not None:
        config["chunk_size"] = args.chunk_size
    if args.separators is not None:
        config["separators"] = [decode_separator(s) for s in args.separators]
    if args.keep_separator is not None:
        config["keep_separator"] = args.keep_separator
    if args.regex is not None:
        config["is_separator_regex"] = args.regex
    if args.strict_separators is not None:
        config["strict_separators"] = args.strict_separators
    if args.length is not None:
        config["length_function"] = args.length
    if args.model is not None:
        config["tiktoken_model"] = args.model
    return config


def split_command(args):
    """分块命令"""
    try:
        splitter = create_splitter_from_config(build_config(args))
        text = read_input(args.input)
        chunks = splitter.split_text(text)
    except (ChunkerError, OSError, ValueError) as e:
        logger.error(f"分块失败: {e}")
        return False

    length_function = splitter.config.length_function
    print(f"Number of chunks: {len(chunks)}")
    table = format_chunk_table(chunks, length_function, preview_width=args.preview_width)
    if table:
        print(table)

    if args.export:
        try:
            export_chunks_as_csv(chunks, args.export, length_function)
        except OSError as e:
            logger.error(f"导出CSV失败: {e}")
            return False
        print(f"✅ 已导出CSV: {args.export}")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="nano-chunker 文本分块工具")
    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    split_parser = subparsers.add_parser('split', help='把文本分块')
    split_parser.add_argument('input', nargs='?', default='-', help='输入文件路径，- 表示标准输入')
    split_parser.add_argument('--config', default=None, help='配置文件路径（.json / .yaml / .yml）')
    split_parser.add_argument('--chunk-size', type=int, default=None, help='块大小')
    split_parser.add_argument('--separator', dest='separators', action='append', default=None,
                              help='分隔符，可重复指定，按优先级从高到低；支持 \\n \\t 转义')
    split_parser.add_argument('--keep-separator', action='store_true', default=None,
                              help='保留分隔符（附着在后一个片段开头）')
    split_parser.add_argument('--regex', action='store_true', default=None,
                              help='分隔符按正则表达式处理')
    split_parser.add_argument('--strict-separators', action='store_true', default=None,
                              help='分隔符列表不以空字符串结尾时报错')
    split_parser.add_argument('--length', choices=['characters', 'tokens'], default=None,
                              help='长度计算方式')
    split_parser.add_argument('--model', default=None, help='tiktoken模型名称（--length tokens 时使用）')
    split_parser.add_argument('--preview-width', type=int, default=60, help='表格中文本预览宽度')
    split_parser.add_argument('--export', default=None, help='导出CSV文件路径')
    split_parser.set_defaults(func=split_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    success = args.func(args)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
