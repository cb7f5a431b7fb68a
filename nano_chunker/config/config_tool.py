#!/usr/bin/env python3
"""
配置管理工具

提供命令行配置管理功能：
    nano-chunker-config create chunker.yaml --chunk-size 1000
    nano-chunker-config validate chunker.yaml
    nano-chunker-config template
"""

import argparse
import json
import sys

from nano_chunker.config import (
    load_config_template,
    load_config,
    create_config_from_template,
    validate_config,
)


def create_config_command(args):
    """创建配置文件命令"""
    try:
        create_config_from_template(
            args.output,
            chunk_size=args.chunk_size,
            length_function=args.length_function,
            tiktoken_model=args.model,
        )
        print(f"✅ 配置文件创建成功: {args.output}")
        return True
    except (OSError, ValueError) as e:
        print(f"❌ 创建配置文件失败: {e}")
        return False


def validate_config_command(args):
    """验证配置文件命令"""
    try:
        config = load_config(args.config_path)
    except (OSError, ValueError) as e:
        print(f"❌ 验证配置文件失败: {e}")
        return False

    if isinstance(config, dict) and validate_config(config):
        print("✅ 配置文件验证通过")
        return True
    print("❌ 配置文件验证失败")
    return False


def show_template_command(args):
    """显示配置模板命令"""
    try:
        config = load_config_template()
    except (OSError, ValueError) as e:
        print(f"❌ 加载配置模板失败: {e}")
        return False
    print(json.dumps(config, indent=2, ensure_ascii=False))
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="nano-chunker 配置管理工具")
    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    # 创建配置文件命令
    create_parser = subparsers.add_parser('create', help='创建配置文件')
    create_parser.add_argument('output', help='输出配置文件路径（.json / .yaml / .yml）')
    create_parser.add_argument('--chunk-size', type=int, default=None, help='块大小')
    create_parser.add_argument('--length-function', choices=['characters', 'tokens'], default=None,
                               help='长度计算方式')
    create_parser.add_argument('--model', default=None, help='tiktoken模型名称')
    create_parser.set_defaults(func=create_config_command)

    # 验证配置文件命令
    validate_parser = subparsers.add_parser('validate', help='验证配置文件')
    validate_parser.add_argument('config_path', help='配置文件路径')
    validate_parser.set_defaults(func=validate_config_command)

    # 显示模板命令
    template_parser = subparsers.add_parser('template', help='显示配置模板')
    template_parser.set_defaults(func=show_template_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    success = args.func(args)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
