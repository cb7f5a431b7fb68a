"""
配置管理模块

提供分割配置文件的加载、保存、验证，以及根据配置创建分割器的功能。
配置文件支持 JSON（.json）和 YAML（.yaml / .yml）两种格式。
"""

import json
import os
from pathlib import Path
from typing import Dict, Any

import yaml

from .._utils import logger
from ..chunking import RecursiveCharacterTextSplitter, SplitterConfig, tiktoken_length_function
from ..exceptions import ConfigurationError

# 配置文件路径
CONFIG_TEMPLATE_PATH = Path(__file__).parent / "config_template.json"

LENGTH_FUNCTIONS = ("characters", "tokens")

FLAG_FIELDS = ("keep_separator", "is_separator_regex", "strict_separators")

YAML_SUFFIXES = (".yaml", ".yml")


def _is_yaml(path: str) -> bool:
    return Path(path).suffix.lower() in YAML_SUFFIXES


def load_config_template() -> Dict[str, Any]:
    """
    加载配置模板

    Returns:
        Dict[str, Any]: 配置模板字典
    """
    try:
        with open(CONFIG_TEMPLATE_PATH, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"配置文件模板不存在: {CONFIG_TEMPLATE_PATH}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"配置文件模板格式错误: {e}")
        raise


def load_config(config_path: str) -> Dict[str, Any]:
    """
    加载配置文件

    Args:
        config_path (str): 配置文件路径，按扩展名区分 JSON / YAML

    Returns:
        Dict[str, Any]: 配置字典
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            if _is_yaml(config_path):
                config = yaml.safe_load(f) or {}
            else:
                config = json.load(f)
        logger.info(f"成功加载配置文件: {config_path}")
        return config
    except FileNotFoundError:
        logger.error(f"配置文件不存在: {config_path}")
        raise
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error(f"配置文件格式错误: {e}")
        raise


def save_config(config: Dict[str, Any], config_path: str) -> None:
    """
    保存配置文件

    Args:
        config (Dict[str, Any]): 配置字典
        config_path (str): 配置文件路径，按扩展名区分 JSON / YAML
    """
    try:
        # 确保目录存在
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            if _is_yaml(config_path):
                yaml.safe_dump(config, f, allow_unicode=True, sort_keys=False)
            else:
                json.dump(config, f, indent=2, ensure_ascii=False)
        logger.info(f"成功保存配置文件: {config_path}")
    except OSError as e:
        logger.error(f"保存配置文件失败: {e}")
        raise


def create_config_from_template(output_path: str, **overrides) -> Dict[str, Any]:
    """
    从模板创建配置文件

    Args:
        output_path (str): 输出配置文件路径
        **overrides: 要覆盖的配置项，值为None的项会被忽略；
            键中的点表示嵌套结构，如 {"extra.owner": "me"}

    Returns:
        Dict[str, Any]: 创建的配置字典
    """
    # 加载模板
    config = load_config_template()

    # 应用覆盖项
    for key, value in overrides.items():
        if value is None:
            continue
        # 使用点分隔符处理嵌套结构
        keys = key.split('.')
        current = config
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value

    # 保存配置文件
    save_config(config, output_path)

    return config


def validate_config(config: Dict[str, Any]) -> bool:
    """
    验证配置

    Args:
        config (Dict[str, Any]): 配置字典

    Returns:
        bool: 验证是否通过
    """
    required_fields = [
        "chunk_size",
        "separators",
    ]

    for field in required_fields:
        if field not in config:
            logger.error(f"配置文件缺少必需字段: {field}")
            return False

    # 验证 chunk_size
    try:
        chunk_size = int(config["chunk_size"])
    except (TypeError, ValueError):
        logger.error(f"chunk_size 不是整数: {config['chunk_size']!r}")
        return False
    if isinstance(config["chunk_size"], bool) or chunk_size <= 0:
        logger.error(f"chunk_size 必须为正整数: {config['chunk_size']!r}")
        return False

    # 验证 separators
    separators = config["separators"]
    if not isinstance(separators, list) or not separators:
        logger.error("separators 必须是非空列表")
        return False
    if not all(isinstance(sep, str) for sep in separators):
        logger.error("separators 中的每一项都必须是字符串")
        return False

    for field in FLAG_FIELDS:
        if field in config and not isinstance(config[field], bool):
            logger.error(f"{field} 必须是布尔值")
            return False

    if config.get("length_function", "characters") not in LENGTH_FUNCTIONS:
        logger.error(f"不支持的 length_function: {config['length_function']}")
        return False

    logger.info("配置文件验证通过")
    return True


def get_default_config() -> Dict[str, Any]:
    """
    获取默认配置

    Returns:
        Dict[str, Any]: 默认配置字典
    """
    return load_config_template()


def create_splitter_config(config: Dict[str, Any]) -> SplitterConfig:
    """
    根据配置字典创建 SplitterConfig

    Args:
        config (Dict[str, Any]): 配置字典，缺省字段取模板中的值

    Returns:
        SplitterConfig: 分割配置
    """
    merged = {**get_default_config(), **config}

    length_function_name = merged["length_function"]
    if length_function_name == "characters":
        length_function = len
    elif length_function_name == "tokens":
        length_function = tiktoken_length_function(merged["tiktoken_model"])
    else:
        raise ConfigurationError(
            f"不支持的 length_function: {length_function_name}", field="length_function"
        )

    # True/False 也能被 int() 转换，需要先排除
    if isinstance(merged["chunk_size"], bool):
        raise ConfigurationError(
            f"chunk_size 必须是整数，实际为 {merged['chunk_size']!r}", field="chunk_size"
        )
    try:
        chunk_size = int(merged["chunk_size"])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"chunk_size 无法转换为整数: {merged['chunk_size']!r}", field="chunk_size"
        ) from e

    for field in FLAG_FIELDS:
        if not isinstance(merged[field], bool):
            raise ConfigurationError(
                f"{field} 必须是布尔值，实际为 {merged[field]!r}", field=field
            )

    return SplitterConfig(
        chunk_size=chunk_size,
        length_function=length_function,
        keep_separator=merged["keep_separator"],
        separators=merged["separators"],
        is_separator_regex=merged["is_separator_regex"],
        strict_separators=merged["strict_separators"],
    )


def create_splitter_from_config(config: Dict[str, Any]) -> RecursiveCharacterTextSplitter:
    """
    根据配置字典创建递归分割器

    Args:
        config (Dict[str, Any]): 配置字典

    Returns:
        RecursiveCharacterTextSplitter: 分割器实例
    """
    return RecursiveCharacterTextSplitter(create_splitter_config(config))


# 导出主要函数
__all__ = [
    'CONFIG_TEMPLATE_PATH',
    'load_config_template',
    'load_config',
    'save_config',
    'create_config_from_template',
    'validate_config',
    'get_default_config',
    'create_splitter_config',
    'create_splitter_from_config',
]
