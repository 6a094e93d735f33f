"""
牌组工具配置.

使用Pydantic dataclass确保配置数据的校验，支持从YAML文件加载.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ConfigDict, Field, ValidationError, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .deck.types import is_valid_separator
from .exceptions import DeckConfigError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@pydantic_dataclass(config=ConfigDict(extra="forbid"))
class DeckConfig:
    """
    牌组工具配置.

    Attributes:
        hand_size: 命令行deal的默认手牌数
        separator: 打印时位置与标签之间的分隔符
        log_level: 日志级别
    """
    hand_size: int = Field(5, ge=0, strict=True, description="默认手牌数")
    separator: str = Field(" ", min_length=1, description="打印分隔符")
    log_level: str = Field("INFO", description="日志级别")

    @field_validator('separator')
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """分隔符只能由单行的空白字符组成."""
        if not is_valid_separator(v):
            raise ValueError(f"分隔符必须是单行的空白字符: {v!r}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证并规范化日志级别."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {v}")
        return level


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise DeckConfigError(f"无法读取配置文件 {path}: {e}") from e
    except yaml.YAMLError as e:
        raise DeckConfigError(f"配置文件 {path} 不是有效的YAML: {e}") from e

    # 空文件视为使用默认配置
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DeckConfigError(f"配置文件 {path} 的顶层必须是映射")
    return data


def load_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> DeckConfig:
    """
    加载配置.

    Args:
        path: YAML配置文件路径，为None时使用默认配置
        **overrides: 覆盖文件内容的配置项，值为None的项会被忽略

    Returns:
        DeckConfig: 校验后的配置

    Raises:
        DeckConfigError: 当文件无法读取、格式错误或配置项无效时
    """
    data: Dict[str, Any] = {}
    if path is not None:
        data = _read_yaml(Path(path))
        logger.debug("从 %s 加载配置: %s", path, data)

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return DeckConfig(**data)
    except (ValidationError, TypeError) as e:
        raise DeckConfigError(f"配置无效: {e}") from e
