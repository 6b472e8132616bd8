# -*- coding: utf-8 -*-
"""
安全的枚举解析工具

配置文件和命令行传入的字符串需要映射到枚举成员。宽松模式在遇到空值或非法值时
回退到默认值并记录日志，严格模式抛出带有可选值列表的 ValueError。
"""

import logging
from enum import Enum
from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)

logger = logging.getLogger(__name__)


def _lookup(value: str, enum_type: Type[E]) -> Optional[E]:
    """先按成员名（不区分大小写）匹配，再按成员值匹配"""
    member = enum_type.__members__.get(value.strip().upper())
    if member is not None:
        return member
    for candidate in enum_type:
        if isinstance(candidate.value, str) and candidate.value.lower() == value.lower():
            return candidate
    return None


def parse_enum(
    value: Optional[str],
    enum_type: Type[E],
    default: E,
    context: Optional[str] = None,
) -> E:
    """
    宽松解析枚举值

    Args:
        value: 待解析的字符串
        enum_type: 目标枚举类型
        default: 解析失败时的默认值
        context: 日志上下文描述

    Returns:
        解析得到的枚举成员，失败时返回默认值
    """
    prefix = f"[{context}] " if context else ""
    if isinstance(value, enum_type):
        return value
    if not value:
        logger.debug(f"{prefix}{enum_type.__name__} 为空值，使用默认值: {default.name}")
        return default

    member = _lookup(value, enum_type)
    if member is None:
        logger.warning(
            f"{prefix}无效的 {enum_type.__name__} 值: '{value}'，使用默认值: {default.name}"
        )
        return default
    return member


def parse_enum_strict(value: Optional[str], enum_type: Type[E]) -> E:
    """
    严格解析枚举值

    Raises:
        ValueError: 空值或无法识别的值
    """
    if isinstance(value, enum_type):
        return value
    if not value:
        raise ValueError(f"{enum_type.__name__} 的值不能为空")

    member = _lookup(value, enum_type)
    if member is None:
        valid = ", ".join(enum_type.__members__)
        raise ValueError(f"无效的 {enum_type.__name__} 值: '{value}'。可选值: {valid}")
    return member
