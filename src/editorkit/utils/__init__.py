# -*- coding: utf-8 -*-
"""
通用工具
"""

from .enum_parser import parse_enum, parse_enum_strict

__all__ = ["parse_enum", "parse_enum_strict"]
