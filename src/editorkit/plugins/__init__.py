# -*- coding: utf-8 -*-
"""
插件词汇表与依赖管理
"""

from .custom import CustomPlugin
from .symbols import EditorPlugin, PluginCategory, lookup_plugin, sort_plugins

__all__ = [
    "CustomPlugin",
    "EditorPlugin",
    "PluginCategory",
    "lookup_plugin",
    "sort_plugins",
]
