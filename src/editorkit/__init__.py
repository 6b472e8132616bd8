# -*- coding: utf-8 -*-
"""
EditorKit: Plugin Dependency Resolution for Modular Rich-Text Editors
"""

__author__ = "EditorKit"
__version__ = "1.0.0"

# 插件集构建
from .builder import DependencyMode, PluginSet, PluginSetBuilder
from .config import EditorAssemblyConfig

# 异常
from .exceptions import (
    CircularDependencyError,
    DependencyError,
    EditorKitError,
    MissingDependencyError,
    PluginConfigurationError,
    PluginError,
    PluginNotFoundError,
)

# 插件与依赖
from .plugins.custom import CustomPlugin
from .plugins.dependency import (
    DEFAULT_TABLES,
    DependencyQuery,
    DependencyResolver,
    DependencyTables,
    DependencyValidator,
    check_graph_integrity,
    topological_sort,
)
from .plugins.symbols import EditorPlugin, PluginCategory
from .presets import EditorPreset

__all__ = [
    # 插件
    "EditorPlugin",
    "PluginCategory",
    "CustomPlugin",
    "EditorPreset",
    # 依赖
    "DEFAULT_TABLES",
    "DependencyTables",
    "DependencyResolver",
    "DependencyValidator",
    "DependencyQuery",
    "topological_sort",
    "check_graph_integrity",
    # 构建
    "DependencyMode",
    "PluginSet",
    "PluginSetBuilder",
    "EditorAssemblyConfig",
    # 异常
    "EditorKitError",
    "PluginError",
    "PluginNotFoundError",
    "PluginConfigurationError",
    "DependencyError",
    "MissingDependencyError",
    "CircularDependencyError",
]
