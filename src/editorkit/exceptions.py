# -*- coding: utf-8 -*-
"""
EditorKit 核心异常

依赖解析核心本身从不抛出异常（缺失依赖以数据形式返回，循环依赖只记录警告），
以下异常只由外围组件使用：严格模式的插件集构建器、配置加载层以及图完整性检查。
"""

from typing import Any, Dict, FrozenSet, List, Optional


class EditorKitError(Exception):
    """所有 EditorKit 自定义异常的基类。"""

    pass


# region 插件异常


class PluginError(EditorKitError):
    """与插件相关的错误的基类。"""

    pass


class PluginNotFoundError(PluginError, KeyError):
    """当插件名称无法映射到已知插件符号时引发。"""

    def __str__(self) -> str:
        # KeyError 默认会给消息加引号
        return str(self.args[0]) if self.args else ""


class PluginConfigurationError(PluginError, ValueError):
    """当插件集配置无效时引发。"""

    pass


# endregion

# region 依赖异常


class DependencyError(PluginError):
    """依赖管理相关错误的基类。"""

    pass


class MissingDependencyError(DependencyError):
    """严格模式下插件集存在未满足的直接依赖时引发。"""

    def __init__(
        self,
        message: str,
        missing: Optional[Dict[str, FrozenSet[Any]]] = None,
    ):
        super().__init__(message)
        self.missing = missing or {}


class CircularDependencyError(DependencyError):
    """依赖表中检测到循环依赖时引发（仅用于严格的图完整性检查）。"""

    def __init__(self, message: str, cycles: Optional[List[List[Any]]] = None):
        super().__init__(message)
        self.cycles = cycles or []


# endregion
