# -*- coding: utf-8 -*-
"""
依赖解析引擎

把调用方请求的插件集合扩展为满足全部硬依赖的完整集合，提供三种策略：
仅解析硬依赖、附带推荐插件、附带付费插件依赖。
"""

import logging
from typing import AbstractSet, Iterable, List, Optional, Set, Union

from ..custom import CustomPlugin
from ..symbols import EditorPlugin, sort_plugins
from .sorter import topological_sort
from .tables import DEFAULT_TABLES, DependencyTables

# 每个编辑器配置都需要的基础插件
CORE_PLUGINS = (EditorPlugin.ESSENTIALS, EditorPlugin.PARAGRAPH)

ExternalPlugin = Union[CustomPlugin, str]


def external_name(plugin: ExternalPlugin) -> str:
    """外部插件描述或名称 -> JS 名称"""
    if isinstance(plugin, str):
        return plugin
    return plugin.js_name


def walk_dependencies(
    plugin: EditorPlugin,
    resolved: Set[EditorPlugin],
    tables: DependencyTables,
) -> None:
    """
    把插件及其全部传递依赖加入 resolved

    深度优先后序遍历：先加入依赖，再加入插件本身。已在 resolved 中的插件直接跳过，
    正在展开的插件同样跳过，因此依赖表中意外出现环时也能终止。
    """
    stack = [(plugin, False)]
    expanding: Set[EditorPlugin] = set()

    while stack:
        current, expanded = stack.pop()
        if expanded:
            expanding.discard(current)
            resolved.add(current)
            continue
        if current in resolved or current in expanding:
            continue

        expanding.add(current)
        stack.append((current, True))
        for dep in reversed(sort_plugins(tables.get_dependencies(current))):
            if dep not in resolved and dep not in expanding:
                stack.append((dep, False))


class DependencyResolver:
    """
    插件依赖解析器

    无状态：每次调用只分配调用内部的工作集合，可被并发调用。
    """

    def __init__(self, tables: Optional[DependencyTables] = None):
        """
        初始化依赖解析器

        Args:
            tables: 依赖表，默认使用内置表
        """
        self.tables = tables or DEFAULT_TABLES
        self.logger = logging.getLogger(__name__)

    def resolve(
        self,
        plugins: Iterable[EditorPlugin],
        include_core_plugins: bool = True,
    ) -> Set[EditorPlugin]:
        """
        传递解析插件的全部硬依赖

        Args:
            plugins: 请求的插件
            include_core_plugins: 是否自动加入 ESSENTIALS 与 PARAGRAPH

        Returns:
            满足依赖闭包的新集合（无序，排序请使用 get_load_order）
        """
        resolved: Set[EditorPlugin] = set()
        if include_core_plugins:
            resolved.update(CORE_PLUGINS)

        for plugin in plugins:
            walk_dependencies(plugin, resolved, self.tables)

        return resolved

    def resolve_with_recommended(
        self,
        plugins: Iterable[EditorPlugin],
        custom_plugins: Optional[Iterable[ExternalPlugin]] = None,
    ) -> Set[EditorPlugin]:
        """
        解析硬依赖并加入推荐插件，结果总是包含 ESSENTIALS 与 PARAGRAPH

        推荐插件只展开一层：只查看硬依赖解析结果中各插件的推荐项，
        推荐项自身的硬依赖会被完整解析，但推荐项的推荐项不会继续展开。

        Args:
            plugins: 请求的内置插件
            custom_plugins: 外部插件描述或 JS 名称，其付费依赖只解析硬依赖，
                不参与推荐展开
        """
        resolved = self.resolve(plugins, True)

        with_recommended = set(resolved)
        for plugin in sort_plugins(resolved):
            for recommended in sort_plugins(self.tables.get_recommended(plugin)):
                walk_dependencies(recommended, with_recommended, self.tables)

        added = len(with_recommended) - len(resolved)
        if added:
            self.logger.debug(f"加入推荐插件 {added} 个")

        self._walk_premium_dependencies(custom_plugins, with_recommended)
        return with_recommended

    def resolve_with_premium(
        self,
        plugins: Iterable[EditorPlugin],
        custom_plugins: Optional[Iterable[ExternalPlugin]],
        include_core_plugins: bool = True,
    ) -> Set[EditorPlugin]:
        """
        解析硬依赖并加入付费/外部插件依赖

        只查询集中注册的付费插件依赖表；外部插件描述上附带的 dependencies
        字段不参与解析。未登记的外部插件视为没有依赖。

        Args:
            plugins: 请求的内置插件
            custom_plugins: 外部插件描述或 JS 名称
            include_core_plugins: 是否自动加入 ESSENTIALS 与 PARAGRAPH
        """
        resolved = self.resolve(plugins, include_core_plugins)
        self._walk_premium_dependencies(custom_plugins, resolved)
        return resolved

    def _walk_premium_dependencies(
        self,
        custom_plugins: Optional[Iterable[ExternalPlugin]],
        resolved: Set[EditorPlugin],
    ) -> None:
        """把集中登记的付费插件依赖及其传递依赖加入 resolved"""
        for custom_plugin in custom_plugins or ():
            name = external_name(custom_plugin)
            for dep in sort_plugins(self.tables.get_premium_dependencies(name)):
                walk_dependencies(dep, resolved, self.tables)

    def get_load_order(self, plugins: Iterable[EditorPlugin]) -> List[EditorPlugin]:
        """解析依赖并按加载顺序排列"""
        return topological_sort(self.resolve(plugins), self.tables)

    def topological_sort(self, plugins: AbstractSet[EditorPlugin]) -> List[EditorPlugin]:
        """按本解析器的依赖表排序"""
        return topological_sort(plugins, self.tables)
