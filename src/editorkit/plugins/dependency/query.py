# -*- coding: utf-8 -*-
"""
反向依赖查询

回答 "哪些插件依赖 X"、"移除 X 会影响当前配置中的哪些插件"，
并提供调试用的依赖树文本。
"""

import logging
from typing import AbstractSet, Iterable, List, Optional, Set

from ..symbols import EditorPlugin, plugin_label, sort_plugins
from .tables import DEFAULT_TABLES, DependencyTables

logger = logging.getLogger(__name__)


class DependencyQuery:
    """反向依赖查询"""

    def __init__(self, tables: Optional[DependencyTables] = None):
        self.tables = tables or DEFAULT_TABLES

    def get_dependents(self, plugin: EditorPlugin) -> Set[EditorPlugin]:
        """获取直接依赖于指定插件的全部插件"""
        return {
            name for name, deps in self.tables.dependencies.items() if plugin in deps
        }

    def check_removal_impact(
        self, plugin: EditorPlugin, current_plugins: AbstractSet[EditorPlugin]
    ) -> Set[EditorPlugin]:
        """
        检查移除插件的影响

        Args:
            plugin: 准备移除的插件
            current_plugins: 当前配置中的插件

        Returns:
            当前配置中会因此失去依赖的插件
        """
        return {
            member
            for member in current_plugins
            if plugin in self.tables.get_dependencies(member)
        }

    def get_premium_dependents(
        self, plugin: EditorPlugin, premium_plugin_names: Iterable[str]
    ) -> Set[str]:
        """获取给定付费插件中依赖于指定内置插件的名称"""
        return {
            name
            for name in premium_plugin_names
            if plugin in self.tables.get_premium_dependencies(name)
        }

    def get_dependency_tree(self, plugin: EditorPlugin) -> str:
        """
        生成插件依赖树的文本表示

        当前渲染路径上再次出现的插件标记为 (circular) 并终止该分支。

        Returns:
            形如 "└── ImageCaption\\n    └── Image\\n" 的多行文本
        """
        lines: List[str] = []
        path: Set[EditorPlugin] = set()

        def build_tree(node: EditorPlugin, prefix: str, is_last: bool) -> None:
            line = prefix + ("└── " if is_last else "├── ") + plugin_label(node)

            if node in path:
                logger.debug(f"依赖树中出现循环引用: {plugin_label(node)}")
                lines.append(line + " (circular)")
                return

            lines.append(line)
            path.add(node)

            deps = sort_plugins(self.tables.get_dependencies(node))
            child_prefix = prefix + ("    " if is_last else "│   ")
            for index, dep in enumerate(deps):
                build_tree(dep, child_prefix, index == len(deps) - 1)

            path.discard(node)

        build_tree(plugin, "", True)
        return "".join(line + "\n" for line in lines)
