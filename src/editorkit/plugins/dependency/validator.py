# -*- coding: utf-8 -*-
"""
依赖校验

检查一个已组装好的插件集合中每个成员的直接依赖是否都在集合内。
校验结果以数据形式返回，是否因此拒绝配置由调用方（如严格模式构建器）决定。
"""

from typing import AbstractSet, Dict, FrozenSet, Iterable, Optional

from ..symbols import EditorPlugin, sort_plugins
from .resolver import ExternalPlugin, external_name
from .tables import DEFAULT_TABLES, DependencyTables


class DependencyValidator:
    """插件依赖校验器"""

    def __init__(self, tables: Optional[DependencyTables] = None):
        self.tables = tables or DEFAULT_TABLES

    def validate_dependencies(
        self, plugins: AbstractSet[EditorPlugin]
    ) -> Dict[EditorPlugin, FrozenSet[EditorPlugin]]:
        """
        校验内置插件的直接依赖

        只对比直接依赖，不计算传递闭包。

        Args:
            plugins: 待校验的插件集合

        Returns:
            {插件: 缺失的直接依赖}，全部满足时为空字典
        """
        members = frozenset(plugins)
        missing: Dict[EditorPlugin, FrozenSet[EditorPlugin]] = {}

        for plugin in sort_plugins(members):
            missing_deps = self.tables.get_dependencies(plugin) - members
            if missing_deps:
                missing[plugin] = frozenset(missing_deps)

        return missing

    def validate_premium_dependencies(
        self,
        plugins: AbstractSet[EditorPlugin],
        custom_plugins: Optional[Iterable[ExternalPlugin]],
    ) -> Dict[str, FrozenSet[EditorPlugin]]:
        """
        校验付费/外部插件在集中依赖表中登记的依赖

        Returns:
            {外部插件 JS 名称: 缺失的依赖}，全部满足时为空字典
        """
        members = frozenset(plugins)
        missing: Dict[str, FrozenSet[EditorPlugin]] = {}

        for custom_plugin in custom_plugins or ():
            name = external_name(custom_plugin)
            missing_deps = self.tables.get_premium_dependencies(name) - members
            if missing_deps:
                missing[name] = frozenset(missing_deps)

        return missing
