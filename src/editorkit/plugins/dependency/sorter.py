# -*- coding: utf-8 -*-
"""
依赖拓扑排序

三色深度优先遍历（白=未访问，灰=在栈上，黑=已完成），使用显式栈代替递归。
遇到灰色节点说明依赖表存在环：记录警告并跳过这条边，排序继续进行，
保证在任何输入下都返回输入集合的一个完整排列。
"""

import logging
from enum import Enum
from typing import AbstractSet, Dict, Iterator, List, Optional, Tuple

from ..symbols import EditorPlugin, plugin_label, sort_plugins
from .tables import DEFAULT_TABLES, DependencyTables

logger = logging.getLogger(__name__)


class _Mark(Enum):
    WHITE = 0
    GRAY = 1
    BLACK = 2


def topological_sort(
    plugins: AbstractSet[EditorPlugin],
    tables: Optional[DependencyTables] = None,
) -> List[EditorPlugin]:
    """
    按依赖顺序排列插件，依赖排在依赖它的插件之前

    只考虑输入集合内部的依赖边；集合外的依赖被忽略，排序器不会补充缺失插件。

    Args:
        plugins: 待排序的插件集合
        tables: 依赖表，默认使用内置表

    Returns:
        输入集合的一个排列
    """
    tables = tables or DEFAULT_TABLES
    members = frozenset(plugins)
    marks: Dict[EditorPlugin, _Mark] = {}
    order: List[EditorPlugin] = []

    def _children(plugin: EditorPlugin) -> Iterator[EditorPlugin]:
        return iter(sort_plugins(tables.get_dependencies(plugin) & members))

    for root in sort_plugins(members):
        if marks.get(root, _Mark.WHITE) is not _Mark.WHITE:
            continue

        marks[root] = _Mark.GRAY
        stack: List[Tuple[EditorPlugin, Iterator[EditorPlugin]]] = [(root, _children(root))]

        while stack:
            plugin, pending = stack[-1]
            descended = False

            for dep in pending:
                mark = marks.get(dep, _Mark.WHITE)
                if mark is _Mark.WHITE:
                    marks[dep] = _Mark.GRAY
                    stack.append((dep, _children(dep)))
                    descended = True
                    break
                if mark is _Mark.GRAY:
                    logger.warning(f"检测到循环依赖，涉及插件: {plugin_label(dep)}")

            if not descended:
                stack.pop()
                marks[plugin] = _Mark.BLACK
                order.append(plugin)

    return order
