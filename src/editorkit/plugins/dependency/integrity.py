# -*- coding: utf-8 -*-
"""
依赖图完整性检查

依赖表是手工维护的数据，作者可能误写出自环或循环依赖。排序器和依赖树对此只做
降级处理，这里提供一个显式的检查入口，供测试和命令行在发布前发现问题。
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import networkx as nx

from ...exceptions import CircularDependencyError
from ..symbols import EditorPlugin, plugin_label
from .tables import DEFAULT_TABLES, DependencyTables

logger = logging.getLogger(__name__)


@dataclass
class GraphReport:
    """依赖图检查报告"""

    node_count: int = 0
    edge_count: int = 0
    self_loops: List[Any] = field(default_factory=list)
    cycles: List[List[Any]] = field(default_factory=list)
    unknown_symbols: List[Any] = field(default_factory=list)

    @property
    def is_healthy(self) -> bool:
        return not (self.self_loops or self.cycles or self.unknown_symbols)


def check_graph_integrity(
    tables: Optional[DependencyTables] = None, strict: bool = False
) -> GraphReport:
    """
    检查依赖表的结构问题

    Args:
        tables: 依赖表，默认使用内置表
        strict: 发现循环依赖时是否抛出异常

    Returns:
        检查报告

    Raises:
        CircularDependencyError: strict 模式下存在循环依赖
    """
    tables = tables or DEFAULT_TABLES
    graph = tables.to_graph()

    report = GraphReport(
        node_count=graph.number_of_nodes(),
        edge_count=graph.number_of_edges(),
    )
    report.self_loops = list(nx.nodes_with_selfloops(graph))
    report.cycles = [cycle for cycle in nx.simple_cycles(graph) if len(cycle) > 1]

    referenced = list(tables.dependencies)
    for deps in tables.dependencies.values():
        referenced.extend(deps)
    for plugin, recs in tables.recommended.items():
        referenced.append(plugin)
        referenced.extend(recs)
    for deps in tables.premium_dependencies.values():
        referenced.extend(deps)

    unknown = {item for item in referenced if not isinstance(item, EditorPlugin)}
    report.unknown_symbols = sorted(unknown, key=str)

    if report.self_loops:
        logger.warning(
            f"依赖表存在自依赖: {[plugin_label(p) for p in report.self_loops]}"
        )
    if report.cycles:
        described = [[plugin_label(p) for p in cycle] for cycle in report.cycles]
        logger.warning(f"依赖表存在循环依赖: {described}")

    if strict and (report.self_loops or report.cycles):
        cycles = [[p] for p in report.self_loops] + report.cycles
        described = [[plugin_label(p) for p in cycle] for cycle in cycles]
        raise CircularDependencyError(f"检测到循环依赖: {described}", cycles)

    return report
