# -*- coding: utf-8 -*-
"""
插件依赖管理系统

提供依赖表、依赖解析、依赖校验、加载顺序计算和反向依赖查询。
模块级函数绑定到内置依赖表。
"""

from .integrity import GraphReport, check_graph_integrity
from .query import DependencyQuery
from .resolver import CORE_PLUGINS, DependencyResolver, walk_dependencies
from .sorter import topological_sort
from .tables import DEFAULT_TABLES, DependencyTables
from .validator import DependencyValidator

_resolver = DependencyResolver()
_validator = DependencyValidator()
_query = DependencyQuery()

resolve = _resolver.resolve
resolve_with_recommended = _resolver.resolve_with_recommended
resolve_with_premium = _resolver.resolve_with_premium
get_load_order = _resolver.get_load_order

validate_dependencies = _validator.validate_dependencies
validate_premium_dependencies = _validator.validate_premium_dependencies

get_dependents = _query.get_dependents
check_removal_impact = _query.check_removal_impact
get_premium_dependents = _query.get_premium_dependents
get_dependency_tree = _query.get_dependency_tree

__all__ = [
    "CORE_PLUGINS",
    "DEFAULT_TABLES",
    "DependencyTables",
    "DependencyResolver",
    "DependencyValidator",
    "DependencyQuery",
    "GraphReport",
    "check_graph_integrity",
    "walk_dependencies",
    "topological_sort",
    "resolve",
    "resolve_with_recommended",
    "resolve_with_premium",
    "get_load_order",
    "validate_dependencies",
    "validate_premium_dependencies",
    "get_dependents",
    "check_removal_impact",
    "get_premium_dependents",
    "get_dependency_tree",
]
