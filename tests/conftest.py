# -*- coding: utf-8 -*-
"""
全局测试配置
提供共享的依赖表、解析器和查询 fixture
"""

import pytest

from editorkit.plugins.dependency import (
    DEFAULT_TABLES,
    DependencyQuery,
    DependencyResolver,
    DependencyTables,
    DependencyValidator,
)
from editorkit.plugins.symbols import EditorPlugin

P = EditorPlugin


@pytest.fixture
def tables() -> DependencyTables:
    """内置依赖表"""
    return DEFAULT_TABLES


@pytest.fixture
def resolver() -> DependencyResolver:
    return DependencyResolver()


@pytest.fixture
def validator() -> DependencyValidator:
    return DependencyValidator()


@pytest.fixture
def query() -> DependencyQuery:
    return DependencyQuery()


@pytest.fixture
def all_plugins():
    """完整的插件全集"""
    return frozenset(EditorPlugin)


@pytest.fixture
def cyclic_tables() -> DependencyTables:
    """人为构造的含环依赖表: Bold -> Italic -> Underline -> Bold"""
    return DependencyTables(
        {
            P.BOLD: {P.ITALIC},
            P.ITALIC: {P.UNDERLINE},
            P.UNDERLINE: {P.BOLD},
            P.IMAGE_CAPTION: {P.IMAGE},
        },
        recommended={P.IMAGE: {P.IMAGE_CAPTION}},
    )


@pytest.fixture
def self_loop_tables() -> DependencyTables:
    """含自依赖的依赖表"""
    return DependencyTables({P.BOLD: {P.BOLD}, P.ITALIC: {P.BOLD}})


@pytest.fixture
def stray_symbol_tables() -> DependencyTables:
    """依赖项误写为字符串而非插件成员的依赖表"""
    return DependencyTables({P.BOLD: {"Italic"}})
