# -*- coding: utf-8 -*-
"""
依赖图完整性检查测试
"""

import logging

import pytest

from editorkit.exceptions import CircularDependencyError
from editorkit.plugins.dependency import DependencyTables, check_graph_integrity
from editorkit.plugins.symbols import EditorPlugin

P = EditorPlugin


class TestCheckGraphIntegrity:
    """测试依赖图检查"""

    def test_default_tables_are_healthy(self, tables):
        report = check_graph_integrity()
        assert report.is_healthy
        assert report.self_loops == []
        assert report.cycles == []
        assert report.unknown_symbols == []
        assert report.edge_count == sum(len(d) for d in tables.dependencies.values())
        assert report.node_count > 0

    def test_strict_passes_on_default_tables(self):
        assert check_graph_integrity(strict=True).is_healthy

    def test_cycle_is_reported(self, cyclic_tables: DependencyTables, caplog):
        with caplog.at_level(logging.WARNING):
            report = check_graph_integrity(cyclic_tables)

        assert not report.is_healthy
        assert len(report.cycles) == 1
        assert set(report.cycles[0]) == {P.BOLD, P.ITALIC, P.UNDERLINE}
        assert any("循环依赖" in r.getMessage() for r in caplog.records)

    def test_cycle_raises_in_strict_mode(self, cyclic_tables: DependencyTables):
        with pytest.raises(CircularDependencyError) as exc_info:
            check_graph_integrity(cyclic_tables, strict=True)
        assert len(exc_info.value.cycles) == 1

    def test_self_loop(self, self_loop_tables: DependencyTables):
        report = check_graph_integrity(self_loop_tables)
        assert report.self_loops == [P.BOLD]
        assert report.cycles == []
        assert not report.is_healthy

        with pytest.raises(CircularDependencyError) as exc_info:
            check_graph_integrity(self_loop_tables, strict=True)
        assert exc_info.value.cycles == [[P.BOLD]]

    def test_unknown_symbols(self):
        """测试依赖表中混入非插件符号"""
        broken = DependencyTables(
            {P.BOLD: {"Italic"}},
            recommended={P.HEADING: {"Paragraph"}},
            premium_dependencies={"ExportPdf": {"CloudServices"}},
        )
        report = check_graph_integrity(broken)
        assert report.unknown_symbols == ["CloudServices", "Italic", "Paragraph"]
        assert not report.is_healthy
