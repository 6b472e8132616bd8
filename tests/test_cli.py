# -*- coding: utf-8 -*-
"""
EditorKit 命令行接口测试
"""

from unittest.mock import patch

import pytest

from editorkit.cli import build_parser, main
from editorkit.exceptions import CircularDependencyError


def run_cli(capsys, *args):
    """运行命令行并返回 (退出码, 标准输出, 标准错误)"""
    with pytest.raises(SystemExit) as exc_info:
        main(list(args))
    captured = capsys.readouterr()
    return exc_info.value.code, captured.out, captured.err


class TestResolveCommand:
    def test_resolve(self, capsys):
        code, out, _ = run_cli(capsys, "resolve", "ImageCaption")
        assert code == 0
        assert out.split() == ["Essentials", "Paragraph", "Image", "ImageCaption"]

    def test_resolve_no_core(self, capsys):
        code, out, _ = run_cli(capsys, "resolve", "TODO_LIST", "--no-core")
        assert code == 0
        assert out.split() == ["List", "TodoList"]

    def test_resolve_premium(self, capsys):
        code, out, _ = run_cli(capsys, "resolve", "--premium", "ExportPdf", "--no-core")
        assert code == 0
        assert set(out.split()) == {"CloudServices", "CloudServicesCore"}

    def test_resolve_recommended(self, capsys):
        code, out, _ = run_cli(capsys, "resolve", "Link", "--recommended")
        assert code == 0
        assert "AutoLink" in out.split()

    def test_resolve_recommended_with_premium(self, capsys):
        code, out, _ = run_cli(capsys, "resolve", "Bold", "--recommended", "--premium", "ExportPdf")
        assert code == 0
        assert {"Bold", "CloudServices", "CloudServicesCore"} <= set(out.split())

    def test_recommended_rejects_no_core(self, capsys):
        code, out, err = run_cli(capsys, "resolve", "Bold", "--recommended", "--no-core")
        assert code == 2
        assert out == ""
        assert "--no-core" in err

    def test_resolve_preset(self, capsys):
        code, out, _ = run_cli(capsys, "resolve", "--preset", "empty")
        assert code == 0
        assert out.split() == ["Essentials", "Paragraph"]

    def test_unknown_plugin_exits_2(self, capsys):
        code, _, err = run_cli(capsys, "resolve", "NoSuchPlugin")
        assert code == 2
        assert "NoSuchPlugin" in err

    def test_unknown_preset_exits_2(self, capsys):
        code, _, err = run_cli(capsys, "order", "--preset", "gigantic")
        assert code == 2
        assert "gigantic" in err


class TestOtherCommands:
    def test_order(self, capsys):
        code, out, _ = run_cli(capsys, "order", "ImageCaption")
        assert code == 0
        lines = [line.split(". ", 1)[1] for line in out.splitlines()]
        assert lines.index("Image") < lines.index("ImageCaption")
        assert len(lines) == 4

    def test_validate_ok(self, capsys):
        code, out, _ = run_cli(capsys, "validate", "Image", "ImageCaption")
        assert code == 0

    def test_validate_missing(self, capsys):
        code, out, _ = run_cli(
            capsys, "validate", "ImageCaption", "Bold", "--premium", "ExportPdf"
        )
        assert code == 1
        assert "  - ImageCaption requires: Image" in out
        assert "  - ExportPdf requires: CloudServices" in out

    def test_tree(self, capsys):
        code, out, _ = run_cli(capsys, "tree", "ImageCaption")
        assert code == 0
        assert out == "└── ImageCaption\n    └── Image\n"

    def test_dependents(self, capsys):
        code, out, _ = run_cli(capsys, "dependents", "List")
        assert code == 0
        assert {"TodoList", "ListProperties", "ListFormatting"} <= set(out.split())

    def test_dependents_removal_impact(self, capsys):
        code, out, _ = run_cli(
            capsys, "dependents", "Image", "--current", "ImageCaption", "Bold"
        )
        assert code == 0
        assert "ImageCaption" in out
        assert "Bold" not in out

    def test_dependents_premium(self, capsys):
        code, out, _ = run_cli(
            capsys, "dependents", "List", "--premium", "MultiLevelList", "--premium", "ExportPdf"
        )
        assert code == 0
        assert "MultiLevelList (premium)" in out
        assert "ExportPdf" not in out

    def test_check_graph(self, capsys):
        code, out, _ = run_cli(capsys, "check-graph", "--strict")
        assert code == 0
        assert "循环依赖: 0" in out

    def test_check_graph_strict_failure(self, capsys, mocker):
        mocker.patch(
            "editorkit.cli.check_graph_integrity",
            side_effect=CircularDependencyError("检测到循环依赖", [["Bold", "Italic"]]),
        )
        code, _, err = run_cli(capsys, "check-graph", "--strict")
        assert code == 1
        assert "循环依赖" in err


class TestBuildCommand:
    def test_build(self, capsys, tmp_path):
        path = tmp_path / "editor.yaml"
        path.write_text(
            "preset: basic\n"
            "custom_plugins:\n"
            "  - js_name: ExportPdf\n"
            "    premium: true\n",
            encoding="utf-8",
        )
        code, out, _ = run_cli(capsys, "build", "--config", str(path))
        assert code == 0
        assert '"CloudServices"' in out
        assert '"ExportPdf"' in out

    def test_build_strict_failure(self, capsys, tmp_path):
        path = tmp_path / "editor.yaml"
        path.write_text("plugins: [ImageCaption]\ndependency_mode: strict\n", encoding="utf-8")
        code, _, err = run_cli(capsys, "build", "-c", str(path))
        assert code == 1
        assert "ImageCaption requires: Image" in err

    def test_build_missing_config(self, capsys, tmp_path):
        code, _, err = run_cli(capsys, "build", "--config", str(tmp_path / "none.yaml"))
        assert code == 1
        assert "配置文件不存在" in err


def test_main_reads_sys_argv(capsys):
    """测试不传参数时读取 sys.argv"""
    with patch("sys.argv", ["editorkit", "tree", "Bold"]):
        with pytest.raises(SystemExit) as exc_info:
            main()
    assert exc_info.value.code == 0
    assert capsys.readouterr().out == "└── Bold\n"


def test_subcommand_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
