# -*- coding: utf-8 -*-
"""
外部插件描述测试
"""

import pytest
from pydantic import ValidationError

from editorkit.plugins.custom import CustomPlugin, validate_import_path


class TestCustomPlugin:
    """测试外部插件描述"""

    def test_factories(self):
        plugin = CustomPlugin.of("MyPlugin", "./plugins/my-plugin.js")
        assert plugin.js_name == "MyPlugin"
        assert plugin.import_path == "./plugins/my-plugin.js"
        assert not plugin.premium

        core = CustomPlugin.from_core("Markdown")
        assert core.import_path is None
        assert not core.premium

        premium = CustomPlugin.from_premium("ExportPdf")
        assert premium.premium
        assert premium.import_path is None

    def test_defaults(self):
        plugin = CustomPlugin(js_name="Widget")
        assert plugin.toolbar_items == frozenset()
        assert plugin.dependencies == frozenset()

    def test_equality_by_js_name(self):
        a = CustomPlugin.from_core("Comments")
        b = CustomPlugin.from_premium("Comments")
        c = CustomPlugin.from_core("TrackChanges")
        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_frozen(self):
        plugin = CustomPlugin.from_core("Widget")
        with pytest.raises(ValidationError):
            plugin.js_name = "Other"

    def test_empty_js_name_rejected(self):
        with pytest.raises(ValidationError):
            CustomPlugin(js_name="")
        with pytest.raises(ValidationError):
            CustomPlugin(js_name="   ")

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            CustomPlugin(js_name="Widget", version="1.0")

    def test_empty_import_path_is_none(self):
        assert CustomPlugin(js_name="Widget", import_path="").import_path is None

    def test_str(self):
        text = str(CustomPlugin.from_premium("ExportPdf"))
        assert "ExportPdf" in text
        assert "premium=True" in text


class TestImportPathValidation:
    """测试导入路径校验"""

    @pytest.mark.parametrize(
        "path",
        [
            "@ckeditor/ckeditor5-markdown-gfm",
            "@scope/package/sub/path",
            "my-package",
            "lodash/merge",
            "./plugin.js",
            "../shared/plugin.js",
            "../../shared/plugins/plugin.js",
        ],
    )
    def test_valid_paths(self, path):
        assert validate_import_path(path) == path
        assert CustomPlugin.of("P", path).import_path == path

    @pytest.mark.parametrize(
        "path",
        [
            "/etc/passwd",
            "C:\\plugins\\x.js",
            "\\\\server\\share\\x.js",
            "https://cdn.example.com/plugin.js",
            "../../../secret.js",
            "plugin with spaces",
            "$(rm -rf)",
        ],
    )
    def test_invalid_paths(self, path):
        with pytest.raises(ValueError):
            validate_import_path(path)
        with pytest.raises(ValidationError):
            CustomPlugin.of("P", path)
