# -*- coding: utf-8 -*-
"""
插件依赖解析器测试
"""

import pytest

from editorkit.plugins.custom import CustomPlugin
from editorkit.plugins.dependency import (
    CORE_PLUGINS,
    DependencyResolver,
    DependencyTables,
    get_load_order,
    resolve,
    resolve_with_premium,
    resolve_with_recommended,
)
from editorkit.plugins.symbols import EditorPlugin

P = EditorPlugin


class TestResolve:
    """测试硬依赖解析"""

    def test_resolve_image_caption(self, resolver: DependencyResolver):
        """测试解析 ImageCaption 得到精确的闭包"""
        assert resolver.resolve({P.IMAGE_CAPTION}) == {
            P.ESSENTIALS,
            P.PARAGRAPH,
            P.IMAGE,
            P.IMAGE_CAPTION,
        }

    def test_resolve_diamond(self, resolver: DependencyResolver):
        """测试共享依赖（菱形）只出现一次"""
        result = resolver.resolve({P.LINK_IMAGE, P.AUTO_IMAGE})
        assert {
            P.IMAGE,
            P.LINK,
            P.CLIPBOARD,
            P.LINK_IMAGE,
            P.AUTO_IMAGE,
            P.ESSENTIALS,
            P.PARAGRAPH,
        } <= result

    def test_resolve_transitive(self, resolver: DependencyResolver):
        """测试多级传递依赖"""
        result = resolver.resolve({P.BASE64_UPLOAD_ADAPTER}, include_core_plugins=False)
        assert result == {P.BASE64_UPLOAD_ADAPTER, P.IMAGE_UPLOAD, P.IMAGE}

        result = resolver.resolve({P.EASY_IMAGE}, include_core_plugins=False)
        assert result == {
            P.EASY_IMAGE,
            P.CLOUD_SERVICES,
            P.CLOUD_SERVICES_CORE,
            P.IMAGE_UPLOAD,
            P.IMAGE,
        }

    def test_resolve_without_core_plugins(self, resolver: DependencyResolver):
        """测试不加入基础插件"""
        result = resolver.resolve({P.BOLD}, include_core_plugins=False)
        assert result == {P.BOLD}
        for core in CORE_PLUGINS:
            assert core not in result

    def test_resolve_empty(self, resolver: DependencyResolver):
        assert resolver.resolve(set()) == set(CORE_PLUGINS)
        assert resolver.resolve(set(), include_core_plugins=False) == set()

    def test_resolve_contains_direct_dependencies(self, resolver, tables, all_plugins):
        """测试每个插件的解析结果包含其直接依赖、自身和基础插件"""
        for plugin in all_plugins:
            result = resolver.resolve({plugin})
            assert tables.get_dependencies(plugin) | {plugin} | set(CORE_PLUGINS) <= result

    def test_resolve_is_idempotent(self, resolver: DependencyResolver):
        """测试对已闭合的集合再次解析不会新增插件"""
        closed = resolver.resolve({P.LINK_IMAGE, P.EASY_IMAGE, P.STYLE, P.TODO_LIST})
        assert resolver.resolve(closed) == closed

    def test_resolve_returns_new_set(self, resolver: DependencyResolver):
        """测试不修改调用方传入的集合"""
        requested = {P.IMAGE_CAPTION}
        resolver.resolve(requested)
        assert requested == {P.IMAGE_CAPTION}

    def test_resolve_full_universe(self, resolver, all_plugins):
        assert resolver.resolve(all_plugins) == set(all_plugins)

    def test_resolve_terminates_on_cycle(self, cyclic_tables: DependencyTables):
        """测试依赖表存在环时解析仍然终止"""
        resolver = DependencyResolver(cyclic_tables)
        result = resolver.resolve({P.BOLD}, include_core_plugins=False)
        assert result == {P.BOLD, P.ITALIC, P.UNDERLINE}

    def test_resolve_terminates_on_self_loop(self, self_loop_tables: DependencyTables):
        resolver = DependencyResolver(self_loop_tables)
        assert resolver.resolve({P.ITALIC}, include_core_plugins=False) == {
            P.ITALIC,
            P.BOLD,
        }


class TestResolveWithRecommended:
    """测试附带推荐插件的解析"""

    def test_superset_of_resolve(self, resolver, all_plugins):
        for plugin in all_plugins:
            assert resolver.resolve_with_recommended({plugin}) >= resolver.resolve({plugin})

    def test_link_adds_auto_link(self, resolver: DependencyResolver):
        result = resolver.resolve_with_recommended({P.LINK})
        assert P.AUTO_LINK in result

    def test_recommended_of_dependencies_are_included(self, resolver):
        """测试对硬依赖解析出的插件同样查看推荐项"""
        result = resolver.resolve_with_recommended({P.IMAGE_CAPTION})
        assert {P.IMAGE_TOOLBAR, P.IMAGE_STYLE, P.IMAGE_RESIZE} <= result

    def test_recommendations_expand_only_one_hop(self, resolver):
        """测试推荐插件自身的推荐项不会继续展开"""
        result = resolver.resolve_with_recommended({P.LIST})
        assert {P.LIST_PROPERTIES, P.TODO_LIST} <= result

        # CloudServices 推荐 CloudServicesUploadAdapter；
        # EasyImage 的依赖 CloudServices 在硬解析结果中，因此其推荐项被加入
        result = resolver.resolve_with_recommended({P.EASY_IMAGE})
        assert P.CLOUD_SERVICES_UPLOAD_ADAPTER in result

    def test_recommendation_of_recommendation_is_not_followed(self):
        """测试第二代推荐项不被加入"""
        custom = DependencyTables(
            {},
            recommended={
                P.HEADING: {P.BOLD},
                P.BOLD: {P.ITALIC},
            },
        )
        resolver = DependencyResolver(custom)
        result = resolver.resolve_with_recommended({P.HEADING})
        assert P.BOLD in result
        assert P.ITALIC not in result

    def test_recommended_hard_dependencies_are_resolved(self):
        """测试推荐插件的硬依赖被完整解析"""
        custom = DependencyTables(
            {P.LINK_IMAGE: {P.LINK, P.IMAGE}},
            recommended={P.HEADING: {P.LINK_IMAGE}},
        )
        result = DependencyResolver(custom).resolve_with_recommended({P.HEADING})
        assert {P.LINK_IMAGE, P.LINK, P.IMAGE} <= result

    def test_always_includes_core_plugins(self, resolver):
        assert set(CORE_PLUGINS) <= resolver.resolve_with_recommended({P.BOLD})

    def test_premium_dependencies_are_resolved(self, resolver: DependencyResolver):
        result = resolver.resolve_with_recommended({P.BOLD}, ["ExportPdf"])
        assert {P.CLOUD_SERVICES, P.CLOUD_SERVICES_CORE} <= result

    def test_premium_dependencies_skip_recommendations(self):
        """测试付费插件依赖只解析硬依赖，不展开推荐项"""
        custom = DependencyTables(
            {},
            recommended={P.LIST: {P.TODO_LIST}},
            premium_dependencies={"MultiLevelList": {P.LIST}},
        )
        result = DependencyResolver(custom).resolve_with_recommended(set(), ["MultiLevelList"])
        assert P.LIST in result
        assert P.TODO_LIST not in result


class TestResolveWithPremium:
    """测试附带付费插件依赖的解析"""

    def test_export_pdf_pulls_cloud_services(self, resolver: DependencyResolver):
        result = resolver.resolve_with_premium(
            {P.ESSENTIALS, P.PARAGRAPH}, [CustomPlugin.from_premium("ExportPdf")]
        )
        assert P.CLOUD_SERVICES in result
        assert P.CLOUD_SERVICES_CORE in result

    def test_accepts_plain_names(self, resolver: DependencyResolver):
        result = resolver.resolve_with_premium(set(), ["MultiLevelList"])
        assert P.LIST in result

    def test_unknown_premium_has_no_dependencies(self, resolver: DependencyResolver):
        result = resolver.resolve_with_premium({P.BOLD}, ["UnknownPlugin"])
        assert result == resolver.resolve({P.BOLD})

    def test_none_custom_plugins(self, resolver: DependencyResolver):
        assert resolver.resolve_with_premium({P.BOLD}, None) == resolver.resolve({P.BOLD})

    def test_descriptor_dependencies_are_ignored(self, resolver: DependencyResolver):
        """测试外部插件描述上附带的依赖不参与解析"""
        plugin = CustomPlugin(js_name="MyWidget", dependencies=frozenset({"Table"}))
        result = resolver.resolve_with_premium(set(), [plugin])
        assert P.TABLE not in result

    def test_include_core_plugins_flag(self, resolver: DependencyResolver):
        result = resolver.resolve_with_premium(set(), ["ExportPdf"], False)
        assert result == {P.CLOUD_SERVICES, P.CLOUD_SERVICES_CORE}


class TestLoadOrder:
    """测试加载顺序"""

    def test_get_load_order(self, resolver: DependencyResolver):
        order = resolver.get_load_order({P.IMAGE_CAPTION})
        assert order.index(P.IMAGE) < order.index(P.IMAGE_CAPTION)
        assert order.index(P.ESSENTIALS) < order.index(P.IMAGE_CAPTION)
        assert order.index(P.PARAGRAPH) < order.index(P.IMAGE_CAPTION)
        assert len(order) == 4

    def test_module_level_shortcuts(self):
        """测试绑定到内置依赖表的模块级函数"""
        assert resolve({P.IMAGE_CAPTION}) == {
            P.ESSENTIALS,
            P.PARAGRAPH,
            P.IMAGE,
            P.IMAGE_CAPTION,
        }
        assert P.AUTO_LINK in resolve_with_recommended({P.LINK})
        assert P.CLOUD_SERVICES in resolve_with_premium(set(), ["ExportWord"])
        order = get_load_order({P.TODO_LIST})
        assert order.index(P.LIST) < order.index(P.TODO_LIST)


@pytest.mark.parametrize(
    "requested, expected_member",
    [
        ({P.STYLE}, P.GENERAL_HTML_SUPPORT),
        ({P.STANDARD_EDITING_MODE}, P.RESTRICTED_EDITING_MODE),
        ({P.MINIMAP}, P.WIDGET),
        ({P.EMOJI_PICKER}, P.EMOJI),
        ({P.INDENT_BLOCK}, P.INDENT),
    ],
)
def test_resolve_pulls_dependency(resolver, requested, expected_member):
    """测试常见插件的依赖被补全"""
    assert expected_member in resolver.resolve(requested)


class TestStraySymbols:
    """测试依赖表中混入非插件符号时按叶子节点处理"""

    def test_resolve_treats_stray_symbol_as_leaf(self, stray_symbol_tables: DependencyTables):
        resolver = DependencyResolver(stray_symbol_tables)
        assert resolver.resolve({P.BOLD}, include_core_plugins=False) == {P.BOLD, "Italic"}

    def test_load_order_places_stray_symbol_first(self, stray_symbol_tables: DependencyTables):
        order = DependencyResolver(stray_symbol_tables).get_load_order({P.BOLD})
        assert order.index("Italic") < order.index(P.BOLD)
        assert len(order) == 4
