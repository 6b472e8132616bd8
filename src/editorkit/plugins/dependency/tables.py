# -*- coding: utf-8 -*-
"""
插件依赖表

三张只读表：插件的硬依赖、推荐搭配插件，以及付费插件名到内置插件的硬依赖。
默认表在模块导入时构建一次，此后不再修改，可被任意多个调用方并发读取。
"""

from types import MappingProxyType
from typing import AbstractSet, FrozenSet, Iterable, Mapping, Optional

import networkx as nx

from ..symbols import EditorPlugin

_EMPTY: FrozenSet[EditorPlugin] = frozenset()


def _freeze(table: Optional[Mapping]) -> Mapping:
    if not table:
        return MappingProxyType({})
    return MappingProxyType({key: frozenset(values) for key, values in table.items()})


class DependencyTables:
    """
    插件依赖表

    所有查询都是 O(1) 的纯查找，未登记的插件或名称返回空集合而不是报错。
    """

    def __init__(
        self,
        dependencies: Mapping[EditorPlugin, Iterable[EditorPlugin]],
        recommended: Optional[Mapping[EditorPlugin, Iterable[EditorPlugin]]] = None,
        premium_dependencies: Optional[Mapping[str, Iterable[EditorPlugin]]] = None,
        cloud_services_required: Optional[AbstractSet[str]] = None,
    ):
        """
        Args:
            dependencies: 插件 -> 硬依赖集合
            recommended: 插件 -> 推荐搭配插件集合
            premium_dependencies: 付费插件 JS 名称 -> 硬依赖集合
            cloud_services_required: 需要云服务能力的付费插件名称
        """
        self._dependencies = _freeze(dependencies)
        self._recommended = _freeze(recommended)
        self._premium_dependencies = _freeze(premium_dependencies)
        self._cloud_services_required = frozenset(cloud_services_required or ())

    @property
    def dependencies(self) -> Mapping[EditorPlugin, FrozenSet[EditorPlugin]]:
        """硬依赖表（只读视图）"""
        return self._dependencies

    @property
    def recommended(self) -> Mapping[EditorPlugin, FrozenSet[EditorPlugin]]:
        """推荐插件表（只读视图）"""
        return self._recommended

    @property
    def premium_dependencies(self) -> Mapping[str, FrozenSet[EditorPlugin]]:
        """付费插件依赖表（只读视图）"""
        return self._premium_dependencies

    def get_dependencies(self, plugin: EditorPlugin) -> FrozenSet[EditorPlugin]:
        """获取插件的直接硬依赖"""
        return self._dependencies.get(plugin, _EMPTY)

    def get_recommended(self, plugin: EditorPlugin) -> FrozenSet[EditorPlugin]:
        """获取插件的推荐搭配插件"""
        return self._recommended.get(plugin, _EMPTY)

    def has_dependencies(self, plugin: EditorPlugin) -> bool:
        """检查插件是否有硬依赖"""
        return bool(self._dependencies.get(plugin))

    def get_premium_dependencies(self, name: str) -> FrozenSet[EditorPlugin]:
        """获取付费插件的硬依赖，未知名称返回空集合"""
        return self._premium_dependencies.get(name, _EMPTY)

    def has_premium_dependencies(self, name: str) -> bool:
        """检查付费插件是否有硬依赖"""
        return bool(self._premium_dependencies.get(name))

    def requires_cloud_services(self, name: str) -> bool:
        """检查付费插件是否需要云服务"""
        return name in self._cloud_services_required

    def known_premium_plugins(self) -> FrozenSet[str]:
        """登记了依赖信息的全部付费插件名称"""
        return frozenset(self._premium_dependencies)

    def cloud_services_required_plugins(self) -> FrozenSet[str]:
        """需要云服务的全部付费插件名称"""
        return self._cloud_services_required

    def to_graph(self) -> nx.DiGraph:
        """
        导出硬依赖图

        边方向为 插件 -> 依赖，所有出现在表中的插件（含只作为依赖出现的）都是节点。
        """
        graph = nx.DiGraph()
        for plugin, deps in self._dependencies.items():
            graph.add_node(plugin)
            for dep in deps:
                graph.add_edge(plugin, dep)
        return graph


def _build_default_tables() -> DependencyTables:
    """按官方文档整理的默认依赖表"""
    P = EditorPlugin
    deps = {}

    # ESSENTIALS 与 PARAGRAPH 是所有配置的基础，由解析器统一补充，不在表中登记

    # 图片: 所有图片相关插件依赖基础 Image 插件
    deps[P.IMAGE_TOOLBAR] = {P.IMAGE}
    deps[P.IMAGE_CAPTION] = {P.IMAGE}
    deps[P.IMAGE_STYLE] = {P.IMAGE}
    deps[P.IMAGE_RESIZE] = {P.IMAGE}
    deps[P.IMAGE_UPLOAD] = {P.IMAGE}
    deps[P.IMAGE_INSERT] = {P.IMAGE}
    deps[P.IMAGE_BLOCK] = {P.IMAGE}
    deps[P.IMAGE_INLINE] = {P.IMAGE}
    deps[P.LINK_IMAGE] = {P.IMAGE, P.LINK}
    deps[P.AUTO_IMAGE] = {P.IMAGE, P.CLIPBOARD}

    # 表格
    deps[P.TABLE_TOOLBAR] = {P.TABLE}
    deps[P.TABLE_PROPERTIES] = {P.TABLE}
    deps[P.TABLE_CELL_PROPERTIES] = {P.TABLE}
    deps[P.TABLE_CAPTION] = {P.TABLE}
    deps[P.TABLE_COLUMN_RESIZE] = {P.TABLE}

    # 链接、列表、缩进
    deps[P.AUTO_LINK] = {P.LINK}
    deps[P.TODO_LIST] = {P.LIST}
    deps[P.INDENT_BLOCK] = {P.INDENT}

    # 特殊字符: 各分类都依赖 SpecialCharacters
    deps[P.SPECIAL_CHARACTERS_ESSENTIALS] = {P.SPECIAL_CHARACTERS}
    deps[P.SPECIAL_CHARACTERS_ARROWS] = {P.SPECIAL_CHARACTERS}
    deps[P.SPECIAL_CHARACTERS_CURRENCY] = {P.SPECIAL_CHARACTERS}
    deps[P.SPECIAL_CHARACTERS_LATIN] = {P.SPECIAL_CHARACTERS}
    deps[P.SPECIAL_CHARACTERS_MATHEMATICAL] = {P.SPECIAL_CHARACTERS}
    deps[P.SPECIAL_CHARACTERS_TEXT] = {P.SPECIAL_CHARACTERS}

    # HTML 支持: Style 需要 GHS 才能应用 CSS 类
    deps[P.STYLE] = {P.GENERAL_HTML_SUPPORT}
    deps[P.HTML_COMMENT] = {P.GENERAL_HTML_SUPPORT}
    deps[P.HTML_EMBED] = {P.GENERAL_HTML_SUPPORT}
    deps[P.SOURCE_EDITING] = {P.GENERAL_HTML_SUPPORT}

    # 上传适配器
    deps[P.SIMPLE_UPLOAD_ADAPTER] = {P.IMAGE_UPLOAD}
    deps[P.BASE64_UPLOAD_ADAPTER] = {P.IMAGE_UPLOAD}

    # 受限编辑
    deps[P.STANDARD_EDITING_MODE] = {P.RESTRICTED_EDITING_MODE}

    # 云服务
    deps[P.CLOUD_SERVICES_UPLOAD_ADAPTER] = {P.CLOUD_SERVICES}
    deps[P.CLOUD_SERVICES] = {P.CLOUD_SERVICES_CORE}
    deps[P.EASY_IMAGE] = {P.CLOUD_SERVICES, P.IMAGE_UPLOAD}

    # 其他
    deps[P.MINIMAP] = {P.WIDGET}
    deps[P.EMOJI_PICKER] = {P.EMOJI}

    # 列表扩展
    deps[P.LIST_PROPERTIES] = {P.LIST}
    deps[P.LIST_FORMATTING] = {P.LIST}
    deps[P.ADJACENT_LISTS_SUPPORT] = {P.LIST}

    rec = {}
    rec[P.IMAGE] = {P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE, P.IMAGE_RESIZE}
    rec[P.TABLE] = {P.TABLE_TOOLBAR, P.TABLE_PROPERTIES, P.TABLE_CELL_PROPERTIES}
    rec[P.LINK] = {P.AUTO_LINK}
    rec[P.HEADING] = {P.PARAGRAPH}
    rec[P.CODE_BLOCK] = {P.AUTOFORMAT}
    rec[P.SPECIAL_CHARACTERS] = {P.SPECIAL_CHARACTERS_ESSENTIALS}
    rec[P.SOURCE_EDITING] = {P.GENERAL_HTML_SUPPORT, P.HTML_EMBED}
    rec[P.STYLE] = {P.GENERAL_HTML_SUPPORT}
    rec[P.INDENT] = {P.INDENT_BLOCK}
    rec[P.CLOUD_SERVICES] = {P.CLOUD_SERVICES_UPLOAD_ADAPTER}
    rec[P.EMOJI] = {P.EMOJI_PICKER}
    rec[P.LIST] = {P.LIST_PROPERTIES, P.TODO_LIST}

    # 导出/导入功能通过云服务完成文档格式转换
    cloud_services_required = {"ExportPdf", "ExportWord", "ImportWord"}

    cloud = {P.CLOUD_SERVICES}
    premium = {}
    premium["ExportPdf"] = cloud
    premium["ExportWord"] = cloud
    premium["ImportWord"] = cloud
    premium["AIAssistant"] = cloud
    premium["Pagination"] = set()
    premium["MultiLevelList"] = {P.LIST}
    premium["PasteFromOfficeEnhanced"] = {P.PASTE_FROM_OFFICE}
    premium["TrackChangesData"] = set()
    premium["TrackChangesPreview"] = set()
    premium["RealTimeCollaboration"] = cloud
    premium["PresenceList"] = cloud
    # Comments 与 TrackChanges 可独立工作，不登记云服务硬依赖
    premium["CKBox"] = cloud
    premium["CKBoxImageEdit"] = cloud

    return DependencyTables(deps, rec, premium, cloud_services_required)


DEFAULT_TABLES = _build_default_tables()
