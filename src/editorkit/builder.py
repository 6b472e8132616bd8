# -*- coding: utf-8 -*-
"""
插件集构建器

编辑器组装过程中的依赖处理步骤：从预设和显式插件收集初始插件集，按依赖模式
解析或校验，产出最终插件集、加载顺序和工具栏。
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .exceptions import MissingDependencyError, PluginConfigurationError
from .plugins.custom import CustomPlugin
from .plugins.dependency import (
    CORE_PLUGINS,
    DEFAULT_TABLES,
    DependencyResolver,
    DependencyTables,
    DependencyValidator,
    topological_sort,
)
from .plugins.symbols import EditorPlugin, plugin_label
from .presets import EditorPreset

logger = logging.getLogger(__name__)

TOOLBAR_SEPARATOR = "|"
TOOLBAR_LINE_BREAK = "-"


class DependencyMode(str, Enum):
    """
    插件依赖处理模式

    两种自动模式都会补全已添加外部插件在付费依赖表中登记的依赖，
    STRICT 模式同样校验这些付费依赖。
    """

    # 自动补全缺失的依赖（默认）
    AUTO_RESOLVE = "auto_resolve"
    # 补全依赖并加入推荐插件
    AUTO_RESOLVE_WITH_RECOMMENDED = "auto_resolve_with_recommended"
    # 依赖缺失时报错
    STRICT = "strict"
    # 不做任何依赖处理
    MANUAL = "manual"


@dataclass
class PluginSet:
    """构建结果"""

    plugins: FrozenSet[EditorPlugin]
    load_order: List[EditorPlugin]
    custom_plugins: Tuple[CustomPlugin, ...] = ()
    toolbar: Tuple[str, ...] = ()
    dependency_mode: DependencyMode = DependencyMode.AUTO_RESOLVE
    preset: Optional[EditorPreset] = None

    @property
    def js_names(self) -> List[str]:
        """按加载顺序排列的内置插件 JS 名称，外部插件追加在后"""
        names = [plugin.js_name for plugin in self.load_order]
        names.extend(custom.js_name for custom in self.custom_plugins)
        return names

    def to_dict(self) -> Dict:
        return {
            "preset": self.preset.name if self.preset else None,
            "dependency_mode": self.dependency_mode.value,
            "plugins": [plugin.js_name for plugin in self.load_order],
            "custom_plugins": [
                custom.model_dump(mode="json") for custom in self.custom_plugins
            ],
            "toolbar": list(self.toolbar),
        }


def validate_toolbar(items: Iterable[str]) -> Tuple[str, ...]:
    """
    校验工具栏项

    允许分隔符 "|" 和换行符 "-"，其余项不能为空白。

    Raises:
        PluginConfigurationError: 工具栏为空或含有空白项
    """
    if items is None:
        raise PluginConfigurationError("工具栏不能为 None")
    toolbar = tuple(items)
    if not toolbar:
        raise PluginConfigurationError("工具栏不能为空")
    for item in toolbar:
        if item is None:
            raise PluginConfigurationError("工具栏项不能为 None")
        if item in (TOOLBAR_SEPARATOR, TOOLBAR_LINE_BREAK):
            continue
        if not item.strip():
            raise PluginConfigurationError("工具栏项不能为空白")
    return toolbar


def format_missing_dependencies(missing: Dict[str, FrozenSet[EditorPlugin]]) -> str:
    """把缺失依赖格式化为错误消息"""
    lines = ["Missing plugin dependencies:"]
    for name in sorted(missing):
        deps = ", ".join(sorted(plugin_label(dep) for dep in missing[name]))
        lines.append(f"  - {name} requires: {deps}")
    return "\n".join(lines)


class PluginSetBuilder:
    """
    插件集构建器

    初始插件集 = 预设插件（仅在未调用 with_plugins 时）+ 显式插件 + 追加插件 - 移除插件。
    构建器只能使用一次，build() 之后请创建新的构建器。
    """

    def __init__(self, tables: Optional[DependencyTables] = None):
        self.tables = tables or DEFAULT_TABLES
        self._resolver = DependencyResolver(self.tables)
        self._validator = DependencyValidator(self.tables)

        self._preset: Optional[EditorPreset] = None
        self._plugins: Dict[EditorPlugin, None] = {}
        self._additional_plugins: Dict[EditorPlugin, None] = {}
        self._removed_plugins: Set[EditorPlugin] = set()
        self._custom_plugins: Dict[CustomPlugin, None] = {}
        self._toolbar: Optional[Tuple[str, ...]] = None
        self._dependency_mode = DependencyMode.AUTO_RESOLVE
        self._built = False

    # region 配置方法

    def with_preset(self, preset: EditorPreset) -> "PluginSetBuilder":
        self._preset = preset
        return self

    def with_plugins(self, *plugins: EditorPlugin) -> "PluginSetBuilder":
        """设置显式插件列表（覆盖预设插件）"""
        self._plugins = dict.fromkeys(plugins)
        return self

    def add_plugins(self, *plugins: EditorPlugin) -> "PluginSetBuilder":
        self._additional_plugins.update(dict.fromkeys(plugins))
        return self

    def add_plugin(self, plugin: EditorPlugin) -> "PluginSetBuilder":
        return self.add_plugins(plugin)

    def remove_plugins(self, *plugins: EditorPlugin) -> "PluginSetBuilder":
        self._removed_plugins.update(plugins)
        return self

    def remove_plugin(self, plugin: EditorPlugin) -> "PluginSetBuilder":
        return self.remove_plugins(plugin)

    def add_custom_plugin(self, plugin: CustomPlugin) -> "PluginSetBuilder":
        """添加外部插件，js_name 相同的描述只保留第一个"""
        if plugin in self._custom_plugins:
            logger.debug(f"外部插件 {plugin.js_name} 已存在，忽略重复添加")
            return self
        self._custom_plugins[plugin] = None
        return self

    def add_custom_plugins(self, *plugins: CustomPlugin) -> "PluginSetBuilder":
        for plugin in plugins:
            self.add_custom_plugin(plugin)
        return self

    def with_toolbar(self, *items: str) -> "PluginSetBuilder":
        self._toolbar = validate_toolbar(items)
        return self

    def with_dependency_mode(self, mode: DependencyMode) -> "PluginSetBuilder":
        if mode is None:
            raise PluginConfigurationError("依赖模式不能为 None")
        self._dependency_mode = DependencyMode(mode)
        return self

    # endregion

    @property
    def dependency_mode(self) -> DependencyMode:
        return self._dependency_mode

    @property
    def custom_plugins(self) -> Tuple[CustomPlugin, ...]:
        return tuple(self._custom_plugins)

    def _collect_initial_plugins(self) -> Set[EditorPlugin]:
        initial: Dict[EditorPlugin, None] = {}
        if self._preset is not None and not self._plugins:
            initial.update(dict.fromkeys(self._preset.plugins))
        initial.update(self._plugins)
        initial.update(self._additional_plugins)
        return {plugin for plugin in initial if plugin not in self._removed_plugins}

    def _process_dependencies(self, plugins: Set[EditorPlugin]) -> Set[EditorPlugin]:
        mode = self._dependency_mode
        custom_plugins = self.custom_plugins

        if mode == DependencyMode.AUTO_RESOLVE:
            resolved = self._resolver.resolve_with_premium(plugins, custom_plugins, True)

        elif mode == DependencyMode.AUTO_RESOLVE_WITH_RECOMMENDED:
            resolved = self._resolver.resolve_with_recommended(plugins, custom_plugins)

        elif mode == DependencyMode.STRICT:
            self._validate_strict(plugins)
            resolved = set(plugins)
            resolved.update(CORE_PLUGINS)

        else:
            resolved = set(plugins)

        added = len(resolved - plugins)
        if added:
            logger.debug(f"依赖模式 {mode.value} 补充了 {added} 个插件")
        return resolved

    def _validate_strict(self, plugins: Set[EditorPlugin]) -> None:
        missing: Dict[str, FrozenSet[EditorPlugin]] = {
            plugin.js_name: deps
            for plugin, deps in self._validator.validate_dependencies(plugins).items()
        }
        missing.update(
            self._validator.validate_premium_dependencies(plugins, self.custom_plugins)
        )

        if missing:
            raise MissingDependencyError(format_missing_dependencies(missing), missing)

    def get_resolved_plugins(self) -> Set[EditorPlugin]:
        """按当前配置计算最终插件集，便于在构建前检查"""
        return self._process_dependencies(self._collect_initial_plugins())

    def get_missing_dependencies(self) -> Dict[EditorPlugin, FrozenSet[EditorPlugin]]:
        """当前初始插件集中缺失的直接依赖（即自动模式下会被补全的部分）"""
        return self._validator.validate_dependencies(self._collect_initial_plugins())

    def _resolve_toolbar(self) -> Tuple[str, ...]:
        if self._toolbar is not None:
            return self._toolbar
        if self._preset is not None:
            return self._preset.default_toolbar
        return ()

    def build(self) -> PluginSet:
        """
        构建插件集

        Returns:
            最终插件集、加载顺序、外部插件和工具栏

        Raises:
            MissingDependencyError: 严格模式下存在缺失依赖
            PluginConfigurationError: 构建器已经使用过
        """
        if self._built:
            raise PluginConfigurationError("构建器只能使用一次，请创建新的构建器")

        initial = self._collect_initial_plugins()
        logger.info(
            f"开始构建插件集: 预设={self._preset.name if self._preset else None}, "
            f"初始插件 {len(initial)} 个, 依赖模式={self._dependency_mode.value}"
        )

        plugins = self._process_dependencies(initial)
        load_order = topological_sort(plugins, self.tables)
        self._built = True

        plugin_set = PluginSet(
            plugins=frozenset(plugins),
            load_order=load_order,
            custom_plugins=self.custom_plugins,
            toolbar=self._resolve_toolbar(),
            dependency_mode=self._dependency_mode,
            preset=self._preset,
        )
        logger.info(
            f"插件集构建完成: 内置插件 {len(load_order)} 个, "
            f"外部插件 {len(plugin_set.custom_plugins)} 个"
        )
        logger.debug(f"加载顺序: {[plugin_label(p) for p in load_order]}")
        return plugin_set
