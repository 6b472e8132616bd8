# -*- coding: utf-8 -*-
"""
编辑器组装配置

基于 Pydantic 的插件集配置，支持环境变量解析和多环境配置，
可从字典或 YAML 文件加载并转换为 PluginSetBuilder。
"""

import copy
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .builder import DependencyMode, PluginSetBuilder
from .exceptions import PluginConfigurationError
from .plugins.custom import CustomPlugin
from .plugins.dependency import DependencyTables
from .plugins.symbols import EditorPlugin, lookup_plugin
from .presets import EditorPreset
from .utils.enum_parser import parse_enum_strict

logger = logging.getLogger(__name__)

# 环境变量匹配模式: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\${([A-Za-z0-9_]+)}")

# 选择配置环境的环境变量
ENV_SELECTOR = "EDITORKIT_ENV"
DEFAULT_ENV = "development"


def deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    深度合并两个字典，overrides 中的值会覆盖 base 中的值
    """
    result = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and key in result and isinstance(result[key], dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _to_plugin(value: Any) -> EditorPlugin:
    if isinstance(value, EditorPlugin):
        return value
    plugin = lookup_plugin(value) if isinstance(value, str) else None
    if plugin is None:
        raise ValueError(f"未知的插件: {value!r}")
    return plugin


class EditorAssemblyConfig(BaseModel):
    """
    插件集组装配置

    增强功能包括：
    1. **严格模式验证**：禁止额外字段，防止配置错误
    2. **环境变量解析**：自动解析 "${VAR_NAME}" 格式的环境变量
    3. **多环境配置**：根据 EDITORKIT_ENV 环境变量加载不同环境的配置
    """

    preset: Optional[EditorPreset] = None
    plugins: List[EditorPlugin] = Field(default_factory=list)
    remove_plugins: List[EditorPlugin] = Field(default_factory=list)
    custom_plugins: List[CustomPlugin] = Field(default_factory=list)
    toolbar: Optional[List[str]] = None
    dependency_mode: DependencyMode = DependencyMode.AUTO_RESOLVE

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @model_validator(mode="before")
    @classmethod
    def _resolve_env_vars(cls, data: Any) -> Any:
        """
        在其他验证执行前递归解析环境变量

        Raises:
            ValueError: 当环境变量未设置时抛出
        """
        if not isinstance(data, dict):
            return data

        def _resolve(value: Any) -> Any:
            if isinstance(value, str):
                match = ENV_VAR_PATTERN.match(value)
                if not match:
                    return value
                env_var_name = match.group(1)
                env_var_value = os.getenv(env_var_name)
                if env_var_value is None:
                    raise ValueError(f"环境变量 '{env_var_name}' 未设置")
                return env_var_value
            elif isinstance(value, dict):
                return {k: _resolve(v) for k, v in value.items()}
            elif isinstance(value, list):
                return [_resolve(v) for v in value]
            else:
                return value

        return _resolve(data)

    @field_validator("preset", mode="before")
    @classmethod
    def validate_preset(cls, v):
        if v is None or v == "":
            return None
        return parse_enum_strict(v, EditorPreset)

    @field_validator("plugins", "remove_plugins", mode="before")
    @classmethod
    def validate_plugins(cls, v):
        """插件可以写 JS 名称（ImageCaption）或成员名（IMAGE_CAPTION）"""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [_to_plugin(item) for item in v]

    @field_validator("custom_plugins", mode="before")
    @classmethod
    def validate_custom_plugins(cls, v):
        """字符串形式的外部插件视为从主包导入"""
        if v is None:
            return []
        return [{"js_name": item} if isinstance(item, str) else item for item in v]

    @field_validator("toolbar")
    @classmethod
    def validate_toolbar(cls, v):
        if v is not None and not v:
            raise ValueError("工具栏不能为空列表")
        return v

    @field_validator("dependency_mode", mode="before")
    @classmethod
    def validate_dependency_mode(cls, v):
        if v is None:
            return DependencyMode.AUTO_RESOLVE
        return parse_enum_strict(v, DependencyMode)

    @classmethod
    def load_from_dict(
        cls,
        config_data: Dict[str, Any],
        env: Optional[str] = None,
    ) -> "EditorAssemblyConfig":
        """
        从字典加载配置，支持环境特定的配置覆盖

        配置结构示例：
        {
            "default": {
                "preset": "standard",
                "dependency_mode": "auto_resolve"
            },
            "production": {
                "dependency_mode": "strict"
            }
        }

        不含环境分节的字典直接作为配置使用。

        Args:
            config_data: 配置字典
            env: 目标环境，为 None 时使用 os.getenv("EDITORKIT_ENV", "development")

        Raises:
            PluginConfigurationError: 配置验证失败
        """
        config_data = config_data or {}
        if any(key in cls.model_fields for key in config_data):
            merged_config = config_data
        else:
            if env is None:
                env = os.getenv(ENV_SELECTOR, DEFAULT_ENV)
            logger.debug(f"加载 {env} 环境的编辑器配置")
            base_config = config_data.get("default") or {}
            env_config = config_data.get(env) or {}
            merged_config = deep_merge(base_config, env_config)

        try:
            return cls(**merged_config)
        except ValidationError as e:
            raise PluginConfigurationError(f"编辑器配置无效: {e}") from e

    @classmethod
    def load_from_yaml(
        cls, file_path: Union[str, Path], env: Optional[str] = None
    ) -> "EditorAssemblyConfig":
        """
        从 YAML 文件加载配置

        Raises:
            FileNotFoundError: 文件不存在
            PluginConfigurationError: YAML 格式错误或配置验证失败
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PluginConfigurationError(f"YAML文件格式错误: {e}") from e

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise PluginConfigurationError(f"配置文件顶层必须是映射: {file_path}")

        return cls.load_from_dict(config_dict, env)

    def to_builder(self, tables: Optional[DependencyTables] = None) -> PluginSetBuilder:
        """转换为已配置好的插件集构建器"""
        builder = PluginSetBuilder(tables).with_dependency_mode(self.dependency_mode)
        if self.preset is not None:
            builder.with_preset(self.preset)
        if self.plugins:
            builder.with_plugins(*self.plugins)
        if self.remove_plugins:
            builder.remove_plugins(*self.remove_plugins)
        if self.custom_plugins:
            builder.add_custom_plugins(*self.custom_plugins)
        if self.toolbar is not None:
            builder.with_toolbar(*self.toolbar)
        return builder
