# -*- coding: utf-8 -*-
"""
外部插件描述

第三方插件和付费（premium）插件不属于内置插件枚举，以 JS 名称字符串标识。
本模块定义它们的描述模型及导入路径的安全校验。
"""

import re
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# 允许的导入路径:
#   - 带作用域的 npm 包（可带子路径）: @scope/package, @scope/package/sub
#   - 普通 npm 包（可带子路径）: my-package, lodash/merge
#   - 最多向上两级的相对路径: ./plugin.js, ../../shared/plugin
VALID_IMPORT_PATH = re.compile(
    r"^(?:"
    r"@[a-z0-9][a-z0-9._-]*/[a-z0-9][a-z0-9._/-]*"
    r"|"
    r"[a-z0-9][a-z0-9._/-]*"
    r"|"
    r"(?:\.{1,2}/){1,2}(?:[a-zA-Z0-9_.-]+/)*[a-zA-Z0-9_.-]+"
    r")$",
    re.IGNORECASE,
)

_WINDOWS_DRIVE = re.compile(r"^[a-zA-Z]:")


def validate_import_path(path: str) -> str:
    """
    校验插件导入路径，拒绝绝对路径、URL 和过深的目录穿越

    Raises:
        ValueError: 路径格式非法
    """
    if path.startswith("/") or _WINDOWS_DRIVE.match(path) or path.startswith("\\\\"):
        raise ValueError(f"导入路径不允许使用绝对路径: {path}")

    if "://" in path:
        raise ValueError(f"导入路径不允许使用 URL: {path}")

    if "../../.." in path:
        raise ValueError(f"导入路径不允许向上穿越超过两级目录: {path}")

    if not VALID_IMPORT_PATH.match(path):
        raise ValueError(f"无效的导入路径格式，必须是 npm 包名或相对路径: {path}")

    return path


class CustomPlugin(BaseModel):
    """
    外部插件描述

    以 js_name 标识身份：两个描述的 js_name 相同即视为同一插件。

    注意 dependencies 只是调用方附带的说明信息，依赖解析只以集中注册的
    付费插件依赖表为准，不读取该字段。
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    js_name: str = Field(..., min_length=1, description="前端插件导出名称")
    import_path: Optional[str] = Field(
        default=None, description="npm 包名或相对路径，None 表示从主包导入"
    )
    toolbar_items: FrozenSet[str] = Field(
        default_factory=frozenset, description="插件提供的工具栏按钮"
    )
    dependencies: FrozenSet[str] = Field(
        default_factory=frozenset, description="调用方声明的依赖插件名称"
    )
    premium: bool = Field(default=False, description="是否从付费功能包导入")

    @field_validator("js_name")
    @classmethod
    def validate_js_name(cls, v):
        """验证插件名称"""
        if not v.strip():
            raise ValueError("插件名称不能为空")
        return v

    @field_validator("import_path")
    @classmethod
    def check_import_path(cls, v):
        """验证导入路径"""
        if not v:
            return None
        return validate_import_path(v)

    @classmethod
    def of(cls, js_name: str, import_path: str) -> "CustomPlugin":
        """从指定导入路径创建外部插件"""
        return cls(js_name=js_name, import_path=import_path)

    @classmethod
    def from_core(cls, js_name: str) -> "CustomPlugin":
        """创建从编辑器主包导入的插件"""
        return cls(js_name=js_name)

    @classmethod
    def from_premium(cls, js_name: str) -> "CustomPlugin":
        """创建从付费功能包导入的插件"""
        return cls(js_name=js_name, premium=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomPlugin):
            return NotImplemented
        return self.js_name == other.js_name

    def __hash__(self) -> int:
        return hash(self.js_name)

    def __str__(self) -> str:
        return (
            f"CustomPlugin(js_name='{self.js_name}', "
            f"import_path='{self.import_path}', premium={self.premium})"
        )
