# -*- coding: utf-8 -*-
"""
EditorKit 命令行接口
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Set

from .config import EditorAssemblyConfig
from .exceptions import CircularDependencyError, EditorKitError
from .plugins.custom import CustomPlugin
from .plugins.dependency import (
    DependencyQuery,
    DependencyResolver,
    DependencyValidator,
    check_graph_integrity,
)
from .plugins.symbols import EditorPlugin, lookup_plugin, plugin_label, sort_plugins
from .presets import EditorPreset
from .utils.enum_parser import parse_enum_strict


class _UsageError(Exception):
    """命令行参数无法解析为插件或预设"""


def _parse_plugins(names: List[str]) -> List[EditorPlugin]:
    plugins = []
    for name in names:
        plugin = lookup_plugin(name)
        if plugin is None:
            raise _UsageError(f"未知的插件: {name}")
        plugins.append(plugin)
    return plugins


def _collect_plugins(args: argparse.Namespace) -> Set[EditorPlugin]:
    """预设插件 + 命令行列出的插件"""
    plugins: Set[EditorPlugin] = set()
    if getattr(args, "preset", None):
        try:
            preset = parse_enum_strict(args.preset, EditorPreset)
        except ValueError as e:
            raise _UsageError(str(e)) from None
        plugins.update(preset.plugins)
    plugins.update(_parse_plugins(args.plugins))
    return plugins


def _collect_custom_plugins(args: argparse.Namespace) -> List[CustomPlugin]:
    custom_plugins = [CustomPlugin.from_core(name) for name in args.custom or ()]
    custom_plugins.extend(CustomPlugin.from_premium(name) for name in args.premium or ())
    return custom_plugins


def _print_plugins(plugins) -> None:
    for plugin in plugins:
        print(plugin.js_name)


def _cmd_resolve(args: argparse.Namespace) -> int:
    resolver = DependencyResolver()
    plugins = _collect_plugins(args)
    custom_plugins = _collect_custom_plugins(args)

    if args.recommended:
        if args.no_core:
            raise _UsageError("--recommended 总是包含核心插件，不能与 --no-core 同时使用")
        resolved = resolver.resolve_with_recommended(plugins, custom_plugins)
    else:
        resolved = resolver.resolve_with_premium(
            plugins, custom_plugins, not args.no_core
        )

    _print_plugins(sort_plugins(resolved))
    return 0


def _cmd_order(args: argparse.Namespace) -> int:
    load_order = DependencyResolver().get_load_order(_collect_plugins(args))
    for index, plugin in enumerate(load_order, 1):
        print(f"{index:>3}. {plugin.js_name}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    validator = DependencyValidator()
    plugins = _collect_plugins(args)

    missing = {
        plugin.js_name: deps
        for plugin, deps in validator.validate_dependencies(plugins).items()
    }
    missing.update(
        validator.validate_premium_dependencies(plugins, _collect_custom_plugins(args))
    )

    if not missing:
        print(f"全部 {len(plugins)} 个插件的依赖均已满足")
        return 0

    print("缺失的插件依赖:")
    for name in sorted(missing):
        deps = ", ".join(sorted(plugin_label(dep) for dep in missing[name]))
        print(f"  - {name} requires: {deps}")
    return 1


def _cmd_tree(args: argparse.Namespace) -> int:
    (plugin,) = _parse_plugins([args.plugin])
    print(DependencyQuery().get_dependency_tree(plugin), end="")
    return 0


def _cmd_dependents(args: argparse.Namespace) -> int:
    query = DependencyQuery()
    (plugin,) = _parse_plugins([args.plugin])

    if args.current is not None:
        affected = query.check_removal_impact(plugin, set(_parse_plugins(args.current)))
        if not affected:
            print(f"移除 {plugin.js_name} 不会影响当前配置")
            return 0
        print(f"移除 {plugin.js_name} 将影响:")
        _print_plugins(sort_plugins(affected))
    else:
        _print_plugins(sort_plugins(query.get_dependents(plugin)))

    if args.premium:
        for name in sorted(query.get_premium_dependents(plugin, args.premium)):
            print(f"{name} (premium)")
    return 0


def _cmd_check_graph(args: argparse.Namespace) -> int:
    try:
        report = check_graph_integrity(strict=args.strict)
    except CircularDependencyError as e:
        print(f"依赖图检查失败: {e}", file=sys.stderr)
        return 1

    print(f"节点数: {report.node_count}")
    print(f"边数: {report.edge_count}")
    print(f"自依赖: {len(report.self_loops)}")
    print(f"循环依赖: {len(report.cycles)}")
    print(f"未知符号: {len(report.unknown_symbols)}")
    print("依赖图健康" if report.is_healthy else "依赖图存在问题")
    return 0 if report.is_healthy else 1


def _cmd_build(args: argparse.Namespace) -> int:
    config = EditorAssemblyConfig.load_from_yaml(Path(args.config), args.env)
    plugin_set = config.to_builder().build()
    print(json.dumps(plugin_set.to_dict(), ensure_ascii=False, indent=2))
    return 0


def _add_selection_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("plugins", nargs="*", help="插件 JS 名称或成员名")
    parser.add_argument("--preset", "-p", help="以预设插件为起点")


def _add_external_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--custom", action="append", metavar="NAME", help="外部插件名称")
    parser.add_argument(
        "--premium", action="append", metavar="NAME", help="付费插件名称"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="editorkit",
        description="EditorKit - 富文本编辑器插件依赖解析工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="日志级别",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="解析插件依赖")
    _add_selection_arguments(resolve_parser)
    _add_external_arguments(resolve_parser)
    resolve_parser.add_argument(
        "--recommended", action="store_true", help="同时加入推荐插件"
    )
    resolve_parser.add_argument(
        "--no-core", action="store_true", help="不自动加入 Essentials 与 Paragraph"
    )
    resolve_parser.set_defaults(handler=_cmd_resolve)

    order_parser = subparsers.add_parser("order", help="输出插件加载顺序")
    _add_selection_arguments(order_parser)
    order_parser.set_defaults(handler=_cmd_order)

    validate_parser = subparsers.add_parser("validate", help="校验插件集的直接依赖")
    _add_selection_arguments(validate_parser)
    _add_external_arguments(validate_parser)
    validate_parser.set_defaults(handler=_cmd_validate)

    tree_parser = subparsers.add_parser("tree", help="显示插件依赖树")
    tree_parser.add_argument("plugin", help="插件 JS 名称或成员名")
    tree_parser.set_defaults(handler=_cmd_tree)

    dependents_parser = subparsers.add_parser("dependents", help="查询依赖于指定插件的插件")
    dependents_parser.add_argument("plugin", help="插件 JS 名称或成员名")
    dependents_parser.add_argument(
        "--current", nargs="*", metavar="PLUGIN", help="当前配置，用于评估移除影响"
    )
    dependents_parser.add_argument(
        "--premium", action="append", metavar="NAME", help="一并检查的付费插件名称"
    )
    dependents_parser.set_defaults(handler=_cmd_dependents)

    check_parser = subparsers.add_parser("check-graph", help="检查依赖表的完整性")
    check_parser.add_argument(
        "--strict", action="store_true", help="存在循环依赖时以错误退出"
    )
    check_parser.set_defaults(handler=_cmd_check_graph)

    build_cmd_parser = subparsers.add_parser("build", help="根据 YAML 配置构建插件集")
    build_cmd_parser.add_argument("--config", "-c", required=True, help="YAML 配置文件路径")
    build_cmd_parser.add_argument("--env", help="配置环境，默认读取 EDITORKIT_ENV")
    build_cmd_parser.set_defaults(handler=_cmd_build)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """命令行主入口"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        sys.exit(args.handler(args))
    except _UsageError as e:
        parser.error(str(e))
    except FileNotFoundError as e:
        print(f"{e}", file=sys.stderr)
        sys.exit(1)
    except EditorKitError as e:
        print(f"运行失败: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n用户中断", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
