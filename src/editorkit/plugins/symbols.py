# -*- coding: utf-8 -*-
"""
编辑器插件符号表

定义富文本编辑器的一方插件闭集枚举。每个插件对应前端编辑器包中的一个导出，
带有 JS 名称、所属类别以及它提供的工具栏按钮标识。
"""

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple


class PluginCategory(str, Enum):
    """插件类别"""

    CORE = "core"
    BASIC_STYLES = "basic_styles"
    FONT = "font"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LINK = "link"
    IMAGE = "image"
    UPLOAD = "upload"
    TABLE = "table"
    MEDIA = "media"
    CODE = "code"
    SPECIAL = "special"
    EDITING = "editing"
    MENTION = "mention"
    DOCUMENT = "document"
    HTML = "html"
    RESTRICTED = "restricted"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        """类别的展示名称"""
        return _CATEGORY_DISPLAY_NAMES[self]


_CATEGORY_DISPLAY_NAMES: Dict[PluginCategory, str] = {
    PluginCategory.CORE: "Core",
    PluginCategory.BASIC_STYLES: "Basic Styles",
    PluginCategory.FONT: "Font",
    PluginCategory.PARAGRAPH: "Paragraph",
    PluginCategory.LIST: "List",
    PluginCategory.LINK: "Link",
    PluginCategory.IMAGE: "Image",
    PluginCategory.UPLOAD: "Upload",
    PluginCategory.TABLE: "Table",
    PluginCategory.MEDIA: "Media",
    PluginCategory.CODE: "Code",
    PluginCategory.SPECIAL: "Special Content",
    PluginCategory.EDITING: "Editing",
    PluginCategory.MENTION: "Mention",
    PluginCategory.DOCUMENT: "Document",
    PluginCategory.HTML: "HTML Support",
    PluginCategory.RESTRICTED: "Restricted Editing",
    PluginCategory.CUSTOM: "Custom",
}


class EditorPlugin(Enum):
    """
    编辑器一方插件枚举

    成员值为 (js_name, category, *toolbar_items)。成员身份即插件身份，
    依赖表、预设和解析结果都以成员本身作为键。
    """

    # 核心插件
    ESSENTIALS = ("Essentials", PluginCategory.CORE)
    PARAGRAPH = ("Paragraph", PluginCategory.CORE)
    UNDO = ("Undo", PluginCategory.CORE, "undo", "redo")
    CLIPBOARD = ("Clipboard", PluginCategory.CORE)
    TYPING = ("Typing", PluginCategory.CORE)
    SELECT_ALL = ("SelectAll", PluginCategory.CORE, "selectAll")

    # 基础样式
    BOLD = ("Bold", PluginCategory.BASIC_STYLES, "bold")
    ITALIC = ("Italic", PluginCategory.BASIC_STYLES, "italic")
    UNDERLINE = ("Underline", PluginCategory.BASIC_STYLES, "underline")
    STRIKETHROUGH = ("Strikethrough", PluginCategory.BASIC_STYLES, "strikethrough")
    CODE = ("Code", PluginCategory.BASIC_STYLES, "code")
    SUPERSCRIPT = ("Superscript", PluginCategory.BASIC_STYLES, "superscript")
    SUBSCRIPT = ("Subscript", PluginCategory.BASIC_STYLES, "subscript")

    # 字体
    FONT_SIZE = ("FontSize", PluginCategory.FONT, "fontSize")
    FONT_FAMILY = ("FontFamily", PluginCategory.FONT, "fontFamily")
    FONT_COLOR = ("FontColor", PluginCategory.FONT, "fontColor")
    FONT_BACKGROUND_COLOR = (
        "FontBackgroundColor",
        PluginCategory.FONT,
        "fontBackgroundColor",
    )

    # 段落格式
    HEADING = ("Heading", PluginCategory.PARAGRAPH, "heading")
    ALIGNMENT = ("Alignment", PluginCategory.PARAGRAPH, "alignment")
    INDENT = ("Indent", PluginCategory.PARAGRAPH, "indent", "outdent")
    INDENT_BLOCK = ("IndentBlock", PluginCategory.PARAGRAPH)
    BLOCK_QUOTE = ("BlockQuote", PluginCategory.PARAGRAPH, "blockQuote")
    LINE_HEIGHT = ("LineHeight", PluginCategory.PARAGRAPH, "lineHeight")

    # 列表
    LIST = ("List", PluginCategory.LIST, "bulletedList", "numberedList")
    TODO_LIST = ("TodoList", PluginCategory.LIST, "todoList")

    # 链接
    LINK = ("Link", PluginCategory.LINK, "link")
    AUTO_LINK = ("AutoLink", PluginCategory.LINK)

    # 图片
    IMAGE = ("Image", PluginCategory.IMAGE)
    IMAGE_TOOLBAR = ("ImageToolbar", PluginCategory.IMAGE)
    IMAGE_CAPTION = ("ImageCaption", PluginCategory.IMAGE)
    IMAGE_STYLE = ("ImageStyle", PluginCategory.IMAGE)
    IMAGE_RESIZE = ("ImageResize", PluginCategory.IMAGE)
    IMAGE_UPLOAD = ("ImageUpload", PluginCategory.IMAGE, "imageUpload")
    IMAGE_INSERT = ("ImageInsert", PluginCategory.IMAGE, "insertImage")
    IMAGE_BLOCK = ("ImageBlock", PluginCategory.IMAGE)
    IMAGE_INLINE = ("ImageInline", PluginCategory.IMAGE)
    LINK_IMAGE = ("LinkImage", PluginCategory.IMAGE, "linkImage")
    AUTO_IMAGE = ("AutoImage", PluginCategory.IMAGE)

    # 上传适配器
    BASE64_UPLOAD_ADAPTER = ("Base64UploadAdapter", PluginCategory.UPLOAD)
    SIMPLE_UPLOAD_ADAPTER = ("SimpleUploadAdapter", PluginCategory.UPLOAD)

    # 表格
    TABLE = ("Table", PluginCategory.TABLE, "insertTable")
    TABLE_TOOLBAR = ("TableToolbar", PluginCategory.TABLE)
    TABLE_PROPERTIES = ("TableProperties", PluginCategory.TABLE)
    TABLE_CELL_PROPERTIES = ("TableCellProperties", PluginCategory.TABLE)
    TABLE_CAPTION = ("TableCaption", PluginCategory.TABLE)
    TABLE_COLUMN_RESIZE = ("TableColumnResize", PluginCategory.TABLE)
    PLAIN_TABLE_OUTPUT = ("PlainTableOutput", PluginCategory.TABLE)

    # 媒体
    MEDIA_EMBED = ("MediaEmbed", PluginCategory.MEDIA, "mediaEmbed")
    HTML_EMBED = ("HtmlEmbed", PluginCategory.MEDIA, "htmlEmbed")

    # 代码
    CODE_BLOCK = ("CodeBlock", PluginCategory.CODE, "codeBlock")

    # 特殊内容
    HORIZONTAL_LINE = ("HorizontalLine", PluginCategory.SPECIAL, "horizontalLine")
    PAGE_BREAK = ("PageBreak", PluginCategory.SPECIAL, "pageBreak")
    SPECIAL_CHARACTERS = (
        "SpecialCharacters",
        PluginCategory.SPECIAL,
        "specialCharacters",
    )
    SPECIAL_CHARACTERS_ESSENTIALS = ("SpecialCharactersEssentials", PluginCategory.SPECIAL)

    # 编辑增强
    AUTOFORMAT = ("Autoformat", PluginCategory.EDITING)
    TEXT_TRANSFORMATION = ("TextTransformation", PluginCategory.EDITING)
    FIND_AND_REPLACE = ("FindAndReplace", PluginCategory.EDITING, "findAndReplace")
    REMOVE_FORMAT = ("RemoveFormat", PluginCategory.EDITING, "removeFormat")
    SOURCE_EDITING = ("SourceEditing", PluginCategory.EDITING, "sourceEditing")
    SHOW_BLOCKS = ("ShowBlocks", PluginCategory.EDITING, "showBlocks")
    HIGHLIGHT = ("Highlight", PluginCategory.EDITING, "highlight")

    # 提及
    MENTION = ("Mention", PluginCategory.MENTION)

    # 文档功能
    AUTOSAVE = ("Autosave", PluginCategory.DOCUMENT)
    WORD_COUNT = ("WordCount", PluginCategory.DOCUMENT)
    TITLE = ("Title", PluginCategory.DOCUMENT)
    PASTE_FROM_OFFICE = ("PasteFromOffice", PluginCategory.DOCUMENT)

    # HTML 支持
    GENERAL_HTML_SUPPORT = ("GeneralHtmlSupport", PluginCategory.HTML)
    HTML_COMMENT = ("HtmlComment", PluginCategory.HTML)
    STYLE = ("Style", PluginCategory.HTML, "style")

    # 受限编辑
    RESTRICTED_EDITING_MODE = (
        "RestrictedEditingMode",
        PluginCategory.RESTRICTED,
        "restrictedEditing",
    )
    STANDARD_EDITING_MODE = (
        "StandardEditingMode",
        PluginCategory.RESTRICTED,
        "restrictedEditingException",
    )

    # 书签与全屏
    BOOKMARK = ("Bookmark", PluginCategory.SPECIAL, "bookmark")
    FULLSCREEN = ("Fullscreen", PluginCategory.EDITING, "fullscreen")

    # Markdown
    MARKDOWN = ("Markdown", PluginCategory.DOCUMENT)
    PASTE_FROM_MARKDOWN_EXPERIMENTAL = (
        "PasteFromMarkdownExperimental",
        PluginCategory.DOCUMENT,
    )

    # 列表扩展
    LIST_PROPERTIES = ("ListProperties", PluginCategory.LIST)
    LIST_FORMATTING = ("ListFormatting", PluginCategory.LIST)
    ADJACENT_LISTS_SUPPORT = ("AdjacentListsSupport", PluginCategory.LIST)

    # 特殊字符分类
    SPECIAL_CHARACTERS_ARROWS = ("SpecialCharactersArrows", PluginCategory.SPECIAL)
    SPECIAL_CHARACTERS_CURRENCY = ("SpecialCharactersCurrency", PluginCategory.SPECIAL)
    SPECIAL_CHARACTERS_LATIN = ("SpecialCharactersLatin", PluginCategory.SPECIAL)
    SPECIAL_CHARACTERS_MATHEMATICAL = (
        "SpecialCharactersMathematical",
        PluginCategory.SPECIAL,
    )
    SPECIAL_CHARACTERS_TEXT = ("SpecialCharactersText", PluginCategory.SPECIAL)

    # 语言
    TEXT_PART_LANGUAGE = (
        "TextPartLanguage",
        PluginCategory.EDITING,
        "textPartLanguage",
    )

    # 云服务
    CLOUD_SERVICES = ("CloudServices", PluginCategory.UPLOAD)
    CLOUD_SERVICES_CORE = ("CloudServicesCore", PluginCategory.UPLOAD)
    CLOUD_SERVICES_UPLOAD_ADAPTER = ("CloudServicesUploadAdapter", PluginCategory.UPLOAD)
    EASY_IMAGE = ("EasyImage", PluginCategory.IMAGE)

    # 小地图
    MINIMAP = ("Minimap", PluginCategory.EDITING)

    # 组件框架
    WIDGET = ("Widget", PluginCategory.CORE)
    WIDGET_TOOLBAR_REPOSITORY = ("WidgetToolbarRepository", PluginCategory.CORE)
    WIDGET_RESIZE = ("WidgetResize", PluginCategory.CORE)
    WIDGET_TYPE_AROUND = ("WidgetTypeAround", PluginCategory.CORE)

    # 上下文工具栏
    BALLOON_TOOLBAR = ("BalloonToolbar", PluginCategory.EDITING)
    BLOCK_TOOLBAR = ("BlockToolbar", PluginCategory.EDITING)

    # 表情
    EMOJI = ("Emoji", PluginCategory.SPECIAL, "emoji")
    EMOJI_PICKER = ("EmojiPicker", PluginCategory.SPECIAL)

    def __init__(self, js_name: str, category: PluginCategory, *toolbar_items: str):
        self.js_name = js_name
        self.category = category
        self.toolbar_items: FrozenSet[str] = frozenset(toolbar_items)

    @property
    def is_premium(self) -> bool:
        """内置插件均为免费插件；付费插件通过 CustomPlugin.from_premium 引入"""
        return False

    @property
    def ordinal(self) -> int:
        """成员在枚举中的定义序号"""
        return _ORDINALS[self]

    @classmethod
    def from_js_name(cls, js_name: str) -> Optional["EditorPlugin"]:
        """按 JS 名称查找插件，未知名称返回 None"""
        return _JS_NAME_MAP.get(js_name)

    @classmethod
    def by_category(cls, category: PluginCategory) -> FrozenSet["EditorPlugin"]:
        """获取某个类别下的全部插件"""
        return frozenset(plugin for plugin in cls if plugin.category == category)

    def __repr__(self) -> str:
        return f"<EditorPlugin.{self.name}: {self.js_name}>"


_ORDINALS: Dict[EditorPlugin, int] = {
    plugin: index for index, plugin in enumerate(EditorPlugin)
}

_JS_NAME_MAP: Dict[str, EditorPlugin] = {plugin.js_name: plugin for plugin in EditorPlugin}


def sort_plugins(plugins: Iterable[EditorPlugin]) -> List[EditorPlugin]:
    """
    按枚举定义顺序排序，保证集合遍历结果可复现

    依赖表中混入的非枚举符号（如误写的字符串）排在最后，按名称排序。
    """
    return sorted(plugins, key=_sort_key)


def _sort_key(plugin: object) -> Tuple[int, str]:
    return _ORDINALS.get(plugin, len(_ORDINALS)), plugin_label(plugin)


def plugin_label(plugin: object) -> str:
    """日志与展示使用的插件名称"""
    return getattr(plugin, "js_name", str(plugin))


def lookup_plugin(name: str) -> Optional[EditorPlugin]:
    """
    按 JS 名称或枚举成员名查找插件

    Args:
        name: "ImageCaption" 或 "IMAGE_CAPTION" 形式的名称（成员名不区分大小写）

    Returns:
        对应的插件，找不到时返回 None
    """
    if not name:
        return None
    plugin = EditorPlugin.from_js_name(name)
    if plugin is not None:
        return plugin
    return EditorPlugin.__members__.get(name.strip().upper())
