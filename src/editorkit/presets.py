# -*- coding: utf-8 -*-
"""
编辑器预设

常用插件组合，用于快速组装编辑器。预设只是起点，可在构建器中继续增删插件。
"""

from enum import Enum
from typing import Tuple

from .plugins.symbols import EditorPlugin

P = EditorPlugin

_SPECIAL_CHARACTERS_FAMILY = (
    P.SPECIAL_CHARACTERS,
    P.SPECIAL_CHARACTERS_ESSENTIALS,
    P.SPECIAL_CHARACTERS_ARROWS,
    P.SPECIAL_CHARACTERS_CURRENCY,
    P.SPECIAL_CHARACTERS_LATIN,
    P.SPECIAL_CHARACTERS_MATHEMATICAL,
    P.SPECIAL_CHARACTERS_TEXT,
)

# 文档类预设（DOCUMENT / COLLABORATIVE）共用的插件
_DOCUMENT_BASE = (
    P.ESSENTIALS, P.PARAGRAPH, P.UNDO, P.CLIPBOARD, P.SELECT_ALL,
    P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.SUPERSCRIPT, P.SUBSCRIPT,
    P.FONT_SIZE, P.FONT_FAMILY, P.FONT_COLOR, P.FONT_BACKGROUND_COLOR,
    P.HEADING, P.ALIGNMENT, P.BLOCK_QUOTE, P.INDENT, P.INDENT_BLOCK,
    P.LIST, P.TODO_LIST,
    P.LINK, P.AUTO_LINK,
    P.IMAGE, P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE, P.IMAGE_RESIZE,
    P.IMAGE_INSERT, P.IMAGE_UPLOAD, P.BASE64_UPLOAD_ADAPTER,
    P.TABLE, P.TABLE_TOOLBAR, P.TABLE_PROPERTIES, P.TABLE_CELL_PROPERTIES,
    P.HORIZONTAL_LINE, P.PAGE_BREAK,
    P.AUTOFORMAT, P.FIND_AND_REPLACE, P.REMOVE_FORMAT,
    P.WORD_COUNT,
)


class EditorPreset(Enum):
    """编辑器预设：(展示名称, 插件, 默认工具栏, 预估体积KB)"""

    BASIC = (
        "Basic Editor",
        (
            P.ESSENTIALS, P.PARAGRAPH, P.BOLD, P.ITALIC, P.UNDERLINE,
            P.LINK, P.LIST, P.BLOCK_QUOTE, P.UNDO,
        ),
        (
            "undo", "redo", "|",
            "bold", "italic", "underline", "|",
            "link", "|",
            "bulletedList", "numberedList", "|",
            "blockQuote",
        ),
        300,
    )

    STANDARD = (
        "Standard Editor",
        (
            P.ESSENTIALS, P.PARAGRAPH, P.UNDO,
            P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.CODE,
            P.HEADING, P.ALIGNMENT, P.BLOCK_QUOTE, P.INDENT, P.INDENT_BLOCK,
            P.LIST, P.TODO_LIST,
            P.LINK, P.AUTO_LINK,
            P.IMAGE, P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE, P.IMAGE_RESIZE,
            P.IMAGE_INSERT, P.IMAGE_UPLOAD, P.BASE64_UPLOAD_ADAPTER,
            P.TABLE, P.TABLE_TOOLBAR,
            P.MEDIA_EMBED,
            P.HORIZONTAL_LINE,
            P.AUTOFORMAT, P.FIND_AND_REPLACE, P.PASTE_FROM_OFFICE,
        ),
        (
            "undo", "redo", "|",
            "heading", "|",
            "bold", "italic", "underline", "strikethrough", "code", "|",
            "link", "insertImage", "insertTable", "mediaEmbed", "|",
            "bulletedList", "numberedList", "todoList", "|",
            "alignment", "outdent", "indent", "|",
            "blockQuote", "horizontalLine", "|",
            "findAndReplace",
        ),
        600,
    )

    FULL = (
        "Full Editor",
        (
            P.ESSENTIALS, P.PARAGRAPH, P.UNDO,
            P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.CODE,
            P.SUPERSCRIPT, P.SUBSCRIPT,
            P.FONT_SIZE, P.FONT_FAMILY, P.FONT_COLOR, P.FONT_BACKGROUND_COLOR,
            P.HEADING, P.ALIGNMENT, P.BLOCK_QUOTE, P.INDENT, P.INDENT_BLOCK,
            P.LIST, P.TODO_LIST,
            P.LINK, P.AUTO_LINK,
            P.IMAGE, P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE,
            P.IMAGE_INSERT, P.IMAGE_UPLOAD, P.BASE64_UPLOAD_ADAPTER,
            P.TABLE, P.TABLE_TOOLBAR,
            P.MEDIA_EMBED,
            P.CODE_BLOCK,
            P.HORIZONTAL_LINE,
            P.AUTOFORMAT, P.FIND_AND_REPLACE, P.REMOVE_FORMAT, P.HIGHLIGHT,
            P.PASTE_FROM_OFFICE,
        ),
        (
            "undo", "redo", "|",
            "heading", "|",
            "fontFamily", "fontSize", "fontColor", "fontBackgroundColor", "|",
            "bold", "italic", "underline", "strikethrough", "code",
            "subscript", "superscript", "|",
            "removeFormat", "|",
            "link", "insertImage", "insertTable", "mediaEmbed", "|",
            "bulletedList", "numberedList", "todoList", "|",
            "alignment", "outdent", "indent", "|",
            "blockQuote", "codeBlock", "horizontalLine", "|",
            "highlight", "|",
            "findAndReplace",
        ),
        700,
    )

    DOCUMENT = (
        "Document Editor",
        _DOCUMENT_BASE + (P.TITLE, P.PASTE_FROM_OFFICE, P.AUTOSAVE),
        (
            "undo", "redo", "|",
            "heading", "|",
            "fontFamily", "fontSize", "|",
            "bold", "italic", "underline", "|",
            "fontColor", "fontBackgroundColor", "|",
            "link", "insertImage", "insertTable", "|",
            "bulletedList", "numberedList", "|",
            "alignment", "outdent", "indent", "|",
            "pageBreak", "|",
            "findAndReplace",
        ),
        800,
    )

    # 协作插件（Comments、TrackChanges 等）属于付费插件，需作为外部插件单独添加
    COLLABORATIVE = (
        "Collaborative Editor",
        _DOCUMENT_BASE + (P.PASTE_FROM_OFFICE, P.AUTOSAVE),
        (
            "undo", "redo", "|",
            "heading", "|",
            "fontFamily", "fontSize", "|",
            "bold", "italic", "underline", "|",
            "fontColor", "fontBackgroundColor", "|",
            "link", "insertImage", "insertTable", "|",
            "bulletedList", "numberedList", "todoList", "|",
            "alignment", "outdent", "indent", "|",
            "pageBreak", "|",
            "findAndReplace",
        ),
        850,
    )

    AI_DOCUMENT = (
        "AI Document Editor",
        (
            P.ESSENTIALS, P.PARAGRAPH, P.UNDO, P.CLIPBOARD, P.SELECT_ALL,
            P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.CODE,
            P.SUPERSCRIPT, P.SUBSCRIPT,
            P.FONT_SIZE, P.FONT_FAMILY, P.FONT_COLOR, P.FONT_BACKGROUND_COLOR,
            P.HEADING, P.ALIGNMENT, P.BLOCK_QUOTE, P.INDENT, P.INDENT_BLOCK,
            P.LIST, P.LIST_PROPERTIES, P.TODO_LIST,
            P.LINK, P.AUTO_LINK, P.LINK_IMAGE,
            P.IMAGE, P.IMAGE_BLOCK, P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE,
            P.IMAGE_RESIZE, P.IMAGE_INSERT, P.IMAGE_UPLOAD, P.AUTO_IMAGE,
            P.BASE64_UPLOAD_ADAPTER,
            P.TABLE, P.TABLE_TOOLBAR, P.TABLE_PROPERTIES, P.TABLE_CELL_PROPERTIES,
            P.TABLE_CAPTION, P.TABLE_COLUMN_RESIZE,
            P.MEDIA_EMBED,
            P.CODE_BLOCK,
            P.HORIZONTAL_LINE, P.BOOKMARK, P.EMOJI,
        )
        + _SPECIAL_CHARACTERS_FAMILY
        + (
            P.AUTOFORMAT, P.TEXT_TRANSFORMATION, P.FIND_AND_REPLACE,
            P.REMOVE_FORMAT, P.FULLSCREEN,
            P.MENTION,
            P.BALLOON_TOOLBAR,
            P.AUTOSAVE, P.PASTE_FROM_OFFICE,
            # AI 助手依赖云服务
            P.CLOUD_SERVICES,
        ),
        (
            "undo", "redo", "|",
            "findAndReplace", "fullscreen", "|",
            "heading", "|",
            "fontSize", "fontFamily", "fontColor", "fontBackgroundColor", "|",
            "bold", "italic", "underline", "strikethrough",
            "subscript", "superscript", "code", "removeFormat", "|",
            "emoji", "specialCharacters", "horizontalLine",
            "link", "bookmark", "insertImage", "mediaEmbed",
            "insertTable", "blockQuote", "codeBlock", "|",
            "alignment", "|",
            "bulletedList", "numberedList", "todoList",
            "outdent", "indent",
        ),
        900,
    )

    EMAIL = (
        "Email Editor",
        (
            P.ESSENTIALS, P.PARAGRAPH, P.AUTOFORMAT, P.TEXT_TRANSFORMATION, P.AUTOSAVE,
            P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.REMOVE_FORMAT,
            P.FONT_SIZE, P.FONT_FAMILY, P.FONT_COLOR, P.FONT_BACKGROUND_COLOR,
            P.HEADING, P.ALIGNMENT, P.INDENT, P.INDENT_BLOCK,
            P.LIST, P.LIST_PROPERTIES,
            P.LINK, P.AUTO_LINK,
            # 邮件只使用行内图片
            P.IMAGE, P.IMAGE_INLINE, P.IMAGE_TOOLBAR, P.IMAGE_STYLE, P.IMAGE_RESIZE,
            P.IMAGE_INSERT, P.IMAGE_UPLOAD, P.AUTO_IMAGE, P.BASE64_UPLOAD_ADAPTER,
            P.TABLE, P.TABLE_TOOLBAR, P.TABLE_COLUMN_RESIZE, P.TABLE_CAPTION,
            P.TABLE_CELL_PROPERTIES, P.TABLE_PROPERTIES, P.PLAIN_TABLE_OUTPUT,
            P.EMOJI,
            P.GENERAL_HTML_SUPPORT, P.STYLE,
            P.MENTION,
            P.PASTE_FROM_OFFICE,
        ),
        (
            "undo", "redo", "|",
            "heading", "style", "|",
            "fontSize", "fontFamily", "fontColor", "fontBackgroundColor", "|",
            "bold", "italic", "underline", "|",
            "link", "insertImage", "insertTable", "|",
            "alignment", "|",
            "bulletedList", "numberedList", "outdent", "indent",
        ),
        500,
    )

    NOTION = (
        "Notion-like Editor",
        (
            P.ESSENTIALS, P.PARAGRAPH, P.AUTOFORMAT, P.TEXT_TRANSFORMATION, P.AUTOSAVE,
            P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.CODE,
            P.HEADING, P.BLOCK_QUOTE, P.INDENT, P.INDENT_BLOCK,
            P.LIST, P.LIST_PROPERTIES, P.TODO_LIST,
            P.LINK, P.AUTO_LINK, P.LINK_IMAGE,
            # 仅块级图片
            P.IMAGE, P.IMAGE_BLOCK, P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE,
            P.IMAGE_RESIZE, P.IMAGE_INSERT, P.IMAGE_UPLOAD, P.AUTO_IMAGE,
            P.BASE64_UPLOAD_ADAPTER,
            P.TABLE, P.TABLE_TOOLBAR,
            P.MEDIA_EMBED,
            P.CODE_BLOCK,
            P.HORIZONTAL_LINE, P.EMOJI,
        )
        + _SPECIAL_CHARACTERS_FAMILY
        + (
            P.FIND_AND_REPLACE, P.HIGHLIGHT,
            P.MENTION,
            P.TITLE, P.PASTE_FROM_OFFICE,
            P.BLOCK_TOOLBAR,
        ),
        (
            "undo", "redo", "|",
            "findAndReplace", "|",
            "heading", "|",
            "bold", "italic", "underline", "strikethrough", "code", "|",
            "emoji", "specialCharacters", "horizontalLine",
            "link", "insertImage", "mediaEmbed",
            "insertTable",
            "highlight", "blockQuote", "codeBlock", "|",
            "bulletedList", "numberedList", "todoList",
            "outdent", "indent",
        ),
        900,
    )

    EMPTY = ("Empty Editor", (P.ESSENTIALS, P.PARAGRAPH), (), 100)

    def __init__(
        self,
        display_name: str,
        plugins: Tuple[EditorPlugin, ...],
        default_toolbar: Tuple[str, ...],
        estimated_size_kb: int,
    ):
        self.display_name = display_name
        # 去重并保持声明顺序
        self.plugins: Tuple[EditorPlugin, ...] = tuple(dict.fromkeys(plugins))
        self.default_toolbar = default_toolbar
        self.estimated_size_kb = estimated_size_kb

    def has_plugin(self, plugin: EditorPlugin) -> bool:
        """预设是否包含指定插件"""
        return plugin in self.plugins


del P
