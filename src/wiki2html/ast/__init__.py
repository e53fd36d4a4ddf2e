#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/ast/__init__.py
"""Page element tree for wiki page representation.

The module consists of several components:

- nodes: page element classes with parent links and source spans
- visitors: visitor base class with one method per node kind
- transforms: the generic tree rewriting engine used by all passes
- utils: context lookup, typed traversal and text helpers

Examples
--------
Build and transform a small page:

    >>> from wiki2html.ast import Bold, PageElementList, TextOnly, WikiPage, transform_page
    >>> page = WikiPage("/Index", PageElementList([Bold(TextOnly("Hello")), TextOnly(" world")]))
    >>> page = transform_page(page, lambda el: el.child if isinstance(el, Bold) else el)

"""

from wiki2html.ast.nodes import (
    Anchor,
    Bold,
    Code,
    Color,
    DateTime,
    Heading,
    Html,
    HtmlTag,
    Image,
    IncludePage,
    Italic,
    LineBreak,
    LinkExternal,
    LinkLocalFile,
    LinkPage,
    LinkWiki,
    ListChildren,
    ListEditHistory,
    ListItem,
    ListPages,
    ListParents,
    ListUnlinkedPages,
    ListViewHistory,
    ListWantedPages,
    Listable,
    Monospace,
    Nowiki,
    PageElement,
    PageElementList,
    PageElementWithChild,
    PageName,
    PageTimestamp,
    Paragraph,
    Parent,
    SearchInput,
    Separator,
    Small,
    Strikethrough,
    Style,
    Table,
    TableCell,
    TableOfContents,
    TableRow,
    Task,
    TextOnly,
    Underlined,
    VerticalSpace,
    WikiPage,
    WikiTag,
    WikiVersion,
    XmlTag,
)
from wiki2html.ast.transforms import TransformCallback, transform_page, transform_tree
from wiki2html.ast.utils import (
    get_absolute_page_path,
    get_context_wiki_page,
    get_id_string,
    get_string_content,
    traverse_page_elements,
)
from wiki2html.ast.visitors import NodeVisitor

__all__ = [
    "Anchor",
    "Bold",
    "Code",
    "Color",
    "DateTime",
    "Heading",
    "Html",
    "HtmlTag",
    "Image",
    "IncludePage",
    "Italic",
    "LineBreak",
    "LinkExternal",
    "LinkLocalFile",
    "LinkPage",
    "LinkWiki",
    "ListChildren",
    "ListEditHistory",
    "ListItem",
    "ListPages",
    "ListParents",
    "ListUnlinkedPages",
    "ListViewHistory",
    "ListWantedPages",
    "Listable",
    "Monospace",
    "Nowiki",
    "PageElement",
    "PageElementList",
    "PageElementWithChild",
    "PageName",
    "PageTimestamp",
    "Paragraph",
    "Parent",
    "SearchInput",
    "Separator",
    "Small",
    "Strikethrough",
    "Style",
    "Table",
    "TableCell",
    "TableOfContents",
    "TableRow",
    "Task",
    "TextOnly",
    "Underlined",
    "VerticalSpace",
    "WikiPage",
    "WikiTag",
    "WikiVersion",
    "XmlTag",
    # Visitors
    "NodeVisitor",
    # Transforms
    "TransformCallback",
    "transform_page",
    "transform_tree",
    # Utilities
    "get_absolute_page_path",
    "get_context_wiki_page",
    "get_id_string",
    "get_string_content",
    "traverse_page_elements",
]
