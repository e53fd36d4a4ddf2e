#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/ast/visitors.py
"""Visitor pattern base class for page element traversal.

Every page element kind has exactly one ``visit_*`` method here. A visitor
that subclasses :class:`NodeVisitor` must handle every kind, so adding a new
node class without updating the renderer fails loudly at instantiation.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    Monospace,
    Nowiki,
    PageElementList,
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
    TableOfContents,
    Task,
    TextOnly,
    Underlined,
    VerticalSpace,
    WikiPage,
    WikiTag,
    WikiVersion,
    XmlTag,
)


class NodeVisitor(ABC):
    """Abstract base class for page element visitors.

    Subclasses implement one ``visit_*`` method per node kind. Dispatch
    happens through ``node.accept(visitor)``.

    Examples
    --------
    Count the text nodes of a page:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text_only(self, node):
        ...         self.count += 1
        ...
        ...     # remaining visit_* methods omitted

    """

    @abstractmethod
    def visit_wiki_page(self, node: WikiPage) -> Any:
        """Visit a WikiPage node.

        Parameters
        ----------
        node : WikiPage
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_separator(self, node: Separator) -> Any:
        """Visit a Separator node."""
        pass

    @abstractmethod
    def visit_vertical_space(self, node: VerticalSpace) -> Any:
        """Visit a VerticalSpace node."""
        pass

    @abstractmethod
    def visit_task(self, node: Task) -> Any:
        """Visit a Task node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_include_page(self, node: IncludePage) -> Any:
        """Visit a IncludePage node."""
        pass

    @abstractmethod
    def visit_table_of_contents(self, node: TableOfContents) -> Any:
        """Visit a TableOfContents node."""
        pass

    @abstractmethod
    def visit_parent(self, node: Parent) -> Any:
        """Visit a Parent node."""
        pass

    @abstractmethod
    def visit_page_element_list(self, node: PageElementList) -> Any:
        """Visit a PageElementList node.

        Parameters
        ----------
        node : PageElementList
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node.

        Parameters
        ----------
        node : Table
            The node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        """Visit a Italic node."""
        pass

    @abstractmethod
    def visit_underlined(self, node: Underlined) -> Any:
        """Visit a Underlined node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_monospace(self, node: Monospace) -> Any:
        """Visit a Monospace node."""
        pass

    @abstractmethod
    def visit_small(self, node: Small) -> Any:
        """Visit a Small node."""
        pass

    @abstractmethod
    def visit_color(self, node: Color) -> Any:
        """Visit a Color node."""
        pass

    @abstractmethod
    def visit_style(self, node: Style) -> Any:
        """Visit a Style node."""
        pass

    @abstractmethod
    def visit_nowiki(self, node: Nowiki) -> Any:
        """Visit a Nowiki node."""
        pass

    @abstractmethod
    def visit_html(self, node: Html) -> Any:
        """Visit a Html node."""
        pass

    @abstractmethod
    def visit_html_tag(self, node: HtmlTag) -> Any:
        """Visit a HtmlTag node."""
        pass

    @abstractmethod
    def visit_xml_tag(self, node: XmlTag) -> Any:
        """Visit a XmlTag node."""
        pass

    @abstractmethod
    def visit_text_only(self, node: TextOnly) -> Any:
        """Visit a TextOnly node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_anchor(self, node: Anchor) -> Any:
        """Visit a Anchor node."""
        pass

    @abstractmethod
    def visit_link_page(self, node: LinkPage) -> Any:
        """Visit a LinkPage node."""
        pass

    @abstractmethod
    def visit_link_wiki(self, node: LinkWiki) -> Any:
        """Visit a LinkWiki node."""
        pass

    @abstractmethod
    def visit_link_local_file(self, node: LinkLocalFile) -> Any:
        """Visit a LinkLocalFile node."""
        pass

    @abstractmethod
    def visit_link_external(self, node: LinkExternal) -> Any:
        """Visit a LinkExternal node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit a Image node."""
        pass

    @abstractmethod
    def visit_search_input(self, node: SearchInput) -> Any:
        """Visit a SearchInput node."""
        pass

    @abstractmethod
    def visit_wiki_version(self, node: WikiVersion) -> Any:
        """Visit a WikiVersion node."""
        pass

    @abstractmethod
    def visit_date_time(self, node: DateTime) -> Any:
        """Visit a DateTime node."""
        pass

    @abstractmethod
    def visit_page_name(self, node: PageName) -> Any:
        """Visit a PageName node."""
        pass

    @abstractmethod
    def visit_page_timestamp(self, node: PageTimestamp) -> Any:
        """Visit a PageTimestamp node."""
        pass

    @abstractmethod
    def visit_wiki_tag(self, node: WikiTag) -> Any:
        """Visit a WikiTag node."""
        pass

    @abstractmethod
    def visit_list_view_history(self, node: ListViewHistory) -> Any:
        """Visit a ListViewHistory node."""
        pass

    @abstractmethod
    def visit_list_edit_history(self, node: ListEditHistory) -> Any:
        """Visit a ListEditHistory node."""
        pass

    @abstractmethod
    def visit_list_parents(self, node: ListParents) -> Any:
        """Visit a ListParents node."""
        pass

    @abstractmethod
    def visit_list_children(self, node: ListChildren) -> Any:
        """Visit a ListChildren node."""
        pass

    @abstractmethod
    def visit_list_pages(self, node: ListPages) -> Any:
        """Visit a ListPages node."""
        pass

    @abstractmethod
    def visit_list_wanted_pages(self, node: ListWantedPages) -> Any:
        """Visit a ListWantedPages node."""
        pass

    @abstractmethod
    def visit_list_unlinked_pages(self, node: ListUnlinkedPages) -> Any:
        """Visit a ListUnlinkedPages node."""
        pass
