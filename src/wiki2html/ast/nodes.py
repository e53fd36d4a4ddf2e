#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/ast/nodes.py
"""Page element classes for wiki page representation.

This module defines the node hierarchy produced by the wiki parser and
consumed by the transformation passes and the HTML renderer. Each node
represents a structural or inline element of a wiki page.

The hierarchy differs from a plain syntax tree in three ways:
- every node keeps a back-reference to its container in ``parent``
- every node may carry the ``[from_pos, to_pos)`` span of the wiki text it
  was parsed from, used to build "edit this part" links
- grouping is expressed by :class:`PageElementList`, which is transparent:
  its members behave as if they were spliced into the enclosing container

Node Hierarchy
--------------
All nodes inherit from :class:`PageElement` and support the visitor pattern.

Containers:
    - PageElementWithChild (one optional child subtree)
    - PageElementList (flat ordered sequence)
    - Table, built from TableRow and TableCell helpers

Block nodes:
    - WikiPage, Heading, Paragraph, ListItem, Separator, VerticalSpace
    - Task, Code, IncludePage, TableOfContents, Parent

Inline nodes:
    - Bold, Italic, Underlined, Strikethrough, Monospace, Small, Color, Style
    - Nowiki, Html, HtmlTag, XmlTag, TextOnly, LineBreak, Anchor
    - LinkPage, LinkWiki, LinkLocalFile, LinkExternal, Image, SearchInput
    - WikiVersion, DateTime, PageName, PageTimestamp, WikiTag

Listable nodes (inline or block depending on ``show_inline``):
    - ListViewHistory, ListEditHistory, ListParents, ListChildren
    - ListPages, ListWantedPages, ListUnlinkedPages

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Iterable, Iterator, Optional

from wiki2html.constants import DateTimeFormat, PageNameFormat, TaskState
from wiki2html.exceptions import TreeStructureError


def _clone_value(value: Any) -> Any:
    if isinstance(value, PageElement):
        return value.clone()
    if isinstance(value, list):
        return [_clone_value(item) for item in value]
    if isinstance(value, dict):
        return dict(value)
    return value


def _check_not_ancestor(container: PageElement, element: PageElement) -> None:
    """Raise if inserting ``element`` into ``container`` would create a cycle."""
    current: Optional[PageElement] = container
    while current is not None:
        if current is element:
            raise TreeStructureError(
                f"Cannot insert {type(element).__name__} into itself or one of its descendants"
            )
        current = current.parent


class PageElement(ABC):
    """Base class for all page elements.

    Attributes
    ----------
    parent : PageElement or None
        Container currently holding this node; ``None`` for the root.
        Maintained by the containers, never by callers.
    from_pos, to_pos : int or None
        Half-open span in the wiki source text; ``None`` for synthetic nodes
    is_inline : bool
        True when the node shares a line with its siblings, False when it
        starts its own block

    """

    parent: Optional[PageElement] = None
    from_pos: Optional[int]
    to_pos: Optional[int]
    is_inline: ClassVar[bool] = True

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass

    def clone(self) -> PageElement:
        """Return a deep copy of this node.

        The copy has no parent until it is inserted somewhere.
        """
        values = {f.name: _clone_value(getattr(self, f.name)) for f in fields(self) if f.init}  # type: ignore[arg-type]
        return type(self)(**values)

    def set_from_to_pos(self, from_pos: Optional[int], to_pos: Optional[int]) -> None:
        """Set the source span of this node."""
        self.from_pos = from_pos
        self.to_pos = to_pos


class PageElementWithChild(PageElement):
    """Node with exactly one optional child subtree.

    Assigning ``child`` re-parents the new child to this node.
    """

    child: Optional[PageElement]

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "child" and value is not None:
            _check_not_ancestor(self, value)
            super().__setattr__(name, value)
            value.parent = self
            return
        super().__setattr__(name, value)


class PageElementList(PageElement):
    """Flat, ordered sequence of page elements.

    A list is a grouping construct only. Renderers and passes treat its
    members as if they were part of the enclosing container. Every mutation
    keeps the members' ``parent`` pointing at the list.

    Parameters
    ----------
    elements : iterable of PageElement, optional
        Initial members
    from_pos, to_pos : int or None
        Source span

    """

    def __init__(
        self,
        elements: Optional[Iterable[PageElement]] = None,
        from_pos: Optional[int] = None,
        to_pos: Optional[int] = None,
    ) -> None:
        self._elements: list[PageElement] = []
        self.from_pos = from_pos
        self.to_pos = to_pos
        if elements is not None:
            self.extend(elements)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_page_element_list(self)

    def add(self, element: PageElement) -> None:
        """Append ``element`` and take over its parent reference."""
        _check_not_ancestor(self, element)
        self._elements.append(element)
        element.parent = self

    def extend(self, elements: Iterable[PageElement]) -> None:
        """Append every element of ``elements``, re-parenting each one."""
        for element in list(elements):
            self.add(element)

    def insert(self, index: int, element: PageElement) -> None:
        _check_not_ancestor(self, element)
        self._elements.insert(index, element)
        element.parent = self

    def set(self, index: int, element: PageElement) -> None:
        """Replace the member at ``index``."""
        _check_not_ancestor(self, element)
        self._elements[index] = element
        element.parent = self

    def remove(self, index: int) -> PageElement:
        """Remove and return the member at ``index``."""
        return self._elements.pop(index)

    def get(self, index: int) -> PageElement:
        return self._elements[index]

    def index_of(self, element: PageElement) -> int:
        """Return the index of ``element`` compared by identity, or -1."""
        for index, member in enumerate(self._elements):
            if member is element:
                return index
        return -1

    @property
    def elements(self) -> tuple[PageElement, ...]:
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[PageElement]:
        return iter(list(self._elements))

    def __getitem__(self, index: int) -> PageElement:
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageElementList):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PageElementList({self._elements!r})"

    def clone(self) -> PageElementList:
        return PageElementList((element.clone() for element in self._elements), self.from_pos, self.to_pos)


class TableCell:
    """A single table cell.

    The ``parent`` of the cell content is the enclosing :class:`Table`, not
    the cell or its row. The content is re-parented as soon as the cell is
    attached to a row that belongs to a table.
    """

    def __init__(self, content: Optional[PageElement] = None, header: bool = False, params: Optional[str] = None):
        self._content = content
        self.header = header
        self.params = params
        self.parent_row: Optional[TableRow] = None

    @property
    def content(self) -> Optional[PageElement]:
        return self._content

    @content.setter
    def content(self, content: Optional[PageElement]) -> None:
        self._content = content
        self._update_content_parent()

    def _update_content_parent(self) -> None:
        if self._content is not None and self.parent_row is not None and self.parent_row.parent_table is not None:
            self._content.parent = self.parent_row.parent_table

    def attach(self, row: TableRow) -> None:
        self.parent_row = row
        self._update_content_parent()

    def clone(self) -> TableCell:
        content = self._content.clone() if self._content is not None else None
        return TableCell(content, self.header, self.params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableCell):
            return NotImplemented
        return (self._content, self.header, self.params) == (other._content, other.header, other.params)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TableCell(content={self._content!r}, header={self.header!r}, params={self.params!r})"


class TableRow:
    """A table row holding an ordered list of cells."""

    def __init__(self, params: Optional[str] = None, cells: Optional[Iterable[TableCell]] = None):
        self.params = params
        self.cells: list[TableCell] = []
        self.parent_table: Optional[Table] = None
        for cell in cells or ():
            self.add_cell(cell)

    def add_cell(self, cell: TableCell) -> None:
        self.cells.append(cell)
        cell.attach(self)

    def attach(self, table: Table) -> None:
        self.parent_table = table
        for cell in self.cells:
            cell.attach(self)

    def clone(self) -> TableRow:
        return TableRow(self.params, (cell.clone() for cell in self.cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableRow):
            return NotImplemented
        return (self.params, self.cells) == (other.params, other.cells)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TableRow(params={self.params!r}, cells={self.cells!r})"


class Table(PageElement):
    """Table made of rows of cells.

    Parameters
    ----------
    params : str or None
        CSS classes for the table, separated by spaces
    rows : iterable of TableRow, optional
        Initial rows
    from_pos, to_pos : int or None
        Source span

    """

    is_inline = False

    def __init__(
        self,
        params: Optional[str] = None,
        rows: Optional[Iterable[TableRow]] = None,
        from_pos: Optional[int] = None,
        to_pos: Optional[int] = None,
    ) -> None:
        self.params = params
        self.rows: list[TableRow] = []
        self.from_pos = from_pos
        self.to_pos = to_pos
        for row in rows or ():
            self.add_row(row)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table(self)

    def add_row(self, row: TableRow) -> None:
        self.rows.append(row)
        row.attach(self)

    def new_row(self, params: Optional[str] = None) -> TableRow:
        """Append an empty row and return it."""
        row = TableRow(params)
        self.add_row(row)
        return row

    def add_cell(self, cell: TableCell) -> None:
        """Append ``cell`` to the last row, creating a row if there is none."""
        if not self.rows:
            self.new_row()
        self.rows[-1].add_cell(cell)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (self.params, self.rows) == (other.params, other.rows)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Table(params={self.params!r}, rows={self.rows!r})"

    def clone(self) -> Table:
        return Table(self.params, (row.clone() for row in self.rows), self.from_pos, self.to_pos)


# ============================================================================
# Block Nodes
# ============================================================================


@dataclass
class WikiPage(PageElementWithChild):
    """Root of a wiki page, or a page embedded in another page.

    Parameters
    ----------
    page_path : str or None
        Absolute path of the page, e.g. ``/Folder/Page``; ``None`` when the
        page does not come from the repository
    child : PageElement or None
        Page content

    """

    page_path: Optional[str] = None
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_wiki_page(self)


@dataclass
class Heading(PageElementWithChild):
    """Section heading; level 1 is the most prominent."""

    level: int = 1
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class Paragraph(PageElementWithChild):
    """Paragraph block.

    Parameters
    ----------
    centered : bool
        Center the content
    indention : int
        Indention level; negative values are clamped to 0
    vertical_spacing : bool
        Separate the paragraph visually from a preceding block
    child : PageElement or None
        Paragraph content

    """

    centered: bool = False
    indention: int = 0
    vertical_spacing: bool = False
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def __post_init__(self) -> None:
        if self.indention < 0:
            self.indention = 0

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class ListItem(PageElementWithChild):
    """Entry of an ordered or unordered list.

    List items carry their nesting ``level`` (1 is the outermost list) but
    no open/close markers; the renderer derives the list containers from
    consecutive items.
    """

    level: int = 1
    ordered: bool = False
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class Separator(PageElement):
    """Horizontal rule."""

    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_separator(self)


@dataclass
class VerticalSpace(PageElement):
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_vertical_space(self)


@dataclass
class Task(PageElement):
    """To-do entry.

    Parameters
    ----------
    state : {"open", "open_important", "closed"}
        Task state
    schedule : str or None
        Free-text schedule, e.g. ``24.12.2025``
    description : str or None
        Task text

    """

    state: TaskState = "open"
    schedule: Optional[str] = None
    description: Optional[str] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_task(self)


@dataclass
class Code(PageElement):
    """Source code block, highlighted according to ``language``."""

    language: Optional[str] = None
    text: str = ""
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code(self)


@dataclass
class IncludePage(PageElement):
    """Placeholder replaced by the content of another page."""

    page_path: str = ""
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_include_page(self)


@dataclass
class TableOfContents(PageElement):
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_of_contents(self)


@dataclass
class Parent(PageElement):
    """Declares the parent page of the page containing this tag."""

    parent_page_path: str = ""
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    is_inline = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_parent(self)


# ============================================================================
# Inline Formatting Nodes
# ============================================================================


@dataclass
class Bold(PageElementWithChild):
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_bold(self)


@dataclass
class Italic(PageElementWithChild):
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_italic(self)


@dataclass
class Underlined(PageElementWithChild):
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_underlined(self)


@dataclass
class Strikethrough(PageElementWithChild):
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass
class Monospace(PageElementWithChild):
    """Text in a fixed-width font."""

    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_monospace(self)


@dataclass
class Small(PageElementWithChild):
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_small(self)


@dataclass
class Color(PageElementWithChild):
    """Text in a named or hexadecimal color."""

    color_name: str = ""
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_color(self)


@dataclass
class Style(PageElementWithChild):
    """Content styled with one or more CSS classes."""

    css_classes: list[str] = field(default_factory=list)
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_style(self)


# ============================================================================
# Raw Text and Markup Nodes
# ============================================================================


@dataclass
class Nowiki(PageElement):
    """Text excluded from wiki markup interpretation."""

    text: str = ""
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_nowiki(self)


@dataclass
class Html(PageElement):
    """Raw HTML passed through unchanged."""

    text: str = ""
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html(self)


@dataclass
class HtmlTag(PageElementWithChild):
    """HTML tag wrapping its child.

    Parameters
    ----------
    tag_name : str
        Tag name, e.g. ``span``
    tag_attributes : str or None
        Attribute string written verbatim into the opening tag
    child : PageElement or None
        Tag content

    """

    tag_name: str = ""
    tag_attributes: Optional[str] = None
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_tag(self)


@dataclass
class XmlTag(PageElementWithChild):
    """Generic XML-style tag such as ``<contact>`` or ``<eventlist year="2025">``.

    Transformation passes replace the tags they recognize; the renderer
    outputs the child of any tag left over.

    Parameters
    ----------
    prefix : str or None
        Namespace prefix in ``<prefix:name>`` notation
    name : str
        Tag name
    options : dict of str to str
        Tag attributes
    child : PageElement or None
        Tag content

    """

    prefix: Optional[str] = None
    name: str = ""
    options: dict[str, str] = field(default_factory=dict)
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_xml_tag(self)


@dataclass
class TextOnly(PageElement):
    """Plain text, escaped on output."""

    text: str = ""
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text_only(self)


@dataclass
class LineBreak(PageElement):
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_line_break(self)


@dataclass
class Anchor(PageElement):
    """Link target inside a page."""

    name: str = ""
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_anchor(self)


# ============================================================================
# Link, Image and Form Nodes
# ============================================================================


@dataclass
class LinkPage(PageElementWithChild):
    """Link to a wiki page.

    Parameters
    ----------
    page_path : str or None
        Relative or absolute path of the target page; ``None`` links into
        the current page
    anchor : str or None
        Anchor name within the target page
    child : PageElement or None
        Link text; the page name is used when absent

    """

    page_path: Optional[str] = None
    anchor: Optional[str] = None
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link_page(self)


@dataclass
class LinkWiki(PageElementWithChild):
    """Link to a built-in wiki function such as ``startpage`` or ``editpage``."""

    command: str = ""
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link_wiki(self)


@dataclass
class LinkLocalFile(PageElementWithChild):
    """Link to a file stored in the wiki repository."""

    file_path: str = ""
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link_local_file(self)


@dataclass
class LinkExternal(PageElementWithChild):
    """Link to an external URL or ``mailto:`` address."""

    url: str = ""
    child: Optional[PageElement] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link_external(self)


@dataclass
class Image(PageElement):
    """Embedded image.

    Parameters
    ----------
    url : str
        Repository path (relative or absolute) or ``http(s)`` URL
    options : dict of str to str
        Extra attributes of the ``img`` tag, e.g. ``width``

    """

    url: str = ""
    options: dict[str, str] = field(default_factory=dict)
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class SearchInput(PageElement):
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_search_input(self)


# ============================================================================
# Wiki Tag Nodes
# ============================================================================


@dataclass
class WikiVersion(PageElement):
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_wiki_version(self)


@dataclass
class DateTime(PageElement):
    """Current date and/or time in the configured format."""

    format: DateTimeFormat = "datetime"
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_date_time(self)


@dataclass
class PageName(PageElement):
    """Name of the current page.

    Parameters
    ----------
    page_name_format : {"page_path", "page_folder", "page_title"} or None
        Which part of the page path to show
    linked : bool
        Link the name to the page
    global_context : bool
        Refer to the outermost page instead of the page containing the tag

    """

    page_name_format: Optional[PageNameFormat] = None
    linked: bool = False
    global_context: bool = False
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_page_name(self)


@dataclass
class PageTimestamp(PageElement):
    """Modification time of the current page."""

    global_context: bool = False
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_page_timestamp(self)


@dataclass
class WikiTag(PageElement):
    """Generic ``{{tagname:value | options}}`` wiki tag."""

    tagname: str = ""
    value: Optional[str] = None
    options: dict[str, str] = field(default_factory=dict)
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_wiki_tag(self)


# ============================================================================
# Listable Nodes
# ============================================================================


class Listable(PageElement):
    """Mixin for tags that expand to a list of page links.

    Listables are inline when ``show_inline`` is set; the links are then
    joined with ``inline_list_separator``. ``output_on_empty`` is shown when
    the list is empty.
    """

    page_name_format: PageNameFormat
    show_inline: bool
    inline_list_separator: Optional[str]
    output_on_empty: Optional[str]

    @property  # type: ignore[override]
    def is_inline(self) -> bool:  # type: ignore[override]
        return self.show_inline


@dataclass
class ListViewHistory(Listable):
    """Pages viewed most recently."""

    max_length: int = -1
    page_name_format: PageNameFormat = "page_title"
    show_inline: bool = False
    inline_list_separator: Optional[str] = None
    output_on_empty: Optional[str] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_view_history(self)


@dataclass
class ListEditHistory(Listable):
    """Pages modified most recently."""

    max_length: int = -1
    page_name_format: PageNameFormat = "page_title"
    show_inline: bool = False
    inline_list_separator: Optional[str] = None
    output_on_empty: Optional[str] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_edit_history(self)


@dataclass
class ListParents(Listable):
    """Parent pages of a page; the current page when ``page_path`` is None."""

    page_path: Optional[str] = None
    global_context: bool = False
    page_name_format: PageNameFormat = "page_title"
    show_inline: bool = False
    inline_list_separator: Optional[str] = None
    output_on_empty: Optional[str] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_parents(self)


@dataclass
class ListChildren(Listable):
    """Child pages of a page; the current page when ``page_path`` is None."""

    page_path: Optional[str] = None
    global_context: bool = False
    page_name_format: PageNameFormat = "page_title"
    show_inline: bool = False
    inline_list_separator: Optional[str] = None
    output_on_empty: Optional[str] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_children(self)


@dataclass
class ListPages(Listable):
    """All pages, or the pages inside ``folder``."""

    folder: Optional[str] = None
    global_context: bool = False
    page_name_format: PageNameFormat = "page_path"
    show_inline: bool = False
    inline_list_separator: Optional[str] = None
    output_on_empty: Optional[str] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_pages(self)


@dataclass
class ListWantedPages(Listable):
    """Pages that are linked but do not exist."""

    page_name_format: PageNameFormat = "page_path"
    show_inline: bool = False
    inline_list_separator: Optional[str] = None
    output_on_empty: Optional[str] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_wanted_pages(self)


@dataclass
class ListUnlinkedPages(Listable):
    """Pages no other page links to.

    ``hide_parents`` and ``hide_children`` treat the parent and child pages
    as linked, which is useful when those lists are shown elsewhere.
    """

    hide_parents: bool = False
    hide_children: bool = False
    page_name_format: PageNameFormat = "page_path"
    show_inline: bool = False
    inline_list_separator: Optional[str] = None
    output_on_empty: Optional[str] = None
    from_pos: Optional[int] = None
    to_pos: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_unlinked_pages(self)


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
]
