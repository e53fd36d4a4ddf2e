#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/renderers/html.py
"""HTML rendering of transformed wiki pages.

This module provides the HtmlRenderer class which walks a page element tree
and writes the page body through an :class:`HtmlWriter`. The result is a
:class:`RenderedPage`: title, body attributes, head lines and pre-indented
body lines, ready to be wrapped into a document by
:class:`~wiki2html.renderers.page.PageShell`.

Wiki tags such as the table of contents or page lists must have been
resolved by the transformation pipeline before rendering; unresolved tags
render as nothing.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

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
    PageElement,
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
from wiki2html.ast.utils import get_absolute_page_path, get_context_wiki_page, get_id_string, get_string_content
from wiki2html.ast.visitors import NodeVisitor
from wiki2html.constants import (
    DEFAULT_SEARCH_ACTION,
    DEFAULT_SEARCH_FORM_NAME,
    EDIT_URL_PREFIX,
    FILE_URL_PREFIX,
    IMAGE_URL_PREFIX,
    MAX_HEADING_TAG_LEVEL,
    TASK_CSS_CLASSES,
    VIEW_URL_PREFIX,
)
from wiki2html.highlight import PlainTokenizer, get_tokenizer
from wiki2html.messages import MessageCatalog, Messages
from wiki2html.options.html import HtmlRendererOptions
from wiki2html.renderers.base import BaseRenderer
from wiki2html.renderers.html_writer import HtmlWriter
from wiki2html.repository import PageRepository
from wiki2html.utils.escape import encode_url, encode_url_parameter, escape_html, page_path_to_url
from wiki2html.utils.paths import concat_web_paths, extract_web_folder, extract_web_name

logger = logging.getLogger(__name__)

_MAILTO_PREFIX = "mailto:"


@dataclass
class RenderedPage:
    """Body and head of a rendered page, without the document shell."""

    title: Optional[str] = None
    body_params: Optional[str] = None
    body_lines: list[str] = field(default_factory=list)
    head_lines: list[str] = field(default_factory=list)

    @classmethod
    def from_writer(cls, writer: HtmlWriter) -> RenderedPage:
        writer.close_all_tags()
        return cls(writer.title, writer.body_params, writer.body_lines, writer.header_lines)


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render a page element tree to HTML.

    The renderer is stateful: it tracks the open list containers through the
    writer's tag stack and remembers the previously rendered block element
    for paragraph spacing. Use one instance per render call.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options
    messages : Messages or None, default = None
        Source of link titles and labels; English defaults when omitted
    repository : PageRepository or None, default = None
        Used to tell existing pages from new ones. Without a repository every
        page link is treated as existing.

    Examples
    --------
        >>> page = WikiPage("/Index", Heading(1, TextOnly("Hello")))
        >>> HtmlRenderer().render(page).body_lines
        ['<h1 id="Hello">Hello</h1>']

    """

    def __init__(
        self,
        options: HtmlRendererOptions | None = None,
        messages: Messages | None = None,
        repository: PageRepository | None = None,
    ):
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.messages: Messages = messages or MessageCatalog()
        self.repository = repository
        self._writer = HtmlWriter()
        self._previous_element: Optional[PageElement] = None

    def render(self, page: WikiPage) -> RenderedPage:
        """Render a page.

        Parameters
        ----------
        page : WikiPage
            Transformed page

        Returns
        -------
        RenderedPage
            Title (the page name), head lines and body lines

        """
        writer = self.render_writer(page)
        writer.set_title(extract_web_name(page.page_path))
        return RenderedPage.from_writer(writer)

    def render_writer(self, element: PageElement) -> HtmlWriter:
        """Render an element into a fresh writer and return it with all tags closed."""
        self._writer = HtmlWriter()
        self._previous_element = None
        self._render(element)
        self._writer.close_all_tags()
        return self._writer

    def render_to_string(self, page: WikiPage) -> str:
        """Render a page body as HTML text, one line per body line."""
        return "\n".join(self.render(page).body_lines)

    # ------------------------------------------------------------------
    # Dispatch and shared helpers
    # ------------------------------------------------------------------

    def _render(self, element: Optional[PageElement]) -> None:
        if element is None:
            return
        if isinstance(element, PageElementList):
            # transparent grouping, members are placed as if spliced in
            element.accept(self)
            return

        if not isinstance(element, ListItem):
            self._set_list_level(0, ordered=False)
        if not element.is_inline:
            self._writer.set_continue_in_new_line()

        element.accept(self)

        if not element.is_inline:
            self._writer.set_continue_in_new_line()
        if not isinstance(element, Anchor):
            self._previous_element = element

    def _render_wrapped(self, tag_name: str, child: Optional[PageElement], params: Optional[str] = None) -> None:
        depth = self._writer.open_tag(tag_name, params)
        self._render(child)
        self._writer.close_tags(depth)

    def _text(self, text: Optional[str]) -> str:
        return escape_html(text or "", enabled=self.options.escape_html)

    def _page_exists(self, page_path: str) -> bool:
        if self.repository is None:
            return True
        return self.repository.exists(page_path)

    def _write_edit_link(
        self, element: PageElement, from_pos: int, to_pos: int, css_class: str, message_key: str, image: str
    ) -> None:
        """Write an "edit this part" link for the page ``element`` lives in."""
        wiki_page = get_context_wiki_page(element, False)
        if wiki_page is None or wiki_page.page_path is None:
            return
        url = page_path_to_url(concat_web_paths(EDIT_URL_PREFIX + "/", wiki_page.page_path))
        url += f"?fromPos={from_pos}&toPos={to_pos}"
        title = escape_html(self.messages.get_message(message_key))
        self._writer.html_text(
            f'<a class="{css_class}" href="{escape_html(encode_url(url))}">'
            f'<img src="{escape_html(image)}" title="{title}" alt=""></a>'
        )

    def _set_list_level(self, level: int, ordered: bool) -> None:
        """Open or close ``ul``/``ol`` containers until ``level`` lists are open.

        A list of the other kind at the target level is closed and reopened.
        """
        writer = self._writer
        current_level = 0
        while writer.get_current_tag(current_level) in ("ul", "ol"):
            current_level += 1

        while current_level > level:
            writer.close_tag()
            writer.set_continue_in_new_line()
            current_level -= 1

        list_tag = "ol" if ordered else "ul"
        if 0 < current_level == level and writer.get_current_tag() != list_tag:
            writer.close_tag()
            writer.set_continue_in_new_line()
            current_level -= 1

        while current_level < level:
            writer.open_tag(list_tag)
            writer.set_continue_in_new_line()
            current_level += 1

    @staticmethod
    def _section_to_pos(heading: Heading) -> Optional[int]:
        """Return the end of the section a heading starts.

        The section ends where the next heading of the same or a higher
        rank starts, or at the end of the enclosing list.
        """
        container = heading.parent
        if not isinstance(container, PageElementList):
            return None
        index = container.index_of(heading)
        for element in container.elements[index + 1 :]:
            if isinstance(element, Heading) and element.level <= heading.level:
                return element.from_pos
        return container.to_pos

    # ------------------------------------------------------------------
    # Containers and block nodes
    # ------------------------------------------------------------------

    def visit_page_element_list(self, node: PageElementList) -> None:
        for element in node:
            self._render(element)

    def visit_wiki_page(self, node: WikiPage) -> None:
        self._render(node.child)

    def visit_heading(self, node: Heading) -> None:
        tag_name = f"h{node.level}" if 1 <= node.level <= MAX_HEADING_TAG_LEVEL else "p"
        content = get_string_content(node)
        params = None
        if content:
            params = f'id="{get_id_string(content)}"'
        depth = self._writer.open_tag(tag_name, params)

        to_pos = self._section_to_pos(node)
        if self.options.generate_edit_links and node.from_pos is not None and to_pos is not None:
            self._write_edit_link(
                node, node.from_pos, to_pos, "editsection", "html.edit_section", self.options.edit_section_image
            )
        self._render(node.child)
        self._writer.close_tags(depth)

    def visit_paragraph(self, node: Paragraph) -> None:
        if node.vertical_spacing and isinstance(self._previous_element, (Paragraph, ListItem, Table)):
            self.visit_vertical_space(VerticalSpace())
        css_class = f"paragraph{node.indention}"
        if node.centered:
            css_class += " center"
        depth = self._writer.open_div_tag(css_class)
        self._render(node.child)
        self._writer.close_tags(depth)

    def visit_list_item(self, node: ListItem) -> None:
        self._set_list_level(node.level, node.ordered)
        self._render_wrapped("li", node.child)

    def visit_separator(self, node: Separator) -> None:
        self._writer.html_text("<hr>")

    def visit_vertical_space(self, node: VerticalSpace) -> None:
        self._writer.open_div_tag("verticalspace")
        self._writer.close_tag()
        self._writer.set_continue_in_new_line()

    def visit_task(self, node: Task) -> None:
        depth = self._writer.open_div_tag(TASK_CSS_CLASSES.get(node.state, TASK_CSS_CLASSES["open"]))
        if node.schedule is not None:
            self._writer.open_span_tag("schedule")
            self._writer.html_text(self._text(node.schedule))
            self._writer.close_tag()
        if node.description is not None:
            self._writer.html_text(self._text(node.description))
        self._writer.close_tags(depth)

    def visit_code(self, node: Code) -> None:
        depth = self._writer.open_div_tag("code")
        if self.options.generate_edit_links and node.from_pos is not None and node.to_pos is not None:
            self._write_edit_link(node, node.from_pos, node.to_pos, "editcode", "html.edit_code", self.options.edit_image)
        tokenizer_class = get_tokenizer(node.language, self.options.code_languages) or PlainTokenizer
        self._writer.html_text(tokenizer_class(node.text).format())
        self._writer.close_tags(depth)

    def visit_table(self, node: Table) -> None:
        writer = self._writer
        depth = writer.open_div_tag("table")
        if self.options.generate_edit_links and node.from_pos is not None and node.to_pos is not None:
            self._write_edit_link(node, node.from_pos, node.to_pos, "edittable", "html.edit_table", self.options.edit_image)

        writer.open_tag("table", f'class="{escape_html(node.params)}"' if node.params is not None else None)
        for row in node.rows:
            writer.set_continue_in_new_line()
            writer.open_tag("tr", f'class="{escape_html(row.params)}"' if row.params is not None else None)
            for cell in row.cells:
                writer.set_continue_in_new_line()
                cell_params = f'class="{escape_html(cell.params)}"' if cell.params is not None else None
                cell_depth = writer.open_tag("th" if cell.header else "td", cell_params)
                content = cell.content
                if (
                    self.options.generate_edit_links
                    and content is not None
                    and content.from_pos is not None
                    and content.to_pos is not None
                ):
                    writer.open_div_tag("tablecell")
                    self._write_edit_link(
                        node, content.from_pos, content.to_pos, "editcell", "html.edit_table_cell", self.options.edit_image
                    )
                # no spacing before the first paragraph of a cell
                self._previous_element = None
                self._render(content)
                writer.close_tags(cell_depth)
            writer.set_continue_in_new_line()
            writer.close_tag()
        writer.set_continue_in_new_line()
        writer.close_tags(depth)

    def visit_include_page(self, node: IncludePage) -> None:
        logger.debug(f"Unresolved include of {node.page_path} is not rendered")

    def visit_table_of_contents(self, node: TableOfContents) -> None:
        pass

    def visit_parent(self, node: Parent) -> None:
        pass

    # ------------------------------------------------------------------
    # Inline formatting
    # ------------------------------------------------------------------

    def visit_bold(self, node: Bold) -> None:
        self._render_wrapped("b", node.child)

    def visit_italic(self, node: Italic) -> None:
        self._render_wrapped("i", node.child)

    def visit_underlined(self, node: Underlined) -> None:
        self._render_wrapped("u", node.child)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self._render_wrapped("strike", node.child)

    def visit_monospace(self, node: Monospace) -> None:
        self._render_wrapped("tt", node.child)

    def visit_small(self, node: Small) -> None:
        depth = self._writer.open_span_tag("small")
        self._render(node.child)
        self._writer.close_tags(depth)

    def visit_color(self, node: Color) -> None:
        self._render_wrapped("font", node.child, f'color="{escape_html(node.color_name)}"')

    def visit_style(self, node: Style) -> None:
        depth = self._writer.open_span_tag(" ".join(node.css_classes))
        self._render(node.child)
        self._writer.close_tags(depth)

    # ------------------------------------------------------------------
    # Raw text and markup
    # ------------------------------------------------------------------

    def visit_nowiki(self, node: Nowiki) -> None:
        self._writer.html_text(self._text(node.text).replace("\n", "<br>\n"))

    def visit_html(self, node: Html) -> None:
        self._writer.html_text(node.text)

    def visit_html_tag(self, node: HtmlTag) -> None:
        self._render_wrapped(node.tag_name, node.child, node.tag_attributes)

    def visit_xml_tag(self, node: XmlTag) -> None:
        self._render(node.child)

    def visit_text_only(self, node: TextOnly) -> None:
        self._writer.html_text(self._text(node.text))

    def visit_line_break(self, node: LineBreak) -> None:
        self._writer.html_new_line()

    def visit_anchor(self, node: Anchor) -> None:
        self._writer.open_tag("a", f'name="{escape_html(node.name)}"')
        self._writer.close_tag()

    # ------------------------------------------------------------------
    # Links, images and search
    # ------------------------------------------------------------------

    def visit_link_page(self, node: LinkPage) -> None:
        context_page = get_context_wiki_page(node, False)
        link_path = get_absolute_page_path(node.page_path, context_page)
        new_page = False
        if node.page_path is not None and link_path is not None:
            if link_path.endswith("/") or self._page_exists(link_path):
                url = VIEW_URL_PREFIX + link_path
            else:
                url = EDIT_URL_PREFIX + link_path
                new_page = True
        else:
            # anchor in the current page
            url = ""
        url = page_path_to_url(url)
        show_anchor = node.anchor is not None and not new_page
        if show_anchor:
            url += "#" + encode_url_parameter(node.anchor)

        params = f'href="{escape_html(encode_url(url))}"'
        if new_page:
            params = 'class="linknewpage" ' + params
        depth = self._writer.open_tag("a", params)
        if node.child is not None:
            self._render(node.child)
        else:
            if node.page_path is not None:
                if node.page_path.endswith("/"):
                    name = extract_web_name(node.page_path[:-1]) or "/"
                else:
                    name = extract_web_name(node.page_path)
                self._writer.html_text(self._text(name))
            if show_anchor:
                self._writer.html_text("#" + self._text(node.anchor))
        self._writer.close_tags(depth)

    def visit_link_wiki(self, node: LinkWiki) -> None:
        url: Optional[str]
        command = node.command
        if command == "startpage":
            url = "/"
            text = self.messages.get_message("wiki.startpage")
        elif command == "editpage":
            wiki_page = get_context_wiki_page(node, True)
            url = None
            if wiki_page is not None and wiki_page.page_path is not None:
                url = concat_web_paths(EDIT_URL_PREFIX + "/", wiki_page.page_path)
            text = self.messages.get_message("wiki.editpage")
        elif command == "newpage":
            wiki_page = get_context_wiki_page(node, True)
            url = EDIT_URL_PREFIX + "/"
            if wiki_page is not None and wiki_page.page_path is not None:
                url = concat_web_paths(url, extract_web_folder(wiki_page.page_path))
            text = self.messages.get_message("wiki.newpage")
        elif command == "shutdown":
            url = "/shutdown"
            text = self.messages.get_message("wiki.shutdown")
        elif command == "status":
            url = "/status"
            text = self.messages.get_message("wiki.status")
        else:
            url = None
            text = f"wiki:{escape_html(command)}?"

        if url is not None:
            self._writer.open_tag("a", f'href="{escape_html(encode_url(page_path_to_url(url)))}"')
        if node.child is not None:
            self._render(node.child)
        else:
            self._writer.html_text(text)
        if url is not None:
            self._writer.close_tag()

    def visit_link_local_file(self, node: LinkLocalFile) -> None:
        file_path = get_absolute_page_path(node.file_path, get_context_wiki_page(node, False))
        if file_path is None:
            return
        url = page_path_to_url(FILE_URL_PREFIX + file_path)
        depth = self._writer.open_tag("a", f'class="linkfile" href="{escape_html(encode_url(url))}"')
        if node.child is not None:
            self._render(node.child)
        else:
            self._writer.html_text(self._text(node.file_path))
        self._writer.close_tags(depth)

    def visit_link_external(self, node: LinkExternal) -> None:
        is_email = node.url.startswith(_MAILTO_PREFIX)
        css_class = "linkemail" if is_email else "linkexternal"
        depth = self._writer.open_tag("a", f'class="{css_class}" href="{escape_html(node.url)}"')
        if node.child is not None:
            self._render(node.child)
        elif is_email:
            self._writer.html_text(self._text(node.url[len(_MAILTO_PREFIX) :]))
        else:
            self._writer.html_text(self._text(node.url))
        self._writer.close_tags(depth)

    def visit_image(self, node: Image) -> None:
        url: Optional[str] = node.url
        if not node.url.startswith("http"):
            url = get_absolute_page_path(node.url, get_context_wiki_page(node, False))
            if url is None:
                return
            url = encode_url(page_path_to_url(IMAGE_URL_PREFIX + url))
        attributes = "".join(f' {name}="{escape_html(str(value))}"' for name, value in node.options.items())
        self._writer.html_text(f'<img src="{escape_html(url)}"{attributes} alt="">')

    def visit_search_input(self, node: SearchInput) -> None:
        depth = self._writer.open_form_tag(DEFAULT_SEARCH_FORM_NAME, DEFAULT_SEARCH_ACTION, "get")
        hint = escape_html(self.messages.get_message("html.search"))
        self._writer.html_text(f'<input type="text" name="text" placeholder="{hint}">')
        self._writer.close_tags(depth)

    # ------------------------------------------------------------------
    # Wiki tags; resolved by the transformation pipeline
    # ------------------------------------------------------------------

    def visit_wiki_version(self, node: WikiVersion) -> None:
        pass

    def visit_date_time(self, node: DateTime) -> None:
        pass

    def visit_page_name(self, node: PageName) -> None:
        pass

    def visit_page_timestamp(self, node: PageTimestamp) -> None:
        pass

    def visit_wiki_tag(self, node: WikiTag) -> None:
        pass

    def visit_list_view_history(self, node: ListViewHistory) -> None:
        pass

    def visit_list_edit_history(self, node: ListEditHistory) -> None:
        pass

    def visit_list_parents(self, node: ListParents) -> None:
        pass

    def visit_list_children(self, node: ListChildren) -> None:
        pass

    def visit_list_pages(self, node: ListPages) -> None:
        pass

    def visit_list_wanted_pages(self, node: ListWantedPages) -> None:
        pass

    def visit_list_unlinked_pages(self, node: ListUnlinkedPages) -> None:
        pass
