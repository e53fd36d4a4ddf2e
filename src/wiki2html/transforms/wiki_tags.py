#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/transforms/wiki_tags.py
"""Replace functional wiki tags by static content.

Handles the table of contents, page names and timestamps, the current
date and time, the program version and the page listings. Runs as the
last pass so that tags from included pages and generated content are
resolved too.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from wiki2html.ast.nodes import (
    DateTime,
    Heading,
    LinkPage,
    Listable,
    ListChildren,
    ListEditHistory,
    ListItem,
    ListPages,
    ListParents,
    ListUnlinkedPages,
    ListViewHistory,
    ListWantedPages,
    PageElement,
    PageElementList,
    PageName,
    PageTimestamp,
    Paragraph,
    Parent,
    TableOfContents,
    TextOnly,
    WikiPage,
    WikiVersion,
)
from wiki2html.ast.utils import (
    get_absolute_page_path,
    get_context_wiki_page,
    get_id_string,
    get_string_content,
    traverse_page_elements,
)
from wiki2html.constants import TOC_MAX_LEVEL
from wiki2html.exceptions import PageNotFoundError
from wiki2html.messages import MessageCatalog, Messages
from wiki2html.options.pipeline import PipelineOptions
from wiki2html.repository import PageRepository
from wiki2html.transforms.base import Clock, PageTransform
from wiki2html.utils.paths import extract_web_folder, extract_web_name, make_web_path_absolute

logger = logging.getLogger(__name__)


def _sorted_paths(paths: Iterable[str]) -> list[str]:
    return sorted(paths, key=lambda path: (path.casefold(), path))


def generate_stepwise_links(path: str) -> PageElementList:
    """Link every folder level of ``path``, e.g. ``/``, ``a/`` and ``b`` for ``/a/b``."""
    result = PageElementList()
    path = make_web_path_absolute(path, None)
    left = 0
    while left < len(path):
        right = path.find("/", left)
        if right < 0:
            right = len(path) - 1
        if left > 0:
            result.add(TextOnly(" "))
        result.add(LinkPage(path[: right + 1], None, TextOnly(path[left : right + 1])))
        left = right + 1
    return result


class WikiTagsTransform(PageTransform):
    """Resolve wiki tags that depend on the page, the repository or the clock.

    Parameters
    ----------
    repository : PageRepository
        Source of page metadata and page lists
    messages : Messages, optional
        Date formats
    options : PipelineOptions, optional
        Program version, index page name and start page
    clock : callable, optional
        Current time

    """

    name = "wiki-tags"

    def __init__(
        self,
        repository: PageRepository,
        messages: Optional[Messages] = None,
        options: Optional[PipelineOptions] = None,
        clock: Optional[Clock] = None,
    ):
        self.repository = repository
        self.messages: Messages = messages or MessageCatalog()
        self.options: PipelineOptions = options or PipelineOptions()
        self.clock: Clock = clock or datetime.now

    def transform_element(self, element: PageElement) -> Optional[PageElement]:
        if isinstance(element, TableOfContents):
            return self.table_of_contents(element)
        if isinstance(element, Parent):
            # only relevant to the repository
            return None
        if isinstance(element, WikiVersion):
            return TextOnly(self.options.program_name_version)
        if isinstance(element, DateTime):
            return TextOnly(self.clock().strftime(self.messages.get_message(f"dateformat.{element.format}")))
        if isinstance(element, PageName):
            return self.page_name(element)
        if isinstance(element, PageTimestamp):
            return self.page_timestamp(element)
        if isinstance(element, Listable):
            return self.listable(element)
        return element

    def table_of_contents(self, element: TableOfContents) -> PageElement:
        """Build numbered links to the headings of levels 1 to 3."""
        page = get_context_wiki_page(element, False)
        if page is None:
            return PageElementList()

        headings: list[Heading] = []
        traverse_page_elements(page, Heading, lambda heading, acc: acc.append(heading), headings, False)

        result = PageElementList()
        counters = [0] * TOC_MAX_LEVEL
        for heading in headings:
            if heading.level > TOC_MAX_LEVEL:
                continue
            counters[heading.level - 1] += 1
            for index in range(heading.level, TOC_MAX_LEVEL):
                counters[index] = 0
            numbering = "".join(f"{counter}." for counter in counters[: heading.level])

            text = PageElementList([TextOnly(numbering + " ")])
            if heading.child is not None:
                text.add(heading.child.clone())
            link = LinkPage(None, get_id_string(get_string_content(heading)), text)
            result.add(Paragraph(False, heading.level, False, link))
        return result

    def page_name(self, element: PageName) -> Optional[PageElement]:
        page = get_context_wiki_page(element, element.global_context)
        if page is None or page.page_path is None:
            return None
        page_path = page.page_path

        if element.page_name_format == "page_title":
            title = extract_web_name(page_path)
            return LinkPage(page_path, None, TextOnly(title)) if element.linked else TextOnly(title)
        if element.page_name_format == "page_folder":
            folder = extract_web_folder(page_path)
            return generate_stepwise_links(folder) if element.linked else TextOnly(folder)
        return generate_stepwise_links(page_path) if element.linked else TextOnly(page_path)

    def page_timestamp(self, element: PageTimestamp) -> Optional[PageElement]:
        page = get_context_wiki_page(element, element.global_context)
        if page is None or page.page_path is None:
            return None
        try:
            modified = self.repository.page_info(page.page_path).modified
        except PageNotFoundError:
            logger.warning(f"Cannot show timestamp of page '{page.page_path}' as it doesn't exist")
            return None
        if modified is None:
            return None
        return TextOnly(modified.strftime(self.messages.get_message("dateformat.datetime")))

    # -- page lists --------------------------------------------------------

    def listable(self, element: Listable) -> Optional[PageElement]:
        if isinstance(element, ListViewHistory):
            paths = self.repository.last_viewed(element.max_length)
        elif isinstance(element, ListEditHistory):
            paths = self.repository.last_modified(element.max_length)
        elif isinstance(element, (ListParents, ListChildren)):
            found = self.related_pages(element)
            if found is None:
                return None
            paths = found
        elif isinstance(element, ListPages):
            found = self.folder_pages(element)
            if found is None:
                return None
            paths = found
        elif isinstance(element, ListWantedPages):
            paths = self.wanted_pages()
        elif isinstance(element, ListUnlinkedPages):
            paths = self.unlinked_pages(element)
        else:
            return element
        return self.generate_list_of_page_links(paths, element)

    def related_pages(self, element: ListParents | ListChildren) -> Optional[list[str]]:
        page = get_context_wiki_page(element, element.global_context)
        page_path = get_absolute_page_path(element.page_path, page)
        if page_path is None:
            return None
        try:
            info = self.repository.page_info(page_path)
        except PageNotFoundError:
            # generated pages have no relations
            logger.warning(f"Cannot list relations of page '{page_path}' as it doesn't exist")
            return None
        return _sorted_paths(info.parents if isinstance(element, ListParents) else info.children)

    def folder_pages(self, element: ListPages) -> Optional[list[str]]:
        page = get_context_wiki_page(element, element.global_context)
        if page is None:
            return None
        folder = element.folder
        if folder is None:
            folder = extract_web_folder(page.page_path)
        folder = get_absolute_page_path(folder, page)
        return _sorted_paths(
            path
            for path in self.repository.page_paths()
            if folder is None or extract_web_folder(path).startswith(folder)
        )

    def wanted_pages(self) -> list[str]:
        existing = set(self.repository.page_paths())
        wanted = {
            path for path in self.extract_all_page_links(existing) if path not in existing and not path.endswith("/")
        }
        return _sorted_paths(wanted)

    def unlinked_pages(self, element: ListUnlinkedPages) -> list[str]:
        all_paths = set(self.repository.page_paths())
        result = set(all_paths)
        index_page_name = self.options.index_page_name
        for path in self.extract_all_page_links(all_paths):
            # folder links point at the folder's index page
            if path.endswith("/") and index_page_name:
                result.discard(path + index_page_name)
            else:
                result.discard(path)

        for path in all_paths:
            try:
                info = self.repository.page_info(path)
            except PageNotFoundError:
                logger.warning(f"Cannot read relations of page '{path}', ignoring it")
                continue
            if element.hide_parents:
                result -= info.parents
            if element.hide_children:
                result -= info.children

        result.discard(self.options.startpage_path)
        return _sorted_paths(result)

    def extract_all_page_links(self, page_paths: Iterable[str]) -> set[str]:
        """Return the absolute targets of all page links on the given pages."""
        linked: set[str] = set()

        def consume(link: LinkPage, context: set[str]) -> None:
            path = get_absolute_page_path(link.page_path, get_context_wiki_page(link, False))
            if path is not None:
                context.add(path)

        for page_path in page_paths:
            try:
                page: WikiPage = self.repository.lookup_page(page_path)
            except PageNotFoundError:
                logger.warning(f"Cannot scan page '{page_path}' for links, ignoring it")
                continue
            traverse_page_elements(page, LinkPage, consume, linked)
        return linked

    def generate_list_of_page_links(self, page_paths: list[str], element: Listable) -> Optional[PageElement]:
        """Turn page paths into list items or inline links.

        An empty list becomes ``output_on_empty``, or is deleted when that
        is not set.
        """
        if not page_paths:
            return TextOnly(element.output_on_empty) if element.output_on_empty is not None else None

        result = PageElementList()
        for index, page_path in enumerate(page_paths):
            if element.page_name_format == "page_folder":
                name = extract_web_folder(page_path)
            elif element.page_name_format == "page_title":
                name = extract_web_name(page_path)
            else:
                name = page_path
            link = LinkPage(page_path, None, TextOnly(name))

            if element.show_inline:
                if index > 0 and element.inline_list_separator is not None:
                    result.add(TextOnly(element.inline_list_separator))
                result.add(link)
            else:
                result.add(ListItem(1, False, link))
        return result
