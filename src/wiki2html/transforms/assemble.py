#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/transforms/assemble.py
"""Combine a page with the site's navigation, header and footer pages."""

from __future__ import annotations

import logging
from typing import Optional

from wiki2html.ast.nodes import HtmlTag, PageElementList, WikiPage
from wiki2html.exceptions import PageNotFoundError
from wiki2html.options.pipeline import PipelineOptions
from wiki2html.repository import PageRepository

logger = logging.getLogger(__name__)


def _lookup_optional(repository: PageRepository, page_path: Optional[str], role: str) -> Optional[WikiPage]:
    if page_path is None:
        return None
    try:
        return repository.lookup_page(page_path)
    except PageNotFoundError:
        logger.warning(f"Error reading {role} page '{page_path}' to assemble the page, ignoring it")
        return None


def assemble_page(
    page: WikiPage, repository: PageRepository, options: Optional[PipelineOptions] = None
) -> WikiPage:
    """Wrap ``page`` with the configured navigation, header and footer pages.

    Parameters
    ----------
    page : WikiPage
        Page to show
    repository : PageRepository
        Source of the surrounding pages
    options : PipelineOptions, optional
        Paths of the navigation, header and footer pages; unset paths are
        skipped

    Returns
    -------
    WikiPage
        New root page with the path of ``page``. The navigation sits in a
        ``div.menu``, header, page and footer in a ``div.wikipage``. Each
        embedded page keeps its own :class:`WikiPage` node.

    Examples
    --------
        >>> options = PipelineOptions(navigation_page_path="/Navigation")
        >>> full_page = assemble_page(page, repository, options)

    """
    options = options or PipelineOptions()
    content = PageElementList()

    navigation = _lookup_optional(repository, options.navigation_page_path, "navigation")
    if navigation is not None:
        content.add(HtmlTag("div", 'class="menu"', navigation))

    body = PageElementList()
    header = _lookup_optional(repository, options.header_page_path, "header")
    if header is not None:
        body.add(header)
    body.add(page)
    footer = _lookup_optional(repository, options.footer_page_path, "footer")
    if footer is not None:
        body.add(footer)
    content.add(HtmlTag("div", 'class="wikipage"', body))

    return WikiPage(page.page_path, content)
