#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/transforms/include_page.py
"""Inline the pages referenced by ``{{includepage:...}}`` tags.

Runs before every other pass so that the tags of included pages are
resolved as well.
"""

from __future__ import annotations

import logging
from typing import Optional

from wiki2html.ast.nodes import IncludePage, PageElement, WikiPage
from wiki2html.ast.utils import get_absolute_page_path, get_context_wiki_page
from wiki2html.constants import DEFAULT_MAX_INCLUDE_DEPTH
from wiki2html.exceptions import PageNotFoundError
from wiki2html.repository import PageRepository
from wiki2html.transforms.base import PageTransform

logger = logging.getLogger(__name__)


def _enclosing_page_paths(element: PageElement) -> list[Optional[str]]:
    paths = []
    current: Optional[PageElement] = element
    while current is not None:
        if isinstance(current, WikiPage):
            paths.append(current.page_path)
        current = current.parent
    return paths


class IncludePageTransform(PageTransform):
    """Replace :class:`IncludePage` nodes by a copy of the referenced page.

    The included page keeps its own :class:`WikiPage` node, so relative
    links inside it still resolve against its own folder. The engine then
    descends into the included page, which resolves nested includes.

    Parameters
    ----------
    repository : PageRepository
        Source of the included pages
    max_include_depth : int, default 8
        Maximum number of nested includes

    """

    name = "include-page"

    def __init__(self, repository: PageRepository, max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH):
        self.repository = repository
        self.max_include_depth = max_include_depth

    def transform_element(self, element: PageElement) -> Optional[PageElement]:
        if not isinstance(element, IncludePage):
            return element

        page_path = get_absolute_page_path(element.page_path, get_context_wiki_page(element, False))
        if page_path is None:
            logger.warning(f"Cannot include page '{element.page_path}' outside of a wiki page")
            return None

        enclosing = _enclosing_page_paths(element)
        if page_path in enclosing:
            logger.warning(f"Not including page '{page_path}' into itself")
            return None
        if len(enclosing) > self.max_include_depth:
            logger.warning(f"Not including page '{page_path}', nesting exceeds {self.max_include_depth} levels")
            return None

        try:
            return self.repository.lookup_page(page_path)
        except PageNotFoundError:
            logger.warning(f"Cannot include page '{element.page_path}' as it doesn't exist")
            return None
