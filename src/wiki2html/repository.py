#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/repository.py
"""Access to the wiki pages a rendered page refers to.

The transformation passes never read files themselves; they go through a
:class:`PageRepository`. Storage, caching and indexing are left to the
embedding application. :class:`InMemoryRepository` is a dict-backed
implementation for tests and small embedded wikis.

Parent/child relations are declared on the child page: every
:class:`~wiki2html.ast.nodes.Parent` element names a parent page, and a
page's children are all pages naming it as parent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional, Protocol, runtime_checkable

from wiki2html.ast.nodes import Parent, WikiPage
from wiki2html.ast.utils import get_absolute_page_path, get_context_wiki_page, traverse_page_elements
from wiki2html.exceptions import PageNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageInfo:
    """Metadata of a stored page."""

    parents: frozenset[str] = field(default_factory=frozenset)
    children: frozenset[str] = field(default_factory=frozenset)
    modified: Optional[datetime] = None


@runtime_checkable
class PageRepository(Protocol):
    """Read access to stored wiki pages."""

    def lookup_page(self, page_path: str) -> WikiPage:
        """Return the parsed page; raises :class:`PageNotFoundError` if missing."""
        ...

    def exists(self, page_path: str) -> bool: ...

    def page_paths(self) -> list[str]:
        """Return the paths of all pages."""
        ...

    def page_info(self, page_path: str) -> PageInfo:
        """Return page metadata; raises :class:`PageNotFoundError` if missing."""
        ...

    def last_viewed(self, limit: int = -1) -> list[str]:
        """Return recently viewed page paths, most recent first; ``-1`` for all."""
        ...

    def last_modified(self, limit: int = -1) -> list[str]:
        """Return recently modified page paths, most recent first; ``-1`` for all."""
        ...

    def mark_viewed(self, page_path: str) -> None:
        """Record ``page_path`` as the most recently viewed page."""
        ...


def _limit(paths: list[str], limit: int) -> list[str]:
    if limit is None or limit < 0:
        return paths
    return paths[:limit]


def _declared_parents(page: WikiPage) -> frozenset[str]:
    parents: set[str] = set()

    def collect(element: Parent, context: set[str]) -> None:
        path = get_absolute_page_path(element.parent_page_path, get_context_wiki_page(element, False))
        if path is not None:
            context.add(path)

    traverse_page_elements(page, Parent, collect, parents, recurse_into_matches=False)
    return frozenset(parents)


class InMemoryRepository:
    """Dict-backed :class:`PageRepository`.

    Pages are stored as given and handed out as clones, so callers may
    transform what they look up.

    Parameters
    ----------
    pages : iterable of WikiPage, optional
        Initial pages; each needs a ``page_path``

    Examples
    --------
        >>> repository = InMemoryRepository([WikiPage("/Index", TextOnly("Hello"))])
        >>> repository.exists("/Index")
        True

    """

    def __init__(self, pages: Optional[Iterable[WikiPage]] = None):
        self._pages: dict[str, WikiPage] = {}
        self._modified: dict[str, datetime] = {}
        self._parents: dict[str, frozenset[str]] = {}
        self._view_history: list[str] = []
        for page in pages or ():
            self.add_page(page)

    def add_page(self, page: WikiPage, modified: Optional[datetime] = None) -> None:
        """Store or replace a page.

        Raises
        ------
        ValueError
            If the page has no path

        """
        if not page.page_path:
            raise ValueError("Stored pages need a page_path")
        self._pages[page.page_path] = page
        self._modified[page.page_path] = modified or datetime.now()
        self._parents[page.page_path] = _declared_parents(page)
        logger.debug(f"Stored page {page.page_path}")

    def remove_page(self, page_path: str) -> None:
        if page_path not in self._pages:
            raise PageNotFoundError(page_path)
        del self._pages[page_path]
        del self._modified[page_path]
        del self._parents[page_path]
        self._view_history = [path for path in self._view_history if path != page_path]

    def mark_viewed(self, page_path: str) -> None:
        """Move ``page_path`` to the front of the view history."""
        if page_path in self._view_history:
            self._view_history.remove(page_path)
        self._view_history.insert(0, page_path)

    def lookup_page(self, page_path: str) -> WikiPage:
        page = self._pages.get(page_path)
        if page is None:
            raise PageNotFoundError(page_path)
        return page.clone()

    def exists(self, page_path: str) -> bool:
        return page_path in self._pages

    def page_paths(self) -> list[str]:
        return sorted(self._pages)

    def page_info(self, page_path: str) -> PageInfo:
        if page_path not in self._pages:
            raise PageNotFoundError(page_path)
        children = frozenset(path for path, parents in self._parents.items() if page_path in parents)
        return PageInfo(self._parents[page_path], children, self._modified[page_path])

    def last_viewed(self, limit: int = -1) -> list[str]:
        return _limit([path for path in self._view_history if path in self._pages], limit)

    def last_modified(self, limit: int = -1) -> list[str]:
        paths = sorted(self._modified, key=lambda path: self._modified[path], reverse=True)
        return _limit(paths, limit)

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, page_path: object) -> bool:
        return page_path in self._pages
