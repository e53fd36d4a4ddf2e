#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/ast/utils.py
"""Utility functions for working with page elements.

Functions
---------
get_context_wiki_page : Find the page a node lives in
get_absolute_page_path : Resolve a page path against a context page
traverse_page_elements : Typed depth-first walk, including table cells
get_string_content : Concatenate the text of a subtree
get_id_string : Turn text into a valid HTML id

Examples
--------
Find all links of a page:

    >>> links = []
    >>> traverse_page_elements(page, LinkPage, lambda link, acc: acc.append(link), links)

"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from wiki2html.ast.nodes import PageElement, PageElementList, PageElementWithChild, Table, TextOnly, WikiPage
from wiki2html.utils.paths import extract_web_folder, make_web_path_absolute

T = TypeVar("T", bound=PageElement)
C = TypeVar("C")


def get_context_wiki_page(element: Optional[PageElement], global_context: bool) -> Optional[WikiPage]:
    """Return the page a node belongs to.

    Parameters
    ----------
    element : PageElement or None
        Node to start from; the node itself counts
    global_context : bool
        False returns the nearest enclosing page (e.g. an included page).
        True returns the outermost page, i.e. the one without a parent.

    Returns
    -------
    WikiPage or None
        ``None`` when no page encloses the node

    """
    while element is not None:
        if isinstance(element, WikiPage) and (not global_context or element.parent is None):
            return element
        element = element.parent
    return None


def get_absolute_page_path(page_path: Optional[str], context_page: Optional[WikiPage]) -> Optional[str]:
    """Resolve ``page_path`` relative to the folder of ``context_page``.

    Without a ``page_path`` the path of the context page itself is returned.
    """
    if context_page is None:
        return None
    if page_path is not None:
        return make_web_path_absolute(page_path, extract_web_folder(context_page.page_path))
    return context_page.page_path


def traverse_page_elements(
    element: PageElement,
    node_type: type[T],
    consumer: Callable[[T, C], None],
    context: C,
    recurse_into_matches: bool = True,
) -> None:
    """Call ``consumer(node, context)`` for every node of type ``node_type``.

    Parameters
    ----------
    element : PageElement
        Root of the walk
    node_type : type
        Node class to look for
    consumer : callable
        Receives each matching node and ``context``
    context : Any
        Accumulator handed to every consumer call
    recurse_into_matches : bool, default True
        Whether to continue below a matching node

    """
    if isinstance(element, node_type):
        consumer(element, context)
        if not recurse_into_matches:
            return

    if isinstance(element, PageElementWithChild):
        if element.child is not None:
            traverse_page_elements(element.child, node_type, consumer, context, recurse_into_matches)
    elif isinstance(element, PageElementList):
        for member in element:
            traverse_page_elements(member, node_type, consumer, context, recurse_into_matches)
    elif isinstance(element, Table):
        for row in element.rows:
            for cell in row.cells:
                if cell.content is not None:
                    traverse_page_elements(cell.content, node_type, consumer, context, recurse_into_matches)


def get_string_content(element: PageElement) -> str:
    """Return the concatenated text of all :class:`TextOnly` nodes below ``element``."""
    parts: list[str] = []
    traverse_page_elements(element, TextOnly, lambda text_only, acc: acc.append(text_only.text), parts)
    return "".join(parts)


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def get_id_string(text: str) -> str:
    """Reduce text to the characters allowed in an HTML id.

    Letters and ``_`` are always kept. Digits, ``-``, ``.`` and ``:`` are
    kept only once a letter has been seen, because an id must start with a
    letter.

    >>> get_id_string("1. Getting started!")
    'Gettingstarted'

    """
    result: list[str] = []
    letter_prefix = False
    for ch in text:
        if _is_ascii_letter(ch) or ch == "_":
            letter_prefix = True
            result.append(ch)
        elif letter_prefix and (("0" <= ch <= "9") or ch in "-.:"):
            result.append(ch)
    return "".join(result)
