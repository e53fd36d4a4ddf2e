#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/ast/transforms.py
"""Generic page element tree rewriting.

Every transformation pass is a callback handed to :func:`transform_tree`.
The engine walks the tree depth-first, lets the callback substitute or
delete each node, then descends into whatever node the callback returned.
Passes therefore never walk the tree themselves and never touch parent
pointers.

Examples
--------
Drop every separator and upper-case all text:

    >>> def callback(element):
    ...     if isinstance(element, Separator):
    ...         return None
    ...     if isinstance(element, TextOnly):
    ...         return TextOnly(element.text.upper())
    ...     return element
    >>> page = transform_page(page, callback)

"""

from __future__ import annotations

from typing import Callable, Optional

from wiki2html.ast.nodes import PageElement, PageElementList, PageElementWithChild, Table, WikiPage

TransformCallback = Callable[[PageElement], Optional[PageElement]]
"""Per-node callback: return the node, a replacement, or ``None`` to delete."""


def transform_tree(element: Optional[PageElement], callback: TransformCallback) -> Optional[PageElement]:
    """Apply ``callback`` to every node of a subtree.

    Parameters
    ----------
    element : PageElement or None
        Root of the subtree
    callback : TransformCallback
        Called once per node except :class:`PageElementList` nodes, whose
        members are visited instead

    Returns
    -------
    PageElement or None
        The transformed subtree. ``None`` when the callback deleted the root.

    Notes
    -----
    Deletion is honoured structurally only inside a :class:`PageElementList`,
    where the member is removed. Anywhere else a deleted node leaves an
    empty slot (a ``None`` child or cell content).

    """
    if element is None:
        return None

    if not isinstance(element, PageElementList):
        original = element
        element = callback(element)
        if element is not None and element is not original:
            # replacement sits in the original's slot from here on
            element.parent = original.parent

    if isinstance(element, PageElementWithChild):
        element.child = transform_tree(element.child, callback)
        return element
    if isinstance(element, PageElementList):
        return _transform_list(element, callback)
    if isinstance(element, Table):
        return _transform_table(element, callback)
    return element


def _transform_list(element_list: PageElementList, callback: TransformCallback) -> PageElementList:
    index = 0
    while index < len(element_list):
        result = transform_tree(element_list.get(index), callback)
        if result is None:
            element_list.remove(index)
        else:
            element_list.set(index, result)
            index += 1
    return element_list


def _transform_table(table: Table, callback: TransformCallback) -> Table:
    for row in table.rows:
        for cell in row.cells:
            cell.content = transform_tree(cell.content, callback)
    return table


def transform_page(page: WikiPage, callback: TransformCallback) -> WikiPage:
    """Apply ``callback`` to a whole page.

    The result is always a :class:`WikiPage`. When the callback replaced the
    root with something else (or deleted it) the result is wrapped in a new
    page with the original path and source span.
    """
    result = transform_tree(page, callback)
    if isinstance(result, WikiPage):
        return result
    return WikiPage(page.page_path, result, page.from_pos, page.to_pos)
