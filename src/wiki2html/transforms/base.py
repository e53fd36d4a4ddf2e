#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/transforms/base.py
"""Base class for page transformation passes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, ClassVar, Optional

from wiki2html.ast.nodes import PageElement, WikiPage
from wiki2html.ast.transforms import transform_page

Clock = Callable[[], datetime]
"""Returns the current time; injected so passes can be tested deterministically."""


class PageTransform(ABC):
    """One semantic rewrite step over a whole page.

    Subclasses implement :meth:`transform_element`, which is called once per
    node by the tree engine. Returning the node keeps it, returning another
    node substitutes it and returning ``None`` deletes it from its list.

    Examples
    --------
        >>> class DropSeparators(PageTransform):
        ...     name = "drop-separators"
        ...     def transform_element(self, element):
        ...         return None if isinstance(element, Separator) else element
        >>> page = DropSeparators().transform_page(page)

    """

    name: ClassVar[str] = "transform"

    def transform_page(self, page: WikiPage) -> WikiPage:
        return transform_page(page, self.transform_element)

    @abstractmethod
    def transform_element(self, element: PageElement) -> Optional[PageElement]:
        """Return ``element``, a replacement, or ``None`` to delete it."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
