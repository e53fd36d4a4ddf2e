#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning transformed page trees into HTML.

- :class:`HtmlWriter` builds properly nested, indented HTML lines
- :class:`HtmlRenderer` renders a page body
- :class:`PageShell` wraps a body into a complete document
"""

from wiki2html.renderers.base import BaseRenderer
from wiki2html.renderers.html import HtmlRenderer, RenderedPage
from wiki2html.renderers.html_writer import HtmlWriter
from wiki2html.renderers.page import PageShell

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "HtmlWriter",
    "PageShell",
    "RenderedPage",
]
