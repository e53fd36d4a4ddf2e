"""wiki2html - Render parsed wiki pages as HTML.

wiki2html takes the page element tree produced by a wiki markup parser,
resolves its functional tags through a sequence of transformation passes
and renders the result as HTML, with syntax highlighting for embedded code.

Key Features
------------
- Page element tree with parent links and source spans for edit links
- Generic tree rewriting engine shared by all transformation passes
- Page includes, contact cards, event lists, tables of contents and page listings
- Stack-based HTML writer producing well-formed, indented output
- Highlighting for Java, XML/HTML, properties, INI and YAML code blocks

Requirements
------------
- Python 3.10+

Examples
--------
Render a page into a complete HTML document:

    >>> from wiki2html import to_html
    >>> from wiki2html.ast import Heading, PageElementList, TextOnly, WikiPage
    >>> page = WikiPage("/Index", PageElementList([Heading(1, TextOnly("Welcome"))]))
    >>> html = to_html(page)

Highlight a code snippet:

    >>> from wiki2html.highlight import highlight
    >>> html = highlight("key: value", "yaml")

See Also
--------
wiki2html.ast : page element tree and transformation engine
wiki2html.transforms : transformation passes
wiki2html.renderers : HTML rendering

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "wiki2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from wiki2html.api import render_page, to_html, view_page
from wiki2html.config import Wiki2HtmlConfig, build_options, load_config_file
from wiki2html.exceptions import (
    ConfigurationError,
    InvalidOptionsError,
    PageNotFoundError,
    TransformError,
    TreeStructureError,
    ValidationError,
    Wiki2HtmlError,
)
from wiki2html.logging_utils import configure_logging
from wiki2html.messages import MessageCatalog, Messages
from wiki2html.options import HtmlRendererOptions, PageShellOptions, PipelineOptions
from wiki2html.renderers import HtmlRenderer, HtmlWriter, PageShell, RenderedPage
from wiki2html.repository import InMemoryRepository, PageInfo, PageRepository

__all__ = [
    "__version__",
    "to_html",
    "render_page",
    "view_page",
    "build_options",
    "load_config_file",
    "configure_logging",
    "Wiki2HtmlConfig",
    "HtmlRenderer",
    "HtmlWriter",
    "PageShell",
    "RenderedPage",
    "HtmlRendererOptions",
    "PageShellOptions",
    "PipelineOptions",
    "MessageCatalog",
    "Messages",
    "InMemoryRepository",
    "PageInfo",
    "PageRepository",
    "Wiki2HtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigurationError",
    "PageNotFoundError",
    "TransformError",
    "TreeStructureError",
]
