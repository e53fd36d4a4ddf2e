#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/api.py
"""High-level entry points: transform, render and wrap a wiki page in one call."""

from __future__ import annotations

import logging
from typing import Optional

from wiki2html.ast.nodes import WikiPage
from wiki2html.config import Wiki2HtmlConfig
from wiki2html.exceptions import PageNotFoundError
from wiki2html.renderers.html import HtmlRenderer, RenderedPage
from wiki2html.renderers.page import PageShell
from wiki2html.repository import InMemoryRepository, PageRepository
from wiki2html.transforms.assemble import assemble_page
from wiki2html.transforms.base import Clock
from wiki2html.transforms.pipeline import default_pipeline

logger = logging.getLogger(__name__)


def render_page(
    page: WikiPage,
    repository: Optional[PageRepository] = None,
    *,
    config: Optional[Wiki2HtmlConfig] = None,
    clock: Optional[Clock] = None,
    assemble: bool = True,
) -> RenderedPage:
    """Transform a parsed page and render its body.

    Parameters
    ----------
    page : WikiPage
        Parsed page; it is modified in place by the passes
    repository : PageRepository, optional
        Pages referenced by includes, listings and event lists. Defaults to
        an empty repository, which makes every page link count as existing.
    config : Wiki2HtmlConfig, optional
        Options and messages, e.g. from :func:`wiki2html.config.build_options`
    clock : callable, optional
        Current time for date tags, ages and event lists
    assemble : bool, default True
        Add the configured navigation, header and footer pages

    Returns
    -------
    RenderedPage
        Title, body attributes, body lines and extra head lines

    """
    config = config or Wiki2HtmlConfig()
    pages: PageRepository = repository if repository is not None else InMemoryRepository()

    if assemble:
        page = assemble_page(page, pages, config.pipeline)
    page = default_pipeline(pages, config.messages, config.pipeline, clock).apply(page)

    renderer = HtmlRenderer(config.html, config.messages, repository)
    return renderer.render(page)


def to_html(
    page: WikiPage,
    repository: Optional[PageRepository] = None,
    *,
    config: Optional[Wiki2HtmlConfig] = None,
    clock: Optional[Clock] = None,
    assemble: bool = True,
) -> str:
    """Transform and render ``page`` into a complete HTML document.

    Examples
    --------
        >>> page = WikiPage("/Index", PageElementList([Heading(1, TextOnly("Welcome"))]))
        >>> html = to_html(page)

    """
    config = config or Wiki2HtmlConfig()
    rendered = render_page(page, repository, config=config, clock=clock, assemble=assemble)
    return PageShell(config.shell, config.messages).render_document(rendered)


def view_page(
    repository: PageRepository,
    page_path: str,
    *,
    config: Optional[Wiki2HtmlConfig] = None,
    clock: Optional[Clock] = None,
) -> str:
    """Render a stored page as HTML document, or an error document if it is missing.

    The page is added to the repository's view history.
    """
    config = config or Wiki2HtmlConfig()
    try:
        page = repository.lookup_page(page_path)
    except PageNotFoundError:
        logger.warning(f"Page '{page_path}' not found, sending error page")
        return PageShell(config.shell, config.messages).error_page("page.not_found", page_path)

    repository.mark_viewed(page_path)
    return to_html(page, repository, config=config, clock=clock)
