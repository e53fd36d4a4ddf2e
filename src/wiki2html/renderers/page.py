#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/renderers/page.py
"""Complete HTML documents around rendered page bodies."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from wiki2html.messages import MessageCatalog, Messages
from wiki2html.options.html import PageShellOptions
from wiki2html.renderers.base import BaseRenderer
from wiki2html.renderers.html import RenderedPage
from wiki2html.renderers.html_writer import HtmlWriter
from wiki2html.utils.escape import escape_html

logger = logging.getLogger(__name__)


class PageShell:
    """Wraps rendered pages into HTML documents.

    Parameters
    ----------
    options : PageShellOptions or None, default = None
        Document type, program name and extra head content
    messages : Messages or None, default = None
        Texts of the message and error documents

    Examples
    --------
        >>> shell = PageShell()
        >>> html = shell.render_document(HtmlRenderer().render(page))

    """

    def __init__(self, options: PageShellOptions | None = None, messages: Messages | None = None):
        BaseRenderer._validate_options_type(options, PageShellOptions, "page shell")
        self.options: PageShellOptions = options or PageShellOptions()
        self.messages: Messages = messages or MessageCatalog()

    def render_document(self, source: Union[HtmlWriter, RenderedPage]) -> str:
        """Build the complete document.

        Parameters
        ----------
        source : HtmlWriter or RenderedPage
            Page body; open tags of a writer are closed first

        Returns
        -------
        str
            The document, every line terminated by a newline

        """
        rendered = RenderedPage.from_writer(source) if isinstance(source, HtmlWriter) else source

        program_name = self.options.program_name
        title = f"{rendered.title} | {program_name}" if rendered.title else program_name

        extra_head = HtmlWriter()
        for stylesheet in self.options.stylesheets:
            extra_head.add_stylesheet(stylesheet)
        for script in self.options.scripts:
            extra_head.add_javascript(script)

        lines = [self.options.doctype, "<html>", "<head>", f"  <title>{escape_html(title)}</title>"]
        lines.extend(f"  {line}" for line in extra_head.header_lines + rendered.head_lines)
        if self.options.header_html:
            lines.append(self.options.header_html)
        lines.append("</head>")
        lines.append(f"<body {rendered.body_params}>" if rendered.body_params else "<body>")
        lines.extend(f"  {line}" for line in rendered.body_lines)
        lines.append("</body>")
        lines.append("</html>")
        return "\n".join(lines) + "\n"

    def message_page(self, message_key: str, *args: Any) -> str:
        """Render a document showing a single bold message."""
        writer = HtmlWriter()
        message = self.messages.get_message(message_key, *args)
        writer.html_text(f"<b>{escape_html(message)}</b>")
        return self.render_document(writer)

    def error_page(self, message_key: str, *args: Any, details: Optional[str] = None) -> str:
        """Render an error document.

        Parameters
        ----------
        message_key : str
            Key of the error description
        *args : Any
            Arguments of the error description
        details : str, optional
            Technical details, e.g. the exception text

        """
        message = self.messages.get_message(message_key, *args)
        logger.warning(f"Rendering error page: {message}")
        writer = HtmlWriter()
        writer.set_title(self.messages.get_message("errorpage.title"))
        writer.html_text(f"<b>{escape_html(self.messages.get_message('errorpage.message', message))}</b>")
        writer.html_new_line()
        if details is not None:
            writer.html_text(escape_html(details))
            writer.html_new_line()
        writer.html_new_line()
        writer.html_text(self.messages.get_message("errorpage.link_to_startpage"))
        return self.render_document(writer)
