#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the HTML document shell."""
import logging

import pytest

from wiki2html.constants import HTML_DOCUMENT_TYPE
from wiki2html.exceptions import InvalidOptionsError
from wiki2html.messages import MessageCatalog
from wiki2html.options import HtmlRendererOptions, PageShellOptions
from wiki2html.renderers import HtmlWriter, PageShell, RenderedPage


@pytest.mark.unit
class TestRenderDocument:
    """Test document assembly."""

    def test_minimal_document(self) -> None:
        """Test the exact layout of a document with default options."""
        rendered = RenderedPage(title="Index", body_lines=["<p>x</p>"])
        assert PageShell().render_document(rendered) == "\n".join(
            [
                HTML_DOCUMENT_TYPE,
                "<html>",
                "<head>",
                "  <title>Index | wiki2html</title>",
                "</head>",
                "<body>",
                "  <p>x</p>",
                "</body>",
                "</html>",
                "",
            ]
        )

    def test_head_content_and_body_params(self) -> None:
        """Test stylesheets, scripts, extra head markup and body attributes."""
        options = PageShellOptions(
            program_name="My Wiki",
            stylesheets=["/wiki.css"],
            scripts=["/wiki.js"],
            header_html='<meta name="robots" content="noindex">',
        )
        rendered = RenderedPage(title=None, body_params='onload="init()"', head_lines=['<base href="/">'])
        lines = PageShell(options).render_document(rendered).splitlines()

        assert "  <title>My Wiki</title>" in lines
        head = lines[lines.index("<head>") : lines.index("</head>")]
        assert '  <link rel="stylesheet" type="text/css" href="/wiki.css" />' in head
        assert '  <script type="text/javascript" src="/wiki.js"></script>' in head
        assert '  <base href="/">' in head
        assert '<meta name="robots" content="noindex">' in head
        assert '<body onload="init()">' in lines

    def test_title_is_escaped(self) -> None:
        """Test that page names cannot inject markup into the head."""
        html = PageShell().render_document(RenderedPage(title="<script>"))
        assert "<title>&lt;script&gt; | wiki2html</title>" in html

    def test_writer_source_is_closed(self) -> None:
        """Test that an HtmlWriter with open tags is closed before wrapping."""
        writer = HtmlWriter()
        writer.open_div_tag("x")
        writer.html_text("y")
        html = PageShell().render_document(writer)
        assert '  <div class="x">y</div>' in html.splitlines()

    def test_wrong_options_type(self) -> None:
        """Test that renderer options are rejected."""
        with pytest.raises(InvalidOptionsError):
            PageShell(HtmlRendererOptions())


@pytest.mark.unit
class TestMessageAndErrorPages:
    """Test the generated single-purpose documents."""

    def test_message_page(self) -> None:
        """Test a bold, escaped message."""
        shell = PageShell(messages=MessageCatalog({"page.not_found": "Missing <{0}>"}))
        html = shell.message_page("page.not_found", "/X")
        assert "  <b>Missing &lt;/X&gt;</b>" in html.splitlines()

    def test_error_page(self, caplog) -> None:
        """Test error title, details and the start page link."""
        with caplog.at_level(logging.WARNING, logger="wiki2html.renderers.page"):
            html = PageShell().error_page("page.not_found", "/X", details="Trace <1>")

        assert "<title>Error | wiki2html</title>" in html
        assert "<b>An error occurred: Page not found: /X</b>" in html
        assert "Trace &lt;1&gt;" in html
        assert '<a href="/">Go to the start page</a>' in html
        assert "Rendering error page" in caplog.text
