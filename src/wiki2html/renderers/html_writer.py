#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/renderers/html_writer.py
"""Incremental HTML writer with a stack of open tags.

The writer collects body lines. Text is appended to the current line; after
:meth:`HtmlWriter.set_continue_in_new_line` the next write starts a fresh
line indented by two spaces per open tag. Every opened tag is pushed on a
stack so callers can unwind to a remembered depth with
:meth:`HtmlWriter.close_tags`, which keeps the output properly nested.

Examples
--------
    >>> writer = HtmlWriter()
    >>> depth = writer.open_div_tag("paragraph0")
    >>> writer.html_text("Hello")
    >>> writer.close_tags(depth)
    >>> writer.body_lines
    ['<div class="paragraph0">Hello</div>']

"""

from __future__ import annotations

from typing import Optional

from wiki2html.constants import FORM_ENCTYPE, FormMethod
from wiki2html.utils.escape import escape_html


class HtmlWriter:
    """Collects the head and body lines of one HTML document.

    Not thread-safe; use one writer per render.
    """

    def __init__(self) -> None:
        self.title: Optional[str] = None
        self.body_params: Optional[str] = None
        self._header_lines: list[str] = []
        self._body_lines: list[str] = []
        self._tag_stack: list[str] = []
        # the first write always starts a line
        self._continue_in_new_line = True

    # ------------------------------------------------------------------
    # Head
    # ------------------------------------------------------------------

    def set_title(self, title: Optional[str]) -> None:
        self.title = title

    def set_redirect(self, url: str, seconds: int = 0) -> None:
        """Add a meta refresh redirect to the head."""
        self._header_lines.append(f'<meta http-equiv="Refresh" content="{seconds}; URL={url}" />')

    def add_stylesheet(self, url: str) -> None:
        self._header_lines.append(f'<link rel="stylesheet" type="text/css" href="{url}" />')

    def add_javascript(self, url: str) -> None:
        self._header_lines.append(f'<script type="text/javascript" src="{url}"></script>')

    @property
    def header_lines(self) -> list[str]:
        return list(self._header_lines)

    def set_body_params(self, body_params: Optional[str]) -> None:
        self.body_params = body_params

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    @property
    def body_lines(self) -> list[str]:
        return list(self._body_lines)

    @property
    def stack_depth(self) -> int:
        return len(self._tag_stack)

    def set_continue_in_new_line(self) -> None:
        """Start a new line with the next write."""
        self._continue_in_new_line = True

    def html_text(self, text: Optional[str]) -> None:
        """Append raw HTML to the current line.

        The text is not escaped. When a new line was requested it is started
        first, indented by the current tag depth.
        """
        if self._continue_in_new_line:
            self._body_lines.append("  " * len(self._tag_stack))
            self._continue_in_new_line = False
        if text is not None:
            self._body_lines[-1] += text

    def html_new_line(self) -> None:
        """Write a ``<br>`` and continue on a new line."""
        self.html_text("<br>")
        self.set_continue_in_new_line()

    def open_tag(self, tag_name: str, params: Optional[str] = None) -> int:
        """Write an opening tag and push it on the tag stack.

        Parameters
        ----------
        tag_name : str
            Tag name, e.g. ``div``
        params : str or None
            Attribute string written verbatim

        Returns
        -------
        int
            Stack depth before the tag was opened; pass it to
            :meth:`close_tags` to close this tag and everything opened
            after it

        """
        if params:
            self.html_text(f"<{tag_name} {params}>")
        else:
            self.html_text(f"<{tag_name}>")
        self._tag_stack.append(tag_name)
        return len(self._tag_stack) - 1

    def open_div_tag(self, css_class: Optional[str] = None, params: Optional[str] = None) -> int:
        """Open a ``div`` with an optional CSS class and extra attributes."""
        tag_params = []
        if css_class is not None:
            tag_params.append(f'class="{escape_html(css_class)}"')
        if params is not None:
            tag_params.append(params)
        return self.open_tag("div", " ".join(tag_params))

    def open_span_tag(self, css_class: str) -> int:
        return self.open_tag("span", f'class="{escape_html(css_class)}"')

    def open_form_tag(self, name: Optional[str], action: str, method: FormMethod = "get") -> int:
        """Open a form posting url-encoded UTF-8 data to ``action``."""
        method_name = "get" if method == "get" else "post"
        params = f'method="{method_name}" action="{escape_html(action)}" enctype="{FORM_ENCTYPE}"'
        if name is not None:
            params += f' name="{escape_html(name)}"'
        return self.open_tag("form", params)

    def close_tag(self) -> None:
        """Close the innermost open tag; does nothing when no tag is open."""
        if not self._tag_stack:
            return
        tag_name = self._tag_stack.pop()
        self.html_text(f"</{tag_name}>")

    def close_tags(self, stack_depth: int) -> None:
        """Close tags until only ``stack_depth`` tags remain open."""
        while len(self._tag_stack) > stack_depth:
            self.close_tag()

    def close_all_tags(self) -> None:
        self.close_tags(0)

    def get_current_tag(self, down_stack: int = 0) -> Optional[str]:
        """Return the open tag ``down_stack`` levels below the innermost one."""
        if 0 <= down_stack < len(self._tag_stack):
            return self._tag_stack[-1 - down_stack]
        return None

    def add_html_writer(self, other: Optional[HtmlWriter]) -> None:
        """Append the body of another writer, closing its open tags first.

        Each line of ``other`` becomes a line of this writer, indented by the
        current tag depth.
        """
        if other is None:
            return
        other.close_all_tags()
        for line in other._body_lines:
            self.set_continue_in_new_line()
            self.html_text(line)
        self.set_continue_in_new_line()
