"""Escaping helpers for HTML text and wiki URLs."""

from __future__ import annotations

import re
from html import escape as _html_escape
from typing import Optional
from urllib.parse import quote_plus

# Characters encode_url leaves untouched besides letters, digits and "-_.~"
_URL_SAFE_CHARS = "!*'()/?&=#%"

# Characters that have a meaning in a URL and therefore must not appear in a page path
_PAGE_PATH_RESERVED = "!%?#"

_WHITESPACE_RE = re.compile(r"\s")


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def escape_and_format_code_html(text: str) -> str:
    """Escape text for a highlighted code span.

    Every whitespace character becomes ``&nbsp;`` so indentation survives in
    the browser.
    """
    return _WHITESPACE_RE.sub("&nbsp;", escape_html(text))


def encode_url(url: str) -> str:
    """Percent-encode a URL while keeping its structural punctuation.

    Spaces become ``+``; non-ASCII characters are encoded as UTF-8.
    """
    return quote_plus(url, safe=_URL_SAFE_CHARS)


def encode_url_parameter(value: str) -> str:
    """Encode a single query parameter or fragment value."""
    return quote_plus(value)


def page_path_to_url(page_path: str) -> str:
    """Escape characters of a page path that would otherwise end the URL path.

    The characters ``! % ? #`` are written as ``!`` followed by two
    hexadecimal digits.

    >>> page_path_to_url("/view/What?")
    '/view/What!3f'

    """
    return "".join(f"!{ord(ch):02x}" if ch in _PAGE_PATH_RESERVED else ch for ch in page_path)


def url_to_page_path(url: Optional[str]) -> Optional[str]:
    """Reverse :func:`page_path_to_url`."""
    if url is None:
        return None
    parts: list[str] = []
    i = 0
    while i < len(url):
        ch = url[i]
        if ch == "!" and i + 2 < len(url):
            try:
                parts.append(chr(int(url[i + 1 : i + 3], 16)))
            except ValueError:
                parts.append(ch)
            else:
                i += 2
        else:
            parts.append(ch)
        i += 1
    return "".join(parts)
