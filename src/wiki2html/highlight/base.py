#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/highlight/base.py
"""Shared machinery for the single-pass code tokenizers.

A tokenizer is constructed with the complete text of one code block and
hands out :class:`Token` values until the text is exhausted. Concatenating
the ``text`` of all tokens always reproduces the input, minus any ``\\r``
characters, which are dropped.

Each language defines an :class:`enum.Enum` of token kinds whose values are
the CSS class suffixes, e.g. ``attribute-name`` for
``<span class="code-xml-attribute-name">``. Every kind enum has a
``LINE_BREAK`` member; line break tokens are rendered as ``<br>``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator, Optional

from wiki2html.utils.escape import escape_and_format_code_html

LINE_BREAK_HTML = "<br>\n"


@dataclass(frozen=True)
class Token:
    """A classified run of source text."""

    text: str
    kind: Enum


class Tokenizer(ABC):
    """Base class for the code tokenizers.

    Subclasses implement :meth:`next_token` as a state machine over the
    input, using :meth:`_read`, :meth:`_unread` and :meth:`_peek` to move
    the read cursor. A tokenizer instance is single use and not thread-safe.

    Parameters
    ----------
    text : str
        Complete text of the code block

    """

    language: ClassVar[str] = ""
    unstyled_kinds: ClassVar[frozenset] = frozenset()

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _read(self) -> str:
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def _unread(self) -> None:
        self._pos -= 1

    def _peek(self, offset: int = 0) -> Optional[str]:
        """Return the character ``offset`` places after the cursor without consuming it."""
        index = self._pos + offset
        if index < len(self._text):
            return self._text[index]
        return None

    def _lookahead_is(self, expected: str) -> bool:
        return self._text.startswith(expected, self._pos)

    def _skip(self, count: int) -> None:
        self._pos += count

    @abstractmethod
    def next_token(self) -> Optional[Token]:
        """Return the next token, or ``None`` at the end of the input."""
        ...

    def __iter__(self) -> Iterator[Token]:
        token = self.next_token()
        while token is not None:
            yield token
            token = self.next_token()

    def format_token(self, token: Token) -> str:
        """Render a single token as HTML."""
        if token.kind.name == "LINE_BREAK":
            return LINE_BREAK_HTML
        text = escape_and_format_code_html(token.text)
        if token.kind in self.unstyled_kinds:
            return text
        return f'<span class="code-{self.language}-{token.kind.value}">{text}</span>'

    def format(self) -> str:
        """Tokenize the remaining input and return it as highlighted HTML."""
        return "".join(self.format_token(token) for token in self)
