#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/highlight/plain.py
"""Fallback tokenizer for languages without a highlighter."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from wiki2html.highlight.base import Token, Tokenizer


class PlainTokenKind(Enum):
    TEXT = "text"
    LINE_BREAK = "line-break"


class PlainTokenizer(Tokenizer):
    """Splits text into lines only; nothing is styled.

    The output still keeps indentation and line breaks, because whitespace
    becomes ``&nbsp;`` and every newline a ``<br>``.
    """

    language = "plain"
    unstyled_kinds = frozenset({PlainTokenKind.TEXT})

    def next_token(self) -> Optional[Token]:
        parts: list[str] = []
        while not self.at_end:
            ch = self._read()
            if ch == "\r":
                continue
            if ch == "\n":
                if parts:
                    self._unread()
                    break
                return Token("\n", PlainTokenKind.LINE_BREAK)
            parts.append(ch)
        if parts:
            return Token("".join(parts), PlainTokenKind.TEXT)
        return None
