#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/highlight/xml.py
"""XML and HTML highlighting.

Recognized constructs:

- tags with their names, attribute names and quoted or unquoted values
- ``<!-- ... -->`` comments, continued line by line
- ``<![CDATA[ ... ]]>`` sections, continued line by line
- character references such as ``&amp;`` or ``&#160;``

``<!DOCTYPE ...>`` and ``<?xml ...?>`` are handled as ordinary tags whose
``!`` or ``?`` prefix is a special character.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from wiki2html.highlight.base import Token, Tokenizer

_CDATA_START = "![CDATA["
_CDATA_END = "]]>"


class XmlTokenKind(Enum):
    COMMENT = "comment"
    SPECIAL_CHARACTER = "special-character"
    CDATA = "cdata"
    TAG = "tag"
    ATTRIBUTE_NAME = "attribute-name"
    ATTRIBUTE_VALUE = "attribute-value"
    ESCAPED_CHARACTER = "escaped-character"
    LINE_BREAK = "line-break"
    TEXT = "text"


def _is_name_start(ch: str) -> bool:
    return ch.isalpha() or ch in "_$:"


def _is_name_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$-:."


class XmlTokenizer(Tokenizer):
    """Tokenizer for XML and HTML documents."""

    language = "xml"
    unstyled_kinds = frozenset({XmlTokenKind.TEXT, XmlTokenKind.CDATA})

    def __init__(self, text: str):
        super().__init__(text)
        self._expected = XmlTokenKind.TEXT

    def next_token(self) -> Optional[Token]:
        parts: Optional[list[str]] = None
        kind: Optional[XmlTokenKind] = None
        quote: Optional[str] = None

        while not self.at_end:
            ch = self._read()
            if ch == "\r":
                continue

            if parts is not None:
                token = self._continue_token(ch, parts, kind, quote)
                if token is not None:
                    return token
                continue

            if ch == "\n":
                return Token(ch, XmlTokenKind.LINE_BREAK)

            if self._expected is XmlTokenKind.COMMENT:
                # comment continues after a line break; re-read so a leading "-->" is seen
                parts, kind = [], XmlTokenKind.COMMENT
                self._unread()
            elif ch == "<" and self._lookahead_is("!--"):
                self._skip(3)
                parts, kind = ["<!--"], XmlTokenKind.COMMENT
            elif self._expected is XmlTokenKind.CDATA:
                parts, kind = [], XmlTokenKind.CDATA
                self._unread()
            elif ch == "<" and self._lookahead_is(_CDATA_START):
                self._skip(len(_CDATA_START))
                self._expected = XmlTokenKind.CDATA
                return Token("<" + _CDATA_START, XmlTokenKind.TAG)
            elif ch in "</?!":
                self._expected = XmlTokenKind.TAG
                return Token(ch, XmlTokenKind.SPECIAL_CHARACTER)
            elif ch == ">":
                self._expected = XmlTokenKind.TEXT
                return Token(ch, XmlTokenKind.SPECIAL_CHARACTER)
            elif ch == "&":
                parts, kind = [ch], XmlTokenKind.ESCAPED_CHARACTER
            elif self._expected is XmlTokenKind.TAG and _is_name_start(ch):
                parts, kind = [ch], XmlTokenKind.TAG
            elif self._expected is XmlTokenKind.ATTRIBUTE_NAME and _is_name_start(ch):
                parts, kind = [ch], XmlTokenKind.ATTRIBUTE_NAME
            elif self._expected is XmlTokenKind.ATTRIBUTE_NAME and ch == "=":
                self._expected = XmlTokenKind.ATTRIBUTE_VALUE
                return Token(ch, XmlTokenKind.SPECIAL_CHARACTER)
            elif (
                self._expected in (XmlTokenKind.ATTRIBUTE_NAME, XmlTokenKind.ATTRIBUTE_VALUE)
                and ch != "="
                and not ch.isspace()
            ):
                parts, kind = [ch], XmlTokenKind.ATTRIBUTE_VALUE
                quote = ch if ch in "\"'" else None
            else:
                parts, kind = [ch], XmlTokenKind.TEXT

        if parts is not None:
            return Token("".join(parts), kind)
        return None

    def _continue_token(
        self, ch: str, parts: list[str], kind: Optional[XmlTokenKind], quote: Optional[str]
    ) -> Optional[Token]:
        """Feed ``ch`` to the open token; return the token once it is complete."""
        if kind is XmlTokenKind.COMMENT:
            if ch == "-" and self._peek() == "-":
                self._skip(1)
                parts.append("--")
                if self._peek() == ">":
                    self._skip(1)
                    parts.append(">")
                self._expected = XmlTokenKind.TEXT
                return Token("".join(parts), XmlTokenKind.COMMENT)
            if ch == "\n":
                self._unread()
                self._expected = XmlTokenKind.COMMENT
                return Token("".join(parts), XmlTokenKind.COMMENT)
            parts.append(ch)
            return None

        if kind is XmlTokenKind.CDATA:
            at_end_marker = ch == "]" and self._lookahead_is(_CDATA_END[1:])
            if ch == "\n" or (at_end_marker and parts):
                self._unread()
                self._expected = XmlTokenKind.CDATA
                return Token("".join(parts), XmlTokenKind.CDATA)
            if at_end_marker:
                self._skip(len(_CDATA_END) - 1)
                self._expected = XmlTokenKind.TEXT
                return Token(_CDATA_END, XmlTokenKind.TAG)
            parts.append(ch)
            return None

        if kind is XmlTokenKind.TAG:
            if not _is_name_char(ch):
                self._unread()
                self._expected = XmlTokenKind.ATTRIBUTE_NAME
                return Token("".join(parts), XmlTokenKind.TAG)
            parts.append(ch)
            return None

        if kind is XmlTokenKind.ATTRIBUTE_NAME:
            if not _is_name_char(ch):
                self._unread()
                self._expected = XmlTokenKind.ATTRIBUTE_NAME
                return Token("".join(parts), XmlTokenKind.ATTRIBUTE_NAME)
            parts.append(ch)
            return None

        if kind is XmlTokenKind.ATTRIBUTE_VALUE:
            if quote is not None and ch == quote:
                parts.append(ch)
                self._expected = XmlTokenKind.ATTRIBUTE_NAME
                return Token("".join(parts), XmlTokenKind.ATTRIBUTE_VALUE)
            if ch == "\n" or (quote is None and ch in "/?> "):
                self._unread()
                self._expected = XmlTokenKind.ATTRIBUTE_NAME
                return Token("".join(parts), XmlTokenKind.ATTRIBUTE_VALUE)
            parts.append(ch)
            return None

        if kind is XmlTokenKind.ESCAPED_CHARACTER:
            if ch == ";":
                parts.append(ch)
                self._expected = XmlTokenKind.TEXT
                return Token("".join(parts), XmlTokenKind.ESCAPED_CHARACTER)
            if ch in " \n":
                self._unread()
                self._expected = XmlTokenKind.TEXT
                return Token("".join(parts), XmlTokenKind.ESCAPED_CHARACTER)
            parts.append(ch)
            return None

        # text runs until markup starts, or until a non-blank inside a tag
        inside_tag = self._expected in (XmlTokenKind.ATTRIBUTE_NAME, XmlTokenKind.ATTRIBUTE_VALUE)
        if ch in "<&\n" or (inside_tag and not ch.isspace()):
            self._unread()
            return Token("".join(parts), XmlTokenKind.TEXT)
        parts.append(ch)
        return None
