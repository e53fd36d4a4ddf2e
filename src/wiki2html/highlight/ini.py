#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/highlight/ini.py
"""INI file highlighting."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from wiki2html.highlight.base import Token, Tokenizer


class IniTokenKind(Enum):
    SECTION_BRACKET = "section-bracket"
    SECTION_NAME = "section-name"
    COMMENT = "comment"
    KEY = "key"
    DELIMITER = "delimiter"
    VALUE = "value"
    WHITE_SPACE = "white-space"
    LINE_BREAK = "line-break"
    PLAIN = "plain"


class IniTokenizer(Tokenizer):
    """Highlights ``[section]`` headers, comments and ``key = value`` lines.

    The tokenizer remembers which kind of token it expects next; that
    expectation decides how an ambiguous character such as ``=`` or ``[`` is
    classified.
    """

    language = "ini"
    unstyled_kinds = frozenset({IniTokenKind.WHITE_SPACE, IniTokenKind.PLAIN})

    def __init__(self, text: str):
        super().__init__(text)
        self._expected = IniTokenKind.KEY

    def _finish(self, parts: list[str], kind: IniTokenKind, expected: Optional[IniTokenKind] = None) -> Token:
        self._unread()
        if expected is not None:
            self._expected = expected
        return Token("".join(parts), kind)

    def next_token(self) -> Optional[Token]:
        parts: Optional[list[str]] = None
        kind: Optional[IniTokenKind] = None

        while not self.at_end:
            ch = self._read()
            if ch == "\r":
                continue

            if parts is not None:
                if kind is IniTokenKind.COMMENT and ch == "\n":
                    return self._finish(parts, kind, IniTokenKind.KEY)
                if kind is IniTokenKind.SECTION_NAME and ch in "]\n":
                    return self._finish(parts, kind, IniTokenKind.SECTION_BRACKET)
                if kind is IniTokenKind.KEY and ch in " =\n":
                    return self._finish(parts, kind, IniTokenKind.DELIMITER)
                if kind is IniTokenKind.VALUE and ch == "\n":
                    return self._finish(parts, kind, IniTokenKind.KEY)
                if kind is IniTokenKind.WHITE_SPACE and ch not in " \t":
                    return self._finish(parts, kind)
                parts.append(ch)
                continue

            expected = self._expected
            if ch == "\n":
                self._expected = IniTokenKind.KEY
                return Token(ch, IniTokenKind.LINE_BREAK)
            if expected is IniTokenKind.KEY and ch == "[":
                self._expected = IniTokenKind.SECTION_NAME
                return Token(ch, IniTokenKind.SECTION_BRACKET)
            if expected is IniTokenKind.SECTION_NAME and ch != "]":
                parts, kind = [ch], IniTokenKind.SECTION_NAME
            elif expected in (IniTokenKind.SECTION_BRACKET, IniTokenKind.SECTION_NAME) and ch == "]":
                self._expected = IniTokenKind.KEY
                return Token(ch, IniTokenKind.SECTION_BRACKET)
            elif expected is IniTokenKind.KEY and ch in "#;":
                parts, kind = [ch], IniTokenKind.COMMENT
            elif ch in " \t":
                parts, kind = [ch], IniTokenKind.WHITE_SPACE
            elif expected is IniTokenKind.KEY:
                parts, kind = [ch], IniTokenKind.KEY
            elif expected is IniTokenKind.DELIMITER and ch in "=:":
                self._expected = IniTokenKind.VALUE
                return Token(ch, IniTokenKind.DELIMITER)
            elif expected in (IniTokenKind.DELIMITER, IniTokenKind.VALUE):
                parts, kind = [ch], IniTokenKind.VALUE
            else:
                return Token(ch, IniTokenKind.PLAIN)

        if parts is not None:
            return Token("".join(parts), kind)
        return None
