#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/highlight/yaml.py
"""YAML highlighting.

Only the line structure of YAML is recognized: comments, document
separators, ``key: value`` pairs, list dashes and block scalars (values
introduced by ``|`` or ``>``). A block scalar continues as long as the
following lines are indented deeper than the key that introduced it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from wiki2html.highlight.base import Token, Tokenizer

DOCUMENT_SEPARATOR = "---"


class YamlTokenKind(Enum):
    COMMENT = "comment"
    DOCUMENT_SEPARATOR = "document-separator"
    SPECIAL_CHARACTER = "special-character"
    KEY = "key"
    VALUE = "value"
    MULTILINE_TEXT = "multiline-text"
    WHITE_SPACE = "white-space"
    LINE_BREAK = "line-break"
    PLAIN = "plain"


class YamlTokenizer(Tokenizer):
    language = "yaml"
    unstyled_kinds = frozenset({YamlTokenKind.WHITE_SPACE, YamlTokenKind.PLAIN})

    def __init__(self, text: str):
        super().__init__(text)
        self._expected = YamlTokenKind.KEY
        # 1-based column of the last character read
        self._pos_in_line = 0
        self._indention_of_last_key = 0

    def _read(self) -> str:
        self._pos_in_line += 1
        return super()._read()

    def _unread(self) -> None:
        self._pos_in_line -= 1
        super()._unread()

    def _finish(self, parts: list[str], kind: YamlTokenKind) -> Token:
        self._unread()
        return Token("".join(parts), kind)

    def next_token(self) -> Optional[Token]:
        parts: Optional[list[str]] = None
        kind: Optional[YamlTokenKind] = None

        while not self.at_end:
            ch = self._read()
            if ch == "\r":
                continue

            if parts is not None:
                if kind is YamlTokenKind.COMMENT and ch == "\n":
                    self._expected = YamlTokenKind.KEY
                    return self._finish(parts, kind)
                if kind is YamlTokenKind.KEY and ch in ":\n":
                    self._expected = YamlTokenKind.SPECIAL_CHARACTER
                    return self._finish(parts, kind)
                if kind is YamlTokenKind.VALUE and ch == "\n":
                    self._expected = YamlTokenKind.KEY
                    return self._finish(parts, kind)
                if kind is YamlTokenKind.MULTILINE_TEXT and ch == "\n":
                    self._unread()
                    if self._multiline_text_continues():
                        self._expected = YamlTokenKind.MULTILINE_TEXT
                    else:
                        self._expected = YamlTokenKind.KEY
                    return Token("".join(parts), kind)
                if kind is YamlTokenKind.WHITE_SPACE and ch not in " \t":
                    return self._finish(parts, kind)
                parts.append(ch)
                continue

            expected = self._expected
            if ch == "\n":
                self._pos_in_line = 0
                if expected is not YamlTokenKind.MULTILINE_TEXT:
                    self._expected = YamlTokenKind.KEY
                return Token(ch, YamlTokenKind.LINE_BREAK)
            if expected is YamlTokenKind.KEY and ch == "-":
                if self._text.startswith(DOCUMENT_SEPARATOR, self._pos - 1):
                    # the rest of the line is a comment
                    self._skip(len(DOCUMENT_SEPARATOR) - 1)
                    self._pos_in_line += len(DOCUMENT_SEPARATOR) - 1
                    self._expected = YamlTokenKind.COMMENT
                    return Token(DOCUMENT_SEPARATOR, YamlTokenKind.DOCUMENT_SEPARATOR)
                return Token(ch, YamlTokenKind.SPECIAL_CHARACTER)

            if (expected is YamlTokenKind.KEY and ch == "#") or expected is YamlTokenKind.COMMENT:
                parts, kind = [ch], YamlTokenKind.COMMENT
            elif expected is YamlTokenKind.SPECIAL_CHARACTER and ch == ":":
                self._expected = YamlTokenKind.VALUE
                return Token(ch, YamlTokenKind.SPECIAL_CHARACTER)
            elif expected is YamlTokenKind.MULTILINE_TEXT:
                parts, kind = [ch], YamlTokenKind.MULTILINE_TEXT
            elif ch == ":":
                # colon without a key
                self._expected = YamlTokenKind.VALUE
                return Token(ch, YamlTokenKind.SPECIAL_CHARACTER)
            elif ch in " \t":
                parts, kind = [ch], YamlTokenKind.WHITE_SPACE
            elif expected is YamlTokenKind.KEY:
                self._indention_of_last_key = self._pos_in_line
                parts, kind = [ch], YamlTokenKind.KEY
            elif expected is YamlTokenKind.VALUE:
                kind = YamlTokenKind.MULTILINE_TEXT if ch in ">|" else YamlTokenKind.VALUE
                parts = [ch]
            else:
                return Token(ch, YamlTokenKind.PLAIN)

        if parts is not None:
            return Token("".join(parts), kind)
        return None

    def _multiline_text_continues(self) -> bool:
        """Check whether the line after the cursor belongs to the open block scalar.

        The cursor must sit on the line break that ends the current line.
        Blank lines are skipped; the first non-blank character decides. Its
        column must be greater than the column of the introducing key. The
        cursor is not moved.
        """
        column = 0
        text = self._text
        for index in range(self._pos + 1, len(text)):
            ch = text[index]
            if ch == "\n":
                column = 0
                continue
            column += 1
            if not ch.isspace():
                return column > self._indention_of_last_key
        return True
