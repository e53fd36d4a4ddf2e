#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/highlight/properties.py
"""Java properties file highlighting."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from wiki2html.highlight.base import Token, Tokenizer


class PropertiesTokenKind(Enum):
    COMMENT = "comment"
    KEY = "key"
    DELIMITER = "delimiter"
    VALUE = "value"
    WHITE_SPACE = "white-space"
    LINE_BREAK = "line-break"
    PLAIN = "plain"


class PropertiesTokenizer(Tokenizer):
    """Highlights ``key = value`` and ``key: value`` lines and comments.

    Comments start with ``#``, ``;`` or ``//``. A bare line break keeps the
    current expectation, so a key without delimiter continues with a value
    on the next line.
    """

    language = "properties"
    unstyled_kinds = frozenset({PropertiesTokenKind.WHITE_SPACE, PropertiesTokenKind.PLAIN})

    def __init__(self, text: str):
        super().__init__(text)
        self._expected = PropertiesTokenKind.KEY

    def next_token(self) -> Optional[Token]:
        parts: Optional[list[str]] = None
        kind: Optional[PropertiesTokenKind] = None

        while not self.at_end:
            ch = self._read()
            if ch == "\r":
                continue

            if parts is not None:
                ends_token = (
                    (kind is PropertiesTokenKind.COMMENT and ch == "\n")
                    or (kind is PropertiesTokenKind.KEY and ch in " =:\n")
                    or (kind is PropertiesTokenKind.VALUE and ch == "\n")
                    or (kind is PropertiesTokenKind.WHITE_SPACE and ch not in " \t")
                )
                if not ends_token:
                    parts.append(ch)
                    continue
                self._unread()
                if kind is PropertiesTokenKind.KEY:
                    self._expected = PropertiesTokenKind.DELIMITER
                elif kind is not PropertiesTokenKind.WHITE_SPACE:
                    self._expected = PropertiesTokenKind.KEY
                return Token("".join(parts), kind)

            expected = self._expected
            if ch == "\n":
                return Token(ch, PropertiesTokenKind.LINE_BREAK)
            if expected is PropertiesTokenKind.KEY and (ch in "#;" or (ch == "/" and self._peek() == "/")):
                parts, kind = [ch], PropertiesTokenKind.COMMENT
            elif ch in " \t":
                parts, kind = [ch], PropertiesTokenKind.WHITE_SPACE
            elif expected is PropertiesTokenKind.KEY:
                parts, kind = [ch], PropertiesTokenKind.KEY
            elif expected is PropertiesTokenKind.DELIMITER and ch in "=:":
                self._expected = PropertiesTokenKind.VALUE
                return Token(ch, PropertiesTokenKind.DELIMITER)
            elif expected in (PropertiesTokenKind.DELIMITER, PropertiesTokenKind.VALUE):
                parts, kind = [ch], PropertiesTokenKind.VALUE
            else:
                return Token(ch, PropertiesTokenKind.PLAIN)

        if parts is not None:
            return Token("".join(parts), kind)
        return None
