#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/highlight/java.py
"""Java source highlighting."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from wiki2html.highlight.base import Token, Tokenizer

JAVA_KEYWORDS = frozenset(
    {
        "return", "if", "else", "switch", "case", "default", "for", "while", "do", "break",
        "continue", "try", "catch", "finally", "throw", "new", "instanceof", "void", "public",
        "protected", "private", "static", "final", "class", "interface",
    }
)  # fmt: skip


class JavaTokenKind(Enum):
    COMMENT = "comment"
    IDENTIFIER = "identifier"
    STRING = "string"
    LINE_BREAK = "line-break"
    ANY = "any"


def _is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


class JavaTokenizer(Tokenizer):
    """Highlights Java comments, string literals and keywords.

    A block comment spanning several lines is returned as one comment token
    per line, so each line can be styled on its own.
    """

    language = "java"
    unstyled_kinds = frozenset({JavaTokenKind.IDENTIFIER, JavaTokenKind.ANY})

    def __init__(self, text: str):
        super().__init__(text)
        self._inside_block_comment = False

    def next_token(self) -> Optional[Token]:
        identifier: Optional[list[str]] = None
        comment: Optional[list[str]] = None
        string: Optional[list[str]] = None
        quote = ""

        while not self.at_end:
            ch = self._read()
            lookahead = self._peek()

            if ch == "\r":
                continue

            if identifier is not None and not _is_identifier_char(ch):
                self._unread()
                return Token("".join(identifier), JavaTokenKind.IDENTIFIER)

            if string is not None:
                if ch == "\n":
                    # strings end at the line end
                    self._unread()
                    return Token("".join(string), JavaTokenKind.STRING)
                string.append(ch)
                if ch == quote:
                    return Token("".join(string), JavaTokenKind.STRING)
                if ch == "\\" and lookahead is not None and lookahead not in "\r\n":
                    string.append(lookahead)
                    self._skip(1)
                continue

            if self._inside_block_comment:
                if ch == "*" and lookahead == "/":
                    self._skip(1)
                    self._inside_block_comment = False
                    return Token("".join(comment or []) + "*/", JavaTokenKind.COMMENT)
                if ch != "\n":
                    comment = comment if comment is not None else []
                    comment.append(ch)
                    continue
                if comment is not None:
                    self._unread()
                    return Token("".join(comment), JavaTokenKind.COMMENT)
                return Token("\n", JavaTokenKind.LINE_BREAK)

            if comment is not None:
                if ch == "\n":
                    self._unread()
                    return Token("".join(comment), JavaTokenKind.COMMENT)
                comment.append(ch)
                continue

            if ch == "/" and lookahead == "*":
                self._skip(1)
                self._inside_block_comment = True
                comment = ["/*"]
            elif ch == "/" and lookahead == "/":
                comment = [ch]
            elif _is_identifier_char(ch):
                if identifier is None:
                    identifier = []
                identifier.append(ch)
            elif ch in "\"'":
                string = [ch]
                quote = ch
            elif ch == "\n":
                return Token("\n", JavaTokenKind.LINE_BREAK)
            else:
                return Token(ch, JavaTokenKind.ANY)

        if identifier is not None:
            return Token("".join(identifier), JavaTokenKind.IDENTIFIER)
        if comment is not None:
            return Token("".join(comment), JavaTokenKind.COMMENT)
        if string is not None:
            return Token("".join(string), JavaTokenKind.STRING)
        return None

    def format_token(self, token: Token) -> str:
        if token.kind is JavaTokenKind.IDENTIFIER and token.text in JAVA_KEYWORDS:
            return f'<span class="code-java-keyword">{token.text}</span>'
        return super().format_token(token)
