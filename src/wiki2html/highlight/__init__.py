#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/highlight/__init__.py
"""Syntax highlighting for code blocks.

Each supported language has a hand-written tokenizer that turns the code
into ``<span class="code-<language>-<kind>">`` runs. Unknown languages fall
back to :class:`PlainTokenizer`, which only preserves whitespace and line
breaks.

Examples
--------
    >>> highlight('<a href="x">', "html")
    '<span class="code-xml-special-character">&lt;</span>...'

"""

from __future__ import annotations

from typing import Mapping, Optional

from wiki2html.constants import DEFAULT_CODE_LANGUAGES
from wiki2html.highlight.base import LINE_BREAK_HTML, Token, Tokenizer
from wiki2html.highlight.ini import IniTokenizer, IniTokenKind
from wiki2html.highlight.java import JAVA_KEYWORDS, JavaTokenizer, JavaTokenKind
from wiki2html.highlight.plain import PlainTokenizer, PlainTokenKind
from wiki2html.highlight.properties import PropertiesTokenizer, PropertiesTokenKind
from wiki2html.highlight.xml import XmlTokenizer, XmlTokenKind
from wiki2html.highlight.yaml import YamlTokenizer, YamlTokenKind

TOKENIZERS: dict[str, type[Tokenizer]] = {
    "java": JavaTokenizer,
    "xml": XmlTokenizer,
    "properties": PropertiesTokenizer,
    "ini": IniTokenizer,
    "yaml": YamlTokenizer,
    "plain": PlainTokenizer,
}


def get_tokenizer(
    language: Optional[str], languages: Optional[Mapping[str, str]] = None
) -> Optional[type[Tokenizer]]:
    """Return the tokenizer class for a language name.

    Parameters
    ----------
    language : str or None
        Language as written in the code block, matched case-insensitively
    languages : Mapping[str, str], optional
        Language name to tokenizer name mapping; defaults to
        :data:`~wiki2html.constants.DEFAULT_CODE_LANGUAGES`

    Returns
    -------
    type[Tokenizer] or None
        ``None`` when the language has no highlighter

    """
    if not language:
        return None
    if languages is None:
        languages = DEFAULT_CODE_LANGUAGES
    tokenizer_name = languages.get(language.lower())
    if tokenizer_name is None:
        return None
    return TOKENIZERS.get(tokenizer_name)


def highlight(text: str, language: Optional[str], languages: Optional[Mapping[str, str]] = None) -> str:
    """Render code as highlighted HTML, falling back to plain formatting."""
    tokenizer_class = get_tokenizer(language, languages) or PlainTokenizer
    return tokenizer_class(text).format()


__all__ = [
    "LINE_BREAK_HTML",
    "Token",
    "Tokenizer",
    "TOKENIZERS",
    "get_tokenizer",
    "highlight",
    "IniTokenizer",
    "IniTokenKind",
    "JAVA_KEYWORDS",
    "JavaTokenizer",
    "JavaTokenKind",
    "PlainTokenizer",
    "PlainTokenKind",
    "PropertiesTokenizer",
    "PropertiesTokenKind",
    "XmlTokenizer",
    "XmlTokenKind",
    "YamlTokenizer",
    "YamlTokenKind",
]
