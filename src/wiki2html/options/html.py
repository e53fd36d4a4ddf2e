#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

This module defines the options of the page element renderer and of the
page shell that wraps rendered pages into complete HTML documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from wiki2html.constants import (
    DEFAULT_CODE_LANGUAGES,
    DEFAULT_EDIT_IMAGE,
    DEFAULT_EDIT_SECTION_IMAGE,
    DEFAULT_ESCAPE_HTML,
    DEFAULT_GENERATE_EDIT_LINKS,
    HTML_DOCUMENT_TYPE,
)
from wiki2html.options.base import BaseRendererOptions


# src/wiki2html/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering page elements to HTML.

    Parameters
    ----------
    generate_edit_links : bool, default True
        Add "edit this section/table/cell/code" links for elements that know
        their source span.
    escape_html : bool, default True
        Escape text content. Only disable for trusted input in tests.
    code_languages : mapping of str to str
        Maps the lower-case language name of a code block to a tokenizer
        name (``java``, ``xml``, ``properties``, ``ini``, ``yaml``).
        Unmapped languages use the plain formatter.
    edit_image : str, default "/edit.png"
        Image of the table, cell and code edit links
    edit_section_image : str, default "/edit2.png"
        Image of the section edit link

    """

    generate_edit_links: bool = field(
        default=DEFAULT_GENERATE_EDIT_LINKS,
        metadata={"help": "Add edit links for headings, tables, cells and code blocks", "importance": "core"},
    )
    escape_html: bool = field(
        default=DEFAULT_ESCAPE_HTML,
        metadata={"help": "Escape text content", "importance": "security"},
    )
    code_languages: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_CODE_LANGUAGES)),
        metadata={"help": "Language name to tokenizer mapping for code blocks", "importance": "advanced"},
    )
    edit_image: str = field(
        default=DEFAULT_EDIT_IMAGE,
        metadata={"help": "Image URL of table, cell and code edit links", "importance": "advanced"},
    )
    edit_section_image: str = field(
        default=DEFAULT_EDIT_SECTION_IMAGE,
        metadata={"help": "Image URL of section edit links", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate and normalize the options.

        Raises
        ------
        ValueError
            If a code language maps to an empty tokenizer name.

        """
        super().__post_init__()
        normalized = {}
        for language, tokenizer in self.code_languages.items():
            if not tokenizer:
                raise ValueError(f"code_languages[{language!r}] must name a tokenizer")
            normalized[language.lower()] = tokenizer.lower()
        object.__setattr__(self, "code_languages", MappingProxyType(normalized))


@dataclass(frozen=True)
class PageShellOptions(BaseRendererOptions):
    """Configuration options for the HTML document shell.

    Parameters
    ----------
    doctype : str
        Document type declaration written before ``<html>``
    stylesheets : tuple of str
        Stylesheet URLs linked in the head
    scripts : tuple of str
        JavaScript URLs loaded in the head
    header_html : str or None
        Extra markup appended to the head, e.g. meta tags

    """

    doctype: str = field(
        default=HTML_DOCUMENT_TYPE,
        metadata={"help": "Document type declaration", "importance": "advanced"},
    )
    stylesheets: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Stylesheet URLs linked in the document head", "importance": "core"},
    )
    scripts: tuple[str, ...] = field(
        default=(),
        metadata={"help": "JavaScript URLs loaded in the document head", "importance": "core"},
    )
    header_html: str | None = field(
        default=None,
        metadata={"help": "Extra markup appended to the document head", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "stylesheets", tuple(self.stylesheets))
        object.__setattr__(self, "scripts", tuple(self.scripts))
