#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the wiki2html library.

Constants are organized by category:
1. Type Definitions - Literal types shared by nodes and options
2. Rendering Defaults - URLs, images and CSS classes used in HTML output
3. Highlighting - Language to tokenizer mapping
4. Transformation Defaults - Values used by the transformation passes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TaskState = Literal["open", "open_important", "closed"]
DateTimeFormat = Literal["date", "time", "datetime"]
PageNameFormat = Literal["page_path", "page_folder", "page_title"]
FormMethod = Literal["get", "post"]
Tense = Literal["past", "present", "future"]

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_PROGRAM_NAME = "wiki2html"
DEFAULT_PROGRAM_VERSION = "0.1.0"

HTML_DOCUMENT_TYPE = (
    '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" "http://www.w3.org/TR/html4/loose.dtd">'
)

DEFAULT_EDIT_IMAGE = "/edit.png"
DEFAULT_EDIT_SECTION_IMAGE = "/edit2.png"
DEFAULT_SEARCH_ACTION = "/search/"
DEFAULT_SEARCH_FORM_NAME = "searchForm"
FORM_ENCTYPE = "application/x-www-form-urlencoded; charset=utf-8"

VIEW_URL_PREFIX = "/view"
EDIT_URL_PREFIX = "/edit"
FILE_URL_PREFIX = "/file"
IMAGE_URL_PREFIX = "/img"

TASK_CSS_CLASSES: dict[str, str] = {
    "open": "task open",
    "open_important": "task important",
    "closed": "task closed",
}

# Highest heading level that gets its own hN tag; deeper levels render as <p>
MAX_HEADING_TAG_LEVEL = 3

# =============================================================================
# Highlighting
# =============================================================================

DEFAULT_CODE_LANGUAGES: dict[str, str] = {
    "java": "java",
    "html": "xml",
    "xml": "xml",
    "properties": "properties",
    "ini": "ini",
    "yaml": "yaml",
    "yml": "yaml",
}

# =============================================================================
# Transformation Defaults
# =============================================================================

DEFAULT_MAX_INCLUDE_DEPTH = 8
DEFAULT_EVENT_DAYS_AFTER = 3
DEFAULT_EVENT_DAYS_BEFORE = 10
DEFAULT_INDEX_PAGE_NAME = "Index"
DEFAULT_STARTPAGE_PATH = "/Index"

# Heading levels numbered by the table of contents
TOC_MAX_LEVEL = 3

CONTACT_TAG_NAME = "contact"
EVENT_LIST_TAG_NAME = "eventlist"
VALID_UNTIL_OPTION = "validuntil"

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_GENERATE_EDIT_LINKS = True
DEFAULT_ESCAPE_HTML = True
DEFAULT_INLINE_LIST_SEPARATOR = " | "
