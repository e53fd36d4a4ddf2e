#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/utils/__init__.py
"""Utility modules for wiki2html.

This package contains page path helpers, HTML/URL escaping and the date
parsing shared by the contact and event passes.
"""

from wiki2html.utils.escape import (
    encode_url,
    encode_url_parameter,
    escape_and_format_code_html,
    escape_html,
    page_path_to_url,
    url_to_page_path,
)
from wiki2html.utils.paths import (
    concat_web_paths,
    extract_web_folder,
    extract_web_name,
    make_web_path_absolute,
)

__all__ = [
    "concat_web_paths",
    "encode_url",
    "encode_url_parameter",
    "escape_and_format_code_html",
    "escape_html",
    "extract_web_folder",
    "extract_web_name",
    "make_web_path_absolute",
    "page_path_to_url",
    "url_to_page_path",
]
