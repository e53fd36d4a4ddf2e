#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/utils/paths.py
"""Helpers for wiki page paths.

Wiki page paths are web style paths: ``/`` separates folders, a leading
``/`` marks an absolute path and a trailing ``/`` marks a folder.
"""

from __future__ import annotations

from typing import Optional, overload

SEPARATOR = "/"


def concat_web_paths(first_path: Optional[str], second_path: Optional[str]) -> str:
    """Join two path fragments with exactly one separator between them.

    Examples
    --------
    >>> concat_web_paths("/edit/", "/Folder/Page")
    '/edit/Folder/Page'
    >>> concat_web_paths(None, "Page")
    'Page'

    """
    result = first_path or ""
    if result and not result.endswith(SEPARATOR):
        result += SEPARATOR
    if second_path:
        result += second_path[1:] if second_path.startswith(SEPARATOR) else second_path
    return result


def make_web_path_absolute(path: Optional[str], base_path: Optional[str]) -> str:
    """Resolve ``path`` relative to ``base_path``.

    Absolute paths are returned unchanged. Relative paths are appended to the
    base folder, forced to start with ``/`` and cleaned of ``..`` segments.

    Parameters
    ----------
    path : str or None
        Relative or absolute page path
    base_path : str or None
        Folder the relative path is resolved against

    Returns
    -------
    str
        Absolute page path

    """
    if path is not None and path.startswith(SEPARATOR):
        return path
    new_path = concat_web_paths(base_path, path)
    if not new_path.startswith(SEPARATOR):
        new_path = SEPARATOR + new_path
    return resolve_dots(new_path)


def resolve_dots(path: str) -> str:
    """Remove ``..`` segments together with the folder preceding them."""
    if ".." not in path:
        return path

    pos = path.find("..")
    while pos >= 0:
        at_segment_start = pos == 0 or path[pos - 1] == SEPARATOR
        at_segment_end = pos + 2 >= len(path) or path[pos + 2] == SEPARATOR
        if at_segment_start and at_segment_end:
            if pos >= 2:
                left = path.rfind(SEPARATOR, 0, pos - 1) + 1
            elif pos == 1:
                left = 1
            else:
                left = 0
            right = pos + 3 if pos + 3 <= len(path) else pos + 2
            path = path[:left] + path[right:]
            pos = path.find("..")
        else:
            pos = path.find("..", pos + 2)
    return path


@overload
def extract_web_folder(web_path: str) -> str: ...


@overload
def extract_web_folder(web_path: None) -> None: ...


def extract_web_folder(web_path: Optional[str]) -> Optional[str]:
    """Return the folder part of a path including the trailing ``/``.

    >>> extract_web_folder("/a/b/Page")
    '/a/b/'
    >>> extract_web_folder("Page")
    '/'

    """
    if web_path is None:
        return None
    index = web_path.rfind(SEPARATOR)
    if index >= 0:
        return web_path[: index + 1]
    return SEPARATOR


@overload
def extract_web_name(web_path: str) -> str: ...


@overload
def extract_web_name(web_path: None) -> None: ...


def extract_web_name(web_path: Optional[str]) -> Optional[str]:
    """Return the last segment of a path (the page name).

    >>> extract_web_name("/a/b/Page")
    'Page'
    >>> extract_web_name("/a/b/")
    ''

    """
    if web_path is None:
        return None
    return web_path[web_path.rfind(SEPARATOR) + 1 :]
