#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/messages.py
"""User-facing text used by the renderer, the page shell and the passes.

Text is looked up by key through the :class:`Messages` protocol. The
default implementation, :class:`MessageCatalog`, ships English texts and
accepts overrides, either as a mapping or from a YAML file:

.. code-block:: yaml

    html.search: Suche
    eventlist.table.date: Datum
    dateformat.date: "%d.%m.%Y"

Messages may contain ``{0}``-style placeholders for positional arguments.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

import yaml

from wiki2html.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: dict[str, str] = {
    # renderer
    "html.edit_section": "Edit section",
    "html.edit_table": "Edit table",
    "html.edit_table_cell": "Edit table cell",
    "html.edit_code": "Edit code",
    "html.search": "Search",
    "wiki.startpage": "Start page",
    "wiki.editpage": "Edit page",
    "wiki.newpage": "New page",
    "wiki.shutdown": "Shut down",
    "wiki.status": "Status",
    # wiki tags, strftime patterns
    "dateformat.date": "%Y-%m-%d",
    "dateformat.time": "%H:%M:%S",
    "dateformat.datetime": "%Y-%m-%d %H:%M:%S",
    # event list
    "eventlist.table.date": "Date",
    "eventlist.table.name": "Name",
    "eventlist.table.age": "Age",
    # contact card
    "contact.birthname": "née",
    "contact.phone": "Phone",
    "contact.fax": "Fax",
    "contact.categories": "Categories",
    "contact.contact_categories": "Contact categories",
    "contact.homepage": "Homepage",
    "contact.email": "E-mail",
    "contact.mobile": "Mobile",
    "contact.skype": "Skype",
    "contact.twitter": "Twitter",
    "contact.linkedin": "LinkedIn",
    "contact.facebook": "Facebook",
    "contact.xing": "Xing",
    "contact.youtube": "YouTube",
    # page shell
    "page.not_found": "Page not found: {0}",
    "errorpage.title": "Error",
    "errorpage.message": "An error occurred: {0}",
    "errorpage.link_to_startpage": '<a href="/">Go to the start page</a>',
}


@runtime_checkable
class Messages(Protocol):
    """Lookup of user-facing text by key."""

    def get_message(self, key: str, *args: Any) -> str:
        """Return the text for ``key`` with ``args`` filled into its placeholders."""
        ...


class MessageCatalog:
    """Default :class:`Messages` implementation.

    Parameters
    ----------
    overrides : Mapping[str, str], optional
        Texts replacing or extending :data:`DEFAULT_MESSAGES`

    Examples
    --------
        >>> catalog = MessageCatalog({"page.not_found": "No page {0}"})
        >>> catalog.get_message("page.not_found", "/Foo")
        'No page /Foo'
        >>> catalog.get_message("unknown.key")
        'unknown.key'

    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None):
        self._messages: dict[str, str] = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update({str(key): str(value) for key, value in overrides.items()})

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> MessageCatalog:
        """Load overrides from a YAML mapping of key to text.

        Raises
        ------
        ConfigurationError
            If the file cannot be read or is not a flat mapping

        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read message file: {e}", config_path=str(path), original_error=e) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Message file must contain a mapping", config_path=str(path))
        return cls(data)

    def get_message(self, key: str, *args: Any) -> str:
        text = self._messages.get(key)
        if text is None:
            logger.debug(f"No message for key '{key}'")
            return key
        if not args:
            return text
        try:
            return text.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            logger.warning(f"Cannot format message '{key}': {e}")
            return text

    def __contains__(self, key: object) -> bool:
        return key in self._messages
