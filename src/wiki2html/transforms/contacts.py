#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/transforms/contacts.py
"""Format ``<contact>`` tags as contact cards.

A contact page describes a person with nested tags::

    <contact>
      <name>Doe</name> <givenname>Jane</givenname> <birthday>01.02.1980</birthday>
      <email>jane@example.org</email>
      <address validuntil="31.12.2030">
        <street>Main Street 1</street> <zip>12345</zip> <city>Springfield</city>
        <phone>555-1234</phone>
      </address>
    </contact>

Tags and addresses carrying a ``validuntil="dd.mm.yyyy"`` option are hidden
once that date has passed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Optional

from wiki2html.ast.nodes import (
    Bold,
    Html,
    HtmlTag,
    Image,
    Italic,
    LinkExternal,
    PageElement,
    PageElementList,
    Paragraph,
    Table,
    TableCell,
    TextOnly,
    VerticalSpace,
    XmlTag,
)
from wiki2html.ast.utils import get_string_content, traverse_page_elements
from wiki2html.constants import CONTACT_TAG_NAME, VALID_UNTIL_OPTION
from wiki2html.messages import MessageCatalog, Messages
from wiki2html.transforms.base import Clock, PageTransform
from wiki2html.utils.dates import fractional_age, parse_full_date

logger = logging.getLogger(__name__)

# Channel tag name -> link prefix; None renders plain text
COMMUNICATION_CHANNELS: dict[str, Optional[str]] = {
    "homepage": "http://",
    "mobile": None,
    "email": "mailto:",
    "facebook": None,
    "linkedin": None,
    "skype": "skype:",
    "twitter": "https://twitter.com/",
    "xing": "https://www.xing.com/profile/",
    "youtube": "https://www.youtube.com/user/",
}


@dataclass
class Communication:
    channels: dict[str, list[str]] = field(default_factory=dict)

    def add_channel(self, tag_name: str, value: str) -> None:
        self.channels.setdefault(tag_name, []).append(value)


@dataclass
class Address(Communication):
    name: Optional[str] = None
    street: Optional[str] = None
    zip: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    phone: list[str] = field(default_factory=list)
    fax: list[str] = field(default_factory=list)
    description: Optional[PageElement] = None
    categories: list[str] = field(default_factory=list)


@dataclass
class Contact(Communication):
    name: Optional[str] = None
    birthname: Optional[str] = None
    given_names: list[str] = field(default_factory=list)
    nicknames: list[str] = field(default_factory=list)
    title: Optional[str] = None
    birthday: Optional[str] = None
    day_of_death: Optional[str] = None
    photos: list[str] = field(default_factory=list)
    addresses: list[Address] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)


def is_expired(xml_tag: XmlTag, today: date) -> bool:
    """Return True if the tag has a ``validuntil`` option that has passed or is malformed."""
    if VALID_UNTIL_OPTION not in xml_tag.options:
        return False
    valid_until = parse_full_date(xml_tag.options[VALID_UNTIL_OPTION])
    if valid_until is None:
        logger.warning(f"Malformed {VALID_UNTIL_OPTION} date '{xml_tag.options[VALID_UNTIL_OPTION]}'")
        return True
    return valid_until < today


def get_tag_text(xml_tag: XmlTag, today: date) -> Optional[str]:
    """Return the text of a contact property, or None if it is empty or expired."""
    if is_expired(xml_tag, today):
        return None
    return get_string_content(xml_tag) or None


def _top_level_tags(xml_tag: XmlTag) -> list[XmlTag]:
    tags: list[XmlTag] = []
    if xml_tag.child is not None:
        traverse_page_elements(xml_tag.child, XmlTag, lambda tag, acc: acc.append(tag), tags, False)
    return tags


def _paragraph(content: PageElement) -> Paragraph:
    return Paragraph(False, 0, False, content)


class ContactTransform(PageTransform):
    """Replace ``<contact>`` tags by a formatted contact card.

    Parameters
    ----------
    messages : Messages, optional
        Labels of the card sections
    clock : callable, optional
        Current time, used for ages and ``validuntil`` checks

    """

    name = "contacts"

    def __init__(self, messages: Optional[Messages] = None, clock: Optional[Clock] = None):
        self.messages: Messages = messages or MessageCatalog()
        self.clock: Clock = clock or datetime.now

    def transform_element(self, element: PageElement) -> Optional[PageElement]:
        if isinstance(element, XmlTag) and element.prefix is None and element.name == CONTACT_TAG_NAME:
            today = self.clock().date()
            return self.format_contact(self.read_contact(element, today), today)
        return element

    # -- reading -----------------------------------------------------------

    def read_contact(self, contact_tag: XmlTag, today: date) -> Contact:
        contact = Contact()
        for xml_tag in _top_level_tags(contact_tag):
            tag_name = xml_tag.name
            if tag_name == "address":
                address = self.read_address(xml_tag, today)
                if address is not None:
                    contact.addresses.append(address)
                continue

            text = get_tag_text(xml_tag, today)
            if text is None:
                continue
            if tag_name == "name":
                contact.name = text
            elif tag_name == "birthname":
                contact.birthname = text
            elif tag_name == "givenname":
                contact.given_names.append(text)
            elif tag_name == "nickname":
                contact.nicknames.append(text)
            elif tag_name == "title":
                contact.title = text
            elif tag_name == "birthday":
                contact.birthday = text
            elif tag_name == "dayofdeath":
                contact.day_of_death = text
            elif tag_name == "photo":
                contact.photos.append(text)
            elif tag_name in COMMUNICATION_CHANNELS:
                contact.add_channel(tag_name, text)
            elif tag_name == "category":
                contact.categories.append(text)
        return contact

    def read_address(self, address_tag: XmlTag, today: date) -> Optional[Address]:
        """Read an address; None if it has expired."""
        if is_expired(address_tag, today):
            return None

        address = Address()
        for xml_tag in _top_level_tags(address_tag):
            tag_name = xml_tag.name
            if tag_name == "description":
                if not is_expired(xml_tag, today) and xml_tag.child is not None:
                    address.description = xml_tag.child.clone()
                continue

            text = get_tag_text(xml_tag, today)
            if text is None:
                continue
            if tag_name in ("name", "street", "zip", "city", "country", "state", "district"):
                setattr(address, tag_name, text)
            elif tag_name == "phone":
                address.phone.append(text)
            elif tag_name == "fax":
                address.fax.append(text)
            elif tag_name in COMMUNICATION_CHANNELS:
                address.add_channel(tag_name, text)
            elif tag_name == "category":
                address.categories.append(text)
        return address

    # -- formatting --------------------------------------------------------

    def format_contact(self, contact: Contact, today: date) -> PageElementList:
        result = PageElementList()

        if contact.photos:
            images = PageElementList(Image(photo, {"class": "contact-photo"}) for photo in contact.photos)
            result.add(HtmlTag("div", 'class="contact-photos"', images))
        if contact.title is not None:
            result.add(_paragraph(TextOnly(contact.title)))

        name_content = PageElementList()
        if contact.name is not None:
            name_content.add(TextOnly(contact.name))
        if contact.birthname is not None:
            name_content.add(TextOnly(f" ({self.messages.get_message('contact.birthname')} {contact.birthname})"))
        if contact.given_names:
            if len(name_content):
                name_content.add(TextOnly(", "))
            name_content.add(TextOnly(" ".join(contact.given_names)))
        if contact.nicknames:
            name_content.add(TextOnly(f" ({', '.join(contact.nicknames)})"))
        result.add(_paragraph(Bold(name_content)))

        if contact.birthday is not None or contact.day_of_death is not None:
            result.add(_paragraph(self.format_life_dates(contact.birthday, contact.day_of_death, today)))

        communication = PageElementList()
        self.format_communication(communication, contact)
        if len(communication):
            result.add(VerticalSpace())
            result.add(communication)

        for address in contact.addresses:
            formatted = self.format_address(address)
            if formatted is not None:
                result.add(formatted)

        if contact.categories:
            result.add(VerticalSpace())
            self.add_string_list(
                result, contact.categories, self.messages.get_message("contact.contact_categories"), None
            )
        return result

    def format_life_dates(self, birthday: Optional[str], day_of_death: Optional[str], today: date) -> PageElementList:
        content = PageElementList()
        if birthday is not None:
            content.add(TextOnly(f"* {birthday}"))
        if birthday is not None and day_of_death is not None:
            content.add(Html(" &nbsp; "))
        if day_of_death is not None:
            content.add(Html("&dagger; "))
            content.add(TextOnly(day_of_death))

        if birthday is not None:
            birth_date = parse_full_date(birthday)
            until = parse_full_date(day_of_death) if day_of_death is not None else today
            if birth_date is not None and until is not None:
                content.add(TextOnly(f" ({fractional_age(birth_date, until):.1f})"))
            else:
                logger.debug(f"No age for unparsable dates '{birthday}', '{day_of_death}'")
        return content

    def format_address(self, address: Address) -> Optional[PageElementList]:
        """Format an address as a two column table; None if it is empty."""
        location = PageElementList()
        if address.name is not None:
            location.add(_paragraph(TextOnly(address.name)))
        if address.street is not None:
            location.add(_paragraph(TextOnly(address.street)))
        if address.zip is not None or address.city is not None:
            location.add(_paragraph(TextOnly(" ".join(p for p in (address.zip, address.city) if p is not None))))
        if address.country is not None or address.state is not None or address.district is not None:
            region = address.country or ""
            if address.state is not None or address.district is not None:
                if address.country is not None:
                    region += " "
                region += "(" + ", ".join(p for p in (address.state, address.district) if p is not None) + ")"
            location.add(_paragraph(TextOnly(region)))
        if address.description is not None:
            location.add(_paragraph(Italic(address.description)))

        details = PageElementList()
        if address.phone:
            self.add_string_list(details, address.phone, self.messages.get_message("contact.phone"), None)
        if address.fax:
            self.add_string_list(details, address.fax, self.messages.get_message("contact.fax"), None)
        self.format_communication(details, address)
        if address.categories:
            self.add_string_list(details, address.categories, self.messages.get_message("contact.categories"), None)

        if not len(location) and not len(details):
            return None

        table = Table("contact-address")
        table.new_row()
        table.add_cell(TableCell(location))
        table.add_cell(TableCell(details))
        return PageElementList([VerticalSpace(), table])

    def format_communication(self, output: PageElementList, communication: Communication) -> None:
        for channel, prefix in COMMUNICATION_CHANNELS.items():
            values = communication.channels.get(channel)
            if not values:
                continue
            label = self.messages.get_message(f"contact.{channel}")
            if channel == "facebook":
                self.add_link_list(output, values, label, _facebook_url)
            elif channel == "linkedin":
                self.add_link_list(output, values, label, _linkedin_url)
            else:
                self.add_string_list(output, values, label, prefix)

    def add_string_list(
        self, output: PageElementList, values: list[str], label: Optional[str], link_prefix: Optional[str]
    ) -> None:
        """Add a labelled, comma separated line; values are linked when ``link_prefix`` is set."""
        if link_prefix is None:
            content = PageElementList()
            if label is not None:
                content.add(Bold(TextOnly(f"{label}: ")))
            for index, value in enumerate(values):
                if index:
                    content.add(TextOnly(", "))
                content.add(TextOnly(value))
            output.add(_paragraph(content))
        else:
            self.add_link_list(
                output, values, label, lambda value: value if value.startswith(link_prefix) else link_prefix + value
            )

    def add_link_list(
        self, output: PageElementList, values: list[str], label: Optional[str], make_url: Callable[[str], str]
    ) -> None:
        content = PageElementList()
        if label is not None:
            content.add(Bold(TextOnly(f"{label}: ")))
        for index, value in enumerate(values):
            if index:
                content.add(TextOnly(", "))
            content.add(LinkExternal(make_url(value), TextOnly(value)))
        output.add(_paragraph(content))


def _facebook_url(value: str) -> str:
    if value.startswith(("http://", "https://")):
        return value
    if "/" in value:
        return "https://www.facebook.com/people/" + value
    return "https://www.facebook.com/" + value


def _linkedin_url(value: str) -> str:
    if value.isdigit():
        return "https://www.linkedin.com/profile/view?id=" + value
    return "https://www.linkedin.com/in/" + value
