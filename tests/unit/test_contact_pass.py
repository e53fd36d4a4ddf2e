#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the contact card pass."""
import logging

import pytest

from wiki2html.ast import (
    Bold,
    HtmlTag,
    Image,
    LinkExternal,
    PageElementList,
    Paragraph,
    Table,
    TextOnly,
    WikiPage,
    XmlTag,
    get_string_content,
    traverse_page_elements,
)
from wiki2html.messages import MessageCatalog
from wiki2html.transforms import ContactTransform


def tag(name: str, text: str, **options: str) -> XmlTag:
    return XmlTag(None, name, dict(options), TextOnly(text))


def contact(*tags: XmlTag) -> XmlTag:
    children = PageElementList()
    for child in tags:
        children.add(child)
        children.add(TextOnly("\n"))
    return XmlTag(None, "contact", {}, children)


def transform(fixed_clock, *tags: XmlTag, messages=None) -> PageElementList:
    page = WikiPage("/Contacts/Jane", PageElementList([contact(*tags)]))
    result = ContactTransform(messages, fixed_clock).transform_page(page)
    card = result.child.get(0)
    assert isinstance(card, PageElementList)
    return card


def external_urls(element) -> list:
    urls = []
    traverse_page_elements(element, LinkExternal, lambda link, acc: acc.append(link.url), urls)
    return urls


@pytest.mark.unit
class TestContactCard:
    """Test the generated card structure."""

    def test_name_line(self, fixed_clock) -> None:
        """Test the bold name paragraph."""
        card = transform(
            fixed_clock,
            tag("name", "Doe"),
            tag("birthname", "Smith"),
            tag("givenname", "Jane"),
            tag("givenname", "Mary"),
            tag("nickname", "JD"),
        )
        name = card.get(0)
        assert isinstance(name, Paragraph)
        assert isinstance(name.child, Bold)
        assert get_string_content(name) == "Doe (née Smith), Jane Mary (JD)"

    def test_title_and_photos_come_first(self, fixed_clock) -> None:
        """Test the order of photos, title and name."""
        card = transform(fixed_clock, tag("photo", "jane.png"), tag("title", "Dr."), tag("name", "Doe"))
        photos = card.get(0)
        assert isinstance(photos, HtmlTag)
        assert photos.tag_name == "div"
        assert photos.tag_attributes == 'class="contact-photos"'
        image = photos.child.get(0)
        assert isinstance(image, Image)
        assert image.url == "jane.png"
        assert get_string_content(card.get(1)) == "Dr."
        assert get_string_content(card.get(2)) == "Doe"

    def test_age_of_living_person(self, fixed_clock) -> None:
        """Test the birthday line with the current age."""
        card = transform(fixed_clock, tag("name", "Doe"), tag("birthday", "15.03.1981"))
        dates = card.get(1).child
        assert [el.text for el in dates] == ["* 15.03.1981", " (45.0)"]

    def test_age_at_death(self, fixed_clock) -> None:
        """Test that the age is computed up to the day of death."""
        card = transform(
            fixed_clock, tag("name", "Doe"), tag("birthday", "01.02.1950"), tag("dayofdeath", "01.02.2000")
        )
        dates = card.get(1).child
        assert dates.get(0).text == "* 01.02.1950"
        assert dates.get(3).text == "01.02.2000"
        assert dates.get(4).text == " (50.0)"

    def test_partial_birthday_has_no_age(self, fixed_clock) -> None:
        """Test that a birthday without a year is shown without an age."""
        card = transform(fixed_clock, tag("name", "Doe"), tag("birthday", "15.03."))
        assert [el.text for el in card.get(1).child] == ["* 15.03."]


@pytest.mark.unit
class TestContactChannels:
    """Test communication channels, addresses and categories."""

    def test_channel_links(self, fixed_clock) -> None:
        """Test link prefixes and social network URLs."""
        card = transform(
            fixed_clock,
            tag("name", "Doe"),
            tag("email", "jane@example.org"),
            tag("homepage", "example.org"),
            tag("facebook", "jane.doe"),
            tag("linkedin", "12345"),
            tag("twitter", "jane"),
        )
        assert external_urls(card) == [
            "http://example.org",
            "mailto:jane@example.org",
            "https://www.facebook.com/jane.doe",
            "https://www.linkedin.com/profile/view?id=12345",
            "https://twitter.com/jane",
        ]

    def test_mobile_is_plain_text(self, fixed_clock) -> None:
        """Test a labelled channel without links."""
        card = transform(fixed_clock, tag("name", "Doe"), tag("mobile", "0170"), tag("mobile", "0171"))
        assert "Mobile: 0170, 0171" in get_string_content(card)
        assert external_urls(card) == []

    def test_labels_from_messages(self, fixed_clock) -> None:
        """Test that section labels are looked up in the catalog."""
        messages = MessageCatalog({"contact.mobile": "Handy"})
        card = transform(fixed_clock, tag("name", "Doe"), tag("mobile", "0170"), messages=messages)
        assert "Handy: 0170" in get_string_content(card)

    def test_expired_values_are_dropped(self, fixed_clock, caplog) -> None:
        """Test validuntil on values, including malformed dates."""
        with caplog.at_level(logging.WARNING, logger="wiki2html.transforms.contacts"):
            card = transform(
                fixed_clock,
                tag("name", "Doe"),
                tag("email", "old@example.org", validuntil="01.01.2020"),
                tag("email", "new@example.org", validuntil="31.12.2030"),
                tag("email", "odd@example.org", validuntil="someday"),
            )
        assert external_urls(card) == ["mailto:new@example.org"]
        assert "Malformed validuntil" in caplog.text

    def test_address_table(self, fixed_clock) -> None:
        """Test that an address becomes a two cell table."""
        address = XmlTag(
            None,
            "address",
            {},
            PageElementList(
                [
                    tag("street", "Main Street 1"),
                    tag("zip", "12345"),
                    tag("city", "Springfield"),
                    tag("country", "USA"),
                    tag("state", "OR"),
                    tag("phone", "555-1234"),
                    tag("email", "office@example.org"),
                ]
            ),
        )
        card = transform(fixed_clock, tag("name", "Doe"), address)
        tables = []
        traverse_page_elements(card, Table, lambda table, acc: acc.append(table), tables)
        assert len(tables) == 1
        table = tables[0]
        assert table.params == "contact-address"
        location, details = table.rows[0].cells
        assert [get_string_content(p) for p in location.content] == ["Main Street 1", "12345 Springfield", "USA (OR)"]
        assert get_string_content(details.content) == "Phone: 555-1234E-mail: office@example.org"
        assert external_urls(details.content) == ["mailto:office@example.org"]

    def test_expired_and_empty_addresses_are_dropped(self, fixed_clock) -> None:
        """Test that no table is produced for unusable addresses."""
        expired = XmlTag(None, "address", {"validuntil": "01.01.2000"}, tag("street", "Old Road"))
        empty = XmlTag(None, "address", {}, TextOnly(" "))
        card = transform(fixed_clock, tag("name", "Doe"), expired, empty)
        tables = []
        traverse_page_elements(card, Table, lambda table, acc: acc.append(table), tables)
        assert tables == []
        assert "Old Road" not in get_string_content(card)

    def test_categories(self, fixed_clock) -> None:
        """Test the contact category line at the end of the card."""
        card = transform(fixed_clock, tag("name", "Doe"), tag("category", "Family"), tag("category", "Friends"))
        assert get_string_content(card.get(len(card) - 1)) == "Contact categories: Family, Friends"

    def test_other_tags_are_kept(self, fixed_clock) -> None:
        """Test that prefixed or unrelated XML tags pass through."""
        transform_pass = ContactTransform(clock=fixed_clock)
        other = XmlTag("x", "contact", {}, None)
        assert transform_pass.transform_element(other) is other
