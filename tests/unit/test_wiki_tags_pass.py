#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the wiki tag pass."""
import logging

import pytest

from wiki2html.ast import (
    DateTime,
    Heading,
    LinkPage,
    ListChildren,
    ListEditHistory,
    ListItem,
    ListPages,
    ListParents,
    ListUnlinkedPages,
    ListViewHistory,
    ListWantedPages,
    PageElementList,
    PageName,
    PageTimestamp,
    Paragraph,
    Parent,
    TableOfContents,
    TextOnly,
    WikiPage,
    WikiVersion,
    get_string_content,
)
from wiki2html.messages import MessageCatalog
from wiki2html.options import PipelineOptions
from wiki2html.repository import InMemoryRepository
from wiki2html.transforms import WikiTagsTransform
from wiki2html.transforms.wiki_tags import generate_stepwise_links


def expand(transform: WikiTagsTransform, page_path: str, *elements) -> PageElementList:
    page = transform.transform_page(WikiPage(page_path, PageElementList(list(elements))))
    return page.child


def link_targets(element) -> list:
    return [(link.page_path, get_string_content(link)) for link in element if isinstance(link, LinkPage)]


@pytest.mark.unit
class TestTableOfContents:
    """Test the generated table of contents."""

    def test_numbering_and_links(self, repository, fixed_clock) -> None:
        """Test numbered, indented links to the first three heading levels."""
        content = expand(
            WikiTagsTransform(repository, clock=fixed_clock),
            "/Doc",
            TableOfContents(),
            Heading(1, TextOnly("Intro")),
            Heading(2, TextOnly("Details")),
            Heading(2, TextOnly("More info")),
            Heading(4, TextOnly("Deep")),
            Heading(1, TextOnly("End")),
            Heading(3, TextOnly("Fine print")),
        )
        toc = content.get(0)
        entries = [(p.indention, p.child.anchor, get_string_content(p)) for p in toc]
        assert entries == [
            (1, "Intro", "1. Intro"),
            (2, "Details", "1.1. Details"),
            (2, "Moreinfo", "1.2. More info"),
            (1, "End", "2. End"),
            (3, "Fineprint", "2.0.1. Fine print"),
        ]
        assert all(isinstance(p, Paragraph) and p.child.page_path is None for p in toc)

    def test_heading_text_is_cloned(self, repository, fixed_clock) -> None:
        """Test that the entry does not share nodes with the heading."""
        heading = Heading(1, TextOnly("Intro"))
        content = expand(WikiTagsTransform(repository, clock=fixed_clock), "/Doc", TableOfContents(), heading)
        entry_text = content.get(0).get(0).child.child.get(1)
        assert entry_text == content.get(1).child
        assert entry_text is not content.get(1).child

    def test_page_without_headings(self, repository, fixed_clock) -> None:
        """Test that no headings give an empty table of contents."""
        content = expand(WikiTagsTransform(repository, clock=fixed_clock), "/Doc", TableOfContents())
        assert len(content.get(0)) == 0


@pytest.mark.unit
class TestSimpleTags:
    """Test version, date, page name, timestamp and parent tags."""

    def test_parent_is_removed(self, repository, fixed_clock) -> None:
        """Test that parent declarations produce no output."""
        content = expand(WikiTagsTransform(repository, clock=fixed_clock), "/Doc", Parent("/Index"), TextOnly("x"))
        assert [type(el).__name__ for el in content] == ["TextOnly"]

    def test_version(self, repository, fixed_clock) -> None:
        """Test the program name and version."""
        options = PipelineOptions(program_name="MyWiki")
        content = expand(WikiTagsTransform(repository, options=options, clock=fixed_clock), "/Doc", WikiVersion())
        assert content.get(0).text == "MyWiki 0.1.0"

    @pytest.mark.parametrize(
        "date_format,expected",
        [("date", "2026-03-15"), ("time", "09:30:00"), ("datetime", "2026-03-15 09:30:00")],
    )
    def test_date_time(self, repository, fixed_clock, date_format, expected) -> None:
        """Test the three formats with the default patterns."""
        content = expand(WikiTagsTransform(repository, clock=fixed_clock), "/Doc", DateTime(date_format))
        assert content.get(0).text == expected

    def test_date_format_from_messages(self, repository, fixed_clock) -> None:
        """Test a localized date pattern."""
        messages = MessageCatalog({"dateformat.date": "%d.%m.%Y"})
        content = expand(WikiTagsTransform(repository, messages, clock=fixed_clock), "/Doc", DateTime("date"))
        assert content.get(0).text == "15.03.2026"

    def test_page_name_formats(self, repository, fixed_clock) -> None:
        """Test path, folder and title output."""
        content = expand(
            WikiTagsTransform(repository, clock=fixed_clock),
            "/Projects/Alpha",
            PageName(),
            PageName("page_folder"),
            PageName("page_title"),
        )
        assert [el.text for el in content] == ["/Projects/Alpha", "/Projects/", "Alpha"]

    def test_linked_page_name(self, repository, fixed_clock) -> None:
        """Test a linked title and stepwise linked path."""
        content = expand(
            WikiTagsTransform(repository, clock=fixed_clock),
            "/Projects/Alpha",
            PageName("page_title", linked=True),
            PageName("page_path", linked=True),
        )
        title = content.get(0)
        assert isinstance(title, LinkPage)
        assert title.page_path == "/Projects/Alpha"
        assert link_targets(content.get(1)) == [
            ("/", "/"),
            ("/Projects/", "Projects/"),
            ("/Projects/Alpha", "Alpha"),
        ]

    def test_stepwise_links_of_folder(self) -> None:
        """Test the separators between stepwise links."""
        links = generate_stepwise_links("/a/b/")
        assert get_string_content(links) == "/ a/ b/"

    def test_page_name_global_context(self, repository, fixed_clock) -> None:
        """Test that an included page can name the page it is shown on."""
        inner = WikiPage("/Inner", PageElementList([PageName(), PageName(global_context=True)]))
        content = expand(WikiTagsTransform(repository, clock=fixed_clock), "/Outer", inner)
        assert [el.text for el in content.get(0).child] == ["/Inner", "/Outer"]

    def test_page_timestamp(self, repository, fixed_clock, caplog) -> None:
        """Test the modification time and the missing page case."""
        transform = WikiTagsTransform(repository, clock=fixed_clock)
        assert expand(transform, "/Index", PageTimestamp()).get(0).text == "2026-03-01 12:00:00"

        with caplog.at_level(logging.WARNING, logger="wiki2html.transforms.wiki_tags"):
            content = expand(transform, "/Generated", PageTimestamp())
        assert len(content) == 0
        assert "Cannot show timestamp" in caplog.text


@pytest.mark.unit
class TestPageLists:
    """Test the repository listings."""

    def test_children_as_list_items(self, repository, fixed_clock) -> None:
        """Test block output of related pages."""
        content = expand(WikiTagsTransform(repository, clock=fixed_clock), "/Projects/Index", ListChildren())
        items = content.get(0)
        assert len(items) == 1
        item = items.get(0)
        assert isinstance(item, ListItem)
        assert (item.level, item.ordered) == (1, False)
        assert item.child.page_path == "/Projects/Alpha"
        assert get_string_content(item) == "Alpha"

    def test_parents_of_other_page(self, repository, fixed_clock) -> None:
        """Test a relative page option."""
        content = expand(
            WikiTagsTransform(repository, clock=fixed_clock), "/Projects/Index", ListParents(page_path="Alpha")
        )
        assert [item.child.page_path for item in content.get(0)] == ["/Projects/Index"]

    def test_relations_of_unknown_page(self, repository, fixed_clock, caplog) -> None:
        """Test that a page outside the repository has no relations."""
        with caplog.at_level(logging.WARNING, logger="wiki2html.transforms.wiki_tags"):
            content = expand(WikiTagsTransform(repository, clock=fixed_clock), "/Generated", ListChildren())
        assert len(content) == 0
        assert "Cannot list relations" in caplog.text

    def test_folder_pages(self, repository, fixed_clock) -> None:
        """Test listing the current folder and the whole wiki."""
        transform = WikiTagsTransform(repository, clock=fixed_clock)
        in_folder = expand(transform, "/Projects/Alpha", ListPages())
        assert [item.child.page_path for item in in_folder.get(0)] == ["/Projects/Alpha", "/Projects/Index"]

        everything = expand(transform, "/Index", ListPages())
        assert len(everything.get(0)) == 4

    def test_inline_list(self, repository, fixed_clock) -> None:
        """Test inline links joined by the separator."""
        content = expand(
            WikiTagsTransform(repository, clock=fixed_clock),
            "/Index",
            ListPages(
                folder="/Projects/", page_name_format="page_title", show_inline=True, inline_list_separator=" | "
            ),
        )
        links = content.get(0)
        assert get_string_content(links) == "Alpha | Index"
        assert link_targets(links) == [("/Projects/Alpha", "Alpha"), ("/Projects/Index", "Index")]

    def test_wanted_and_unlinked(self, repository, fixed_clock) -> None:
        """Test dangling links and pages nobody links to."""
        transform = WikiTagsTransform(repository, clock=fixed_clock)
        content = expand(transform, "/Index", ListWantedPages(), ListUnlinkedPages())
        assert [item.child.page_path for item in content.get(0)] == ["/Missing"]
        assert [item.child.page_path for item in content.get(1)] == ["/Orphan"]

    def test_unlinked_hiding_relations(self, fixed_clock) -> None:
        """Test that parents and children can count as linked."""
        repository = InMemoryRepository(
            [
                WikiPage("/Index", TextOnly("start")),
                WikiPage("/Mother", TextOnly("m")),
                WikiPage("/Kid", PageElementList([Parent("Mother")])),
            ]
        )
        transform = WikiTagsTransform(repository, clock=fixed_clock)
        plain = expand(transform, "/Index", ListUnlinkedPages())
        assert [item.child.page_path for item in plain.get(0)] == ["/Kid", "/Mother"]
        hidden = expand(transform, "/Index", ListUnlinkedPages(hide_parents=True, hide_children=True))
        assert len(hidden) == 0

    def test_view_and_edit_history(self, repository, fixed_clock) -> None:
        """Test history limits and names."""
        repository.mark_viewed("/Orphan")
        repository.mark_viewed("/Projects/Alpha")
        transform = WikiTagsTransform(repository, clock=fixed_clock)
        content = expand(transform, "/Index", ListViewHistory(max_length=1), ListEditHistory())
        assert [get_string_content(item) for item in content.get(0)] == ["Alpha"]
        assert len(content.get(1)) == 4

    def test_empty_list(self, repository, fixed_clock) -> None:
        """Test the replacement text and deletion of empty lists."""
        transform = WikiTagsTransform(repository, clock=fixed_clock)
        content = expand(transform, "/Index", ListViewHistory(output_on_empty="Nothing yet"), ListViewHistory())
        assert len(content) == 1
        assert content.get(0).text == "Nothing yet"
