#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the tree rewriting engine and the element helpers."""
import pytest

from wiki2html.ast import (
    Bold,
    Heading,
    Italic,
    LinkPage,
    PageElementList,
    Paragraph,
    Separator,
    Table,
    TableCell,
    TextOnly,
    WikiPage,
    get_absolute_page_path,
    get_context_wiki_page,
    get_id_string,
    get_string_content,
    transform_page,
    transform_tree,
    traverse_page_elements,
)


def _page() -> WikiPage:
    return WikiPage(
        "/Folder/Page",
        PageElementList(
            [
                Heading(1, TextOnly("Title")),
                Separator(),
                Paragraph(False, 0, False, Bold(TextOnly("bold"))),
                Separator(),
            ]
        ),
    )


@pytest.mark.unit
class TestTransformTree:
    """Test deletion, substitution and descent."""

    def test_delete_from_list(self) -> None:
        """Test that None removes list members, including adjacent ones."""
        page = transform_page(_page(), lambda el: None if isinstance(el, Separator) else el)
        assert [type(el).__name__ for el in page.child] == ["Heading", "Paragraph"]

    def test_substitute_gets_original_parent(self) -> None:
        """Test that a replacement sees the original's parent while its subtree is visited."""
        seen_parents = []

        def callback(element):
            if isinstance(element, Bold):
                return Italic(element.child)
            if isinstance(element, TextOnly) and element.text == "bold":
                seen_parents.append(element.parent)
            return element

        page = transform_page(_page(), callback)
        paragraph = page.child.get(2)
        assert isinstance(paragraph.child, Italic)
        assert paragraph.child.parent is paragraph
        assert isinstance(seen_parents[0], Italic)

    def test_substitute_is_visited(self) -> None:
        """Test that the engine descends into the returned node, not the original."""
        visited = []

        def callback(element):
            if isinstance(element, TextOnly):
                visited.append(element.text)
            if isinstance(element, Heading):
                return Paragraph(False, 0, False, TextOnly("replaced"))
            return element

        page = transform_page(_page(), callback)
        assert get_string_content(page.child.get(0)) == "replaced"
        assert visited == ["replaced", "bold"]

    def test_list_replacing_member_stays_nested(self) -> None:
        """Test that a list returned for a member is inserted as one element."""

        def callback(element):
            if isinstance(element, Heading):
                return PageElementList([TextOnly("a"), TextOnly("b")])
            return element

        page = transform_page(_page(), callback)
        first = page.child.get(0)
        assert isinstance(first, PageElementList)
        assert first.parent is page.child

    def test_deleted_child_leaves_empty_slot(self) -> None:
        """Test deletion outside a list."""
        paragraph = Paragraph(False, 0, False, TextOnly("x"))
        result = transform_tree(paragraph, lambda el: None if isinstance(el, TextOnly) else el)
        assert result is paragraph
        assert paragraph.child is None

    def test_table_cells_are_visited(self) -> None:
        """Test that cell content is transformed and keeps the table as parent."""
        table = Table()
        table.new_row()
        table.add_cell(TableCell(TextOnly("old")))
        result = transform_tree(table, lambda el: TextOnly("new") if isinstance(el, TextOnly) else el)
        content = result.rows[0].cells[0].content
        assert content.text == "new"
        assert content.parent is table

    def test_deleted_root_is_wrapped(self) -> None:
        """Test that transform_page always returns a page."""
        page = transform_page(_page(), lambda el: None if isinstance(el, WikiPage) else el)
        assert isinstance(page, WikiPage)
        assert page.page_path == "/Folder/Page"
        assert page.child is None


@pytest.mark.unit
class TestContextHelpers:
    """Test context page lookup and path resolution."""

    def test_nearest_and_global_page(self) -> None:
        """Test the two lookup modes for an included page."""
        text = TextOnly("x")
        inner = WikiPage("/Inner", text)
        outer = WikiPage("/Outer", PageElementList([inner]))
        assert get_context_wiki_page(text, False) is inner
        assert get_context_wiki_page(text, True) is outer
        assert get_context_wiki_page(TextOnly("detached"), False) is None

    def test_absolute_page_path(self) -> None:
        """Test resolution against the page folder."""
        page = WikiPage("/a/b/Page", None)
        assert get_absolute_page_path("Other", page) == "/a/b/Other"
        assert get_absolute_page_path("../Up", page) == "/a/Up"
        assert get_absolute_page_path("/Abs", page) == "/Abs"
        assert get_absolute_page_path(None, page) == "/a/b/Page"
        assert get_absolute_page_path("Other", None) is None


@pytest.mark.unit
class TestTraversal:
    """Test typed traversal and text helpers."""

    def test_traverse_collects_in_document_order(self) -> None:
        """Test that table cells are included."""
        table = Table()
        table.new_row()
        table.add_cell(TableCell(LinkPage("C", None, None)))
        page = WikiPage("/P", PageElementList([LinkPage("A", None, None), Bold(LinkPage("B", None, None)), table]))
        links = []
        traverse_page_elements(page, LinkPage, lambda link, acc: acc.append(link.page_path), links)
        assert links == ["A", "B", "C"]

    def test_traverse_without_recursing_into_matches(self) -> None:
        """Test that nested matches are skipped on request."""
        page = WikiPage("/P", Bold(Bold(TextOnly("x"))))
        found = []
        traverse_page_elements(page, Bold, lambda bold, acc: acc.append(bold), found, recurse_into_matches=False)
        assert len(found) == 1

    def test_string_content(self) -> None:
        """Test text concatenation."""
        element = PageElementList([TextOnly("Hello "), Bold(TextOnly("world"))])
        assert get_string_content(element) == "Hello world"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1. Getting started!", "Gettingstarted"),
            ("Version 2.0-beta", "Version2.0-beta"),
            ("_private:x", "_private:x"),
            ("123", ""),
            ("Äpfel", "pfel"),
        ],
    )
    def test_id_string(self, text, expected) -> None:
        """Test id reduction."""
        assert get_id_string(text) == expected
