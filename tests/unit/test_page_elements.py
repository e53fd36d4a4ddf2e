#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for page element nodes and their parent links."""
import pytest

import wiki2html.ast
from wiki2html.ast import nodes
from wiki2html.ast import (
    Bold,
    Heading,
    ListPages,
    PageElement,
    PageElementList,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TextOnly,
    WikiPage,
    XmlTag,
)
from wiki2html.exceptions import TreeStructureError


@pytest.mark.unit
class TestParentLinks:
    """Test that containers maintain the parent pointers."""

    def test_child_assignment_sets_parent(self) -> None:
        """Test single child containers."""
        text = TextOnly("x")
        bold = Bold(text)
        assert text.parent is bold

        other = TextOnly("y")
        bold.child = other
        assert other.parent is bold

    def test_list_mutations_set_parent(self) -> None:
        """Test add, insert and set."""
        first, second, third = TextOnly("1"), TextOnly("2"), TextOnly("3")
        element_list = PageElementList([first])
        element_list.insert(0, second)
        element_list.set(1, third)
        assert [element.text for element in element_list] == ["2", "3"]
        assert second.parent is element_list
        assert third.parent is element_list

    def test_moving_element_reparents(self) -> None:
        """Test that the last container wins."""
        text = TextOnly("moved")
        PageElementList([text])
        second = PageElementList()
        second.add(text)
        assert text.parent is second

    def test_table_cell_content_parent_is_table(self) -> None:
        """Test that cell content points at the table, not at the row or cell."""
        content = TextOnly("cell")
        table = Table("grid")
        table.new_row()
        table.add_cell(TableCell(content))
        assert content.parent is table

        late = TextOnly("late")
        table.rows[0].cells[0].content = late
        assert late.parent is table

    def test_rows_added_before_table(self) -> None:
        """Test that content is re-parented once the row joins a table."""
        content = TextOnly("x")
        row = TableRow(None, [TableCell(content)])
        assert content.parent is None
        table = Table(None, [row])
        assert content.parent is table


@pytest.mark.unit
class TestCycleProtection:
    """Test that the tree cannot become cyclic."""

    def test_insert_into_itself(self) -> None:
        """Test adding a list to itself."""
        element_list = PageElementList()
        with pytest.raises(TreeStructureError):
            element_list.add(element_list)

    def test_insert_ancestor_into_descendant(self) -> None:
        """Test assigning an ancestor as child."""
        inner = Bold(None)
        outer = Paragraph(False, 0, False, inner)
        with pytest.raises(TreeStructureError):
            inner.child = outer


@pytest.mark.unit
class TestPageElementList:
    """Test list operations."""

    def test_index_of_uses_identity(self) -> None:
        """Test that equal but distinct elements are not found."""
        text = TextOnly("a")
        element_list = PageElementList([TextOnly("a"), text])
        assert element_list.index_of(text) == 1
        assert element_list.index_of(TextOnly("b")) == -1

    def test_remove_and_get(self) -> None:
        """Test positional access."""
        element_list = PageElementList([TextOnly("a"), TextOnly("b")])
        removed = element_list.remove(0)
        assert removed.text == "a"
        assert element_list.get(0).text == "b"
        assert len(element_list) == 1

    def test_iteration_survives_mutation(self) -> None:
        """Test that iterating over a snapshot allows removal."""
        element_list = PageElementList([TextOnly("a"), TextOnly("b")])
        for _ in element_list:
            element_list.remove(0)
        assert len(element_list) == 0


@pytest.mark.unit
class TestNodeProperties:
    """Test node flags and copies."""

    def test_block_and_inline_flags(self) -> None:
        """Test is_inline for block, inline and listable nodes."""
        assert not Heading(1, None).is_inline
        assert not Paragraph().is_inline
        assert not Table().is_inline
        assert Bold(None).is_inline
        assert ListPages(show_inline=True).is_inline
        assert not ListPages().is_inline

    def test_negative_indention_is_clamped(self) -> None:
        """Test the paragraph indention lower bound."""
        assert Paragraph(False, -2, False, None).indention == 0

    def test_clone_is_deep_and_detached(self) -> None:
        """Test that clones share no nodes and have no parent."""
        tag = XmlTag(None, "contact", {"a": "1"}, PageElementList([TextOnly("x")]))
        page = WikiPage("/Page", tag)
        copy = page.clone()
        assert copy == page
        assert copy.parent is None
        assert copy.child is not tag
        assert copy.child.options is not tag.options
        assert copy.child.child.get(0).parent is copy.child.child

    def test_table_clone(self) -> None:
        """Test that a cloned table re-parents the cloned cell content."""
        table = Table("t", [TableRow("r", [TableCell(TextOnly("c"), True, "right")])])
        copy = table.clone()
        assert copy == table
        assert copy.rows[0].cells[0].content.parent is copy

    def test_source_span(self) -> None:
        """Test set_from_to_pos."""
        text = TextOnly("x")
        text.set_from_to_pos(3, 7)
        assert (text.from_pos, text.to_pos) == (3, 7)


@pytest.mark.unit
class TestPackageExports:
    """Test the public names of the ast package."""

    def test_every_node_class_is_exported(self) -> None:
        """Test that each page element class can be imported from wiki2html.ast."""
        node_classes = {
            name
            for name, obj in vars(nodes).items()
            if isinstance(obj, type) and issubclass(obj, PageElement) and obj.__module__ == nodes.__name__
        }
        assert "XmlTag" in node_classes
        assert node_classes <= set(wiki2html.ast.__all__)
        for name in node_classes:
            assert getattr(wiki2html.ast, name) is getattr(nodes, name)
