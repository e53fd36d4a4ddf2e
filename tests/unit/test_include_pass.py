#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the page inclusion pass."""
import logging

import pytest

from wiki2html.ast import IncludePage, PageElementList, TextOnly, WikiPage, get_string_content
from wiki2html.repository import InMemoryRepository
from wiki2html.transforms import IncludePageTransform


def _chain_repository() -> InMemoryRepository:
    return InMemoryRepository(
        [
            WikiPage("/A", PageElementList([TextOnly("a"), IncludePage("B")])),
            WikiPage("/B", PageElementList([TextOnly("b"), IncludePage("Sub/C")])),
            WikiPage("/Sub/C", PageElementList([TextOnly("c"), IncludePage("D")])),
            WikiPage("/Sub/D", TextOnly("d")),
            WikiPage("/Self", PageElementList([TextOnly("self"), IncludePage("/Self")])),
        ]
    )


@pytest.mark.unit
class TestIncludePageTransform:
    """Test inlining of included pages."""

    def test_nested_includes_resolve_relative_to_included_page(self) -> None:
        """Test that each included page keeps its own folder for path resolution."""
        repository = _chain_repository()
        page = IncludePageTransform(repository).transform_page(repository.lookup_page("/A"))

        assert get_string_content(page) == "abcd"
        included = page.child.get(1)
        assert isinstance(included, WikiPage)
        assert included.page_path == "/B"
        assert included.parent is page.child

    def test_stored_page_is_not_modified(self) -> None:
        """Test that the repository copy still holds the include tag."""
        repository = _chain_repository()
        IncludePageTransform(repository).transform_page(repository.lookup_page("/A"))
        assert isinstance(repository.lookup_page("/A").child.get(1), IncludePage)

    def test_self_include_is_removed(self, caplog) -> None:
        """Test that a page cannot include itself."""
        repository = _chain_repository()
        with caplog.at_level(logging.WARNING, logger="wiki2html.transforms.include_page"):
            page = IncludePageTransform(repository).transform_page(repository.lookup_page("/Self"))

        assert get_string_content(page) == "self"
        assert len(page.child) == 1
        assert "into itself" in caplog.text

    def test_missing_page_is_removed(self, caplog) -> None:
        """Test that an include of an unknown page disappears with a warning."""
        repository = InMemoryRepository([WikiPage("/P", PageElementList([IncludePage("Nope"), TextOnly("x")]))])
        with caplog.at_level(logging.WARNING, logger="wiki2html.transforms.include_page"):
            page = IncludePageTransform(repository).transform_page(repository.lookup_page("/P"))

        assert get_string_content(page) == "x"
        assert "doesn't exist" in caplog.text

    def test_depth_limit(self, caplog) -> None:
        """Test that nesting stops at the configured depth."""
        repository = _chain_repository()
        with caplog.at_level(logging.WARNING, logger="wiki2html.transforms.include_page"):
            page = IncludePageTransform(repository, max_include_depth=1).transform_page(repository.lookup_page("/A"))

        assert get_string_content(page) == "ab"
        assert "nesting exceeds 1 levels" in caplog.text

    def test_include_outside_page(self) -> None:
        """Test that a detached include tag is deleted."""
        transform = IncludePageTransform(InMemoryRepository())
        assert transform.transform_element(IncludePage("X")) is None
        text = TextOnly("kept")
        assert transform.transform_element(text) is text
