#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the message catalog and the in-memory page repository."""
from datetime import datetime

import pytest

from wiki2html.ast import PageElementList, Parent, TextOnly, WikiPage
from wiki2html.exceptions import ConfigurationError, PageNotFoundError
from wiki2html.messages import MessageCatalog, Messages
from wiki2html.repository import InMemoryRepository, PageRepository


@pytest.mark.unit
class TestMessageCatalog:
    """Test message lookup."""

    def test_defaults_and_placeholders(self) -> None:
        """Test an English default with a positional argument."""
        catalog = MessageCatalog()
        assert catalog.get_message("page.not_found", "/X") == "Page not found: /X"
        assert catalog.get_message("html.search") == "Search"

    def test_unknown_key_returns_key(self) -> None:
        """Test the fallback for missing texts."""
        assert MessageCatalog().get_message("no.such.key") == "no.such.key"

    def test_overrides(self) -> None:
        """Test that overrides replace and extend the defaults."""
        catalog = MessageCatalog({"html.search": "Suche", "custom": "x"})
        assert catalog.get_message("html.search") == "Suche"
        assert catalog.get_message("wiki.status") == "Status"
        assert "custom" in catalog

    def test_bad_placeholder_keeps_text(self) -> None:
        """Test that a message with too few arguments is returned unformatted."""
        catalog = MessageCatalog({"two": "{0} and {1}"})
        assert catalog.get_message("two", "a") == "{0} and {1}"

    def test_protocol(self) -> None:
        """Test that the catalog satisfies the Messages protocol."""
        assert isinstance(MessageCatalog(), Messages)

    def test_from_yaml(self, tmp_path) -> None:
        """Test loading overrides from a YAML file."""
        path = tmp_path / "messages.yaml"
        path.write_text('html.search: Suche\ndateformat.date: "%d.%m.%Y"\n', encoding="utf-8")
        catalog = MessageCatalog.from_yaml(path)
        assert catalog.get_message("html.search") == "Suche"
        assert catalog.get_message("dateformat.date") == "%d.%m.%Y"

    def test_from_yaml_rejects_lists(self, tmp_path) -> None:
        """Test that a YAML list is not a message file."""
        path = tmp_path / "messages.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            MessageCatalog.from_yaml(path)

    def test_from_missing_yaml(self, tmp_path) -> None:
        """Test that an unreadable file is a configuration error."""
        with pytest.raises(ConfigurationError):
            MessageCatalog.from_yaml(tmp_path / "missing.yaml")


@pytest.mark.unit
class TestInMemoryRepository:
    """Test the dict-backed repository."""

    def test_protocol(self, repository) -> None:
        """Test that the repository satisfies the PageRepository protocol."""
        assert isinstance(repository, PageRepository)

    def test_protocol_includes_view_history(self, repository) -> None:
        """Test that a repository without a view history does not satisfy the protocol."""

        class ReadOnlyRepository:
            def lookup_page(self, page_path):
                return repository.lookup_page(page_path)

            def exists(self, page_path):
                return repository.exists(page_path)

            def page_paths(self):
                return repository.page_paths()

            def page_info(self, page_path):
                return repository.page_info(page_path)

            def last_viewed(self, limit=-1):
                return []

            def last_modified(self, limit=-1):
                return []

        assert not isinstance(ReadOnlyRepository(), PageRepository)

    def test_lookup_returns_clone(self, repository) -> None:
        """Test that callers cannot modify the stored page."""
        first = repository.lookup_page("/Orphan")
        first.child = TextOnly("changed")
        second = repository.lookup_page("/Orphan")
        assert second.child != first.child
        assert second.parent is None

    def test_missing_page(self, repository) -> None:
        """Test the not found errors."""
        with pytest.raises(PageNotFoundError) as exc_info:
            repository.lookup_page("/Nope")
        assert exc_info.value.page_path == "/Nope"
        with pytest.raises(PageNotFoundError):
            repository.page_info("/Nope")
        with pytest.raises(PageNotFoundError):
            repository.remove_page("/Nope")

    def test_page_paths_and_exists(self, repository) -> None:
        """Test listing."""
        assert repository.page_paths() == ["/Index", "/Orphan", "/Projects/Alpha", "/Projects/Index"]
        assert repository.exists("/Index")
        assert not repository.exists("/Nope")
        assert "/Orphan" in repository
        assert len(repository) == 4

    def test_relations_from_parent_tags(self, repository) -> None:
        """Test that parents are declared on the child and children derived."""
        assert repository.page_info("/Projects/Alpha").parents == frozenset({"/Projects/Index"})
        assert repository.page_info("/Projects/Index").children == frozenset({"/Projects/Alpha"})
        assert repository.page_info("/Index").children == frozenset()

    def test_page_without_path_is_rejected(self) -> None:
        """Test that stored pages need a path."""
        with pytest.raises(ValueError):
            InMemoryRepository([WikiPage(None, TextOnly("x"))])

    def test_view_history(self, repository) -> None:
        """Test that a viewed page moves to the front."""
        repository.mark_viewed("/Index")
        repository.mark_viewed("/Orphan")
        repository.mark_viewed("/Index")
        assert repository.last_viewed() == ["/Index", "/Orphan"]
        assert repository.last_viewed(1) == ["/Index"]

        repository.remove_page("/Orphan")
        assert repository.last_viewed() == ["/Index"]

    def test_edit_history(self) -> None:
        """Test that pages are listed by modification time, newest first."""
        repository = InMemoryRepository()
        repository.add_page(WikiPage("/Old", None), datetime(2020, 1, 1))
        repository.add_page(WikiPage("/New", None), datetime(2026, 1, 1))
        repository.add_page(WikiPage("/Mid", PageElementList([Parent("/Old")])), datetime(2023, 1, 1))
        assert repository.last_modified() == ["/New", "/Mid", "/Old"]
        assert repository.last_modified(2) == ["/New", "/Mid"]
        assert repository.page_info("/Old").modified == datetime(2020, 1, 1)
        assert repository.page_info("/Old").children == frozenset({"/Mid"})
