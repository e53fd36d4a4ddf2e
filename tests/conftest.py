#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pytest configuration and shared fixtures for the wiki2html test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import os
from datetime import datetime

import pytest
from hypothesis import Phase, Verbosity, settings

from wiki2html.ast import (
    Heading,
    LinkPage,
    PageElementList,
    Paragraph,
    Parent,
    TextOnly,
    WikiPage,
)
from wiki2html.repository import InMemoryRepository

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXED_NOW = datetime(2026, 3, 15, 9, 30, 0)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


def text_paragraph(text: str) -> Paragraph:
    return Paragraph(False, 0, False, TextOnly(text))


@pytest.fixture
def fixed_clock():
    """Clock returning 15.03.2026 09:30:00."""
    return lambda: FIXED_NOW


@pytest.fixture
def repository() -> InMemoryRepository:
    """Small wiki with a folder, a parent/child pair and one dangling link.

    - ``/Index`` links to ``/Projects/`` and the missing ``/Missing``
    - ``/Projects/Index`` and ``/Projects/Alpha`` (child of ``/Projects/Index``)
    - ``/Orphan`` is linked from nowhere
    """
    modified = datetime(2026, 3, 1, 12, 0, 0)
    repo = InMemoryRepository()
    repo.add_page(
        WikiPage(
            "/Index",
            PageElementList(
                [
                    Heading(1, TextOnly("Welcome")),
                    Paragraph(False, 0, False, LinkPage("/Projects/", None, None)),
                    Paragraph(False, 0, False, LinkPage("Missing", None, None)),
                ]
            ),
        ),
        modified,
    )
    repo.add_page(
        WikiPage(
            "/Projects/Index",
            PageElementList([text_paragraph("Projects"), Paragraph(False, 0, False, LinkPage("Alpha", None, None))]),
        ),
        modified,
    )
    repo.add_page(
        WikiPage("/Projects/Alpha", PageElementList([Parent("Index"), text_paragraph("Alpha project")])),
        modified,
    )
    repo.add_page(WikiPage("/Orphan", text_paragraph("Nobody links here")), modified)
    return repo
