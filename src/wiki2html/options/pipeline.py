#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/options/pipeline.py
"""Configuration options for the transformation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from wiki2html.constants import (
    DEFAULT_EVENT_DAYS_AFTER,
    DEFAULT_EVENT_DAYS_BEFORE,
    DEFAULT_INDEX_PAGE_NAME,
    DEFAULT_MAX_INCLUDE_DEPTH,
    DEFAULT_STARTPAGE_PATH,
)
from wiki2html.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PipelineOptions(BaseRendererOptions):
    """Configuration options for the transformation passes.

    Parameters
    ----------
    index_page_name : str, default "Index"
        Page shown for a folder link
    startpage_path : str, default "/Index"
        Path of the start page
    navigation_page_path : str or None
        Page shown as navigation menu by ``assemble_page``
    header_page_path : str or None
        Page shown above the content by ``assemble_page``
    footer_page_path : str or None
        Page shown below the content by ``assemble_page``
    max_include_depth : int, default 8
        Maximum nesting of included pages
    event_days_after : int, default 3
        Days an event stays in the event list after it happened
    event_days_before : int, default 10
        Days an event is listed before it happens

    """

    index_page_name: str = field(
        default=DEFAULT_INDEX_PAGE_NAME,
        metadata={"help": "Page name shown for folder links", "importance": "core"},
    )
    startpage_path: str = field(
        default=DEFAULT_STARTPAGE_PATH,
        metadata={"help": "Path of the start page", "importance": "core"},
    )
    navigation_page_path: str | None = field(
        default=None,
        metadata={"help": "Page rendered as navigation menu", "importance": "core"},
    )
    header_page_path: str | None = field(
        default=None,
        metadata={"help": "Page rendered above the content", "importance": "core"},
    )
    footer_page_path: str | None = field(
        default=None,
        metadata={"help": "Page rendered below the content", "importance": "core"},
    )
    max_include_depth: int = field(
        default=DEFAULT_MAX_INCLUDE_DEPTH,
        metadata={"help": "Maximum nesting depth of included pages", "type": int, "importance": "security"},
    )
    event_days_after: int = field(
        default=DEFAULT_EVENT_DAYS_AFTER,
        metadata={"help": "Days an event stays listed after it happened", "type": int, "importance": "advanced"},
    )
    event_days_before: int = field(
        default=DEFAULT_EVENT_DAYS_BEFORE,
        metadata={"help": "Days an event is listed before it happens", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.max_include_depth < 0:
            raise ValueError(f"max_include_depth must be non-negative, got {self.max_include_depth}")
        if self.event_days_after < 0:
            raise ValueError(f"event_days_after must be non-negative, got {self.event_days_after}")
        if self.event_days_before < 0:
            raise ValueError(f"event_days_before must be non-negative, got {self.event_days_before}")
        if not self.startpage_path.startswith("/"):
            raise ValueError(f"startpage_path must be absolute, got {self.startpage_path!r}")
