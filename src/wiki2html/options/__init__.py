#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/options/__init__.py
"""Option dataclasses for rendering and transformation."""

from wiki2html.options.base import BaseRendererOptions, CloneFrozenMixin
from wiki2html.options.html import HtmlRendererOptions, PageShellOptions
from wiki2html.options.pipeline import PipelineOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "PageShellOptions",
    "PipelineOptions",
]
