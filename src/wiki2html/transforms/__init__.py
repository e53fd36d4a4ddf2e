#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Transformation passes turning parsed wiki pages into renderable trees.

Passes run in this order by default:

1. :class:`IncludePageTransform` inlines included pages
2. :class:`ContactTransform` formats contact cards
3. :class:`EventListTransform` expands event lists
4. :class:`WikiTagsTransform` resolves the remaining wiki tags
"""

from wiki2html.transforms.assemble import assemble_page
from wiki2html.transforms.base import Clock, PageTransform
from wiki2html.transforms.contacts import ContactTransform
from wiki2html.transforms.events import EventListTransform
from wiki2html.transforms.include_page import IncludePageTransform
from wiki2html.transforms.pipeline import TransformPipeline, default_pipeline
from wiki2html.transforms.wiki_tags import WikiTagsTransform

__all__ = [
    "Clock",
    "ContactTransform",
    "EventListTransform",
    "IncludePageTransform",
    "PageTransform",
    "TransformPipeline",
    "WikiTagsTransform",
    "assemble_page",
    "default_pipeline",
]
