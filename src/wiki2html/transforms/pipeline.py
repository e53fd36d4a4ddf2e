#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/transforms/pipeline.py
"""Ordered application of transformation passes.

Examples
--------
Standard passes over a page from a repository:

    >>> pipeline = default_pipeline(repository)
    >>> page = pipeline.apply(repository.lookup_page("/Index"))

Custom order:

    >>> pipeline = TransformPipeline([IncludePageTransform(repository), WikiTagsTransform(repository)])

"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from wiki2html.ast.nodes import WikiPage
from wiki2html.exceptions import TransformError, Wiki2HtmlError
from wiki2html.messages import MessageCatalog, Messages
from wiki2html.options.pipeline import PipelineOptions
from wiki2html.repository import PageRepository
from wiki2html.transforms.base import Clock, PageTransform
from wiki2html.transforms.contacts import ContactTransform
from wiki2html.transforms.events import EventListTransform
from wiki2html.transforms.include_page import IncludePageTransform
from wiki2html.transforms.wiki_tags import WikiTagsTransform

logger = logging.getLogger(__name__)


class TransformPipeline:
    """Apply a sequence of :class:`PageTransform` passes in order.

    Parameters
    ----------
    transforms : iterable of PageTransform
        Passes in execution order

    """

    def __init__(self, transforms: Iterable[PageTransform]):
        self.transforms: list[PageTransform] = list(transforms)
        for transform in self.transforms:
            if not isinstance(transform, PageTransform):
                raise TypeError(f"Transform must be a PageTransform, got {type(transform).__name__}")

    def apply(self, page: WikiPage) -> WikiPage:
        """Run every pass over ``page``.

        Raises
        ------
        TransformError
            If a pass fails with an error that is not a wiki2html error

        """
        logger.debug(f"Applying {len(self.transforms)} transform(s) to page '{page.page_path}'")
        result = page
        for transform in self.transforms:
            logger.debug(f"Applying transform: {transform.name}")
            try:
                result = transform.transform_page(result)
            except Wiki2HtmlError:
                raise
            except Exception as e:
                logger.error(f"Transform {transform.name} failed: {e}", exc_info=True)
                raise TransformError(
                    f"Transform '{transform.name}' failed: {e}", transform_name=transform.name, original_error=e
                ) from e
        logger.debug(f"Finished transforming page '{page.page_path}'")
        return result

    def __len__(self) -> int:
        return len(self.transforms)


def default_pipeline(
    repository: PageRepository,
    messages: Optional[Messages] = None,
    options: Optional[PipelineOptions] = None,
    clock: Optional[Clock] = None,
) -> TransformPipeline:
    """Build the standard passes: includes, contacts, event lists, wiki tags."""
    messages = messages or MessageCatalog()
    options = options or PipelineOptions()
    return TransformPipeline(
        [
            IncludePageTransform(repository, options.max_include_depth),
            ContactTransform(messages, clock),
            EventListTransform(repository, messages, clock, options.event_days_after, options.event_days_before),
            WikiTagsTransform(repository, messages, options, clock),
        ]
    )
