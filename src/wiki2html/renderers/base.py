#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/renderers/base.py
"""Base classes for page renderers.

This module defines the abstract base class that renderers inherit from.
The BaseRenderer provides a consistent interface for turning a transformed
page element tree into text output.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wiki2html.ast.nodes import WikiPage
from wiki2html.exceptions import InvalidOptionsError
from wiki2html.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for page renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer specific options

    Examples
    --------
    Creating a custom renderer:

        >>> class TextRenderer(BaseRenderer):
        ...     def render_to_string(self, page):
        ...         return get_string_content(page)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, page: WikiPage) -> str:
        """Render a page to a string.

        Parameters
        ----------
        page : WikiPage
            Root of an already transformed page

        Returns
        -------
        str
            Rendered output

        """
        ...

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
