"""Base classes for renderer and pipeline options.

This module defines the foundation classes for the option dataclasses used
throughout the wiki2html rendering pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from wiki2html.constants import DEFAULT_PROGRAM_NAME, DEFAULT_PROGRAM_VERSION


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    program_name : str
        Name of the wiki program, shown in page titles and by the version tag
    program_version : str
        Version string shown by the version tag

    """

    program_name: str = field(
        default=DEFAULT_PROGRAM_NAME,
        metadata={"help": "Program name shown in page titles", "importance": "core"},
    )
    program_version: str = field(
        default=DEFAULT_PROGRAM_VERSION,
        metadata={"help": "Program version shown by the version wiki tag", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If the program name is empty.

        """
        if not self.program_name:
            raise ValueError("program_name must not be empty")

    @property
    def program_name_version(self) -> str:
        return f"{self.program_name} {self.program_version}".strip()
