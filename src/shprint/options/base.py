#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for renderer options.

This module defines the foundation classes for the immutable option objects
handed to shprint renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


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

        Raises
        ------
        TypeError
            If a keyword does not name a field

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderer options are frozen: a renderer reads them at construction and
    they stay fixed for every render it performs.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass
    fields, each carrying ``help`` and ``importance`` metadata.

    """

    def __post_init__(self) -> None:
        """Validate base renderer options. Subclasses extend this."""
