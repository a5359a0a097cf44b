#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for shprint renderers.

Each renderer has a frozen options dataclass. Use ``create_updated`` to
derive a modified copy.
"""

from shprint.options.base import BaseRendererOptions, CloneFrozenMixin
from shprint.options.shell import ShellRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ShellRendererOptions",
]
