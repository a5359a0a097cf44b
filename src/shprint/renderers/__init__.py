#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/renderers/__init__.py
"""Renderers turning shell ASTs into text."""

from shprint.renderers.base import BaseRenderer
from shprint.renderers.shell import ShellRenderer
from shprint.renderers.writers import BaseWriter, BufferedWriter, ColumnWriter, LengthCounter

__all__ = [
    "BaseRenderer",
    "BaseWriter",
    "BufferedWriter",
    "ColumnWriter",
    "LengthCounter",
    "ShellRenderer",
]
