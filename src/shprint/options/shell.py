#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering shell ASTs back to source text.

This module defines the options dataclass used by ``ShellRenderer``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shprint.constants import (
    DEFAULT_BINARY_NEXT_LINE,
    DEFAULT_INDENT,
    DEFAULT_KEEP_PADDING,
    DEFAULT_MINIFY,
    DEFAULT_SWITCH_CASE_INDENT,
)
from shprint.options.base import BaseRendererOptions


@dataclass(frozen=True)
class ShellRendererOptions(BaseRendererOptions):
    """Shell rendering options.

    Parameters
    ----------
    indent : int, default 0
        Number of spaces per indentation level. 0 indents with one tab per level.
    binary_next_line : bool, default False
        When a binary command (``&&``, ``||``, ``|``, ``|&``) spans several
        lines, put the operator at the start of the next line after a
        backslash continuation instead of at the end of the current line.
    switch_case_indent : bool, default False
        Indent case arms one level inside ``case ... esac``, so arm bodies
        sit two levels deeper than the ``case`` keyword.
    keep_padding : bool, default False
        Pad tokens with spaces so they stay in the column they occupied in
        the source. Best effort: alignment is kept stable, not created.
    minify : bool, default False
        Produce the smallest output possible: no comments, no blank lines,
        no indentation and as little optional whitespace as the grammar allows.

    Examples
    --------
    Four-space indentation with operators leading continuation lines:

        >>> options = ShellRendererOptions(indent=4, binary_next_line=True)

    """

    indent: int = field(
        default=DEFAULT_INDENT,
        metadata={"help": "Spaces per indentation level (0 for tabs)", "type": int, "importance": "core"},
    )
    binary_next_line: bool = field(
        default=DEFAULT_BINARY_NEXT_LINE,
        metadata={
            "help": "Place binary operators at the start of continuation lines",
            "importance": "core",
        },
    )
    switch_case_indent: bool = field(
        default=DEFAULT_SWITCH_CASE_INDENT,
        metadata={"help": "Indent case arms inside case statements", "importance": "core"},
    )
    keep_padding: bool = field(
        default=DEFAULT_KEEP_PADDING,
        metadata={"help": "Keep tokens in their original source columns", "importance": "advanced"},
    )
    minify: bool = field(
        default=DEFAULT_MINIFY,
        metadata={
            "help": "Minify output: drop comments, blank lines, indentation and optional spaces",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``indent`` is not a non-negative integer.

        """
        super().__post_init__()
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(f"indent must be an integer, got {type(self.indent).__name__}")
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
