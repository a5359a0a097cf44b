#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class every shprint renderer inherits
from, so that all of them expose the same ``render`` / ``render_to_string``
interface.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from shprint.ast.nodes import Node
from shprint.exceptions import InvalidOptionsError
from shprint.options.base import BaseRendererOptions
from shprint.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from shprint.renderers.base import BaseRenderer
        >>>
        >>> class CommandCounter(BaseRenderer):
        ...     def render(self, node, output):
        ...         self.write_text_output(self.render_to_string(node), output)
        ...
        ...     def render_to_string(self, node):
        ...         return f"{len(node.body.stmts)}\\n"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def render(self, node: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to the specified output.

        Parameters
        ----------
        node : Node
            AST node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary or text mode

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If output cannot be written

        """
        pass

    def render_to_string(self, node: Node) -> str:
        """Render the AST to a string (if applicable).

        Parameters
        ----------
        node : Node
            AST node to render

        Returns
        -------
        str
            Rendered output

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

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

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OSError
            If output cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("echo hi\\n", buffer)
            >>> buffer.getvalue()
            'echo hi\\n'

        """
        write_content(text, output)
