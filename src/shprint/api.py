"""The major exported API functions for rendering shell ASTs."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/shprint/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from shprint.ast.nodes import File, Stmt, StmtList
from shprint.ast.serialization import load_ast
from shprint.config import load_config_file, options_from_config
from shprint.exceptions import ValidationError
from shprint.options.shell import ShellRendererOptions
from shprint.renderers.shell import ShellRenderer

logger = logging.getLogger(__name__)

RenderableNode = Union[File, StmtList, Stmt]
OutputTarget = Union[str, Path, IO[bytes], IO[str], None]


def _resolve_options(
    renderer_options: Optional[ShellRendererOptions],
    config_file: Optional[Union[str, Path]],
    kwargs: dict[str, Any],
) -> ShellRendererOptions:
    """Start from explicit options (or defaults), then apply the config file, then keyword overrides."""
    options = renderer_options or ShellRendererOptions()
    if config_file is not None:
        options = options_from_config(load_config_file(config_file), base=options)
    if kwargs:
        try:
            options = options.create_updated(**kwargs)
        except TypeError as e:
            raise ValidationError(f"Invalid renderer option: {e}", original_error=e) from e
        except ValueError as e:
            raise ValidationError(str(e), original_error=e) from e
    return options


def from_ast(
    node: RenderableNode,
    output: OutputTarget = None,
    *,
    renderer_options: Optional[ShellRendererOptions] = None,
    config_file: Optional[Union[str, Path]] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render a shell AST to source text.

    Parameters
    ----------
    node : File, StmtList or Stmt
        Root of the tree to render
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, returns the rendered text.
    renderer_options : ShellRendererOptions, optional
        Rendering options
    config_file : str or Path, optional
        Configuration file whose values are applied on top of
        ``renderer_options``
    kwargs : Any
        Individual option overrides (``indent=4``, ``minify=True`` ...),
        applied last

    Returns
    -------
    str or None
        The rendered text if ``output`` is None, otherwise None

    Raises
    ------
    ValidationError
        If an override names an unknown option or has an invalid value
    OutputWriteError
        If the output cannot be written

    Examples
    --------
    Render to a string with four-space indentation:
        >>> text = from_ast(file_node, indent=4)

    Render to a file:
        >>> from_ast(file_node, "script.sh", minify=True)

    """
    options = _resolve_options(renderer_options, config_file, kwargs)
    renderer = ShellRenderer(options)

    if output is None:
        return renderer.render_to_string(node)

    renderer.render(node, output)
    return None


def from_json(
    source: Union[str, Path, IO[str], IO[bytes]],
    output: OutputTarget = None,
    *,
    renderer_options: Optional[ShellRendererOptions] = None,
    config_file: Optional[Union[str, Path]] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Load a serialized AST and render it.

    Parameters
    ----------
    source : str, Path, IO[str] or IO[bytes]
        JSON text, a path to a JSON file, or a readable stream
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, returns the rendered text.
    renderer_options : ShellRendererOptions, optional
        Rendering options
    config_file : str or Path, optional
        Configuration file applied on top of ``renderer_options``
    kwargs : Any
        Individual option overrides, applied last

    Returns
    -------
    str or None
        The rendered text if ``output`` is None, otherwise None

    Raises
    ------
    ParsingError
        If ``source`` is not a valid serialized AST

    """
    node = load_ast(source)
    if not isinstance(node, (File, StmtList, Stmt)):
        raise ValidationError(
            f"Serialized AST root must be a File, StmtList or Stmt, got {type(node).__name__}",
            parameter_name="source",
        )
    logger.debug(f"Rendering {type(node).__name__} loaded from JSON")
    return from_ast(node, output, renderer_options=renderer_options, config_file=config_file, **kwargs)


__all__ = ["from_ast", "from_json"]
