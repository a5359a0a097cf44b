#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input/output helpers for writing rendered text to its destination."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Any, Union, cast

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def is_binary_stream(stream: Any) -> bool:
    """Return True if ``stream`` expects bytes rather than str.

    Parameters
    ----------
    stream : Any
        A file-like object with a ``write`` method

    Returns
    -------
    bool
        True for binary streams, False for text streams or when undecidable

    """
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: OutputTarget) -> None:
    """Write rendered text to a path or a file-like object.

    Paths are written as UTF-8. Binary streams receive the UTF-8 encoding of
    ``content``; text streams receive it unchanged.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination

    Raises
    ------
    TypeError
        If ``output`` is neither a path nor a writable object
    OSError
        If the underlying file or stream fails

    Examples
    --------
        >>> from io import BytesIO
        >>> buffer = BytesIO()
        >>> write_content("echo hi\\n", buffer)
        >>> buffer.getvalue()
        b'echo hi\\n'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


def describe_destination(output: Any) -> str:
    """Return a short human-readable name for an output destination."""
    if isinstance(output, (str, Path)):
        return str(output)
    name = getattr(output, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(output).__name__}>"


__all__ = ["OutputTarget", "describe_destination", "is_binary_stream", "write_content"]
