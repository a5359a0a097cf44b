"""shprint - pretty-print shell syntax trees back into shell source.

shprint takes an abstract syntax tree for a POSIX/Bash/mksh program and
writes it out as formatted shell source. Layout follows the source positions
recorded on the nodes: line breaks are kept, blank lines are collapsed to at
most one, nested constructs are indented and trailing comments of adjacent
one-line statements are aligned.

Features
--------
- Tab or N-space indentation
- Binary operators (``&&``, ``||``, ``|``) at the start of the next line
- Indented case arms
- Column-preserving output (``keep_padding``)
- Compact output (``minify``)
- Trees loaded from JSON, options loaded from TOML, YAML or JSON config files

Examples
--------
Render a tree built in Python:

    >>> from shprint import from_ast
    >>> from shprint.ast import CallExpr, File, Lit, Pos, Stmt, StmtList, Word
    >>> ls = Word(parts=[Lit(value="ls", value_pos=Pos(0, 1, 1))])
    >>> tree = File(body=StmtList(stmts=[Stmt(cmd=CallExpr(args=[ls]), position=Pos(0, 1, 1))]))
    >>> from_ast(tree)
    'ls\\n'

Render a serialized tree with four-space indentation:

    >>> from shprint import from_json
    >>> script = from_json("tree.json", indent=4)

See Also
--------
shprint.ast : AST node definitions and serialization
shprint.renderers : Renderer implementations

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "shprint requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from shprint.api import from_ast, from_json  # noqa: E402
from shprint.config import load_options  # noqa: E402
from shprint.exceptions import (  # noqa: E402
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    MalformedFileError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ShPrintError,
    ValidationError,
)
from shprint.options import BaseRendererOptions, ShellRendererOptions  # noqa: E402
from shprint.renderers.shell import ShellRenderer  # noqa: E402

__all__ = [
    "__version__",
    "from_ast",
    "from_json",
    "load_options",
    "ShellRenderer",
    "BaseRendererOptions",
    "ShellRendererOptions",
    "ShPrintError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "MalformedFileError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
