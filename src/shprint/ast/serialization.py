#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/ast/serialization.py
"""JSON serialization and deserialization for shell AST nodes.

The printer never parses shell source itself. This module gives external
parsers (or tests, or fixture files) a stable interchange format so a tree
can be built elsewhere and handed to ``ShellRenderer``.

Format
------
- Every node is an object with a ``node_type`` key holding its class name.
- Fields use their Python attribute names (``else_``, ``with_`` ...).
- Positions are ``{"offset": ..., "line": ..., "col": ...}`` objects.
- Fields equal to their default value are omitted.
- ``ast_to_json`` adds ``"schema_version": 1`` at the root.

Examples
--------
Serialize a statement to JSON:

    >>> from shprint.ast import CallExpr, Lit, Stmt, Word
    >>> stmt = Stmt(cmd=CallExpr(args=[Word(parts=[Lit(value="ls")])]))
    >>> json_str = ast_to_json(stmt)

Deserialize it back:

    >>> json_to_ast(json_str).cmd.args[0].lit()
    'ls'

"""

from __future__ import annotations

import json
import logging
from dataclasses import MISSING, fields
from pathlib import Path
from typing import IO, Any, Union

from shprint.ast.nodes import NODE_TYPES, Node, Pos
from shprint.constants import AST_JSON_SCHEMA_VERSION
from shprint.exceptions import FileNotFoundError, ParsingError

logger = logging.getLogger(__name__)

_POS_KEYS = frozenset({"offset", "line", "col"})
_STAGE = "ast_json"


def _field_default(f: Any) -> Any:
    if f.default is not MISSING:
        return f.default
    if f.default_factory is not MISSING:
        return f.default_factory()
    return MISSING


def _encode_value(value: Any) -> Any:
    if isinstance(value, Pos):
        return {"offset": value.offset, "line": value.line, "col": value.col}
    if isinstance(value, Node):
        return ast_to_dict(value)
    if isinstance(value, list):
        return [_encode_value(item) for item in value]
    return value


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary with a ``node_type`` key and one key per non-default field

    Raises
    ------
    ValueError
        If the node class is not part of the shell AST

    """
    node_type = type(node).__name__
    if NODE_TYPES.get(node_type) is not type(node):
        raise ValueError(f"Unknown node type for serialization: {node_type}")

    result: dict[str, Any] = {"node_type": node_type}
    for f in fields(node):  # type: ignore[arg-type]
        value = getattr(node, f.name)
        if value == _field_default(f):
            continue
        result[f.name] = _encode_value(value)
    return result


def _decode_value(value: Any, strict_mode: bool) -> Any:
    if isinstance(value, dict):
        if "node_type" in value:
            return dict_to_ast(value, strict_mode=strict_mode)
        if set(value) <= _POS_KEYS:
            try:
                return Pos(**{key: int(val) for key, val in value.items()})
            except (TypeError, ValueError) as e:
                raise ParsingError(f"Invalid position: {value!r}", parsing_stage=_STAGE, original_error=e) from e
        raise ParsingError(f"Object without node_type: {value!r}", parsing_stage=_STAGE)
    if isinstance(value, list):
        return [_decode_value(item, strict_mode) for item in value]
    return value


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary produced by ``ast_to_dict`` back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary with a ``node_type`` key
    strict_mode : bool, default True
        If True, unknown fields raise ``ParsingError``. If False, they are
        logged and skipped.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the node type is unknown, a field is unknown (strict mode), a
        required field is missing or a field holds an invalid value

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected an object, got {type(data).__name__}", parsing_stage=_STAGE)

    node_type = data.get("node_type")
    node_class = NODE_TYPES.get(node_type) if isinstance(node_type, str) else None
    if node_class is None:
        raise ParsingError(f"Unknown node type: {node_type}", parsing_stage=_STAGE)

    field_names = {f.name for f in fields(node_class)}  # type: ignore[arg-type]
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "node_type":
            continue
        if key not in field_names:
            if strict_mode:
                raise ParsingError(f"Unknown field '{key}' for node type {node_type}", parsing_stage=_STAGE)
            logger.warning(f"Unknown field '{key}' for node type {node_type}, skipping")
            continue
        kwargs[key] = _decode_value(value, strict_mode)

    try:
        return node_class(**kwargs)
    except (TypeError, ValueError) as e:
        raise ParsingError(f"Invalid {node_type} node: {e}", parsing_stage=_STAGE, original_error=e) from e


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned = {"schema_version": AST_JSON_SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    A document without ``schema_version`` is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    strict_mode : bool, default True
        Passed to ``dict_to_ast``

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the JSON is malformed, has an unsupported schema version or
        describes an invalid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid AST JSON: {e}", parsing_stage=_STAGE, original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError(f"AST JSON must contain an object, got {type(data).__name__}", parsing_stage=_STAGE)

    schema_version = data.pop("schema_version", AST_JSON_SCHEMA_VERSION)
    if schema_version != AST_JSON_SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. "
            f"This version of shprint supports schema version {AST_JSON_SCHEMA_VERSION} only.",
            parsing_stage=_STAGE,
        )

    return dict_to_ast(data, strict_mode=strict_mode)


def load_ast(source: Union[str, Path, IO[str], IO[bytes]], strict_mode: bool = True) -> Node:
    """Load an AST from a JSON file, a file-like object or a JSON string.

    A ``str`` whose first non-blank character is ``{`` is taken as JSON
    text; any other ``str`` is treated as a path.

    Parameters
    ----------
    source : str, Path, IO[str] or IO[bytes]
        Where to read the AST from
    strict_mode : bool, default True
        Passed to ``dict_to_ast``

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    FileNotFoundError
        If ``source`` names a file that does not exist
    ParsingError
        If the content is not a valid serialized AST

    """
    if isinstance(source, str) and source.lstrip().startswith("{"):
        return json_to_ast(source, strict_mode=strict_mode)

    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise FileNotFoundError(str(path))
        logger.debug(f"Loading AST from {path}")
        return json_to_ast(path.read_text(encoding="utf-8"), strict_mode=strict_mode)

    content = source.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    return json_to_ast(content, strict_mode=strict_mode)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
    "load_ast",
]
