#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shprint/ast/utils.py
"""Small helpers for inspecting shell AST nodes."""

from __future__ import annotations

import re

from shprint.ast.nodes import BinaryCmd, Stmt, Subshell

_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_valid_name(value: str) -> bool:
    """Return True if ``value`` is a valid shell variable name.

    Parameters
    ----------
    value : str
        Candidate identifier

    Returns
    -------
    bool
        True for names like ``foo`` or ``_bar1``, False for ``1x``, ``a-b`` or ""

    """
    return _NAME_PATTERN.fullmatch(value) is not None


def starts_with_lparen(stmt: Stmt) -> bool:
    """Return True if the statement renders starting with ``(``.

    Used to keep ``$( (`` and ``( (`` apart from ``$((`` and ``((``.
    """
    cmd = stmt.cmd
    if isinstance(cmd, Subshell):
        return True
    if isinstance(cmd, BinaryCmd):
        return starts_with_lparen(cmd.x)
    return False
