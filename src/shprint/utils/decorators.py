#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Timing helpers for DEBUG-level instrumentation."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager timing a block when DEBUG logging is enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering (shell)")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Rendering (shell)"):
        ...     renderer.print_to(file_node, stream)
        ... # Logs: "Rendering (shell) completed in 0.01s" at DEBUG level

    Notes
    -----
    Nothing is measured when DEBUG is disabled for ``logger``. Nothing is
    logged either when the block raises.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
