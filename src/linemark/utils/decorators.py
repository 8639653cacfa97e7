#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/utils/decorators.py
"""Timing helpers shared by the pipeline stages."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block of code and report it at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Tokenizing")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Tokenizing"):
        ...     tokens = tokenize(text)
        ... # Logs: "Tokenizing completed in 0.00s" at DEBUG level

    Notes
    -----
    Nothing is measured when the logger is not enabled for DEBUG.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
