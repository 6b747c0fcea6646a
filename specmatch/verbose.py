"""Logging configuration for the command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(
    debug_file: Optional[Path] = None,
    verbose: bool = False,
    logger_name: str = "specmatch",
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        debug_file: If given, DEBUG records are appended to this file.
        verbose: If True, also log to stderr.
        logger_name: Name of the logger to configure. Module loggers
            (e.g. "specmatch.core.adapter") propagate to it.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Close and drop any existing handlers for this specific logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
