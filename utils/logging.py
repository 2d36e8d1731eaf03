"""Logging utilities for BuildStamp.

Build tools share stdout with the host pipeline, which reads the single
``BuildInfo:`` summary line from it, so log records go to stderr unless a
caller asks otherwise.
"""

import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    verbose: bool = False,
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure the root logger for BuildStamp.

    Safe to call more than once; existing handlers are replaced.

    Args:
        verbose: If True, set log level to DEBUG, otherwise WARNING
        level: Optional explicit log level (overrides verbose)
        stream: Optional output stream (defaults to stderr)
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if level is not None:
        log_level = level
    else:
        log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=stream if stream is not None else sys.stderr,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
