"""Logging configuration for sdxxd.

Log records go through a Rich handler bound to standard error, since
standard output carries the dump itself.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Module-level logger instance for sdxxd
_logger: Optional[logging.Logger] = None

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"


def setup_logging(verbose: bool = False, level: Optional[int] = None) -> logging.Logger:
    """Configure Python logging with Rich handler.

    Args:
        verbose: If True, set log level to DEBUG for detailed output.
                 If False, use ``level`` or fall back to WARNING.
        level: Explicit log level (e.g. from configuration) used when
               not verbose.

    Returns:
        A configured logger instance for use throughout the application.

    Example:
        >>> logger = setup_logging(verbose=True)
        >>> logger.debug("read chunk of 2048 bytes")
    """
    global _logger

    if verbose:
        level = logging.DEBUG
    elif level is None:
        level = logging.WARNING

    rich_handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=True,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger("sdxxd")
    logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(rich_handler)

    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False

    _logger = logger

    return logger


def get_logger() -> logging.Logger:
    """Get the sdxxd logger instance.

    Returns the previously configured logger, or sets up a default
    logger if setup_logging() has not been called.
    """
    global _logger

    if _logger is None:
        _logger = setup_logging(verbose=False)

    return _logger
