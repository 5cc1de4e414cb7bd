"""
Logging helpers for gogocyclo.

All diagnostics go to stderr with a ``gogocyclo:`` prefix; stdout is
reserved for the filtered report.
"""

import logging
import sys


LOGGER_NAME = "gogocyclo"
LOG_FORMAT = "gogocyclo: %(message)s"


def get_logger() -> logging.Logger:
    """Get the package logger."""
    return logging.getLogger(LOGGER_NAME)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Send package log records to stderr.

    Handlers installed by an earlier call are replaced, so the stream is
    always the current ``sys.stderr``.
    """
    logger = get_logger()

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger
