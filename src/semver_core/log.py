# SPDX-License-Identifier: MIT
"""Logging setup for the command line front end.

The library modules only create loggers; handlers are installed here, and
only when the CLI asks for them.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(levelname).4s] %(name)s: %(message)s"
HANDLER_NAME = "semver_core"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the root logger to write to stderr.

    Calling this more than once only updates the level and stream of the
    handler installed the first time.

    Args:
        verbose: Log at DEBUG level instead of WARNING

    Returns:
        The root logger
    """
    logger = logging.getLogger()
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and handler.get_name() == HANDLER_NAME:
            handler.setLevel(level)
            handler.setStream(sys.stderr)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(HANDLER_NAME)
    logger.addHandler(handler)
    return logger
