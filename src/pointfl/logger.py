## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
"""Package-wide logger for pointfl."""

import os
import sys
import logging

__all__ = ["logger", "setup_logger", "set_level"]


def setup_logger(name: str = "pointfl", level: str | None = None, format_string: str | None = None) -> logging.Logger:
    """Configure and return the project logger.

    The level defaults to the `POINTFL_LOG_LEVEL` environment variable, or WARNING.
    Output goes to stderr so that results written to stdout remain machine-readable.
    """
    level = level or os.getenv("POINTFL_LOG_LEVEL", "WARNING")
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger(name)

    # Only configure if not already configured.
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.propagate = False

    return logger


def set_level(level: str | int) -> None:
    logger.setLevel(level if isinstance(level, int) else getattr(logging, level.upper()))


logger = setup_logger()
