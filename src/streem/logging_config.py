"""Logging configuration for streem."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False) -> None:
    """Configure loguru with appropriate level and turn on streem's own logs.

    The package disables its logger on import so that library users only see
    streem's debug output when they opt in.
    """
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format="{level.icon} {name}: {message}")
    else:
        logger.add(sys.stderr, level="INFO", format="{level.icon} {message}")
    logger.enable("streem")
