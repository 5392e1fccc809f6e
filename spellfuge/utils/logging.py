"""Logging setup for spellfuge."""

import sys

from loguru import logger

_DEFAULT_FORMAT = "<level>{message}</level>"
_DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru with a single stderr sink.

    Args:
        verbose: Show INFO messages
        debug: Show DEBUG messages with source locations (implies verbose)
    """
    logger.remove()
    if debug:
        logger.add(sys.stderr, level="DEBUG", format=_DEBUG_FORMAT)
    elif verbose:
        logger.add(sys.stderr, level="INFO", format=_DEFAULT_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING", format=_DEFAULT_FORMAT)
