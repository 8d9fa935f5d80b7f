"""Logging configuration for the correspondence formatter."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route loguru output to stderr.

    ``quiet`` keeps only warnings, so numbering advisories still show while
    routine edit chatter is hidden. ``verbose`` wins over ``quiet``.
    """
    logger.remove()
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
