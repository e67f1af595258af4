"""Logging setup for the command line interface."""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "library_change"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Repeated calls replace the handler instead of stacking a new one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
