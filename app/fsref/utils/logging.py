"""Logging setup for the fsref command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, once, by the CLI entry point.
"""

import logging

from rich.logging import RichHandler

from fsref.utils.formatting import err_console

LOGGER_NAME = "fsref"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling this again only updates the level; no duplicate handlers are added.

    Args:
        verbose: Log at DEBUG level when True, WARNING otherwise.

    Returns:
        The configured ``fsref`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=err_console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    logger.debug("Logging initialized (verbose=%s)", verbose)
    return logger
