"""Logging setup for the treewipe CLI.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

import logging

from rich.logging import RichHandler

from treewipe.utils.formatting import err_console

LOGGER_NAME = "treewipe"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the treewipe logger with a Rich handler on stderr.

    Args:
        verbose: Log every deletion (DEBUG).
        quiet: Log errors only. Ignored when verbose is set.

    Returns:
        The configured package logger.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=verbose)
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger
