"""Unit tests for logging setup."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler
from treewipe.core.logging import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    """Leave the package logger as it was found."""
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_is_warning(self) -> None:
        """Without flags only warnings and errors are logged."""
        assert setup_logging().level == logging.WARNING

    def test_verbose(self) -> None:
        """--verbose logs every deletion."""
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_quiet(self) -> None:
        """--quiet logs errors only."""
        assert setup_logging(quiet=True).level == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        """verbose takes precedence when both are set."""
        assert setup_logging(verbose=True, quiet=True).level == logging.DEBUG

    def test_single_rich_handler(self) -> None:
        """Repeated setup replaces the handler instead of stacking."""
        setup_logging()
        logger = setup_logging(verbose=True)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.handlers[0].level == logging.DEBUG
