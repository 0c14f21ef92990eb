"""Unit tests for logging setup."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler
from statreport.utils.logging import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Restore the package logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_is_warning(self) -> None:
        """Without --verbose only warnings and above are logged."""
        logger = configure_logging()
        assert logger.name == "statreport"
        assert logger.level == logging.WARNING

    def test_verbose_level_is_debug(self) -> None:
        """--verbose enables debug logging."""
        assert configure_logging(verbose=True).level == logging.DEBUG

    def test_single_rich_handler(self) -> None:
        """Repeated configuration does not stack handlers."""
        configure_logging()
        logger = configure_logging(verbose=True)
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1

    def test_handler_writes_to_stderr(self) -> None:
        """Log records never reach stdout."""
        logger = configure_logging()
        handler = next(h for h in logger.handlers if isinstance(h, RichHandler))
        assert handler.console.stderr

    def test_module_loggers_are_children(self) -> None:
        """Module loggers inherit the package configuration."""
        configure_logging(verbose=True)
        child = logging.getLogger("statreport.core.host")
        assert child.getEffectiveLevel() == logging.DEBUG
