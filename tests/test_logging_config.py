"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from drilldown.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_logger():
    """Put the drilldown logger back the way it was after the test."""
    logger = logging.getLogger("drilldown")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_is_warning(self, restore_logger):
        logger = setup_logging()
        assert logger is restore_logger
        assert logger.level == logging.WARNING
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_verbose_and_quiet(self, restore_logger):
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(quiet=True).level == logging.ERROR
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    def test_repeated_setup_does_not_stack_handlers(self, restore_logger):
        setup_logging()
        setup_logging()
        assert len(restore_logger.handlers) == 1

    def test_log_file(self, restore_logger, tmp_path):
        log_file = tmp_path / "drilldown.log"
        logger = setup_logging(verbose=True, log_file=str(log_file))
        get_logger("builder").debug("split %d bucket(s)", 2)
        for handler in logger.handlers:
            handler.flush()
        assert "drilldown.builder - DEBUG - split 2 bucket(s)" in log_file.read_text()


class TestGetLogger:
    """Tests for get_logger."""

    def test_root(self):
        assert get_logger().name == "drilldown"

    def test_prefixes_name(self):
        assert get_logger("builder").name == "drilldown.builder"

    def test_keeps_qualified_name(self):
        assert get_logger("drilldown.config").name == "drilldown.config"
