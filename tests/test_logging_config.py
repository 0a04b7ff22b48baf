"""Tests for logging setup."""

import logging

import pytest

from logging_config import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_single_console_handler(self, root_logger):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG

    def test_log_file(self, root_logger, tmp_path):
        log_file = tmp_path / "globe.log"
        setup_logging(logging.INFO, str(log_file))
        logging.getLogger("scene").info("hello globe")
        for handler in root_logger.handlers:
            handler.flush()

        assert len(root_logger.handlers) == 2
        assert "scene - INFO - hello globe" in log_file.read_text(encoding="utf-8")
