"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from subnetkit.logging_config import (
    LOG_FILE_BACKUPS,
    LOG_FILE_MAX_BYTES,
    configure_logging,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    def test_console_only(self):
        logger = setup_logging(level="WARNING")
        assert logger.name == "subnetkit"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_lowercase_level(self):
        assert setup_logging(level="debug").level == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(level="LOUD")

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "nested" / "subnetkit.log"
        logger = setup_logging(level="WARNING", log_file=str(log_file))
        handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert handlers[0].maxBytes == LOG_FILE_MAX_BYTES
        assert handlers[0].backupCount == LOG_FILE_BACKUPS

        # the file records DEBUG even when the console is quieter
        get_logger("subnetkit.ip.exclusion").debug("split 10.0.0.0/8")
        assert "split 10.0.0.0/8" in log_file.read_text()

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1


class TestConfigureLogging:
    def test_defaults_to_info(self):
        assert configure_logging().level == logging.INFO

    def test_level_from_config(self):
        assert configure_logging(level="ERROR").level == logging.ERROR

    def test_debug_overrides_level(self):
        assert configure_logging(debug=True, level="ERROR").level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "subnetkit.log"
        logger = configure_logging(log_file=str(log_file))
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        assert log_file.exists()


class TestGetLogger:
    def test_returns_named_logger(self):
        assert get_logger("subnetkit.ip.core") is logging.getLogger("subnetkit.ip.core")
