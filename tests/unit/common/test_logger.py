"""Tests for logging setup."""

import logging

import pytest

from kraftpack.common.logger import TRACE, get_logger, parse_level, setup_logger


class TestParseLevel:
    """Tests for level parsing."""

    def test_trace_level(self):
        assert parse_level("trace") == TRACE
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_standard_levels(self):
        assert parse_level("DEBUG") == logging.DEBUG
        assert parse_level("warning") == logging.WARNING

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            parse_level("LOUD")


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_file_logging(self, tmp_path):
        """Test a log file is created in log_dir."""
        logger = setup_logger(
            "kraftpack-test-file", log_dir=str(tmp_path), level="DEBUG", console_logging=False
        )
        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "hello" in (tmp_path / "kraftpack-test-file.log").read_text()

    def test_no_duplicate_handlers(self, tmp_path):
        """Test calling setup twice does not stack handlers."""
        first = setup_logger("kraftpack-test-dup", log_dir=str(tmp_path), file_logging=False)
        count = len(first.handlers)
        second = setup_logger("kraftpack-test-dup", log_dir=str(tmp_path), file_logging=False)

        assert first is second
        assert len(second.handlers) == count


class TestGetLogger:
    """Tests for get_logger namespacing."""

    def test_namespaced(self):
        assert get_logger("packmanager.registry").name == "kraftpack.packmanager.registry"

    def test_already_namespaced(self):
        assert get_logger("kraftpack").name == "kraftpack"
        assert get_logger("kraftpack.cli").name == "kraftpack.cli"
