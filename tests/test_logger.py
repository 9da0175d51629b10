"""Tests for logging configuration."""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from certlayout.utils.logger import configure_logging, get_logger


class TestLogger:
    """Test suite for logger helpers."""

    def test_get_logger(self):
        assert get_logger("certlayout.engine").name == "certlayout.engine"

    def test_get_logger_rejects_empty_name(self):
        with pytest.raises(ValueError):
            get_logger("")

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging("LOUD")

    def test_rich_handler(self):
        console = Console(file=io.StringIO(), width=120)
        logger = configure_logging("DEBUG", console=console)

        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0], RichHandler)

        get_logger("certlayout.engine.test").info("planning summary")
        assert "planning summary" in console.file.getvalue()

    def test_plain_handler(self):
        logger = configure_logging("warning", rich_output=False)

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RichHandler)
        assert logger.level == logging.WARNING

    def test_reconfiguring_replaces_handlers(self):
        configure_logging("INFO", rich_output=False)
        logger = configure_logging("INFO", rich_output=False)

        assert len(logger.handlers) == 1
