"""Tests for tally.logging_setup module."""

from __future__ import annotations

import logging
from pathlib import Path

from tally.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


class TestConsoleNoiseFilter:
    """Tests for _ConsoleNoiseFilter."""

    def test_tally_warnings_pass(self) -> None:
        """Test tally warnings reach the console."""
        assert _ConsoleNoiseFilter().filter(_record("tally.records", logging.WARNING))

    def test_tally_info_blocked(self) -> None:
        """Test routine tally logs stay off the console."""
        assert not _ConsoleNoiseFilter().filter(_record("tally.storage", logging.INFO))

    def test_third_party_needs_error(self) -> None:
        """Test third-party warnings are dropped, errors kept."""
        f = _ConsoleNoiseFilter()
        assert not f.filter(_record("urllib3", logging.WARNING))
        assert f.filter(_record("urllib3", logging.ERROR))


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_writes_log_file(self, temp_project: Path) -> None:
        """Test log file receives records at the configured level."""
        log_file = temp_project / "logs" / "tally.log"
        setup_logging(level="DEBUG", log_file=log_file)
        logging.getLogger("tally.test").debug("hello from the test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from the test" in log_file.read_text()

    def test_no_file(self) -> None:
        """Test console-only setup."""
        setup_logging(log_file=None)
        root = logging.getLogger()
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)

    def test_no_duplicate_handlers(self, temp_project: Path) -> None:
        """Test calling twice does not stack handlers."""
        setup_logging(log_file=temp_project / "a.log")
        setup_logging(log_file=temp_project / "a.log")
        assert len(logging.getLogger().handlers) == 2
