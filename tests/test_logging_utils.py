"""Tests for the logging utilities module."""

import logging
import sys
import time
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from cliptranslate.logging_utils import ConsoleFormatter, FileFormatter, setup_logging


def _record(name: str = "cliptranslate.test", msg: str = "Test", lineno: int = 1) -> logging.LogRecord:
    record = logging.LogRecord(name=name, level=logging.INFO, pathname="test.py", lineno=lineno, msg=msg, args=(), exc_info=None)
    record.created = 1234567890.123456
    return record


class TestFormatters(unittest.TestCase):
    """Test suite for the console and file formatters."""

    def test_console_formatter_includes_version(self) -> None:
        """1. Console: Lines carry the application name and version."""
        formatter = ConsoleFormatter("2.0.0")
        formatted = formatter.format(_record(msg="Translating"))

        assert formatter.converter == time.gmtime
        assert "ClipTranslate - 2.0.0" in formatted
        assert formatted.endswith("| INFO | Translating")

    def test_time_has_microseconds_and_utc_suffix(self) -> None:
        """2. Time Format: Six-digit microseconds followed by 'Z'."""
        formatted_time = ConsoleFormatter("1.0.0").formatTime(_record(), "%Y-%m-%dT%H:%M:%S")
        assert formatted_time == "2009-02-13T23:31:30.123456Z"

    def test_file_formatter_is_detailed(self) -> None:
        """3. File: Lines carry the logger name, function and line number."""
        record = _record(name="cliptranslate.aggregator", msg="Detailed log", lineno=123)
        record.funcName = "translate"
        formatted = FileFormatter().format(record)

        assert "cliptranslate.aggregator" in formatted
        assert "translate" in formatted
        assert "123" in formatted
        assert "Detailed log" in formatted


class TestSetupLogging(unittest.TestCase):
    """Test suite for setup_logging."""

    def tearDown(self) -> None:
        """Clean up logging state after each test."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)

    def test_default_mode(self) -> None:
        """1. Default Mode: One INFO console handler on stderr."""
        setup_logging("1.0.0")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert isinstance(handler.formatter, ConsoleFormatter)

    def test_debug_mode_writes_log_file(self) -> None:
        """2. Debug Mode: DEBUG level and a debug.log in the given directory."""
        with TemporaryDirectory() as tmp:
            log_dir = Path(tmp) / "logs"
            setup_logging("1.0.0", debug=True, log_dir=log_dir)
            logging.getLogger("cliptranslate.test").debug("hello from the test")

            root_logger = logging.getLogger()
            file_handlers = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
            assert root_logger.level == logging.DEBUG
            assert len(file_handlers) == 1
            assert isinstance(file_handlers[0].formatter, FileFormatter)
            file_handlers[0].flush()
            assert "hello from the test" in (log_dir / "debug.log").read_text(encoding="utf-8")
            self.tearDown()

    def test_debug_file_failure_keeps_console(self) -> None:
        """3. File Failure: Console logging continues when the log file cannot be created."""
        with patch("cliptranslate.logging_utils.paths.get_log_dir", side_effect=OSError("Cannot create directory")):
            setup_logging("1.0.0", debug=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_repeated_calls_replace_handlers(self) -> None:
        """4. Idempotency: Existing handlers are replaced, not added to."""
        dummy_handler = logging.StreamHandler()
        logging.getLogger().addHandler(dummy_handler)

        setup_logging("1.0.0")
        setup_logging("1.0.0")

        handlers = logging.getLogger().handlers
        assert dummy_handler not in handlers
        assert len(handlers) == 1

    def test_third_party_loggers_are_quieted(self) -> None:
        """5. Noise: asyncio and HTTP library loggers stay at WARNING in debug mode."""
        with TemporaryDirectory() as tmp:
            setup_logging("1.0.0", debug=True, log_dir=Path(tmp))
            assert logging.getLogger("asyncio").level == logging.WARNING
            assert logging.getLogger("urllib3").level == logging.WARNING
            self.tearDown()


if __name__ == "__main__":
    unittest.main()
