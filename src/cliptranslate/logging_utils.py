"""Logging setup for the ClipTranslate application."""
# src/cliptranslate/logging_utils.py

import logging
import sys
import time
from logging import FileHandler
from pathlib import Path

from . import paths


class _UTCFormatter(logging.Formatter):
    """A formatter that renders timestamps in UTC with microseconds and a 'Z' suffix."""

    converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


class ConsoleFormatter(_UTCFormatter):
    """Short, user-facing log lines."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The ClipTranslate version, shown on every line.

        """
        super().__init__(
            fmt=f"%(asctime)s | ClipTranslate - {version} | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


class FileFormatter(_UTCFormatter):
    """A detailed formatter for the debug log file."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__(
            fmt="%(asctime)s | %(name)-32s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


def setup_logging(version: str, *, debug: bool = False, log_dir: Path | None = None) -> None:
    """
    Configure the root logger.

    Console output goes to stderr so that notifications printed on stdout stay
    readable. INFO by default, DEBUG when `debug` is set. In debug mode a
    detailed `debug.log` is also written to `log_dir` (the ClipTranslate log
    directory by default).

    Args:
        version: The application version, included in console logs.
        debug: If True, enables the debug log file and DEBUG console output.
        log_dir: Where to write `debug.log`.

    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    level = logging.DEBUG if debug else logging.INFO
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)

    # Third-party loggers are chatty at DEBUG
    for noisy in ("asyncio", "chardet", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if not debug:
        return

    try:
        target_dir = log_dir or paths.get_log_dir()
        paths.ensure_dir_exists(target_dir)
        log_file_path = target_dir / "debug.log"

        file_handler = FileHandler(log_file_path, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(FileFormatter())
        root_logger.addHandler(file_handler)

        root_logger.info("Debug mode enabled. Detailed logs will be written to %s", log_file_path)
    except OSError:
        root_logger.exception("Failed to create debug log file. Continuing with console logging only.")
