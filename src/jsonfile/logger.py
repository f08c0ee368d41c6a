"""
Logger Primitive

Structured JSON-line logging with levels and context for the jsonfile package.

Interface:
- debug(message: str, context: dict = {}) → None
- info(message: str, context: dict = {}) → None
- warning(message: str, context: dict = {}) → None
- error(message: str, context: dict = {}) → None
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class Logger:
    """Structured logger with ISO 8601 timestamps."""

    def __init__(self, output_file: Optional[str] = None, level: str = "info"):
        """
        Initialize logger.

        Args:
            output_file: Path to log file. If None, logs to stdout.
            level: Minimum level to emit (debug, info, warning, error)

        Raises:
            ValueError: If level is not a known level name
        """
        if level.lower() not in LEVELS:
            raise ValueError(f"Unknown log level '{level}' (expected one of {sorted(LEVELS)})")

        self.output_file = output_file
        self.level = level.lower()
        self._file_handle = None
        self._configure_structlog()

    def _configure_structlog(self):
        """Build a structlog logger bound to stdout or the output file."""
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ]

        if self.output_file:
            log_path = Path(self.output_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(self.output_file, "a", encoding="utf-8")
            target = self._file_handle
        else:
            target = sys.stdout

        # wrap_logger keeps each Logger's sink and level independent of the
        # global structlog configuration
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=target),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(LEVELS[self.level]),
            context_class=dict,
        )

    def _normalize_context(self, context: Optional[dict]) -> dict:
        """Normalize context parameter, returning empty dict if None."""
        return context if context is not None else {}

    def debug(self, message: str, context: Optional[dict] = None) -> None:
        """Log DEBUG level message."""
        self._logger.debug(message, **self._normalize_context(context))

    def info(self, message: str, context: Optional[dict] = None) -> None:
        """Log INFO level message."""
        self._logger.info(message, **self._normalize_context(context))

    def warning(self, message: str, context: Optional[dict] = None) -> None:
        """Log WARNING level message."""
        self._logger.warning(message, **self._normalize_context(context))

    def error(self, message: str, context: Optional[dict] = None) -> None:
        """Log ERROR level message."""
        self._logger.error(message, **self._normalize_context(context))

    def close(self) -> None:
        """Close file handle if open."""
        if self._file_handle is not None:
            self._file_handle.close()
            self._file_handle = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensures file handle is closed."""
        self.close()
        return False
