"""
Log Sink Adapters.

Concrete implementations of LogSinkProtocol:
    - LogSink: Base sink with the level gate; discards records
    - StdlibLogSink: Forwards records to the stdlib logging module
    - MemoryLogSink: Keeps records in a list (tests, diagnostics)
    - ConsoleLogSink: Prints records to stdout
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from evidence_pipeline.interfaces.log_sink import LevelLike, LogLevel

# Stdlib has no TRACE level; sit it just below DEBUG
TRACE_LEVEL_NUM = logging.DEBUG - 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")

_STDLIB_LEVELS = {
    LogLevel.TRACE: TRACE_LEVEL_NUM,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFORMATION: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}

LogRecord = Dict[str, Any]


class LogSink:
    """
    Base log sink with a minimum-level gate.

    Records at or above the minimum level are built as a dict with
    ``time``, ``level`` and ``message`` and handed to ``_log_internal``.
    The base implementation discards them, which makes a bare LogSink
    the pipeline's no-op default.
    """

    def __init__(
        self,
        level: LevelLike = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize sink.

        Args:
            level: Minimum level to log (default: error)
            settings: Free-form settings for specific sinks
        """
        self.settings: Dict[str, Any] = dict(settings or {})
        self._min_level = LogLevel.parse(level)

    @property
    def min_level(self) -> LogLevel:
        """Minimum level this sink logs."""
        return self._min_level

    def is_enabled(self, level: LevelLike) -> bool:
        """Check whether a message at this level passes the gate."""
        return LogLevel.parse(level) >= self._min_level

    def log(self, level: LevelLike, message: str) -> None:
        """
        Log a message if its level passes the gate.

        Args:
            level: Level name or LogLevel
            message: Text to log
        """
        parsed = LogLevel.parse(level)
        if parsed < self._min_level:
            return

        record = {
            "time": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "level": parsed.label,
            "message": message,
        }
        self._log_internal(record)

    def _log_internal(self, record: LogRecord) -> None:
        """Write a record. Overridden by concrete sinks."""


class StdlibLogSink(LogSink):
    """Forwards pipeline log records to a stdlib logger."""

    def __init__(
        self,
        level: LevelLike = None,
        logger_name: str = "evidence_pipeline",
        settings: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(level, settings)
        self._logger = logging.getLogger(logger_name)

    def _log_internal(self, record: LogRecord) -> None:
        level = LogLevel.parse(record["level"])
        self._logger.log(_STDLIB_LEVELS[level], record["message"])


class MemoryLogSink(LogSink):
    """Keeps every record that passes the gate in ``records``."""

    def __init__(
        self,
        level: LevelLike = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(level, settings)
        self.records: List[LogRecord] = []

    def _log_internal(self, record: LogRecord) -> None:
        self.records.append(record)

    def messages(self, level: LevelLike = None) -> List[str]:
        """
        Get logged messages, optionally only those at one level.

        Args:
            level: Restrict to this level (default: all)

        Returns:
            Messages in logging order
        """
        if level is None:
            return [r["message"] for r in self.records]
        label = LogLevel.parse(level).label
        return [r["message"] for r in self.records if r["level"] == label]

    def clear(self) -> None:
        """Drop all stored records."""
        self.records.clear()


class ConsoleLogSink(LogSink):
    """Simple console-based log sink."""

    def _log_internal(self, record: LogRecord) -> None:
        print(f"[{record['time']}] [{record['level']:11}] {record['message']}")
