"""
Log Sink Protocol.

Defines the leveled logging contract a Pipeline writes to. Flow element
errors and set-header diagnostics go through this channel, separate from
the module loggers used for developer diagnostics.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Levels are ordered; a sink drops anything below its minimum level
    - An unset minimum level means "error"
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, Union, runtime_checkable


class LogLevel(IntEnum):
    """Ordered log levels understood by every sink."""

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    @classmethod
    def parse(cls, level: Union[str, "LogLevel", None]) -> "LogLevel":
        """
        Resolve a level name to a LogLevel.

        Args:
            level: Level name (case-insensitive), LogLevel, or None

        Returns:
            The matching LogLevel; None resolves to ERROR

        Raises:
            ValueError: If the name is not a known level
        """
        if level is None:
            return cls.ERROR
        if isinstance(level, LogLevel):
            return level

        name = str(level).strip().lower()
        if name == "info":
            name = "information"
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown log level '{level}'. "
                f"Valid levels: {[lvl.label for lvl in cls]}"
            ) from None

    @property
    def label(self) -> str:
        """Lowercase level name as written in log records."""
        return self.name.lower()


@runtime_checkable
class LogSinkProtocol(Protocol):
    """Abstract interface for pipeline log sinks."""

    def log(self, level: Union[str, LogLevel], message: str) -> None:
        """
        Log a message if the level passes the sink's minimum level.

        Args:
            level: One of trace, debug, information, warning, error, critical
            message: Text to log
        """
        ...

    def is_enabled(self, level: Union[str, LogLevel, None]) -> bool:
        """Check whether a message at this level would be logged."""
        ...


LevelLike = Optional[Union[str, LogLevel]]
