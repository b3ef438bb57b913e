from __future__ import annotations

"""
Handler Contract.

A handler owns a severity threshold and a formatter, and delivers formatted
lines to a sink. Concrete sinks only implement emit(); gating, formatting and
serialization of concurrent calls live here.
"""

import threading
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Callable, Optional, Type

from pioneerlog.domain.levels import LevelLike, Severity, resolve_level
from pioneerlog.domain.record import LogRecord

Formatter = Callable[[LogRecord], str]


def default_formatter(record: LogRecord) -> str:
    """
    Render a record as "[timestamp][LEVEL][logger] message".

    Args:
        record: The record to format.

    Returns:
        str: Single formatted line without terminator.
    """
    return f"[{record.timestamp}][{record.level_name}][{record.logger_name}] {record.msg}"


class BaseHandler(ABC):
    """
    Abstract sink for log records.

    Attributes:
        formatter: Callable turning a record into the emitted line.
    """

    def __init__(self, level: LevelLike = Severity.NOTSET, formatter: Optional[Formatter] = None) -> None:
        self._level = resolve_level(level)
        self.formatter: Formatter = formatter or default_formatter
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # THRESHOLD
    # -------------------------------------------------------------------------

    @property
    def level(self) -> Severity:
        return self._level

    @level.setter
    def level(self, value: LevelLike) -> None:
        self._level = resolve_level(value)

    @property
    def level_name(self) -> str:
        return self._level.name

    @level_name.setter
    def level_name(self, value: LevelLike) -> None:
        self._level = resolve_level(value)

    # -------------------------------------------------------------------------
    # DISPATCH
    # -------------------------------------------------------------------------

    def handle(self, record: LogRecord) -> None:
        """
        Format and emit a record unless it falls below the threshold.

        Args:
            record: Record produced by a logger.
        """
        if record.level < self._level:
            return
        with self._lock:
            self.emit(self.format(record), record.level)

    def format(self, record: LogRecord) -> str:
        return self.formatter(record)

    @abstractmethod
    def emit(self, message: str, level: Severity) -> None:
        """
        Write an already formatted line to the sink.

        Args:
            message: Formatted line, without line terminator.
            level: Severity of the originating record.
        """

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def flush(self) -> None:
        """Writes are synchronous; nothing is buffered here."""

    def destroy(self) -> None:
        """Release sink resources. Safe to call more than once."""
        self.flush()

    def __enter__(self) -> "BaseHandler":
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} level={self.level_name}>"
