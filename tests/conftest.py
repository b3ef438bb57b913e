from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolated logger managers so tests never share registered handlers.
3. Helpers for building records and inspecting rotated files.
"""

import os
import sys
from pathlib import Path
from typing import Generator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from pioneerlog.core.manager import LoggerManager, set_default_manager  # noqa: E402
from pioneerlog.domain.levels import Severity  # noqa: E402
from pioneerlog.domain.record import LogRecord  # noqa: E402
from pioneerlog.handlers.base import BaseHandler  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def manager() -> Generator[LoggerManager, None, None]:
    """
    Provide a private LoggerManager whose handlers are destroyed afterwards.

    Yields:
        LoggerManager: Empty registry.
    """
    mgr = LoggerManager()
    yield mgr
    mgr.shutdown()


@pytest.fixture
def default_manager() -> Generator[LoggerManager, None, None]:
    """
    Install a fresh process-wide manager for the duration of a test.

    Yields:
        LoggerManager: The temporary default manager.
    """
    mgr = LoggerManager()
    previous = set_default_manager(mgr)
    yield mgr
    mgr.shutdown()
    set_default_manager(previous)


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Primary log file location inside the test's temporary directory."""
    return tmp_path / "app.log"


class RecordingHandler(BaseHandler):
    """
    In-memory handler capturing every emitted line.

    Attributes:
        lines: Emitted (message, level) pairs in arrival order.
    """

    def __init__(self, level=Severity.NOTSET, formatter=None, sink: List[str] = None) -> None:
        super().__init__(level, formatter)
        self.lines: List[tuple] = []
        self.records: List[LogRecord] = []
        self.sink = sink
        self.destroy_calls = 0

    def handle(self, record: LogRecord) -> None:
        self.records.append(record)
        super().handle(record)

    def emit(self, message: str, level: Severity) -> None:
        self.lines.append((message, level))
        if self.sink is not None:
            self.sink.append(message)

    def destroy(self) -> None:
        self.destroy_calls += 1
        super().destroy()


@pytest.fixture
def recording_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def handler_factory():
    """Return the RecordingHandler class for tests needing several instances."""
    return RecordingHandler


def make_record(msg: str = "message", level: Severity = Severity.INFO, name: str = "test") -> LogRecord:
    return LogRecord(msg=msg, level=level, logger_name=name)


@pytest.fixture
def record_factory():
    return make_record
