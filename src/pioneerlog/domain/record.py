from __future__ import annotations

"""
Log Record Data Model.

A LogRecord is the immutable unit handed to every handler. Its timestamp is
captured when the record is built, so delayed emission still reports the
original instant.
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Tuple

from pioneerlog.domain.levels import Severity


def _utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass(frozen=True)
class LogRecord:
    """
    One log event.

    Attributes:
        msg: Rendered display message.
        args: Extra positional arguments passed with the call, kept opaque.
        level: Severity of the event.
        logger_name: Name of the originating logger.
        datetime: UTC instant captured at construction.
    """
    msg: str
    level: Severity
    logger_name: str
    args: Tuple[Any, ...] = ()
    datetime: dt.datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        # Freeze caller-supplied sequences
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def level_name(self) -> str:
        """Canonical name of the record's level."""
        return self.level.name

    @property
    def timestamp(self) -> str:
        """ISO-8601 rendering with millisecond precision and a Z suffix."""
        stamp = self.datetime.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds")
        return stamp.replace("+00:00", "Z")
