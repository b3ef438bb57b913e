from __future__ import annotations

from .errors import (
    BackupCollision,
    ConfigurationError,
    InvalidConfiguration,
    MissingHandler,
    PioneerLogError,
    UnknownLevelName,
    UnknownLevelRank,
)
from .levels import LevelLike, Severity, name_of, rank_of, resolve_level
from .messages import DeferredMessage, LiteralMessage, as_message, lazy, render_value
from .record import LogRecord

__all__ = [
    "Severity",
    "LevelLike",
    "rank_of",
    "name_of",
    "resolve_level",
    "LogRecord",
    "LiteralMessage",
    "DeferredMessage",
    "as_message",
    "lazy",
    "render_value",
    "PioneerLogError",
    "UnknownLevelName",
    "UnknownLevelRank",
    "InvalidConfiguration",
    "BackupCollision",
    "MissingHandler",
    "ConfigurationError",
]
